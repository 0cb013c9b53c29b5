"""Application - main loop orchestrator.

The Application class provides a clean, modular main loop that coordinates:
- Input handling (via InputHandler)
- Command execution
- Display sync (decode + upload of the selected image)
- Rendering (via Renderer)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional
import os
import sys
import traceback

from .state import AppState
from .renderer import Renderer
from .input_handler import InputHandler
from .commands import Command, CommandQueue, CloseApp, ToggleMaximize, OpenPath
from .display import sync_display
from .image_utils import list_images
from .rl_compat import (
    rl, RL_VERSION,
    init_window, set_window_title, texture_from_pil, unload_texture,
)
from .config import (
    TARGET_FPS, WINDOW_TITLE, WINDOW_WIDTH, WINDOW_HEIGHT,
    WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT,
)
from .logging import log, log_error, increment_frame, get_frame


@dataclass
class Application:
    """
    Main application orchestrator.

    Provides a clean separation between:
    - Input → Commands
    - Commands → State changes
    - State → Rendering

    Usage:
        app = Application()
        app.initialize(start_path)
        app.run()
    """

    state: AppState = field(default_factory=AppState)
    renderer: Renderer = field(default_factory=Renderer)
    input_handler: InputHandler = field(default_factory=InputHandler)
    queue: CommandQueue = field(default_factory=CommandQueue)
    running: bool = False
    _applied_title: str = ""

    def initialize(self, start_path: Optional[str] = None) -> bool:
        """
        Create the window and open the start path, if any.

        The viewport size is not known until the first frame polls the
        layout, so the initial fit is deferred until then.
        Returns True if initialization successful.
        """
        log("[INIT] Creating window")
        try:
            rl.SetConfigFlags(rl.FLAG_WINDOW_RESIZABLE | getattr(rl, 'FLAG_MSAA_4X_HINT', 0))
            init_window(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
            rl.SetWindowMinSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)
            # Escape is bound to fit-to-window, not exit
            rl.SetExitKey(0)
            rl.SetTargetFPS(TARGET_FPS)
        except Exception as e:
            log_error(f"[INIT][CRITICAL] Failed to initialize window: {e!r}")
            log_error(f"[INIT][CRITICAL] Traceback:\n{traceback.format_exc()}")
            return False
        log(f"[INIT] RL_VER={RL_VERSION} window={rl.GetScreenWidth()}x{rl.GetScreenHeight()}")

        if start_path:
            self.open_start_path(start_path)
        return True

    def open_start_path(self, start_path: str) -> None:
        """Open a file, or the first image of a directory."""
        path = os.path.abspath(start_path)
        if os.path.isdir(path):
            try:
                images = list_images(path, self.state.browser.extensions)
            except OSError as e:
                log(f"[ARGS][ERR] Cannot list {path}: {e!r}")
                images = []
            if not images:
                log(f"[ARGS] No images found in {path}")
                self.state.ui.show_info(f"No images found in {path}")
                return
            path = images[0]
        self._execute_command(OpenPath(path))

    def run(self) -> None:
        """Run the main loop until the window is closed."""
        self.running = True
        log("[APP] Starting main loop")

        try:
            while self.running:
                self._frame()
        except Exception as e:
            log_error(f"[APP][CRITICAL] Unhandled exception: {e!r}")
            log_error(f"[APP][CRITICAL] Traceback:\n{traceback.format_exc()}")
            raise
        finally:
            self._cleanup()

    def _frame(self) -> None:
        """Execute a single frame."""
        if rl.WindowShouldClose():
            self.running = False
            return

        # 1. Poll input and generate commands
        commands = self.input_handler.poll(self.state)

        # 2. Execute commands
        for cmd in commands:
            self._execute_command(cmd)
            if not self.running:
                return

        # 3. Bring the displayed bitmap in line with the selection
        self._sync_display()

        # 4. Render
        self.renderer.draw_frame(self.state)

        # 5. Frame bookkeeping
        increment_frame()

    def _execute_command(self, cmd: Command) -> None:
        """Execute a single command."""
        if isinstance(cmd, CloseApp):
            cmd.execute(self.state)
            self.running = False
            return

        if isinstance(cmd, ToggleMaximize):
            cmd.execute(self.state)
            if self.state.window.maximized:
                rl.MaximizeWindow()
            else:
                rl.RestoreWindow()
            return

        self.queue.execute(cmd, self.state)

    def _sync_display(self) -> None:
        sync_display(self.state, upload=texture_from_pil, unload=unload_texture)
        if self.state.window.title != self._applied_title:
            set_window_title(self.state.window.title)
            self._applied_title = self.state.window.title

    def _cleanup(self) -> None:
        """Clean up resources."""
        log("[APP] Starting cleanup")

        if self.state.texture is not None:
            try:
                unload_texture(self.state.texture.tex)
            except Exception as e:
                log(f"[APP][ERR] Texture unload failed: {e!r}")
            self.state.texture = None

        try:
            log("[APP] Closing window")
            rl.CloseWindow()
        except Exception as e:
            log(f"[APP][ERR] CloseWindow failed: {e!r}")

        log(f"[APP] Cleanup complete frames={get_frame()}")


def parse_args(argv: List[str]) -> Optional[str]:
    """Return the single optional path argument (extras are ignored)."""
    if not argv:
        return None
    if len(argv) > 1:
        log(f"[ARGS] Ignoring extra arguments: {argv[1:]}")
    return argv[0]


def main(argv: Optional[List[str]] = None) -> int:
    log("[MAIN] Starting application")
    args = sys.argv[1:] if argv is None else argv
    start_path = parse_args(args)
    if start_path:
        log(f"[ARGS] Start path: {start_path}")
    else:
        log("[ARGS] No path provided, starting empty")

    app = Application()
    if not app.initialize(start_path):
        return 1
    app.run()
    return 0
