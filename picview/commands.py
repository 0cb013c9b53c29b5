"""Command Pattern for input handling.

Commands encapsulate actions that can be triggered by various inputs.
Each command has an execute() method and optional can_execute() for guards.
State is only changed through DirectoryBrowser / ViewState methods;
recoverable errors are turned into on-screen messages here.
"""

from __future__ import annotations
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, List, Optional, Sequence, Tuple

if TYPE_CHECKING:
    from .state import AppState

from .config import ZOOM_STEP_KEYS, ZOOM_STEP_WHEEL
from .dialogs import ask_open_path
from .display import window_title_for
from .errors import PicViewError
from .image_utils import is_supported_image
from .logging import log


class Command(ABC):
    """Base class for all commands."""

    @abstractmethod
    def execute(self, state: "AppState") -> bool:
        """Execute the command. Returns True if action was taken."""
        pass

    def can_execute(self, state: "AppState") -> bool:
        """Check if command can be executed. Override for guards."""
        return True


def _report(state: "AppState", tag: str, err: PicViewError) -> None:
    log(f"[CMD][{tag}][ERR] {err}")
    state.ui.show_error(str(err))


# ═══════════════════════════════════════════════════════════════════════════
# Navigation Commands
# ═══════════════════════════════════════════════════════════════════════════

class NavigateNext(Command):
    """Navigate to next image (wraps around)."""

    def can_execute(self, state: "AppState") -> bool:
        return state.browser.count > 0

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        old = state.browser.index
        state.browser.next()
        log(f"[CMD] NavigateNext: {old} -> {state.browser.index}")
        return True


class NavigatePrev(Command):
    """Navigate to previous image (wraps around)."""

    def can_execute(self, state: "AppState") -> bool:
        return state.browser.count > 0

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        old = state.browser.index
        state.browser.previous()
        log(f"[CMD] NavigatePrev: {old} -> {state.browser.index}")
        return True


class JumpFirst(Command):
    """Jump to the first image."""

    def can_execute(self, state: "AppState") -> bool:
        return state.browser.count > 0

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        state.browser.jump_first()
        log("[CMD] JumpFirst")
        return True


class JumpLast(Command):
    """Jump to the last image."""

    def can_execute(self, state: "AppState") -> bool:
        return state.browser.count > 0

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        state.browser.jump_last()
        log("[CMD] JumpLast")
        return True


# ═══════════════════════════════════════════════════════════════════════════
# Zoom Commands
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class ZoomIn(Command):
    """Zoom in by a factor around an anchor (viewport center if None)."""
    factor: float = ZOOM_STEP_KEYS
    anchor: Optional[Tuple[float, float]] = None

    def can_execute(self, state: "AppState") -> bool:
        return state.view.has_image

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        changed = state.view.zoom_by(self.factor, self.anchor)
        log(f"[CMD] ZoomIn: scale={state.view.zoom:.3f} changed={changed}")
        return changed


@dataclass
class ZoomOut(Command):
    """Zoom out by a factor around an anchor (viewport center if None)."""
    factor: float = ZOOM_STEP_KEYS
    anchor: Optional[Tuple[float, float]] = None

    def can_execute(self, state: "AppState") -> bool:
        return state.view.has_image

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        changed = state.view.zoom_by(1.0 / self.factor, self.anchor)
        log(f"[CMD] ZoomOut: scale={state.view.zoom:.3f} changed={changed}")
        return changed


@dataclass
class WheelZoom(Command):
    """Zoom with mouse wheel toward the cursor."""
    delta: float  # Positive = zoom in, negative = zoom out
    anchor: Tuple[float, float] = (0.0, 0.0)
    step: float = ZOOM_STEP_WHEEL

    def can_execute(self, state: "AppState") -> bool:
        return state.view.has_image and self.delta != 0

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        factor = self.step if self.delta > 0 else 1.0 / self.step
        return state.view.zoom_by(factor, self.anchor)


class ActualSize(Command):
    """Show the image at 100%, centered."""

    def can_execute(self, state: "AppState") -> bool:
        return state.view.has_image

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        log("[CMD] ActualSize")
        return state.view.actual_size()


class FitToWindow(Command):
    """Fit the image to the window."""

    def can_execute(self, state: "AppState") -> bool:
        return state.view.has_image

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        log("[CMD] FitToWindow")
        return state.view.fit_to_window()


# ═══════════════════════════════════════════════════════════════════════════
# Pan Commands
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class StartPan(Command):
    """Start panning operation."""
    mouse_x: float
    mouse_y: float

    def can_execute(self, state: "AppState") -> bool:
        return state.view.has_image and not state.input.is_panning

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        state.input.start_pan(self.mouse_x, self.mouse_y)
        log(f"[CMD] StartPan: pos=({self.mouse_x:.0f}, {self.mouse_y:.0f})")
        return True


@dataclass
class UpdatePan(Command):
    """Update pan position during drag."""
    mouse_x: float
    mouse_y: float

    def can_execute(self, state: "AppState") -> bool:
        return state.input.is_panning

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        dx, dy = state.input.pan_delta(self.mouse_x, self.mouse_y)
        if dx == 0 and dy == 0:
            return False
        return state.view.pan(dx, dy)


class EndPan(Command):
    """End panning operation."""

    def can_execute(self, state: "AppState") -> bool:
        return state.input.is_panning

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        state.input.end_pan()
        log("[CMD] EndPan")
        return True


# ═══════════════════════════════════════════════════════════════════════════
# Layout
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class ResizeViewport(Command):
    """Viewport size changed (window resize, first layout)."""
    width: float
    height: float

    def execute(self, state: "AppState") -> bool:
        state.view.set_viewport(self.width, self.height)
        log(f"[CMD] ResizeViewport: {self.width:.0f}x{self.height:.0f}")
        return True


# ═══════════════════════════════════════════════════════════════════════════
# Loading Commands
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class OpenPath(Command):
    """Load a file and its directory."""
    path: str

    def execute(self, state: "AppState") -> bool:
        try:
            result = state.browser.load(self.path)
        except PicViewError as e:
            _report(state, "OpenPath", e)
            return False
        # Reopening what is already on screen does not reload, so refit here
        if result.path == state.displayed_path:
            state.view.fit_to_window()
        log(f"[CMD] OpenPath: {result.position}/{result.count} {os.path.basename(result.path)}")
        return True


@dataclass
class DropFiles(Command):
    """Files dropped onto the window; the first supported image is opened."""
    paths: Sequence[str]

    def first_image(self, state: "AppState") -> Optional[str]:
        exts = state.browser.extensions
        return next((p for p in self.paths if is_supported_image(p, exts)), None)

    def can_execute(self, state: "AppState") -> bool:
        return self.first_image(state) is not None

    def execute(self, state: "AppState") -> bool:
        target = self.first_image(state)
        if target is None:
            log(f"[CMD] DropFiles: no image among {len(self.paths)} file(s)")
            return False
        return OpenPath(target).execute(state)


@dataclass
class OpenFileDialog(Command):
    """Ask the user for a file and open it."""
    chooser: Callable[[Optional[str]], Optional[str]] = ask_open_path

    def execute(self, state: "AppState") -> bool:
        current = state.browser.current_path
        initial_dir = os.path.dirname(current) if current else None
        path = self.chooser(initial_dir)
        if not path:
            return False
        return OpenPath(path).execute(state)


# ═══════════════════════════════════════════════════════════════════════════
# File Operation Commands
# ═══════════════════════════════════════════════════════════════════════════

class DeleteImage(Command):
    """Send the current image (and companion) to the trash."""

    def can_execute(self, state: "AppState") -> bool:
        return state.browser.has_selection

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        try:
            result = state.browser.delete_current()
        except PicViewError as e:
            _report(state, "DeleteImage", e)
            return False
        if result is None:
            return False
        log(f"[CMD] DeleteImage: {os.path.basename(result.path)} remaining={result.count}")
        return True


class ShowRenamePrompt(Command):
    """Open the rename prompt for the current image."""

    def can_execute(self, state: "AppState") -> bool:
        return state.browser.has_selection and not state.ui.rename_prompt.visible

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        name = os.path.splitext(os.path.basename(state.browser.current_path))[0]
        state.ui.rename_prompt.show(name)
        state.input.end_pan()
        log(f"[CMD] ShowRenamePrompt: {name}")
        return True


@dataclass
class RenameInput(Command):
    """Text typed into the rename prompt."""
    text: str

    def can_execute(self, state: "AppState") -> bool:
        return state.ui.rename_prompt.visible and bool(self.text)

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        state.ui.rename_prompt.append(self.text)
        return True


class RenameBackspace(Command):
    """Delete the last character in the rename prompt."""

    def can_execute(self, state: "AppState") -> bool:
        return state.ui.rename_prompt.visible

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        state.ui.rename_prompt.backspace()
        return True


class CancelRename(Command):
    """Close the rename prompt without renaming."""

    def can_execute(self, state: "AppState") -> bool:
        return state.ui.rename_prompt.visible

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        state.ui.rename_prompt.hide()
        log("[CMD] CancelRename")
        return True


@dataclass
class SubmitRename(Command):
    """Rename the current image to the prompt value (or an explicit name)."""
    new_name: Optional[str] = None

    def can_execute(self, state: "AppState") -> bool:
        return state.browser.has_selection and (
            self.new_name is not None or state.ui.rename_prompt.visible)

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        prompt = state.ui.rename_prompt
        name = self.new_name if self.new_name is not None else prompt.edit_value

        # Blank input is treated like cancel
        if not name.strip():
            prompt.hide()
            return False

        try:
            result = state.browser.rename_current(name)
        except PicViewError as e:
            _report(state, "SubmitRename", e)
            return False
        finally:
            prompt.hide()

        if result is None:
            return False

        # Same bitmap, new path: keep the texture, retarget the display
        if state.texture is not None and state.displayed_path == result.old_path:
            state.texture.path = result.new_path
        if state.displayed_path == result.old_path:
            state.displayed_path = result.new_path
            state.window.title = window_title_for(result.new_path)
        log(f"[CMD] SubmitRename: {os.path.basename(result.old_path)} -> "
            f"{os.path.basename(result.new_path)}")
        return True


# ═══════════════════════════════════════════════════════════════════════════
# Window / App Control Commands (handled by Application)
# ═══════════════════════════════════════════════════════════════════════════

class ToggleMaximize(Command):
    """Toggle maximized window state."""

    def execute(self, state: "AppState") -> bool:
        state.window.maximized = not state.window.maximized
        log(f"[CMD] ToggleMaximize: now={state.window.maximized}")
        return True


class CloseApp(Command):
    """Close the application."""

    def execute(self, state: "AppState") -> bool:
        log("[CMD] CloseApp")
        return True


# ═══════════════════════════════════════════════════════════════════════════
# Command Queue
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class CommandQueue:
    """Executes commands and keeps a bounded history of those that acted."""
    max_history: int = 100
    _history: List[Command] = field(default_factory=list)

    def execute(self, command: Command, state: "AppState") -> bool:
        """Execute a command and track it if it took effect."""
        if not command.can_execute(state):
            return False

        result = command.execute(state)
        if result and self.max_history > 0:
            self._history.append(command)
            if len(self._history) > self.max_history:
                self._history.pop(0)

        return result

    @property
    def history(self) -> List[Command]:
        """Get command history."""
        return self._history.copy()

    def clear_history(self) -> None:
        """Clear command history."""
        self._history.clear()
