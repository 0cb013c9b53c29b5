"""Input Handler - maps raylib input events to commands.

This module bridges the gap between raw raylib input and the command pattern.
It polls input each frame and returns a list of commands to execute.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from .state import AppState

from .rl_compat import rl, get_dropped_files, is_key_pressed_or_repeat
from .commands import (
    Command,
    NavigateNext, NavigatePrev, JumpFirst, JumpLast,
    ZoomIn, ZoomOut, WheelZoom, ActualSize, FitToWindow,
    StartPan, UpdatePan, EndPan,
    ResizeViewport, DropFiles, OpenFileDialog,
    DeleteImage, ShowRenamePrompt, RenameInput, RenameBackspace,
    SubmitRename, CancelRename,
    ToggleMaximize,
)
from .config import (
    KEY_NEXT_IMAGE, KEY_NEXT_IMAGE_ALT, KEY_PREV_IMAGE, KEY_PREV_IMAGE_ALT,
    KEY_FIRST_IMAGE, KEY_LAST_IMAGE,
    KEY_ZOOM_IN, KEY_ZOOM_IN_ALT, KEY_ZOOM_OUT, KEY_ZOOM_OUT_ALT,
    KEY_ACTUAL_SIZE, KEY_ACTUAL_SIZE_ALT, KEY_FIT, KEY_FIT_ALT,
    KEY_OPEN, KEY_DELETE_IMAGE, KEY_RENAME, KEY_MAXIMIZE,
    KEY_ENTER, KEY_KP_ENTER, KEY_ESCAPE, KEY_BACKSPACE,
)


@dataclass
class MouseState:
    """Current mouse state snapshot."""
    x: float = 0.0
    y: float = 0.0
    left_pressed: bool = False
    left_released: bool = False
    left_down: bool = False
    wheel: float = 0.0


def _any_pressed(keys: List[int]) -> bool:
    return any(rl.IsKeyPressed(k) for k in keys)


@dataclass
class InputHandler:
    """Handles input polling and command generation."""

    # Key bindings (can be customized)
    key_next: List[int] = field(default_factory=lambda: [KEY_NEXT_IMAGE, KEY_NEXT_IMAGE_ALT])
    key_prev: List[int] = field(default_factory=lambda: [KEY_PREV_IMAGE, KEY_PREV_IMAGE_ALT])
    key_first: List[int] = field(default_factory=lambda: [KEY_FIRST_IMAGE])
    key_last: List[int] = field(default_factory=lambda: [KEY_LAST_IMAGE])
    key_zoom_in: List[int] = field(default_factory=lambda: [KEY_ZOOM_IN, KEY_ZOOM_IN_ALT])
    key_zoom_out: List[int] = field(default_factory=lambda: [KEY_ZOOM_OUT, KEY_ZOOM_OUT_ALT])
    key_actual_size: List[int] = field(default_factory=lambda: [KEY_ACTUAL_SIZE, KEY_ACTUAL_SIZE_ALT])
    key_fit: List[int] = field(default_factory=lambda: [KEY_FIT, KEY_FIT_ALT])
    key_open: List[int] = field(default_factory=lambda: [KEY_OPEN])
    key_delete: List[int] = field(default_factory=lambda: [KEY_DELETE_IMAGE])
    key_rename: List[int] = field(default_factory=lambda: [KEY_RENAME])
    key_maximize: List[int] = field(default_factory=lambda: [KEY_MAXIMIZE])

    def poll_mouse(self) -> MouseState:
        """Get current mouse state."""
        pos = rl.GetMousePosition()
        return MouseState(
            x=pos.x,
            y=pos.y,
            left_pressed=rl.IsMouseButtonPressed(rl.MOUSE_BUTTON_LEFT),
            left_released=rl.IsMouseButtonReleased(rl.MOUSE_BUTTON_LEFT),
            left_down=rl.IsMouseButtonDown(rl.MOUSE_BUTTON_LEFT),
            wheel=rl.GetMouseWheelMove(),
        )

    def poll_layout(self, state: "AppState") -> List[Command]:
        """Emit ResizeViewport when the window size changed."""
        w, h = rl.GetScreenWidth(), rl.GetScreenHeight()
        if (w, h) == state.window.size:
            return []
        state.window.screen_w, state.window.screen_h = w, h
        cw, ch = state.window.canvas_size
        return [ResizeViewport(width=cw, height=ch)]

    def poll_rename_prompt(self) -> List[Command]:
        """Keyboard input while the rename prompt is open."""
        commands: List[Command] = []

        chars = []
        key = rl.GetCharPressed()
        while key > 0:
            chars.append(chr(key))
            key = rl.GetCharPressed()
        if chars:
            commands.append(RenameInput(text="".join(chars)))

        if is_key_pressed_or_repeat(KEY_BACKSPACE):
            commands.append(RenameBackspace())

        if rl.IsKeyPressed(KEY_ENTER) or rl.IsKeyPressed(KEY_KP_ENTER):
            commands.append(SubmitRename())
        elif rl.IsKeyPressed(KEY_ESCAPE):
            commands.append(CancelRename())
        return commands

    def is_in_canvas(self, state: "AppState", mouse: MouseState) -> bool:
        cw, ch = state.window.canvas_size
        return 0 <= mouse.x < cw and 0 <= mouse.y < ch

    def poll(self, state: "AppState") -> List[Command]:
        """Poll all inputs and return list of commands to execute."""
        commands: List[Command] = self.poll_layout(state)

        # Always drained; ignored while the rename prompt is open
        dropped = get_dropped_files()

        # ─── Rename prompt is modal ──────────────────────────────────────────
        if state.ui.rename_prompt.visible:
            commands.extend(self.poll_rename_prompt())
            return commands

        if dropped:
            commands.append(DropFiles(paths=dropped))

        # ─── Keyboard ────────────────────────────────────────────────────────
        if any(is_key_pressed_or_repeat(k) for k in self.key_next):
            commands.append(NavigateNext())
        elif any(is_key_pressed_or_repeat(k) for k in self.key_prev):
            commands.append(NavigatePrev())

        if _any_pressed(self.key_first):
            commands.append(JumpFirst())
        if _any_pressed(self.key_last):
            commands.append(JumpLast())

        if any(is_key_pressed_or_repeat(k) for k in self.key_zoom_in):
            commands.append(ZoomIn())
        if any(is_key_pressed_or_repeat(k) for k in self.key_zoom_out):
            commands.append(ZoomOut())

        if _any_pressed(self.key_actual_size):
            commands.append(ActualSize())
        if _any_pressed(self.key_fit):
            commands.append(FitToWindow())

        if _any_pressed(self.key_open):
            commands.append(OpenFileDialog())
        if _any_pressed(self.key_delete):
            commands.append(DeleteImage())
        if _any_pressed(self.key_rename):
            commands.append(ShowRenamePrompt())
        if _any_pressed(self.key_maximize):
            commands.append(ToggleMaximize())

        # ─── Mouse ───────────────────────────────────────────────────────────
        mouse = self.poll_mouse()
        in_canvas = self.is_in_canvas(state, mouse)

        if mouse.wheel != 0.0 and in_canvas:
            commands.append(WheelZoom(delta=mouse.wheel, anchor=(mouse.x, mouse.y)))

        if mouse.left_pressed and in_canvas and state.view.has_image:
            commands.append(StartPan(mouse_x=mouse.x, mouse_y=mouse.y))
        elif state.input.is_panning:
            if mouse.left_down:
                commands.append(UpdatePan(mouse_x=mouse.x, mouse_y=mouse.y))
            else:
                commands.append(EndPan())

        return commands
