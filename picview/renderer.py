"""Renderer - handles all drawing operations.

The Renderer is a pure drawing layer that only reads state and draws to screen.
It does not modify state - all state changes happen in commands.
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .state import AppState

from .rl_compat import (
    rl,
    make_rect as RL_Rect, make_vec2 as RL_V2, make_color as RL_Color,
    draw_text as RL_DrawText, measure_text,
)
from .config import (
    BG_COLOR, STATUS_BG_COLOR, TEXT_COLOR, DIM_TEXT_COLOR, ERROR_COLOR,
    STATUS_BAR_HEIGHT, STATUS_FONT_SIZE, STATUS_PADDING,
    MESSAGE_FONT_SIZE,
    PROMPT_WIDTH, PROMPT_HEIGHT, PROMPT_FONT_SIZE,
)
from .logging import now


@dataclass
class Renderer:
    """
    Handles all drawing operations.

    Usage:
        renderer = Renderer()
        renderer.draw_frame(state)
    """

    def draw_frame(self, state: "AppState") -> None:
        """Draw one complete frame."""
        rl.BeginDrawing()
        try:
            rl.ClearBackground(RL_Color(*BG_COLOR))
            self.draw_image(state)
            self.draw_drop_hint(state)
            self.draw_status_bar(state)
            self.draw_message(state)
            self.draw_rename_prompt(state)
        finally:
            rl.EndDrawing()

    # ═══════════════════════════════════════════════════════════════════════
    # Image
    # ═══════════════════════════════════════════════════════════════════════

    def draw_image(self, state: "AppState") -> None:
        """Draw the current bitmap at the view rectangle, clipped to the canvas."""
        ti = state.texture
        if ti is None or not state.view.has_image:
            return

        canvas_w, canvas_h = state.window.canvas_size
        x, y, w, h = state.view.dest_rect()
        rl.BeginScissorMode(0, 0, canvas_w, canvas_h)
        rl.DrawTexturePro(
            ti.tex,
            RL_Rect(0, 0, ti.w, ti.h),
            RL_Rect(x, y, w, h),
            RL_V2(0, 0), 0.0, RL_Color(255, 255, 255, 255)
        )
        rl.EndScissorMode()

    def draw_drop_hint(self, state: "AppState") -> None:
        """Centered hint when nothing is shown."""
        if state.texture is not None or state.browser.has_selection:
            return
        canvas_w, canvas_h = state.window.canvas_size
        lines = ("Drop an image here", "or press O to open a file")
        y = canvas_h // 2 - 30
        for i, text in enumerate(lines):
            size = 28 if i == 0 else 18
            tw = measure_text(text, size)
            RL_DrawText(text, (canvas_w - tw) // 2, y, size, RL_Color(*DIM_TEXT_COLOR))
            y += size + 12

    # ═══════════════════════════════════════════════════════════════════════
    # Status bar
    # ═══════════════════════════════════════════════════════════════════════

    def draw_status_bar(self, state: "AppState") -> None:
        """File name and counter on the left, info and zoom on the right."""
        sw, sh = state.window.size
        y = sh - STATUS_BAR_HEIGHT
        rl.DrawRectangle(0, y, sw, STATUS_BAR_HEIGHT, RL_Color(*STATUS_BG_COLOR))
        ty = y + (STATUS_BAR_HEIGHT - STATUS_FONT_SIZE) // 2

        path = state.browser.current_path
        if path is None:
            return

        left = f"{os.path.basename(path)}    {state.browser.position} / {state.browser.count}"
        RL_DrawText(left, STATUS_PADDING, ty, STATUS_FONT_SIZE, RL_Color(*TEXT_COLOR))

        parts = [p for p in (state.image_info, self._zoom_label(state)) if p]
        right = "    ".join(parts)
        if right:
            tw = measure_text(right, STATUS_FONT_SIZE)
            RL_DrawText(right, sw - tw - STATUS_PADDING, ty, STATUS_FONT_SIZE,
                        RL_Color(*DIM_TEXT_COLOR))

    @staticmethod
    def _zoom_label(state: "AppState") -> Optional[str]:
        if not state.view.has_image:
            return None
        return f"{state.view.zoom:.0%}"

    # ═══════════════════════════════════════════════════════════════════════
    # Overlays
    # ═══════════════════════════════════════════════════════════════════════

    def draw_message(self, state: "AppState") -> None:
        """Transient message box near the top of the canvas."""
        msg = state.ui.message
        if not msg.is_visible(now()):
            return
        sw = state.window.screen_w
        tw = measure_text(msg.text, MESSAGE_FONT_SIZE)
        box_w = min(sw - 20, tw + 40)
        box_x = (sw - box_w) // 2
        box_y = 20
        box_h = MESSAGE_FONT_SIZE + 20
        rl.DrawRectangle(box_x, box_y, box_w, box_h, RL_Color(0, 0, 0, 200))
        color = ERROR_COLOR if msg.is_error else TEXT_COLOR
        rl.DrawRectangleLines(box_x, box_y, box_w, box_h, RL_Color(*color))
        RL_DrawText(msg.text, box_x + 20, box_y + 10, MESSAGE_FONT_SIZE, RL_Color(*color))

    def draw_rename_prompt(self, state: "AppState") -> None:
        """Modal rename box: title, edit field with caret, key hints."""
        prompt = state.ui.rename_prompt
        if not prompt.visible:
            return

        sw, sh = state.window.size
        rl.DrawRectangle(0, 0, sw, sh, RL_Color(0, 0, 0, 140))

        x = (sw - PROMPT_WIDTH) // 2
        y = (sh - PROMPT_HEIGHT) // 2
        rl.DrawRectangle(x, y, PROMPT_WIDTH, PROMPT_HEIGHT, RL_Color(45, 45, 48, 255))
        rl.DrawRectangleLines(x, y, PROMPT_WIDTH, PROMPT_HEIGHT, RL_Color(90, 90, 90, 255))

        RL_DrawText("Enter new filename:", x + 16, y + 12, 18, RL_Color(*TEXT_COLOR))

        field_x = x + 16
        field_y = y + 42
        field_w = PROMPT_WIDTH - 32
        field_h = PROMPT_FONT_SIZE + 12
        rl.DrawRectangle(field_x, field_y, field_w, field_h, RL_Color(25, 25, 25, 255))
        rl.DrawRectangleLines(field_x, field_y, field_w, field_h, RL_Color(100, 150, 255, 255))

        # Show the tail of long names
        text = prompt.edit_value
        while text and measure_text(text, PROMPT_FONT_SIZE) > field_w - 20:
            text = text[1:]
        RL_DrawText(text, field_x + 6, field_y + 6, PROMPT_FONT_SIZE, RL_Color(*TEXT_COLOR))

        if int(now() * 2) % 2 == 0:
            caret_x = field_x + 8 + measure_text(text, PROMPT_FONT_SIZE)
            rl.DrawRectangle(caret_x, field_y + 5, 2, PROMPT_FONT_SIZE + 2, RL_Color(*TEXT_COLOR))

        hint = "Enter - rename    Esc - cancel"
        RL_DrawText(hint, x + 16, y + PROMPT_HEIGHT - 26, 14, RL_Color(*DIM_TEXT_COLOR))
