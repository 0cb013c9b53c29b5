"""Input state - mouse dragging."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass
class InputState:
    """State for input handling."""
    is_panning: bool = False
    last_mouse: Tuple[float, float] = (0.0, 0.0)

    def start_pan(self, mouse_x: float, mouse_y: float) -> None:
        """Start panning operation."""
        self.is_panning = True
        self.last_mouse = (mouse_x, mouse_y)

    def pan_delta(self, mouse_x: float, mouse_y: float) -> Tuple[float, float]:
        """Delta since the previous mouse position; advances the reference point."""
        dx = mouse_x - self.last_mouse[0]
        dy = mouse_y - self.last_mouse[1]
        self.last_mouse = (mouse_x, mouse_y)
        return (dx, dy)

    def end_pan(self) -> bool:
        """End panning operation. Returns True if was panning."""
        was_panning = self.is_panning
        self.is_panning = False
        return was_panning
