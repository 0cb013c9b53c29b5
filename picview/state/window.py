"""Window state - screen dimensions and title."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from ..config import STATUS_BAR_HEIGHT, WINDOW_TITLE


@dataclass
class WindowState:
    """Window-related state."""
    screen_w: int = 0
    screen_h: int = 0
    maximized: bool = False
    title: str = WINDOW_TITLE

    @property
    def size(self) -> Tuple[int, int]:
        """Get window size as tuple."""
        return (self.screen_w, self.screen_h)

    @property
    def canvas_size(self) -> Tuple[int, int]:
        """Area available to the image (window minus status bar)."""
        return (self.screen_w, max(0, self.screen_h - STATUS_BAR_HEIGHT))
