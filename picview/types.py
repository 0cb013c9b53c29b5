"""Core data types for PicView."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class ViewParams:
    """View transformation parameters (scale and top-left offset)."""
    scale: float = 1.0
    offx: float = 0.0
    offy: float = 0.0

    def copy(self) -> ViewParams:
        """Create a copy of this ViewParams."""
        return ViewParams(self.scale, self.offx, self.offy)


@dataclass
class TextureInfo:
    """Information about a loaded texture."""
    tex: Any  # rl.Texture2D - using Any to avoid raylib import
    w: int
    h: int
    path: str = ""


@dataclass
class LoadResult:
    """Outcome of loading a path into the directory browser."""
    path: str
    index: int
    count: int

    @property
    def position(self) -> int:
        """1-based position for display."""
        return self.index + 1


@dataclass
class DeleteResult:
    """Outcome of deleting the current image."""
    path: str
    companion: Optional[str]
    index: int   # New current index, -1 if the list is now empty
    count: int


@dataclass
class RenameResult:
    """Outcome of renaming the current image."""
    old_path: str
    new_path: str
    old_companion: Optional[str] = None
    new_companion: Optional[str] = None
