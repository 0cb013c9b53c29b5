"""Pure math utilities - no external dependencies."""

from __future__ import annotations


def clamp(v: float, a: float, b: float) -> float:
    """Clamp value v to range [a, b]."""
    return a if v < a else b if v > b else v


def center_offset(content: float, container: float) -> float:
    """Offset that centers content of the given size inside container."""
    return (container - content) / 2.0
