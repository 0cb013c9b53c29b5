"""Pure view calculation functions - no side effects, no state mutation."""

from __future__ import annotations
from typing import Tuple

from .types import ViewParams
from .math_utils import clamp, center_offset
from .config import ZOOM_MIN, ZOOM_MAX, FIT_MAX_SCALE


def clamp_scale(scale: float) -> float:
    """Clamp a zoom factor to the allowed range."""
    return clamp(float(scale), ZOOM_MIN, ZOOM_MAX)


def compute_fit_scale(
    img_w: int,
    img_h: int,
    screen_w: float,
    screen_h: float,
    max_scale: float = FIT_MAX_SCALE
) -> float:
    """Compute scale to fit image within screen bounds.

    Args:
        img_w: Image width in pixels.
        img_h: Image height in pixels.
        screen_w: Viewport width.
        screen_h: Viewport height.
        max_scale: Upper bound for the result (1.0 = never upscale).

    Returns:
        Scale factor to fit image.
    """
    if img_w <= 0 or img_h <= 0:
        return 1.0
    scale = min(screen_w / img_w, screen_h / img_h)
    return min(scale, max_scale)


def center_view_for(
    scale: float,
    img_w: int,
    img_h: int,
    screen_w: float,
    screen_h: float
) -> ViewParams:
    """Create a centered ViewParams for given scale."""
    return ViewParams(
        scale=scale,
        offx=center_offset(img_w * scale, screen_w),
        offy=center_offset(img_h * scale, screen_h)
    )


def compute_fit_view(
    img_w: int,
    img_h: int,
    screen_w: float,
    screen_h: float,
    max_scale: float = FIT_MAX_SCALE
) -> ViewParams:
    """Compute a ViewParams that fits and centers the image."""
    scale = compute_fit_scale(img_w, img_h, screen_w, screen_h, max_scale)
    return center_view_for(scale, img_w, img_h, screen_w, screen_h)


def _clamp_axis(offset: float, scaled: float, screen: float) -> float:
    if scaled <= screen:
        return center_offset(scaled, screen)
    return clamp(offset, screen - scaled, 0.0)


def clamp_pan(
    view: ViewParams,
    img_w: int,
    img_h: int,
    screen_w: float,
    screen_h: float
) -> ViewParams:
    """Clamp view offsets so the image never leaves a gap at the viewport edges.

    Each axis is handled independently:
    - Scaled image smaller than (or equal to) the viewport: centered.
    - Scaled image larger: offset limited to [screen - scaled, 0].

    Args:
        view: Current view parameters.
        img_w: Image width in pixels.
        img_h: Image height in pixels.
        screen_w: Viewport width.
        screen_h: Viewport height.

    Returns:
        New ViewParams with clamped offsets.
    """
    return ViewParams(
        scale=view.scale,
        offx=_clamp_axis(view.offx, img_w * view.scale, screen_w),
        offy=_clamp_axis(view.offy, img_h * view.scale, screen_h),
    )


def screen_to_image(view: ViewParams, x: float, y: float) -> Tuple[float, float]:
    """Convert a viewport point to image-space coordinates."""
    return ((x - view.offx) / view.scale, (y - view.offy) / view.scale)


def recompute_view_anchor_zoom(
    view: ViewParams,
    new_scale: float,
    anchor: Tuple[float, float]
) -> ViewParams:
    """Recompute view for new scale, keeping anchor point fixed.

    This allows zooming "towards" the mouse cursor position.

    Args:
        view: Current view parameters.
        new_scale: Target scale factor (already clamped by the caller).
        anchor: Viewport position (x, y) to keep fixed.

    Returns:
        New ViewParams with adjusted offsets (not yet pan-clamped).
    """
    ax, ay = anchor
    wx, wy = screen_to_image(view, ax, ay)
    return ViewParams(
        scale=new_scale,
        offx=ax - wx * new_scale,
        offy=ay - wy * new_scale,
    )


def view_for_1to1_centered(
    img_w: int,
    img_h: int,
    screen_w: float,
    screen_h: float
) -> ViewParams:
    """Create a 1:1 (100%) scale centered view."""
    return center_view_for(1.0, img_w, img_h, screen_w, screen_h)
