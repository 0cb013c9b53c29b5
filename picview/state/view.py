"""View state - zoom, pan and viewport bookkeeping for the current bitmap."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..types import ViewParams
from ..config import ZOOM_EPSILON
from ..view_math import (
    clamp_scale,
    clamp_pan,
    compute_fit_view,
    recompute_view_anchor_zoom,
    screen_to_image,
    view_for_1to1_centered,
)
from ..logging import log


@dataclass
class ViewState:
    """State for view/zoom parameters.

    All mutation goes through the methods below; every zoom or pan change
    ends with the clamp policy (see ``view_math.clamp_pan``). With no image
    loaded every operation is a no-op.
    """
    view: ViewParams = field(default_factory=ViewParams)
    image_w: int = 0
    image_h: int = 0
    viewport_w: float = 0.0
    viewport_h: float = 0.0
    fit_mode: bool = True
    fit_pending: bool = False

    @property
    def has_image(self) -> bool:
        return self.image_w > 0 and self.image_h > 0

    @property
    def has_viewport(self) -> bool:
        return self.viewport_w > 0 and self.viewport_h > 0

    @property
    def zoom(self) -> float:
        """Current zoom scale."""
        return self.view.scale

    @property
    def pan_offset(self) -> Tuple[float, float]:
        """Current top-left offset of the scaled image."""
        return (self.view.offx, self.view.offy)

    @property
    def scaled_size(self) -> Tuple[float, float]:
        return (self.image_w * self.view.scale, self.image_h * self.view.scale)

    @property
    def viewport_center(self) -> Tuple[float, float]:
        return (self.viewport_w / 2.0, self.viewport_h / 2.0)

    def set_image(self, width: int, height: int) -> None:
        """Attach a newly displayed bitmap and fit it to the window."""
        self.image_w = int(width)
        self.image_h = int(height)
        self.view = ViewParams()
        self.fit_mode = True
        self.fit_to_window()

    def clear_image(self) -> None:
        """Forget the current bitmap."""
        self.image_w = 0
        self.image_h = 0
        self.view = ViewParams()
        self.fit_mode = True
        self.fit_pending = False

    def fit_to_window(self) -> bool:
        """Fit the image to the viewport (never upscaling) and center it.

        With a zero-area viewport the fit is deferred: ``fit_pending`` is
        set and consumed by the next ``set_viewport`` call.

        Returns:
            True if the view was updated now.
        """
        if not self.has_image:
            return False
        self.fit_mode = True
        if not self.has_viewport:
            self.fit_pending = True
            log(f"[VIEW] Fit deferred: viewport {self.viewport_w:.0f}x{self.viewport_h:.0f}")
            return False

        self.fit_pending = False
        self.view = compute_fit_view(self.image_w, self.image_h,
                                     self.viewport_w, self.viewport_h)
        log(f"[VIEW] Fit: scale={self.view.scale:.3f} "
            f"off=({self.view.offx:.1f},{self.view.offy:.1f})")
        return True

    def set_viewport(self, width: float, height: float) -> None:
        """Layout notification: the display surface has a (new) size."""
        self.viewport_w = max(0.0, float(width))
        self.viewport_h = max(0.0, float(height))
        if not self.has_image or not self.has_viewport:
            return
        if self.fit_pending or self.fit_mode:
            self.fit_to_window()
        else:
            self.clamp()

    def set_zoom(self, target: float, anchor: Optional[Tuple[float, float]] = None) -> bool:
        """Zoom to ``target`` keeping ``anchor`` (viewport coords) fixed.

        The anchor defaults to the viewport center. Changes smaller than
        ZOOM_EPSILON are ignored.

        Returns:
            True if the view changed.
        """
        if not self.has_image:
            return False
        new_scale = clamp_scale(target)
        if abs(new_scale - self.view.scale) < ZOOM_EPSILON:
            return False
        if anchor is None:
            anchor = self.viewport_center

        self.view = recompute_view_anchor_zoom(self.view, new_scale, anchor)
        self.fit_mode = False
        self.clamp()
        return True

    def zoom_by(self, factor: float, anchor: Optional[Tuple[float, float]] = None) -> bool:
        """Multiply the current zoom by ``factor``."""
        return self.set_zoom(self.view.scale * factor, anchor)

    def actual_size(self) -> bool:
        """Show the image at 100%, centered."""
        if not self.has_image:
            return False
        self.view = view_for_1to1_centered(self.image_w, self.image_h,
                                           self.viewport_w, self.viewport_h)
        self.fit_mode = False
        return True

    def pan(self, dx: float, dy: float) -> bool:
        """Move the image by a delta, then clamp."""
        if not self.has_image:
            return False
        self.view = ViewParams(self.view.scale, self.view.offx + dx, self.view.offy + dy)
        self.clamp()
        return True

    def clamp(self) -> None:
        """Apply the pan clamp policy to the current view."""
        if not self.has_image:
            return
        self.view = clamp_pan(self.view, self.image_w, self.image_h,
                              self.viewport_w, self.viewport_h)

    def image_point_at(self, x: float, y: float) -> Tuple[float, float]:
        """Image-space coordinates of a viewport point."""
        return screen_to_image(self.view, x, y)

    def dest_rect(self) -> Tuple[float, float, float, float]:
        """Rectangle (x, y, w, h) where the bitmap is drawn."""
        w, h = self.scaled_size
        return (self.view.offx, self.view.offy, w, h)
