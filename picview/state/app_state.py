"""Composite AppState - combines all sub-states."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from .window import WindowState
from .browser import DirectoryBrowser
from .view import ViewState
from .ui import UIState
from .input import InputState
from ..types import TextureInfo


@dataclass
class AppState:
    """
    Application state owned by the single UI session.

    ``browser`` and ``view`` hold the navigation and view-transform state;
    the rest is display bookkeeping:
        state.texture        - uploaded bitmap for ``displayed_path``
        state.displayed_path - path the texture (or failed decode) belongs to
        state.image_info     - status bar info text
    """
    window: WindowState = field(default_factory=WindowState)
    browser: DirectoryBrowser = field(default_factory=DirectoryBrowser)
    view: ViewState = field(default_factory=ViewState)
    ui: UIState = field(default_factory=UIState)
    input: InputState = field(default_factory=InputState)

    texture: Optional[TextureInfo] = None
    displayed_path: Optional[str] = None
    image_info: str = ""

    @property
    def has_image(self) -> bool:
        return self.texture is not None and self.view.has_image

    @property
    def needs_display(self) -> bool:
        """True when the browser selection differs from what is on screen."""
        return self.browser.current_path != self.displayed_path
