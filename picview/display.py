"""Keeps the displayed bitmap in sync with the browser selection."""

from __future__ import annotations
import os
from typing import TYPE_CHECKING, Any, Callable, Optional

if TYPE_CHECKING:
    from .state import AppState

from .config import WINDOW_TITLE
from .errors import PicViewError
from .image_loader import decode_image
from .image_utils import describe_image
from .types import TextureInfo
from .logging import log


def window_title_for(path: Optional[str]) -> str:
    if not path:
        return WINDOW_TITLE
    return f"{WINDOW_TITLE} - {os.path.basename(path)}"


def sync_display(
    state: "AppState",
    upload: Callable[[Any], Any],
    unload: Callable[[Any], None],
    decode: Callable[[str], Any] = decode_image,
) -> bool:
    """Decode and upload the selected image if it is not on screen yet.

    A failed decode is remembered as displayed (with no texture) so it is
    not retried every frame; the user navigates on or re-opens.

    Args:
        state: Application state.
        upload: Turns a decoded bitmap into a texture.
        unload: Releases a texture.
        decode: Path -> decoded bitmap.

    Returns:
        True if the display changed.
    """
    if not state.needs_display:
        return False

    path = state.browser.current_path
    if state.texture is not None:
        unload(state.texture.tex)
        state.texture = None

    state.displayed_path = path
    state.window.title = window_title_for(path)
    state.image_info = ""

    if path is None:
        state.view.clear_image()
        log("[DISPLAY] Cleared")
        return True

    try:
        bitmap = decode(path)
    except PicViewError as e:
        log(f"[DISPLAY][ERR] {e}")
        state.view.clear_image()
        state.ui.show_error(str(e))
        return True

    w, h = bitmap.size
    state.texture = TextureInfo(tex=upload(bitmap), w=w, h=h, path=path)
    state.view.set_image(w, h)
    state.image_info = describe_image(path, w, h)
    log(f"[DISPLAY] {os.path.basename(path)} {w}x{h}")
    return True
