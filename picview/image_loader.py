"""Bitmap decoding with Pillow."""

from __future__ import annotations
import os

from PIL import Image, UnidentifiedImageError

from .config import MAX_IMAGE_DIMENSION
from .errors import DecodeError, NotFoundError
from .logging import log


def decode_image(path: str, max_dimension: int = MAX_IMAGE_DIMENSION) -> Image.Image:
    """Decode an image file into an RGBA bitmap.

    Animated formats yield their first frame. Images larger than
    ``max_dimension`` on either side are downscaled to fit.

    Args:
        path: Path to image file.
        max_dimension: Largest allowed side in pixels.

    Returns:
        Fully loaded RGBA PIL image.

    Raises:
        NotFoundError: If the file does not exist.
        DecodeError: If the file cannot be parsed.
    """
    if not os.path.isfile(path):
        raise NotFoundError(path)

    try:
        with Image.open(path) as img:
            img.seek(0)
            rgba = img.convert("RGBA")
    except (UnidentifiedImageError, OSError, ValueError, SyntaxError) as e:
        log(f"[LOAD][ERR] {os.path.basename(path)}: {e!r}")
        raise DecodeError(path, str(e)) from e
    except Image.DecompressionBombError as e:
        log(f"[LOAD][ERR] {os.path.basename(path)}: {e!r}")
        raise DecodeError(path, "image too large") from e

    w, h = rgba.size
    if w <= 0 or h <= 0:
        raise DecodeError(path, "empty image")

    if w > max_dimension or h > max_dimension:
        scale = min(max_dimension / w, max_dimension / h)
        new_w = max(1, int(w * scale))
        new_h = max(1, int(h * scale))
        log(f"[LOAD][RESIZE] {os.path.basename(path)}: {w}x{h} -> {new_w}x{new_h}")
        rgba = rgba.resize((new_w, new_h), Image.LANCZOS)

    return rgba
