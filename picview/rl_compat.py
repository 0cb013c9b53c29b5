"""Raylib compatibility layer - abstracts differences between raylibpy and python-raylib."""

from __future__ import annotations
import io
from typing import Any, List

from PIL import Image

# Try to import raylib
try:
    import raylibpy as rl
    RL_VERSION = "raylibpy"
except ImportError:
    import raylib as rl
    RL_VERSION = "python-raylib"

# PIXELFORMAT_UNCOMPRESSED_R8G8B8A8
_PIXELFORMAT_RGBA8 = getattr(rl, "PIXELFORMAT_UNCOMPRESSED_R8G8B8A8", 7)


def _cstr(text: str) -> Any:
    """Strings for the cffi binding must be bytes."""
    return text.encode('utf-8') if hasattr(rl, 'ffi') else text


def make_rect(x: float, y: float, w: float, h: float) -> Any:
    """Create a raylib Rectangle compatible with the current binding."""
    if hasattr(rl, 'ffi'):
        r = rl.ffi.new("Rectangle *")
        r[0].x = float(x)
        r[0].y = float(y)
        r[0].width = float(w)
        r[0].height = float(h)
        return r[0]
    return rl.Rectangle(float(x), float(y), float(w), float(h))


def make_vec2(x: float, y: float) -> Any:
    """Create a raylib Vector2 compatible with the current binding."""
    if hasattr(rl, 'ffi'):
        v = rl.ffi.new("Vector2 *")
        v[0].x = float(x)
        v[0].y = float(y)
        return v[0]
    return rl.Vector2(float(x), float(y))


def make_color(r: int, g: int, b: int, a: int = 255) -> Any:
    """Create a raylib Color compatible with the current binding."""
    if hasattr(rl, 'ffi'):
        c = rl.ffi.new("Color *")
        c[0].r, c[0].g, c[0].b, c[0].a = int(r), int(g), int(b), int(a)
        return c[0]
    return rl.Color(int(r), int(g), int(b), int(a))


def draw_text(text: str, x: int, y: int, size: int, color: Any) -> None:
    """Draw text with encoding fallback."""
    try:
        rl.DrawText(_cstr(text), int(x), int(y), size, color)
    except TypeError:
        rl.DrawText(text, int(x), int(y), size, color)


def measure_text(text: str, size: int) -> int:
    """Measure text width with encoding fallback."""
    try:
        return rl.MeasureText(_cstr(text), size)
    except TypeError:
        return rl.MeasureText(text, size)


def init_window(width: int, height: int, title: str) -> None:
    try:
        rl.InitWindow(width, height, _cstr(title))
    except TypeError:
        rl.InitWindow(width, height, title)


def set_window_title(title: str) -> None:
    try:
        rl.SetWindowTitle(_cstr(title))
    except TypeError:
        rl.SetWindowTitle(title)


def texture_from_pil(img: Image.Image) -> Any:
    """Upload an RGBA PIL image as a GPU texture."""
    if img.mode != "RGBA":
        img = img.convert("RGBA")
    w, h = img.size

    if hasattr(rl, 'ffi'):
        buf = rl.ffi.new("unsigned char[]", img.tobytes())
        image = rl.ffi.new("Image *")
        image[0].data = buf
        image[0].width = w
        image[0].height = h
        image[0].mipmaps = 1
        image[0].format = _PIXELFORMAT_RGBA8
        # Texture upload copies the pixels; buf only has to outlive this call
        tex = rl.LoadTextureFromImage(image[0])
    else:
        png = io.BytesIO()
        img.save(png, format="PNG")
        data = png.getvalue()
        image = rl.LoadImageFromMemory(".png", data, len(data))
        tex = rl.LoadTextureFromImage(image)
        rl.UnloadImage(image)

    filt = getattr(rl, "TEXTURE_FILTER_BILINEAR", None)
    if filt is not None:
        rl.SetTextureFilter(tex, filt)
    return tex


def get_texture_id(tex: Any) -> int:
    """Safely get texture ID."""
    return getattr(tex, 'id', 0) or 0


def unload_texture(tex: Any) -> None:
    """Unload a texture if it is valid."""
    if get_texture_id(tex) > 0:
        rl.UnloadTexture(tex)


def get_dropped_files() -> List[str]:
    """Paths dropped onto the window this frame (empty if none)."""
    if not rl.IsFileDropped():
        return []
    dropped = rl.LoadDroppedFiles()
    try:
        paths = []
        for i in range(dropped.count):
            p = dropped.paths[i]
            if hasattr(rl, 'ffi'):
                p = rl.ffi.string(p)
            paths.append(p.decode('utf-8') if isinstance(p, bytes) else str(p))
        return paths
    finally:
        rl.UnloadDroppedFiles(dropped)


def is_key_pressed_or_repeat(key: int) -> bool:
    """Key pressed this frame, or held long enough to auto-repeat."""
    if rl.IsKeyPressed(key):
        return True
    repeat = getattr(rl, 'IsKeyPressedRepeat', None)
    return bool(repeat and repeat(key))


__all__ = [
    'rl',
    'RL_VERSION',
    'make_rect',
    'make_vec2',
    'make_color',
    'draw_text',
    'measure_text',
    'init_window',
    'set_window_title',
    'texture_from_pil',
    'get_texture_id',
    'unload_texture',
    'get_dropped_files',
    'is_key_pressed_or_repeat',
]
