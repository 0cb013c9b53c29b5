"""Image utilities - listing, companion lookup, name checks, info text."""

from __future__ import annotations
import os
from datetime import datetime
from typing import AbstractSet, List, Optional

from .config import IMG_EXTS, FORBIDDEN_NAME_CHARS
from .errors import InvalidNameError


def path_sort_key(path: str) -> tuple:
    """Case-insensitive ordinal key; ties broken by the raw path."""
    return (path.upper(), path)


def same_path(a: str, b: str) -> bool:
    """Case-insensitive path equality."""
    return a.upper() == b.upper()


def is_supported_image(filepath: str, exts: AbstractSet[str] = IMG_EXTS) -> bool:
    """Check if file has a supported image extension."""
    ext = os.path.splitext(filepath)[1].lower()
    return ext in exts


def list_images(dirpath: str, exts: AbstractSet[str] = IMG_EXTS) -> List[str]:
    """List all supported image files in directory.

    Args:
        dirpath: Directory path to scan.
        exts: Allowed extensions (lowercase, with leading dot).

    Returns:
        Full paths, sorted case-insensitively.

    Raises:
        OSError: If the directory cannot be read.
    """
    result = []
    with os.scandir(dirpath) as it:
        for entry in it:
            if entry.is_file() and is_supported_image(entry.name, exts):
                result.append(os.path.join(dirpath, entry.name))
    result.sort(key=path_sort_key)
    return result


def find_companion_file(filepath: str, exts: AbstractSet[str] = IMG_EXTS) -> Optional[str]:
    """Find a sibling sharing the image's base name but with a non-image extension.

    Paired video clips or sidecars (IMG_0001.jpg + IMG_0001.mov) follow the
    image on delete and rename. The first match in sorted order wins.
    """
    directory = os.path.dirname(filepath)
    stem = os.path.splitext(os.path.basename(filepath))[0].upper()
    try:
        names = os.listdir(directory)
    except OSError:
        return None

    for name in sorted(names, key=path_sort_key):
        base, ext = os.path.splitext(name)
        if not ext or base.upper() != stem:
            continue
        if ext.lower() in exts:
            continue
        candidate = os.path.join(directory, name)
        if os.path.isfile(candidate) and not same_path(candidate, filepath):
            return candidate
    return None


def validate_basename(name: str) -> str:
    """Check a new base name (without extension) and return it.

    Raises:
        InvalidNameError: Empty, whitespace-only, '.'/'..', or forbidden characters.
    """
    if not name or not name.strip() or name in (".", ".."):
        raise InvalidNameError(name)
    if any(ch in FORBIDDEN_NAME_CHARS for ch in name):
        raise InvalidNameError(name)
    return name


def format_file_size(size_bytes: int) -> str:
    """Human-readable size, e.g. '1.5 MB'."""
    units = ("B", "KB", "MB", "GB")
    size = float(size_bytes)
    order = 0
    while size >= 1024 and order < len(units) - 1:
        order += 1
        size /= 1024
    text = f"{size:.2f}".rstrip("0").rstrip(".")
    return f"{text} {units[order]}"


def describe_image(filepath: str, width: int, height: int) -> str:
    """Status bar info text: dimensions, file size and modification time."""
    parts = [f"{width} x {height} px"]
    try:
        st = os.stat(filepath)
    except OSError:
        return parts[0]
    parts.append(format_file_size(st.st_size))
    parts.append(datetime.fromtimestamp(st.st_mtime).strftime("%Y-%m-%d %H:%M"))
    return " | ".join(parts)
