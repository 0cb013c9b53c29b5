"""Error taxonomy. Every error is recoverable and shown to the user."""

from __future__ import annotations
import os
from typing import Optional


class PicViewError(Exception):
    """Base class for all user-facing errors."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class NotFoundError(PicViewError):
    """The requested file does not exist."""

    def __init__(self, path: str):
        super().__init__(f"File not found: {path}", path)


class UnsupportedFormatError(PicViewError):
    """The file extension is not a supported image format."""

    def __init__(self, path: str):
        super().__init__(f"Could not load the image (unsupported format): {path}", path)


class DecodeError(PicViewError):
    """The bitmap could not be decoded."""

    def __init__(self, path: str, reason: str = ""):
        msg = f"Error loading image: {path}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg, path)


class IoError(PicViewError):
    """An OS-level file operation failed."""


class TrashFailedError(IoError):
    """Moving a file to the trash failed."""

    def __init__(self, path: str, reason: str = ""):
        super().__init__(f"Error deleting file: {reason or path}", path)


class RenameFailedError(IoError):
    """Moving a file to its new name failed."""

    def __init__(self, path: str, target: str, reason: str = ""):
        super().__init__(f"Error renaming file: {reason or path}", path)
        self.target = target


class NameConflictError(PicViewError):
    """The rename target already exists."""

    def __init__(self, path: str):
        super().__init__(f"A file named '{os.path.basename(path)}' already exists.", path)


class InvalidNameError(PicViewError):
    """The new file name is empty or contains forbidden characters."""

    def __init__(self, name: str):
        super().__init__("Invalid filename. Please avoid special characters.")
        self.name = name
