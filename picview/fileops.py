"""Filesystem operations delegated to the platform (trash, move)."""

from __future__ import annotations
import os

from send2trash import send2trash

from .errors import TrashFailedError, RenameFailedError
from .logging import log


def move_to_trash(file_path: str) -> None:
    """Send a file to the platform trash / recycle bin.

    Raises:
        TrashFailedError: If the platform refuses or the file is gone.
    """
    try:
        send2trash(file_path)
    except OSError as e:
        log(f"[DELETE][ERR] Failed to trash {os.path.basename(file_path)}: {e!r}")
        raise TrashFailedError(file_path, str(e)) from e
    log(f"[DELETE] Sent to trash: {os.path.basename(file_path)}")


def move_file(src: str, dst: str) -> None:
    """Rename a file.

    Raises:
        RenameFailedError: On any OS error.
    """
    try:
        os.rename(src, dst)
    except OSError as e:
        log(f"[RENAME][ERR] {os.path.basename(src)} -> {os.path.basename(dst)}: {e!r}")
        raise RenameFailedError(src, dst, str(e)) from e
    log(f"[RENAME] {os.path.basename(src)} -> {os.path.basename(dst)}")
