"""Native dialogs (open file) via tkinter."""

from __future__ import annotations
from typing import Optional

from .config import OPEN_DIALOG_TITLE, OPEN_DIALOG_FILETYPES
from .logging import log


def ask_open_path(initial_dir: Optional[str] = None) -> Optional[str]:
    """Show the platform open-file dialog.

    Returns:
        Selected path, or None if cancelled or no dialog is available.
    """
    try:
        import tkinter as tk
        from tkinter import filedialog
    except ImportError:
        log("[DIALOG] tkinter not available")
        return None

    try:
        root = tk.Tk()
    except tk.TclError as e:
        log(f"[DIALOG][ERR] Cannot create dialog root: {e!r}")
        return None

    try:
        root.withdraw()
        root.attributes("-topmost", True)
        path = filedialog.askopenfilename(
            parent=root,
            title=OPEN_DIALOG_TITLE,
            filetypes=OPEN_DIALOG_FILETYPES,
            initialdir=initial_dir or None,
        )
    finally:
        root.destroy()

    if not path:
        log("[DIALOG] Open cancelled")
        return None
    return str(path)
