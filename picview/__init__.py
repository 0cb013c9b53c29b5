"""PicView - single-window image viewer."""

__version__ = "1.0.0"
