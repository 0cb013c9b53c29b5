"""State management submodules for PicView."""

from .window import WindowState
from .browser import DirectoryBrowser
from .view import ViewState
from .ui import UIState, MessageState, RenamePromptState
from .input import InputState
from .app_state import AppState

__all__ = [
    'WindowState',
    'DirectoryBrowser',
    'ViewState',
    'UIState',
    'MessageState',
    'RenamePromptState',
    'InputState',
    'AppState',
]
