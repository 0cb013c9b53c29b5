"""UI state - transient messages and the rename prompt."""

from __future__ import annotations
from dataclasses import dataclass, field

from ..config import MESSAGE_DURATION_S, PROMPT_MAX_LENGTH
from ..logging import now


@dataclass
class MessageState:
    """A message shown over the image for a few seconds."""
    text: str = ""
    is_error: bool = False
    shown_at: float = 0.0
    duration_s: float = MESSAGE_DURATION_S

    def show(self, text: str, is_error: bool = False) -> None:
        self.text = text
        self.is_error = is_error
        self.shown_at = now()

    def clear(self) -> None:
        self.text = ""
        self.is_error = False

    def is_visible(self, t: float) -> bool:
        return bool(self.text) and (t - self.shown_at) < self.duration_s


@dataclass
class RenamePromptState:
    """State for the in-window rename prompt."""
    visible: bool = False
    original_name: str = ""
    edit_value: str = ""

    def show(self, current_name: str) -> None:
        """Open the prompt pre-filled with the current base name."""
        self.visible = True
        self.original_name = current_name
        self.edit_value = current_name

    def hide(self) -> None:
        self.visible = False
        self.edit_value = ""
        self.original_name = ""

    def append(self, text: str) -> None:
        room = PROMPT_MAX_LENGTH - len(self.edit_value)
        if room > 0:
            self.edit_value += text[:room]

    def backspace(self) -> None:
        if self.edit_value:
            self.edit_value = self.edit_value[:-1]


@dataclass
class UIState:
    """State for UI elements."""
    message: MessageState = field(default_factory=MessageState)
    rename_prompt: RenamePromptState = field(default_factory=RenamePromptState)

    def show_error(self, text: str) -> None:
        self.message.show(text, is_error=True)

    def show_info(self, text: str) -> None:
        self.message.show(text, is_error=False)
