"""Editor-wide state: the current mode, last key and status message."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

LOG_MESSAGE_CAPACITY = 512


class EditorMode(Enum):
    """The modes the editor can be in; values are display names."""

    NORMAL = "Normal"
    INSERT = "Insert"
    COMMAND = "Command"
    SEARCH = "Search"


class CursorStyle(Enum):
    """Terminal cursor shapes."""

    BLOCK = auto()
    BAR = auto()
    UNDERSCORE = auto()


@dataclass
class State:
    """Mutable editor state shared by input handling and rendering."""

    mode: EditorMode = EditorMode.NORMAL
    last_key: int = ord("E")
    log_message: str = ""
    renderer: object = None

    def log(self, message: str | None) -> None:
        """Set the status message, truncated to the message capacity."""
        if message is None:
            self.clear_log()
            return
        raw = message.encode("utf-8")[: LOG_MESSAGE_CAPACITY - 1]
        self.log_message = raw.decode("utf-8", errors="ignore")

    def clear_log(self) -> None:
        self.log_message = ""

    def mode_name(self) -> str:
        return self.mode.value