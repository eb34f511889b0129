"""A bounded single-line text buffer used by the command and search prompts."""

from __future__ import annotations

from .utf8 import encode, prev_index


class LineBuffer:
    """UTF-8 text of bounded byte length, edited at its end."""

    CAPACITY = 1024

    def __init__(self) -> None:
        self._data = bytearray()

    @property
    def data(self) -> bytes:
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def clear(self) -> None:
        self._data.clear()

    def text(self) -> str:
        return self._data.decode("utf-8", errors="replace")

    def insert_char(self, ch: int | str) -> None:
        """Append a character; ignored if it does not fit or cannot be encoded."""
        encoded = encode(ch)
        if not encoded:
            return
        if len(self._data) + len(encoded) >= self.CAPACITY:
            return
        self._data.extend(encoded)

    def backspace(self) -> None:
        """Remove the last whole character."""
        if not self._data:
            return
        del self._data[prev_index(bytes(self._data), len(self._data)):]