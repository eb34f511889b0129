"""The editing cursor, kept inside the bounds of the buffer."""

from __future__ import annotations

from .buffer import Buffer, Pos
from .state import EditorMode, State


class Cursor:
    """A row and byte column in a buffer, clamped after every move."""

    def __init__(self, buffer: Buffer, state: State, row: int = 0, col: int = 0) -> None:
        self.buffer = buffer
        self.state = state
        self.row = row
        self.col = col

    def clamp(self) -> None:
        """Keep the cursor on an existing line and inside it.

        In insert mode the cursor may sit just past the last character.
        """
        bottom = max(self.buffer.line_count - 1, 0)
        if self.row >= bottom:
            self.row = bottom
        if self.row < 0:
            self.row = 0

        padding = 0 if self.state.mode is EditorMode.INSERT else 1
        right = max(self.buffer.line_length(self.row) - padding, 0)
        self.col = min(max(self.col, 0), right)

    def move_relative(self, dx: int, dy: int) -> None:
        self.row += dy
        self.col += dx
        self.clamp()

    def move(self, pos: Pos) -> None:
        self.row = pos.row
        self.col = pos.col
        self.clamp()

    def pos(self) -> Pos:
        return Pos(self.row, self.col)