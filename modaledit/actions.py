"""Editing actions applied at the cursor."""

from __future__ import annotations

from typing import Callable

from .buffer import Buffer, Pos, Range, normalize_range
from .command import CommandPrompt
from .cursor import Cursor
from .linebuffer import LineBuffer
from .motion import Motions
from .state import CursorStyle, EditorMode, State


class Editor:
    """A buffer with its cursor, state, motions and prompts."""

    def __init__(
        self,
        buffer: Buffer | None = None,
        state: State | None = None,
        on_cursor_style: Callable[[CursorStyle], None] | None = None,
    ) -> None:
        self.buffer = buffer if buffer is not None else Buffer()
        self.state = state if state is not None else State()
        self.cursor = Cursor(self.buffer, self.state)
        self.motions = Motions(self.buffer)
        self.command = CommandPrompt()
        self.search = LineBuffer()
        self.on_cursor_style = on_cursor_style

    def _set_cursor_style(self, style: CursorStyle) -> None:
        if self.on_cursor_style is not None:
            self.on_cursor_style(style)

    def newline(self) -> None:
        self.buffer.new_line(self.cursor.pos())
        self.cursor.move_relative(0, 1)
        self.cursor.move(Pos(self.cursor.row, 0))

    def replace(self, ch: str | int) -> None:
        """Replace the character under the cursor, leaving the cursor on it."""
        self.delete_char()
        self.buffer.insert_char(self.cursor.pos(), ch)
        self.cursor.col += 1
        self.cursor.move_relative(-1, 0)

    def substitute(self) -> None:
        self.delete_char()
        self.insert()

    def delete_char(self) -> None:
        self.buffer.delete_char(self.cursor.pos())

    def line_end(self) -> None:
        self.cursor.move(self.motions.line_end(self.cursor.pos()).end)

    def line_start(self) -> None:
        self.cursor.move(self.motions.line_start(self.cursor.pos()).end)

    def cursor_left(self) -> None:
        self.cursor.move_relative(-1, 0)

    def cursor_right(self) -> None:
        self.cursor.move_relative(1, 0)

    def cursor_up(self) -> None:
        self.cursor.move_relative(0, -1)

    def cursor_down(self) -> None:
        self.cursor.move_relative(0, 1)

    def append(self) -> None:
        self.insert()
        self.cursor_right()

    def insert(self) -> None:
        self.state.mode = EditorMode.INSERT
        self._set_cursor_style(CursorStyle.BAR)

    def insert_character(self, ch: str | int) -> None:
        self.buffer.insert_char(self.cursor.pos(), ch)
        self.cursor.move_relative(1, 0)

    def leave_insert(self) -> None:
        self.state.mode = EditorMode.NORMAL
        self._set_cursor_style(CursorStyle.BLOCK)
        self.cursor_left()

    def merge_line(self) -> None:
        self.buffer.merge_line(self.cursor.row, self.cursor.row + 1, self.cursor.col)

    def backspace(self) -> None:
        """Delete before the cursor, joining with the line above at a line start."""
        if self.cursor.col == 0 and self.cursor.row == 0:
            return

        if self.cursor.col <= 0:
            self.cursor.move_relative(0, -1)
            length = self.buffer.line_length(self.cursor.row)
            self.buffer.merge_line(self.cursor.row, self.cursor.row + 1, self.cursor.col)
            self.cursor.move(Pos(self.cursor.row, length))
            return

        end_col = self.cursor.col
        self.cursor.move_relative(-1, 0)
        for _ in range(end_col - self.cursor.col):
            self.buffer.delete_char(self.cursor.pos())

    def delete_range(self, range_: Range) -> None:
        """Delete a range and put the cursor at its start."""
        range_ = normalize_range(range_)
        self.buffer.delete_range(range_)
        self.cursor.move(range_.start)