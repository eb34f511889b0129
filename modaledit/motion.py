"""Cursor motions over a buffer, each returning the range it covers."""

from __future__ import annotations

from enum import Enum, auto

from .buffer import Buffer, Pos, Range


class CharClass(Enum):
    WORD = auto()
    SPACE = auto()
    OTHER = auto()


class Direction(Enum):
    FORWARD = auto()
    BACKWARD = auto()


def char_class(ch: str) -> CharClass:
    """Classify a character as part of a word, whitespace or punctuation."""
    if ch == "_" or ch.isalnum():
        return CharClass.WORD
    if ch.isspace():
        return CharClass.SPACE
    return CharClass.OTHER


def _as_char(ch: str | int | None) -> str:
    if ch is None:
        return "\0"
    if isinstance(ch, int):
        return chr(ch) if 0 <= ch <= 0x10FFFF else "\0"
    return ch


class Motions:
    """Motions over one buffer; remembers the last character searched for."""

    def __init__(self, buffer: Buffer) -> None:
        self.buffer = buffer
        self.last_find = "\0"

    def _class_at(self, pos: Pos) -> CharClass:
        return char_class(self.buffer.get_char(pos))

    def _step(self, pos: Pos, direction: Direction) -> Pos:
        if direction is Direction.FORWARD:
            return self.buffer.next_char(pos)
        return self.buffer.prev_char(pos)

    def _at_limit(self, pos: Pos, direction: Direction) -> bool:
        if direction is Direction.FORWARD:
            return self.buffer.is_end(pos)
        return self.buffer.is_start(pos)

    def word(self, cursor: Pos, direction: Direction) -> Range:
        """Move over the current word, then over anything that is not a word."""
        p = cursor
        if direction is Direction.BACKWARD:
            p = self._step(p, direction)

        if self._class_at(p) is CharClass.WORD:
            while not self._at_limit(p, direction) and self._class_at(p) is CharClass.WORD:
                p = self._step(p, direction)

        while not self._at_limit(p, direction) and self._class_at(p) is not CharClass.WORD:
            p = self._step(p, direction)

        return Range(cursor, p, False)

    def next_word_end(self, cursor: Pos) -> Range:
        p = cursor
        if self._class_at(self.buffer.next_char(p)) is not CharClass.WORD:
            p = self.word(p, Direction.FORWARD).end

        while not self.buffer.is_end(p) and self._class_at(self.buffer.next_char(p)) is CharClass.WORD:
            p = self.buffer.next_char(p)

        return Range(cursor, p, False)

    def first_graph(self, cursor: Pos) -> Range:
        p = self.word(Pos(cursor.row, 0), Direction.FORWARD).end
        return Range(cursor, p, False)

    def line_end(self, cursor: Pos) -> Range:
        return Range(cursor, Pos(cursor.row, self.buffer.line_length(cursor.row)), True)

    def line_start(self, cursor: Pos) -> Range:
        return Range(cursor, Pos(cursor.row, 0), True)

    def left(self, cursor: Pos) -> Range:
        end = Pos(cursor.row, cursor.col - 1)
        return Range(end, end, True)

    def right(self, cursor: Pos) -> Range:
        end = Pos(cursor.row, cursor.col + 1)
        return Range(end, end, True)

    def up(self, cursor: Pos) -> Range:
        end = Pos(cursor.row - 1, cursor.col)
        return Range(end, end, True)

    def down(self, cursor: Pos) -> Range:
        end = Pos(cursor.row + 1, cursor.col)
        return Range(end, end, True)

    def file_start(self, cursor: Pos) -> Range:
        return Range(cursor, self.buffer.start(), True)

    def file_end(self, cursor: Pos) -> Range:
        return Range(cursor, self.buffer.end(), True)

    def find(self, cursor: Pos, ch: str | int | None, direction: Direction) -> Range:
        """Find the next occurrence of ``ch``; ``None`` or NUL repeats the last search.

        If nothing is found the range is empty at the cursor.
        """
        target = _as_char(ch)
        if target == "\0":
            target = self.last_find
        else:
            self.last_find = target

        p = cursor
        while not self._at_limit(p, direction):
            p = self._step(p, direction)
            if self.buffer.get_char(p) == target:
                return Range(cursor, p, False)
        return Range(cursor, cursor, False)