"""The text buffer: a list of UTF-8 lines with position-based editing."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

from .utf8 import (
    byte_to_column,
    char_len,
    column_to_byte,
    encode,
    next_index,
    prev_index,
)

LINE_CAPACITY = 1024


@dataclass(frozen=True, order=True)
class Pos:
    """A position in the buffer; ordering is row first, then column."""

    row: int = 0
    col: int = 0


@dataclass(frozen=True)
class Range:
    start: Pos
    end: Pos
    inclusive: bool = False


def normalize_range(range_: Range) -> Range:
    """Return the range with its start not after its end."""
    if range_.start > range_.end:
        return replace(range_, start=range_.end, end=range_.start)
    return range_


def _as_bytes(text: str | bytes | None) -> bytes:
    if text is None:
        return b""
    if isinstance(text, str):
        return text.encode("utf-8")
    return bytes(text)


class Buffer:
    """Lines of UTF-8 text, each holding at most ``LINE_CAPACITY - 1`` bytes."""

    def __init__(self, lines: Iterable[str | bytes] | None = None) -> None:
        self._lines: list[bytearray] = []
        for text in lines or ():
            self.insert_line(self.line_count, text)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def lines(self) -> list[bytes]:
        return [bytes(line) for line in self._lines]

    def __len__(self) -> int:
        return len(self._lines)

    def _is_valid(self, pos: Pos) -> bool:
        return 0 <= pos.col < LINE_CAPACITY - 1 and 0 <= pos.row < len(self._lines)

    def _line_bytes(self, row: int) -> bytes:
        line = self.get_line(row)
        return line if line is not None else b""

    def get_line(self, row: int) -> bytes | None:
        if 0 <= row < len(self._lines):
            return bytes(self._lines[row])
        return None

    def get_char(self, pos: Pos) -> str:
        """Character at a display position, or ``"\\0"`` if there is none."""
        if not self._is_valid(pos):
            return "\0"
        line = bytes(self._lines[pos.row])
        idx = column_to_byte(line, pos.col)
        length = char_len(line, idx)
        if length == 0:
            return "\0"
        try:
            decoded = line[idx:idx + length].decode("utf-8")
        except UnicodeDecodeError:
            return "\0"
        return decoded[0] if decoded else "\0"

    def insert_line(self, row: int, text: str | bytes | None) -> None:
        """Insert a line before ``row``; rows past the end append."""
        if row < 0:
            return
        row = min(row, len(self._lines))
        data = _as_bytes(text).split(b"\0", 1)[0][: LINE_CAPACITY - 1]
        self._lines.insert(row, bytearray(data))

    def delete_line(self, row: int) -> None:
        if 0 <= row < len(self._lines):
            del self._lines[row]

    def line_length(self, row: int) -> int:
        """Byte length of a line, 0 for rows that do not exist."""
        line = self.get_line(row)
        return len(line) if line is not None else 0

    def start(self) -> Pos:
        return Pos(0, 0)

    def end(self) -> Pos:
        if not self._lines:
            return self.start()
        row = len(self._lines) - 1
        return Pos(row, self.line_length(row))

    def new_line(self, pos: Pos) -> None:
        """Split the line at ``pos``, moving the rest to a new line below."""
        if not self._is_valid(pos):
            return
        line = self._lines[pos.row]
        byte_col = column_to_byte(bytes(line), pos.col)
        self.insert_line(pos.row + 1, bytes(line[byte_col:]))
        del line[byte_col:]

    def merge_line(self, dest_row: int, src_row: int, col_breakpoint: int) -> None:
        """Append line ``src_row`` to ``dest_row`` and remove ``src_row``."""
        if not self._is_valid(Pos(src_row, col_breakpoint)):
            return
        if not self._is_valid(Pos(dest_row, col_breakpoint)):
            return
        src = bytes(self._lines[src_row])
        dest = self._lines[dest_row]
        room = max(0, LINE_CAPACITY - 1 - len(dest))
        dest.extend(src[:room])
        self.delete_line(src_row)

    def insert_char(self, pos: Pos, ch: int | str) -> None:
        """Insert a character at a display position; ignored if the line is full."""
        if not self._is_valid(pos):
            return
        line = self._lines[pos.row]
        length = len(line)
        col = min(pos.col, length)
        if length >= LINE_CAPACITY - 1:
            return
        encoded = encode(ch)
        byte_col = column_to_byte(bytes(line), col)
        line[byte_col:byte_col] = encoded

    def delete_char(self, pos: Pos) -> bool:
        """Delete the character at ``pos``; return whether the line was edited."""
        if not self._is_valid(pos):
            return False
        line = self._lines[pos.row]
        if pos.col >= len(line):
            return False
        data = bytes(line)
        byte_col = column_to_byte(data, pos.col)
        del line[byte_col:byte_col + char_len(data, byte_col)]
        return True

    def replace_char(self, pos: Pos, ch: int) -> None:
        """Overwrite the byte at ``pos.col`` with ``ch``; a zero byte ends the line."""
        if not self._is_valid(pos):
            return
        line = self._lines[pos.row]
        value = ch & 0xFF
        if pos.col < len(line):
            if value == 0:
                del line[pos.col:]
            else:
                line[pos.col] = value
        elif pos.col == len(line) and value:
            line.append(value)

    def next_char(self, pos: Pos) -> Pos:
        """Position of the next character, wrapping to the next row."""
        line = self._line_bytes(pos.row)
        pos_index = column_to_byte(line, pos.col)
        if pos_index >= self.line_length(pos.row):
            return Pos(pos.row + 1, 0)
        return Pos(pos.row, byte_to_column(line, next_index(line, pos_index)))

    def prev_char(self, pos: Pos) -> Pos:
        """Position of the previous character, wrapping to the previous row."""
        line = self._line_bytes(pos.row)
        pos_index = column_to_byte(line, pos.col)
        if pos_index <= 0:
            row = pos.row - 1
            if row < 0:
                return self.start()
            return Pos(row, self.line_length(row))
        return Pos(pos.row, byte_to_column(line, prev_index(line, pos_index)))

    def is_start(self, pos: Pos) -> bool:
        return pos <= self.start()

    def is_end(self, pos: Pos) -> bool:
        return pos >= self.end()

    def is_line_empty(self, row: int) -> bool:
        return self.get_char(Pos(row, 0)) == "\0"

    def delete_range(self, range_: Range) -> bool:
        """Delete the bytes from start to end inclusive; return whether the range applied."""
        if not self._lines:
            return False
        range_ = normalize_range(range_)
        start, end = range_.start, range_.end
        count = len(self._lines)
        if not (0 <= start.row < count and 0 <= end.row < count):
            return False

        start_line = self._lines[start.row]
        end_line = bytes(self._lines[end.row])
        start_len = len(start_line)
        end_len = len(end_line)

        start_col = min(max(start.col, 0), start_len)
        end_col = min(max(end.col, -1), end_len)

        if start.row == end.row:
            if start_len == 0 or start_col >= start_len:
                return True
            end_col = max(end_col, start_col)
            end_col = min(end_col, start_len - 1)
            del start_line[start_col:end_col + 1]
            return True

        tail_from = min(end_col + 1, end_len)
        tail = end_line[tail_from:][: (LINE_CAPACITY - 1) - start_col]
        start_line[start_col:] = tail
        del self._lines[start.row + 1:end.row + 1]
        return True