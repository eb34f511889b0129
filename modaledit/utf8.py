"""Byte-level helpers for UTF-8 encoded lines.

Lines are stored as bytes; indexes are byte offsets and columns are
display columns as reported by ``wcwidth``. A NUL byte ends a line.
"""

from __future__ import annotations

from wcwidth import wcwidth


def _length(data: bytes) -> int:
    end = data.find(b"\0")
    return len(data) if end < 0 else end


def _byte(data: bytes, idx: int) -> int:
    return data[idx] if 0 <= idx < len(data) else 0


def char_len(data: bytes, idx: int) -> int:
    """Byte length of the UTF-8 sequence that starts at ``idx`` (0 at the end)."""
    c = _byte(data, idx)
    if c == 0:
        return 0
    if c < 0x80:
        return 1
    if c & 0xE0 == 0xC0:
        return 2
    if c & 0xF0 == 0xE0:
        return 3
    if c & 0xF8 == 0xF0:
        return 4
    # A stray continuation or invalid byte: step over it alone.
    return 1


def next_index(data: bytes, idx: int) -> int:
    """Index of the character after the one starting at ``idx``."""
    if idx < 0:
        return 0
    length = _length(data)
    if idx >= length:
        return length
    return idx + char_len(data, idx)


def prev_index(data: bytes, idx: int) -> int:
    """Index of the start of the character before ``idx``."""
    if idx <= 0:
        return 0
    i = idx - 1
    while i > 0 and _byte(data, i) & 0xC0 == 0x80:
        i -= 1
    return i


def char_width(data: bytes, idx: int) -> int:
    """Display width of the character starting at ``idx``."""
    length = char_len(data, idx)
    if length == 0:
        return 0
    try:
        ch = bytes(data[idx:idx + length]).decode("utf-8")
    except UnicodeDecodeError:
        return 1
    if len(ch) != 1:
        return 1
    width = wcwidth(ch)
    return width if width >= 0 else 1


def encode(ch: int | str) -> bytes:
    """UTF-8 bytes of a character or code point; empty if it cannot be encoded."""
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        ch = ord(ch)
    try:
        return chr(ch).encode("utf-8")
    except (ValueError, OverflowError, UnicodeEncodeError):
        return b""


def byte_to_column(data: bytes, byte_index: int) -> int:
    """Display column of the byte offset ``byte_index``."""
    length = _length(data)
    column = 0
    i = 0
    while i < length and i < byte_index:
        column += char_width(data, i)
        i = next_index(data, i)
    return column


def column_to_byte(data: bytes, column: int) -> int:
    """First byte offset whose display column reaches ``column``."""
    length = _length(data)
    current = 0
    i = 0
    while i < length:
        if current >= column:
            return i
        current += char_width(data, i)
        i = next_index(data, i)
    return i