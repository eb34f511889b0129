"""Loading buffers from files and saving them back."""

from __future__ import annotations

import os
import re

from .buffer import LINE_CAPACITY, Buffer

DEFAULT_PATH = "./chuj"

_LINE_BODY = re.compile(rb"[^\r\n]*")


def load_into_buffer(path: str | os.PathLike[str], buffer: Buffer) -> None:
    """Insert the lines of a file at the top of ``buffer``.

    Lines longer than a buffer line are split into several lines. Existing
    lines are kept below the loaded ones. Raises ``OSError`` if the file
    cannot be read.
    """
    with open(path, "rb") as stream:
        row = 0
        while True:
            chunk = stream.readline(LINE_CAPACITY - 1)
            if not chunk:
                break
            match = _LINE_BODY.match(chunk)
            buffer.insert_line(row, match.group() if match else b"")
            row += 1


def save_from_buffer(path: str | os.PathLike[str], buffer: Buffer) -> None:
    """Write the lines of ``buffer`` to a file, separated by newlines.

    Raises ``OSError`` if the file cannot be written.
    """
    with open(path, "wb") as stream:
        stream.write(b"\n".join(buffer.lines))