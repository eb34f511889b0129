"""Terminal drawing with curses: buffer view, line numbers and status bar."""

from __future__ import annotations

import curses
import sys
from dataclasses import dataclass
from typing import Optional, TextIO, Tuple

from .state import CursorStyle, EditorMode
from .utf8 import byte_to_column, column_to_byte

ANSI_CURSOR_BLOCK = "\x1b[2 q"
ANSI_CURSOR_BAR = "\x1b[6 q"
ANSI_CURSOR_UNDERSCORE = "\x1b[4 q"

RELATIVE_NUMBERS = True
NUMBERS_WIDTH = 4

COLOR_BACKGROUND = 10
COLOR_TEXT = 11
COLOR_NUMBERS = 12


def cursor_style_sequence(style: CursorStyle) -> str:
    """The escape sequence that selects a terminal cursor shape."""
    if style is CursorStyle.BAR:
        return ANSI_CURSOR_BAR
    if style is CursorStyle.UNDERSCORE:
        return ANSI_CURSOR_UNDERSCORE
    return ANSI_CURSOR_BLOCK


def format_line_number(row: int, cursor_row: int) -> str:
    """Relative distance to the cursor row, or the absolute number on it."""
    relative = abs(row - cursor_row)
    if RELATIVE_NUMBERS and relative:
        return str(relative)
    return str(row + 1)


def _key_name(code: int) -> str:
    if 32 <= code <= 0x10FFFF and chr(code).isprintable():
        return chr(code)
    return "?"


def _overlay(cells: list, start: int, text: str) -> None:
    for offset, ch in enumerate(text):
        index = start + offset
        if 0 <= index < len(cells):
            cells[index] = ch


def make_status_text(editor, width: int) -> str:
    """The status line: debug info on the left, cursor position on the right."""
    if width <= 0:
        return ""
    cells = [" "] * width
    right = f"{editor.cursor.row + 1},{editor.cursor.col + 1}"
    _overlay(cells, max(width - len(right) - 15, 0), right)

    state = editor.state
    left = (
        f"DEBUG: mode={state.mode_name()} | LINES: {editor.buffer.line_count}"
        f" | KEY: {_key_name(state.last_key)} {state.last_key}"
        f" | MSG: {state.log_message}"
    )
    _overlay(cells, 0, left)
    return "".join(cells)


@dataclass
class Viewport:
    """Top-left corner of the visible part of the buffer."""

    row: int = 10
    col: int = 0

    def scroll_to(self, cursor_row: int, cursor_column: int, height: int, width: int) -> None:
        """Scroll the least amount that keeps the cursor visible."""
        if cursor_column > self.col + width:
            self.col = cursor_column - width
        if cursor_column < self.col:
            self.col = cursor_column
        if cursor_row > self.row + (height - 1):
            self.row = cursor_row - (height - 1)
        if cursor_row < self.row:
            self.row = cursor_row
        self.row = max(self.row, 0)
        self.col = max(self.col, 0)


def _disable_flow_control() -> None:
    try:
        import termios
    except ImportError:
        return
    try:
        fd = sys.stdin.fileno()
        attrs = termios.tcgetattr(fd)
        attrs[0] &= ~(termios.IXON | termios.IXOFF)
        termios.tcsetattr(fd, termios.TCSANOW, attrs)
    except (termios.error, OSError, ValueError):
        pass


def _put(window, y: int, x: int, text: str, attr: int = 0, limit: Optional[int] = None) -> None:
    try:
        if limit is None:
            window.addstr(y, x, text, attr)
        elif limit > 0:
            window.addnstr(y, x, text, limit, attr)
    except curses.error:
        # Writing into the last cell of a window moves the cursor out of it.
        pass


class Renderer:
    """A curses screen with a main text window and a two-line status window."""

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self._out = out if out is not None else sys.stdout
        self.viewport = Viewport()
        self._active = False
        curses.initscr()
        try:
            curses.cbreak()
            curses.noecho()
            self._setup_colors()
            _disable_flow_control()
            curses.set_escdelay(0)
            self.main_window = curses.newwin(curses.LINES - 2, curses.COLS, 0, 0)
            self.main_window.keypad(True)
            self.status_window = curses.newwin(2, curses.COLS, curses.LINES - 2, 0)
            if curses.has_colors():
                self.main_window.bkgd(" ", curses.color_pair(2))
                self.status_window.bkgd(" ", curses.color_pair(2))
        except curses.error:
            curses.endwin()
            raise
        self._active = True
        self.set_cursor_style(CursorStyle.BLOCK)

    @staticmethod
    def _setup_colors() -> None:
        if not curses.has_colors():
            return
        curses.start_color()
        background = -1
        try:
            curses.use_default_colors()
        except curses.error:
            background = curses.COLOR_BLACK
        text = numbers = curses.COLOR_WHITE
        if curses.can_change_color() and curses.COLORS > COLOR_NUMBERS:
            curses.init_color(COLOR_BACKGROUND, 8 * 4, 33 * 4, 27 * 4)
            curses.init_color(COLOR_TEXT, 220 * 4, 220 * 4, 220 * 4)
            curses.init_color(COLOR_NUMBERS, 143 * 4, 143 * 4, 143 * 4)
            background, text, numbers = COLOR_BACKGROUND, COLOR_TEXT, COLOR_NUMBERS
        curses.init_pair(1, curses.COLOR_BLACK, text)
        curses.init_pair(2, text, background)
        curses.init_pair(3, numbers, background)

    def set_cursor_style(self, style: CursorStyle) -> None:
        if self._out.isatty():
            self._out.write(cursor_style_sequence(style))
            self._out.flush()

    def draw(self, editor) -> None:
        """Redraw the buffer and status line and place the cursor."""
        self._draw_buffer(editor)
        self._draw_status(editor)
        if editor.state.mode is EditorMode.COMMAND:
            self.status_window.refresh()
        else:
            self.main_window.refresh()

    def _draw_buffer(self, editor) -> None:
        window = self.main_window
        window.erase()
        height, width = window.getmaxyx()
        view_width = (width - 1) - NUMBERS_WIDTH
        buffer, cursor = editor.buffer, editor.cursor

        cursor_line = buffer.get_line(cursor.row) or b""
        self.viewport.scroll_to(
            cursor.row, byte_to_column(cursor_line, cursor.col), height, view_width
        )
        numbers_attr = curses.color_pair(3)

        for screen_row in range(height):
            index = screen_row + self.viewport.row
            if index >= buffer.line_count:
                _put(window, screen_row, 0, "~", numbers_attr)
                continue
            number = format_line_number(index, cursor.row)
            x = 0 if index == cursor.row else NUMBERS_WIDTH - len(number) - 1
            _put(window, screen_row, max(x, 0), number, numbers_attr)

            line = buffer.get_line(index) or b""
            offset = column_to_byte(line, self.viewport.col)
            text = line[offset:].decode("utf-8", errors="replace")
            _put(window, screen_row, NUMBERS_WIDTH, text, 0, view_width + 1)

        try:
            window.move(
                cursor.row - self.viewport.row,
                NUMBERS_WIDTH + cursor.col - self.viewport.col,
            )
        except curses.error:
            pass
        window.refresh()

    def _draw_status(self, editor) -> None:
        window = self.status_window
        window.erase()
        _height, width = window.getmaxyx()
        bold = curses.A_BOLD
        _put(window, 0, 0, make_status_text(editor, width), bold | curses.color_pair(1))

        mode = editor.state.mode
        if mode is EditorMode.COMMAND:
            _put(window, 1, 0, ":" + editor.command.line.text(), bold)
        elif mode is EditorMode.SEARCH:
            _put(window, 1, 0, "/" + editor.search.text(), bold)
        window.refresh()

    def get_input(self) -> Tuple[int, bool]:
        """Block for a key; return its code and whether it is a function key."""
        while True:
            try:
                key = self.main_window.get_wch()
            except curses.error:
                continue
            if isinstance(key, str):
                return ord(key), False
            return int(key), True

    def shutdown(self) -> None:
        if not self._active:
            return
        self.set_cursor_style(CursorStyle.BLOCK)
        self._active = False
        curses.endwin()