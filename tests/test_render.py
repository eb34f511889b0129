import pytest

from modaledit.actions import Editor
from modaledit.buffer import Buffer
from modaledit.render import (
    ANSI_CURSOR_BAR,
    ANSI_CURSOR_BLOCK,
    ANSI_CURSOR_UNDERSCORE,
    Viewport,
    cursor_style_sequence,
    format_line_number,
    make_status_text,
)
from modaledit.state import CursorStyle, EditorMode


@pytest.mark.parametrize(
    "style, expected",
    [
        (CursorStyle.BLOCK, "\x1b[2 q"),
        (CursorStyle.BAR, "\x1b[6 q"),
        (CursorStyle.UNDERSCORE, "\x1b[4 q"),
    ],
)
def test_cursor_style_sequence(style, expected):
    assert cursor_style_sequence(style) == expected


def test_sequences_are_distinct():
    sequences = {cursor_style_sequence(style) for style in CursorStyle}
    assert sequences == {ANSI_CURSOR_BAR, ANSI_CURSOR_BLOCK, ANSI_CURSOR_UNDERSCORE}
    assert len(sequences) == 3


def test_line_number_on_cursor_row_is_absolute():
    assert format_line_number(0, 0) == "1"


def test_line_numbers_are_relative_and_symmetric():
    assert format_line_number(3, 7) == format_line_number(11, 7)
    assert format_line_number(6, 7) == format_line_number(8, 7)


def test_viewport_default():
    viewport = Viewport()
    assert (viewport.row, viewport.col) == (10, 0)


def test_viewport_scrolls_up_to_cursor():
    viewport = Viewport()
    viewport.scroll_to(0, 0, 20, 40)
    assert viewport.row == 0


@pytest.mark.parametrize("cursor_row", [0, 5, 19, 20, 100, 357])
def test_viewport_keeps_row_visible(cursor_row):
    viewport = Viewport()
    viewport.scroll_to(cursor_row, 0, 20, 40)
    assert viewport.row <= cursor_row <= viewport.row + 19
    assert viewport.row >= 0


@pytest.mark.parametrize("column", [0, 30, 31, 90, 500])
def test_viewport_keeps_column_visible(column):
    viewport = Viewport(row=0, col=0)
    viewport.scroll_to(0, column, 20, 30)
    assert viewport.col <= column <= viewport.col + 30


def test_viewport_scrolls_back_left():
    viewport = Viewport(row=0, col=50)
    viewport.scroll_to(0, 10, 20, 30)
    assert viewport.col == 10


def make_editor():
    return Editor(Buffer(["hello", "world"]))


def test_status_text_width_and_prefix():
    editor = make_editor()
    text = make_status_text(editor, 120)
    assert len(text) == 120
    assert text.startswith("DEBUG: mode=Normal | LINES: 2")


def test_status_text_shows_message_and_mode():
    editor = make_editor()
    editor.state.mode = EditorMode.INSERT
    editor.state.log("hi there")
    text = make_status_text(editor, 200)
    assert "mode=Insert" in text
    assert "MSG: hi there" in text


def test_status_text_position_on_right():
    editor = make_editor()
    width = 200
    text = make_status_text(editor, width)
    right = "1,1"
    start = width - len(right) - 15
    assert text[start:start + len(right)] == right
    assert text.endswith(" " * 15)


def test_status_text_truncated_to_narrow_width():
    editor = make_editor()
    assert make_status_text(editor, 10) == "DEBUG: mod"
    assert make_status_text(editor, 0) == ""