from modaledit.actions import Editor
from modaledit.buffer import Buffer, Pos, Range
from modaledit.state import CursorStyle, EditorMode


def make(lines, styles=None):
    return Editor(Buffer(lines), on_cursor_style=None if styles is None else styles.append)


def test_insert_switches_mode_and_style():
    styles = []
    editor = make(["abc"], styles)
    editor.insert()
    assert editor.state.mode is EditorMode.INSERT
    assert styles == [CursorStyle.BAR]


def test_leave_insert_restores_mode_and_moves_left():
    styles = []
    editor = make(["abc"], styles)
    editor.insert()
    editor.cursor.move(Pos(0, 2))
    editor.leave_insert()
    assert editor.state.mode is EditorMode.NORMAL
    assert styles[-1] is CursorStyle.BLOCK
    assert editor.cursor.col == 1


def test_insert_character_advances_cursor():
    editor = make(["ab"])
    editor.insert()
    for ch in "xy":
        editor.insert_character(ch)
    assert editor.buffer.lines == [b"xyab"]
    assert editor.cursor.col == len("xy")


def test_newline_splits_line():
    editor = make(["hello world"])
    editor.cursor.move(Pos(0, 5))
    editor.newline()
    assert editor.buffer.lines == [b"hello", b" world"]
    assert editor.cursor.pos() == Pos(1, 0)


def test_replace_keeps_cursor_on_character():
    editor = make(["abc"])
    editor.cursor.move(Pos(0, 1))
    editor.replace("z")
    assert editor.buffer.lines == [b"azc"]
    assert editor.cursor.col == 1


def test_substitute_deletes_and_enters_insert():
    editor = make(["abc"])
    editor.substitute()
    assert editor.buffer.lines == [b"bc"]
    assert editor.state.mode is EditorMode.INSERT


def test_delete_char():
    editor = make(["abc"])
    editor.delete_char()
    assert editor.buffer.lines == [b"bc"]


def test_merge_line_joins_next_line():
    editor = make(["foo", "bar"])
    editor.merge_line()
    assert editor.buffer.lines == [b"foobar"]


def test_backspace_inside_line():
    editor = make(["abc"])
    editor.insert()
    editor.cursor.move(Pos(0, 2))
    editor.backspace()
    assert editor.buffer.lines == [b"ac"]
    assert editor.cursor.col == 1


def test_backspace_at_line_start_joins_lines():
    editor = make(["foo", "bar"])
    editor.insert()
    editor.cursor.move(Pos(1, 0))
    editor.backspace()
    assert editor.buffer.lines == [b"foobar"]
    assert editor.cursor.pos() == Pos(0, len("foo"))


def test_backspace_at_origin_does_nothing():
    editor = make(["abc"])
    editor.insert()
    editor.backspace()
    assert editor.buffer.lines == [b"abc"]
    assert editor.cursor.pos() == Pos(0, 0)


def test_append_moves_past_cursor():
    editor = make(["abc"])
    editor.cursor.move(Pos(0, 2))
    editor.append()
    assert editor.state.mode is EditorMode.INSERT
    assert editor.cursor.col == len("abc")


def test_line_end_and_start_in_normal_mode():
    text = "hello"
    editor = make([text])
    editor.line_end()
    assert editor.cursor.col == len(text) - 1
    editor.line_start()
    assert editor.cursor.col == 0


def test_vertical_moves():
    editor = make(["abc", "def"])
    editor.cursor_down()
    assert editor.cursor.row == 1
    editor.cursor_up()
    assert editor.cursor.row == 0


def test_delete_range_normalizes_and_moves_cursor():
    editor = make(["hello world"])
    editor.cursor.move(Pos(0, 6))
    editor.delete_range(Range(Pos(0, 4), Pos(0, 0)))
    assert editor.buffer.lines == [b" world"]
    assert editor.cursor.pos() == Pos(0, 0)