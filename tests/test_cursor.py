from modaledit.buffer import Buffer, Pos
from modaledit.cursor import Cursor
from modaledit.state import EditorMode, State


def make(lines, mode=EditorMode.NORMAL):
    state = State(mode=mode)
    return Cursor(Buffer(lines), state)


def test_normal_mode_stays_on_last_character():
    cursor = make(["abc"])
    cursor.move(Pos(0, 10))
    assert cursor.col == len("abc") - 1


def test_insert_mode_may_pass_last_character():
    cursor = make(["abc"], EditorMode.INSERT)
    cursor.move(Pos(0, 10))
    assert cursor.col == len("abc")


def test_row_clamped_to_last_line():
    lines = ["one", "two"]
    cursor = make(lines)
    cursor.move(Pos(5, 0))
    assert cursor.row == len(lines) - 1


def test_negative_position_clamped_to_origin():
    cursor = make(["abc"])
    cursor.move(Pos(-3, -3))
    assert cursor.pos() == Pos(0, 0)


def test_empty_buffer_keeps_origin():
    cursor = make([])
    cursor.move(Pos(3, 3))
    assert cursor.pos() == Pos(0, 0)


def test_move_relative_accumulates():
    cursor = make(["abcdef"])
    cursor.move_relative(2, 0)
    cursor.move_relative(2, 0)
    assert cursor.pos() == Pos(0, 2 + 2)


def test_moving_to_shorter_line_clamps_column():
    cursor = make(["abcdef", "ab"])
    cursor.move(Pos(0, 5))
    cursor.move_relative(0, 1)
    assert cursor.pos() == Pos(1, len("ab") - 1)