"""Key handling for each editor mode."""

from __future__ import annotations

import curses
import os
from typing import Callable, Dict, Tuple, Union

from .actions import Editor
from .buffer import Pos, Range
from .files import DEFAULT_PATH, load_into_buffer, save_from_buffer
from .motion import Direction
from .state import CursorStyle, EditorMode

Key = Union[int, str]

ESCAPE = 27
NEWLINE = 10
CTRL_S = 19
CTRL_W = 23


def _code(key: Key) -> int:
    return ord(key) if isinstance(key, str) else int(key)


class InputHandler:
    """Dispatches keys to editor actions according to the current mode.

    ``read_key`` blocks for the next key and returns ``(key, special)``,
    where ``special`` marks a function key rather than a character.
    """

    def __init__(
        self,
        editor: Editor,
        read_key: Callable[[], Tuple[Key, bool]],
        path: Union[str, "os.PathLike[str]"] = DEFAULT_PATH,
    ) -> None:
        self.editor = editor
        self.read_key = read_key
        self.path = path

        motions = editor.motions
        self._motions: Dict[int, Callable[[Pos], Range]] = {
            ord("$"): motions.line_end,
            ord("0"): motions.line_start,
            ord("h"): motions.left,
            ord("l"): motions.right,
            ord("k"): motions.up,
            ord("j"): motions.down,
            ord("g"): motions.file_start,
            ord("G"): motions.file_end,
            ord("^"): motions.first_graph,
            ord("b"): lambda pos: motions.word(pos, Direction.BACKWARD),
            ord("e"): motions.next_word_end,
            ord("w"): lambda pos: motions.word(pos, Direction.FORWARD),
        }
        self._normal: Dict[int, Callable[[], None]] = {
            ord("i"): editor.insert,
            ord(":"): self._enter_command,
            ord("/"): self._enter_search,
            ord("d"): self.wait_for_motion,
            ord("J"): editor.merge_line,
            ord("a"): editor.append,
            ord("K"): editor.newline,
            CTRL_W: self._load,
            CTRL_S: self._save,
            ord("s"): editor.substitute,
            ord("x"): editor.delete_char,
            ord("r"): self._replace,
        }

    def _set_cursor_style(self, style: CursorStyle) -> None:
        if self.editor.on_cursor_style is not None:
            self.editor.on_cursor_style(style)

    def _wait_for_key(self) -> int:
        self._set_cursor_style(CursorStyle.UNDERSCORE)
        key, _special = self.read_key()
        self._set_cursor_style(CursorStyle.BLOCK)
        return _code(key)

    def handle(self, key: Key, special: bool = False) -> bool:
        """Handle one key; return True when the editor should quit."""
        code = _code(key)
        state = self.editor.state
        state.last_key = code

        if state.mode is EditorMode.NORMAL and code == ord("q"):
            return True

        if state.mode is EditorMode.INSERT:
            self._insert_mode(code, special)
        elif state.mode is EditorMode.NORMAL:
            self._normal_mode(code)
        else:
            self._prompt_mode(code, special)
        return False

    def handle_motion(self, key: Key, pos: Pos) -> Range:
        """The range covered by the motion bound to ``key``, empty if none is."""
        code = _code(key)
        motions = self.editor.motions
        if code == ord("f"):
            return motions.find(pos, self._wait_for_key(), Direction.FORWARD)
        if code == ord("F"):
            return motions.find(pos, self._wait_for_key(), Direction.BACKWARD)
        if code == ord(";"):
            return motions.find(pos, None, Direction.FORWARD)
        motion = self._motions.get(code)
        if motion is None:
            return Range(pos, pos)
        return motion(pos)

    def wait_for_motion(self) -> None:
        """Read a motion key and delete the text it moves over."""
        code = self._wait_for_key()
        if code == ESCAPE:
            return
        range_ = self.handle_motion(code, self.editor.cursor.pos())
        end = range_.end
        if not range_.inclusive:
            end = Pos(end.row, end.col - 1)
        self.editor.delete_range(Range(range_.start, end, range_.inclusive))

    def _normal_mode(self, code: int) -> None:
        action = self._normal.get(code)
        if action is not None:
            action()
            return
        range_ = self.handle_motion(code, self.editor.cursor.pos())
        self.editor.cursor.move(range_.end)

    def _insert_mode(self, code: int, special: bool) -> None:
        editor = self.editor
        if special:
            action = {
                curses.KEY_END: editor.line_end,
                curses.KEY_HOME: editor.line_start,
                curses.KEY_BACKSPACE: editor.backspace,
                curses.KEY_LEFT: lambda: self._move_by(editor.motions.left),
                NEWLINE: editor.newline,
                curses.KEY_RIGHT: lambda: self._move_by(editor.motions.right),
                curses.KEY_UP: lambda: self._move_by(editor.motions.up),
                curses.KEY_DOWN: lambda: self._move_by(editor.motions.down),
            }.get(code)
        else:
            action = {
                ESCAPE: editor.leave_insert,
                NEWLINE: editor.newline,
            }.get(code)

        if action is not None:
            action()
            return
        editor.insert_character(code)

    def _move_by(self, motion: Callable[[Pos], Range]) -> None:
        cursor = self.editor.cursor
        cursor.move(motion(cursor.pos()).end)

    def _prompt_mode(self, code: int, special: bool) -> None:
        editor = self.editor
        state = editor.state
        if state.mode is EditorMode.COMMAND:
            line = editor.command.line
        elif state.mode is EditorMode.SEARCH:
            line = editor.search
        else:
            return

        if code == ESCAPE:
            state.mode = EditorMode.NORMAL
            line.clear()
        elif code == curses.KEY_BACKSPACE:
            line.backspace()
        elif code == NEWLINE:
            state.mode = EditorMode.NORMAL
            if line is editor.command.line:
                editor.command.run(editor.buffer, state)
        elif not special:
            line.insert_char(code)

    def _enter_command(self) -> None:
        self.editor.state.mode = EditorMode.COMMAND

    def _enter_search(self) -> None:
        self.editor.state.mode = EditorMode.SEARCH
        self.editor.search.clear()

    def _replace(self) -> None:
        self.editor.replace(self._wait_for_key())

    def _load(self) -> None:
        try:
            load_into_buffer(self.path, self.editor.buffer)
        except OSError as exc:
            self.editor.state.log(f"load failed: {exc}")

    def _save(self) -> None:
        try:
            save_from_buffer(self.path, self.editor.buffer)
        except OSError as exc:
            self.editor.state.log(f"save failed: {exc}")