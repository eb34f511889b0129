import pytest

from modaledit.buffer import Buffer
from modaledit.command import COMMANDS, CommandPrompt, match_command
from modaledit.state import State


@pytest.mark.parametrize(
    "text, expected",
    [
        ("w", "write"),
        ("wr", "write"),
        ("write", "write"),
        ("ed", "edit"),
        ("edit", "edit"),
    ],
)
def test_match_command_abbreviations(text, expected):
    assert match_command(text, COMMANDS).name == expected


@pytest.mark.parametrize("text", ["", "e", "editx", "writer", "zz"])
def test_match_command_rejects(text):
    assert match_command(text, COMMANDS) is None


def typed(prompt, text):
    for ch in text:
        prompt.line.insert_char(ch)
    return prompt


def test_write_saves_buffer(tmp_path):
    path = tmp_path / "out.txt"
    prompt = typed(CommandPrompt(path=path), "write")
    state = State()
    prompt.run(Buffer(["a", "b"]), state)
    assert path.read_bytes() == b"a\nb"
    assert state.log_message == "Ran 'write'"


def test_edit_loads_file(tmp_path):
    path = tmp_path / "in.txt"
    path.write_bytes(b"x\ny\n")
    prompt = typed(CommandPrompt(path=path), "ed")
    buffer = Buffer()
    state = State()
    prompt.run(buffer, state)
    assert buffer.lines == [b"x", b"y"]
    assert state.log_message == "Ran 'edit'"


def test_unknown_command_is_reported(tmp_path):
    prompt = typed(CommandPrompt(path=tmp_path / "x"), "zz")
    state = State()
    prompt.run(Buffer(), state)
    assert state.log_message == "Command not found: zz"


def test_failed_edit_is_reported(tmp_path):
    prompt = typed(CommandPrompt(path=tmp_path / "missing.txt"), "edit")
    state = State()
    buffer = Buffer(["keep"])
    prompt.run(buffer, state)
    assert state.log_message.startswith("edit failed")
    assert buffer.lines == [b"keep"]