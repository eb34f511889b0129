"""The ':' command prompt and its table of commands."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Iterable

from .buffer import Buffer
from .files import DEFAULT_PATH, load_into_buffer, save_from_buffer
from .linebuffer import LineBuffer
from .state import State


@dataclass(frozen=True)
class Command:
    """A named command; ``min_abb`` is the shortest accepted abbreviation."""

    name: str
    min_abb: int
    run: Callable[["CommandPrompt", Buffer, State], None]


def match_command(text: str, commands: Iterable[Command]) -> Command | None:
    """The first command that ``text`` abbreviates, or ``None``."""
    if not text:
        return None
    for command in commands:
        if len(text) >= command.min_abb and command.name.startswith(text):
            return command
    return None


def _edit(prompt: "CommandPrompt", buffer: Buffer, state: State) -> None:
    load_into_buffer(prompt.path, buffer)
    state.log(f"SAVED {prompt.line.text()}")


def _write(prompt: "CommandPrompt", buffer: Buffer, state: State) -> None:
    save_from_buffer(prompt.path, buffer)


COMMANDS = (
    Command("edit", 2, _edit),
    Command("write", 1, _write),
)


class CommandPrompt:
    """The text typed at the command prompt and the commands it can run."""

    def __init__(
        self,
        path: str | os.PathLike[str] = DEFAULT_PATH,
        commands: Iterable[Command] = COMMANDS,
    ) -> None:
        self.path = path
        self.commands = tuple(commands)
        self.line = LineBuffer()

    def run(self, buffer: Buffer, state: State) -> None:
        """Run the command named by the prompt text, reporting in the status message."""
        text = self.line.text()
        command = match_command(text, self.commands)
        if command is None:
            state.log(f"Command not found: {text}")
            return
        try:
            command.run(self, buffer, state)
        except OSError as exc:
            state.log(f"{command.name} failed: {exc}")
            return
        state.log(f"Ran '{command.name}'")