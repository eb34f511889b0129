"""Command-line entry point for the editor."""

from __future__ import annotations

import argparse
import curses
import locale
import sys

from .actions import Editor
from .buffer import Buffer
from .input import InputHandler
from .render import Renderer

_SAMPLE_LINES = (
    "loremipsumdolorsit aametloremipsumdolorsitametloremipsumdolo "
    "rsitametloremipsumdolorsitmetloremipsumdolorsitametoremips umdolorsitamet",
    "consectetur adipiscing elit",
    "",
    "",
    "tloremipsumdolorsit ametloremipsumdolorsit amet",
    "t",
    "ut enim ad minim veniamloremipsumdolorsit ametloremipsumdolorsit amet",
    "consectetur adipiscing elit",
    "",
    "",
    "t",
    "ut enim ad minim veniam",
    "ut enim ad minim veniam",
    "consectetur adipiscing elit",
    "",
    "",
    "t",
    "ut enim ad minim veniam",
    "ut enim ad minim veniam",
    "consectetur adipiscing elit",
    "t",
    "ut enim ad minim veniam",
    "ut enim ad minim veniam",
    "consectetur adipiscing elit",
    "",
    "",
    "t",
    "ut enim ad minim veniam",
    "ut enim ad minim veniam",
    "consectetur adipiscing elit",
)


def build_buffer() -> Buffer:
    """The buffer the editor starts with."""
    return Buffer(_SAMPLE_LINES)


def main(argv=None) -> int:
    """Run the editor until the user quits; return the exit status."""
    parser = argparse.ArgumentParser(prog="modaledit", description="A small modal text editor.")
    parser.parse_args(argv)

    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        pass

    editor = Editor(build_buffer())
    try:
        renderer = Renderer()
    except curses.error:
        print("failed to initialize renderer", file=sys.stderr)
        return 1

    editor.on_cursor_style = renderer.set_cursor_style
    editor.state.renderer = renderer
    handler = InputHandler(editor, renderer.get_input)
    try:
        renderer.draw(editor)
        while True:
            key, special = renderer.get_input()
            if handler.handle(key, special):
                break
            renderer.draw(editor)
    finally:
        renderer.shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())