import curses
from unittest import mock

import pytest

from modaledit.app import build_buffer, main


def test_build_buffer_line_count():
    assert build_buffer().line_count == 30


def test_build_buffer_contents():
    lines = build_buffer().lines
    assert lines[0].startswith(b"loremipsumdolorsit aamet")
    assert lines[1] == b"consectetur adipiscing elit"
    assert lines[2] == b""
    assert lines[16] == b"t"
    assert lines[-1] == b"consectetur adipiscing elit"


def test_build_buffer_is_fresh_each_time():
    first = build_buffer()
    first.delete_line(0)
    assert build_buffer().line_count == first.line_count + 1


def test_main_rejects_arguments():
    with pytest.raises(SystemExit):
        main(["unexpected"])


def test_main_reports_renderer_failure(capsys):
    with mock.patch("curses.initscr", side_effect=curses.error("no terminal")):
        status = main([])
    assert status == 1
    assert "failed to initialize renderer" in capsys.readouterr().err