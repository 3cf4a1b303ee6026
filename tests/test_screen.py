import io
import os
from unittest import mock

import pytest

from lifeparent.grid import Coord
from lifeparent.screen import CLEAR_SCREEN, clear_screen, cursor_move, terminal_size


class _FakeTerminal:
    def fileno(self):
        return 1


def test_clear_screen_writes_escape_sequence():
    out = io.StringIO()
    clear_screen(out)
    assert out.getvalue() == "\033[2J"
    assert out.getvalue() == CLEAR_SCREEN


def test_cursor_move_origin_is_one_based():
    out = io.StringIO()
    cursor_move(Coord(0, 0), out)
    assert out.getvalue() == "\033[1;1H"


def test_cursor_move_puts_row_before_column():
    out = io.StringIO()
    cursor_move(Coord(4, 2), out)
    assert out.getvalue() == "\033[3;5H"


def test_cursor_moves_accumulate():
    out = io.StringIO()
    cursor_move(Coord(0, 0), out)
    cursor_move(Coord(0, 0), out)
    assert out.getvalue() == "\033[1;1H" * 2


def test_terminal_size_without_terminal_raises():
    with pytest.raises(OSError):
        terminal_size(io.StringIO())


@mock.patch("os.get_terminal_size", return_value=os.terminal_size((80, 24)))
def test_terminal_size_reports_columns_and_rows(fake_size):
    assert terminal_size(_FakeTerminal()) == Coord(80, 24)
    fake_size.assert_called_once_with(1)