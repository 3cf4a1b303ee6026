"""Terminal queries and ANSI escape sequences used to draw the board."""

from __future__ import annotations

import os
import sys
from typing import Optional, TextIO

from .grid import Coord

CLEAR_SCREEN = "\033[2J"


def terminal_size(stream: Optional[TextIO] = None) -> Coord:
    """Return the size of the terminal behind ``stream`` as columns and rows.

    Raises OSError when ``stream`` is not attached to a terminal.
    """
    stream = sys.stdout if stream is None else stream
    try:
        fd = stream.fileno()
    except (OSError, ValueError, AttributeError) as exc:
        raise OSError(f"stream has no terminal to query: {exc}") from exc
    size = os.get_terminal_size(fd)
    return Coord(size.columns, size.lines)


def clear_screen(out: Optional[TextIO] = None) -> None:
    """Write the escape sequence that clears the whole screen."""
    (sys.stdout if out is None else out).write(CLEAR_SCREEN)


def cursor_move(coord: Coord, out: Optional[TextIO] = None) -> None:
    """Move the cursor to the zero-based column ``coord.x`` and row ``coord.y``."""
    (sys.stdout if out is None else out).write(f"\033[{coord.y + 1};{coord.x + 1}H")