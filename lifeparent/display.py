"""Placing a pattern on the screen-sized field and redrawing changed cells."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .grid import Coord, Grid
from .screen import cursor_move


def copy_into_center(dest: Grid, src: Grid) -> None:
    """Copy ``src`` into the middle of ``dest`` in place, cropping what overflows."""
    dsize, ssize = dest.size, src.size
    row_offset = (dsize.y - ssize.y) // 2 if dsize.y > ssize.y else 0
    col_offset = (dsize.x - ssize.x) // 2 if dsize.x > ssize.x else 0
    for src_row, dest_row in zip(src.cells, dest.cells[row_offset:]):
        width = min(ssize.x, dsize.x - col_offset)
        dest_row[col_offset:col_offset + width] = src_row[:width]


def draw_grid(
    current: Grid,
    previous: Grid,
    term: Coord,
    force_alive: bool = False,
    out: Optional[TextIO] = None,
) -> None:
    """Redraw every cell that differs from ``previous`` and record it there.

    With ``force_alive`` every live cell is drawn even when unchanged.  Cells
    outside ``term`` are left alone.
    """
    out = sys.stdout if out is None else out
    for y, (row, old_row) in enumerate(zip(current.cells[: term.y], previous.cells)):
        for x, (cell, old) in enumerate(zip(row[: term.x], old_row)):
            if cell != old or (force_alive and cell > 0):
                cursor_move(Coord(x, y), out)
                out.write("*" if cell else " ")
                old_row[x] = cell
    out.flush()