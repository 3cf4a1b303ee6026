"""Command that plays a Game of Life pattern forwards in the terminal."""

from __future__ import annotations

import itertools
import sys
import time
from typing import Optional, Sequence, TextIO

from .display import copy_into_center, draw_grid
from .grid import Coord, Grid, load_grid
from .screen import clear_screen, terminal_size

_PROG = "lifeparent-sim"


def run(
    grid: Grid,
    term: Coord,
    out: Optional[TextIO] = None,
    steps: Optional[int] = None,
    delay: float = 0.1,
) -> Grid:
    """Centre ``grid`` on a ``term``-sized field and animate it.

    Runs ``steps`` generations, or forever when ``steps`` is None, sleeping
    ``delay`` seconds before each one.  Returns the last field shown.
    """
    out = sys.stdout if out is None else out
    current = Grid.blank(term)
    copy_into_center(current, grid)
    previous = current.copy()

    clear_screen(out)
    draw_grid(current, current, term, True, out)
    generations = itertools.count() if steps is None else range(steps)
    for _ in generations:
        if delay > 0:
            time.sleep(delay)
        current = current.step()
        draw_grid(current, previous, term, False, out)
    return current


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Animate the pattern in ``inputfile`` until interrupted."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(f"Usage: {_PROG} inputfile", file=sys.stderr)
        return 1

    try:
        term = terminal_size()
    except OSError as exc:
        print(f"ioctl: {exc}", file=sys.stderr)
        return 1

    try:
        pattern = load_grid(args[0])
    except OSError as exc:
        print(f"fopen: {exc}", file=sys.stderr)
        return 1

    try:
        run(pattern, term, sys.stdout)
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())