"""Command that plays a Game of Life pattern backwards, one parent at a time."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .csp import find_parent_grid
from .display import copy_into_center, draw_grid
from .grid import Grid, load_grid
from .screen import clear_screen, terminal_size

_PROG = "lifeparent"


def _report(message: str) -> None:
    sys.stdout.write(f"{message}...\n")


def _error(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Show ``frames`` predecessor generations of the pattern in ``inputfile``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        return _error(f"Usage: {_PROG} inputfile frames")

    try:
        term = terminal_size()
    except OSError as exc:
        return _error(f"ioctl: {exc}")

    try:
        pattern = load_grid(args[0])
    except OSError as exc:
        return _error(f"fopen: {exc}")

    try:
        frames = int(args[1])
        if frames < 0:
            raise ValueError
    except ValueError:
        return _error(f"invalid frame count: {args[1]!r}")

    current = Grid.blank(term)
    copy_into_center(current, pattern)
    previous = current.copy()

    out = sys.stdout
    clear_screen(out)
    draw_grid(current, previous, term, True, out)
    for _ in range(frames):
        previous = current.copy()
        parent = find_parent_grid(current, progress=_report)
        if parent is None:
            return _error("could not find parent grid, simulation failed...")
        current = parent
        draw_grid(current, previous, term, False, out)

    print("finished simulation!")
    return 0


if __name__ == "__main__":
    sys.exit(main())