"""Game of Life grids: loading, stepping and neighbourhood encoding."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Optional, Union

_ALIVE_CHAR = ord("*")

# Neighbour offsets (dx, dy) indexed by bit number.  Bit 7 is the
# top-left neighbour; columns are walked left to right, rows top to bottom.
_NEIGHBOR_OFFSETS = {
    7: (-1, -1),
    6: (-1, 0),
    5: (-1, 1),
    4: (0, -1),
    3: (0, 1),
    2: (1, -1),
    1: (1, 0),
    0: (1, 1),
}


@dataclass(frozen=True)
class Coord:
    """A position or a size: ``x`` is the column, ``y`` the row."""

    x: int
    y: int


class CellState(IntEnum):
    DEAD = 0
    ALIVE = 1
    UNKNOWN = 2


@dataclass
class Grid:
    """A rectangular field of cells, stored row by row."""

    cells: list[list[int]]
    width: Optional[int] = field(default=None)

    def __post_init__(self) -> None:
        if self.width is None:
            self.width = len(self.cells[0]) if self.cells else 0
        if any(len(row) != self.width for row in self.cells):
            raise ValueError("all rows of a grid must have the same width")

    @classmethod
    def blank(cls, size: Coord) -> "Grid":
        """Create a grid of the given size with every cell dead."""
        if size.x < 0 or size.y < 0:
            raise ValueError("grid size must not be negative")
        return cls([[CellState.DEAD] * size.x for _ in range(size.y)], size.x)

    @property
    def size(self) -> Coord:
        return Coord(self.width, len(self.cells))

    def copy(self) -> "Grid":
        return Grid([list(row) for row in self.cells], self.width)

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < len(self.cells)

    def _alive(self, x: int, y: int) -> bool:
        return self._in_bounds(x, y) and self.cells[y][x] > 0

    def step(self) -> "Grid":
        """Return the next generation; cells beyond the edge count as dead."""
        rows = []
        for y, row in enumerate(self.cells):
            new_row = []
            for x, cell in enumerate(row):
                live = sum(
                    self._alive(x + dx, y + dy) for dx, dy in _NEIGHBOR_OFFSETS.values()
                )
                if cell > 0:
                    alive = 2 <= live < 4
                else:
                    alive = live == 3
                new_row.append(int(alive))
            rows.append(new_row)
        return Grid(rows, self.width)

    def compress_neighbors(self, coordinate: Coord) -> int:
        """Pack the eight neighbours of ``coordinate`` into one byte.

        Bit ``b`` is set when the neighbour returned by
        ``decode_neighbor_bit(b, coordinate)`` is on the grid and alive.
        """
        result = 0
        for bit, (dx, dy) in _NEIGHBOR_OFFSETS.items():
            if self._alive(coordinate.x + dx, coordinate.y + dy):
                result |= 1 << bit
        return result


def _parse_rows(lines: list[bytes]) -> Grid:
    width = max((len(line) for line in lines), default=0)
    cells = [
        [1 if ch == _ALIVE_CHAR else 0 for ch in line] + [0] * (width - len(line))
        for line in lines
    ]
    return Grid(cells, width)


def load_grid(path: Union[str, os.PathLike]) -> Grid:
    """Read a grid from a text file where ``*`` marks a live cell.

    Each line is a row; shorter rows are padded with dead cells.
    """
    data = Path(path).read_bytes()
    lines = data.split(b"\n")
    if lines and lines[-1] == b"":
        lines.pop()
    return _parse_rows(lines)


def decode_neighbor_bit(bit: int, origin: Coord) -> Coord:
    """Return the position of the neighbour of ``origin`` that ``bit`` stands for."""
    try:
        dx, dy = _NEIGHBOR_OFFSETS[bit]
    except KeyError:
        raise ValueError(f"neighbour bit must be in 0..7, got {bit}") from None
    return Coord(origin.x + dx, origin.y + dy)


def next_state(neighbors: int, alive: bool) -> bool:
    """Decide whether a cell lives given its packed neighbours and its state."""
    count = bin(neighbors & 0xFF).count("1")
    if alive:
        return count in (2, 3)
    return count == 3