"""Search for a predecessor generation of a Game of Life grid."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from functools import lru_cache
from types import MappingProxyType
from typing import Optional

from .grid import Coord, Grid, decode_neighbor_bit, next_state

Progress = Callable[[str], None]


@lru_cache(maxsize=None)
def generate_combinations() -> Mapping[tuple[bool, bool], tuple[int, ...]]:
    """Group every packed neighbourhood by the transition it causes.

    The key is ``(alive_now, alive_before)``; the value holds each neighbour
    byte that turns a cell that was ``alive_before`` into ``alive_now``.
    """
    table: dict[tuple[bool, bool], list[int]] = {
        (now, before): [] for now in (False, True) for before in (False, True)
    }
    for state in range(256):
        for before in (False, True):
            table[(next_state(state, before), before)].append(state)
    return MappingProxyType({key: tuple(states) for key, states in table.items()})


@lru_cache(maxsize=None)
def _allowed_counts() -> Mapping[tuple[bool, bool], frozenset[int]]:
    return MappingProxyType(
        {
            key: frozenset(bin(state).count("1") for state in states)
            for key, states in generate_combinations().items()
        }
    )


def neighbor_state_on_board(size: Coord, position: Coord, state: int) -> bool:
    """Tell whether every live neighbour in ``state`` lies inside the board."""
    for bit in range(8):
        if state >> bit & 1:
            p = decode_neighbor_bit(bit, position)
            if not (0 <= p.x < size.x and 0 <= p.y < size.y):
                return False
    return True


def _neighbour_indices(width: int, height: int) -> list[list[int]]:
    origin = Coord(0, 0)
    offsets = [decode_neighbor_bit(bit, origin) for bit in range(8)]
    return [
        [
            (y + d.y) * width + (x + d.x)
            for d in offsets
            if 0 <= x + d.x < width and 0 <= y + d.y < height
        ]
        for y in range(height)
        for x in range(width)
    ]


def find_parent_grid(grid: Grid, progress: Optional[Progress] = None) -> Optional[Grid]:
    """Return a grid whose next generation is ``grid``, or None if there is none.

    Cells beyond the edge are taken as dead.  ``progress`` is called with a
    short message as each stage starts.
    """
    report = progress if progress is not None else (lambda message: None)
    width, height = grid.size.x, grid.size.y
    count = width * height

    report("building constraints")
    allowed = _allowed_counts()
    neighbours = _neighbour_indices(width, height)
    target = [cell > 0 for row in grid.cells for cell in row]
    live = [0] * count
    unknown = [len(nb) for nb in neighbours]
    value: list[Optional[bool]] = [None] * count

    def feasible(t: int) -> bool:
        centres = (False, True) if value[t] is None else (value[t],)
        low, high = live[t], live[t] + unknown[t]
        return any(
            low <= k <= high for c in centres for k in allowed[(target[t], c)]
        )

    def assign(i: int, alive: bool) -> None:
        value[i] = alive
        for t in neighbours[i]:
            unknown[t] -= 1
            live[t] += alive

    def unassign(i: int) -> None:
        alive = value[i]
        for t in neighbours[i]:
            unknown[t] += 1
            live[t] -= alive
        value[i] = None

    report("solving")
    tried = [0] * count
    i = 0
    while 0 <= i < count:
        if value[i] is not None:
            unassign(i)
        if tried[i] == 2:
            tried[i] = 0
            i -= 1
            continue
        alive = tried[i] == 1
        tried[i] += 1
        assign(i, alive)
        if feasible(i) and all(feasible(t) for t in neighbours[i]):
            i += 1

    if i < 0:
        report("no parent grid")
        return None

    report("building parent grid")
    cells = [
        [int(bool(value[y * width + x])) for x in range(width)] for y in range(height)
    ]
    return Grid(cells, width)