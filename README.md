# lifeparent

This package plays Conway's Game of Life in both directions in your terminal.

- `lifeparent` takes a pattern and runs time **backwards**. For each frame it
  searches for a parent generation and draws it. A parent generation is a grid
  that turns into the current grid after one step.
- `lifeparent-sim` runs the same pattern **forwards** under the usual rules
  until you stop it.

Both commands need standard output to be a terminal, because they size the
field to match it. If standard output is not a terminal, they print an error
and exit with status 1.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Pattern files

A pattern is a plain text file with one row of the grid per line. A `*` is a
live cell and any other character is a dead cell. Rows that are shorter than
the longest row are padded with dead cells.

```
.....
..*..
...*.
.***.
.....
```

The pattern is placed in the centre of a field the size of your terminal. If
the pattern is larger than the terminal, the parts that do not fit are cropped.

## Running backwards

```
lifeparent glider.txt 5
```

The first argument is the pattern file. The second is the number of parent
generations to find, and it must be a non-negative integer. Cells beyond the
edge of the field count as dead. On each frame the command prints a progress
line for each stage ("building constraints...", "solving...", "building
parent grid..."). It then redraws only the cells that changed. When all frames
are done it prints `finished simulation!`.

Some patterns have no parent at all; these are known as Gardens of Eden. If no
parent can be found, the command prints
`could not find parent grid, simulation failed...` to standard error and exits
with status 1.

A wrong number of arguments, a file that cannot be read, or an invalid frame
count also ends the command with status 1.

## Running forwards

```
lifeparent-sim glider.txt
```

The field advances one generation every 0.1 seconds. Cells beyond the edge
count as dead. Press Ctrl+C to stop, which exits with status 130.

## Using the library

```python
from lifeparent.grid import Coord, Grid, load_grid
from lifeparent.csp import find_parent_grid

grid = load_grid("glider.txt")
after = grid.step()

parent = find_parent_grid(after)
if parent is not None:
    assert parent.step() == after

blank = Grid.blank(Coord(10, 5))   # 10 columns, 5 rows, all dead
```

The package contains these modules:

- `lifeparent.grid` provides the following:
  - `Grid` holds rows of `0`/`1` cells. It has `Grid.blank(size)`, the `size`
    property, `copy()`, `step()` and `compress_neighbors(coord)`.
  - `Coord` holds a column `x` and a row `y`.
  - `CellState` has the members `DEAD`, `ALIVE` and `UNKNOWN`.
  - `load_grid(path)` reads a pattern file.
  - `decode_neighbor_bit(bit, origin)` maps a bit of a packed neighbourhood
    byte to a position.
  - `next_state(neighbors, alive)` applies the Life rule.
- `lifeparent.csp` provides `find_parent_grid(grid, progress=None)`, which
  returns a predecessor `Grid` or `None`. If you pass `progress`, it is called
  with a short message as each stage starts. The module also provides
  `generate_combinations()`, which groups all 256 neighbourhood bytes by the
  transition they cause, and `neighbor_state_on_board(size, position, state)`.
- `lifeparent.display` provides `copy_into_center(dest, src)` and
  `draw_grid(current, previous, term, force_alive=False, out=None)`. The
  `draw_grid` function writes only the cells that differ from `previous` and
  records them there.
- `lifeparent.screen` provides `terminal_size(stream=None)`,
  `clear_screen(out=None)` and `cursor_move(coord, out=None)`.
- `lifeparent.simulator` provides
  `run(grid, term, out=None, steps=None, delay=0.1)`, which animates a pattern
  for a given number of generations, or forever when `steps` is `None`.
- `lifeparent.arraylist` provides `ArrayList`, a list with an optional
  three-way `comparator` and a `swap_updater` hook. The hook is called with
  each moved item and its new index when `swap()` runs.
- `lifeparent.priority` provides max-heap operations on an `ArrayList` that
  has a comparator: `heap_insert`, `heap_extract_max`, `build_max_heap`,
  `heapsort` (which sorts into increasing order) and `heap_update_index`.

## Limitations

The parent search is a plain backtracking search written in Python, and it
covers the whole terminal-sized field. On large fields, or on patterns with no
parent, it can take a very long time. It finds one parent and does not list
the others, and it never searches beyond the edge of the field.