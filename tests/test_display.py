import io

from lifeparent.display import copy_into_center, draw_grid
from lifeparent.grid import Coord, Grid
from lifeparent.screen import cursor_move


def _moves(*coords):
    out = io.StringIO()
    for coord in coords:
        cursor_move(coord, out)
    return out.getvalue()


def test_single_cell_lands_in_the_middle():
    dest = Grid.blank(Coord(5, 5))
    copy_into_center(dest, Grid([[1]]))
    alive = [(x, y) for y, row in enumerate(dest.cells) for x, c in enumerate(row) if c]
    assert alive == [(2, 2)]


def test_larger_source_is_cropped_from_top_left():
    dest = Grid.blank(Coord(2, 2))
    src = Grid([[1, 0, 1, 1], [0, 1, 1, 1], [1, 1, 1, 1], [1, 1, 1, 1]])
    copy_into_center(dest, src)
    assert dest.cells == [[1, 0], [0, 1]]
    assert dest.size == Coord(2, 2)


def test_copy_keeps_cells_outside_the_pattern():
    dest = Grid([[1, 1, 1], [1, 1, 1], [1, 1, 1]])
    copy_into_center(dest, Grid([[0]]))
    assert dest.cells == [[1, 1, 1], [1, 0, 1], [1, 1, 1]]


def test_draw_only_changed_cells_and_update_previous():
    current = Grid([[1, 0], [0, 0]])
    previous = Grid([[0, 0], [0, 0]])
    out = io.StringIO()
    draw_grid(current, previous, Coord(2, 2), False, out)
    assert out.getvalue() == _moves(Coord(0, 0)) + "*"
    assert previous.cells == current.cells


def test_draw_erases_dead_cells():
    current = Grid([[0, 0]])
    previous = Grid([[0, 1]])
    out = io.StringIO()
    draw_grid(current, previous, Coord(2, 1), False, out)
    assert out.getvalue() == _moves(Coord(1, 0)) + " "
    assert previous.cells == [[0, 0]]


def test_force_alive_draws_unchanged_live_cells():
    current = Grid([[1, 0, 1]])
    previous = current.copy()
    out = io.StringIO()
    draw_grid(current, previous, Coord(3, 1), True, out)
    assert out.getvalue() == _moves(Coord(0, 0)) + "*" + _moves(Coord(2, 0)) + "*"


def test_nothing_drawn_when_unchanged():
    current = Grid([[1, 1], [0, 1]])
    previous = current.copy()
    out = io.StringIO()
    draw_grid(current, previous, Coord(2, 2), False, out)
    assert out.getvalue() == ""


def test_cells_beyond_terminal_are_not_drawn():
    current = Grid([[0, 1], [1, 1]])
    previous = Grid([[0, 0], [0, 0]])
    out = io.StringIO()
    draw_grid(current, previous, Coord(1, 1), False, out)
    assert out.getvalue() == ""
    assert previous.cells == [[0, 0], [0, 0]]