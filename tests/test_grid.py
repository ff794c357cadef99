# tests/test_grid.py
import pytest

from pathgrid.core.grid import Grid


def test_cells_are_row_major_arena():
    grid = Grid(3, 4)
    assert len(grid.cells) == 12
    cell = grid.cell(2, 1)
    assert (cell.row, cell.col) == (2, 1)
    assert cell.index == 2 * 4 + 1
    assert grid.cell_at(cell.index) is cell


def test_default_endpoints_are_opposite_corners():
    grid = Grid(5, 6)
    assert grid.start == (0, 0)
    assert grid.end == (4, 5)


def test_neighbors_order_up_right_down_left():
    grid = Grid(5, 5)
    got = [c.pos for c in grid.neighbors(grid.cell(2, 2))]
    assert got == [(1, 2), (2, 3), (3, 2), (2, 1)]


def test_neighbors_stay_in_bounds_at_corners():
    grid = Grid(5, 5)
    assert [c.pos for c in grid.neighbors(grid.cell(0, 0))] == [(0, 1), (1, 0)]
    assert [c.pos for c in grid.neighbors(grid.cell(4, 4))] == [(3, 4), (4, 3)]
    one = Grid(1, 1)
    assert one.neighbors(one.cell(0, 0)) == []


def test_set_wall_ignores_start_end_and_out_of_bounds():
    grid = Grid(5, 5, start=(1, 1), end=(3, 3))
    grid.set_wall(1, 1, True)
    grid.set_wall(3, 3, True)
    grid.set_wall(-1, 0, True)
    grid.set_wall(0, 5, True)
    assert grid.wall_positions() == []

    grid.set_wall(2, 2, True)
    assert grid.is_wall(2, 2)
    grid.set_wall(2, 2, False)
    assert not grid.is_wall(2, 2)


def test_move_endpoints_rejects_walls_and_each_other():
    grid = Grid(5, 5, start=(0, 0), end=(4, 4))
    grid.set_wall(2, 2, True)

    assert not grid.move_start(2, 2)
    assert not grid.move_start(4, 4)
    assert not grid.move_end(0, 0)
    assert not grid.move_end(9, 9)
    assert grid.start == (0, 0) and grid.end == (4, 4)

    assert grid.move_start(1, 0)
    assert grid.move_end(3, 4)
    assert grid.start == (1, 0) and grid.end == (3, 4)


def test_reset_search_state_keeps_walls():
    grid = Grid(5, 5)
    grid.set_wall(1, 1, True)
    cell = grid.cell(2, 2)
    cell.is_visited = True
    cell.previous = 3
    cell.g_cost = 4
    cell.f_cost = 7

    grid.reset_search_state()
    assert grid.is_wall(1, 1)
    assert not cell.is_visited
    assert cell.previous is None
    assert cell.g_cost == float("inf") and cell.f_cost == float("inf")


def test_reset_walls_clears_walls_and_search_state():
    grid = Grid(5, 5)
    grid.set_wall(1, 1, True)
    grid.cell(2, 2).is_visited = True
    grid.reset_walls()
    assert grid.wall_positions() == []
    assert not grid.cell(2, 2).is_visited


def test_resize_clamps_endpoints_and_reallocates():
    grid = Grid(15, 30, start=(5, 5), end=(5, 25))
    grid.set_wall(0, 0, True)
    old = grid.cell(1, 1)

    grid.resize(5, 10)
    assert (grid.rows, grid.cols) == (5, 10)
    assert grid.start == (4, 5)
    assert grid.end == (4, 9)
    assert grid.wall_positions() == []
    assert grid.cell(1, 1) is not old


def test_resize_keeps_endpoints_distinct():
    grid = Grid(15, 30, start=(10, 20), end=(12, 25))
    grid.resize(5, 5)
    assert grid.start == (4, 4)
    assert grid.end != grid.start
    assert grid.in_bounds(*grid.end)


def test_resize_rejects_empty_grid():
    grid = Grid(5, 5)
    with pytest.raises(ValueError):
        grid.resize(0, 5)


def test_wall_matrix_snapshot():
    grid = Grid(2, 3, start=(0, 0), end=(1, 2))
    grid.set_wall(0, 1, True)
    assert grid.wall_matrix() == [[False, True, False], [False, False, False]]
