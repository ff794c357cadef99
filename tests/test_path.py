# tests/test_path.py
from pathgrid.core.bfs import BFSAlgo
from pathgrid.core.grid import Grid
from pathgrid.core.path import extract_path, path_succeeded, reconstruct_path


def _solved_grid():
    grid = Grid(5, 5, start=(0, 0), end=(0, 4))
    grid.set_wall(0, 2, True)
    algo = BFSAlgo()
    algo.init(grid)
    algo.run(grid.start_cell, grid.end_cell)
    return grid


def test_reconstruct_is_start_first_and_idempotent():
    grid = _solved_grid()
    first = reconstruct_path(grid, grid.end_cell)
    second = reconstruct_path(grid, grid.end_cell)
    assert first == second
    assert first[0] is grid.start_cell
    assert first[-1] is grid.end_cell
    assert len(first) == 7  # detour through row 1 around the wall


def test_extract_path_on_success():
    grid = _solved_grid()
    path = extract_path(grid, grid.start_cell, grid.end_cell)
    assert [c.pos for c in path] == [c.pos for c in reconstruct_path(grid, grid.end_cell)]


def test_partial_chain_not_rooted_at_start_is_discarded():
    grid = Grid(5, 5, start=(0, 0), end=(4, 4))
    end = grid.end_cell
    mid = grid.cell(4, 3)
    end.previous = mid.index
    end.is_visited = True

    chain = reconstruct_path(grid, end)
    assert [c.pos for c in chain] == [(4, 3), (4, 4)]
    assert not path_succeeded(chain, grid.start_cell, end)
    assert extract_path(grid, grid.start_cell, end) == []


def test_unvisited_end_is_not_a_path():
    grid = Grid(5, 5, start=(0, 0), end=(0, 1))
    end = grid.end_cell
    end.previous = grid.start_cell.index  # link present but search never settled end
    chain = reconstruct_path(grid, end)
    assert chain[0] is grid.start_cell
    assert not path_succeeded(chain, grid.start_cell, end)


def test_untouched_end_reconstructs_to_itself():
    grid = Grid(5, 5)
    assert reconstruct_path(grid, grid.end_cell) == [grid.end_cell]
    assert extract_path(grid, grid.start_cell, grid.end_cell) == []
