# tests/test_mazes.py
import random
from collections import deque

import pytest

from pathgrid.core.grid import Grid
from pathgrid.core.mazes import generate_dfs_maze, generate_recursive_division, generate_spiral

GENERATORS = [generate_dfs_maze, generate_spiral, generate_recursive_division]


class _LowestChoice:
    """Stand-in random source that always takes the smallest option."""

    def randint(self, a, b):
        return a

    def choice(self, seq):
        return seq[0]


def _reachable(grid, origin):
    seen = {origin}
    q = deque([origin])
    while q:
        cell = grid.cell(*q.popleft())
        for n in grid.neighbors(cell):
            if not n.is_wall and n.pos not in seen:
                seen.add(n.pos)
                q.append(n.pos)
    return seen


def _open_cells(grid):
    return {c.pos for c in grid.cells if not c.is_wall}


@pytest.mark.parametrize("gen", GENERATORS)
@pytest.mark.parametrize("seed", range(25))
def test_generators_never_wall_start_or_end(gen, seed):
    rnd = random.Random(seed)
    rows, cols = rnd.randint(5, 14), rnd.randint(5, 14)
    start = (rnd.randrange(rows), rnd.randrange(cols))
    end = (rnd.randrange(rows), rnd.randrange(cols))
    grid = Grid(rows, cols, start, end)

    gen(grid, random.Random(seed * 7 + 1))
    assert not grid.start_cell.is_wall
    assert not grid.end_cell.is_wall


@pytest.mark.parametrize("gen", GENERATORS)
@pytest.mark.parametrize("size", [(1, 1), (1, 5), (2, 2), (3, 3), (2, 7)])
def test_degenerate_grids_do_not_fail(gen, size):
    grid = Grid(*size)
    gen(grid, random.Random(0))
    assert not grid.start_cell.is_wall
    assert not grid.end_cell.is_wall


@pytest.mark.parametrize("seed", range(10))
def test_dfs_maze_opens_every_lattice_cell_and_stays_connected(seed):
    grid = Grid(11, 15, start=(1, 1), end=(9, 13))
    generate_dfs_maze(grid, random.Random(seed))

    for cell in grid.cells:
        on_lattice = (cell.row - 1) % 2 == 0 and (cell.col - 1) % 2 == 0
        if on_lattice:
            assert not cell.is_wall, cell
        elif cell.row % 2 == 0 and cell.col % 2 == 0:
            assert cell.is_wall, cell  # never a lattice cell nor a midpoint

    assert _reachable(grid, grid.start) == _open_cells(grid)


def test_dfs_maze_walls_everything_else_first():
    grid = Grid(5, 5, start=(0, 0), end=(4, 4))
    generate_dfs_maze(grid, _LowestChoice())
    # lattice from (0, 0): even rows and cols; midpoints are the only other open cells
    for cell in grid.cells:
        if cell.row % 2 == 1 and cell.col % 2 == 1:
            assert cell.is_wall
    assert _reachable(grid, grid.start) == _open_cells(grid)


def test_spiral_rings_on_7x7():
    grid = Grid(7, 7, start=(0, 0), end=(6, 6))
    generate_spiral(grid)

    expected = {(1, c) for c in range(1, 6)}
    expected |= {(r, 5) for r in range(1, 6)}
    expected |= {(5, c) for c in range(1, 6)}
    expected |= {(r, 1) for r in range(3, 6)}
    expected.add((3, 3))
    assert set(grid.wall_positions()) == expected
    assert _reachable(grid, grid.start) == _open_cells(grid)


def test_spiral_clears_around_endpoints():
    grid = Grid(9, 9, start=(1, 1), end=(4, 4))
    generate_spiral(grid)
    for pos in (grid.start, grid.end):
        for n in grid.neighbors(grid.cell(*pos)):
            assert not n.is_wall


def test_recursive_division_9x9_is_connected():
    grid = Grid(9, 9, start=(0, 0), end=(8, 8))
    generate_recursive_division(grid, _LowestChoice())

    expected = {(r, 2) for r in range(2, 8)}
    expected |= {(2, c) for c in range(4, 8)}
    expected |= {(r, 4) for r in range(4, 8)}
    expected |= {(4, 6), (4, 7), (6, 6), (7, 6)}
    assert set(grid.wall_positions()) == expected
    assert _reachable(grid, grid.start) == _open_cells(grid)


def test_recursive_division_leaves_border_open():
    grid = Grid(12, 16, start=(0, 0), end=(11, 15))
    generate_recursive_division(grid, random.Random(5))
    for cell in grid.cells:
        if cell.row in (0, 11) or cell.col in (0, 15):
            assert not cell.is_wall


def test_recursive_division_skips_endpoints_on_wall_line():
    # first vertical wall lands on column 2 and would cross (3, 2)
    grid = Grid(9, 9, start=(3, 2), end=(8, 8))
    generate_recursive_division(grid, _LowestChoice())
    assert not grid.is_wall(3, 2)
    assert grid.is_wall(2, 2)
