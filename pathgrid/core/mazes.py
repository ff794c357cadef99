# pathgrid/core/mazes.py
#!/usr/bin/env python3
"""
Obstacle generators. Each one writes walls through Grid.set_wall only, so
start/end are never walled.

- generate_dfs_maze:        randomized depth-first carving on a 2-step lattice
- generate_spiral:          nested wall rings, then clears around start/end
- generate_recursive_division: straight walls with one gap, split and recurse

`rng` is anything with `randint(a, b)` and `choice(seq)`; the `random`
module is used when omitted.
"""

import logging
import random
from typing import List, Optional

from pathgrid.core.grid import DIRECTIONS, Grid
from pathgrid.core.types import Position

logger = logging.getLogger(__name__)

# left, right, up, down at lattice distance 2
LATTICE_STEPS = ((0, -2), (0, 2), (-2, 0), (2, 0))


def _lattice_neighbors(grid: Grid, pos: Position, visited: set) -> List[Position]:
    r, c = pos
    out: List[Position] = []
    for dr, dc in LATTICE_STEPS:
        nr, nc = r + dr, c + dc
        if grid.in_bounds(nr, nc) and (nr, nc) not in visited:
            out.append((nr, nc))
    return out


def generate_dfs_maze(grid: Grid, rng: Optional[random.Random] = None) -> None:
    rng = rng or random
    for cell in grid.cells:
        grid.set_wall(cell.row, cell.col, True)

    stack: List[Position] = [grid.start]
    visited = {grid.start}
    carved = 0

    while stack:
        cur = stack.pop()
        options = _lattice_neighbors(grid, cur, visited)
        if not options:
            continue  # dead end, backtrack
        stack.append(cur)
        nxt = rng.choice(options)
        grid.set_wall((cur[0] + nxt[0]) // 2, (cur[1] + nxt[1]) // 2, False)
        grid.set_wall(nxt[0], nxt[1], False)
        visited.add(nxt)
        stack.append(nxt)
        carved += 1

    logger.debug("dfs maze: carved %d lattice cells on %dx%d", carved, grid.rows, grid.cols)


def _clear_neighbors(grid: Grid, pos: Position) -> None:
    r, c = pos
    for dr, dc in DIRECTIONS:
        grid.set_wall(r + dr, c + dc, False)


def generate_spiral(grid: Grid, rng: Optional[random.Random] = None) -> None:
    """Rings shrink by 2 per lap; nothing guarantees the end is reachable."""
    r_start, r_end = 1, grid.rows - 2
    c_start, c_end = 1, grid.cols - 2

    while r_start <= r_end and c_start <= c_end:
        for c in range(c_start, c_end + 1):
            grid.set_wall(r_start, c, True)
        r_start += 2

        for r in range(r_start - 2, r_end + 1):
            grid.set_wall(r, c_end, True)
        c_end -= 2

        if r_start <= r_end:
            for c in range(c_end + 2, c_start - 1, -1):
                grid.set_wall(r_end, c, True)
            r_end -= 2

        if c_start <= c_end:
            for r in range(r_end + 2, r_start - 1, -1):
                grid.set_wall(r, c_start, True)
            c_start += 2

    _clear_neighbors(grid, grid.start)
    _clear_neighbors(grid, grid.end)
    logger.debug("spiral: %d walls on %dx%d", len(grid.wall_positions()), grid.rows, grid.cols)


def _divide(grid: Grid, rng, r_start: int, r_end: int, c_start: int, c_end: int) -> None:
    if r_end - r_start < 2 or c_end - c_start < 2:
        return

    if r_end - r_start > c_end - c_start:
        wall_r = rng.randint(r_start + 1, r_end - 1)
        gap_c = rng.randint(c_start, c_end)
        for c in range(c_start, c_end + 1):
            if c != gap_c:
                grid.set_wall(wall_r, c, True)
        _divide(grid, rng, r_start, wall_r - 1, c_start, c_end)
        _divide(grid, rng, wall_r + 1, r_end, c_start, c_end)
    else:
        wall_c = rng.randint(c_start + 1, c_end - 1)
        gap_r = rng.randint(r_start, r_end)
        for r in range(r_start, r_end + 1):
            if r != gap_r:
                grid.set_wall(r, wall_c, True)
        _divide(grid, rng, r_start, r_end, c_start, wall_c - 1)
        _divide(grid, rng, r_start, r_end, wall_c + 1, c_end)


def generate_recursive_division(grid: Grid, rng: Optional[random.Random] = None) -> None:
    """Divide the interior, leaving the one-cell border open."""
    _divide(grid, rng or random, 1, grid.rows - 2, 1, grid.cols - 2)
    logger.debug("recursive division: %d walls on %dx%d",
                 len(grid.wall_positions()), grid.rows, grid.cols)
