# pathgrid/core/path.py
#!/usr/bin/env python3
from typing import List

from pathgrid.core.grid import Grid
from pathgrid.core.types import Cell


def reconstruct_path(grid: Grid, end: Cell) -> List[Cell]:
    """Follow `previous` links from `end` to the first cell without one; returns start-first order."""
    path: List[Cell] = []
    cur = end
    while cur is not None:
        path.append(cur)
        cur = grid.cell_at(cur.previous) if cur.previous is not None else None
    path.reverse()
    return path


def path_succeeded(path: List[Cell], start: Cell, end: Cell) -> bool:
    """A chain only counts as a path if it is rooted at start and the search really settled end."""
    return bool(path) and path[0] is start and not end.is_wall and end.is_visited


def extract_path(grid: Grid, start: Cell, end: Cell) -> List[Cell]:
    path = reconstruct_path(grid, end)
    return path if path_succeeded(path, start, end) else []
