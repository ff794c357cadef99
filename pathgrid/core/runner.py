# pathgrid/core/runner.py
#!/usr/bin/env python3
"""
Caller-side glue between the grid, the strategies and the generators.

    result = run_search(grid, "astar")
    walls  = run_generator(grid, "recursive")

`run_search` resets search state, runs one strategy, rebuilds the path and
packages positions + metrics for a renderer. `run_generator` resets the
board first, like picking a pattern from the maze menu.
"""

import logging
import random
from typing import Callable, Dict, List, Optional

from pathgrid.core.astar import AStarAlgo
from pathgrid.core.bfs import BFSAlgo
from pathgrid.core.dfs import DFSAlgo
from pathgrid.core.grid import Grid
from pathgrid.core.mazes import generate_dfs_maze, generate_recursive_division, generate_spiral
from pathgrid.core.path import extract_path
from pathgrid.core.types import SearchResult

logger = logging.getLogger(__name__)

ALGORITHMS: Dict[str, Callable] = {
    "bfs": BFSAlgo,
    "dfs": DFSAlgo,
    "astar": AStarAlgo,
}

GENERATORS: Dict[str, Callable[..., None]] = {
    "random": generate_dfs_maze,
    "spiral": generate_spiral,
    "recursive": generate_recursive_division,
}


def make_algo(key: str):
    try:
        algo_cls = ALGORITHMS[key]
    except KeyError:
        raise ValueError(f"unknown algorithm {key!r}; expected one of {sorted(ALGORITHMS)}") from None
    return algo_cls()


def run_search(grid: Grid, key: str) -> SearchResult:
    algo = make_algo(key)
    grid.reset_search_state()
    algo.init(grid)

    start, end = grid.start_cell, grid.end_cell
    trace = algo.run(start, end)
    path = extract_path(grid, start, end)

    result = SearchResult(
        status="done" if path else "no_path",
        trace=[c.pos for c in trace],
        path=[c.pos for c in path],
        metrics=_metrics(algo.name, len(trace), len(path)),
    )
    logger.info("%s %s -> %s: visited=%d path_len=%s",
                algo.name, grid.start, grid.end, result.visited_count, result.path_length_label())
    return result


def _metrics(name: str, visited: int, path_len: int) -> dict:
    return {
        "algo": name,
        "visited": visited,
        "path_len": path_len,
        "steps": max(0, path_len - 1),
    }


def run_generator(grid: Grid, key: Optional[str], rng: Optional[random.Random] = None) -> List[List[bool]]:
    """Reset the board and apply a generator; `None`, "" or "none" leaves the board untouched."""
    if not key or key == "none":
        return grid.wall_matrix()
    if key not in GENERATORS:
        raise ValueError(f"unknown generator {key!r}; expected one of {sorted(GENERATORS)}")
    grid.reset_walls()
    GENERATORS[key](grid, rng)
    logger.info("generator %s placed %d walls", key, len(grid.wall_positions()))
    return grid.wall_matrix()
