# tests/test_runner.py
import random

import pytest

from pathgrid.core.catalog import ALGO_INFO
from pathgrid.core.grid import Grid
from pathgrid.core.runner import ALGORITHMS, GENERATORS, run_generator, run_search


def test_run_search_packages_positions_and_metrics():
    grid = Grid(5, 5, start=(0, 0), end=(4, 4))
    result = run_search(grid, "bfs")

    assert result.success
    assert result.status == "done"
    assert result.trace[0] == (0, 0) and result.trace[-1] == (4, 4)
    assert result.path[0] == (0, 0) and result.path[-1] == (4, 4)
    assert result.metrics == {"algo": "BFS", "visited": 25, "path_len": 9, "steps": 8}
    assert result.path_length_label() == "9"


@pytest.mark.parametrize("key", sorted(ALGORITHMS))
def test_failure_is_data_not_exception(key):
    grid = Grid(5, 5, start=(0, 0), end=(2, 2))
    for r, c in ((1, 2), (2, 3), (3, 2), (2, 1)):
        grid.set_wall(r, c, True)

    result = run_search(grid, key)
    assert not result.success
    assert result.status == "no_path"
    assert result.visited_count > 0
    assert result.path == []
    assert result.metrics["path_len"] == 0
    assert result.path_length_label() == "∞"


def test_run_search_resets_previous_run():
    grid = Grid(6, 6, start=(0, 0), end=(5, 5))
    first = run_search(grid, "dfs")
    second = run_search(grid, "bfs")
    assert len(second.path) == 11
    assert first.success and second.success


def test_run_search_rejects_unknown_algorithm():
    with pytest.raises(ValueError):
        run_search(Grid(5, 5), "dijkstra")


def test_run_generator_resets_board_first():
    grid = Grid(9, 9, start=(0, 0), end=(8, 8))
    grid.set_wall(0, 4, True)  # border cell no generator touches
    walls = run_generator(grid, "recursive", random.Random(1))
    assert not grid.is_wall(0, 4)
    assert walls == grid.wall_matrix()


@pytest.mark.parametrize("key", [None, "", "none"])
def test_run_generator_none_leaves_board(key):
    grid = Grid(5, 5)
    grid.set_wall(2, 2, True)
    walls = run_generator(grid, key)
    assert walls[2][2]


def test_run_generator_rejects_unknown_key():
    with pytest.raises(ValueError):
        run_generator(Grid(5, 5), "prim")


def test_registries_match_catalog():
    assert set(ALGORITHMS) == set(ALGO_INFO) == {"bfs", "dfs", "astar"}
    assert set(GENERATORS) == {"random", "spiral", "recursive"}
    for info in ALGO_INFO.values():
        assert [h for h, _ in info.paragraphs()] == ["Definition", "How it works", "Where it is used"]
