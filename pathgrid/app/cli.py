# pathgrid/app/cli.py
#!/usr/bin/env python3
"""
Headless runner: build or load a board, optionally generate a maze, run one
search and print the board plus a summary line.

    pathgrid --rows 15 --cols 30 --maze recursive --algo astar --seed 7
    pathgrid --board boards/02_wall_gap.json --algo dfs

Board legend: S start, E end, # wall, * path, . visited, blank open.
PATHGRID_* environment variables (see pathgrid/app/config.py) seed the
defaults; flags win. Exit code 0 when a path was found, 1 when none exists,
2 on a bad board file or bad setting.
"""

import argparse
import logging
import random
import sys
from typing import List, Mapping, Optional

from pathgrid.app.config import (ALGO_KEYS, DEFAULT_END, DEFAULT_START, LOG_LEVELS, MAZE_KEYS,
                                 MIN_DIM, Settings, load_board, resolve_settings)
from pathgrid.core.catalog import ALGO_INFO
from pathgrid.core.grid import Grid
from pathgrid.core.runner import run_generator, run_search
from pathgrid.core.types import SearchResult


def render_board(grid: Grid, result: Optional[SearchResult] = None) -> str:
    visited = set(result.trace) if result else set()
    path = set(result.path) if result else set()
    lines: List[str] = []
    for r in range(grid.rows):
        row = []
        for c in range(grid.cols):
            if (r, c) == grid.start:
                row.append("S")
            elif (r, c) == grid.end:
                row.append("E")
            elif grid.is_wall(r, c):
                row.append("#")
            elif (r, c) in path:
                row.append("*")
            elif (r, c) in visited:
                row.append(".")
            else:
                row.append(" ")
        lines.append("".join(row))
    return "\n".join(lines)


def summary_line(result: SearchResult) -> str:
    status = "Success: Path found" if result.success else "Failed: No path exists"
    return (f"algo={result.metrics['algo']} visited={result.visited_count} "
            f"path_len={result.path_length_label()} status={status}")


def explain(key: str) -> str:
    info = ALGO_INFO[key]
    out = [info.title, "Tags: " + ", ".join(text for text, _ in info.tags)]
    for heading, body in info.paragraphs():
        out.append(f"\n{heading}\n{body}")
    return "\n".join(out)


def build_parser(defaults: Optional[Settings] = None) -> argparse.ArgumentParser:
    d = defaults or Settings()
    parser = argparse.ArgumentParser(prog="pathgrid", description="Run one grid search and print the result.")
    parser.add_argument("--board", default=str(d.board) if d.board else None,
                        help="JSON board file (overrides --rows/--cols)")
    parser.add_argument("--rows", type=int, default=d.rows)
    parser.add_argument("--cols", type=int, default=d.cols)
    parser.add_argument("--algo", choices=ALGO_KEYS, default=d.algo)
    parser.add_argument("--maze", choices=MAZE_KEYS, default=d.maze)
    parser.add_argument("--seed", type=int, default=None, help="Seed for the maze generator")
    parser.add_argument("--explain", action="store_true", help="Print a description of --algo and exit")
    parser.add_argument("--quiet", action="store_true", help="Only print the summary line")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=d.log_level)
    return parser


def main(argv: Optional[List[str]] = None, env: Optional[Mapping[str, str]] = None) -> int:
    try:
        settings = resolve_settings([], env)
    except ValueError as ex:
        print(f"Bad settings: {ex}", file=sys.stderr)
        return 2
    args = build_parser(settings).parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.explain:
        print(explain(args.algo))
        return 0

    if args.board:
        try:
            grid = load_board(args.board)
        except (OSError, ValueError, KeyError) as ex:
            print(f"Failed to load board {args.board}: {ex}", file=sys.stderr)
            return 2
    else:
        grid = Grid(max(MIN_DIM, args.rows), max(MIN_DIM, args.cols), DEFAULT_START, DEFAULT_END)

    rng = random.Random(args.seed) if args.seed is not None else None
    run_generator(grid, args.maze, rng)
    result = run_search(grid, args.algo)

    if not args.quiet:
        print(render_board(grid, result))
    print(summary_line(result))
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
