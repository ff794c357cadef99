# pathgrid/app/config.py
#!/usr/bin/env python3
"""
Settings for the viewer and CLI.

Resolution order (later wins):
- defaults below
- ENV:  PATHGRID_ROWS, PATHGRID_COLS, PATHGRID_ALGO, PATHGRID_MAZE,
        PATHGRID_THEME, PATHGRID_SPEED, PATHGRID_LOG_LEVEL, PATHGRID_BOARD
- CLI:  --rows=, --cols=, --algo=, --maze=, --theme=, --speed=, --log-level=, --board=

Board files are JSON:
    {"rows": 7, "cols": 9, "start": [r, c], "end": [r, c], "cells": [[0, 1, ...], ...]}
where 1 marks a wall.
"""

import json
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping, Optional

from pathgrid.core.grid import Grid

BOARD_DIR = Path(__file__).resolve().parents[2] / "boards"

DEFAULT_ROWS = 15
DEFAULT_COLS = 30
DEFAULT_START = (5, 5)
DEFAULT_END = (5, 25)
MIN_DIM = 5

ALGO_KEYS = ("bfs", "dfs", "astar")
MAZE_KEYS = ("none", "random", "spiral", "recursive")
THEMES = ("light", "dark")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Replay pacing in milliseconds, at speed 1.0
TRACE_DELAY_MS = {"bfs": 8, "dfs": 12, "astar": 10}
PATH_DELAY_MS = 20


@dataclass
class Settings:
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    algo: str = "bfs"
    maze: str = "none"
    theme: str = "light"
    speed: float = 1.0
    log_level: str = "WARNING"
    board: Optional[Path] = None

    def trace_delay(self) -> float:
        """Seconds between two replayed trace cells."""
        return TRACE_DELAY_MS[self.algo] / 1000.0 / self.speed

    def path_delay(self) -> float:
        return PATH_DELAY_MS / 1000.0 / self.speed


_ENV_KEYS = {
    "rows": "PATHGRID_ROWS",
    "cols": "PATHGRID_COLS",
    "algo": "PATHGRID_ALGO",
    "maze": "PATHGRID_MAZE",
    "theme": "PATHGRID_THEME",
    "speed": "PATHGRID_SPEED",
    "log_level": "PATHGRID_LOG_LEVEL",
    "board": "PATHGRID_BOARD",
}


def resolve_settings(argv: Optional[List[str]] = None, env: Optional[Mapping[str, str]] = None) -> Settings:
    argv = sys.argv[1:] if argv is None else argv
    env = os.environ if env is None else env

    raw = {}
    for key, var in _ENV_KEYS.items():
        if env.get(var):
            raw[key] = env[var]
    for arg in argv:
        if arg.startswith("--") and "=" in arg:
            name, value = arg[2:].split("=", 1)
            key = name.replace("-", "_")
            if key in _ENV_KEYS:
                raw[key] = value

    s = Settings()
    try:
        if "rows" in raw: s.rows = int(raw["rows"])
        if "cols" in raw: s.cols = int(raw["cols"])
        if "speed" in raw: s.speed = float(raw["speed"])
    except ValueError as ex:
        raise ValueError(f"bad numeric setting: {ex}") from None
    s.rows = max(MIN_DIM, s.rows)
    s.cols = max(MIN_DIM, s.cols)
    if s.speed <= 0:
        raise ValueError(f"speed must be positive, got {s.speed}")

    if "algo" in raw: s.algo = _pick(raw["algo"].lower(), ALGO_KEYS, "algo")
    if "maze" in raw: s.maze = _pick(raw["maze"].lower(), MAZE_KEYS, "maze")
    if "theme" in raw: s.theme = _pick(raw["theme"].lower(), THEMES, "theme")
    if "log_level" in raw: s.log_level = _pick(raw["log_level"].upper(), LOG_LEVELS, "log level")
    if "board" in raw: s.board = Path(raw["board"])
    return s


def _pick(value: str, allowed, label: str) -> str:
    if value not in allowed:
        raise ValueError(f"unknown {label} {value!r}; expected one of {list(allowed)}")
    return value


def default_grid(settings: Settings) -> Grid:
    return Grid(settings.rows, settings.cols, DEFAULT_START, DEFAULT_END)


# ---------- Boards ----------
def load_board(path: Path) -> Grid:
    with open(path, "r") as f:
        data = json.load(f)
    rows = int(data["rows"])
    cols = int(data["cols"])
    start = tuple(data["start"])
    end = tuple(data["end"])
    cells = data.get("cells", [[0] * cols for _ in range(rows)])

    if len(cells) != rows or not all(len(r) == cols for r in cells):
        raise ValueError("cells size mismatch")
    sr, sc = start; er, ec = end
    if not (0 <= sr < rows and 0 <= sc < cols):
        raise ValueError("start out of bounds")
    if not (0 <= er < rows and 0 <= ec < cols):
        raise ValueError("end out of bounds")
    if start == end:
        raise ValueError("start and end must differ")

    grid = Grid(rows, cols, start, end)
    for r, row in enumerate(cells):
        for c, v in enumerate(row):
            if v == 1:
                grid.set_wall(r, c, True)  # walls on start/end are dropped
    return grid


def dump_board(grid: Grid, path: Path) -> None:
    data = {
        "rows": grid.rows,
        "cols": grid.cols,
        "start": list(grid.start),
        "end": list(grid.end),
        "cells": [[1 if w else 0 for w in row] for row in grid.wall_matrix()],
    }
    with open(path, "w") as f:
        json.dump(data, f)
