# pathgrid/core/grid.py
#!/usr/bin/env python3
"""
Grid model: a fixed-size arena of cells with wall state and per-run search state.

- Cells live in one flat list, addressed by `row * cols + col`.
- Start/end are plain positions; they survive `resize()` by clamping.
- Start/end can never be walls: `set_wall` on them is silently ignored,
  and so is moving an endpoint onto a wall.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from pathgrid.core.types import Cell, Position

logger = logging.getLogger(__name__)

# up, right, down, left: tie-break order for every search and generator
DIRECTIONS = ((-1, 0), (0, 1), (1, 0), (0, -1))


@dataclass
class Grid:
    rows: int
    cols: int
    start: Position = (0, 0)
    end: Optional[Position] = None
    cells: List[Cell] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.end is None:
            self.end = (self.rows - 1, self.cols - 1)
        self.resize(self.rows, self.cols)

    # -------------------- sizing --------------------

    def resize(self, rows: int, cols: int) -> None:
        """Reallocate every cell and clamp start/end into the new bounds."""
        if rows < 1 or cols < 1:
            raise ValueError(f"grid must be at least 1x1, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.cells = [Cell(r, c, r * cols + c) for r in range(rows) for c in range(cols)]
        self.start = self._clamp(self.start)
        self.end = self._clamp(self.end)
        if self.end == self.start and rows * cols > 1:
            # both endpoints clamped onto one cell; step end aside
            r, c = self.end
            for dr, dc in ((0, -1), (-1, 0), (0, 1), (1, 0)):
                if self.in_bounds(r + dr, c + dc):
                    self.end = (r + dr, c + dc)
                    break
        logger.debug("grid resized to %dx%d start=%s end=%s", rows, cols, self.start, self.end)

    def _clamp(self, pos: Position) -> Position:
        r, c = pos
        return (min(max(r, 0), self.rows - 1), min(max(c, 0), self.cols - 1))

    # -------------------- lookup --------------------

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.rows and 0 <= c < self.cols

    def cell(self, r: int, c: int) -> Cell:
        return self.cells[r * self.cols + c]

    def cell_at(self, index: int) -> Cell:
        return self.cells[index]

    @property
    def start_cell(self) -> Cell:
        return self.cell(*self.start)

    @property
    def end_cell(self) -> Cell:
        return self.cell(*self.end)

    def is_start_or_end(self, r: int, c: int) -> bool:
        return (r, c) == self.start or (r, c) == self.end

    def neighbors(self, cell: Cell) -> List[Cell]:
        """Orthogonal neighbours in up, right, down, left order; never out of bounds."""
        out: List[Cell] = []
        for dr, dc in DIRECTIONS:
            r, c = cell.row + dr, cell.col + dc
            if self.in_bounds(r, c):
                out.append(self.cells[r * self.cols + c])
        return out

    # -------------------- mutation --------------------

    def set_wall(self, r: int, c: int, state: bool) -> None:
        if not self.in_bounds(r, c) or self.is_start_or_end(r, c):
            return
        self.cells[r * self.cols + c].is_wall = state

    def is_wall(self, r: int, c: int) -> bool:
        return self.cells[r * self.cols + c].is_wall

    def move_start(self, r: int, c: int) -> bool:
        """Drag start to (r, c). Ignored (returns False) onto a wall or the end cell."""
        if not self.in_bounds(r, c) or (r, c) == self.end or self.is_wall(r, c):
            return False
        self.start = (r, c)
        return True

    def move_end(self, r: int, c: int) -> bool:
        """Drag end to (r, c). Ignored (returns False) onto a wall or the start cell."""
        if not self.in_bounds(r, c) or (r, c) == self.start or self.is_wall(r, c):
            return False
        self.end = (r, c)
        return True

    def reset_search_state(self) -> None:
        for cell in self.cells:
            cell.reset_search()

    def reset_walls(self) -> None:
        for cell in self.cells:
            cell.is_wall = False
            cell.reset_search()

    # -------------------- snapshots --------------------

    def wall_matrix(self) -> List[List[bool]]:
        return [[self.cells[r * self.cols + c].is_wall for c in range(self.cols)]
                for r in range(self.rows)]

    def wall_positions(self) -> List[Position]:
        return [cell.pos for cell in self.cells if cell.is_wall]
