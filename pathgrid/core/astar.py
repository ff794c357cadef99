# pathgrid/core/astar.py
#!/usr/bin/env python3
"""
A* over the grid with unit edge costs.

Heuristic:
- Manhattan distance, exact lower bound on a 4-connected unit-cost grid,
  so the first time the end cell is settled its g is optimal.

Open set:
- Binary heap keyed (f, seq, index): lower f, then the order in which the
  cell first entered the open set. A cell keeps its seq for the whole run,
  so equal-f ties resolve like a stable sort over an insertion-ordered list.
- A cell is pushed again whenever its g improves; older entries stay in the
  heap and are dropped on pop because the cell is already visited.
"""

import heapq
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from pathgrid.core.grid import Grid
from pathgrid.core.types import Cell

logger = logging.getLogger(__name__)


def heuristic(a: Cell, b: Cell) -> int:
    return abs(a.row - b.row) + abs(a.col - b.col)


@dataclass
class AStarAlgo:
    name: str = "A*"
    grid: Optional[Grid] = None

    open_pq: List[Tuple[float, int, int]] = field(default_factory=list)  # (f, seq, index)
    entered: Dict[int, int] = field(default_factory=dict)  # index -> first-entry seq
    seq: int = 0
    stale_pops: int = 0

    def init(self, grid: Grid) -> None:
        self.grid = grid
        self.open_pq.clear()
        self.entered.clear()
        self.seq = 0
        self.stale_pops = 0

    def _bump(self) -> int:
        self.seq += 1
        return self.seq

    def _push(self, cell: Cell) -> None:
        seq = self.entered.get(cell.index)
        if seq is None:
            seq = self.entered[cell.index] = self._bump()
        heapq.heappush(self.open_pq, (cell.f_cost, seq, cell.index))

    def run(self, start: Cell, end: Cell) -> List[Cell]:
        self.init(self.grid)
        trace: List[Cell] = []

        start.g_cost = 0
        start.f_cost = heuristic(start, end)
        self._push(start)

        while self.open_pq:
            _, _, idx = heapq.heappop(self.open_pq)
            current = self.grid.cell_at(idx)

            # Ignore stale pops
            if current.is_visited:
                self.stale_pops += 1
                continue
            current.is_visited = True
            trace.append(current)
            if current is end:
                break

            for n in self.grid.neighbors(current):
                if n.is_wall or n.is_visited:
                    continue
                alt = current.g_cost + 1
                if alt < n.g_cost:
                    n.previous = current.index
                    n.g_cost = alt
                    n.f_cost = alt + heuristic(n, end)
                    self._push(n)

        logger.debug("%s finalized %d cells (%d stale pops, %d left open)",
                     self.name, len(trace), self.stale_pops, len(self.open_pq))
        return trace
