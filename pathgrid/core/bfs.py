# pathgrid/core/bfs.py
#!/usr/bin/env python3
"""
Breadth-First Search over the grid.

FIFO frontier; a cell is marked visited when it is enqueued, so every cell
enters the queue at most once. The first time the end cell is dequeued it
sits at minimum step count from start.
"""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional

from pathgrid.core.grid import Grid
from pathgrid.core.types import Cell

logger = logging.getLogger(__name__)


@dataclass
class BFSAlgo:
    name: str = "BFS"
    grid: Optional[Grid] = None

    def init(self, grid: Grid) -> None:
        self.grid = grid

    def run(self, start: Cell, end: Cell) -> List[Cell]:
        """Return cells in dequeue order; stops right after dequeuing `end`."""
        queue: Deque[Cell] = deque([start])
        trace: List[Cell] = []
        start.is_visited = True

        while queue:
            current = queue.popleft()
            trace.append(current)
            if current is end:
                break

            for n in self.grid.neighbors(current):
                if not n.is_visited and not n.is_wall:
                    n.is_visited = True
                    n.previous = current.index
                    queue.append(n)

        logger.debug("%s finalized %d cells", self.name, len(trace))
        return trace
