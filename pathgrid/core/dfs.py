# pathgrid/core/dfs.py
#!/usr/bin/env python3

import logging
from dataclasses import dataclass
from typing import List, Optional

from pathgrid.core.grid import Grid
from pathgrid.core.types import Cell

logger = logging.getLogger(__name__)


@dataclass
class DFSAlgo:
    name: str = "DFS"
    grid: Optional[Grid] = None

    def init(self, grid: Grid) -> None:
        self.grid = grid

    def run(self, start: Cell, end: Cell) -> List[Cell]:
        """LIFO twin of BFS: same marking rule, so the path is whatever the stack finds first."""
        stack: List[Cell] = [start]
        trace: List[Cell] = []
        start.is_visited = True

        while stack:
            current = stack.pop()
            trace.append(current)
            if current is end:
                break

            # pushed up, right, down, left -> left is expanded first
            for n in self.grid.neighbors(current):
                if not n.is_visited and not n.is_wall:
                    n.is_visited = True
                    n.previous = current.index
                    stack.append(n)

        logger.debug("%s finalized %d cells", self.name, len(trace))
        return trace
