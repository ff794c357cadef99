# pathgrid/core/catalog.py
#!/usr/bin/env python3
"""Descriptive text for each search algorithm, shown in the viewer panel and by `pathgrid --explain`."""

from dataclasses import dataclass
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class AlgorithmInfo:
    title: str
    tags: Tuple[Tuple[str, str], ...]   # (text, kind) with kind in unweighted|weighted|graph
    definition: str
    how_it_works: str
    real_world: str

    def paragraphs(self) -> List[Tuple[str, str]]:
        return [
            ("Definition", self.definition),
            ("How it works", self.how_it_works),
            ("Where it is used", self.real_world),
        ]


ALGO_INFO: Dict[str, AlgorithmInfo] = {
    "bfs": AlgorithmInfo(
        title="Breadth-First Search (BFS)",
        tags=(("Unweighted", "unweighted"), ("Shortest path guaranteed", "graph")),
        definition=(
            "BFS explores the grid level by level. It first visits all cells at distance 1 "
            "from the start, then distance 2, and so on. On this unweighted grid, the first "
            "time it reaches the target, it has found a shortest path in terms of number of steps."
        ),
        how_it_works=(
            "BFS uses a queue (FIFO). When a cell is processed, all of its valid neighbours are "
            "added to the back of the queue. A visited flag ensures that each cell is processed "
            "at most once, creating a clean wave-like expansion from the start node."
        ),
        real_world=(
            "Shortest path in unweighted graphs (degrees of separation), broadcasting in networks, "
            "and reachability checks. Time complexity is O(V + E), where V is the number of cells "
            "and E the edges between them."
        ),
    ),
    "dfs": AlgorithmInfo(
        title="Depth-First Search (DFS)",
        tags=(("Unweighted", "unweighted"), ("Exploration / backtracking", "graph")),
        definition=(
            "DFS explores as far as possible along one direction before backtracking. Instead of "
            "spreading out evenly like BFS, it dives deep into one branch, then rewinds and tries "
            "alternative branches."
        ),
        how_it_works=(
            "DFS uses a stack (LIFO). Starting from the start node, it pushes neighbours onto the "
            "stack. The cell on top of the stack is processed next, so the search keeps following "
            "one branch until it runs out of options, then backtracks. Each cell stores a pointer "
            "to the cell it was reached from, used to rebuild the path if the target is reached."
        ),
        real_world=(
            "Exhaustive exploration and backtracking: solving puzzles, generating mazes, detecting "
            "cycles. On this grid DFS does not guarantee a shortest or straight path, so its route "
            "may look long or zig-zag even when a much shorter path exists."
        ),
    ),
    "astar": AlgorithmInfo(
        title="A* (A-Star) Search",
        tags=(("Heuristic-guided", "weighted"), ("Efficient shortest path", "graph")),
        definition=(
            "A* is a best-first search that tries to reach the target efficiently by combining the "
            "cost from the start with an estimate of the remaining distance. It behaves like a "
            "blend of Dijkstra's algorithm and greedy search."
        ),
        how_it_works=(
            "Each cell has a score F = G + H. G is the exact cost from the start node, and H is a "
            "heuristic estimate of the distance to the target, here the Manhattan distance "
            "(horizontal + vertical moves). At each step A* picks the cell with the smallest F "
            "from the open set and updates its neighbours."
        ),
        real_world=(
            "Navigation, game AI pathfinding and robotics. With an admissible heuristic (one that "
            "never overestimates the true distance), A* is complete and optimal: it finds a path "
            "if one exists and that path is a shortest one."
        ),
    ),
}
