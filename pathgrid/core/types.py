# pathgrid/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from math import inf
from typing import List, Tuple, Optional, Dict, Any

Position = Tuple[int, int]  # (row, col)


@dataclass(eq=False)
class Cell:
    row: int
    col: int
    index: int                         # slot in Grid.cells
    is_wall: bool = False

    # per-run search state
    is_visited: bool = False
    previous: Optional[int] = None     # index of the discovering cell
    g_cost: float = inf
    f_cost: float = inf

    @property
    def pos(self) -> Position:
        return (self.row, self.col)

    def reset_search(self) -> None:
        self.is_visited = False
        self.previous = None
        self.g_cost = inf
        self.f_cost = inf

    def __repr__(self) -> str:
        flag = "#" if self.is_wall else ""
        return f"Cell({self.row},{self.col}{flag})"


@dataclass
class SearchResult:
    status: str                   # "done" | "no_path"
    trace: List[Position] = field(default_factory=list)
    path: List[Position] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return self.status == "done"

    @property
    def visited_count(self) -> int:
        return len(self.trace)

    @property
    def path_length(self) -> int:
        return len(self.path)

    def path_length_label(self) -> str:
        """Path length as shown to users: cell count, or the infinity sign on failure."""
        return str(len(self.path)) if self.success else "∞"
