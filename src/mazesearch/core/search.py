# src/mazesearch/core/search.py
#!/usr/bin/env python3
"""
Shared state for one search run, plus the algorithm registry.

Both algorithms write into a SearchContext that is created fresh for every
run, so DFS and BFS stay substitutable behind one call:

    result = make_search("BFS").run(grid)
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from mazesearch.core.types import Cell, Grid, SearchResult

# up, right, down, left -- this order decides which path DFS finds
DIRECTIONS: Tuple[Cell, ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))


@dataclass
class SearchContext:
    grid: Grid
    visited: List[List[bool]] = field(default_factory=list)   # [row][col]
    visit_order: List[Cell] = field(default_factory=list)
    path: List[Cell] = field(default_factory=list)

    def __post_init__(self):
        self.visited = [[False] * self.grid.width for _ in range(self.grid.height)]

    def is_candidate(self, c: Cell) -> bool:
        """Open, in bounds and not yet visited."""
        if not self.grid.is_open(c):
            return False
        x, y = c
        return not self.visited[y][x]

    def mark(self, c: Cell) -> None:
        x, y = c
        self.visited[y][x] = True
        self.visit_order.append(c)

    def result(self, algo: str) -> SearchResult:
        return SearchResult(
            visit_order=list(self.visit_order),
            path=list(self.path),
            metrics={
                "algo": algo,
                "visited_count": len(self.visit_order),
                "path_len": len(self.path),
                "found": bool(self.path),
            },
        )


def neighbors(c: Cell) -> List[Cell]:
    x, y = c
    return [(x + dx, y + dy) for dx, dy in DIRECTIONS]


def make_search(label: str):
    # local import: dfs/bfs import this module for DIRECTIONS and SearchContext
    from mazesearch.core.bfs import BreadthFirstSearch
    from mazesearch.core.dfs import DepthFirstSearch

    registry = {
        "DFS": DepthFirstSearch,
        "BFS": BreadthFirstSearch,
    }
    return registry[label]()
