#!/usr/bin/env python3
"""
Breadth-first search over a FIFO frontier.

Every frontier entry carries its own path from start. Cells are marked
visited when enqueued, not when dequeued, so nothing is enqueued twice and
the first path to reach the goal is a shortest one.
"""

import logging
from collections import deque
from dataclasses import dataclass

from mazesearch.core.search import SearchContext, neighbors
from mazesearch.core.types import SearchResult, Grid

log = logging.getLogger(__name__)


@dataclass
class BreadthFirstSearch:
    name: str = "BFS"

    def run(self, grid: Grid) -> SearchResult:
        ctx = SearchContext(grid)
        start = grid.start

        ctx.mark(start)
        frontier = deque([(start, [start])])

        while frontier:
            cell, path = frontier.popleft()
            if cell == grid.goal:
                ctx.path = path
                break
            for n in neighbors(cell):
                if ctx.is_candidate(n):
                    ctx.mark(n)
                    frontier.append((n, path + [n]))

        result = ctx.result(self.name)
        log.debug("%s visited %d cells, path_len=%d",
                  self.name, len(result.visit_order), len(result.path))
        return result
