#!/usr/bin/env python3
"""
Depth-first search, run to completion.

Neighbors are tried up, right, down, left. The first route found under that
order is the one kept, so the output is reproducible for a given grid. Each
cell is pushed onto the path when entered and popped again if every
direction out of it dead-ends.

Backtracking uses an explicit stack of (cell, remaining neighbors) rather
than recursion, so map size is not bounded by the interpreter's recursion
limit. Visit and path order are the same as the recursive form.
"""

import logging
from dataclasses import dataclass

from mazesearch.core.search import SearchContext, neighbors
from mazesearch.core.types import Cell, Grid, SearchResult

log = logging.getLogger(__name__)


@dataclass
class DepthFirstSearch:
    name: str = "DFS"

    def run(self, grid: Grid) -> SearchResult:
        ctx = SearchContext(grid)
        self._dfs(ctx, grid.start)
        result = ctx.result(self.name)
        log.debug("%s visited %d cells, path_len=%d",
                  self.name, len(result.visit_order), len(result.path))
        return result

    def _enter(self, ctx: SearchContext, c: Cell) -> bool:
        """Mark c and push it onto the path; True if it is the goal."""
        ctx.mark(c)
        ctx.path.append(c)
        return c == ctx.grid.goal

    def _dfs(self, ctx: SearchContext, start: Cell) -> bool:
        if not ctx.is_candidate(start):
            return False
        if self._enter(ctx, start):
            return True

        stack = [iter(neighbors(start))]
        while stack:
            for n in stack[-1]:
                if ctx.is_candidate(n):
                    if self._enter(ctx, n):
                        return True
                    stack.append(iter(neighbors(n)))
                    break
            else:
                stack.pop()
                ctx.path.pop()  # backtrack
        return False
