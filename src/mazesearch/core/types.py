# src/mazesearch/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from typing import List, Tuple, Dict, Any

Cell = Tuple[int, int]  # (col, row)

# cell kinds
OPEN = 0
WALL = 1
OUTSIDE = -1  # sentinel for out-of-bounds lookups


@dataclass(frozen=True)
class Grid:
    width: int
    height: int
    cells: Tuple[Tuple[int, ...], ...]   # [row][col]
    start: Cell
    goal: Cell

    def __post_init__(self):
        # freeze nested lists coming straight out of json
        object.__setattr__(self, "cells", tuple(tuple(r) for r in self.cells))
        object.__setattr__(self, "start", tuple(self.start))
        object.__setattr__(self, "goal", tuple(self.goal))

    def in_bounds(self, c: Cell) -> bool:
        x, y = c
        return 0 <= x < self.width and 0 <= y < self.height

    def kind(self, c: Cell) -> int:
        if not self.in_bounds(c):
            return OUTSIDE
        x, y = c
        return self.cells[y][x]

    def is_open(self, c: Cell) -> bool:
        return self.kind(c) == OPEN

    def walls(self) -> List[Cell]:
        return [(x, y)
                for y in range(self.height)
                for x in range(self.width)
                if self.cells[y][x] == WALL]


@dataclass
class SearchResult:
    visit_order: List[Cell] = field(default_factory=list)
    path: List[Cell] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def found(self) -> bool:
        return bool(self.path)
