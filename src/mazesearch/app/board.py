# src/mazesearch/app/board.py
"""
The drawing surface the playback reveals onto.

Draws accumulate on a persistent pygame Surface (like a canvas): draw_grid()
wipes it back to the clean maze, each reveal paints one more cell on top.
The viewer only blits the finished surface each frame.
"""

from __future__ import annotations
from typing import Optional, Tuple
import pygame

from mazesearch.core.types import Cell, Grid

CELL_SIZE_DEFAULT = 100

# ---- palette ----
WHITE        = (255, 255, 255)
BORDER_GRAY  = (221, 221, 221)        # #ddd
WALL_SLATE   = ( 44,  62,  80)        # #2c3e50
START_GREEN  = ( 39, 174,  96)        # #27ae60
GOAL_RED     = (231,  76,  60)        # #e74c3c
VISITED_A    = ( 52, 152, 219, 102)   # rgba(52,152,219,0.4)
PATH_ORANGE  = (243, 156,  18)        # #f39c12


class Board:
    def __init__(self, grid: Grid, cell_size: int = CELL_SIZE_DEFAULT,
                 font: Optional[pygame.font.Font] = None):
        self.grid = grid
        self.cell_size = cell_size
        self.surface = pygame.Surface((grid.width * cell_size, grid.height * cell_size))
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(None, max(12, cell_size * 2 // 7))
        self.font = font

    @property
    def size(self) -> Tuple[int, int]:
        return self.surface.get_size()

    def cell_rect(self, c: Cell, inset: int = 0) -> pygame.Rect:
        cs = self.cell_size
        x, y = c
        return pygame.Rect(x*cs + inset, y*cs + inset, cs - 2*inset, cs - 2*inset)

    # ---------- full redraw ----------
    def draw_grid(self) -> None:
        self.surface.fill(WHITE)
        for row in range(self.grid.height):
            for col in range(self.grid.width):
                rect = self.cell_rect((col, row))
                pygame.draw.rect(self.surface, BORDER_GRAY, rect, 1)
                if not self.grid.is_open((col, row)):
                    pygame.draw.rect(self.surface, WALL_SLATE, rect)

        self._draw_badge(self.grid.start, START_GREEN, "S")
        self._draw_badge(self.grid.goal, GOAL_RED, "G")

    def _draw_badge(self, c: Cell, color, label: str) -> None:
        center = self.cell_rect(c).center
        pygame.draw.circle(self.surface, color, center, max(2, self.cell_size * 3 // 10))
        txt = self.font.render(label, True, WHITE)
        self.surface.blit(txt, txt.get_rect(center=center))

    # ---------- reveals (called by Playback) ----------
    def reveal_visited(self, c: Cell) -> None:
        rect = self.cell_rect(c, inset=self.cell_size // 20)
        s = pygame.Surface(rect.size, pygame.SRCALPHA); s.fill(VISITED_A)
        self.surface.blit(s, rect.topleft)

    def reveal_path(self, c: Cell) -> None:
        rect = self.cell_rect(c, inset=self.cell_size // 10)
        pygame.draw.rect(self.surface, PATH_ORANGE, rect)
