#!/usr/bin/env python3
"""
Maze Search Viewer — DFS / BFS on a small grid, replayed step by step

- Keyboard:
    [F]          -> run depth-first search
    [B]          -> run breadth-first search
    [R]          -> reset (cancels a running replay)
    [1]/[2]/[3]  -> switch map
    [Q]/[ESC]    -> quit

A run computes the whole search first, then replays it: visited cells
(every 50 ms), then the final path (every 100 ms). Run requests while a
replay is on screen are ignored.

Config:
- ENV: MAZE_MAP=<map key or .json path>, MAZE_DEBUG=1
- CLI: --map=<map key or .json path>, --debug
"""

# --- bootstrap import path so `from mazesearch...` works when run as a script ---
import sys, os, logging
from pathlib import Path
_SRC_ROOT = Path(__file__).resolve().parents[2]
if str(_SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(_SRC_ROOT))
# -------------------------------------------------------------------------------

from typing import List, Optional, Dict, Any
import pygame

from mazesearch.app.board import Board, CELL_SIZE_DEFAULT
from mazesearch.core.maps import MAP_FILES, DEFAULT_MAP, MapError, resolve_map
from mazesearch.core.playback import Playback
from mazesearch.core.search import make_search
from mazesearch.core.types import Grid, SearchResult

log = logging.getLogger(__name__)

# ---------- Config ----------
PANEL_W = 320            # right band: metrics + buttons
GRID_MARGIN = 16
GRID_AREA = 720          # square area the board is fitted into
FONT_NAME = None         # default pygame font

TEXT_LIGHT  = (230,235,240)
ACCENT_GOLD = (255,210,0)
CARD_BG     = (24,28,36,220)

MAP_KEYS = list(MAP_FILES)


def resolve_settings(argv: Optional[List[str]] = None,
                     env: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    argv = sys.argv[1:] if argv is None else argv
    env = os.environ if env is None else env

    map_key = env.get("MAZE_MAP", DEFAULT_MAP)
    debug = env.get("MAZE_DEBUG", "0").lower() in ("1", "true", "yes")
    for arg in argv:
        if arg.startswith("--map="):
            map_key = arg.split("=", 1)[1]
        elif arg == "--debug":
            debug = True
    return {"map": map_key, "debug": debug}


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback, *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.togglable = togglable
        self.active = False

    def set_active(self, value: bool):
        self.active = bool(value)

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        if self.active and self.togglable:
            bg = (58, 86, 160, 235)
        elif self.hover:
            bg = (46, 50, 60, 230)
        else:
            bg = (36, 40, 48, 220)

        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        pygame.draw.rect(base, bg, base.get_rect(), border_radius=10)
        screen.blit(base, self.rect.topleft)

        if self.active and self.togglable:
            pygame.draw.rect(screen, (120, 170, 255, 255), self.rect, width=2, border_radius=10)

        text = font.render(self.label, True, (235,238,242))
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event):
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()


# ---------- Viewer ----------
class Viewer:
    def __init__(self, grid: Grid, map_key: str = "custom"):
        pygame.init()

        self.font = pygame.font.Font(FONT_NAME, 22)
        self.font_big = pygame.font.Font(FONT_NAME, 28)

        win_w = GRID_AREA + 2*GRID_MARGIN + PANEL_W
        win_h = GRID_AREA + 2*GRID_MARGIN
        self.screen = pygame.display.set_mode((win_w, win_h))
        pygame.display.set_caption("Maze Search — DFS / BFS")

        self._buttons: list[UIButton] = []
        self.clock = pygame.time.Clock()
        self.selected_algo: Optional[str] = None
        self.result: Optional[SearchResult] = None

        self._load_grid(grid, map_key)

    # ---------- grid / board ----------
    def _load_grid(self, grid: Grid, map_key: str):
        self.grid = grid
        self.selected_map_key = map_key
        cs = min(CELL_SIZE_DEFAULT, GRID_AREA // max(grid.width, grid.height))
        self.board = Board(grid, cs)
        self.board.draw_grid()
        self.playback = Playback(self.board)
        self.result = None
        self._layout()

    def _layout(self):
        bw, bh = self.board.size
        self._board_origin = (GRID_MARGIN + (GRID_AREA - bw) // 2,
                              GRID_MARGIN + (GRID_AREA - bh) // 2)
        self._right_band = pygame.Rect(GRID_AREA + 2*GRID_MARGIN, 0,
                                       PANEL_W, self.screen.get_height())
        self._build_buttons()

    def run(self):
        while True:
            self._handle_events()
            self.playback.update()
            self._draw()
            self.clock.tick(60)

    # ---------- triggers ----------
    def run_search(self, label: str) -> bool:
        if self.playback.busy:
            log.debug("ignoring %s: replay still running", label)
            return False
        self.selected_algo = label
        self.board.draw_grid()
        self.result = make_search(label).run(self.grid)
        log.info("%s: visited %d cells, %s", label, len(self.result.visit_order),
                 f"path of {len(self.result.path)} cells" if self.result.found else "no path")
        self.playback.start(self.result, self.grid)
        self._refresh_active_states()
        return True

    def reset(self):
        self.playback.cancel()
        self.board.draw_grid()
        self.result = None
        self._refresh_active_states()

    def switch_map(self, key: str):
        try:
            grid = resolve_map(key)
        except MapError as ex:
            log.error("Failed to load map %s: %s", key, ex)
            return
        self.playback.cancel()
        self._load_grid(grid, key)
        pygame.display.set_caption(f"Maze Search — {key}")

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    pygame.quit(); sys.exit(0)
                elif e.key == pygame.K_f:
                    self.run_search("DFS")
                elif e.key == pygame.K_b:
                    self.run_search("BFS")
                elif e.key == pygame.K_r:
                    self.reset()
                elif e.key in (pygame.K_1, pygame.K_2, pygame.K_3):
                    idx = e.key - pygame.K_1
                    if idx < len(MAP_KEYS):
                        self.switch_map(MAP_KEYS[idx])
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
                for b in self._buttons:
                    b.handle_mouse(e)

    # ---------- drawing ----------
    def _draw(self):
        self._draw_backdrop()
        self.screen.blit(self.board.surface, self._board_origin)
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    def _draw_backdrop(self):
        w, h = self.screen.get_size()
        top = (24, 26, 32); bot = (36, 40, 48)
        for y in range(h):
            t = y / max(1, h-1)
            c = tuple(int(top[i] + (bot[i]-top[i]) * t) for i in range(3))
            pygame.draw.line(self.screen, c, (0, y), (w, y))

    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 230  # metrics card sits above
        w = rb.width - 32
        h = 38
        gap = 10

        def add(label, cb, *, togglable=False, store_as: str | None = None):
            nonlocal y
            btn = UIButton(label, pygame.Rect(x, y, w, h), cb, togglable=togglable)
            self._buttons.append(btn)
            if store_as:
                setattr(self, store_as, btn)
            y += h + gap

        add("Run DFS", lambda: self.run_search("DFS"), togglable=True, store_as="btn_dfs")
        add("Run BFS", lambda: self.run_search("BFS"), togglable=True, store_as="btn_bfs")
        add("Reset", self.reset)
        for i, key in enumerate(MAP_KEYS, start=1):
            add(f"Map {i}: {key[3:].replace('_', ' ')}",
                lambda k=key: self.switch_map(k), togglable=True, store_as=f"btn_map{i}")

        self._refresh_active_states()

    def _refresh_active_states(self):
        if hasattr(self, "btn_dfs"):
            self.btn_dfs.set_active(self.selected_algo == "DFS")
        if hasattr(self, "btn_bfs"):
            self.btn_bfs.set_active(self.selected_algo == "BFS")
        for i, key in enumerate(MAP_KEYS, start=1):
            btn = getattr(self, f"btn_map{i}", None)
            if btn:
                btn.set_active(self.selected_map_key == key)

    def _draw_metrics_and_buttons(self):
        rb = self._right_band

        card = pygame.Surface((rb.width - 20, 210), pygame.SRCALPHA)
        pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
        self.screen.blit(card, (rb.x + 10, rb.y + 10))

        x0 = rb.x + 24
        y0 = rb.y + 20

        def line(text, big=False, color=TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        line("Metrics", big=True, color=ACCENT_GOLD)
        m = self.result.metrics if self.result else {}
        line(f"Algo: {self.selected_algo or '-'}")
        line(f"State: {self.playback.state}")
        line(f"Visited: {m.get('visited_count', 0)}")
        line(f"Path Len: {m.get('path_len', 0)}")
        if self.result is not None and not self.result.found:
            line("No path", color=(231, 76, 60))
        line(f"Map: {self.selected_map_key}")

        for b in self._buttons:
            b.draw(self.screen, self.font)


# ---------- main ----------
def main(argv: Optional[List[str]] = None):
    settings = resolve_settings(argv)
    logging.basicConfig(
        level=logging.DEBUG if settings["debug"] else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    try:
        grid = resolve_map(settings["map"])
    except MapError as ex:
        log.error("Failed to load map %s: %s", settings["map"], ex)
        sys.exit(1)
    Viewer(grid, settings["map"]).run()


if __name__ == "__main__":
    main()
