#!/usr/bin/env python3
"""
Two-phase replay of a finished search.

    Idle --start()--> VisitPhase --(visit order exhausted)--> PathPhase
    PathPhase --(path exhausted)--> Idle

One reveal per tick. The visit phase ticks every VISIT_INTERVAL_MS, the path
phase every PATH_INTERVAL_MS. Only one phase timer is armed at a time, and a
new run is refused until the current one is back to Idle (or cancelled).

The painter is whatever draws onto the board; it needs:
- reveal_visited(cell)
- reveal_path(cell)
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

from mazesearch.core.types import Cell, Grid, SearchResult

log = logging.getLogger(__name__)

VISIT_INTERVAL_MS = 50
PATH_INTERVAL_MS = 100

IDLE = "Idle"
VISIT_PHASE = "VisitPhase"
PATH_PHASE = "PathPhase"


@dataclass
class IntervalTimer:
    interval: float          # seconds
    last_fire: float = 0.0

    def arm(self, now: float) -> None:
        self.last_fire = now

    def due(self, now: float) -> bool:
        if now - self.last_fire >= self.interval:
            # fixed cadence, independent of frame timing
            self.last_fire += self.interval
            if now - self.last_fire >= self.interval:
                self.last_fire = now  # too far behind, don't burst
            return True
        return False


class Playback:
    def __init__(self, painter, clock: Callable[[], float] = time.monotonic,
                 visit_interval_ms: int = VISIT_INTERVAL_MS,
                 path_interval_ms: int = PATH_INTERVAL_MS):
        self.painter = painter
        self.clock = clock
        self.visit_interval_ms = visit_interval_ms
        self.path_interval_ms = path_interval_ms

        self.state = IDLE
        self.visit_order: List[Cell] = []
        self.path: List[Cell] = []
        self.visit_index = 0
        self.path_index = 0
        self._skip: tuple = ()
        self._timer: Optional[IntervalTimer] = None

    @property
    def busy(self) -> bool:
        return self.state != IDLE

    # ---------- control ----------
    def start(self, result: SearchResult, grid: Grid) -> bool:
        if self.busy:
            log.debug("run rejected: playback is in %s", self.state)
            return False

        self.visit_order = list(result.visit_order)
        self.path = list(result.path)
        self.visit_index = 0
        self.path_index = 0
        self._skip = (grid.start, grid.goal)

        self.state = VISIT_PHASE
        self._timer = IntervalTimer(self.visit_interval_ms / 1000.0)
        self._timer.arm(self.clock())
        log.debug("playback started: %d visited, %d on path",
                  len(self.visit_order), len(self.path))

        if not self.visit_order:
            self._enter_path_phase()
        return True

    def cancel(self) -> None:
        if self.busy:
            log.debug("playback cancelled in %s", self.state)
        self._finish()

    # ---------- driving ----------
    def update(self, now: Optional[float] = None) -> None:
        """Call once per frame; fires at most one tick when the active timer is due."""
        if not self.busy or self._timer is None:
            return
        if now is None:
            now = self.clock()
        if self._timer.due(now):
            self.tick()

    def tick(self) -> None:
        if self.state == VISIT_PHASE:
            cell = self.visit_order[self.visit_index]
            self.visit_index += 1
            if cell not in self._skip:
                self.painter.reveal_visited(cell)
            if self.visit_index >= len(self.visit_order):
                self._enter_path_phase()
        elif self.state == PATH_PHASE:
            cell = self.path[self.path_index]
            self.path_index += 1
            if cell not in self._skip:
                self.painter.reveal_path(cell)
            if self.path_index >= len(self.path):
                self._finish()

    def _enter_path_phase(self) -> None:
        if not self.path:
            self._finish()
            return
        self.state = PATH_PHASE
        self._timer = IntervalTimer(self.path_interval_ms / 1000.0)
        self._timer.arm(self.clock())

    def _finish(self) -> None:
        self.state = IDLE
        self._timer = None
