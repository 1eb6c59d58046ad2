import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from mazesearch.core.maps import MAP_FILES, load_map, parse_map


@pytest.fixture
def reference_grid():
    return load_map(MAP_FILES["01_reference"])


@pytest.fixture
def two_routes_grid():
    return load_map(MAP_FILES["02_two_routes"])


@pytest.fixture
def walled_row_grid():
    return load_map(MAP_FILES["03_walled_row"])


@pytest.fixture
def boxed_goal_grid():
    # goal fenced in on all four sides
    return parse_map({
        "width": 5, "height": 5, "start": [0, 0], "goal": [3, 3],
        "cells": [
            [0, 0, 0, 0, 0],
            [0, 0, 0, 0, 0],
            [0, 0, 0, 1, 0],
            [0, 0, 1, 0, 1],
            [0, 0, 0, 1, 0],
        ],
    })


class RecordingPainter:
    def __init__(self):
        self.calls = []

    def reveal_visited(self, cell):
        self.calls.append(("visited", cell))

    def reveal_path(self, cell):
        self.calls.append(("path", cell))


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms / 1000.0
        return self.now


@pytest.fixture
def painter():
    return RecordingPainter()


@pytest.fixture
def clock():
    return FakeClock()
