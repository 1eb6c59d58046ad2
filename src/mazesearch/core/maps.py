#!/usr/bin/env python3
"""Map loading for the bundled JSON layouts (and any user-supplied file)."""

import json
import logging
from pathlib import Path
from typing import Any, Dict

from mazesearch.core.types import Grid, OPEN, WALL

log = logging.getLogger(__name__)

MAP_DIR = Path(__file__).resolve().parents[1] / "maps"
MAP_FILES = {
    "01_reference":  MAP_DIR / "01_reference.json",
    "02_two_routes": MAP_DIR / "02_two_routes.json",
    "03_walled_row": MAP_DIR / "03_walled_row.json",
}
DEFAULT_MAP = "01_reference"


class MapError(ValueError):
    pass


def parse_map(data: Dict[str, Any]) -> Grid:
    try:
        width = int(data["width"])
        height = int(data["height"])
        start = tuple(data["start"])
        goal = tuple(data["goal"])
        cells = data["cells"]
        size_ok = len(cells) == height and all(len(r) == width for r in cells)
    except (KeyError, TypeError, ValueError) as ex:
        raise MapError(f"malformed map: {ex}") from ex

    if len(start) != 2 or len(goal) != 2:
        raise MapError("start and goal must be [x, y]")
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in start + goal):
        raise MapError("start and goal coordinates must be integers")
    if not size_ok:
        raise MapError("cells size mismatch")
    if any(v not in (OPEN, WALL) for r in cells for v in r):
        raise MapError("cells must be 0 (open) or 1 (wall)")

    grid = Grid(width, height, cells, start, goal)
    for label, c in (("start", grid.start), ("goal", grid.goal)):
        if not grid.in_bounds(c):
            raise MapError(f"{label} out of bounds")
        if not grid.is_open(c):
            raise MapError(f"{label} is a wall")
    return grid


def load_map(path: Path) -> Grid:
    try:
        with open(path, "r") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as ex:
        raise MapError(f"cannot read {path}: {ex}") from ex
    grid = parse_map(data)
    log.debug("loaded %s (%dx%d, %d walls)", path, grid.width, grid.height, len(grid.walls()))
    return grid


def resolve_map(key_or_path: str) -> Grid:
    """Bundled map key (e.g. "01_reference") or a path to a JSON file."""
    if key_or_path in MAP_FILES:
        return load_map(MAP_FILES[key_or_path])
    p = Path(key_or_path)
    if p.suffix == ".json":
        return load_map(p)
    raise MapError(f"unknown map: {key_or_path}")
