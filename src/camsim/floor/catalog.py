"""Floor map catalog: camera id to FloorMap registry.

The built-in catalog describes the five mapped rooms of the default
museum.  Camera 6 (loading dock) intentionally has no entry so the
console exercises its "no map data" path.

A deployment can replace the catalog with a JSON file keyed by camera id:

    {
      "1": {"width": 400, "height": 300,
            "obstacles": [{"x": 150, "y": 100, "width": 100, "height": 80}],
            "zones": []},
      ...
    }
"""

from __future__ import annotations

import json
from pathlib import Path

from loguru import logger

from .floormap import FloorMap

# Base-scale geometry, sized for a 2x2 grid of 400x300 feeds.
_DEFAULT_FLOOR_MAPS: dict[int, dict] = {
    1: {  # Main Entrance
        "width": 400,
        "height": 300,
        "obstacles": [
            {"x": 40, "y": 40, "width": 90, "height": 30},     # ticket desk
            {"x": 280, "y": 40, "width": 80, "height": 30},    # cloakroom counter
            {"x": 185, "y": 200, "width": 30, "height": 30},   # info kiosk
        ],
        "zones": [
            {"x": 150, "y": 260, "width": 100, "height": 40},  # doors
            {"x": 30, "y": 30, "width": 110, "height": 60},
        ],
    },
    2: {  # Gallery 1 - Renaissance
        "width": 400,
        "height": 300,
        "obstacles": [
            {"x": 60, "y": 120, "width": 60, "height": 60},    # plinth
            {"x": 280, "y": 120, "width": 60, "height": 60},   # plinth
            {"x": 170, "y": 230, "width": 60, "height": 20},   # bench
        ],
        "zones": [
            {"x": 0, "y": 0, "width": 400, "height": 40},      # north wall hang
            {"x": 150, "y": 100, "width": 100, "height": 100},
        ],
    },
    3: {  # Gallery 3 - Mona Lisa
        "width": 400,
        "height": 300,
        "obstacles": [
            {"x": 150, "y": 100, "width": 100, "height": 80},  # display case
            {"x": 20, "y": 250, "width": 80, "height": 20},    # bench
            {"x": 300, "y": 250, "width": 80, "height": 20},   # bench
        ],
        "zones": [
            {"x": 120, "y": 70, "width": 160, "height": 140},  # barrier rope
        ],
    },
    4: {  # Sculpture Hall
        "width": 400,
        "height": 300,
        "obstacles": [
            {"x": 80, "y": 60, "width": 40, "height": 40},
            {"x": 280, "y": 60, "width": 40, "height": 40},
            {"x": 80, "y": 200, "width": 40, "height": 40},
            {"x": 280, "y": 200, "width": 40, "height": 40},
            {"x": 180, "y": 130, "width": 40, "height": 40},
        ],
        "zones": [],
    },
    5: {  # East Wing Corridor
        "width": 400,
        "height": 300,
        "obstacles": [
            {"x": 0, "y": 0, "width": 400, "height": 90},      # wall
            {"x": 0, "y": 210, "width": 400, "height": 90},    # wall
        ],
        "zones": [
            {"x": 360, "y": 90, "width": 40, "height": 120},   # emergency exit
        ],
    },
}


def default_floor_maps() -> dict[int, FloorMap]:
    """Return a fresh copy of the built-in catalog."""
    return {cid: FloorMap.from_dict(data) for cid, data in _DEFAULT_FLOOR_MAPS.items()}


def load_floor_maps(path: str | Path) -> dict[int, FloorMap]:
    """Load a floor map catalog from JSON.  Keys are camera ids."""
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    maps = {int(cid): FloorMap.from_dict(data) for cid, data in raw.items()}
    logger.info(f"Floor maps: loaded {len(maps)} maps from {path}")
    return maps


def resolve_floor_maps(path: str | Path | None) -> dict[int, FloorMap]:
    """Load ``path`` if given and present, otherwise fall back to defaults."""
    if path:
        p = Path(path)
        if p.exists():
            return load_floor_maps(p)
        logger.warning(f"Floor map catalog not found: {p}, using built-in maps")
    return default_floor_maps()
