"""Floor plan geometry: maps, rectangles, scaling, catalog."""
from .catalog import default_floor_maps, load_floor_maps, resolve_floor_maps
from .floormap import FloorMap, Rect, scale_floor_map

__all__ = [
    "FloorMap",
    "Rect",
    "default_floor_maps",
    "load_floor_maps",
    "resolve_floor_maps",
    "scale_floor_map",
]
