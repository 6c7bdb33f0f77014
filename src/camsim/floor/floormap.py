"""FloorMap: static camera floor plan with obstacles and zones.

A floor map is the read-only geometry one camera's simulation runs over:
an extent (width x height) plus two ordered lists of axis-aligned
rectangles.  Obstacles block tracker motion; zones are display-only
overlays with no physical effect.

Coordinate convention:
    (0, 0) is the top-left corner, +X to the right, +Y down, matching the
    pixel space the frontend draws into.  Units are arbitrary "map units"
    that map 1:1 to pixels at base scale.

Geometry is NOT validated.  Floor maps come from static configuration, so
an obstacle that pokes outside the map or has a negative size simply
produces odd bounces rather than an error.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle anchored at its top-left corner."""

    x: float
    y: float
    width: float
    height: float

    def intersects_circle_box(self, cx: float, cy: float, radius: float) -> bool:
        """Strict AABB overlap between this rect and the box around a circle.

        The circle is approximated by its bounding square, so corners count
        as contact.  Touching edges (equality) is NOT an overlap.
        """
        return (
            cx + radius > self.x
            and cx - radius < self.x + self.width
            and cy + radius > self.y
            and cy - radius < self.y + self.height
        )

    def scaled(self, factor: float) -> Rect:
        return Rect(
            x=self.x * factor,
            y=self.y * factor,
            width=self.width * factor,
            height=self.height * factor,
        )

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: dict) -> Rect:
        return cls(
            x=float(data["x"]),
            y=float(data["y"]),
            width=float(data["width"]),
            height=float(data["height"]),
        )


@dataclass(frozen=True)
class FloorMap:
    """Immutable floor plan for one camera."""

    width: float
    height: float
    obstacles: tuple[Rect, ...] = ()
    zones: tuple[Rect, ...] = ()

    def scaled(self, factor: float) -> FloorMap:
        """Shorthand for :func:`scale_floor_map`."""
        return scale_floor_map(self, factor)

    def to_dict(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "obstacles": [o.to_dict() for o in self.obstacles],
            "zones": [z.to_dict() for z in self.zones],
        }

    @classmethod
    def from_dict(cls, data: dict) -> FloorMap:
        """Build a FloorMap from the ``{width, height, obstacles, zones}`` shape.

        Missing obstacle/zone lists are treated as empty.
        """
        return cls(
            width=float(data["width"]),
            height=float(data["height"]),
            obstacles=tuple(Rect.from_dict(o) for o in data.get("obstacles", [])),
            zones=tuple(Rect.from_dict(z) for z in data.get("zones", [])),
        )


def scale_floor_map(floor_map: FloorMap, factor: float) -> FloorMap:
    """Return a copy of ``floor_map`` with every length multiplied by ``factor``.

    Ordering and count of obstacles and zones are preserved.  The input is
    never modified.  Raises ValueError for a zero, negative or non-finite
    factor.
    """
    if not math.isfinite(factor) or factor <= 0:
        raise ValueError(f"Scale factor must be a positive finite number, got {factor!r}")
    return FloorMap(
        width=floor_map.width * factor,
        height=floor_map.height * factor,
        obstacles=tuple(o.scaled(factor) for o in floor_map.obstacles),
        zones=tuple(z.scaled(factor) for z in floor_map.zones),
    )
