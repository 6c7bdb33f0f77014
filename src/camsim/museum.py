"""Museum context: cameras, guards and standing alerts.

This is the static registry the operator console reasons about.  The
command interpreter reads it to answer status and location questions and
to resolve camera references; the display controller reads the camera
list to decide which feeds make up the grid.

It is plain data.  Nothing here changes while the console runs, and the
suspicious-activity alerts produced by the simulation are kept separately
by :class:`camsim.alerts.AlertRecorder`.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Callable

from loguru import logger


@dataclass(frozen=True)
class Camera:
    id: int
    name: str
    status: str = "active"  # "active" or "offline"
    room: str = ""


@dataclass(frozen=True)
class Guard:
    name: str
    location: str
    status: str = "on-duty"  # "on-duty", "off-duty", "break"


@dataclass(frozen=True)
class Alert:
    id: int
    severity: str  # "low", "medium", "high"
    message: str
    time: str
    camera: int | None = None


@dataclass
class MuseumContext:
    cameras: list[Camera] = field(default_factory=list)
    guards: list[Guard] = field(default_factory=list)
    alerts: list[Alert] = field(default_factory=list)

    def camera(self, camera_id: int | None) -> Camera | None:
        if camera_id is None:
            return None
        for cam in self.cameras:
            if cam.id == camera_id:
                return cam
        return None

    def find_camera(self, predicate: Callable[[Camera], bool]) -> Camera | None:
        return next((c for c in self.cameras if predicate(c)), None)

    def cameras_online(self) -> int:
        return sum(1 for c in self.cameras if c.status == "active")

    def guards_on_duty(self) -> int:
        return sum(1 for g in self.guards if g.status == "on-duty")

    def to_dict(self) -> dict:
        return {
            "cameras": [asdict(c) for c in self.cameras],
            "guards": [asdict(g) for g in self.guards],
            "alerts": [asdict(a) for a in self.alerts],
        }

    @classmethod
    def from_dict(cls, data: dict) -> MuseumContext:
        return cls(
            cameras=[Camera(**c) for c in data.get("cameras", [])],
            guards=[Guard(**g) for g in data.get("guards", [])],
            alerts=[Alert(**a) for a in data.get("alerts", [])],
        )


def default_museum() -> MuseumContext:
    """The built-in six-camera museum used when no JSON file is configured."""
    return MuseumContext(
        cameras=[
            Camera(1, "Main Entrance", "active", "Lobby"),
            Camera(2, "Gallery 1 - Renaissance", "active", "Gallery 1"),
            Camera(3, "Gallery 3 - Mona Lisa", "active", "Gallery 3"),
            Camera(4, "Sculpture Hall", "active", "Hall B"),
            Camera(5, "East Wing Corridor", "active", "East Wing"),
            Camera(6, "Loading Dock", "offline", "Service Area"),
        ],
        guards=[
            Guard("Carlos Martinez", "Main Entrance", "on-duty"),
            Guard("Mei Chen", "Gallery 3", "on-duty"),
            Guard("Ade Okafor", "East Wing", "on-duty"),
            Guard("Louise Dubois", "Security Office", "break"),
        ],
        alerts=[
            Alert(1, "medium", "Camera 6 feed offline", "21:02", camera=6),
            Alert(2, "low", "Visitor lingering near display case", "21:14", camera=3),
        ],
    )


def load_museum(path: str | Path) -> MuseumContext:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    museum = MuseumContext.from_dict(data)
    logger.info(
        f"Museum context: loaded {len(museum.cameras)} cameras, "
        f"{len(museum.guards)} guards from {path}"
    )
    return museum


def resolve_museum(path: str | Path | None) -> MuseumContext:
    """Load ``path`` if given and present, otherwise use :func:`default_museum`."""
    if path:
        p = Path(path)
        if p.exists():
            return load_museum(p)
        logger.warning(f"Museum context file not found: {p}, using built-in museum")
    return default_museum()
