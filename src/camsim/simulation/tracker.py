"""Tracker: one simulated visitor moving through a camera's floor plan.

A tracker is a point mass with a fixed radius and a constant-speed
velocity.  Collisions only ever flip the sign of a velocity component, so
the speed a tracker is spawned with is the speed it keeps for life.  That
makes "is this tracker still?" a property of its spawn velocity, and the
suspicious flag an alarm for visitors who stopped dead.

Trackers are created in a batch when a camera simulation starts and are
never individually destroyed.  The population lives and dies with the
owning :class:`~camsim.simulation.camera.CameraSimulation`.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, replace
from enum import Enum

from .params import SimulationParams


class MovementState(str, Enum):
    MOVING = "moving"
    SUSPICIOUS = "suspicious"


@dataclass(frozen=True)
class TrackerSnapshot:
    """Immutable copy of a tracker, safe to hand to other threads."""

    camera_id: int | None
    tracker_id: int
    x: float
    y: float
    vx: float
    vy: float
    radius: float
    state: MovementState
    last_moved_at: float
    generation: int = 0  # population the tracker belongs to; ids repeat across populations

    @property
    def speed(self) -> float:
        return math.hypot(self.vx, self.vy)

    def to_dict(self) -> dict:
        return {
            "camera_id": self.camera_id,
            "tracker_id": self.tracker_id,
            "position": {"x": self.x, "y": self.y},
            "velocity": {"x": self.vx, "y": self.vy},
            "speed": self.speed,
            "radius": self.radius,
            "state": self.state.value,
            "last_moved_at": self.last_moved_at,
            "generation": self.generation,
        }


@dataclass
class Tracker:
    """A single simulated person.  Mutated in place by the step function."""

    tracker_id: int
    x: float
    y: float
    vx: float
    vy: float
    radius: float = 5.0
    state: MovementState = MovementState.MOVING
    last_moved_at: float = 0.0

    @property
    def speed(self) -> float:
        return math.hypot(self.vx, self.vy)

    @property
    def is_suspicious(self) -> bool:
        return self.state is MovementState.SUSPICIOUS

    def snapshot(self, camera_id: int | None = None, generation: int = 0) -> TrackerSnapshot:
        return TrackerSnapshot(
            camera_id=camera_id,
            tracker_id=self.tracker_id,
            x=self.x,
            y=self.y,
            vx=self.vx,
            vy=self.vy,
            radius=self.radius,
            state=self.state,
            last_moved_at=self.last_moved_at,
            generation=generation,
        )

    def rescaled(self, sx: float, sy: float) -> Tracker:
        """Copy with the position stretched by (sx, sy).  Velocity is kept."""
        return replace(self, x=self.x * sx, y=self.y * sy)


def spawn_trackers(
    width: float,
    height: float,
    params: SimulationParams,
    rng: random.Random,
    now: float,
    count: int | None = None,
) -> list[Tracker]:
    """Create a fresh population for a ``width`` x ``height`` floor.

    Positions are uniform over the whole floor, walls included; a tracker
    spawned against a wall is pushed back by its first boundary reflection.
    Obstacles are not avoided at spawn time either.
    """
    if count is None:
        count = rng.randint(params.min_trackers, params.max_trackers)
    return [
        Tracker(
            tracker_id=i,
            x=rng.uniform(0.0, width),
            y=rng.uniform(0.0, height),
            vx=rng.uniform(-params.max_speed, params.max_speed),
            vy=rng.uniform(-params.max_speed, params.max_speed),
            radius=params.tracker_radius,
            state=MovementState.MOVING,
            last_moved_at=now,
        )
        for i in range(count)
    ]
