"""Tunable parameters and named policies for the camera simulation.

Defaults reproduce the console's stock behaviour:

    tracker count        10-35 (inclusive, drawn per camera start)
    tracker radius       5 map units
    velocity range       [-0.1, 0.1] units/tick per axis
    stillness threshold  0.025 units/tick
    suspicious duration  8 seconds of wall-clock stillness
    focus scale          2.4x
    frame rate           60 Hz

The stillness threshold sits far below the typical spawn speed, so only a
tracker whose velocity vector itself is near zero is ever flagged.  A
tracker that is merely wandering in a small area keeps its full speed and
stays MOVING.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class CollisionPolicy(str, Enum):
    """How many obstacles may reflect a tracker in a single tick.

    EACH_OBSTACLE negates the velocity once per intersecting obstacle, so
    overlapping two obstacles at once cancels the bounce.  FIRST_HIT stops
    at the first intersecting obstacle.
    """

    EACH_OBSTACLE = "each_obstacle"
    FIRST_HIT = "first_hit"


class NotifyPolicy(str, Enum):
    """When a suspicious tracker notifies its consumer.

    LEVEL fires on every tick the suspicious condition holds.  EDGE fires
    only on the tick the tracker crosses from MOVING into SUSPICIOUS.
    """

    LEVEL = "level"
    EDGE = "edge"


class RescalePolicy(str, Enum):
    """What happens to a camera's population when its floor map is rescaled.

    REINITIALIZE spawns a fresh random population (suspicious history is
    lost).  CARRY_OVER keeps the existing trackers and rescales their
    positions to the new extent.
    """

    REINITIALIZE = "reinitialize"
    CARRY_OVER = "carry_over"


@dataclass(frozen=True)
class SimulationParams:
    min_trackers: int = 10
    max_trackers: int = 35
    tracker_radius: float = 5.0
    max_speed: float = 0.1
    stillness_threshold: float = 0.025
    suspicious_duration: float = 8.0  # seconds
    focus_scale: float = 2.4
    frame_rate: float = 60.0  # ticks per second
    collision_policy: CollisionPolicy = CollisionPolicy.EACH_OBSTACLE
    notify_policy: NotifyPolicy = NotifyPolicy.LEVEL

    def __post_init__(self) -> None:
        if self.min_trackers < 0 or self.max_trackers < self.min_trackers:
            raise ValueError(
                f"Invalid tracker count range [{self.min_trackers}, {self.max_trackers}]"
            )
        for name in (
            "tracker_radius",
            "stillness_threshold",
            "suspicious_duration",
            "focus_scale",
            "frame_rate",
        ):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"{name} must be positive, got {value!r}")
        if not math.isfinite(self.max_speed) or self.max_speed < 0:
            raise ValueError(f"max_speed must be non-negative, got {self.max_speed!r}")
        # Accept plain strings (e.g. from settings) for the policy fields.
        object.__setattr__(self, "collision_policy", CollisionPolicy(self.collision_policy))
        object.__setattr__(self, "notify_policy", NotifyPolicy(self.notify_policy))

    @property
    def tick_interval(self) -> float:
        return 1.0 / self.frame_rate
