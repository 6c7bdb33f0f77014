"""Per-tick tracker update: reflection, movement, stillness classification.

Order of operations (one call = one tracker, one tick):

  1. Candidate position = position + velocity.
  2. Boundary reflection, tested against the candidate.  X and Y are
     checked independently, so a corner hit flips both components.
  3. Obstacle reflection.  Any obstacle whose rectangle overlaps the
     candidate's radius box flips BOTH components.  Under
     CollisionPolicy.EACH_OBSTACLE every overlapping obstacle flips again,
     so two overlaps in one tick cancel out.
  4. Position += (possibly flipped) velocity.  The candidate is discarded;
     a bounced tracker moves backwards from where it stood.
  5. Stillness.  speed < stillness_threshold for longer than
     suspicious_duration (wall-clock, since last_moved_at) marks the
     tracker SUSPICIOUS and notifies.  Any tick at or above the threshold
     marks it MOVING and restarts the timer.

Reflection is the whole collision model: no penetration resolution, no
spatial index.  A tracker may overshoot a wall by up to one tick of
velocity before the next reflection brings it back.
"""

from __future__ import annotations

from typing import Callable

from camsim.floor.floormap import FloorMap

from .params import CollisionPolicy, NotifyPolicy, SimulationParams
from .tracker import MovementState, Tracker

SuspiciousCallback = Callable[[Tracker], None]


def reflect_boundaries(tracker: Tracker, next_x: float, next_y: float,
                       width: float, height: float) -> None:
    r = tracker.radius
    if next_x + r >= width or next_x - r <= 0:
        tracker.vx = -tracker.vx
    if next_y + r >= height or next_y - r <= 0:
        tracker.vy = -tracker.vy


def reflect_obstacles(tracker: Tracker, next_x: float, next_y: float,
                      floor_map: FloorMap,
                      policy: CollisionPolicy = CollisionPolicy.EACH_OBSTACLE) -> int:
    """Flip velocity for obstacles hit by the candidate.  Returns the hit count."""
    hits = 0
    for obs in floor_map.obstacles:
        if obs.intersects_circle_box(next_x, next_y, tracker.radius):
            tracker.vx = -tracker.vx
            tracker.vy = -tracker.vy
            hits += 1
            if policy is CollisionPolicy.FIRST_HIT:
                break
    return hits


def step_tracker(
    tracker: Tracker,
    floor_map: FloorMap,
    now: float,
    params: SimulationParams,
    on_suspicious: SuspiciousCallback | None = None,
) -> bool:
    """Advance ``tracker`` by one tick.  Returns True if it notified."""
    next_x = tracker.x + tracker.vx
    next_y = tracker.y + tracker.vy

    reflect_boundaries(tracker, next_x, next_y, floor_map.width, floor_map.height)
    reflect_obstacles(tracker, next_x, next_y, floor_map, params.collision_policy)

    tracker.x += tracker.vx
    tracker.y += tracker.vy

    if tracker.speed >= params.stillness_threshold:
        tracker.state = MovementState.MOVING
        tracker.last_moved_at = now
        return False

    # Still.  last_moved_at is left alone so the condition keeps holding.
    if now - tracker.last_moved_at <= params.suspicious_duration:
        return False

    was_suspicious = tracker.state is MovementState.SUSPICIOUS
    tracker.state = MovementState.SUSPICIOUS
    if params.notify_policy is NotifyPolicy.EDGE and was_suspicious:
        return False
    if on_suspicious is not None:
        on_suspicious(tracker)
    return True
