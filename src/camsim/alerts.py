"""AlertRecorder: the operator-facing consumer of suspicious-activity events.

The simulation notifies on every tick a tracker stays suspicious (or only
on the transition, with NotifyPolicy.EDGE).  At 60 Hz the level-triggered
stream is far too chatty for a human, so the recorder applies a cooldown
per (camera, population, tracker): the first notification records an
alert, and repeats inside ``cooldown`` seconds only bump a suppression
counter.  Tracker ids restart at 0 whenever a camera spawns a fresh
population, so the population generation is part of the key.

Records are kept in a bounded deque, newest last.  Nothing is persisted.
"""

from __future__ import annotations

import threading
import time
from collections import deque
from dataclasses import dataclass, field
from typing import Callable

from loguru import logger

from camsim.simulation.tracker import TrackerSnapshot


@dataclass
class SuspiciousActivity:
    """One recorded alert for a stationary tracker."""

    camera_id: int
    tracker_id: int
    position: tuple[float, float]
    still_for: float  # seconds since the tracker last moved
    detected_at: float = field(default_factory=time.time)  # wall clock
    repeats: int = 0  # notifications suppressed by the cooldown since recording
    generation: int = 0  # tracker population; ids restart with each population

    def to_dict(self) -> dict:
        return {
            "camera_id": self.camera_id,
            "tracker_id": self.tracker_id,
            "position": {"x": self.position[0], "y": self.position[1]},
            "still_for": round(self.still_for, 2),
            "detected_at": self.detected_at,
            "repeats": self.repeats,
            "generation": self.generation,
        }


class AlertRecorder:
    """Deduplicating sink for ``(camera_id, TrackerSnapshot)`` notifications."""

    def __init__(
        self,
        cooldown: float = 30.0,
        max_records: int = 200,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.cooldown = cooldown
        self._clock = clock
        self._records: deque[SuspiciousActivity] = deque(maxlen=max_records)
        self._last_alert: dict[tuple[int, int, int], float] = {}
        self._latest: dict[tuple[int, int, int], SuspiciousActivity] = {}
        self._notifications = 0
        self._suppressed = 0
        self._lock = threading.Lock()

    def record(self, camera_id: int, snapshot: TrackerSnapshot) -> SuspiciousActivity | None:
        """Handle one notification.  Returns the new record, or None if suppressed."""
        now = self._clock()
        key = (camera_id, snapshot.generation, snapshot.tracker_id)
        with self._lock:
            self._notifications += 1
            last = self._last_alert.get(key)
            if last is not None and now - last < self.cooldown:
                self._suppressed += 1
                latest = self._latest.get(key)
                if latest is not None:
                    latest.repeats += 1
                return None
            activity = SuspiciousActivity(
                camera_id=camera_id,
                tracker_id=snapshot.tracker_id,
                position=(snapshot.x, snapshot.y),
                still_for=now - snapshot.last_moved_at,
                generation=snapshot.generation,
            )
            self._last_alert[key] = now
            self._latest[key] = activity
            self._records.append(activity)
        logger.warning(
            f"SUSPICIOUS ACTIVITY: camera {camera_id} tracker {snapshot.tracker_id} "
            f"at ({snapshot.x:.1f}, {snapshot.y:.1f}), still for {activity.still_for:.1f}s"
        )
        return activity

    def __call__(self, camera_id: int, snapshot: TrackerSnapshot) -> None:
        self.record(camera_id, snapshot)

    def recent(self, limit: int | None = None) -> list[SuspiciousActivity]:
        with self._lock:
            records = list(self._records)
        if limit is not None:
            records = records[-limit:] if limit > 0 else []
        return records

    def counts(self) -> dict:
        with self._lock:
            return {
                "recorded": len(self._records),
                "notifications": self._notifications,
                "suppressed": self._suppressed,
            }

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
            self._last_alert.clear()
            self._latest.clear()
            self._notifications = 0
            self._suppressed = 0
