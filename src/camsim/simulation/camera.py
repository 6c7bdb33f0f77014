"""CameraSimulation: one camera's tracker population and its tick loop.

Architecture
------------
Each visible camera owns exactly one CameraSimulation.  The instance is
the sole owner of its trackers: the tick loop mutates them, everyone else
reads immutable TrackerSnapshot copies via snapshot().  Nothing mutable is
shared between cameras; the FloorMap is frozen and each instance carries
its own RNG, lock and thread.

Lifecycle (one-shot, like a mounted view):

    sim = CameraSimulation(3, floor_map, params, on_suspicious=cb)
    sim.start()     # daemon thread "cam-3", ticks at params.frame_rate
    ...
    sim.stop()      # no tick begins after this returns; instance is closed

A stopped simulation cannot be restarted.  Re-showing a camera builds a
new instance, either from scratch (fresh random population) or via
rescaled() to carry the population over to a new floor scale.

Threading:
  The tick body runs under ``_lock`` and checks the loop's stop event
  while holding it, so once stop() has set the event no further tick can
  begin.  Suspicious callbacks are dispatched after the lock is released,
  still on the loop thread, so a consumer may call snapshot() from inside
  its callback.  A slow consumer delays the next tick; there is no queue.

Tick rate:
  Velocities are per tick, so frame rate changes how fast trackers cross
  the floor.  The suspicious timer uses the injected clock (monotonic
  seconds) and is independent of tick count.
"""

from __future__ import annotations

import itertools
import random
import threading
import time
from typing import Callable

from loguru import logger

from camsim.floor.floormap import FloorMap

from .params import SimulationParams
from .step import step_tracker
from .tracker import MovementState, Tracker, TrackerSnapshot, spawn_trackers

SnapshotCallback = Callable[[TrackerSnapshot], None]

# Tracker ids restart at 0 in every population, so snapshots also carry the
# generation of the population that produced them.
_generations = itertools.count(1)


class CameraSimulation:
    """Drives the step function for one camera's trackers."""

    def __init__(
        self,
        camera_id: int,
        floor_map: FloorMap,
        params: SimulationParams | None = None,
        on_suspicious: SnapshotCallback | None = None,
        clock: Callable[[], float] = time.monotonic,
        rng: random.Random | None = None,
        trackers: list[Tracker] | None = None,
        generation: int | None = None,
    ) -> None:
        self.camera_id = camera_id
        self.generation = generation if generation is not None else next(_generations)
        self._floor_map = floor_map
        self._params = params or SimulationParams()
        self._on_suspicious = on_suspicious
        self._clock = clock
        self._rng = rng or random.Random()
        self._lock = threading.Lock()
        self._lifecycle_lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._closed = False
        self._ticks = 0
        if trackers is None:
            trackers = spawn_trackers(
                floor_map.width, floor_map.height, self._params, self._rng, self._clock()
            )
        self._trackers: list[Tracker] = trackers

    # -- Read access -------------------------------------------------------

    @property
    def floor_map(self) -> FloorMap:
        return self._floor_map

    @property
    def params(self) -> SimulationParams:
        return self._params

    @property
    def running(self) -> bool:
        return self._thread is not None and not self._stop_event.is_set()

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def tick_count(self) -> int:
        return self._ticks

    def snapshot(self) -> list[TrackerSnapshot]:
        """Current state of every tracker, as immutable copies."""
        with self._lock:
            return [t.snapshot(self.camera_id, self.generation) for t in self._trackers]

    def stats(self) -> dict:
        with self._lock:
            suspicious = sum(1 for t in self._trackers if t.state is MovementState.SUSPICIOUS)
            count = len(self._trackers)
        return {
            "camera_id": self.camera_id,
            "running": self.running,
            "ticks": self._ticks,
            "trackers": count,
            "suspicious": suspicious,
        }

    # -- Ticking -----------------------------------------------------------

    def tick(self, now: float | None = None) -> int:
        """Run one tick synchronously.  Returns the number of notifications.

        Used by tests and by callers that drive the simulation from their
        own scheduler instead of start().
        """
        with self._lock:
            if self._closed:
                raise RuntimeError(f"Camera {self.camera_id} simulation is stopped")
            pending = self._advance(self._clock() if now is None else now)
        self._dispatch(pending)
        return len(pending)

    def _advance(self, now: float) -> list[TrackerSnapshot]:
        """Step every tracker.  Caller holds ``_lock``."""
        pending: list[TrackerSnapshot] = []

        def _collect(tracker: Tracker) -> None:
            pending.append(tracker.snapshot(self.camera_id, self.generation))

        for tracker in self._trackers:
            step_tracker(tracker, self._floor_map, now, self._params, _collect)
        self._ticks += 1
        return pending

    def _dispatch(self, pending: list[TrackerSnapshot]) -> None:
        if self._on_suspicious is None:
            return
        for snap in pending:
            try:
                self._on_suspicious(snap)
            except Exception:
                logger.exception(
                    f"Suspicious-activity consumer failed for camera {self.camera_id}"
                )

    def _tick_loop(self, stop_event: threading.Event) -> None:
        interval = self._params.tick_interval
        while not stop_event.wait(interval):
            with self._lock:
                if stop_event.is_set():
                    break
                pending = self._advance(self._clock())
            self._dispatch(pending)

    # -- Lifecycle ---------------------------------------------------------

    def start(self) -> None:
        """Start the tick thread.  No-op if already running."""
        with self._lifecycle_lock:
            if self._closed:
                raise RuntimeError(
                    f"Camera {self.camera_id} simulation was stopped; create a new one"
                )
            if self._thread is not None:
                return
            self._thread = threading.Thread(
                target=self._tick_loop,
                args=(self._stop_event,),
                name=f"cam-{self.camera_id}",
                daemon=True,
            )
            self._thread.start()
        logger.info(
            f"Camera {self.camera_id}: simulation started "
            f"({len(self._trackers)} trackers, "
            f"{self._floor_map.width:g}x{self._floor_map.height:g}, "
            f"{self._params.frame_rate:g} Hz)"
        )

    def stop(self) -> None:
        """Stop ticking for good.  Idempotent, safe from the loop thread."""
        with self._lifecycle_lock:
            self._stop_event.set()
            with self._lock:
                already_closed = self._closed
                self._closed = True
            thread, self._thread = self._thread, None
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=2.0)
            if thread.is_alive():
                logger.warning(
                    f"Camera {self.camera_id}: tick thread still finishing a callback"
                )
        if not already_closed:
            logger.info(f"Camera {self.camera_id}: simulation stopped after {self._ticks} ticks")

    def rescaled(
        self,
        floor_map: FloorMap,
        on_suspicious: SnapshotCallback | None = None,
    ) -> CameraSimulation:
        """Build a successor on ``floor_map`` that keeps this population.

        Positions are stretched by the width and height ratios; velocity,
        state, last_moved_at and the generation carry over untouched, so
        alert deduplication still sees the same visitors.  The successor is
        not started.
        """
        sx = floor_map.width / self._floor_map.width
        sy = floor_map.height / self._floor_map.height
        with self._lock:
            trackers = [t.rescaled(sx, sy) for t in self._trackers]
        return CameraSimulation(
            self.camera_id,
            floor_map,
            self._params,
            on_suspicious=on_suspicious if on_suspicious is not None else self._on_suspicious,
            clock=self._clock,
            rng=self._rng,
            trackers=trackers,
            generation=self.generation,
        )
