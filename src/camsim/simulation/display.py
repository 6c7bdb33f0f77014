"""CameraDisplay: decides which camera simulations run, and at what scale.

Architecture
------------
The display is the receiving end of the command effects bridge.  The
operator console (or the HTTP API) hands it Effects; the only two it acts
on are the focus request and "show all cameras".  Everything else
(emergency, help) is consumed elsewhere.

Two layouts:

  grid     The first ``grid_size`` cameras of the museum, each on its base
           floor map.  This is the startup layout.
  focused  The focused camera alone, floor map scaled by
           ``params.focus_scale``.

A focus id that names no museum camera keeps the id but shows the grid.
A camera with no registered floor map is listed as ``no_data`` and never
gets a simulation.

Rebuilds
--------
Whenever the visible layout changes, every running simulation is stopped
first and only then is the new set built and started, so two loops never
tick the same camera at once.  With RescalePolicy.REINITIALIZE (default)
every rebuild spawns fresh populations, discarding suspicious history.
With RescalePolicy.CARRY_OVER a camera that stays visible keeps its
trackers, rescaled to the new floor size.

Suspicious notifications from every camera are fanned out to the
EventBus (``suspicious_activity``) and to the optional alert sink.
"""

from __future__ import annotations

import threading
import time
from typing import TYPE_CHECKING, Callable

from loguru import logger

from camsim.commands.effects import Effects
from camsim.floor.floormap import FloorMap, scale_floor_map
from camsim.museum import Camera, MuseumContext

from .camera import CameraSimulation
from .params import RescalePolicy, SimulationParams
from .tracker import TrackerSnapshot

if TYPE_CHECKING:
    from camsim.comms.event_bus import EventBus

AlertSink = Callable[[int, TrackerSnapshot], None]


class CameraDisplay:
    """Owns the set of visible CameraSimulations and switches between layouts."""

    def __init__(
        self,
        museum: MuseumContext,
        floor_maps: dict[int, FloorMap],
        params: SimulationParams | None = None,
        event_bus: EventBus | None = None,
        alert_sink: AlertSink | None = None,
        rescale_policy: RescalePolicy | str = RescalePolicy.REINITIALIZE,
        grid_size: int = 4,
        autostart: bool = True,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._museum = museum
        self._floor_maps = dict(floor_maps)
        self._params = params or SimulationParams()
        self._event_bus = event_bus
        self._alert_sink = alert_sink
        self._rescale_policy = RescalePolicy(rescale_policy)
        self._grid_size = grid_size
        self._autostart = autostart
        self._clock = clock
        self._lock = threading.RLock()
        self._focused_camera_id: int | None = None
        self._layout: list[tuple[Camera, float]] = []
        self._simulations: dict[int, CameraSimulation] = {}
        self._closed = False
        self._rebuild()

    # -- Read access -------------------------------------------------------

    @property
    def focused_camera_id(self) -> int | None:
        return self._focused_camera_id

    @property
    def mode(self) -> str:
        with self._lock:
            focused = self._museum.camera(self._focused_camera_id)
            return "focused" if focused is not None else "grid"

    @property
    def params(self) -> SimulationParams:
        return self._params

    def base_floor_map(self, camera_id: int) -> FloorMap | None:
        return self._floor_maps.get(camera_id)

    def get_simulation(self, camera_id: int) -> CameraSimulation | None:
        with self._lock:
            return self._simulations.get(camera_id)

    def simulations(self) -> list[CameraSimulation]:
        with self._lock:
            return list(self._simulations.values())

    def views(self) -> list[dict]:
        """One entry per visible camera, in display order."""
        with self._lock:
            layout = list(self._layout)
            sims = dict(self._simulations)
            focused = self.mode == "focused"
        views = []
        for camera, scale in layout:
            sim = sims.get(camera.id)
            view = {
                "camera_id": camera.id,
                "name": camera.name,
                "focused": focused,
                "scale": scale,
                "status": "running" if sim is not None else "no_data",
                "floor_map": sim.floor_map.to_dict() if sim is not None else None,
            }
            if sim is not None:
                stats = sim.stats()
                view["trackers"] = stats["trackers"]
                view["suspicious"] = stats["suspicious"]
            views.append(view)
        return views

    def state(self) -> dict:
        return {
            "mode": self.mode,
            "focused_camera_id": self._focused_camera_id,
            "views": self.views(),
        }

    # -- Effects -----------------------------------------------------------

    def apply_effects(self, effects: Effects | dict | None) -> bool:
        """Apply focus/show-all effects.  Returns True if the layout changed."""
        if effects is None:
            return False
        if isinstance(effects, dict):
            effects = Effects.from_dict(effects)

        with self._lock:
            focus = self._focused_camera_id
            if effects.focus_requested:
                focus = effects.focus_camera_id
                logger.debug(f"Display: focusCameraId={focus}")
            if effects.show_all_cameras:
                focus = None
                logger.debug("Display: showAllCameras")
            self._focused_camera_id = focus
            return self._rebuild()

    def focus(self, camera_id: int | None) -> bool:
        return self.apply_effects(Effects.focus(camera_id))

    def show_all(self) -> bool:
        return self.apply_effects(Effects.show_all())

    # -- Layout ------------------------------------------------------------

    def _desired_layout(self) -> list[tuple[Camera, float]]:
        focused = self._museum.camera(self._focused_camera_id)
        if focused is not None:
            return [(focused, self._params.focus_scale)]
        return [(cam, 1.0) for cam in self._museum.cameras[: self._grid_size]]

    def _rebuild(self) -> bool:
        with self._lock:
            if self._closed:
                raise RuntimeError("CameraDisplay is closed")
            layout = self._desired_layout()
            signature = [(c.id, s) for c, s in layout]
            if self._layout and signature == [(c.id, s) for c, s in self._layout]:
                return False

            previous = self._simulations
            for sim in previous.values():
                sim.stop()

            simulations: dict[int, CameraSimulation] = {}
            for camera, scale in layout:
                base = self._floor_maps.get(camera.id)
                if base is None:
                    logger.warning(f"No map data for {camera.name} (camera {camera.id})")
                    continue
                floor_map = base if scale == 1.0 else scale_floor_map(base, scale)
                prior = previous.get(camera.id)
                if prior is not None and self._rescale_policy is RescalePolicy.CARRY_OVER:
                    sim = prior.rescaled(floor_map)
                else:
                    sim = CameraSimulation(
                        camera.id,
                        floor_map,
                        self._params,
                        on_suspicious=self._callback_for(camera.id),
                        clock=self._clock,
                    )
                simulations[camera.id] = sim

            self._layout = layout
            self._simulations = simulations
            if self._autostart:
                for sim in simulations.values():
                    sim.start()

        logger.info(
            f"Display: {self.mode} layout, cameras {[c.id for c, _ in layout]} "
            f"({len(simulations)} simulated)"
        )
        if self._event_bus is not None:
            self._event_bus.publish("display_changed", {
                "mode": self.mode,
                "focused_camera_id": self._focused_camera_id,
                "cameras": [c.id for c, _ in layout],
            })
        return True

    def _callback_for(self, camera_id: int) -> Callable[[TrackerSnapshot], None]:
        def _on_suspicious(snapshot: TrackerSnapshot) -> None:
            if self._event_bus is not None:
                self._event_bus.publish("suspicious_activity", {
                    "camera_id": camera_id,
                    "tracker": snapshot.to_dict(),
                })
            if self._alert_sink is not None:
                self._alert_sink(camera_id, snapshot)

        return _on_suspicious

    def close(self) -> None:
        """Stop every simulation.  The display cannot be used afterwards."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            for sim in self._simulations.values():
                sim.stop()
            count = len(self._simulations)
            self._simulations = {}
        logger.info(f"Display closed, {count} camera simulations stopped")
