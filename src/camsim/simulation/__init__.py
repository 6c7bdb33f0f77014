"""Camera simulation subsystem: trackers, step function, loops, display."""
from .camera import CameraSimulation
from .display import CameraDisplay
from .params import CollisionPolicy, NotifyPolicy, RescalePolicy, SimulationParams
from .step import reflect_boundaries, reflect_obstacles, step_tracker
from .tracker import MovementState, Tracker, TrackerSnapshot, spawn_trackers

__all__ = [
    "CameraDisplay",
    "CameraSimulation",
    "CollisionPolicy",
    "MovementState",
    "NotifyPolicy",
    "RescalePolicy",
    "SimulationParams",
    "Tracker",
    "TrackerSnapshot",
    "reflect_boundaries",
    "reflect_obstacles",
    "spawn_trackers",
    "step_tracker",
]
