"""camsim: museum camera motion simulation and stillness detection engine.

Subpackages:
- floor: floor plan geometry, scaling, camera map catalog.
- simulation: trackers, per-tick step function, camera loops, display.
- commands: operator command interpreter, effects, chat transcript.
- comms: EventBus for suspicious-activity and display events.

Modules:
- museum: cameras, guards and standing alerts.
- alerts: AlertRecorder, the operator-facing suspicious-activity sink.
- console: OperatorConsole tying commands to the display.
"""

__all__ = [
    "alerts",
    "commands",
    "comms",
    "console",
    "floor",
    "museum",
    "simulation",
]
