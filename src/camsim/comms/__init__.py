"""Internal messaging between camera loops and consumers."""
from .event_bus import EventBus

__all__ = ["EventBus"]
