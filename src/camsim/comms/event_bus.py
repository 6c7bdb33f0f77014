"""EventBus: thread-safe pub/sub between the camera loops and their consumers.

Camera tick threads publish here and HTTP handlers, alert consumers and
tests subscribe.  Each subscriber gets its own bounded queue, so a slow
reader never blocks a camera thread: on overflow the oldest message is
dropped to make room.

Event types published by the engine:

    suspicious_activity   {"camera_id": int, "tracker": {...}}
    display_changed       {"mode": str, "focused_camera_id": int | None,
                           "cameras": [int, ...]}
    emergency             {"kind": str, "command": str}
"""

from __future__ import annotations

import queue
import threading


class EventBus:
    """Simple thread-safe pub/sub with optional per-subscriber type filter."""

    QUEUE_SIZE = 1000

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._subscribers: list[tuple[queue.Queue, frozenset[str] | None]] = []

    def subscribe(self, event_types: str | list[str] | None = None) -> queue.Queue:
        """Subscribe and return the queue that receives matching events.

        ``event_types`` limits delivery to those types; None receives all.
        """
        if isinstance(event_types, str):
            event_types = [event_types]
        wanted = frozenset(event_types) if event_types else None
        q: queue.Queue = queue.Queue(maxsize=self.QUEUE_SIZE)
        with self._lock:
            self._subscribers.append((q, wanted))
        return q

    def unsubscribe(self, q: queue.Queue) -> None:
        with self._lock:
            self._subscribers = [(s, w) for s, w in self._subscribers if s is not q]

    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def publish(self, event_type: str, data: dict | None = None) -> None:
        msg = {"type": event_type}
        if data is not None:
            msg["data"] = data
        with self._lock:
            for q, wanted in self._subscribers:
                if wanted is not None and event_type not in wanted:
                    continue
                try:
                    q.put_nowait(msg)
                except queue.Full:
                    # Drop oldest so the newest alert always lands.
                    try:
                        q.get_nowait()
                    except queue.Empty:
                        pass
                    try:
                        q.put_nowait(msg)
                    except queue.Full:
                        pass
