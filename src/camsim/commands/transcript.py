"""In-memory chat transcript between the operator and the console.

Bounded: only the newest ``max_messages`` entries are kept.  Thread-safe,
since HTTP handlers append while other requests read.
"""

from __future__ import annotations

import threading
from collections import deque
from datetime import datetime


class ChatTranscript:
    """Rolling operator/assistant message log."""

    def __init__(self, max_messages: int = 200) -> None:
        self._messages: deque[dict] = deque(maxlen=max_messages)
        self._lock = threading.Lock()

    def append(self, role: str, content: str) -> dict:
        entry = {
            "role": role,
            "content": content,
            "ts": datetime.now().isoformat(),
        }
        with self._lock:
            self._messages.append(entry)
        return entry

    def messages(self, limit: int | None = None) -> list[dict]:
        with self._lock:
            items = list(self._messages)
        if limit is not None:
            return items[-limit:] if limit > 0 else []
        return items

    def clear(self) -> None:
        with self._lock:
            self._messages.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._messages)
