"""WebSocket stream of console events.

Bridges the threaded EventBus to WebSocket clients.  Each connection gets
its own bus subscription, optionally narrowed with ``?types=a,b``:

    suspicious_activity   a tracker has been still for too long
    display_changed       the camera grid or focus changed
    emergency             an operator triggered lockdown / police

Clients may send ``{"type": "ping"}`` and get a ``pong`` back.
"""

from __future__ import annotations

import asyncio
import json
import queue
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from loguru import logger

router = APIRouter(prefix="/ws", tags=["websocket"])

POLL_INTERVAL = 0.5  # seconds a worker thread waits on the bus queue


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def _next_event(q: queue.Queue) -> dict | None:
    try:
        return q.get(timeout=POLL_INTERVAL)
    except queue.Empty:
        return None


async def _forward(websocket: WebSocket, q: queue.Queue) -> None:
    """Pump bus messages to the client.  Blocking reads run off the loop."""
    loop = asyncio.get_running_loop()
    while True:
        msg = await loop.run_in_executor(None, _next_event, q)
        if msg is None:
            continue
        await websocket.send_json({**msg, "timestamp": _timestamp()})


async def _listen(websocket: WebSocket) -> None:
    """Answer pings until the client goes away (raises WebSocketDisconnect)."""
    while True:
        data = await websocket.receive_text()
        try:
            message = json.loads(data)
        except json.JSONDecodeError:
            await websocket.send_json({"type": "error", "message": "Invalid JSON"})
            continue
        if isinstance(message, dict) and message.get("type") == "ping":
            await websocket.send_json({"type": "pong", "timestamp": _timestamp()})


@router.websocket("/events")
async def stream_events(websocket: WebSocket, types: Optional[str] = None):
    event_bus = getattr(websocket.app.state, "event_bus", None)
    if event_bus is None:
        await websocket.close(code=1013)
        return

    wanted = [t.strip() for t in types.split(",") if t.strip()] if types else None
    # Subscribe before accepting so nothing published after "connected" is missed.
    q = event_bus.subscribe(wanted)
    await websocket.accept()
    logger.info(f"Event stream connected (types={wanted or 'all'})")

    tasks: list[asyncio.Task] = []
    try:
        await websocket.send_json({
            "type": "connected",
            "timestamp": _timestamp(),
            "events": wanted or "all",
        })
        tasks = [
            asyncio.create_task(_forward(websocket, q)),
            asyncio.create_task(_listen(websocket)),
        ]
        done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
        for task in done:
            exc = task.exception()
            if exc is not None and not isinstance(exc, WebSocketDisconnect):
                raise exc
    except WebSocketDisconnect:
        pass
    finally:
        for task in tasks:
            task.cancel()
        event_bus.unsubscribe(q)
        logger.info("Event stream disconnected")
        await asyncio.gather(*tasks, return_exceptions=True)
