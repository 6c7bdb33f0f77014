"""Alert API: standing museum alerts plus recorded suspicious activity."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Request

from .deps import get_alerts, get_console

router = APIRouter(prefix="/api/alerts", tags=["alerts"])


@router.get("")
async def get_alerts_overview(request: Request, limit: int = 50):
    console = get_console(request)
    recorder = get_alerts(request)
    return {
        "static": [asdict(a) for a in console.museum.alerts],
        "suspicious": [r.to_dict() for r in recorder.recent(limit)],
        "counts": recorder.counts(),
    }


@router.delete("")
async def clear_suspicious(request: Request):
    """Forget recorded suspicious activity (standing alerts are untouched)."""
    recorder = get_alerts(request)
    recorder.clear()
    return {"status": "cleared"}
