"""Shared request helpers for the console routers."""

from __future__ import annotations

from fastapi import HTTPException, Request


def get_console(request: Request):
    """Retrieve the OperatorConsole from app state, or 503."""
    console = getattr(request.app.state, "console", None)
    if console is None:
        raise HTTPException(503, "Console not available")
    return console


def get_alerts(request: Request):
    alerts = getattr(request.app.state, "alerts", None)
    if alerts is None:
        raise HTTPException(503, "Alert recorder not available")
    return alerts
