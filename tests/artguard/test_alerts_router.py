"""Unit tests for the alerts router (/api/alerts)."""
from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from artguard.config import Settings
from artguard.main import build_console
from artguard.routers.alerts import router
from camsim.simulation.tracker import MovementState, Tracker


def _make_app(console=None, alerts=None):
    app = FastAPI()
    app.include_router(router)
    app.state.console = console
    app.state.alerts = alerts
    return app


@pytest.fixture
def stack():
    console, alerts, _bus = build_console(Settings(simulation_autostart=False))
    yield console, alerts
    console.shutdown()


def _suspicious(tracker_id: int, camera_id: int = 3):
    t = Tracker(tracker_id, 100.0, 100.0, 0.0, 0.0, state=MovementState.SUSPICIOUS)
    return t.snapshot(camera_id)


@pytest.mark.unit
class TestGetAlerts:
    """GET /api/alerts"""

    def test_static_alerts(self, stack):
        client = TestClient(_make_app(*stack))
        data = client.get("/api/alerts").json()
        assert [a["id"] for a in data["static"]] == [1, 2]
        assert data["static"][0]["severity"] == "medium"
        assert data["suspicious"] == []
        assert data["counts"]["recorded"] == 0

    def test_recorded_suspicious_activity(self, stack):
        console, alerts = stack
        alerts.record(3, _suspicious(0))
        alerts.record(3, _suspicious(1))
        client = TestClient(_make_app(console, alerts))
        data = client.get("/api/alerts", params={"limit": 1}).json()
        assert len(data["suspicious"]) == 1
        assert data["suspicious"][0]["tracker_id"] == 1
        assert data["counts"]["recorded"] == 2

    def test_503_without_recorder(self, stack):
        console, _alerts = stack
        client = TestClient(_make_app(console, None))
        assert client.get("/api/alerts").status_code == 503


@pytest.mark.unit
class TestClearAlerts:
    """DELETE /api/alerts"""

    def test_clear(self, stack):
        console, alerts = stack
        alerts.record(3, _suspicious(0))
        client = TestClient(_make_app(console, alerts))
        assert client.delete("/api/alerts").json() == {"status": "cleared"}
        assert alerts.recent() == []
        assert len(client.get("/api/alerts").json()["static"]) == 2
