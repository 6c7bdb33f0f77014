"""Unit tests for Settings (pydantic-settings) and its simulation mapping."""
from __future__ import annotations

from pathlib import Path

import pytest

from artguard.config import Settings
from camsim.simulation.params import CollisionPolicy, NotifyPolicy


@pytest.mark.unit
class TestSettings:
    def test_defaults(self):
        s = Settings(_env_file=None)
        assert s.app_name == "ArtGuard"
        assert s.port == 8000
        assert s.suspicious_duration == 8.0
        assert s.focus_scale == 2.4
        assert s.floor_maps_path is None
        assert s.simulation_autostart is True

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("SUSPICIOUS_DURATION", "3.5")
        monkeypatch.setenv("NOTIFY_POLICY", "edge")
        monkeypatch.setenv("FLOOR_MAPS_PATH", "/tmp/maps.json")
        s = Settings(_env_file=None)
        assert s.suspicious_duration == 3.5
        assert s.notify_policy == "edge"
        assert s.floor_maps_path == Path("/tmp/maps.json")

    def test_env_file(self, tmp_path):
        env = tmp_path / ".env"
        env.write_text("FRAME_RATE=30\nGRID_SIZE=2\n")
        s = Settings(_env_file=env)
        assert s.frame_rate == 30.0
        assert s.grid_size == 2


@pytest.mark.unit
class TestSimulationParams:
    def test_mapping(self):
        s = Settings(
            _env_file=None,
            tracker_min=3,
            tracker_max=4,
            tracker_max_speed=0.5,
            collision_policy="first_hit",
            notify_policy="edge",
        )
        p = s.simulation_params()
        assert (p.min_trackers, p.max_trackers) == (3, 4)
        assert p.max_speed == 0.5
        assert p.collision_policy is CollisionPolicy.FIRST_HIT
        assert p.notify_policy is NotifyPolicy.EDGE

    def test_invalid_values_surface_on_mapping(self):
        s = Settings(_env_file=None, tracker_min=10, tracker_max=2)
        with pytest.raises(ValueError):
            s.simulation_params()
