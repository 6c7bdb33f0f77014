"""Unit tests for Effects wire conversion."""
from __future__ import annotations

import pytest

from camsim.commands.effects import Effects

pytestmark = pytest.mark.unit


class TestConstructors:
    def test_default_is_empty(self):
        assert Effects().is_empty
        assert Effects().to_dict() == {}

    def test_focus(self):
        e = Effects.focus(3)
        assert e.focus_requested
        assert e.to_dict() == {"focusCameraId": 3}

    def test_focus_none_is_explicit_clear(self):
        e = Effects.focus(None)
        assert not e.is_empty
        assert e.to_dict() == {"focusCameraId": None}

    def test_show_all(self):
        assert Effects.show_all().to_dict() == {"focusCameraId": None, "showAllCameras": True}


class TestFromDict:
    def test_none_and_empty(self):
        assert Effects.from_dict(None) == Effects()
        assert Effects.from_dict({}) == Effects()

    def test_focus_key_present(self):
        e = Effects.from_dict({"focusCameraId": "4"})
        assert e.focus_requested
        assert e.focus_camera_id == 4

    def test_null_focus_differs_from_absent(self):
        assert Effects.from_dict({"focusCameraId": None}).focus_requested
        assert not Effects.from_dict({"help": True}).focus_requested

    def test_emergency_and_help(self):
        e = Effects.from_dict({"emergency": "police", "help": True})
        assert e.emergency == "police"
        assert e.help
        assert not e.focus_requested

    def test_blank_emergency_dropped(self):
        assert Effects.from_dict({"emergency": ""}).emergency is None

    @pytest.mark.parametrize("wire", [
        {"focusCameraId": 2},
        {"showAllCameras": True, "focusCameraId": None},
        {"emergency": "lockdown"},
        {"help": True},
    ])
    def test_wire_shapes_survive(self, wire):
        assert Effects.from_dict(wire).to_dict() == wire
