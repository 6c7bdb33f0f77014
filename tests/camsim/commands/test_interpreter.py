"""Unit tests for the rule-based command interpreter."""
from __future__ import annotations

import pytest

from camsim.commands.effects import Effects
from camsim.commands.interpreter import (
    CommandResponse,
    extract_number,
    help_text,
    interpret,
    list_alerts,
    normalize,
    status_report,
)
from camsim.museum import Camera, MuseumContext, default_museum

pytestmark = pytest.mark.unit


@pytest.fixture
def museum() -> MuseumContext:
    return default_museum()


class TestHelpers:
    def test_normalize(self):
        assert normalize("  Show ALL  ") == "show all"
        assert normalize(None) == ""

    @pytest.mark.parametrize("text,expected", [
        ("show camera 2", 2),
        ("camera 12 please", 12),
        ("show camera three", 3),
        ("show camera ten", 10),
        ("camera 4 or five", 4),
        ("no numbers here", None),
        ("", None),
        (None, None),
    ])
    def test_extract_number(self, text, expected):
        assert extract_number(text) == expected

    def test_number_words_need_word_boundaries(self):
        # "someone" contains "one", "often" contains "ten"
        assert extract_number("someone often") is None

    def test_number_words_read_in_text_order(self):
        assert extract_number("camera five or two") == 5
        assert interpret("show camera nine, not one", default_museum()).text == "Camera 9 not found."

    def test_list_alerts(self, museum):
        assert list_alerts(museum.alerts) == (
            "• [MEDIUM] Camera 6 feed offline (21:02)\n"
            "• [LOW] Visitor lingering near display case (21:14)"
        )

    def test_list_alerts_empty(self):
        assert list_alerts([]) == "No active alerts."

    def test_status_report(self, museum):
        report = status_report(museum)
        lines = report.splitlines()
        assert lines[0] == "System status: 5/6 cameras online, 1 offline."
        assert lines[1] == "Guards on duty: 3/4."
        assert lines[2] == "Alerts: 2 active."
        assert "Camera 6 feed offline" in report

    def test_status_report_without_alerts(self):
        ctx = MuseumContext(cameras=[Camera(1, "Lobby")])
        assert status_report(ctx).splitlines()[-1] == "No active alerts."

    def test_help_text_lists_commands(self):
        text = help_text()
        assert text.startswith("Try commands like:")
        assert "show camera 2" in text
        assert "mona lisa" in text


class TestCommandResponse:
    def test_to_dict_without_effects(self):
        assert CommandResponse("hi").to_dict() == {"text": "hi"}

    def test_to_dict_with_effects(self):
        resp = CommandResponse("Showing x.", Effects.focus(2))
        assert resp.to_dict() == {"text": "Showing x.", "effects": {"focusCameraId": 2}}


class TestStatus:
    @pytest.mark.parametrize("cmd", ["status", "Status report", "show camera status"])
    def test_status_wins(self, museum, cmd):
        resp = interpret(cmd, museum)
        assert resp.text.startswith("System status:")
        assert resp.effects.is_empty


class TestShowCamera:
    def test_show_existing_camera(self, museum):
        resp = interpret("show camera 2", museum)
        assert resp.text == "Showing Gallery 1 - Renaissance."
        assert resp.effects == Effects.focus(2)

    def test_show_camera_word_number(self, museum):
        resp = interpret("Show camera four", museum)
        assert resp.effects.focus_camera_id == 4

    def test_show_offline_camera_still_focuses(self, museum):
        resp = interpret("show camera 6", museum)
        assert resp.text == "Showing Loading Dock."
        assert resp.effects.focus_camera_id == 6

    def test_missing_camera(self, museum):
        resp = interpret("show camera 12", museum)
        assert resp.text == "Camera 12 not found."
        assert resp.effects.is_empty

    def test_no_number_falls_through(self, museum):
        resp = interpret("show camera", museum)
        assert resp.text.startswith("I didn't catch that.")

    def test_without_context(self):
        assert interpret("show camera 1").text == "Camera 1 not found."


class TestShowAll:
    @pytest.mark.parametrize("cmd", ["show all", "Show all cameras"])
    def test_show_all(self, museum, cmd):
        resp = interpret(cmd, museum)
        assert resp.text == "Displaying all camera feeds."
        assert resp.effects.show_all_cameras
        assert resp.effects.to_dict() == {"focusCameraId": None, "showAllCameras": True}


class TestGuardLocation:
    def test_known_guard(self, museum):
        resp = interpret("Where is guard Martinez?", museum)
        assert resp.text == "Carlos Martinez is at Main Entrance (on-duty)."

    def test_guard_on_break(self, museum):
        resp = interpret("where's guard dubois", museum)
        assert resp.text == "Louise Dubois is at Security Office (break)."

    def test_full_name(self, museum):
        resp = interpret("where is guard mei chen", museum)
        assert resp.text == "Mei Chen is at Gallery 3 (on-duty)."

    def test_unknown_guard(self, museum):
        resp = interpret("where is guard smith", museum)
        assert resp.text == "I don't have a current location for Guard smith."

    def test_loose_phrasing(self, museum):
        resp = interpret("where is the guard okafor", museum)
        assert resp.text == "Ade Okafor is at East Wing (on-duty)."

    def test_no_name(self, museum):
        resp = interpret("where is the guard", museum)
        assert resp.text.startswith("Please specify a guard name")


class TestAlerts:
    @pytest.mark.parametrize("cmd", ["any alerts?", "What's wrong", "what is wrong", "alerts"])
    def test_lists_alerts(self, museum, cmd):
        resp = interpret(cmd, museum)
        assert resp.text == list_alerts(museum.alerts)
        assert resp.effects.is_empty

    def test_no_alerts(self):
        assert interpret("any alerts", MuseumContext()).text == "No active alerts."


class TestEmergency:
    def test_lockdown(self, museum):
        resp = interpret("initiate lockdown", museum)
        assert resp.text.startswith("Initiating museum lockdown protocol.")
        assert resp.effects.emergency == "lockdown"

    def test_lockdown_beats_emergency(self, museum):
        assert interpret("emergency lockdown", museum).effects.emergency == "lockdown"

    @pytest.mark.parametrize("cmd", ["call police", "EMERGENCY", "panic!"])
    def test_police(self, museum, cmd):
        resp = interpret(cmd, museum)
        assert resp.text.startswith("Emergency services protocol triggered.")
        assert resp.effects.emergency == "police"
        assert not resp.effects.focus_requested


class TestMonaLisa:
    @pytest.mark.parametrize("cmd", ["mona lisa", "Show me Gallery 3"])
    def test_focuses_gallery_camera(self, museum, cmd):
        resp = interpret(cmd, museum)
        assert resp.text == "Focusing on Gallery 3 - Mona Lisa."
        assert resp.effects == Effects.focus(3)

    def test_matches_room_when_name_differs(self):
        ctx = MuseumContext(cameras=[Camera(9, "North Cam", room="Gallery 3")])
        assert interpret("gallery 3", ctx).effects.focus_camera_id == 9

    def test_no_matching_camera(self):
        ctx = MuseumContext(cameras=[Camera(1, "Lobby")])
        resp = interpret("mona lisa", ctx)
        assert resp.text == "I could not find a camera for that location."
        assert resp.effects.is_empty


class TestHelpAndFallback:
    @pytest.mark.parametrize("cmd", ["help", "help me", "What can you do?"])
    def test_help(self, museum, cmd):
        resp = interpret(cmd, museum)
        assert resp.text == help_text()
        assert resp.effects.help

    def test_unknown(self, museum):
        resp = interpret("make me a sandwich", museum)
        assert resp.text == f"I didn't catch that. {help_text()}"
        assert resp.effects.is_empty

    def test_empty(self, museum):
        assert interpret("", museum).text.startswith("I didn't catch that.")
        assert interpret(None, museum).text.startswith("I didn't catch that.")
