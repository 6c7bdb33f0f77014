"""Unit tests for ChatTranscript."""
from __future__ import annotations

import pytest

from camsim.commands.transcript import ChatTranscript

pytestmark = pytest.mark.unit


def test_append_returns_entry():
    t = ChatTranscript()
    entry = t.append("user", "status")
    assert entry["role"] == "user"
    assert entry["content"] == "status"
    assert "ts" in entry
    assert len(t) == 1


def test_messages_in_order():
    t = ChatTranscript()
    t.append("user", "a")
    t.append("assistant", "b")
    assert [m["content"] for m in t.messages()] == ["a", "b"]


def test_bounded():
    t = ChatTranscript(max_messages=3)
    for i in range(5):
        t.append("user", str(i))
    assert [m["content"] for m in t.messages()] == ["2", "3", "4"]


def test_limit():
    t = ChatTranscript()
    for i in range(4):
        t.append("user", str(i))
    assert [m["content"] for m in t.messages(limit=2)] == ["2", "3"]
    assert t.messages(limit=0) == []


def test_clear():
    t = ChatTranscript()
    t.append("user", "x")
    t.clear()
    assert len(t) == 0
    assert t.messages() == []
