# ---------------------------------------------------------------------------
# File: test_telemetry.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for pyezpie.core.telemetry.
#
# Notes:
#	- Uses MemorySink for deterministic assertions.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Paul G. LeDuc				Initial tests
# 10/08/2026	Paul G. LeDuc				LogSink + AppConfig + timer failure tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging

import pytest

from pyezpie.core.config import AppConfig
from pyezpie.core.telemetry import (
	LogSink,
	MemorySink,
	Telemetry,
	get_telemetry,
	init_telemetry,
)


def test_telemetry_disabled_is_noop():
	sink = MemorySink()
	t = Telemetry(enabled=False, sink=sink)

	t.event("menu.opened", {"x": 1})
	t.counter("keys.pressed", 3, {"k": "v"})

	with t.timer("layout.duration_ms", {"menu": "Main"}):
		pass

	assert sink.events == []
	assert sink.metrics == []
	assert t.enabled is False


def test_telemetry_event_emits_to_sink():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	t.event("menu.opened", {"menu": "Main"})

	assert len(sink.events) == 1
	ev = sink.events[0]
	assert ev.name == "menu.opened"
	assert ev.attrs == {"menu": "Main"}

	# slots=True dataclasses don't have __dict__
	assert isinstance(ev.timestamp, float)
	assert ev.timestamp > 0.0


def test_telemetry_event_without_attrs_has_empty_dict():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	t.event("x")

	assert sink.events[0].attrs == {}


def test_telemetry_counter_emits_metric_to_sink():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	t.counter("keys.pressed", 2, {"shortcut": "<Primary>space"})

	assert len(sink.metrics) == 1
	m = sink.metrics[0]
	assert m.name == "keys.pressed"
	assert m.value == 2.0
	assert m.attrs["shortcut"] == "<Primary>space"


def test_telemetry_timer_emits_metric():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	with t.timer("layout.duration_ms", {"menu": "Main"}):
		pass

	assert len(sink.metrics) == 1
	m = sink.metrics[0]
	assert m.name == "layout.duration_ms"
	assert m.value >= 0.0
	assert m.attrs == {"menu": "Main"}


def test_telemetry_timer_marks_failure_and_propagates():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	with pytest.raises(RuntimeError):
		with t.timer("layout.duration_ms", {"menu": "Main"}):
			raise RuntimeError("boom")

	assert sink.metrics[0].attrs["failed"] is True


def test_memorysink_lookup_and_clear():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	t.event("a", {"n": 1})
	t.event("b")
	t.event("a", {"n": 2})
	t.counter("y")

	assert sink.event_names() == ["a", "b", "a"]
	assert sink.find_event("a").attrs == {"n": 2}
	assert sink.find_event("missing") is None

	sink.clear()

	assert sink.events == []
	assert sink.metrics == []


def test_logsink_writes_debug_records(caplog):
	logger = logging.getLogger("pyezpie.tests.telemetry")
	t = Telemetry(enabled=True, sink=LogSink(logger))

	with caplog.at_level(logging.DEBUG, logger="pyezpie.tests.telemetry"):
		t.event("menu.cancelled", {"session_id": 4})
		t.counter("keys.pressed", 1)

	messages = [r.getMessage() for r in caplog.records]
	assert any("menu.cancelled" in m for m in messages)
	assert any("keys.pressed" in m for m in messages)


def test_get_telemetry_safe_before_init_returns_telemetry():
	t = get_telemetry()

	t.event("should.not.raise")
	t.counter("should.not.raise", 1)

	assert isinstance(t, Telemetry)


def test_init_telemetry_disabled_returns_disabled_global():
	t = init_telemetry({"telemetry_enabled": False})

	assert t is get_telemetry()
	assert t.enabled is False


def test_init_telemetry_accepts_appconfig():
	t = init_telemetry(AppConfig({"telemetry_enabled": True, "telemetry_sink": "log"}))

	assert t.enabled is True
	t.event("enabled.logsink")


def test_init_telemetry_enabled_unknown_sink_is_enabled_but_silent():
	t = init_telemetry({"telemetry_enabled": True, "telemetry_sink": "nope"})

	assert t.enabled is True
	t.event("enabled.unknownsink")
	t.counter("enabled.unknownsink", 1)

	init_telemetry(None)
	assert get_telemetry().enabled is False


def test_init_telemetry_memory_sink_collects():
	t = init_telemetry({"telemetry_enabled": True, "telemetry_sink": "Memory"})

	t.event("menu.opened")
	with t.timer("layout.duration_ms"):
		pass

	assert isinstance(t.sink, MemorySink)
	assert t.sink.event_names() == ["menu.opened"]
	assert t.sink.metric_names() == ["layout.duration_ms"]
	assert t.sink.find_metric("layout.duration_ms").value >= 0.0
	assert t.sink.find_metric("missing") is None

	init_telemetry(None)
