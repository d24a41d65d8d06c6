# ---------------------------------------------------------------------------
# File: telemetry.py
# Description:
#   Lightweight telemetry subsystem for pyezpie.
#
#   Emitted by the daemon:
#     - events		menu.opened, menu.selected, menu.cancelled, menu.rejected,
#					menu.action_failed, shortcut.bound, shortcut.unbound,
#					shortcut.bind_failed, key.unhandled
#     - counters	keys.pressed
#     - timers		layout.duration_ms
#
# Notes:
#   - Safe to call even when disabled; the default instance is disabled.
#   - Backends are "sinks", selected by the telemetry_sink option:
#     "null" (default), "log" (DEBUG records) or "memory" (kept for tests).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Paul G. LeDuc				Initial coding / release
# 10/08/2026	Paul G. LeDuc				Accept AppConfig in init_telemetry
# 10/08/2026	Paul G. LeDuc				MemorySink lookup helpers + "memory" sink
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Protocol

from pyezpie.core.logging import get_app_logger


Attrs = Dict[str, Any]


@dataclass(frozen=True, slots=True)
class TelemetryEvent:
	name: str
	timestamp: float
	attrs: Attrs = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class TelemetryMetric:
	name: str
	value: float
	attrs: Attrs = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Sinks
# ---------------------------------------------------------------------------

class TelemetrySink(Protocol):
	def emit_event(self, event: TelemetryEvent) -> None: ...
	def emit_metric(self, metric: TelemetryMetric) -> None: ...


class NullSink:
	def emit_event(self, event: TelemetryEvent) -> None:
		return

	def emit_metric(self, metric: TelemetryMetric) -> None:
		return


class LogSink:
	"""
	Writes events and metrics to the pyezpie.telemetry logger at DEBUG.
	"""

	def __init__(self, logger: Optional[logging.Logger] = None) -> None:
		self._log = logger if logger is not None else get_app_logger("telemetry")

	def emit_event(self, event: TelemetryEvent) -> None:
		self._log.debug("event %s %s", event.name, event.attrs)

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self._log.debug("metric %s=%s %s", metric.name, metric.value, metric.attrs)


class MemorySink:
	"""
	Keeps everything in lists; tests assert against it.
	"""

	def __init__(self) -> None:
		self.events: list[TelemetryEvent] = []
		self.metrics: list[TelemetryMetric] = []

	def emit_event(self, event: TelemetryEvent) -> None:
		self.events.append(event)

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self.metrics.append(metric)

	def event_names(self) -> list[str]:
		return [e.name for e in self.events]

	def metric_names(self) -> list[str]:
		return [m.name for m in self.metrics]

	def find_event(self, name: str) -> Optional[TelemetryEvent]:
		"""
		Most recent event called name, or None.
		"""
		return next((e for e in reversed(self.events) if e.name == name), None)

	def find_metric(self, name: str) -> Optional[TelemetryMetric]:
		return next((m for m in reversed(self.metrics) if m.name == name), None)

	def clear(self) -> None:
		self.events.clear()
		self.metrics.clear()


SinkFactory = Callable[[Optional[logging.Logger]], TelemetrySink]

_SINK_FACTORIES: dict[str, SinkFactory] = {
	"null": lambda logger: NullSink(),
	"log": lambda logger: LogSink(logger),
	"memory": lambda logger: MemorySink(),
}


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------

class Telemetry:
	"""
	Telemetry

	event(name, attrs)			-> TelemetryEvent
	counter(name, value, attrs)	-> TelemetryMetric
	timer(name, attrs)			-> TelemetryMetric in milliseconds on exit
	"""

	def __init__(self, enabled: bool, sink: TelemetrySink) -> None:
		self._enabled = enabled
		self._sink = sink

	@property
	def enabled(self) -> bool:
		return self._enabled

	@property
	def sink(self) -> TelemetrySink:
		return self._sink

	def event(self, name: str, attrs: Optional[Attrs] = None) -> None:
		if self._enabled:
			self._sink.emit_event(TelemetryEvent(name, time.time(), dict(attrs or {})))

	def counter(self, name: str, value: float = 1, attrs: Optional[Attrs] = None) -> None:
		if self._enabled:
			self._sink.emit_metric(TelemetryMetric(name, float(value), dict(attrs or {})))

	def timer(self, name: str, attrs: Optional[Attrs] = None) -> "_Timer":
		return _Timer(self, name, dict(attrs or {}))


class _Timer:
	"""
	with telemetry.timer("layout.duration_ms"): ...

	A block that raises is still reported, tagged failed=True.
	"""

	def __init__(self, telemetry: Telemetry, name: str, attrs: Attrs) -> None:
		self._telemetry = telemetry
		self._name = name
		self._attrs = attrs
		self._started = 0.0

	def __enter__(self) -> "_Timer":
		self._started = time.perf_counter()
		return self

	def __exit__(self, exc_type, exc, tb) -> None:
		elapsed_ms = (time.perf_counter() - self._started) * 1000.0
		if exc_type is not None:
			self._attrs["failed"] = True
		self._telemetry.counter(self._name, elapsed_ms, self._attrs)


# ---------------------------------------------------------------------------
# Process-wide instance
# ---------------------------------------------------------------------------

_telemetry: Optional[Telemetry] = None


def init_telemetry(cfg: Any = None, logger: Optional[logging.Logger] = None) -> Telemetry:
	"""
	Build the process-wide Telemetry from options and return it.

	cfg is anything with get(key, default): AppConfig, dict or None.
		telemetry_enabled:	bool (default False)
		telemetry_sink:		"null" | "log" | "memory" (unknown names -> "null")
	"""
	global _telemetry

	enabled = bool(cfg.get("telemetry_enabled", False)) if cfg is not None else False
	sink_name = cfg.get("telemetry_sink", "null") if cfg is not None else "null"

	if enabled:
		factory = _SINK_FACTORIES.get(str(sink_name).strip().lower(), _SINK_FACTORIES["null"])
		_telemetry = Telemetry(True, factory(logger))
	else:
		_telemetry = Telemetry(False, NullSink())

	return _telemetry


def get_telemetry() -> Telemetry:
	"""
	The process-wide Telemetry (a disabled one until init_telemetry()).
	"""
	global _telemetry

	if _telemetry is None:
		_telemetry = Telemetry(False, NullSink())

	return _telemetry
