# ---------------------------------------------------------------------------
# File: notifications.py
# ---------------------------------------------------------------------------
# Description:
#	Notification service for pyezpie.
#
# Notes:
#	- NotificationService owns the user-visible messages (failed hotkey
#	  binds, menus that failed to open, ...).
#	- A desktop notifier may be attached as a sink.
#	- Safe to call even if no sink is attached.
#	- NotificationLogHandler mirrors log records into the service; the
#	  daemon attaches it when "logging.notify_level" is set.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/07/2026	Paul G. LeDuc				Initial coding / release
# 10/09/2026	Paul G. LeDuc				Add NotificationLogHandler
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Deque, Optional, Protocol, runtime_checkable


@runtime_checkable
class NotificationSink(Protocol):
	"""
	Minimal interface implemented by desktop notifiers.
	"""

	def show(self, level: str, message: str) -> None: ...


@dataclass(frozen=True, slots=True)
class Notification:
	level: str
	message: str


@dataclass(slots=True)
class NotificationService:
	"""
	NotificationService

	Keeps the most recent notifications and publishes new ones to a sink.
	"""

	max_history: int = 50
	history: Deque[Notification] = field(default_factory=deque)

	sink: Optional[NotificationSink] = None
	on_change: Optional[Callable[[Notification], None]] = None

	# -----------------------------------------------------------------------
	# Wiring
	# -----------------------------------------------------------------------

	def attach_sink(self, sink: Optional[NotificationSink]) -> None:
		self.sink = sink

	def set_on_change(self, cb: Optional[Callable[[Notification], None]]) -> None:
		self.on_change = cb

	# -----------------------------------------------------------------------
	# Mutators
	# -----------------------------------------------------------------------

	def notify(self, message: str, level: str = "info") -> Notification:
		item = Notification(level=level, message=message)

		self.history.append(item)
		while len(self.history) > self.max_history:
			self.history.popleft()

		if self.sink:
			self.sink.show(level, message)
		if self.on_change:
			self.on_change(item)

		return item

	def info(self, message: str) -> Notification:
		return self.notify(message, "info")

	def warning(self, message: str) -> Notification:
		return self.notify(message, "warning")

	def error(self, message: str) -> Notification:
		return self.notify(message, "error")

	def clear(self) -> None:
		self.history.clear()

	# -----------------------------------------------------------------------
	# Queries
	# -----------------------------------------------------------------------

	def messages(self, level: Optional[str] = None) -> list[str]:
		return [n.message for n in self.history if level is None or n.level == level]

	@property
	def last(self) -> Optional[Notification]:
		return self.history[-1] if self.history else None


# ---------------------------------------------------------------------------
# Logging integration
# ---------------------------------------------------------------------------

class NotificationLogHandler(logging.Handler):
	"""
	A logging handler that turns log records into notifications.

	Important:
	- Never raise from emit(); logging must never crash the daemon.
	"""

	def __init__(self, service: NotificationService, *, level: int = logging.WARNING) -> None:
		super().__init__(level=level)
		self._service = service

	def emit(self, record: logging.LogRecord) -> None:
		try:
			msg = self.format(record)
		except Exception:
			return
		self._service.notify(msg, record.levelname.lower())
