# ---------------------------------------------------------------------------
# File: keyrouter.py
# ---------------------------------------------------------------------------
# Description:
#	KeyRouter for pyezpie (global hotkey press -> configured menu).
#
# Notes:
#	- Shortcut ownership comes from the ShortcutReconciler (last reconcile).
#	- Several menus may share a shortcut; they are tried in configuration
#	  order and routing stops at the first one that opens.
#	- Failures become user-visible notifications, never exceptions.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/07/2026	Paul G. LeDuc				Initial coding / release
# 10/08/2026	Paul G. LeDuc				Add telemetry (keys.pressed, key.unhandled)
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pyezpie.app.dispatcher import RequestDispatcher
from pyezpie.app.shortcuts import ShortcutReconciler
from pyezpie.core.errors import describe_error
from pyezpie.core.logging import get_app_logger
from pyezpie.core.telemetry import Telemetry, get_telemetry
from pyezpie.services.notifications import NotificationService


log = get_app_logger("keys")


@dataclass(slots=True)
class KeyRouter:
	"""
	KeyRouter

	shortcut -> owning menu names -> RequestDispatcher.show_menu()
	"""
	dispatcher: RequestDispatcher
	reconciler: ShortcutReconciler
	notifications: Optional[NotificationService] = None
	telemetry: Optional[Telemetry] = None

	def resolve_menus(self, shortcut: str) -> tuple[str, ...]:
		return self.reconciler.owners(shortcut)

	def route_shortcut(self, shortcut: str) -> bool:
		"""
		Open the menu bound to shortcut.

		Returns:
			True if a menu owns the shortcut (whether or not it opened), else False.
		"""
		telemetry = self.telemetry if self.telemetry is not None else get_telemetry()
		telemetry.counter("keys.pressed", 1, {"shortcut": shortcut})

		menus = self.resolve_menus(shortcut)
		if not menus:
			telemetry.event("key.unhandled", {"shortcut": shortcut})
			return False

		for name in menus:
			result = self.dispatcher.show_menu(name)
			if result >= 0:
				return True
			self._report_failure(name, result)

		return True

	def _report_failure(self, name: str, code: int) -> None:
		message = f"Failed to open a menu: {describe_error(code)}"
		log.warning("Hotkey for menu %r failed (%d): %s", name, code, describe_error(code))
		if self.notifications is not None:
			self.notifications.error(message)
