# ---------------------------------------------------------------------------
# File: shortcuts.py
# ---------------------------------------------------------------------------
# Description:
#	Keeps the global hotkey bindings in sync with the configured menus.
#
# Notes:
#	- Desired set: distinct non-empty shortcuts across all configured menus.
#	- Pass 1 walks the currently bound shortcuts: unbind the ones no longer
#	  desired, drop the ones still desired from the worklist (never rebound).
#	- Pass 2 binds what is left.
#	- A failed bind is reported (log + notification) and does not stop the
#	  remaining shortcuts. Nothing is rolled back.
#	- The reconciler is the only writer of the binding table.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	Paul G. LeDuc				Initial coding / release
# 10/07/2026	Paul G. LeDuc				Track owning menus per shortcut
# 10/08/2026	Paul G. LeDuc				Notify on bind failures + telemetry
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from pyezpie.app.keys import KeyBinder, ShortcutBindError, normalize_shortcut
from pyezpie.core.logging import get_app_logger
from pyezpie.core.telemetry import Telemetry, get_telemetry
from pyezpie.menu.items import MenuDef
from pyezpie.services.notifications import NotificationService


log = get_app_logger("shortcuts")


def desired_shortcuts(menus: Iterable[MenuDef]) -> dict[str, tuple[str, ...]]:
	"""
	Map each distinct non-empty shortcut to the names of the menus using it.
	Order follows the configuration.
	"""
	owners: dict[str, list[str]] = {}
	for menu in menus:
		shortcut = normalize_shortcut(menu.shortcut)
		if shortcut:
			owners.setdefault(shortcut, []).append(menu.name)
	return {shortcut: tuple(names) for shortcut, names in owners.items()}


@dataclass(frozen=True, slots=True)
class ReconcileReport:
	bound: tuple[str, ...] = ()
	unbound: tuple[str, ...] = ()
	kept: tuple[str, ...] = ()
	failed: dict[str, str] = field(default_factory=dict)

	@property
	def ok(self) -> bool:
		return not self.failed


class ShortcutReconciler:
	"""
	ShortcutReconciler

	Diffs the desired shortcuts against the binder's bound set.
	"""

	def __init__(
		self,
		binder: KeyBinder,
		notifications: Optional[NotificationService] = None,
		telemetry: Optional[Telemetry] = None,
	) -> None:
		self._binder = binder
		self._notifications = notifications
		self._telemetry = telemetry if telemetry is not None else get_telemetry()
		self._owners: dict[str, tuple[str, ...]] = {}

	@property
	def binder(self) -> KeyBinder:
		return self._binder

	def owners(self, shortcut: str) -> tuple[str, ...]:
		"""
		Names of the configured menus that requested shortcut.
		"""
		return self._owners.get(normalize_shortcut(shortcut), ())

	def reconcile(self, menus: Iterable[MenuDef]) -> ReconcileReport:
		owners = desired_shortcuts(menus)
		self._owners = owners

		to_bind = dict.fromkeys(owners)
		unbound: list[str] = []
		kept: list[str] = []

		for existing in list(self._binder.get_bound()):
			if existing in to_bind:
				del to_bind[existing]
				kept.append(existing)
			else:
				self._binder.unbind(existing)
				unbound.append(existing)
				self._telemetry.event("shortcut.unbound", {"shortcut": existing})

		bound: list[str] = []
		failed: dict[str, str] = {}

		for shortcut in to_bind:
			try:
				self._binder.bind(shortcut)
			except ShortcutBindError as ex:
				failed[shortcut] = str(ex)
				self._report_failure(shortcut, owners[shortcut], ex)
				continue

			bound.append(shortcut)
			self._telemetry.event("shortcut.bound", {"shortcut": shortcut, "menus": list(owners[shortcut])})

		log.debug(
			"Shortcuts reconciled: bound=%s unbound=%s kept=%s failed=%s",
			bound, unbound, kept, list(failed),
		)

		return ReconcileReport(
			bound=tuple(bound),
			unbound=tuple(unbound),
			kept=tuple(kept),
			failed=failed,
		)

	def release(self) -> list[str]:
		"""
		Unbind every shortcut currently bound. Used on shutdown.
		"""
		released = list(self._binder.get_bound())
		for shortcut in released:
			self._binder.unbind(shortcut)
		self._owners = {}
		return released

	def _report_failure(self, shortcut: str, menus: tuple[str, ...], ex: Exception) -> None:
		log.warning("Failed to bind shortcut %r for %s: %s", shortcut, ", ".join(menus), ex)
		self._telemetry.event("shortcut.bind_failed", {"shortcut": shortcut, "error": str(ex)})

		if self._notifications is not None:
			self._notifications.warning(f"Failed to bind shortcut {shortcut} for menu {', '.join(menus)}.")
