# ---------------------------------------------------------------------------
# File: config.py
# ---------------------------------------------------------------------------
# Description:
#	Configuration objects for pyezpie.
#
# Notes:
#	- AppConfig: daemon options (logging.*, telemetry_*).
#	- MenuConfigStore: the current list of configured menus. Storage of the
#	  list lives elsewhere; the store only parses, holds and announces it.
#	- A malformed update raises ConfigError and keeps the previous menus.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	Paul G. LeDuc				Initial coding / release
# 10/07/2026	Paul G. LeDuc				Reject duplicate menu names
# 10/09/2026	Paul G. LeDuc				Add load_file()
# ---------------------------------------------------------------------------

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional

from pyezpie.core.errors import ConfigError
from pyezpie.core.logging import get_app_logger
from pyezpie.menu.items import MenuDef, parse_menu


log = get_app_logger("config")


@dataclass(frozen=True, slots=True)
class AppConfig:
	"""
	Light wrapper for daemon options.
	"""
	options: dict[str, Any] | None = None

	def get(self, key: str, default: Any = None) -> Any:
		if self.options is None:
			return default
		return self.options.get(key, default)


ChangeCallback = Callable[["MenuConfigStore"], None]


class MenuConfigStore:
	"""
	MenuConfigStore

	Holds the ordered list of configured menus and notifies listeners
	whenever it is replaced.
	"""

	def __init__(self, menus: Optional[list[Any]] = None) -> None:
		self._menus: tuple[MenuDef, ...] = ()
		self._listeners: list[ChangeCallback] = []

		if menus is not None:
			self.set_menus(menus)

	# -----------------------------------------------------------------------
	# Listeners
	# -----------------------------------------------------------------------

	def connect(self, callback: ChangeCallback) -> None:
		self._listeners.append(callback)

	def disconnect(self, callback: ChangeCallback) -> None:
		if callback in self._listeners:
			self._listeners.remove(callback)

	# -----------------------------------------------------------------------
	# Updates
	# -----------------------------------------------------------------------

	def set_menus(self, raw: Any) -> None:
		"""
		Replace the configuration with a list of raw menu descriptors.
		"""
		if not isinstance(raw, list):
			raise ConfigError("The menu configuration must be a list of menus")

		menus = tuple(parse_menu(entry) for entry in raw)

		seen: set[str] = set()
		for menu in menus:
			if menu.name in seen:
				raise ConfigError(f"Duplicate menu name {menu.name!r}")
			seen.add(menu.name)

		self._menus = menus
		log.info("Loaded %d configured menu(s)", len(menus))

		for callback in list(self._listeners):
			callback(self)

	def load_json(self, text: str) -> None:
		try:
			raw = json.loads(text)
		except json.JSONDecodeError as ex:
			raise ConfigError(f"Menu configuration is not valid JSON: {ex}") from ex
		self.set_menus(raw)

	def load_file(self, path: str | Path) -> None:
		self.load_json(Path(path).read_text(encoding="utf-8"))

	# -----------------------------------------------------------------------
	# Queries
	# -----------------------------------------------------------------------

	@property
	def menus(self) -> tuple[MenuDef, ...]:
		return self._menus

	def names(self) -> list[str]:
		return [menu.name for menu in self._menus]

	def find(self, name: str) -> Optional[MenuDef]:
		for menu in self._menus:
			if menu.name == name:
				return menu
		return None
