# ---------------------------------------------------------------------------
# File: dispatcher.py
# ---------------------------------------------------------------------------
# Description:
#	Request dispatcher for pyezpie (inbound menu requests -> MenuSession).
#
# Notes:
#	- Every open returns the session id (>= 0) or a negative ErrorCode.
#	  Nothing raised while opening escapes this module.
#	- Named menus are expanded freshly from the config store on every open.
#	  They are always "configured" sessions, previewed or not: selecting an
#	  item runs its action in-process and no OnSelect/OnCancel is emitted.
#	- current_menu names the open configured menu; previews never claim it.
#	  It is cleared only by the session that claimed it.
#	- A failing item action is reported as a notification.
#	- Ad-hoc menus (custom descriptions) report selections back through
#	  on_select(session_id, item_id) / on_cancel(session_id).
#	- select()/cancel() come from the input side and propagate contract
#	  violations (PathError, SessionStateError).
#
#	Ad-hoc description format (object or JSON text):
#		{"name": ..., "icon": ..., "items": [
#			{"name": ..., "icon": ..., "angle": 90, "id": "custom", "items": [...]},
#		]}
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/07/2026	Paul G. LeDuc				Initial coding / release
# 10/08/2026	Paul G. LeDuc				Preview never claims the configured-menu slot
# 10/09/2026	Paul G. LeDuc				Map expansion errors to PROPERTY_MISSING
# 10/10/2026	Paul G. LeDuc				Preview stays configured; current_menu keyed by session id
# 10/10/2026	Paul G. LeDuc				Notify failing item actions
# ---------------------------------------------------------------------------

from __future__ import annotations

import json
from typing import Any, Callable, Mapping, Optional, Union

from pyezpie.core.config import MenuConfigStore
from pyezpie.core.errors import (
	ConfigError,
	ErrorCode,
	InvalidAnglesError,
	InvalidJSONError,
	MenuError,
	NoSuchMenuError,
	PropertyMissingError,
)
from pyezpie.core.logging import get_app_logger
from pyezpie.core.telemetry import Telemetry, get_telemetry
from pyezpie.menu.items import ExpandContext
from pyezpie.menu.node import MenuItemNode, PathId, parse_path
from pyezpie.menu.session import CancelEvent, MenuRequest, MenuSession, SelectEvent
from pyezpie.services.notifications import NotificationService


log = get_app_logger("dispatcher")


MenuDescription = Union[str, bytes, Mapping[str, Any]]

SelectSignal = Callable[[int, str], None]
CancelSignal = Callable[[int], None]


# ---------------------------------------------------------------------------
# Ad-hoc descriptions
# ---------------------------------------------------------------------------

def parse_custom_menu(description: MenuDescription) -> MenuItemNode:
	"""
	Turn an ad-hoc menu description into a MenuItemNode tree.

	Raises:
		InvalidJSONError, PropertyMissingError, InvalidAnglesError
	"""
	data: Any = description
	if isinstance(description, (str, bytes, bytearray)):
		try:
			data = json.loads(description)
		except (json.JSONDecodeError, UnicodeDecodeError) as ex:
			raise InvalidJSONError(f"Menu description is not valid JSON: {ex}") from ex

	if not isinstance(data, Mapping):
		raise PropertyMissingError("The menu description must be an object")

	return _node_from_mapping(data, "menu")


def _node_from_mapping(data: Mapping[str, Any], where: str) -> MenuItemNode:
	name = data.get("name", "")
	icon = data.get("icon", "")
	if not isinstance(name, str) or not isinstance(icon, str):
		raise PropertyMissingError(f"'name' and 'icon' of {where} must be strings")

	angle = data.get("angle")
	if angle is not None and (isinstance(angle, bool) or not isinstance(angle, (int, float))):
		raise InvalidAnglesError(f"'angle' of {where} must be a number")

	stable_id = data.get("id")
	if stable_id is not None and not isinstance(stable_id, str):
		raise PropertyMissingError(f"'id' of {where} must be a string")

	items = data.get("items", [])
	if not isinstance(items, list):
		raise PropertyMissingError(f"'items' of {where} must be a list")

	node = MenuItemNode(
		name=name,
		icon=icon,
		fixed_angle=float(angle) if angle is not None else None,
		stable_id=stable_id or None,
	)

	for index, item in enumerate(items):
		if not isinstance(item, Mapping):
			raise PropertyMissingError(f"Item {index} of {where} must be an object")
		node.add(_node_from_mapping(item, f"{where}/{index}"))

	return node


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------

class RequestDispatcher:
	"""
	RequestDispatcher

	show_menu / preview_menu				-> configured menus by name
	show_custom_menu / preview_custom_menu	-> ad-hoc descriptions
	"""

	def __init__(
		self,
		session: MenuSession,
		store: MenuConfigStore,
		expand_context: Optional[ExpandContext] = None,
		telemetry: Optional[Telemetry] = None,
		on_select: Optional[SelectSignal] = None,
		on_cancel: Optional[CancelSignal] = None,
		notifications: Optional[NotificationService] = None,
	) -> None:
		self._session = session
		self._store = store
		self._ctx = expand_context if expand_context is not None else ExpandContext()
		self._telemetry = telemetry if telemetry is not None else get_telemetry()

		self._notifications = notifications

		self.on_select = on_select
		self.on_cancel = on_cancel

		# Name of the configured menu that is currently open (non-preview only)
		# and the session that opened it
		self.current_menu: Optional[str] = None
		self._current_session: Optional[int] = None

		session.on_select = self._handle_select
		session.on_cancel = self._handle_cancel
		session.on_action_error = self._handle_action_error

	@property
	def session(self) -> MenuSession:
		return self._session

	# -----------------------------------------------------------------------
	# Inbound requests
	# -----------------------------------------------------------------------

	def show_menu(self, name: str) -> int:
		return self._guard(lambda: self._open_named(name, preview=False), name)

	def preview_menu(self, name: str) -> int:
		return self._guard(lambda: self._open_named(name, preview=True), name)

	def show_custom_menu(self, description: MenuDescription) -> int:
		return self._guard(lambda: self._open_custom(description, preview=False), None)

	def preview_custom_menu(self, description: MenuDescription) -> int:
		return self._guard(lambda: self._open_custom(description, preview=True), None)

	# -----------------------------------------------------------------------
	# Input side
	# -----------------------------------------------------------------------

	def select(self, path: Union[str, PathId]) -> MenuItemNode:
		if isinstance(path, str):
			path = parse_path(path)
		return self._session.resolve(path)

	def cancel(self) -> int:
		return self._session.cancel()

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _open_named(self, name: str, *, preview: bool) -> int:
		menu = self._store.find(name)
		if menu is None:
			raise NoSuchMenuError(f"There is no menu named {name!r}")

		try:
			root = menu.build_tree(self._ctx)
		except ConfigError as ex:
			raise PropertyMissingError(str(ex)) from ex

		session_id = self._session.open(MenuRequest(
			root=root,
			preview=preview,
			configured=True,
			menu_name=name,
		))

		if not preview:
			self.current_menu = name
			self._current_session = session_id
		return session_id

	def _open_custom(self, description: MenuDescription, *, preview: bool) -> int:
		root = parse_custom_menu(description)
		return self._session.open(MenuRequest(root=root, preview=preview))

	def _guard(self, opener: Callable[[], int], name: Optional[str]) -> int:
		try:
			return opener()
		except MenuError as ex:
			log.info("Menu request %r rejected (%s): %s", name, ex.code.name, ex)
			self._telemetry.event("menu.rejected", {"menu": name, "code": int(ex.code)})
			return int(ex.code)
		except Exception:
			log.exception("Unexpected failure while opening menu %r", name)
			self._telemetry.event("menu.rejected", {"menu": name, "code": int(ErrorCode.UNKNOWN_ERROR)})
			return int(ErrorCode.UNKNOWN_ERROR)

	def _release_current(self, session_id: int) -> None:
		# An action may already have opened the next configured menu
		if self._current_session == session_id:
			self.current_menu = None
			self._current_session = None

	def _handle_select(self, event: SelectEvent) -> None:
		self._release_current(event.session_id)
		if event.configured:
			return
		if self.on_select is not None:
			self.on_select(event.session_id, event.item_id)

	def _handle_action_error(self, event: SelectEvent, ex: Exception) -> None:
		if self._notifications is not None:
			self._notifications.error(f"Failed to run menu item {event.item_id} of {event.menu_name}: {ex}")

	def _handle_cancel(self, event: CancelEvent) -> None:
		self._release_current(event.session_id)
		if event.configured:
			return
		if self.on_cancel is not None:
			self.on_cancel(event.session_id)
