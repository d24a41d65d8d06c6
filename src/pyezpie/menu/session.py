# ---------------------------------------------------------------------------
# File: session.py
# ---------------------------------------------------------------------------
# Description:
#	Menu session state machine for pyezpie (Idle <-> Active).
#
# Notes:
#	- At most one menu is active. open() while Active is rejected with
#	  AlreadyActiveError and leaves the active session untouched.
#	- Session ids come from a per-instance counter and are never reused.
#	- resolve()/cancel() while Idle, or with a path that does not address
#	  an item, are contract violations (SessionStateError / PathError).
#	- The state returns to Idle before a selected item's action runs, so an
#	  action may open another menu.
#	- An action that raises is logged and reported through on_action_error;
#	  it never escapes resolve().
#	- Rendering and input grabbing belong to the MenuPresenter.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	Paul G. LeDuc				Initial coding / release
# 10/07/2026	Paul G. LeDuc				Add MenuPresenter + PresenterError
# 10/08/2026	Paul G. LeDuc				Add telemetry (open/select/cancel/layout timing)
# 10/10/2026	Paul G. LeDuc				Contain action failures (on_action_error)
# ---------------------------------------------------------------------------

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Union, runtime_checkable

from pyezpie.core.errors import (
	AlreadyActiveError,
	InvalidAnglesError,
	MissingRootError,
	PresenterError,
)
from pyezpie.core.logging import get_app_logger
from pyezpie.core.telemetry import Telemetry, get_telemetry
from pyezpie.menu.addressing import address_tree
from pyezpie.menu.addressing import resolve as resolve_path
from pyezpie.menu.layout import AngleConflict, layout_tree
from pyezpie.menu.node import MenuItemNode, PathError, PathId, format_path


log = get_app_logger("session")


class SessionStateError(RuntimeError):
	"""
	resolve()/cancel() called without an active session.
	"""


# ---------------------------------------------------------------------------
# Requests, states, outcomes
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class MenuRequest:
	"""
	root:		Menu center; root.children are the top-level items
	preview:	Opened from an editor, not from a hotkey or a client
	configured:	Selections run item actions in-process
	menu_name:	Name of the configured menu (None for ad-hoc menus)
	"""
	root: MenuItemNode
	preview: bool = False
	configured: bool = False
	menu_name: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Idle:
	pass


@dataclass(frozen=True, slots=True)
class Active:
	session_id: int
	root: MenuItemNode
	preview: bool
	configured: bool
	menu_name: Optional[str]


SessionState = Union[Idle, Active]

IDLE = Idle()


@dataclass(frozen=True, slots=True)
class SelectEvent:
	session_id: int
	path: PathId
	item_id: str
	configured: bool
	menu_name: Optional[str] = None


@dataclass(frozen=True, slots=True)
class CancelEvent:
	session_id: int
	configured: bool
	menu_name: Optional[str] = None


SelectCallback = Callable[[SelectEvent], None]
CancelCallback = Callable[[CancelEvent], None]
ActionErrorCallback = Callable[[SelectEvent, Exception], None]


# ---------------------------------------------------------------------------
# Presenter
# ---------------------------------------------------------------------------

@runtime_checkable
class MenuPresenter(Protocol):
	"""
	Minimal interface of whatever draws the menu and grabs the input.
	"""
	def show(self, session_id: int, root: MenuItemNode, preview: bool) -> bool: ...
	def hide(self) -> None: ...


class NullPresenter:
	def show(self, session_id: int, root: MenuItemNode, preview: bool) -> bool:
		return True

	def hide(self) -> None:
		return


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------

class MenuSession:
	"""
	MenuSession

	open(request) -> session id
	resolve(path) -> selected node (session closes)
	cancel()      -> session id (session closes)
	"""

	def __init__(
		self,
		presenter: Optional[MenuPresenter] = None,
		telemetry: Optional[Telemetry] = None,
		on_select: Optional[SelectCallback] = None,
		on_cancel: Optional[CancelCallback] = None,
		on_action_error: Optional[ActionErrorCallback] = None,
	) -> None:
		self._presenter: MenuPresenter = presenter if presenter is not None else NullPresenter()
		self._telemetry = telemetry if telemetry is not None else get_telemetry()
		self.on_select = on_select
		self.on_cancel = on_cancel
		self.on_action_error = on_action_error

		self._state: SessionState = IDLE
		self._ids = itertools.count()

	# -----------------------------------------------------------------------
	# State
	# -----------------------------------------------------------------------

	@property
	def state(self) -> SessionState:
		return self._state

	@property
	def is_active(self) -> bool:
		return isinstance(self._state, Active)

	@property
	def active(self) -> Optional[Active]:
		return self._state if isinstance(self._state, Active) else None

	@property
	def current_id(self) -> Optional[int]:
		active = self.active
		return active.session_id if active is not None else None

	# -----------------------------------------------------------------------
	# Transitions
	# -----------------------------------------------------------------------

	def open(self, request: MenuRequest) -> int:
		"""
		Lay out, address and show a menu.

		Raises:
			AlreadyActiveError, MissingRootError, InvalidAnglesError, PresenterError.
			The session state is unchanged whenever an error is raised.
		"""
		active = self.active
		if active is not None:
			raise AlreadyActiveError(f"Menu {active.session_id} is already active")

		root = request.root
		if not root.children:
			raise MissingRootError(f"Menu {root.name!r} has no items")

		try:
			with self._telemetry.timer("layout.duration_ms", {"menu": root.name}):
				layout_tree(root)
		except AngleConflict as ex:
			raise InvalidAnglesError(str(ex)) from ex

		address_tree(root)

		session_id = next(self._ids)

		if not self._presenter.show(session_id, root, request.preview):
			raise PresenterError(f"Failed to show menu {root.name!r}")

		self._state = Active(
			session_id=session_id,
			root=root,
			preview=request.preview,
			configured=request.configured,
			menu_name=request.menu_name,
		)

		log.debug("Opened menu %r as session %d (preview=%s)", root.name, session_id, request.preview)
		self._telemetry.event("menu.opened", {
			"session_id": session_id,
			"menu": root.name,
			"preview": request.preview,
			"configured": request.configured,
		})
		return session_id

	def resolve(self, path: PathId) -> MenuItemNode:
		"""
		Select the item at path and close the session.

		Configured sessions run the item's action. A failing action is logged
		and passed to on_action_error; on_select is notified either way.
		"""
		active = self._require_active("resolve")

		if not path:
			raise PathError("The menu center cannot be selected")
		node = resolve_path(active.root, path)

		self._close()

		event = SelectEvent(
			session_id=active.session_id,
			path=node.path,
			item_id=node.id if node.id is not None else format_path(node.path),
			configured=active.configured,
			menu_name=active.menu_name,
		)
		log.debug("Session %d selected %s (%r)", active.session_id, event.item_id, node.name)

		if active.configured and node.action is not None:
			try:
				node.action()
			except Exception as ex:
				log.exception("Action of item %r in session %d failed", node.name, active.session_id)
				self._telemetry.event("menu.action_failed", {"session_id": active.session_id, "item_id": event.item_id})
				if self.on_action_error is not None:
					self.on_action_error(event, ex)

		self._telemetry.event("menu.selected", {"session_id": active.session_id, "item_id": event.item_id})
		if self.on_select is not None:
			self.on_select(event)

		return node

	def cancel(self) -> int:
		active = self._require_active("cancel")
		self._close()

		log.debug("Session %d cancelled", active.session_id)
		self._telemetry.event("menu.cancelled", {"session_id": active.session_id})

		if self.on_cancel is not None:
			self.on_cancel(CancelEvent(
				session_id=active.session_id,
				configured=active.configured,
				menu_name=active.menu_name,
			))

		return active.session_id

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _require_active(self, operation: str) -> Active:
		active = self.active
		if active is None:
			raise SessionStateError(f"{operation}() requires an active menu session")
		return active

	def _close(self) -> None:
		self._state = IDLE
		self._presenter.hide()

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} state={self._state!r}>"
