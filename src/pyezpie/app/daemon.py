# ---------------------------------------------------------------------------
# File: daemon.py
# ---------------------------------------------------------------------------
# Description:
#	Daemon: owns and wires every pyezpie part.
#
# Notes:
#	- Config change -> ShortcutReconciler.reconcile().
#	- Hotkey press -> KeyRouter -> RequestDispatcher.show_menu().
#	- External requests -> show_menu / preview_menu / show_custom_menu /
#	  preview_custom_menu; results are session ids or negative ErrorCodes.
#	- The transport that delivers requests (D-Bus, socket, ...) is not part
#	  of the daemon; it calls these methods and connects on_select/on_cancel.
#	- With "logging.notify_level" set, pyezpie log records at or above that
#	  level are also posted as notifications.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/08/2026	Paul G. LeDuc				Initial coding / release
# 10/09/2026	Paul G. LeDuc				Add collection providers + destroy()
# 10/10/2026	Paul G. LeDuc				Mirror log records into notifications (logging.notify_level)
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Optional

from pyezpie.app.commands import Command, CommandContext, CommandRegistry
from pyezpie.app.dispatcher import CancelSignal, MenuDescription, RequestDispatcher, SelectSignal
from pyezpie.app.keyrouter import KeyRouter
from pyezpie.app.keys import KeyBinder, KeyBindingTable
from pyezpie.app.shortcuts import ReconcileReport, ShortcutReconciler
from pyezpie.core.config import AppConfig, MenuConfigStore
from pyezpie.core.logging import get_app_logger, get_level_setting
from pyezpie.core.telemetry import init_telemetry
from pyezpie.menu.items import CollectionProvider, ExpandContext
from pyezpie.menu.session import MenuPresenter, MenuSession
from pyezpie.services.notifications import NotificationLogHandler, NotificationService


log = get_app_logger("daemon")


class Daemon:
	"""
	Daemon

	Holds one MenuSession for the process and everything around it.
	"""

	def __init__(
		self,
		cfg: dict[str, Any] | None = None,
		binder: Optional[KeyBinder] = None,
		presenter: Optional[MenuPresenter] = None,
		menus: Optional[list[Any]] = None,
	) -> None:
		self.cfg = AppConfig(cfg)
		self.telemetry = init_telemetry(self.cfg)

		# -------------------------------------------------------------------
		# Services + commands
		# -------------------------------------------------------------------

		self.notifications = NotificationService()
		self.log_handler: Optional[NotificationLogHandler] = None
		notify_level = get_level_setting(self.cfg, "notify_level")
		if notify_level is not None:
			self.log_handler = NotificationLogHandler(self.notifications, level=notify_level)
			get_app_logger().addHandler(self.log_handler)

		self.commands = CommandRegistry()
		self.collections: dict[str, CollectionProvider] = {}
		self.state: dict[str, Any] = {}

		# -------------------------------------------------------------------
		# Menus
		# -------------------------------------------------------------------

		self.store = MenuConfigStore()
		self.session = MenuSession(presenter=presenter, telemetry=self.telemetry)
		self.dispatcher = RequestDispatcher(
			self.session,
			self.store,
			expand_context=ExpandContext(
				commands=self.commands,
				command_context=self._build_command_context(),
				collections=self.collections,
			),
			telemetry=self.telemetry,
			notifications=self.notifications,
		)

		# -------------------------------------------------------------------
		# Hotkeys
		# -------------------------------------------------------------------

		self.binder: KeyBinder = binder if binder is not None else KeyBindingTable()
		if isinstance(self.binder, KeyBindingTable) and self.binder.on_activated is None:
			self.binder.on_activated = self.on_shortcut

		self.reconciler = ShortcutReconciler(self.binder, self.notifications, self.telemetry)
		self.router = KeyRouter(self.dispatcher, self.reconciler, self.notifications, self.telemetry)
		self.last_reconcile: Optional[ReconcileReport] = None

		self.store.connect(self._on_menu_configs_changed)
		if menus is not None:
			self.store.set_menus(menus)

	# -----------------------------------------------------------------------
	# Inbound operations
	# -----------------------------------------------------------------------

	def show_menu(self, name: str) -> int:
		return self.dispatcher.show_menu(name)

	def preview_menu(self, name: str) -> int:
		return self.dispatcher.preview_menu(name)

	def show_custom_menu(self, description: MenuDescription) -> int:
		return self.dispatcher.show_custom_menu(description)

	def preview_custom_menu(self, description: MenuDescription) -> int:
		return self.dispatcher.preview_custom_menu(description)

	def connect_signals(
		self,
		on_select: Optional[SelectSignal] = None,
		on_cancel: Optional[CancelSignal] = None,
	) -> None:
		"""
		Outbound OnSelect(session_id, item_id) / OnCancel(session_id) for ad-hoc menus.
		"""
		self.dispatcher.on_select = on_select
		self.dispatcher.on_cancel = on_cancel

	def on_shortcut(self, shortcut: str) -> bool:
		"""
		Entry point for the desktop binding backend when a hotkey fires.
		"""
		return self.router.route_shortcut(shortcut)

	# -----------------------------------------------------------------------
	# Registration wrappers
	# -----------------------------------------------------------------------

	def register_command(self, command: Command) -> None:
		self.commands.register(command)

	def register_collection(self, name: str, provider: CollectionProvider) -> None:
		self.collections[name] = provider

	# -----------------------------------------------------------------------
	# Lifecycle
	# -----------------------------------------------------------------------

	def destroy(self) -> None:
		"""
		Close any open menu and release every hotkey.
		"""
		if self.session.is_active:
			self.session.cancel()

		released = self.reconciler.release()
		self.store.disconnect(self._on_menu_configs_changed)
		if self.log_handler is not None:
			get_app_logger().removeHandler(self.log_handler)
			self.log_handler = None
		log.info("Daemon stopped, released %d shortcut(s)", len(released))

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _build_command_context(self) -> CommandContext:
		return CommandContext(
			app=self,
			state=self.state,
			services={"notifications": self.notifications},
			extra={},
		)

	def _on_menu_configs_changed(self, store: MenuConfigStore) -> None:
		self.last_reconcile = self.reconciler.reconcile(store.menus)

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} menus={self.store.names()!r} session={self.session!r}>"
