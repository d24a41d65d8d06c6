# ---------------------------------------------------------------------------
# File: test_daemon.py
# ---------------------------------------------------------------------------
# Description:
#	End-to-end tests for Daemon wiring (config -> hotkeys -> menus).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/08/2026	Paul G. LeDuc				Initial tests
# 10/09/2026	Paul G. LeDuc				Collections + destroy()
# 10/10/2026	Paul G. LeDuc				Chained menus, failing commands, notify_level
# ---------------------------------------------------------------------------

from __future__ import annotations

from pyezpie.app.commands import Command
from pyezpie.app.daemon import Daemon
from pyezpie.app.keys import KeyBindingTable
from pyezpie.core.errors import ErrorCode
from pyezpie.core.logging import get_app_logger
from pyezpie.menu.items import CollectionElement
from pyezpie.services.notifications import NotificationLogHandler


MENUS = [
	{"name": "Main", "shortcut": "<Primary>space", "children": [
		{"name": "Terminal", "type": "Command", "data": "open.terminal"},
		{"name": "Places", "type": "Collection", "data": "bookmarks"},
	]},
	{"name": "Broken", "shortcut": "<Alt>b", "children": []},
]


def _daemon(**kwargs) -> Daemon:
	d = Daemon(**kwargs)
	d.register_collection("bookmarks", lambda: [CollectionElement(name="home"), CollectionElement(name="tmp")])
	return d


def test_config_change_binds_shortcuts():
	d = _daemon()

	d.store.set_menus(MENUS)

	assert sorted(d.binder.get_bound()) == ["<Alt>b", "<Primary>space"]
	assert d.last_reconcile is not None
	assert d.last_reconcile.ok is True


def test_menus_passed_to_constructor_are_reconciled():
	d = _daemon(menus=MENUS)

	assert d.store.names() == ["Main", "Broken"]
	assert len(d.binder.get_bound()) == 2


def test_hotkey_press_opens_menu_and_runs_command():
	d = _daemon(menus=MENUS)
	calls: list[str] = []
	d.register_command(Command(id="open.terminal", handler=lambda ctx: calls.append(ctx.extra["item"])))

	assert d.binder.press("<Primary>space") is True
	assert d.session.active.menu_name == "Main"
	assert [c.name for c in d.session.active.root.children] == ["Terminal", "home", "tmp"]

	d.dispatcher.select("/0")

	assert calls == ["Terminal"]
	assert d.session.is_active is False


def test_hotkey_for_broken_menu_posts_notification():
	d = _daemon(menus=MENUS)

	d.binder.press("<Alt>b")

	assert d.session.is_active is False
	assert d.notifications.last.level == "error"
	assert d.notifications.last.message.startswith("Failed to open a menu:")


def test_bind_failure_posts_warning():
	binder = KeyBindingTable(reject={"<Alt>b"})
	d = _daemon(binder=binder, menus=MENUS)

	assert binder.on_activated == d.on_shortcut
	assert d.binder.get_bound() == ["<Primary>space"]
	assert d.notifications.messages("warning") == ["Failed to bind shortcut <Alt>b for menu Broken."]


def test_custom_menu_signals():
	d = _daemon()
	selects: list[tuple[int, str]] = []
	cancels: list[int] = []
	d.connect_signals(on_select=lambda sid, item: selects.append((sid, item)), on_cancel=cancels.append)

	first = d.show_custom_menu('{"items": [{"name": "A"}, {"name": "B", "id": "b"}]}')
	d.dispatcher.select("/1")
	second = d.preview_custom_menu({"items": [{"name": "A"}]})
	d.dispatcher.cancel()

	assert (first, second) == (0, 1)
	assert selects == [(0, "b")]
	assert cancels == [1]


def test_show_and_preview_by_name():
	d = _daemon(menus=MENUS)

	assert d.show_menu("Nope") == ErrorCode.NO_SUCH_MENU
	assert d.preview_menu("Main") == 0
	assert d.show_menu("Main") == ErrorCode.ALREADY_ACTIVE


def test_daemon_telemetry_from_config():
	d = _daemon(cfg={"telemetry_enabled": True, "telemetry_sink": "memory"}, menus=MENUS)

	d.binder.press("<Primary>space")
	d.binder.press("<Alt>x")

	sink = d.telemetry.sink
	assert "shortcut.bound" in sink.event_names()
	assert "menu.opened" in sink.event_names()
	assert sink.metric_names().count("keys.pressed") == 1
	assert "layout.duration_ms" in sink.metric_names()


def test_destroy_cancels_and_releases():
	d = _daemon(menus=MENUS)
	d.show_menu("Main")

	d.destroy()

	assert d.session.is_active is False
	assert d.binder.get_bound() == []

	# store changes no longer reach the binder
	d.store.set_menus(MENUS)
	assert d.binder.get_bound() == []


def test_command_may_open_another_configured_menu():
	d = _daemon(menus=MENUS)
	d.register_command(Command(id="open.terminal", handler=lambda ctx: ctx.app.show_menu("Places")))
	d.store.set_menus(MENUS + [{"name": "Places", "children": [
		{"name": "Places", "type": "Collection", "data": "bookmarks"},
	]}])

	d.show_menu("Main")
	d.dispatcher.select("/0")

	assert d.session.active.menu_name == "Places"
	assert d.dispatcher.current_menu == "Places"


def test_unregistered_command_posts_error():
	d = _daemon(menus=MENUS)
	d.show_menu("Main")

	d.dispatcher.select("/0")

	assert d.session.is_active is False
	assert d.notifications.last.level == "error"
	assert "open.terminal" in d.notifications.last.message


def test_notify_level_mirrors_log_records_until_destroy():
	d = _daemon(cfg={"logging.notify_level": "error"}, menus=MENUS)
	log = get_app_logger("tests")

	log.warning("below the threshold")
	log.error("disk full")

	assert d.notifications.messages() == ["disk full"]
	assert d.notifications.last.level == "error"

	d.destroy()
	log.error("after destroy")

	assert d.notifications.messages() == ["disk full"]


def test_notify_level_unset_attaches_no_handler():
	d = _daemon(menus=MENUS)

	assert d.log_handler is None
	assert all(not isinstance(h, NotificationLogHandler) for h in get_app_logger().handlers)
