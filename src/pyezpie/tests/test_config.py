# ---------------------------------------------------------------------------
# File: test_config.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for AppConfig + MenuConfigStore.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	Paul G. LeDuc				Initial tests
# 10/09/2026	Paul G. LeDuc				load_file() coverage
# ---------------------------------------------------------------------------

from __future__ import annotations

import json

import pytest

from pyezpie.core.config import AppConfig, MenuConfigStore
from pyezpie.core.errors import ConfigError


MENUS = [
	{"name": "Main", "shortcut": "<Primary>space", "children": [
		{"name": "Terminal", "type": "Command", "data": "open.terminal"},
	]},
	{"name": "Other", "children": []},
]


def test_appconfig_get_with_and_without_options():
	assert AppConfig().get("x", 1) == 1
	assert AppConfig({"x": 2}).get("x", 1) == 2
	assert AppConfig({"y": 2}).get("x") is None


def test_store_starts_empty():
	store = MenuConfigStore()

	assert store.menus == ()
	assert store.names() == []
	assert store.find("Main") is None


def test_set_menus_parses_and_notifies():
	store = MenuConfigStore()
	seen: list[list[str]] = []
	store.connect(lambda s: seen.append(s.names()))

	store.set_menus(MENUS)

	assert store.names() == ["Main", "Other"]
	assert store.find("Main").shortcut == "<Primary>space"
	assert seen == [["Main", "Other"]]


def test_constructor_accepts_menus():
	assert MenuConfigStore(MENUS).names() == ["Main", "Other"]


def test_disconnect_stops_notifications():
	store = MenuConfigStore()
	seen: list[int] = []

	def cb(s: MenuConfigStore) -> None:
		seen.append(len(s.menus))

	store.connect(cb)
	store.disconnect(cb)
	store.disconnect(cb)
	store.set_menus(MENUS)

	assert seen == []


@pytest.mark.parametrize("raw", [
	{"name": "Main"},
	[{"name": "Main"}, {"name": "Main"}],
	[{"name": "Main", "children": [{"name": "x"}]}],
])
def test_invalid_update_keeps_previous_menus(raw):
	store = MenuConfigStore(MENUS)
	seen: list[int] = []
	store.connect(lambda s: seen.append(1))

	with pytest.raises(ConfigError):
		store.set_menus(raw)

	assert store.names() == ["Main", "Other"]
	assert seen == []


def test_load_json_and_bad_json():
	store = MenuConfigStore()

	store.load_json(json.dumps(MENUS))
	assert store.names() == ["Main", "Other"]

	with pytest.raises(ConfigError):
		store.load_json("{not json")

	assert store.names() == ["Main", "Other"]


def test_load_file(tmp_path):
	path = tmp_path / "menus.json"
	path.write_text(json.dumps(MENUS), encoding="utf-8")

	store = MenuConfigStore()
	store.load_file(path)

	assert store.names() == ["Main", "Other"]
