# ---------------------------------------------------------------------------
# File: test_cli.py
# ---------------------------------------------------------------------------
# Description:
#	Tests for the python -m pyezpie driver.
#
# Notes:
#	- main() initializes logging; the root logger is restored afterwards.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/09/2026	Paul G. LeDuc				Initial tests
# 10/10/2026	Paul G. LeDuc				Preview of a named menu runs its command
# ---------------------------------------------------------------------------

from __future__ import annotations

import json
import logging

import pytest

from pyezpie.__main__ import build_parser, main
from pyezpie.core.logging import _reset_logging_for_tests


MENUS = [
	{"name": "Main", "shortcut": "<Primary>space", "children": [
		{"name": "Terminal", "type": "Command", "data": "open.terminal"},
		{"name": "More", "type": "Submenu", "children": [
			{"name": "Files", "type": "Command", "data": "open.files"},
		]},
	]},
]


@pytest.fixture(autouse=True)
def _restore_root_logger():
	root = logging.getLogger()
	handlers = list(root.handlers)
	level = root.level

	yield

	for handler in list(root.handlers):
		if handler not in handlers:
			root.removeHandler(handler)
	for handler in handlers:
		if handler not in root.handlers:
			root.addHandler(handler)
	root.setLevel(level)
	_reset_logging_for_tests()


@pytest.fixture
def config_file(tmp_path):
	path = tmp_path / "menus.json"
	path.write_text(json.dumps(MENUS), encoding="utf-8")
	return str(path)


def test_parser_rejects_menu_and_custom_together():
	with pytest.raises(SystemExit):
		build_parser().parse_args(["--menu", "Main", "--custom", "{}"])


def test_configured_menu_select_runs_command(config_file, capsys):
	assert main([config_file, "--menu", "Main", "--select", "/1/0"]) == 0

	out = capsys.readouterr().out
	assert "/0" in out and "Terminal" in out
	assert "/1/0" in out and "Files" in out
	assert "run open.files" in out
	assert "OnSelect" not in out


def test_first_menu_is_default_and_cancel_is_silent(config_file, capsys):
	assert main([config_file]) == 0

	out = capsys.readouterr().out
	assert "Terminal" in out
	assert "OnCancel" not in out


def test_preview_runs_command_without_signal(config_file, capsys):
	assert main([config_file, "--preview", "--select", "/0"]) == 0

	out = capsys.readouterr().out
	assert "run open.terminal" in out
	assert "OnSelect" not in out


def test_custom_menu_select_and_cancel(capsys):
	description = json.dumps({"items": [{"name": "A"}, {"name": "B", "id": "b"}]})

	assert main(["--custom", description, "--select", "/1"]) == 0
	assert "OnSelect 0 b" in capsys.readouterr().out

	assert main(["--custom", description]) == 0
	assert "OnCancel 0" in capsys.readouterr().out


def test_request_error_exits_with_1(capsys):
	assert main(["--custom", "{not json"]) == 1
	assert "(-3)" in capsys.readouterr().err

	assert main([]) == 1
	assert "(-6)" in capsys.readouterr().err


def test_bad_select_path_exits_with_1(config_file, capsys):
	assert main([config_file, "--select", "/9"]) == 1
	assert "pyezpie:" in capsys.readouterr().err


def test_unreadable_config_exits_with_1(tmp_path, capsys):
	assert main([str(tmp_path / "missing.json")]) == 1
	assert "pyezpie:" in capsys.readouterr().err
