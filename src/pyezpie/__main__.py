# ---------------------------------------------------------------------------
# File: __main__.py
# ---------------------------------------------------------------------------
# Description:
#	Command-line driver for pyezpie: open a menu headless, print its layout,
#	then select an item or cancel.
#
#	python -m pyezpie menus.json --menu Main --select /0/1
#	python -m pyezpie --custom '{"items": [{"name": "A"}, {"name": "B"}]}'
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/09/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Optional, Sequence

from pyezpie.app.commands import Command
from pyezpie.app.daemon import Daemon
from pyezpie.core.errors import ConfigError, describe_error
from pyezpie.core.logging import init_logging
from pyezpie.menu.items import CommandItem, ItemDef, SubmenuItem
from pyezpie.menu.node import MenuItemNode, PathError


def build_parser() -> argparse.ArgumentParser:
	p = argparse.ArgumentParser(
		prog="pyezpie",
		description="Open a pie menu headless and print its layout.",
	)
	p.add_argument("config", nargs="?", default=None, help="Menu configuration (JSON file)")

	target = p.add_mutually_exclusive_group()
	target.add_argument("--menu", default=None, help="Configured menu to open (default: first)")
	target.add_argument("--custom", default=None, help="Ad-hoc menu description (JSON)")

	p.add_argument("--preview", action="store_true", help="Open in preview mode")
	p.add_argument("--select", default=None, help="Item path to select, e.g. /0/2 (default: cancel)")
	p.add_argument("--log-level", default="WARNING", help="Logging level")
	p.add_argument("--telemetry", action="store_true", help="Log telemetry events")
	return p


def _command_ids(items: Iterable[ItemDef]) -> Iterable[str]:
	for item in items:
		if isinstance(item, CommandItem):
			yield item.command_id
		elif isinstance(item, SubmenuItem):
			yield from _command_ids(item.children)


def _register_echo_commands(daemon: Daemon) -> None:
	"""
	Commands referenced by the configuration just print their id here.
	"""
	for menu in daemon.store.menus:
		for command_id in _command_ids(menu.children):
			if not daemon.commands.has(command_id):
				daemon.register_command(Command(
					id=command_id,
					handler=lambda ctx, cid=command_id: print(f"run {cid}"),
				))


def _print_tree(root: MenuItemNode) -> None:
	for node in root.walk():
		depth = len(node.path) - 1
		angle = "-" if node.resolved_angle is None else f"{node.resolved_angle:6.1f}"
		print(f"{'  ' * depth}{node.id:<12} {angle}  {node.name}")


def main(argv: Optional[Sequence[str]] = None) -> int:
	args = build_parser().parse_args(argv)

	cfg = {
		"logging.level": args.log_level,
		"telemetry_enabled": args.telemetry,
		"telemetry_sink": "log",
	}
	init_logging(cfg)
	daemon = Daemon(cfg=cfg)

	if args.config:
		try:
			daemon.store.load_file(args.config)
		except (OSError, ConfigError) as ex:
			print(f"pyezpie: {ex}", file=sys.stderr)
			return 1
		_register_echo_commands(daemon)

	daemon.connect_signals(
		on_select=lambda session_id, item_id: print(f"OnSelect {session_id} {item_id}"),
		on_cancel=lambda session_id: print(f"OnCancel {session_id}"),
	)

	try:
		if args.custom is not None:
			opener = daemon.preview_custom_menu if args.preview else daemon.show_custom_menu
			result = opener(args.custom)
		else:
			names = daemon.store.names()
			name = args.menu or (names[0] if names else "")
			opener = daemon.preview_menu if args.preview else daemon.show_menu
			result = opener(name)

		if result < 0:
			print(f"pyezpie: {describe_error(result)} ({result})", file=sys.stderr)
			return 1

		active = daemon.session.active
		if active is not None:
			_print_tree(active.root)

		if args.select:
			try:
				daemon.dispatcher.select(args.select)
			except PathError as ex:
				print(f"pyezpie: {ex}", file=sys.stderr)
				return 1
		else:
			daemon.dispatcher.cancel()

		return 0
	finally:
		daemon.destroy()


if __name__ == "__main__":
	sys.exit(main())
