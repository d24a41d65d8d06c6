# ---------------------------------------------------------------------------
# File: app/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public app package surface for pyezpie.
#
# Notes:
#   - Uses lazy exports to avoid circular imports between the daemon,
#     the menu package and the command registry.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"Command",
	"CommandContext",
	"CommandRegistry",
	"Daemon",
	"KeyBindingTable",
	"KeyRouter",
	"RequestDispatcher",
	"ShortcutReconciler",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"Command": ("pyezpie.app.commands", "Command"),
	"CommandContext": ("pyezpie.app.commands", "CommandContext"),
	"CommandRegistry": ("pyezpie.app.commands", "CommandRegistry"),
	"Daemon": ("pyezpie.app.daemon", "Daemon"),
	"KeyBindingTable": ("pyezpie.app.keys", "KeyBindingTable"),
	"KeyRouter": ("pyezpie.app.keyrouter", "KeyRouter"),
	"RequestDispatcher": ("pyezpie.app.dispatcher", "RequestDispatcher"),
	"ShortcutReconciler": ("pyezpie.app.shortcuts", "ShortcutReconciler"),
}

def __getattr__(name: str) -> Any:
	try:
		mod_name, attr_name = _EXPORTS[name]
	except KeyError as ex:
		raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from ex

	import importlib
	mod = importlib.import_module(mod_name)
	return getattr(mod, attr_name)

def __dir__() -> list[str]:
	return sorted(set(list(globals().keys()) + list(__all__)))

if TYPE_CHECKING:
	from pyezpie.app.commands import Command, CommandContext, CommandRegistry
	from pyezpie.app.daemon import Daemon
	from pyezpie.app.dispatcher import RequestDispatcher
	from pyezpie.app.keyrouter import KeyRouter
	from pyezpie.app.keys import KeyBindingTable
	from pyezpie.app.shortcuts import ShortcutReconciler
