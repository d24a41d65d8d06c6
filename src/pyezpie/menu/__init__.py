# ---------------------------------------------------------------------------
# File: menu/__init__.py
# ---------------------------------------------------------------------------
# Description:
#	Menu tree, layout, addressing and session for pyezpie.
#
# Notes:
#	- Lazy exports (PEP 562); menu.items depends on pyezpie.app.commands.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"AngleConflict",
	"MenuItemNode",
	"MenuRequest",
	"MenuSession",
	"PathError",
	"assign_angles",
	"assign_ids",
	"format_path",
	"parse_path",
	"resolve",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"AngleConflict": ("pyezpie.menu.layout", "AngleConflict"),
	"MenuItemNode": ("pyezpie.menu.node", "MenuItemNode"),
	"MenuRequest": ("pyezpie.menu.session", "MenuRequest"),
	"MenuSession": ("pyezpie.menu.session", "MenuSession"),
	"PathError": ("pyezpie.menu.node", "PathError"),
	"assign_angles": ("pyezpie.menu.layout", "assign_angles"),
	"assign_ids": ("pyezpie.menu.addressing", "assign_ids"),
	"format_path": ("pyezpie.menu.node", "format_path"),
	"parse_path": ("pyezpie.menu.node", "parse_path"),
	"resolve": ("pyezpie.menu.addressing", "resolve"),
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
	from pyezpie.menu.addressing import assign_ids, resolve
	from pyezpie.menu.layout import AngleConflict, assign_angles
	from pyezpie.menu.node import MenuItemNode, PathError, format_path, parse_path
	from pyezpie.menu.session import MenuRequest, MenuSession
