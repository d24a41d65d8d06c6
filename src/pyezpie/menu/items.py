# ---------------------------------------------------------------------------
# File: items.py
# ---------------------------------------------------------------------------
# Description:
#	Configured menu definitions for pyezpie (declarative -> MenuItemNode tree).
#
# Notes:
#	- Raw descriptors (dicts, e.g. loaded from JSON) are parsed once into
#	  typed ItemDef objects. Each ItemDef knows how to expand itself.
#	- Expansion is pure: it builds a fresh tree on every open and never
#	  touches the definitions.
#	- A CollectionItem expands into one node per element of its collection,
#	  inlined at its own position (e.g. one node per bookmark).
#	- An angle that is missing, null or negative means "no fixed angle".
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	Paul G. LeDuc				Initial coding / release
# 10/07/2026	Paul G. LeDuc				Add CollectionItem + providers
# 10/09/2026	Paul G. LeDuc				Accept legacy "data" shortcut on menus
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Iterable, Mapping, Optional, Protocol, Sequence

from pyezpie.app.commands import CommandContext, CommandRegistry
from pyezpie.core.errors import ConfigError
from pyezpie.menu.node import MenuAction, MenuItemNode


# ---------------------------------------------------------------------------
# Expansion context
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CollectionElement:
	"""
	One element of a dynamic collection (e.g. one bookmark).
	"""
	name: str
	icon: str = ""
	action: Optional[MenuAction] = None


CollectionProvider = Callable[[], Iterable[CollectionElement]]


@dataclass(slots=True)
class ExpandContext:
	"""
	Everything item expansion may depend on.
	"""
	commands: CommandRegistry = field(default_factory=CommandRegistry)
	command_context: CommandContext = field(default_factory=CommandContext)
	collections: dict[str, CollectionProvider] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Item definitions
# ---------------------------------------------------------------------------

class ItemDef(Protocol):
	name: str
	icon: str
	angle: Optional[float]

	def expand(self, ctx: ExpandContext) -> list[MenuItemNode]: ...


@dataclass(frozen=True, slots=True)
class CommandItem:
	"""
	Leaf item executing a registered command.
	"""
	name: str
	command_id: str
	icon: str = ""
	angle: Optional[float] = None

	def expand(self, ctx: ExpandContext) -> list[MenuItemNode]:
		command_id = self.command_id
		commands = ctx.commands
		command_ctx = replace(ctx.command_context, extra={"item": self.name})

		def _run() -> Any:
			return commands.execute(command_id, command_ctx)

		return [MenuItemNode(name=self.name, icon=self.icon, fixed_angle=self.angle, action=_run)]


@dataclass(frozen=True, slots=True)
class SubmenuItem:
	name: str
	icon: str = ""
	angle: Optional[float] = None
	children: tuple[ItemDef, ...] = ()

	def expand(self, ctx: ExpandContext) -> list[MenuItemNode]:
		node = MenuItemNode(name=self.name, icon=self.icon, fixed_angle=self.angle)
		node.children = expand_items(self.children, ctx)
		return [node]


@dataclass(frozen=True, slots=True)
class CollectionItem:
	"""
	Placeholder for a dynamic collection, expanded through a named provider.
	"""
	name: str
	provider: str
	icon: str = ""
	angle: Optional[float] = None

	def expand(self, ctx: ExpandContext) -> list[MenuItemNode]:
		provider = ctx.collections.get(self.provider)
		if provider is None:
			raise ConfigError(f"No collection provider named {self.provider!r}")

		return [
			MenuItemNode(name=element.name, icon=element.icon or self.icon, action=element.action)
			for element in provider()
		]


@dataclass(frozen=True, slots=True)
class MenuDef:
	"""
	MenuDef

	Root descriptor of a configured menu.

	name:		Unique menu name (ShowMenu argument)
	icon:		Center icon
	shortcut:	Global hotkey string, "" for none
	children:	Top-level items
	"""
	name: str
	icon: str = ""
	shortcut: str = ""
	children: tuple[ItemDef, ...] = ()

	def build_tree(self, ctx: ExpandContext) -> MenuItemNode:
		root = MenuItemNode(name=self.name, icon=self.icon)
		root.children = expand_items(self.children, ctx)
		return root


def expand_items(items: Sequence[ItemDef], ctx: ExpandContext) -> list[MenuItemNode]:
	nodes: list[MenuItemNode] = []
	for item in items:
		nodes.extend(item.expand(ctx))
	return nodes


# ---------------------------------------------------------------------------
# Descriptor parsing
# ---------------------------------------------------------------------------

def parse_menu(raw: Any) -> MenuDef:
	"""
	Parse a root menu descriptor.

	{"name": ..., "icon": ..., "type": "Menu", "shortcut": ..., "children": [...]}
	"""
	entry = _require_mapping(raw, "menu")
	name = _require_str(entry, "name", "menu")

	kind = entry.get("type", "Menu")
	if kind != "Menu":
		raise ConfigError(f"Menu {name!r} must have type 'Menu', not {kind!r}")

	shortcut = entry.get("shortcut")
	if shortcut is None:
		shortcut = entry.get("data", "")
	if not isinstance(shortcut, str):
		raise ConfigError(f"Shortcut of menu {name!r} must be a string")

	return MenuDef(
		name=name,
		icon=_optional_str(entry, "icon"),
		shortcut=shortcut.strip(),
		children=_parse_children(entry, name),
	)


def parse_item(raw: Any) -> ItemDef:
	entry = _require_mapping(raw, "item")
	name = _require_str(entry, "name", "item")
	kind = entry.get("type")

	parser = _ITEM_PARSERS.get(kind) if isinstance(kind, str) else None
	if parser is None:
		raise ConfigError(f"Item {name!r} has unknown type {kind!r}")

	return parser(entry, name)


def _parse_command(entry: Mapping[str, Any], name: str) -> ItemDef:
	return CommandItem(
		name=name,
		command_id=_require_str(entry, "data", f"item {name!r}"),
		icon=_optional_str(entry, "icon"),
		angle=_parse_angle(entry, name),
	)


def _parse_submenu(entry: Mapping[str, Any], name: str) -> ItemDef:
	return SubmenuItem(
		name=name,
		icon=_optional_str(entry, "icon"),
		angle=_parse_angle(entry, name),
		children=_parse_children(entry, name),
	)


def _parse_collection(entry: Mapping[str, Any], name: str) -> ItemDef:
	return CollectionItem(
		name=name,
		provider=_require_str(entry, "data", f"item {name!r}"),
		icon=_optional_str(entry, "icon"),
		angle=_parse_angle(entry, name),
	)


_ITEM_PARSERS: dict[str, Callable[[Mapping[str, Any], str], ItemDef]] = {
	"Command": _parse_command,
	"Submenu": _parse_submenu,
	"Collection": _parse_collection,
}


def _parse_children(entry: Mapping[str, Any], owner: str) -> tuple[ItemDef, ...]:
	children = entry.get("children", [])
	if not isinstance(children, list):
		raise ConfigError(f"'children' of {owner!r} must be a list")
	return tuple(parse_item(child) for child in children)


def _parse_angle(entry: Mapping[str, Any], name: str) -> Optional[float]:
	angle = entry.get("angle")
	if angle is None:
		return None
	if isinstance(angle, bool) or not isinstance(angle, (int, float)):
		raise ConfigError(f"Angle of item {name!r} must be a number")
	if angle < 0:
		return None
	return float(angle)


def _require_mapping(raw: Any, what: str) -> Mapping[str, Any]:
	if not isinstance(raw, Mapping):
		raise ConfigError(f"A {what} descriptor must be an object, got {type(raw).__name__}")
	return raw


def _require_str(entry: Mapping[str, Any], key: str, owner: str) -> str:
	value = entry.get(key)
	if not isinstance(value, str) or not value:
		raise ConfigError(f"{owner} requires a non-empty string {key!r}")
	return value


def _optional_str(entry: Mapping[str, Any], key: str) -> str:
	value = entry.get(key, "")
	return value if isinstance(value, str) else ""
