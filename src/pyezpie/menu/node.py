# ---------------------------------------------------------------------------
# File: node.py
# ---------------------------------------------------------------------------
# Description:
#	Menu tree node + path value type for pyezpie.
#
# Notes:
#	- A PathId is a tuple of child indices from the root; only the wire
#	  boundary deals with the "/2/4" text form.
#	- The root node is the menu center; it never gets a resolved angle.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Paul G. LeDuc				Initial coding / release
# 10/06/2026	Paul G. LeDuc				Add stable_id + walk()
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional, TypeAlias


PathId: TypeAlias = tuple[int, ...]
MenuAction = Callable[[], Any]


class PathError(LookupError):
	"""
	Raised for malformed paths or paths that do not address a node.

	Paths are produced by pyezpie itself, so this is a contract violation
	and is never mapped to a request error code.
	"""


def format_path(path: PathId) -> str:
	"""
	(2, 4) -> "/2/4". The root path () formats as "".
	"""
	return "".join(f"/{index}" for index in path)


def parse_path(text: str) -> PathId:
	"""
	"/2/4" -> (2, 4). "" addresses the root.
	"""
	if text == "":
		return ()

	if not text.startswith("/"):
		raise PathError(f"Path must start with '/': {text!r}")

	path: list[int] = []
	for segment in text[1:].split("/"):
		if not segment.isdecimal():
			raise PathError(f"Invalid path segment {segment!r} in {text!r}")
		path.append(int(segment))

	return tuple(path)


@dataclass(eq=False)
class MenuItemNode:
	"""
	MenuItemNode

	name:			Display name
	icon:			Icon reference (opaque)
	fixed_angle:	Configured angle in degrees, or None to let layout decide
	children:		Ordered child nodes
	action:			Invoked when a configured menu selects this node
	stable_id:		Caller-supplied id (ad-hoc menus only)

	Filled in when a menu is opened:
	resolved_angle:	Angle assigned by pyezpie.menu.layout
	path:			Positional address assigned by pyezpie.menu.addressing
	id:				Wire id (stable_id, or the positional id)
	"""
	name: str = ""
	icon: str = ""
	fixed_angle: Optional[float] = None
	children: list["MenuItemNode"] = field(default_factory=list)
	action: Optional[MenuAction] = None
	stable_id: Optional[str] = None

	resolved_angle: Optional[float] = None
	path: PathId = ()
	id: Optional[str] = None

	def add(self, child: "MenuItemNode") -> "MenuItemNode":
		self.children.append(child)
		return child

	def walk(self) -> Iterator["MenuItemNode"]:
		"""
		Depth-first iteration over all descendants (self excluded).
		"""
		for child in self.children:
			yield child
			yield from child.walk()

	def __repr__(self) -> str:
		return (
			f"<{self.__class__.__name__} name={self.name!r} id={self.id!r} "
			f"angle={self.resolved_angle!r} children={len(self.children)}>"
		)
