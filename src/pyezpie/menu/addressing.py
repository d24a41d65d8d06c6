# ---------------------------------------------------------------------------
# File: addressing.py
# ---------------------------------------------------------------------------
# Description:
#	Path addressing for pyezpie menu trees.
#
# Notes:
#	- Every node gets a positional PathId (tuple of child indices).
#	- Every node gets a wire id: its stable_id if the caller supplied one,
#	  else "<parent id>/<index>".
#	- Resolving a bad path raises PathError (contract violation).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Paul G. LeDuc				Initial coding / release
# 10/06/2026	Paul G. LeDuc				Accept "/a/b" text in resolve()
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Iterator, Sequence, Union

from pyezpie.menu.node import MenuItemNode, PathError, PathId, parse_path


def assign_ids(
	nodes: Sequence[MenuItemNode],
	parent_path: PathId = (),
	parent_id: str = "",
) -> None:
	"""
	Assign path + id to every node below (and including) nodes, depth-first.

	Calling this twice on an unchanged tree yields identical ids.
	"""
	for index, node in enumerate(nodes):
		node.path = parent_path + (index,)

		if node.stable_id:
			node.id = node.stable_id
		else:
			node.id = f"{parent_id}/{index}"

		if node.children:
			assign_ids(node.children, node.path, node.id)


def address_tree(root: MenuItemNode) -> None:
	root.path = ()
	root.id = root.stable_id or ""
	assign_ids(root.children, (), root.id)


def resolve(root: MenuItemNode, path: Union[PathId, str]) -> MenuItemNode:
	"""
	Walk child indices from root and return the addressed node.

	Raises:
		PathError if path is malformed or leaves the tree.
	"""
	if isinstance(path, str):
		path = parse_path(path)

	node = root
	for depth, index in enumerate(path):
		if not isinstance(index, int) or isinstance(index, bool):
			raise PathError(f"Path segment {index!r} at depth {depth} is not an index")
		if not 0 <= index < len(node.children):
			raise PathError(
				f"Path {path!r} leaves the tree at depth {depth} "
				f"({node.name!r} has {len(node.children)} children)"
			)
		node = node.children[index]

	return node


def iter_addressed(root: MenuItemNode) -> Iterator[tuple[PathId, MenuItemNode]]:
	"""
	Yield (path, node) for every descendant of root, depth-first.
	"""
	for node in root.walk():
		yield node.path, node
