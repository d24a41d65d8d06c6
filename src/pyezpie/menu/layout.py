# ---------------------------------------------------------------------------
# File: layout.py
# ---------------------------------------------------------------------------
# Description:
#	Angular layout engine for pyezpie menus.
#
# Notes:
#	Angles are degrees, 0 is up, 90 is right, 180 is down.
#
#	Per menu level:
#	- Items carrying a fixed angle are anchors. Anchors must increase in list
#	  order and lie in [0, 360).
#	- With no anchor, the first item is anchored at 90 (or 270 when the
#	  back-link to the parent is on the right half).
#	- The circle is split into wedges between consecutive anchors (wrapping
#	  around). Free items are spread evenly inside their wedge.
#	- The back-link to the parent sits at parent_angle. It consumes one slot
#	  of the wedge it falls into, and no anchor may be within 1 degree of it.
#	- Child levels use (item angle + 180) % 360 as their parent_angle.
#
#	The whole tree is planned before anything is written, so a conflict
#	anywhere leaves every node untouched.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Paul G. LeDuc				Initial coding / release
# 10/06/2026	Paul G. LeDuc				Plan-then-commit, fix 0 degree anchors
# 10/07/2026	Paul G. LeDuc				Circular back-link clearance check
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Optional, Sequence

from pyezpie.menu.node import MenuItemNode


BACKLINK_CLEARANCE: float = 1.0

FIRST_ANGLE: float = 90.0
FIRST_ANGLE_MIRRORED: float = 270.0


class AngleConflict(ValueError):
	"""
	The fixed angles of a menu level cannot be satisfied.
	"""


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def assign_angles(
	nodes: Sequence[MenuItemNode],
	parent_angle: Optional[float] = None,
) -> None:
	"""
	Assign resolved_angle to every node in nodes and (recursively) their children.

	Raises:
		AngleConflict if any level of the tree is unsatisfiable. No node is
		modified in that case.
	"""
	plan: list[tuple[MenuItemNode, float]] = []
	_plan_level(nodes, parent_angle, plan)

	for node, angle in plan:
		node.resolved_angle = angle


def layout_tree(root: MenuItemNode) -> None:
	"""
	Lay out a whole menu. The root is the center and has no angle.
	"""
	assign_angles(root.children)
	root.resolved_angle = None


def compute_level_angles(
	fixed: Sequence[Optional[float]],
	parent_angle: Optional[float] = None,
) -> list[float]:
	"""
	Compute the angles of a single menu level.

	Args:
		fixed:			One entry per item, the fixed angle or None.
		parent_angle:	Direction of the back-link, or None for the top level.

	Returns:
		One angle per item, each in [0, 360).
	"""
	count = len(fixed)
	if count == 0:
		return []

	if parent_angle is not None:
		parent_angle = float(parent_angle) % 360.0

	anchors = _collect_anchors(fixed)
	_check_anchors(anchors, parent_angle)

	if not anchors:
		first = FIRST_ANGLE
		if parent_angle is not None and parent_angle < 180.0:
			first = FIRST_ANGLE_MIRRORED
		anchors = [(0, first)]

	angles: list[float] = [0.0] * count
	for index, angle in anchors:
		angles[index] = angle

	for k, (begin_index, begin_angle) in enumerate(anchors):
		end_index, end_angle = anchors[(k + 1) % len(anchors)]
		if end_angle <= begin_angle:
			end_angle += 360.0

		slots = (end_index - begin_index - 1) % count

		backlink: Optional[float] = None
		if parent_angle is not None:
			backlink = parent_angle if parent_angle >= begin_angle else parent_angle + 360.0
			if begin_angle < backlink < end_angle:
				slots += 1
			else:
				backlink = None

		gap = (end_angle - begin_angle) / (slots + 1)

		step = 1
		index = (begin_index + 1) % count
		while index != end_index:
			angle = begin_angle + gap * step

			# The back-link takes this slot when it is at most half a gap ahead.
			if backlink is not None and angle + gap / 2.0 >= backlink:
				step += 1
				angle = begin_angle + gap * step
				backlink = None

			angles[index] = angle % 360.0

			index = (index + 1) % count
			step += 1

	return angles


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _plan_level(
	nodes: Sequence[MenuItemNode],
	parent_angle: Optional[float],
	plan: list[tuple[MenuItemNode, float]],
) -> None:
	if not nodes:
		return

	angles = compute_level_angles([node.fixed_angle for node in nodes], parent_angle)

	for node, angle in zip(nodes, angles):
		plan.append((node, angle))

	for node, angle in zip(nodes, angles):
		if node.children:
			_plan_level(node.children, (angle + 180.0) % 360.0, plan)


def _collect_anchors(fixed: Sequence[Optional[float]]) -> list[tuple[int, float]]:
	anchors: list[tuple[int, float]] = []

	for index, raw in enumerate(fixed):
		if raw is None:
			continue
		try:
			anchors.append((index, float(raw)))
		except (TypeError, ValueError) as ex:
			raise AngleConflict(f"Item {index} has a non-numeric angle: {raw!r}") from ex

	return anchors


def _check_anchors(anchors: Sequence[tuple[int, float]], parent_angle: Optional[float]) -> None:
	previous: Optional[float] = None

	for index, angle in anchors:
		if not 0.0 <= angle < 360.0:
			raise AngleConflict(f"Fixed angle {angle} of item {index} is outside [0, 360)")

		if previous is not None and angle <= previous:
			raise AngleConflict(
				f"Fixed angles must increase monotonically: item {index} has {angle} "
				f"after {previous}"
			)

		if parent_angle is not None and _circular_distance(angle, parent_angle) < BACKLINK_CLEARANCE:
			raise AngleConflict(
				f"Fixed angle {angle} of item {index} collides with the parent link at {parent_angle}"
			)

		previous = angle


def _circular_distance(a: float, b: float) -> float:
	diff = abs(a - b) % 360.0
	return min(diff, 360.0 - diff)
