# ---------------------------------------------------------------------------
# File: keys.py
# ---------------------------------------------------------------------------
# Description:
#   Global hotkey binding contract for pyezpie.
#
# Notes:
#   - KeyBinder is the contract of the desktop-level binding table.
#   - KeyBindingTable is an in-process KeyBinder. It backs the tests and
#     the CLI, and is the template for real desktop backends.
#   - Shortcut strings are accelerator strings (e.g. "<Primary>space").
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	Paul G. LeDuc				Initial coding / release
# 10/07/2026	Paul G. LeDuc				Add reject set for bind failure simulation
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional, Protocol, runtime_checkable


ActivationCallback = Callable[[str], None]


class ShortcutBindError(RuntimeError):
	"""
	The desktop refused to bind a shortcut.
	"""


def normalize_shortcut(shortcut: str) -> str:
	return shortcut.strip()


@runtime_checkable
class KeyBinder(Protocol):
	def get_bound(self) -> Iterable[str]: ...
	def bind(self, shortcut: str) -> None: ...
	def unbind(self, shortcut: str) -> None: ...


@dataclass
class KeyBindingTable:
	"""
	KeyBindingTable

	In-process hotkey table. press() simulates the desktop delivering a hotkey.
	Shortcuts listed in reject fail to bind.
	"""
	on_activated: Optional[ActivationCallback] = None
	reject: set[str] = field(default_factory=set)

	_bound: list[str] = field(default_factory=list)
	bind_calls: list[str] = field(default_factory=list)
	unbind_calls: list[str] = field(default_factory=list)

	def get_bound(self) -> list[str]:
		return list(self._bound)

	def bind(self, shortcut: str) -> None:
		shortcut = normalize_shortcut(shortcut)
		if not shortcut:
			raise ValueError("shortcut must be a non-empty string")

		self.bind_calls.append(shortcut)

		if shortcut in self.reject:
			raise ShortcutBindError(f"Shortcut {shortcut!r} is already taken")
		if shortcut in self._bound:
			raise ShortcutBindError(f"Shortcut {shortcut!r} is already bound")

		self._bound.append(shortcut)

	def unbind(self, shortcut: str) -> None:
		shortcut = normalize_shortcut(shortcut)
		self.unbind_calls.append(shortcut)
		if shortcut in self._bound:
			self._bound.remove(shortcut)

	def is_bound(self, shortcut: str) -> bool:
		return normalize_shortcut(shortcut) in self._bound

	def press(self, shortcut: str) -> bool:
		"""
		Deliver a hotkey press. Returns False if the shortcut is not bound.
		"""
		shortcut = normalize_shortcut(shortcut)
		if shortcut not in self._bound:
			return False
		if self.on_activated is not None:
			self.on_activated(shortcut)
		return True

	def clear(self) -> None:
		for shortcut in list(self._bound):
			self.unbind(shortcut)
