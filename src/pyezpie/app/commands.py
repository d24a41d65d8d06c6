# ---------------------------------------------------------------------------
# File: commands.py
# ---------------------------------------------------------------------------
# Description:
#   Command definitions + registry for pyezpie.
#
# Notes:
#   Commands are the actions behind "Command" items of configured menus.
#   Selecting such an item executes the command through the registry.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Paul G. LeDuc				Initial coding / release
# 10/06/2026	Paul G. LeDuc				Handlers receive CommandContext
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from pyezpie.core.logging import get_app_logger


log = get_app_logger("commands")


@dataclass(frozen=True, slots=True)
class CommandContext:
	"""
	What a command handler gets to work with.

	- app:		The owning Daemon (or None in tests).
	- state:	Shared mutable state.
	- services:	Service objects by name (e.g. "notifications").
	- extra:	Invocation-specific data (e.g. the selected menu item).
	"""
	app: Any = None
	state: dict[str, Any] = field(default_factory=dict)
	services: dict[str, Any] = field(default_factory=dict)
	extra: dict[str, Any] = field(default_factory=dict)


CommandHandler = Callable[[CommandContext], Any]
EnabledCheck = Callable[[], bool]


@dataclass(frozen=True, slots=True)
class Command:
	"""
	Command

	- id:			Unique identifier (required).
	- handler:		Callable executed with a CommandContext.
	- label:		Optional friendly label.
	- description:	Optional help text.
	- enabled:		Static enable/disable.
	- enabled_fn:	Optional callable for dynamic enablement.
	"""
	id: str
	handler: CommandHandler

	label: Optional[str] = None
	description: Optional[str] = None

	enabled: bool = True
	enabled_fn: Optional[EnabledCheck] = None

	def is_enabled(self) -> bool:
		if not self.enabled:
			return False
		if self.enabled_fn is None:
			return True
		return bool(self.enabled_fn())


class CommandRegistry:
	"""
	Stores commands by id and executes them.
	"""

	def __init__(self) -> None:
		self._commands: dict[str, Command] = {}

	def register(self, command: Command) -> None:
		if not command.id:
			raise ValueError("Command id must be a non-empty string")

		if command.id in self._commands:
			raise ValueError(f"Duplicate command id: {command.id!r}")

		self._commands[command.id] = command

	def unregister(self, command_id: str) -> None:
		self._commands.pop(command_id, None)

	def has(self, command_id: str) -> bool:
		return command_id in self._commands

	def get(self, command_id: str) -> Optional[Command]:
		return self._commands.get(command_id)

	def ids(self) -> list[str]:
		return list(self._commands.keys())

	def execute(self, command_id: str, ctx: CommandContext) -> Any:
		"""
		Run a command.

		Raises:
			KeyError for unknown ids. Disabled commands are skipped (returns None).
		"""
		command = self._commands.get(command_id)
		if command is None:
			raise KeyError(f"Unknown command id: {command_id!r}")

		if not command.is_enabled():
			log.debug("Skipping disabled command %r", command_id)
			return None

		log.debug("Executing command %r", command_id)
		return command.handler(ctx)
