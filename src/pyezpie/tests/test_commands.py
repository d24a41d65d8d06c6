# ---------------------------------------------------------------------------
# File: test_commands.py
# ---------------------------------------------------------------------------
# Description:
#   Unit tests for the pyezpie command registry.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Paul G. LeDuc				Initial tests
# 10/06/2026	Paul G. LeDuc				Handlers receive CommandContext
# ---------------------------------------------------------------------------

import pytest

from pyezpie.app.commands import Command, CommandContext, CommandRegistry


def _ctx(**extra) -> CommandContext:
	return CommandContext(app=None, state={}, services={}, extra=dict(extra))


def test_register_and_get_command():
	registry = CommandRegistry()

	cmd = Command(id="open.terminal", label="Terminal", handler=lambda ctx: "ok")

	registry.register(cmd)

	assert registry.has("open.terminal") is True
	assert registry.get("open.terminal") is cmd
	assert registry.ids() == ["open.terminal"]


def test_register_duplicate_id_raises():
	registry = CommandRegistry()

	registry.register(Command(id="x", handler=lambda ctx: 1))

	with pytest.raises(ValueError):
		registry.register(Command(id="x", handler=lambda ctx: 2))


def test_register_empty_id_raises():
	registry = CommandRegistry()

	with pytest.raises(ValueError):
		registry.register(Command(id="", handler=lambda ctx: 1))


def test_unregister_removes_command():
	registry = CommandRegistry()
	registry.register(Command(id="x", handler=lambda ctx: 1))

	registry.unregister("x")
	registry.unregister("x")

	assert registry.has("x") is False
	assert registry.get("x") is None


def test_execute_passes_context_to_handler():
	registry = CommandRegistry()
	seen: list[CommandContext] = []

	def handler(ctx: CommandContext) -> int:
		seen.append(ctx)
		return 123

	registry.register(Command(id="do", handler=handler))

	ctx = _ctx(item="Terminal")
	result = registry.execute("do", ctx)

	assert result == 123
	assert seen == [ctx]
	assert seen[0].extra["item"] == "Terminal"


def test_execute_unknown_command_raises_key_error():
	registry = CommandRegistry()

	with pytest.raises(KeyError):
		registry.execute("missing", _ctx())


def test_execute_disabled_command_returns_none_and_does_not_call_handler():
	registry = CommandRegistry()
	called = False

	def handler(ctx):
		nonlocal called
		called = True
		return "should-not-run"

	registry.register(Command(id="disabled", handler=handler, enabled=False))

	assert registry.execute("disabled", _ctx()) is None
	assert called is False


def test_execute_enabled_fn_controls_enablement():
	registry = CommandRegistry()
	allow = False

	registry.register(Command(id="dynamic", handler=lambda ctx: "ran", enabled_fn=lambda: allow))

	assert registry.execute("dynamic", _ctx()) is None

	allow = True
	assert registry.execute("dynamic", _ctx()) == "ran"
