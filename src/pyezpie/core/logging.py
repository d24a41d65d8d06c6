# ---------------------------------------------------------------------------
# File: logging.py
# ---------------------------------------------------------------------------
# Description:
#	Core logging helpers for pyezpie (stdlib logging).
#
# Notes:
#	- Safe to call before anything else is wired (no daemon dependencies).
#	- Idempotent initialization (won't duplicate handlers).
#
#	Supported cfg keys (dotted key wins over the log_* alias):
#	- "logging.level"		/ "log_level"		(default: "INFO")
#	- "logging.console"		/ "log_console"		(default: True)
#	- "logging.file"		/ "log_file"		(default: None)
#	- "logging.file_mode"	/ "log_file_mode"	(default: "a")
#	- "logging.reset_root"	/ "log_reset_root"	(default: True)
#	- "logging.format"		/ "log_format"		(default: standard format)
#	- "logging.datefmt"		/ "log_datefmt"		(default: "%Y-%m-%d %H:%M:%S")
#	- "logging.notify_level"	/ "log_notify_level"	(default: None; read by the daemon)
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Paul G. LeDuc				Initial coding / release
# 10/08/2026	Paul G. LeDuc				Collapse key/alias lookup into _setting()
# 10/10/2026	Paul G. LeDuc				Add get_level_setting()
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any
import logging
import os


APP_LOGGER_NAME = "pyezpie"

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


_INITIALIZED: bool = False
_CONFIG_SIGNATURE: tuple[Any, ...] | None = None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_logger(name: str) -> logging.Logger:
	return logging.getLogger(name)


def get_app_logger(component: str | None = None) -> logging.Logger:
	"""
	Return a pyezpie-scoped logger.

	Examples:
		get_app_logger()				-> pyezpie
		get_app_logger("session")		-> pyezpie.session
		get_app_logger("shortcuts")		-> pyezpie.shortcuts
	"""
	if component:
		return logging.getLogger(f"{APP_LOGGER_NAME}.{component}")
	return logging.getLogger(APP_LOGGER_NAME)


def get_level_setting(cfg: Any | None, name: str, default: int | None = None) -> int | None:
	"""
	A level-valued option ("logging.<name>" / "log_<name>"), or default when unset.
	"""
	value = _setting(cfg, name, None)
	return default if value is None else _coerce_level(value)


def init_logging(cfg: Any | None = None) -> None:
	"""
	Initialize stdlib logging for pyezpie.

	Reconfiguration occurs only if the resulting settings differ from the
	previous call.

	Args:
		cfg:
			Anything with cfg.get(key, default) (AppConfig, dict) or None.
	"""
	global _INITIALIZED, _CONFIG_SIGNATURE

	level = _coerce_level(_setting(cfg, "level", "INFO"))
	console_enabled = bool(_setting(cfg, "console", True))
	log_file = _setting(cfg, "file", None)
	log_file = str(log_file) if log_file else None
	file_mode = _coerce_file_mode(_setting(cfg, "file_mode", "a"))
	reset_root = bool(_setting(cfg, "reset_root", True))
	fmt = str(_setting(cfg, "format", DEFAULT_FORMAT))
	datefmt = str(_setting(cfg, "datefmt", DEFAULT_DATEFMT))

	signature: tuple[Any, ...] = (
		level, console_enabled, log_file, file_mode, reset_root, fmt, datefmt,
	)
	if _INITIALIZED and _CONFIG_SIGNATURE == signature:
		return

	root = logging.getLogger()
	root.setLevel(level)

	if reset_root:
		for handler in list(root.handlers):
			root.removeHandler(handler)

	formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

	if console_enabled:
		ch = logging.StreamHandler()
		ch.setLevel(level)
		ch.setFormatter(formatter)
		root.addHandler(ch)

	if log_file:
		parent = os.path.dirname(os.path.abspath(log_file))
		os.makedirs(parent, exist_ok=True)
		fh = logging.FileHandler(log_file, mode=file_mode, encoding="utf-8")
		fh.setLevel(level)
		fh.setFormatter(formatter)
		root.addHandler(fh)

	_INITIALIZED = True
	_CONFIG_SIGNATURE = signature


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _setting(cfg: Any | None, name: str, default: Any) -> Any:
	"""
	Look up "logging.<name>", then "log_<name>", then fall back to default.
	"""
	if cfg is None:
		return default

	getter = getattr(cfg, "get", None)
	if not callable(getter):
		return default

	value = getter(f"logging.{name}", None)
	if value is None:
		value = getter(f"log_{name}", None)
	return default if value is None else value


def _coerce_level(level: Any) -> int:
	if isinstance(level, int):
		return level

	if isinstance(level, str):
		val = level.strip().upper()
		if val.isdigit():
			return int(val)
		candidate = getattr(logging, val, None)
		if isinstance(candidate, int):
			return candidate

	return logging.INFO


def _coerce_file_mode(mode: Any) -> str:
	"""
	Only "a" or "w" are allowed.
	"""
	if isinstance(mode, str) and mode.strip().lower() in ("a", "w"):
		return mode.strip().lower()
	return "a"


# ---------------------------------------------------------------------------
# Test helper
# ---------------------------------------------------------------------------

def _reset_logging_for_tests() -> None:
	global _INITIALIZED, _CONFIG_SIGNATURE
	_INITIALIZED = False
	_CONFIG_SIGNATURE = None
