# ---------------------------------------------------------------------------
# File: errors.py
# ---------------------------------------------------------------------------
# Description:
#	Request error taxonomy for pyezpie.
#
# Notes:
#	- ErrorCode values are part of the external interface. Never renumber.
#	- Every MenuError carries the code it maps to at the request boundary.
#	- Contract violations (PathError, SessionStateError) are NOT MenuErrors.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Paul G. LeDuc				Initial coding / release
# 10/08/2026	Paul G. LeDuc				Add PresenterError
# ---------------------------------------------------------------------------

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
	UNKNOWN_ERROR = -1
	ALREADY_ACTIVE = -2
	INVALID_JSON = -3
	PROPERTY_MISSING = -4
	INVALID_ANGLES = -5
	NO_SUCH_MENU = -6


_DESCRIPTIONS: dict[ErrorCode, str] = {
	ErrorCode.UNKNOWN_ERROR: "Something went wrong while opening the menu.",
	ErrorCode.ALREADY_ACTIVE: "Another menu is already opened.",
	ErrorCode.INVALID_JSON: "The menu description is not valid JSON.",
	ErrorCode.PROPERTY_MISSING: "The menu description is missing a required property.",
	ErrorCode.INVALID_ANGLES: "The fixed angles of the menu items are invalid.",
	ErrorCode.NO_SUCH_MENU: "There is no menu with this name.",
}


def describe_error(code: int) -> str:
	"""
	Human readable text for an error code (negative int).
	"""
	try:
		return _DESCRIPTIONS[ErrorCode(code)]
	except ValueError:
		return f"Unknown error code {code}."


class MenuError(Exception):
	"""
	Base class for recoverable request errors.
	"""
	code: ErrorCode = ErrorCode.UNKNOWN_ERROR


class NoSuchMenuError(MenuError):
	code = ErrorCode.NO_SUCH_MENU


class InvalidJSONError(MenuError):
	code = ErrorCode.INVALID_JSON


class PropertyMissingError(MenuError):
	code = ErrorCode.PROPERTY_MISSING


class MissingRootError(PropertyMissingError):
	"""
	The menu has no root items.
	"""


class InvalidAnglesError(MenuError):
	code = ErrorCode.INVALID_ANGLES


class AlreadyActiveError(MenuError):
	code = ErrorCode.ALREADY_ACTIVE


class PresenterError(MenuError):
	"""
	The presenter refused to show the menu (e.g. input grab failed).
	"""
	code = ErrorCode.UNKNOWN_ERROR


class ConfigError(ValueError):
	"""
	A menu configuration descriptor is malformed.
	"""
