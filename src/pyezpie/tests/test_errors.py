# ---------------------------------------------------------------------------
# File: test_errors.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for the request error taxonomy.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Paul G. LeDuc				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import pytest

from pyezpie.core.errors import (
	AlreadyActiveError,
	ConfigError,
	ErrorCode,
	InvalidAnglesError,
	InvalidJSONError,
	MenuError,
	MissingRootError,
	NoSuchMenuError,
	PresenterError,
	PropertyMissingError,
	describe_error,
)


def test_error_code_values_are_stable():
	assert {code.name: int(code) for code in ErrorCode} == {
		"UNKNOWN_ERROR": -1,
		"ALREADY_ACTIVE": -2,
		"INVALID_JSON": -3,
		"PROPERTY_MISSING": -4,
		"INVALID_ANGLES": -5,
		"NO_SUCH_MENU": -6,
	}


@pytest.mark.parametrize("exc, code", [
	(MenuError, ErrorCode.UNKNOWN_ERROR),
	(NoSuchMenuError, ErrorCode.NO_SUCH_MENU),
	(InvalidJSONError, ErrorCode.INVALID_JSON),
	(PropertyMissingError, ErrorCode.PROPERTY_MISSING),
	(MissingRootError, ErrorCode.PROPERTY_MISSING),
	(InvalidAnglesError, ErrorCode.INVALID_ANGLES),
	(AlreadyActiveError, ErrorCode.ALREADY_ACTIVE),
	(PresenterError, ErrorCode.UNKNOWN_ERROR),
])
def test_exception_codes(exc, code):
	assert exc("x").code == code


def test_describe_error_known_and_unknown():
	assert describe_error(-2) == "Another menu is already opened."
	assert describe_error(ErrorCode.NO_SUCH_MENU) == "There is no menu with this name."
	assert describe_error(-42) == "Unknown error code -42."


def test_config_error_is_not_a_menu_error():
	assert issubclass(ConfigError, ValueError)
	assert not issubclass(ConfigError, MenuError)
