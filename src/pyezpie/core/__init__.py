# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	Core package for pyezpie (logging, telemetry, errors, config).
#
# Notes:
#	Keep this lightweight. Re-export stable public helpers only; config is
#	imported from pyezpie.core.config directly (it depends on pyezpie.menu).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Paul G. LeDuc				Initial coding / release
# 10/08/2026	Paul G. LeDuc				Export error taxonomy
# ---------------------------------------------------------------------------

from __future__ import annotations

from .errors import ErrorCode, MenuError, describe_error
from .logging import init_logging, get_logger, get_app_logger
from .telemetry import init_telemetry, get_telemetry

__all__ = [
	"ErrorCode",
	"MenuError",
	"describe_error",
	"get_logger",
	"get_app_logger",
	"init_logging",
	"init_telemetry",
	"get_telemetry",
]
