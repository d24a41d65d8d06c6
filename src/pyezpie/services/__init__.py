# ---------------------------------------------------------------------------
# File: __init__.py
# Description:
#	Public service exports for pyezpie.
#
#	Services are capabilities shared by the daemon, the key router and
#	command handlers (via CommandContext.services).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/07/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from .notifications import Notification, NotificationLogHandler, NotificationService

__all__ = [
	"Notification",
	"NotificationLogHandler",
	"NotificationService",
]
