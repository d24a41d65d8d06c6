# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#   pyezpie: radial ("pie") menu daemon core.
#
# Notes:
#   - Uses lazy exports to keep "import pyezpie" cheap (PEP 562).
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__version__ = "0.1.0"

__all__ = [
	"Daemon",
	"ErrorCode",
	"MenuItemNode",
	"MenuSession",
	"RequestDispatcher",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"Daemon": ("pyezpie.app.daemon", "Daemon"),
	"ErrorCode": ("pyezpie.core.errors", "ErrorCode"),
	"MenuItemNode": ("pyezpie.menu.node", "MenuItemNode"),
	"MenuSession": ("pyezpie.menu.session", "MenuSession"),
	"RequestDispatcher": ("pyezpie.app.dispatcher", "RequestDispatcher"),
}

def __getattr__(name: str) -> Any:
	try:
		mod_name, attr_name = _EXPORTS[name]
	except KeyError as ex:
		raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from ex

	import importlib
	mod = importlib.import_module(mod_name)
	return getattr(mod, attr_name)

def __dir__() -> list[str]:
	return sorted(set(list(globals().keys()) + list(__all__)))

if TYPE_CHECKING:
	from pyezpie.app.daemon import Daemon
	from pyezpie.app.dispatcher import RequestDispatcher
	from pyezpie.core.errors import ErrorCode
	from pyezpie.menu.node import MenuItemNode
	from pyezpie.menu.session import MenuSession
