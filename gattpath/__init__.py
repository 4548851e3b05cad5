"""
gattpath - typed, sortable handles for BlueZ GATT object paths
"""

__version__ = "0.3.0"

# ---------------------------------------------------------------------------
# Initialise logging on *package import* so every code path (even when the
# CLI is not used) writes to the per-user log directory.
# ---------------------------------------------------------------------------
import importlib as _importlib

_importlib.import_module("gattpath.core.log")  # noqa: F401 – side-effect import

from gattpath.gatt.handle import AttributeKind, Handle, Ordering, compare, sort_handles
from gattpath.gatt.parser import parse, try_parse

__all__ = [
    "AttributeKind",
    "Handle",
    "Ordering",
    "compare",
    "sort_handles",
    "parse",
    "try_parse",
]
