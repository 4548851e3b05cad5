"""
Core package initialisation for gattpath.

Deliberately kept lightweight: only the error classes are imported eagerly so
that :mod:`gattpath.core.config` and :mod:`gattpath.core.log` can import them
without cycles.
"""

from gattpath.core.errors import (
    GattPathError,
    HandleParseError,
    NoMarkerFoundError,
    MalformedHexFieldError,
)

__all__ = [
    "GattPathError",
    "HandleParseError",
    "NoMarkerFoundError",
    "MalformedHexFieldError",
]
