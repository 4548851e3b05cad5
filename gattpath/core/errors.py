"""Core error classes for gattpath."""

from __future__ import annotations

from typing import Optional

from gattpath.bt_ref.constants import (
    RESULT_ERR,
    RESULT_ERR_BAD_ARGS,
    RESULT_ERR_NOT_FOUND,
    RESULT_ERR_UNKNOWN_OBJECT,
)


class GattPathError(Exception):
    """Base exception for the package.

    The `.code` attribute carries one of the ``RESULT_*`` values from
    :mod:`gattpath.bt_ref.constants`; the CLI uses it as its exit status.
    """

    def __init__(self, message: str, code: int = RESULT_ERR):
        super().__init__(message)
        self.code = code


class InvalidArgumentError(GattPathError):
    """Raised when invalid arguments are provided."""

    def __init__(self, argument: str, reason: Optional[str] = None):
        message = f"Invalid argument: {argument}"
        if reason:
            message += f" ({reason})"
        super().__init__(message, RESULT_ERR_BAD_ARGS)
        self.argument = argument
        self.reason = reason


class HandleParseError(GattPathError):
    """Raised when an object path cannot be turned into a handle."""

    def __init__(self, path: str, reason: str, code: int = RESULT_ERR_BAD_ARGS):
        super().__init__(f"Cannot parse {path!r}: {reason}", code)
        self.path = path
        self.reason = reason


class NoMarkerFoundError(HandleParseError):
    """Raised when a path has no service/char/descriptor segment."""

    def __init__(self, path: str):
        super().__init__(path, "no GATT attribute segment", RESULT_ERR_NOT_FOUND)


class MalformedHexFieldError(HandleParseError):
    """Raised when a handle field is not exactly four hex digits, or is missing."""

    def __init__(self, path: str, field: str, reason: str):
        super().__init__(path, f"{field}: {reason}", RESULT_ERR_BAD_ARGS)
        self.field = field


class IntrospectionError(GattPathError):
    """Raised when an Introspect XML document cannot be read."""

    def __init__(self, reason: str):
        super().__init__(f"Introspection data unusable: {reason}", RESULT_ERR_UNKNOWN_OBJECT)
        self.reason = reason


__all__ = [
    "GattPathError",
    "InvalidArgumentError",
    "HandleParseError",
    "NoMarkerFoundError",
    "MalformedHexFieldError",
    "IntrospectionError",
]
