"""Typed handles for GATT attributes and the ordering used to arrange them.

A :class:`Handle` is the compact ``(kind, parent, handle)`` triple derived from
a BlueZ object path such as
``/org/bluez/hci0/dev_01_02_03_04_05_06/service0025/char0026``.

Ordering is parent-aware: when ``a.handle == b.parent`` the enclosing attribute
``a`` sorts *after* ``b``, whatever the numeric values. Only that direction is
special-cased; when ``b`` encloses ``a`` the numeric comparison decides.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, List, Optional

from gattpath.bt_ref.constants import (
    HANDLE_FIELD_WIDTH,
    HANDLE_MAX,
    PATH_MARKER__CHARACTERISTIC,
    PATH_MARKER__DESCRIPTOR,
    PATH_MARKER__SERVICE,
)
from gattpath.core.errors import InvalidArgumentError

__all__ = ["AttributeKind", "Handle", "Ordering", "compare", "sort_key", "sort_handles"]


class AttributeKind(Enum):
    """The three GATT attribute kinds BlueZ exports as object paths."""

    SERVICE = "service"
    CHARACTERISTIC = "characteristic"
    DESCRIPTOR = "descriptor"

    @property
    def marker(self) -> str:
        """Path segment prefix naming this kind."""
        if self is AttributeKind.SERVICE:
            return PATH_MARKER__SERVICE
        if self is AttributeKind.CHARACTERISTIC:
            return PATH_MARKER__CHARACTERISTIC
        if self is AttributeKind.DESCRIPTOR:
            return PATH_MARKER__DESCRIPTOR
        raise AssertionError(self)

    @property
    def parent_kind(self) -> Optional["AttributeKind"]:
        """Kind of the enclosing attribute, ``None`` for services."""
        if self is AttributeKind.SERVICE:
            return None
        if self is AttributeKind.CHARACTERISTIC:
            return AttributeKind.SERVICE
        if self is AttributeKind.DESCRIPTOR:
            return AttributeKind.CHARACTERISTIC
        raise AssertionError(self)


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True)
class Handle:
    """Immutable ``(kind, parent, handle)`` value.

    ``parent`` is the handle of the enclosing attribute and is ``0`` for
    services; a service can therefore not be told apart from one whose parent
    handle is zero.
    """

    kind: AttributeKind
    parent: int
    handle: int

    def __post_init__(self):
        if not isinstance(self.kind, AttributeKind):
            raise InvalidArgumentError("kind", f"expected AttributeKind, got {self.kind!r}")
        for name in ("parent", "handle"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidArgumentError(name, f"expected int, got {type(value).__name__}")
            if not 0 <= value <= HANDLE_MAX:
                raise InvalidArgumentError(name, f"{value} outside 0x0000-0x{HANDLE_MAX:04x}")
        if self.kind is AttributeKind.SERVICE and self.parent != 0:
            raise InvalidArgumentError("parent", "services carry parent 0")

    @classmethod
    def from_path(cls, path: str) -> "Handle":
        """Parse *path*; see :func:`gattpath.gatt.parser.parse`."""
        from gattpath.gatt.parser import parse

        return parse(path)

    def to_segment(self) -> str:
        """Return the object path segment naming this attribute, e.g. ``char0026``."""
        return f"{self.kind.marker}{self.handle:0{HANDLE_FIELD_WIDTH}x}"

    def is_parent_of(self, other: "Handle") -> bool:
        """True when *other* is recorded as directly enclosed by this handle."""
        return other.kind.parent_kind is self.kind and other.parent == self.handle

    # Rich comparisons go through compare(); __eq__ stays structural
    def __lt__(self, other):
        if not isinstance(other, Handle):
            return NotImplemented
        return compare(self, other) is Ordering.LESS

    def __le__(self, other):
        if not isinstance(other, Handle):
            return NotImplemented
        return compare(self, other) is not Ordering.GREATER

    def __gt__(self, other):
        if not isinstance(other, Handle):
            return NotImplemented
        return compare(self, other) is Ordering.GREATER

    def __ge__(self, other):
        if not isinstance(other, Handle):
            return NotImplemented
        return compare(self, other) is not Ordering.LESS

    def __str__(self) -> str:
        return f"{self.kind.value} 0x{self.handle:04x} (parent 0x{self.parent:04x})"


def compare(a: Handle, b: Handle) -> Ordering:
    """Order *a* against *b*.

    1. ``a.handle == b.parent``: *a* encloses *b*, so ``GREATER``.
    2. Otherwise compare ``a.handle`` with ``b.handle`` numerically.
    """
    if a.handle == b.parent:
        return Ordering.GREATER
    if a.handle < b.handle:
        return Ordering.LESS
    if a.handle == b.handle:
        return Ordering.EQUAL
    return Ordering.GREATER


sort_key = functools.cmp_to_key(compare)


def sort_handles(handles: Iterable[Handle]) -> List[Handle]:
    """Return *handles* as a new list arranged by :func:`compare`."""
    return sorted(handles, key=sort_key)
