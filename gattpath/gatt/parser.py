"""Parse BlueZ GATT object paths into :class:`~gattpath.gatt.handle.Handle` values.

BlueZ names GATT objects by nesting them under the device path::

    /org/bluez/hci0/dev_01_02_03_04_05_06/service0025/char0026/descriptor0027

The path is read segment by segment. A segment that begins with one of the
markers ``descriptor``, ``char`` or ``service`` must continue with an optional
run of letters and end in exactly four hex digits (``characteristic0026`` is a
``char`` segment). The most specific marker present wins; the enclosing
attribute's handle is taken from the segment right before it.
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from gattpath.bt_ref.constants import HANDLE_FIELD_WIDTH, PATH_MARKERS
from gattpath.core.errors import (
    HandleParseError,
    InvalidArgumentError,
    MalformedHexFieldError,
    NoMarkerFoundError,
)
from gattpath.core.log import get_logger, print_and_log, LOG__PARSE
from gattpath.gatt.handle import AttributeKind, Handle

__all__ = ["parse", "try_parse", "is_attribute_path", "split_segments"]

logger = get_logger(__name__)

# Most specific first; parse() stops at the first kind found in the path
_PRIORITY = (AttributeKind.DESCRIPTOR, AttributeKind.CHARACTERISTIC, AttributeKind.SERVICE)

_SEGMENT_RX = re.compile(
    r"^(?P<marker>%s)(?P<label>[A-Za-z]*)(?P<field>[0-9A-Fa-f]{%d})$"
    % ("|".join(PATH_MARKERS), HANDLE_FIELD_WIDTH)
)


def split_segments(path: str) -> List[str]:
    """Return the non-empty ``/``-delimited segments of *path*."""
    return [segment for segment in path.split("/") if segment]


def _carries(segment: str, kind: AttributeKind) -> bool:
    return segment.startswith(kind.marker)


def _decode_field(path: str, segment: str, field_name: str) -> int:
    match = _SEGMENT_RX.match(segment)
    if match is None:
        raise MalformedHexFieldError(
            path,
            field_name,
            f"segment {segment!r} does not end in {HANDLE_FIELD_WIDTH} hex digits",
        )
    return int(match.group("field"), 16)


def _locate(segments: List[str]) -> Optional[Tuple[AttributeKind, int]]:
    for kind in _PRIORITY:
        for index in range(len(segments) - 1, -1, -1):
            if _carries(segments[index], kind):
                return kind, index
    return None


def parse(path: str) -> Handle:
    """Return the :class:`Handle` named by *path*.

    Raises
    ------
    NoMarkerFoundError
        No segment of *path* names a service, characteristic or descriptor.
    MalformedHexFieldError
        The attribute's handle field, or its parent's, is not four hex digits,
        or the enclosing segment is missing.
    InvalidArgumentError
        *path* is not a string.
    """
    if not isinstance(path, str):
        raise InvalidArgumentError("path", f"expected str, got {type(path).__name__}")

    segments = split_segments(path)
    located = _locate(segments)
    if located is None:
        raise NoMarkerFoundError(path)
    kind, index = located

    handle = _decode_field(path, segments[index], "handle")

    parent_kind = kind.parent_kind
    if parent_kind is None:
        parent = 0
    else:
        if index == 0 or not _carries(segments[index - 1], parent_kind):
            raise MalformedHexFieldError(
                path,
                "parent",
                f"{kind.value} segment is not preceded by a {parent_kind.marker} segment",
            )
        parent = _decode_field(path, segments[index - 1], "parent")

    return Handle(kind=kind, parent=parent, handle=handle)


def try_parse(path: str) -> Optional[Handle]:
    """Like :func:`parse`, but return ``None`` for paths that are not attributes.

    Meant for callers walking a wider namespace (adapters, devices, media
    objects) where non-GATT paths are expected and can be skipped.
    """
    try:
        return parse(path)
    except HandleParseError as exc:
        logger.debug(f"Skipping path: {exc}")
        print_and_log(f"[-] {exc}", LOG__PARSE)
        return None


def is_attribute_path(path: str) -> bool:
    """True when *path* parses to a handle."""
    return try_parse(path) is not None
