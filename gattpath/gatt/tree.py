"""Assemble a Service → Characteristic → Descriptor tree from object paths.

BlueZ reports GATT objects in no particular order (``InterfacesAdded`` signals,
``GetManagedObjects`` dictionaries). :func:`build_tree` takes such a stream of
paths, drops everything that is not a GATT attribute and hangs each attribute
under the object whose path encloses it. Members at each level are arranged with
:func:`gattpath.gatt.handle.sort_handles`.

The result is a plain snapshot; nothing here talks to the daemon.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from gattpath.core.log import get_logger
from gattpath.gatt.handle import AttributeKind, Handle, sort_key
from gattpath.gatt.parser import split_segments, try_parse

__all__ = [
    "DescriptorNode",
    "CharacteristicNode",
    "ServiceNode",
    "GattTree",
    "build_tree",
]

logger = get_logger(__name__)


@dataclass
class DescriptorNode:
    path: str
    handle: Handle

    def to_dict(self) -> Dict[str, Any]:
        return {"Handle": self.handle.handle, "Characteristic": self.handle.parent}


@dataclass
class CharacteristicNode:
    path: str
    handle: Handle
    descriptors: List[DescriptorNode] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Handle": self.handle.handle,
            "Service": self.handle.parent,
            "Descriptors": {d.path: d.to_dict() for d in self.descriptors},
        }


@dataclass
class ServiceNode:
    path: str
    handle: Handle
    characteristics: List[CharacteristicNode] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Handle": self.handle.handle,
            "Characteristics": {c.path: c.to_dict() for c in self.characteristics},
        }


@dataclass
class GattTree:
    """Snapshot of one or more devices' GATT attributes.

    ``orphans`` holds attribute paths whose enclosing object never appeared in
    the input; ``skipped`` holds paths that are not GATT attributes at all.
    """

    services: List[ServiceNode] = field(default_factory=list)
    orphans: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)

    def handles(self) -> List[Handle]:
        """Every attribute handle in the tree, in tree order."""
        result: List[Handle] = []
        for service in self.services:
            result.append(service.handle)
            for char in service.characteristics:
                result.append(char.handle)
                result.extend(d.handle for d in char.descriptors)
        return result

    def find(self, path: str) -> Optional[Any]:
        """Return the node stored under *path*, or ``None``."""
        for service in self.services:
            if service.path == path:
                return service
            for char in service.characteristics:
                if char.path == path:
                    return char
                for desc in char.descriptors:
                    if desc.path == path:
                        return desc
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Services": {s.path: s.to_dict() for s in self.services},
            "Orphans": list(self.orphans),
            "Skipped": list(self.skipped),
        }


def _normalise(path: str) -> str:
    return "/" + "/".join(split_segments(path))


def _enclosing(path: str) -> str:
    return path.rsplit("/", 1)[0]


def build_tree(paths: Iterable[str], device_path: Optional[str] = None) -> GattTree:
    """Build a :class:`GattTree` from an unordered iterable of object paths.

    Parameters
    ----------
    paths : iterable of str
        Object paths, e.g. the keys of a ``GetManagedObjects`` reply.
    device_path : str, optional
        Only keep attributes below this device path.
    """
    tree = GattTree()
    prefix = _normalise(device_path) + "/" if device_path else None

    parsed: Dict[AttributeKind, Dict[str, Handle]] = {kind: {} for kind in AttributeKind}
    for raw in paths:
        path = _normalise(str(raw))
        if prefix is not None and not path.startswith(prefix):
            continue
        handle = try_parse(path)
        # Only keep paths whose last segment is the attribute itself
        if handle is None or not split_segments(path)[-1].startswith(handle.kind.marker):
            tree.skipped.append(path)
            continue
        if path in parsed[handle.kind]:
            logger.debug(f"Duplicate attribute path {path}")
            continue
        parsed[handle.kind][path] = handle

    services: Dict[str, ServiceNode] = {
        path: ServiceNode(path, handle) for path, handle in parsed[AttributeKind.SERVICE].items()
    }
    chars: Dict[str, CharacteristicNode] = {}
    for path, handle in parsed[AttributeKind.CHARACTERISTIC].items():
        owner = services.get(_enclosing(path))
        if owner is None:
            tree.orphans.append(path)
            continue
        node = CharacteristicNode(path, handle)
        owner.characteristics.append(node)
        chars[path] = node

    for path, handle in parsed[AttributeKind.DESCRIPTOR].items():
        owner = chars.get(_enclosing(path))
        if owner is None:
            tree.orphans.append(path)
            continue
        owner.descriptors.append(DescriptorNode(path, handle))

    for service in services.values():
        for char in service.characteristics:
            char.descriptors.sort(key=lambda node: sort_key(node.handle))
        service.characteristics.sort(key=lambda node: sort_key(node.handle))
    tree.services = sorted(services.values(), key=lambda node: sort_key(node.handle))

    logger.debug(
        f"Built GATT tree: {len(tree.services)} services, "
        f"{len(chars)} characteristics, {len(tree.orphans)} orphans"
    )
    return tree
