"""Read saved ``org.freedesktop.DBus.Introspectable.Introspect`` documents.

BlueZ answers ``Introspect`` on a device object with an XML document listing the
interfaces the object implements and one ``<node name="..."/>`` per child
(``service0025``, ``service0030``, ...). These helpers turn such a dump into
object paths that :func:`gattpath.gatt.parser.parse` understands.
"""

from __future__ import annotations

from typing import Any, Dict, List
from xml.parsers.expat import ExpatError

import xmltodict

from gattpath.core.errors import IntrospectionError
from gattpath.core.log import print_and_log, LOG__DEBUG

__all__ = ["parse_introspection", "child_paths"]


def _children(element: Dict[str, Any], key: str) -> List[Any]:
    if key not in element:
        return []
    value = element[key]
    if isinstance(value, list):
        return value
    return [value]


def parse_introspection(introspect_xml: str) -> Dict[str, Any]:
    """Return ``{"Name": ..., "Interfaces": [...], "Nodes": [...]}`` for a document.

    ``Name`` is the root node's ``name`` attribute (usually absent), the other
    two list interface names and child node names in document order.
    """
    try:
        dict_data = xmltodict.parse(introspect_xml)
    except ExpatError as exc:
        raise IntrospectionError(f"invalid XML: {exc}") from exc

    if "node" not in dict_data:
        raise IntrospectionError("root element is not <node>")
    root = dict_data["node"]
    if root is None:
        root = {}
    if not isinstance(root, dict):
        raise IntrospectionError("root <node> carries text instead of elements")

    interfaces = []
    for iface in _children(root, "interface"):
        if not isinstance(iface, dict) or "@name" not in iface:
            raise IntrospectionError("<interface> without a name")
        interfaces.append(iface["@name"])

    nodes = []
    for node in _children(root, "node"):
        if not isinstance(node, dict) or "@name" not in node:
            raise IntrospectionError("child <node> without a name")
        nodes.append(node["@name"])

    introspect_map = {"Name": root.get("@name"), "Interfaces": interfaces, "Nodes": nodes}
    print_and_log(f"[*] Introspect Map:\t{introspect_map}", LOG__DEBUG)
    return introspect_map


def child_paths(introspect_xml: str, base_path: str) -> List[str]:
    """List the object paths of the children declared in *introspect_xml*.

    *base_path* is the path the document was obtained from; relative child
    names are appended to it.
    """
    base = base_path.rstrip("/")
    return [f"{base}/{name}" for name in parse_introspection(introspect_xml)["Nodes"]]
