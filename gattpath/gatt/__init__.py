"""
GATT object path handling for gattpath.
"""

from . import handle
from . import parser
from . import tree
from . import introspect

__all__ = ["handle", "parser", "tree", "introspect"]
