"""Tree nodes, flattening, navigation links, and viewport reflow.

Defines ``TreeItem`` and the pure helpers ``TreeView`` composes on reflow.
"""

from __future__ import annotations

from .flatten import flatten_tree, link_rows
from .item import TreeItem
from .reflow import ReflowResult, find_row_index, reflow_viewport
from .types import TreeRow

__all__ = [
    "TreeItem",
    "TreeRow",
    "ReflowResult",
    "flatten_tree",
    "link_rows",
    "find_row_index",
    "reflow_viewport",
]
