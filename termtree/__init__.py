"""Public package surface for termtree.

Exports the tree-view widget, its items, and ``main`` for programmatic CLI
invocation.
"""

from __future__ import annotations

import logging

from .tree_model import TreeItem, TreeRow, flatten_tree, link_rows, reflow_viewport
from .tree_view import TreeView, render_tree_view

logging.getLogger(__name__).addHandler(logging.NullHandler())


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "TreeItem",
    "TreeRow",
    "TreeView",
    "flatten_tree",
    "link_rows",
    "main",
    "reflow_viewport",
    "render_tree_view",
]
