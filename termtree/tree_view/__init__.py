"""Tree-view widget and its renderer."""

from .rendering import format_tree_row, render_tree_view
from .view import TreeView

__all__ = [
    "TreeView",
    "format_tree_row",
    "render_tree_view",
]
