"""Tree projection into display rows and keyboard navigation links."""

from __future__ import annotations

from .item import TreeItem
from .types import TreeRow


def flatten_tree(root: TreeItem | None, root_visible: bool = True) -> list[TreeRow]:
    """Return the pre-order rows of ``root`` restricted to expanded subtrees.

    With ``root_visible=False`` the root row is omitted and its children are
    laid out as top-level rows, whatever the root's own expansion state.
    """
    if root is None:
        return []
    if root_visible:
        return root.expand_tree("", True, 0)
    rows: list[TreeRow] = []
    count = len(root.items)
    for idx, item in enumerate(root.items):
        rows.extend(item.expand_tree("", idx == count - 1, 0))
    return rows


def link_rows(rows: list[TreeRow]) -> list[TreeRow]:
    """Chain consecutive rows through ``previous``/``next`` indices.

    Every link is overwritten, so nothing from an earlier flatten survives.
    """
    for idx, row in enumerate(rows):
        row.previous = idx - 1 if idx > 0 else None
        row.next = idx + 1 if idx + 1 < len(rows) else None
    return rows
