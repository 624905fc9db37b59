"""Tree nodes with expand/collapse and selection state."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..ansi import text_display_width
from ..events import KEY_LEFT, KEY_RIGHT, KEY_SPACE, KeypressEvent, MouseEvent
from ..widget import Widget
from .types import TreeRow

if TYPE_CHECKING:
    from ..tree_view.view import TreeView

BRANCH_MIDDLE = "├─"
BRANCH_LAST = "└─"
CONTINUE_PREFIX = "│ "
BLANK_PREFIX = "  "
MARKER_EXPANDED = "▾ "
MARKER_COLLAPSED = "▸ "
MARKER_LEAF = "  "


class TreeItem(Widget):
    """A labelled node owning an ordered list of child items.

    An item is also the widget that draws its row: the owning ``TreeView``
    adopts visible items as children during reflow and sets their ``y``,
    ``width``, ``enabled`` and ``invisible`` fields.
    """

    def __init__(self, label: str, expanded: bool = False) -> None:
        super().__init__(None, 0, 0, 0, 1)
        self.label = label
        self.prefix = ""
        self.depth = 0
        self.last = True
        self.expanded = expanded
        self.expandable = False
        self.selected = False
        self.items: list[TreeItem] = []
        self.parent_item: TreeItem | None = None
        self.view: TreeView | None = None
        self.enabled = False
        self.invisible = True

    def __repr__(self) -> str:
        return f"TreeItem({self.label!r})"

    def add_item(self, label: str, expanded: bool = False) -> TreeItem:
        """Create a child item, append it, and return it."""
        return self.attach(TreeItem(label, expanded=expanded))

    def attach(self, item: TreeItem) -> TreeItem:
        """Append an existing detached item as the last child.

        Raises ``ValueError`` when ``item`` already has a parent or is this
        item or one of its ancestors.
        """
        if item.parent_item is not None:
            raise ValueError(f"{item!r} is already attached to {item.parent_item!r}")
        node: TreeItem | None = self
        while node is not None:
            if node is item:
                raise ValueError(f"attaching {item!r} under {self!r} would create a cycle")
            node = node.parent_item
        item.parent_item = self
        self.items.append(item)
        self.expandable = True
        return item

    def remove_item(self, item: TreeItem) -> None:
        self.items.remove(item)
        item.parent_item = None

    def set_expanded(self, expanded: bool) -> None:
        """Change expansion state, firing ``on_expand``/``on_collapse`` hooks."""
        if not self.expandable or expanded == self.expanded:
            return
        self.expanded = expanded
        if expanded:
            self.on_expand()
        else:
            self.on_collapse()

    def toggle(self) -> None:
        self.set_expanded(not self.expanded)

    def on_expand(self) -> None:
        pass

    def on_collapse(self) -> None:
        pass

    def expand_tree(self, prefix: str = "", last: bool = True, depth: int = 0) -> list[TreeRow]:
        """Return this item and its expanded descendants in pre-order.

        Children of a collapsed item produce no rows at all. Each item's
        ``prefix`` is recomputed from its ancestors' sibling positions.
        """
        rows: list[TreeRow] = []
        stack: list[tuple[TreeItem, str, bool, int]] = [(self, prefix, last, depth)]
        while stack:
            item, item_prefix, item_last, item_depth = stack.pop()
            item.prefix = item_prefix
            item.depth = item_depth
            item.last = item_last
            rows.append(TreeRow(item, item_prefix, item_depth, item_last))
            if not item.expanded or not item.items:
                continue
            child_prefix = item_prefix
            if item_depth > 0:
                child_prefix += BLANK_PREFIX if item_last else CONTINUE_PREFIX
            count = len(item.items)
            for idx in range(count - 1, -1, -1):
                stack.append((item.items[idx], child_prefix, idx == count - 1, item_depth + 1))
        return rows

    def branch_glyph(self) -> str:
        if self.depth == 0:
            return ""
        return BRANCH_LAST if self.last else BRANCH_MIDDLE

    def marker_glyph(self) -> str:
        if not self.expandable:
            return MARKER_LEAF
        return MARKER_EXPANDED if self.expanded else MARKER_COLLAPSED

    def row_text(self) -> str:
        return f"{self.prefix}{self.branch_glyph()}{self.marker_glyph()}{self.label}"

    def line_width(self) -> int:
        """Columns reserved for this row: label, prefix, and four glyph columns."""
        return text_display_width(self.label) + text_display_width(self.prefix) + 4

    def marker_columns(self) -> tuple[int, int]:
        """Return the ``[start, end)`` text columns of the expand marker."""
        start = text_display_width(self.prefix) + len(self.branch_glyph())
        return start, start + len(MARKER_EXPANDED)

    def on_keypress(self, event: KeypressEvent) -> None:
        key = event.key
        if key == KEY_LEFT or key == "-":
            self.set_expanded(False)
        elif key == KEY_RIGHT or key == "+":
            self.set_expanded(True)
        elif key == KEY_SPACE:
            self.toggle()

    def on_mouse_down(self, event: MouseEvent) -> None:
        if self.view is not None:
            self.view.set_selected(self)

    def on_mouse_up(self, event: MouseEvent) -> None:
        scroll_x = self.view.horizontal_value if self.view is not None else 0
        column = event.x + scroll_x
        start, end = self.marker_columns()
        if start <= column < end:
            self.toggle()
