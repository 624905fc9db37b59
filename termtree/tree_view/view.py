"""Scrollable tree widget with single selection and keyboard navigation."""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..events import (
    KEY_BACK_TAB,
    KEY_DOWN,
    KEY_END,
    KEY_ENTER,
    KEY_HOME,
    KEY_LEFT,
    KEY_PGDN,
    KEY_PGUP,
    KEY_RIGHT,
    KEY_SHIFT_TAB,
    KEY_TAB,
    KEY_UP,
    KeypressEvent,
    MouseEvent,
)
from ..keys import KeyComboBinding, KeyComboRegistry, modifier_combos
from ..scrollable import ScrollableWidget
from ..scrollbar import HScroller, VScroller
from ..tree_model import TreeItem, TreeRow, flatten_tree, link_rows, reflow_viewport
from ..widget import Widget

logger = logging.getLogger(__name__)


class TreeView(ScrollableWidget):
    """Show a ``TreeItem`` hierarchy as scrollable rows.

    Every input handler mutates state first and then calls ``reflow`` once,
    which re-flattens the tree, relinks keyboard navigation, places rows in
    the viewport and rescales both scrollbars. Focus changes are the only
    handled input that skips the reflow.
    """

    def __init__(
        self,
        parent: Widget | None,
        x: int,
        y: int,
        width: int,
        height: int,
        action: Callable[[], None] | None = None,
        *,
        root_visible: bool = True,
        page_step: int | None = None,
    ) -> None:
        """Create the view and its two scrollbars.

        Args:
            parent: Containing widget, or ``None`` for a standalone view.
            x: Column relative to the parent.
            y: Row relative to the parent.
            width: Total width, including the vertical scrollbar column.
            height: Total height, including the horizontal scrollbar row.
            action: Called with no arguments when the user activates the
                selected item with Enter.
            root_visible: Whether the root item occupies a row.
            page_step: Rows moved by page scrolling; defaults to one viewport.
        """
        super().__init__(parent, x, y, width, height)
        self.action = action
        self.root_visible = root_visible
        self.page_step = page_step
        self.center_window = False
        self.max_line_width = 0
        self.rows: list[TreeRow] = []
        self._tree_root: TreeItem | None = None
        self._selected: TreeItem | None = None
        self._row_index: dict[int, int] = {}

        self.v_scroller = VScroller(self, width - 1, 0, max(0, height - 1))
        self.h_scroller = HScroller(self, 0, height - 1, max(0, width - 1))
        self._apply_page_step()

        self._scroll_keys = KeyComboRegistry().register_bindings(
            KeyComboBinding(modifier_combos(KEY_LEFT), self._scrolled(self.horizontal_decrement)),
            KeyComboBinding(modifier_combos(KEY_RIGHT), self._scrolled(self.horizontal_increment)),
            KeyComboBinding(modifier_combos(KEY_UP), self._scrolled(self.vertical_decrement)),
            KeyComboBinding(modifier_combos(KEY_DOWN), self._scrolled(self.vertical_increment)),
            KeyComboBinding(modifier_combos(KEY_PGUP), self._scrolled(self.big_vertical_decrement)),
            KeyComboBinding(modifier_combos(KEY_PGDN), self._scrolled(self.big_vertical_increment)),
            KeyComboBinding((KEY_HOME,), self._scrolled(self.to_top)),
            KeyComboBinding((KEY_END,), self._scrolled(self.to_bottom)),
        )

    @staticmethod
    def _scrolled(step: Callable[[], None]) -> Callable[[], bool]:
        def handler() -> bool:
            step()
            return True

        return handler

    def _apply_page_step(self) -> None:
        step = self.page_step if self.page_step is not None else self.height - 1
        self.v_scroller.big_change = max(1, step)

    @property
    def tree_root(self) -> TreeItem | None:
        return self._tree_root

    @tree_root.setter
    def tree_root(self, root: TreeItem | None) -> None:
        self._tree_root = root

    def set_tree_root(self, root: TreeItem | None, center_window: bool = False) -> None:
        """Replace the whole tree; ``center_window`` scrolls to the selection on next reflow."""
        self._tree_root = root
        self.center_window = center_window

    @property
    def selected(self) -> TreeItem | None:
        return self._selected

    def set_selected(self, item: TreeItem | None) -> None:
        """Make ``item`` the only selected item; ``None`` clears the selection."""
        if item is not None:
            item.selected = True
        if self._selected is not None and self._selected is not item:
            self._selected.selected = False
        self._selected = item

    def dispatch(self) -> None:
        if self.action is not None:
            self.action()

    def row_index(self, item: TreeItem | None) -> int | None:
        """Return the row of ``item`` in the last reflow, or ``None`` if not shown."""
        if item is None:
            return None
        return self._row_index.get(id(item))

    def previous_item(self, item: TreeItem | None) -> TreeItem | None:
        idx = self.row_index(item)
        if idx is None or self.rows[idx].previous is None:
            return None
        return self.rows[self.rows[idx].previous].item

    def next_item(self, item: TreeItem | None) -> TreeItem | None:
        idx = self.row_index(item)
        if idx is None or self.rows[idx].next is None:
            return None
        return self.rows[self.rows[idx].next].item

    def set_size(self, width: int, height: int) -> None:
        """Resize the view, move both scrollbars, and reflow."""
        if width < 0 or height < 0:
            raise ValueError(f"widget size must be non-negative, got {width}x{height}")
        self.width = width
        self.height = height
        self.v_scroller.x = width - 1
        self.v_scroller.height = max(0, height - 1)
        self.h_scroller.y = height - 1
        self.h_scroller.width = max(0, width - 1)
        self._apply_page_step()
        self.reflow()

    def reflow(self) -> None:
        """Rebuild rows from the tree and fit them to the viewport."""
        if self._tree_root is None:
            return

        # Retire every row from the previous pass; only rows placed below
        # come back enabled.
        for child in self.children:
            if isinstance(child, TreeItem):
                child.invisible = True
                child.enabled = False

        self.rows = link_rows(flatten_tree(self._tree_root, self.root_visible))
        self._row_index = {id(row.item): idx for idx, row in enumerate(self.rows)}

        result = reflow_viewport(
            self.rows,
            selected=self._selected,
            center_window=self.center_window,
            vertical_value=self.vertical_value,
            horizontal_value=self.horizontal_value,
            width=self.width,
            height=self.height,
        )
        self.center_window = result.center_window
        self.max_line_width = result.max_line_width
        self.bottom_value = result.bottom_value
        self.vertical_value = result.vertical_value
        self.right_value = result.right_value
        self.horizontal_value = result.horizontal_value

        for row, y in zip(self.rows, result.placements):
            item = row.item
            item.view = self
            item.parent = self
            if y is None:
                item.enabled = False
                item.invisible = True
                continue
            item.x = 0
            item.y = y
            item.height = 1
            item.width = max(0, self.width - 1)
            item.enabled = True
            item.invisible = False

        self.children = [row.item for row in self.rows]
        self.children.append(self.h_scroller)
        self.children.append(self.v_scroller)
        if self.active is not None and not self.active.focusable:
            self.active = None

        logger.debug(
            "reflow: %d rows, offset %d/%d, hscroll %d/%d, selected row %s",
            len(self.rows),
            self.vertical_value,
            self.bottom_value,
            self.horizontal_value,
            self.right_value,
            result.selected_index,
        )

    def on_mouse_down(self, event: MouseEvent) -> None:
        if event.is_wheel_up:
            self.vertical_decrement()
        elif event.is_wheel_down:
            self.vertical_increment()
        else:
            super().on_mouse_down(event)
        # A child may have toggled expansion or moved a scrollbar.
        self.reflow()

    def on_mouse_up(self, event: MouseEvent) -> None:
        super().on_mouse_up(event)
        self.reflow()

    def on_keypress(self, event: KeypressEvent) -> None:
        key = event.key
        if self._scroll_keys.dispatch(key):
            pass
        elif key == KEY_ENTER:
            if self._selected is not None:
                self.dispatch()
        elif key == KEY_UP:
            old_item = self._selected
            previous = self.previous_item(old_item)
            if old_item is not None and previous is not None:
                self.set_selected(previous)
                if old_item.y == 0:
                    self.vertical_decrement()
        elif key == KEY_DOWN:
            old_item = self._selected
            following = self.next_item(old_item)
            if old_item is not None and following is not None:
                self.set_selected(following)
                if old_item.y == self.height - 2:
                    self.vertical_increment()
        elif key == KEY_TAB:
            if self.parent is not None:
                self.parent.switch_widget(True)
            return
        elif key in {KEY_SHIFT_TAB, KEY_BACK_TAB}:
            if self.parent is not None:
                self.parent.switch_widget(False)
            return
        elif self._selected is not None:
            # Let the item handle its own expand/collapse keys.
            self._selected.on_keypress(event)
        else:
            super().on_keypress(event)
            return

        self.reflow()
