"""Viewport reflow tests: row placement, scroll ranges, and recentering.

The reflow is a pure function of rows, selection, offsets and size, so these
cases check its output directly without a widget.
"""

from __future__ import annotations

import unittest

from termtree.tree_model import TreeItem, flatten_tree, reflow_viewport


def _flat_tree(count: int, root_visible: bool) -> tuple[list, list[TreeItem]]:
    root = TreeItem("root", expanded=True)
    children = [root.add_item(f"c{idx}") for idx in range(count)]
    return flatten_tree(root, root_visible=root_visible), children


def _reflow(rows, **overrides):
    params = {
        "selected": None,
        "center_window": False,
        "vertical_value": 0,
        "horizontal_value": 0,
        "width": 20,
        "height": 3,
    }
    params.update(overrides)
    return reflow_viewport(rows, **params)


class PlacementTests(unittest.TestCase):
    def test_five_rows_in_three_line_view(self) -> None:
        rows, _children = _flat_tree(5, root_visible=False)
        result = _reflow(rows)

        self.assertEqual(result.bottom_value, 3)
        # The last line belongs to the horizontal scrollbar.
        self.assertEqual(result.placements, (0, 1, None, None, None))
        self.assertEqual(result.visible_indices, [0, 1])

    def test_rows_above_offset_are_hidden(self) -> None:
        rows, _children = _flat_tree(5, root_visible=False)
        result = _reflow(rows, vertical_value=2, height=4)
        self.assertEqual(result.placements, (None, None, 0, 1, 2))

    def test_short_tree_fits_without_scrolling(self) -> None:
        rows, _children = _flat_tree(2, root_visible=True)
        result = _reflow(rows, height=10)
        self.assertEqual(result.bottom_value, 0)
        self.assertEqual(result.placements, (0, 1, 2))

    def test_empty_row_list(self) -> None:
        result = _reflow([], vertical_value=5, horizontal_value=5)
        self.assertEqual(result.placements, ())
        self.assertEqual(result.max_line_width, 0)
        self.assertEqual((result.bottom_value, result.right_value), (0, 0))
        self.assertEqual((result.vertical_value, result.horizontal_value), (0, 0))


class RangeTests(unittest.TestCase):
    def test_vertical_offset_is_clamped_to_bottom(self) -> None:
        rows, _children = _flat_tree(5, root_visible=True)
        result = _reflow(rows, vertical_value=10)
        self.assertEqual(result.bottom_value, 4)
        self.assertEqual(result.vertical_value, 4)
        self.assertEqual(result.placements, (None, None, None, None, 0, 1))

    def test_negative_offsets_are_raised_to_zero(self) -> None:
        rows, _children = _flat_tree(5, root_visible=True)
        result = _reflow(rows, vertical_value=-3, horizontal_value=-1)
        self.assertEqual((result.vertical_value, result.horizontal_value), (0, 0))

    def test_right_value_reserves_glyph_and_scrollbar_columns(self) -> None:
        root = TreeItem("root", expanded=True)
        root.add_item("x" * 30)
        rows = flatten_tree(root)
        result = _reflow(rows, horizontal_value=100)

        self.assertEqual(result.max_line_width, 34)
        self.assertEqual(result.right_value, 34 - 20 + 3)
        self.assertEqual(result.horizontal_value, result.right_value)

    def test_narrow_labels_need_no_horizontal_scroll(self) -> None:
        rows, _children = _flat_tree(3, root_visible=True)
        result = _reflow(rows, horizontal_value=4)
        self.assertEqual(result.right_value, 0)
        self.assertEqual(result.horizontal_value, 0)

    def test_wide_characters_count_two_columns(self) -> None:
        root = TreeItem("根")
        result = _reflow(flatten_tree(root))
        self.assertEqual(result.max_line_width, 6)


class CenterWindowTests(unittest.TestCase):
    def test_selection_below_window_scrolls_to_it_once(self) -> None:
        rows, children = _flat_tree(5, root_visible=True)
        selected = children[3]
        result = _reflow(rows, selected=selected, center_window=True)

        self.assertEqual(result.selected_index, 4)
        self.assertEqual(result.vertical_value, 4)
        self.assertFalse(result.center_window)

        again = _reflow(
            rows,
            selected=selected,
            center_window=result.center_window,
            vertical_value=result.vertical_value,
        )
        self.assertEqual(again.vertical_value, 4)

    def test_selection_above_window_scrolls_up(self) -> None:
        rows, children = _flat_tree(5, root_visible=True)
        result = _reflow(rows, selected=children[0], center_window=True, vertical_value=4)
        self.assertEqual(result.vertical_value, 1)

    def test_visible_selection_leaves_offset_alone(self) -> None:
        rows, children = _flat_tree(5, root_visible=True)
        result = _reflow(rows, selected=children[0], center_window=True, height=5)
        self.assertEqual(result.vertical_value, 0)
        # Nothing scrolled, so the request is still pending.
        self.assertTrue(result.center_window)

    def test_pending_request_fires_once_selection_leaves_window(self) -> None:
        rows, children = _flat_tree(5, root_visible=True)
        first = _reflow(rows, selected=children[0], center_window=True)
        self.assertTrue(first.center_window)

        scrolled = _reflow(rows, selected=children[0], center_window=first.center_window, vertical_value=3)
        self.assertEqual(scrolled.vertical_value, 1)
        self.assertFalse(scrolled.center_window)

    def test_request_stays_armed_while_selection_is_not_shown(self) -> None:
        rows, _children = _flat_tree(5, root_visible=True)
        stranger = TreeItem("elsewhere")
        result = _reflow(rows, selected=stranger, center_window=True)
        self.assertIsNone(result.selected_index)
        self.assertTrue(result.center_window)
        self.assertEqual(result.vertical_value, 0)

    def test_disarmed_request_does_not_scroll(self) -> None:
        rows, children = _flat_tree(5, root_visible=True)
        result = _reflow(rows, selected=children[4], center_window=False)
        self.assertEqual(result.vertical_value, 0)


class IdempotenceTests(unittest.TestCase):
    def test_reflowing_own_output_is_a_fixed_point(self) -> None:
        rows, children = _flat_tree(5, root_visible=False)
        # Offset 4 exceeds the bottom value of 3 and must settle on first pass.
        first = _reflow(rows, selected=children[4], center_window=True)
        second = _reflow(
            rows,
            selected=children[4],
            center_window=first.center_window,
            vertical_value=first.vertical_value,
            horizontal_value=first.horizontal_value,
        )
        self.assertEqual(first, second)
        self.assertEqual(first.vertical_value, 3)
        self.assertEqual(first.placements, (None, None, None, 0, 1))


if __name__ == "__main__":
    unittest.main()
