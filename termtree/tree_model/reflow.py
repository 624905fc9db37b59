"""Viewport placement of flattened rows and scroll-range computation."""

from __future__ import annotations

from dataclasses import dataclass

from .item import TreeItem
from .types import TreeRow


@dataclass(frozen=True)
class ReflowResult:
    """Outcome of one viewport reflow.

    ``placements[i]`` is the viewport ``y`` of row ``i``, or ``None`` when the
    row is scrolled above the window or falls below the fold.
    """

    placements: tuple[int | None, ...]
    max_line_width: int
    bottom_value: int
    right_value: int
    vertical_value: int
    horizontal_value: int
    selected_index: int | None
    center_window: bool

    @property
    def visible_indices(self) -> list[int]:
        return [idx for idx, y in enumerate(self.placements) if y is not None]


def find_row_index(rows: list[TreeRow], item: TreeItem | None) -> int | None:
    if item is None:
        return None
    for idx, row in enumerate(rows):
        if row.item is item:
            return idx
    return None


def reflow_viewport(
    rows: list[TreeRow],
    *,
    selected: TreeItem | None,
    center_window: bool,
    vertical_value: int,
    horizontal_value: int,
    width: int,
    height: int,
) -> ReflowResult:
    """Compute row placement and scroll ranges for a ``width`` x ``height`` view.

    The last line and last column of the view belong to the scrollbars, so at
    most ``height - 1`` rows are placed. Offsets are clamped into their new
    ranges before rows are placed; running this again on its own output
    yields the same result.
    """
    max_line_width = max((row.item.line_width() for row in rows), default=0)

    selected_index = find_row_index(rows, selected)
    if center_window and selected_index is not None:
        if selected_index < vertical_value or selected_index > vertical_value + height - 2:
            vertical_value = selected_index
            center_window = False

    bottom_value = max(0, len(rows) - height + 1)
    vertical_value = max(0, min(vertical_value, bottom_value))
    right_value = max(0, max_line_width - width + 3)
    horizontal_value = max(0, min(horizontal_value, right_value))

    placements: list[int | None] = []
    top_y = 0
    for idx in range(len(rows)):
        if idx < vertical_value or top_y >= height - 1:
            placements.append(None)
            continue
        placements.append(top_y)
        top_y += 1

    return ReflowResult(
        placements=tuple(placements),
        max_line_width=max_line_width,
        bottom_value=bottom_value,
        right_value=right_value,
        vertical_value=vertical_value,
        horizontal_value=horizontal_value,
        selected_index=selected_index,
        center_window=center_window,
    )
