"""Render a ``TreeView`` into fixed-size ANSI screen lines."""

from __future__ import annotations

from ..ansi import pad_ansi_line, slice_ansi_line
from ..scrollbar import Scroller
from ..theme import DEFAULT_THEME, UITheme
from ..tree_model import TreeItem
from .view import TreeView

ARROW_UP = "▲"
ARROW_DOWN = "▼"
ARROW_LEFT = "◀"
ARROW_RIGHT = "▶"
THUMB = "█"
TRACK = "░"


def _styled(code: str, text: str, reset: str) -> str:
    if not code or not text:
        return text
    return f"{code}{text}{reset}"


def selected_with_ansi(text: str, theme: UITheme) -> str:
    """Apply selection styling without discarding existing ANSI colors."""
    if not text:
        return text

    # Keep reverse video active even when the text contains internal resets.
    return theme.reverse + text.replace(theme.reset, theme.reset + theme.reverse) + theme.reset


def format_tree_row(item: TreeItem, theme: UITheme | None = None) -> str:
    """Return the full, unclipped styled text for one item's row."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    label_color = active_theme.tree_dir if item.expandable else active_theme.tree_leaf
    return (
        _styled(active_theme.tree_branch, item.prefix + item.branch_glyph(), reset)
        + _styled(active_theme.tree_marker, item.marker_glyph(), reset)
        + _styled(label_color, item.label, reset)
    )


def scrollbar_cells(scroller: Scroller, low_arrow: str, high_arrow: str, theme: UITheme) -> list[str]:
    """Return one styled glyph per scrollbar cell, arrows at both ends."""
    length = scroller.length
    if length <= 0:
        return []
    reset = theme.reset
    track = _styled(theme.scrollbar_track, TRACK, reset)
    if length < 3:
        return [track] * length
    cells = [track] * length
    cells[0] = _styled(theme.scrollbar_thumb, low_arrow, reset)
    cells[-1] = _styled(theme.scrollbar_thumb, high_arrow, reset)
    cells[scroller.thumb_position()] = _styled(theme.scrollbar_thumb, THUMB, reset)
    return cells


def render_tree_view(view: TreeView, theme: UITheme | None = None) -> list[str]:
    """Draw visible rows and both scrollbars into ``view.height`` lines.

    Rows are sliced by the horizontal scroll offset and padded to the row
    width; the selected row is drawn in reverse video.
    """
    active_theme = theme or DEFAULT_THEME
    if view.width <= 0 or view.height <= 0:
        return [""] * max(0, view.height)

    row_width = view.width - 1
    body_rows = view.height - 1
    body = [" " * row_width] * body_rows
    for row in view.rows:
        item = row.item
        if item.invisible or not (0 <= item.y < body_rows):
            continue
        text = slice_ansi_line(format_tree_row(item, active_theme), view.horizontal_value, row_width)
        text = pad_ansi_line(text, row_width)
        if item.selected:
            text = selected_with_ansi(text, active_theme)
        body[item.y] = text

    vertical = scrollbar_cells(view.v_scroller, ARROW_UP, ARROW_DOWN, active_theme)
    vertical += [" "] * (body_rows - len(vertical))
    lines = [body[idx] + vertical[idx] for idx in range(body_rows)]
    horizontal = scrollbar_cells(view.h_scroller, ARROW_LEFT, ARROW_RIGHT, active_theme)
    horizontal += [" "] * (row_width - len(horizontal))
    lines.append("".join(horizontal) + " ")
    return lines
