"""Row datatypes produced by flattening a tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .item import TreeItem


@dataclass
class TreeRow:
    """One display row: an item plus the glyph prefix computed for it.

    ``previous``/``next`` are indices into the row list the row belongs to.
    They are only meaningful for that list and are rebuilt on every flatten.
    """

    item: TreeItem
    prefix: str
    depth: int
    last: bool
    previous: int | None = None
    next: int | None = None
