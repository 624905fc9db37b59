"""Filesystem-backed tree items for the demo browser.

Directory children are listed lazily, the first time a directory expands.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .tree_model import TreeItem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectoryChild:
    """One directory-child record used to build tree items."""

    name: str
    path: Path
    is_dir: bool


def list_directory_children(
    directory: Path,
    show_hidden: bool,
) -> tuple[list[DirectoryChild], OSError | None]:
    """List visible children, directories first, case-insensitively sorted.

    Returns ``(children, scan_error)``. ``scan_error`` is set when the
    directory cannot be scanned.
    """
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if not show_hidden and name.startswith("."):
                    continue
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False
                children.append(DirectoryChild(name=name, path=Path(child.path), is_dir=is_dir))
    except OSError as exc:
        return [], exc

    children.sort(key=lambda item: (not item.is_dir, item.name.lower()))
    return children, None


class DirectoryItem(TreeItem):
    """Tree item for a filesystem path; directories load children on expand."""

    def __init__(self, path: Path, *, is_dir: bool, show_hidden: bool = False, expanded: bool = False) -> None:
        name = path.name or str(path)
        super().__init__(name + ("/" if is_dir else ""), expanded=False)
        self.path = path
        self.is_dir = is_dir
        self.show_hidden = show_hidden
        self.loaded = False
        self.scan_error: OSError | None = None
        self.expandable = is_dir
        if expanded:
            self.set_expanded(True)

    def load_children(self) -> None:
        """List the directory once and attach an item per visible child."""
        if self.loaded or not self.is_dir:
            return
        self.loaded = True
        children, self.scan_error = list_directory_children(self.path, self.show_hidden)
        if self.scan_error is not None:
            logger.warning("cannot list %s: %s", self.path, self.scan_error)
            return
        for child in children:
            self.attach(DirectoryItem(child.path, is_dir=child.is_dir, show_hidden=self.show_hidden))
        # Empty directories stay expandable so they still show a marker.
        self.expandable = True

    def on_expand(self) -> None:
        self.load_children()


def build_directory_tree(path: Path, show_hidden: bool = False) -> DirectoryItem:
    """Return an expanded root item for ``path`` (a directory or a single file)."""
    resolved = path.resolve()
    is_dir = resolved.is_dir()
    return DirectoryItem(resolved, is_dir=is_dir, show_hidden=show_hidden, expanded=is_dir)
