"""Command-line front door for termtree.

Parses CLI options, builds a lazily loaded tree for the target directory,
and either prints one rendered frame or runs the interactive browser.
"""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from pathlib import Path

from . import config
from .app import build_session, run_tree_app
from .directory import DirectoryItem, build_directory_tree
from .theme import MONO_THEME, UITheme, available_theme_names, resolve_theme
from .tree_view import render_tree_view

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Browse a directory as an expandable tree in the terminal.")
    parser.add_argument("path", nargs="?", default=None, help="Directory to browse. Defaults to current directory.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name, remembered for later runs ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--hide-root", action="store_true", help="Do not give the root directory its own row.")
    parser.add_argument("--show-hidden", action="store_true", help="Include dot-files.")
    parser.add_argument("--render", action="store_true", help="Print one frame of the tree and exit.")
    parser.add_argument("--width", type=_positive_int, default=None, help="Frame width for --render.")
    parser.add_argument("--height", type=_positive_int, default=None, help="Frame height for --render.")
    parser.add_argument("--log-file", type=Path, default=None, help="Write debug logging to this file.")
    return parser


def configure_logging(log_file: Path | None) -> None:
    """Send debug logging to ``log_file``; the terminal itself stays clean."""
    if log_file is None:
        return
    logging.basicConfig(
        filename=str(log_file),
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def render_frame(
    root_item: DirectoryItem,
    width: int,
    height: int,
    theme: UITheme,
    root_visible: bool = True,
) -> str:
    """Return one rendered frame of ``root_item`` as newline-joined text."""
    session = build_session(root_item, width, height, root_visible=root_visible)
    return "\n".join(render_tree_view(session.view, theme)) + "\n"


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and browse a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Activating an entry with Enter prints its path.
    """
    args = build_parser().parse_args()
    configure_logging(args.log_file)

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")

    show_hidden = args.show_hidden or config.load_show_hidden()
    root_visible = config.load_show_root() and not args.hide_root
    theme = MONO_THEME if args.no_color else resolve_theme(args.theme or config.load_theme_name())
    if args.theme and args.theme.strip().lower() in available_theme_names():
        config.save_theme_name(args.theme.strip().lower())
    root_item = build_directory_tree(path, show_hidden=show_hidden)
    logger.debug("browsing %s (hidden=%s, root row=%s)", root_item.path, show_hidden, root_visible)

    if args.render or not sys.stdout.isatty():
        term = shutil.get_terminal_size((80, 24))
        width = args.width if args.width is not None else term.columns
        height = args.height if args.height is not None else term.lines
        sys.stdout.write(render_frame(root_item, width, height, theme, root_visible=root_visible))
        return

    activated = run_tree_app(
        root_item,
        theme=theme,
        root_visible=root_visible,
        page_step=config.load_page_step(),
    )
    if isinstance(activated, DirectoryItem):
        sys.stdout.write(f"{activated.path}\n")
