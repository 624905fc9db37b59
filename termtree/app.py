"""Interactive loop hosting a full-screen ``TreeView``.

The loop is wiring only: decode a token, hand the event to the screen
widget, redraw when something may have changed. Activating an item with
Enter ends the session and returns that item.
"""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Callable
from dataclasses import dataclass

from .events import KEY_CTRL_C, KEY_ESC, event_from_token
from .input import read_key
from .terminal import TerminalController
from .theme import DEFAULT_THEME, UITheme
from .tree_model import TreeItem
from .tree_view import TreeView, render_tree_view
from .widget import Widget

logger = logging.getLogger(__name__)

QUIT_KEYS = frozenset({"q", KEY_ESC, KEY_CTRL_C})
READ_TIMEOUT_MS = 120


@dataclass
class TreeSession:
    """Mutable loop state shared between the loop and the activation hook."""

    screen: Widget
    view: TreeView
    activated: TreeItem | None = None
    dirty: bool = True
    skip_next_lf: bool = False


def build_session(
    root_item: TreeItem,
    width: int,
    height: int,
    *,
    root_visible: bool = True,
    page_step: int | None = None,
) -> TreeSession:
    """Create a screen widget holding one focused tree view over ``root_item``.

    The root (or first top-level row when the root is hidden) starts selected
    and the view is reflowed once so it can be drawn immediately.
    """
    screen = Widget(None, 0, 0, max(0, width), max(0, height))
    view = TreeView(
        screen,
        0,
        0,
        max(0, width),
        max(0, height),
        root_visible=root_visible,
        page_step=page_step,
    )
    session = TreeSession(screen=screen, view=view)

    def on_activate() -> None:
        session.activated = view.selected

    view.action = on_activate
    screen.activate(view)

    view.set_tree_root(root_item)
    view.reflow()
    if view.rows:
        view.set_selected(view.rows[0].item)
        view.reflow()
    return session


def resize_session(session: TreeSession, width: int, height: int) -> bool:
    """Fit the screen and view to a new terminal size; return whether it changed."""
    width = max(0, width)
    height = max(0, height)
    if (width, height) == (session.screen.width, session.screen.height):
        return False
    session.screen.width = width
    session.screen.height = height
    session.view.set_size(width, height)
    session.dirty = True
    return True


def feed_token(session: TreeSession, token: str) -> bool:
    """Apply one decoder token to the session; return ``False`` to stop the loop."""
    if token == "":
        return True
    if session.skip_next_lf and token == "ENTER_LF":
        session.skip_next_lf = False
        return True
    session.skip_next_lf = token == "ENTER_CR"

    if token in QUIT_KEYS:
        return False
    event = event_from_token(token)
    if event is None:
        return True
    session.screen.handle_event(event)
    session.dirty = True
    return session.activated is None


def run_tree_app(
    root_item: TreeItem,
    *,
    theme: UITheme = DEFAULT_THEME,
    root_visible: bool = True,
    page_step: int | None = None,
    stdin_fd: int = 0,
    stdout_fd: int = 1,
    terminal: TerminalController | None = None,
    read: Callable[..., str] = read_key,
    terminal_size: Callable[..., os.terminal_size] = shutil.get_terminal_size,
) -> TreeItem | None:
    """Browse ``root_item`` full-screen until quit or activation.

    Returns the item activated with Enter, or ``None`` when the user quit.
    """
    term = terminal_size((80, 24))
    session = build_session(
        root_item,
        term.columns,
        term.lines,
        root_visible=root_visible,
        page_step=page_step,
    )
    controller = terminal if terminal is not None else TerminalController(stdin_fd, stdout_fd)
    logger.debug("starting tree session %dx%d", term.columns, term.lines)

    with controller.raw_mode():
        while True:
            term = terminal_size((80, 24))
            resize_session(session, term.columns, term.lines)
            if session.dirty:
                controller.write_frame(render_tree_view(session.view, theme))
                session.dirty = False
            try:
                token = read(stdin_fd, timeout_ms=READ_TIMEOUT_MS)
            except KeyboardInterrupt:
                continue
            if not feed_token(session, token):
                break

    logger.debug("tree session ended, activated=%r", session.activated)
    return session.activated
