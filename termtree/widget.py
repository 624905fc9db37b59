"""Minimal widget base: containment, geometry, focus, and event fallback."""

from __future__ import annotations

import logging

from .events import (
    KEY_BACK_TAB,
    KEY_SHIFT_TAB,
    KEY_TAB,
    InputEvent,
    KeypressEvent,
    MouseEvent,
    MouseKind,
)

logger = logging.getLogger(__name__)


class Widget:
    """Rectangle with an ordered child list and default input routing.

    Coordinates are relative to the parent. Children later in ``children``
    are drawn on top and therefore win mouse hit tests.
    """

    def __init__(
        self,
        parent: Widget | None = None,
        x: int = 0,
        y: int = 0,
        width: int = 0,
        height: int = 0,
    ) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"widget size must be non-negative, got {width}x{height}")
        self.parent = parent
        self.children: list[Widget] = []
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.enabled = True
        self.invisible = False
        self.active: Widget | None = None
        if parent is not None:
            parent.children.append(self)

    @property
    def absolute_x(self) -> int:
        if self.parent is None:
            return self.x
        return self.parent.absolute_x + self.x

    @property
    def absolute_y(self) -> int:
        if self.parent is None:
            return self.y
        return self.parent.absolute_y + self.y

    @property
    def focusable(self) -> bool:
        return self.enabled and not self.invisible

    def contains(self, x: int, y: int) -> bool:
        """Return whether parent-relative point ``(x, y)`` falls inside."""
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height

    def child_at(self, x: int, y: int) -> Widget | None:
        """Return the topmost enabled, visible child under ``(x, y)``."""
        for child in reversed(self.children):
            if child.focusable and child.contains(x, y):
                return child
        return None

    def activate(self, child: Widget) -> None:
        if child in self.children:
            self.active = child

    def switch_widget(self, forward: bool) -> None:
        """Move focus to the next (or previous) focusable child, wrapping."""
        candidates = [child for child in self.children if child.focusable]
        if not candidates:
            return
        if self.active not in candidates:
            self.active = candidates[0] if forward else candidates[-1]
            return
        idx = candidates.index(self.active)
        step = 1 if forward else -1
        self.active = candidates[(idx + step) % len(candidates)]

    def on_mouse_down(self, event: MouseEvent) -> None:
        child = self.child_at(event.x, event.y)
        if child is None:
            return
        logger.debug("mouse down at %d,%d routed to %s", event.x, event.y, type(child).__name__)
        self.activate(child)
        child.on_mouse_down(event.translated(child.x, child.y))

    def on_mouse_up(self, event: MouseEvent) -> None:
        child = self.child_at(event.x, event.y)
        if child is None:
            return
        child.on_mouse_up(event.translated(child.x, child.y))

    def on_keypress(self, event: KeypressEvent) -> None:
        """Forward to the active child; handle focus keys when there is none."""
        if self.active is not None:
            self.active.on_keypress(event)
            return
        if event.key == KEY_TAB:
            self.switch_widget(True)
        elif event.key in {KEY_SHIFT_TAB, KEY_BACK_TAB}:
            self.switch_widget(False)

    def handle_event(self, event: InputEvent) -> None:
        """Route one decoded event to the matching handler."""
        if isinstance(event, KeypressEvent):
            self.on_keypress(event)
        elif event.kind is MouseKind.MOUSE_UP:
            self.on_mouse_up(event)
        else:
            self.on_mouse_down(event)
