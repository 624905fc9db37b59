"""Input event types delivered to widgets.

The terminal decoder produces string tokens (``UP``, ``MOUSE_LEFT_DOWN:3:7``).
``event_from_token`` turns those into one of two event kinds so widget
handlers can dispatch on type instead of re-parsing strings.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

KEY_UP = "UP"
KEY_DOWN = "DOWN"
KEY_LEFT = "LEFT"
KEY_RIGHT = "RIGHT"
KEY_HOME = "HOME"
KEY_END = "END"
KEY_PGUP = "PGUP"
KEY_PGDN = "PGDN"
KEY_ENTER = "ENTER"
KEY_TAB = "TAB"
KEY_BACK_TAB = "BACK_TAB"
KEY_SHIFT_TAB = "SHIFT_TAB"
KEY_SPACE = "SPACE"
KEY_ESC = "ESC"
KEY_CTRL_C = "CTRL_C"

MODIFIERS = ("SHIFT", "CTRL", "ALT")


def modified(modifier: str, key: str) -> str:
    """Return the token for ``key`` pressed with ``modifier`` (``SHIFT_LEFT``)."""
    return f"{modifier}_{key}"


class MouseKind(Enum):
    MOUSE_DOWN = "down"
    MOUSE_UP = "up"
    WHEEL_UP = "wheel_up"
    WHEEL_DOWN = "wheel_down"


@dataclass(frozen=True)
class KeypressEvent:
    """One decoded keystroke."""

    key: str


@dataclass(frozen=True)
class MouseEvent:
    """Pointer event; ``x``/``y`` are relative to the receiving widget."""

    kind: MouseKind
    x: int
    y: int
    absolute_x: int
    absolute_y: int

    @property
    def is_wheel_up(self) -> bool:
        return self.kind is MouseKind.WHEEL_UP

    @property
    def is_wheel_down(self) -> bool:
        return self.kind is MouseKind.WHEEL_DOWN

    def translated(self, dx: int, dy: int) -> MouseEvent:
        """Return a copy shifted into a child's coordinate space."""
        return replace(self, x=self.x - dx, y=self.y - dy)


InputEvent = KeypressEvent | MouseEvent

_MOUSE_PREFIXES: dict[str, MouseKind] = {
    "MOUSE_LEFT_DOWN": MouseKind.MOUSE_DOWN,
    "MOUSE_LEFT_UP": MouseKind.MOUSE_UP,
    "MOUSE_WHEEL_UP": MouseKind.WHEEL_UP,
    "MOUSE_WHEEL_DOWN": MouseKind.WHEEL_DOWN,
}

_KEY_ALIASES: dict[str, str] = {
    "ENTER_CR": KEY_ENTER,
    "ENTER_LF": KEY_ENTER,
    " ": KEY_SPACE,
    "\x03": KEY_CTRL_C,
}


def parse_mouse_col_row(mouse_key: str) -> tuple[int | None, int | None]:
    """Parse ``MOUSE_*:col:row`` key tokens into integer coordinates."""
    parts = mouse_key.split(":")
    if len(parts) < 3:
        return None, None
    try:
        return int(parts[1]), int(parts[2])
    except ValueError:
        return None, None


def event_from_token(token: str) -> InputEvent | None:
    """Convert a decoder token into an event, or ``None`` when unusable.

    Mouse tokens carry 1-based terminal coordinates; events use 0-based
    screen coordinates, which start out equal to the absolute position.
    """
    if not token:
        return None
    if token.startswith("MOUSE"):
        kind = _MOUSE_PREFIXES.get(token.split(":", 1)[0])
        if kind is None:
            return None
        col, row = parse_mouse_col_row(token)
        if col is None or row is None:
            return None
        x, y = col - 1, row - 1
        return MouseEvent(kind, x, y, x, y)
    return KeypressEvent(_KEY_ALIASES.get(token, token))
