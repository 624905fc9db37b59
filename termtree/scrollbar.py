"""Vertical and horizontal scrollbars holding a clamped scroll value."""

from __future__ import annotations

from .events import MouseEvent
from .widget import Widget

DEFAULT_BIG_CHANGE = 20


class Scroller(Widget):
    """Scroll value in ``[top_value, max_value]`` with arrow/track mouse stepping.

    ``value`` is clamped on every write, so neither keyboard stepping nor a
    shrinking range can leave it out of bounds.
    """

    def __init__(
        self,
        parent: Widget | None,
        x: int,
        y: int,
        width: int,
        height: int,
    ) -> None:
        super().__init__(parent, x, y, width, height)
        self.top_value = 0
        self._max_value = 0
        self._value = 0
        self.small_change = 1
        self.big_change = DEFAULT_BIG_CHANGE

    @property
    def value(self) -> int:
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        self._value = max(self.top_value, min(int(value), self._max_value))

    @property
    def max_value(self) -> int:
        return self._max_value

    @max_value.setter
    def max_value(self, value: int) -> None:
        self._max_value = max(self.top_value, int(value))
        if self._value > self._max_value:
            self._value = self._max_value

    def increment(self) -> None:
        self.value = self._value + self.small_change

    def decrement(self) -> None:
        self.value = self._value - self.small_change

    def big_increment(self) -> None:
        self.value = self._value + self.big_change

    def big_decrement(self) -> None:
        self.value = self._value - self.big_change

    def to_top(self) -> None:
        self.value = self.top_value

    def to_bottom(self) -> None:
        self.value = self._max_value

    @property
    def length(self) -> int:
        raise NotImplementedError

    def thumb_position(self) -> int:
        """Return the thumb cell, between the two arrow cells."""
        track = self.length - 2
        if track <= 0:
            return 0
        span = self._max_value - self.top_value
        if span <= 0:
            return 1
        return 1 + ((self._value - self.top_value) * (track - 1)) // span

    def _step_from_cell(self, cell: int) -> None:
        if cell <= 0:
            self.decrement()
        elif cell >= self.length - 1:
            self.increment()
        elif cell < self.thumb_position():
            self.big_decrement()
        elif cell > self.thumb_position():
            self.big_increment()


class VScroller(Scroller):
    """One-column scrollbar; ``bottom_value`` is the largest scroll offset."""

    def __init__(self, parent: Widget | None, x: int, y: int, height: int) -> None:
        super().__init__(parent, x, y, 1, height)

    @property
    def length(self) -> int:
        return self.height

    @property
    def bottom_value(self) -> int:
        return self.max_value

    @bottom_value.setter
    def bottom_value(self, value: int) -> None:
        self.max_value = value

    def on_mouse_up(self, event: MouseEvent) -> None:
        self._step_from_cell(event.y)


class HScroller(Scroller):
    """One-row scrollbar; ``right_value`` is the largest scroll offset."""

    def __init__(self, parent: Widget | None, x: int, y: int, width: int) -> None:
        super().__init__(parent, x, y, width, 1)

    @property
    def length(self) -> int:
        return self.width

    @property
    def right_value(self) -> int:
        return self.max_value

    @right_value.setter
    def right_value(self, value: int) -> None:
        self.max_value = value

    def on_mouse_up(self, event: MouseEvent) -> None:
        self._step_from_cell(event.x)
