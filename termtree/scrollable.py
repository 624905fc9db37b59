"""Widget base with a vertical and a horizontal scrollbar."""

from __future__ import annotations

from .scrollbar import HScroller, VScroller
from .widget import Widget


class ScrollableWidget(Widget):
    """Expose scroll offsets and stepping through two owned scrollers.

    Subclasses create ``v_scroller``/``h_scroller`` and override ``reflow``
    to recompute their content layout and scroll ranges.
    """

    v_scroller: VScroller
    h_scroller: HScroller

    def reflow(self) -> None:
        pass

    @property
    def vertical_value(self) -> int:
        return self.v_scroller.value

    @vertical_value.setter
    def vertical_value(self, value: int) -> None:
        self.v_scroller.value = value

    @property
    def horizontal_value(self) -> int:
        return self.h_scroller.value

    @horizontal_value.setter
    def horizontal_value(self, value: int) -> None:
        self.h_scroller.value = value

    @property
    def bottom_value(self) -> int:
        return self.v_scroller.bottom_value

    @bottom_value.setter
    def bottom_value(self, value: int) -> None:
        self.v_scroller.bottom_value = value

    @property
    def right_value(self) -> int:
        return self.h_scroller.right_value

    @right_value.setter
    def right_value(self, value: int) -> None:
        self.h_scroller.right_value = value

    def vertical_increment(self) -> None:
        self.v_scroller.increment()

    def vertical_decrement(self) -> None:
        self.v_scroller.decrement()

    def big_vertical_increment(self) -> None:
        self.v_scroller.big_increment()

    def big_vertical_decrement(self) -> None:
        self.v_scroller.big_decrement()

    def horizontal_increment(self) -> None:
        self.h_scroller.increment()

    def horizontal_decrement(self) -> None:
        self.h_scroller.decrement()

    def to_top(self) -> None:
        self.v_scroller.to_top()

    def to_bottom(self) -> None:
        self.v_scroller.to_bottom()
