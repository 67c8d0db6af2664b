"""Stack canvas geometry in widget pixel coordinates."""

from __future__ import annotations

from dataclasses import dataclass

ELEMENT_WIDTH = 200.0
ELEMENT_HEIGHT = 60.0
ELEMENT_GAP = 5.0
BOTTOM_MARGIN = 20.0
BASE_OVERHANG = 30.0
BASE_HEIGHT = 20.0
ARROW_SIZE = 30.0
ARROW_MARGIN = 20.0
ROUNDNESS = 15.0
MIN_CANVAS_HEIGHT = 600.0


@dataclass(frozen=True, slots=True)
class Rect:
    x: float
    y: float
    w: float
    h: float


@dataclass(frozen=True, slots=True)
class ArrowGeometry:
    """Horizontal arrow pointing at a stack slot from the left."""

    start_x: float
    end_x: float
    y: float
    head_length: float = 10.0
    head_half_width: float = 7.0


@dataclass(frozen=True, slots=True)
class StackLayout:
    """Places stack slots bottom-up, centered in a canvas of the given size."""

    width: float
    height: float

    @property
    def left(self) -> float:
        return (self.width - ELEMENT_WIDTH) / 2

    @property
    def base_y(self) -> float:
        return self.height - ELEMENT_HEIGHT - BOTTOM_MARGIN

    def slot_rect(self, index: int) -> Rect:
        """Rectangle of the element at ``index`` (0 = bottom)."""
        return Rect(
            self.left,
            self.base_y - index * ELEMENT_HEIGHT,
            ELEMENT_WIDTH,
            ELEMENT_HEIGHT - ELEMENT_GAP,
        )

    def base_rect(self) -> Rect:
        """Platform drawn under the bottom slot."""
        return Rect(
            self.left - BASE_OVERHANG,
            self.base_y + ELEMENT_HEIGHT - 15.0,
            ELEMENT_WIDTH + 2 * BASE_OVERHANG,
            BASE_HEIGHT,
        )

    def push_arrow(self, index: int) -> ArrowGeometry:
        slot = self.slot_rect(index)
        start_x = slot.x - ARROW_SIZE - ARROW_MARGIN
        return ArrowGeometry(start_x=start_x, end_x=start_x + ARROW_SIZE, y=slot.y + ELEMENT_HEIGHT / 2)


def preferred_canvas_height(element_count: int) -> float:
    """Canvas height needed to show ``element_count`` slots plus headroom."""
    return max(MIN_CANVAS_HEIGHT, (element_count + 2) * ELEMENT_HEIGHT + 40.0)
