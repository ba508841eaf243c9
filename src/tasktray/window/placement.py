# src/tasktray/window/placement.py

"""
Where the window appears when the hotkey shows it.

The window's top-right corner is pinned to the top-right corner of the display
under the pointer. Display probes may report coordinates with the Y axis
growing up from the bottom of the primary display (Cocoa style) or down from
its top (toolkit style); the result is always in top-left coordinates, using
the primary display's height as the flip reference.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum


class CoordinateOrigin(StrEnum):
    TOP_LEFT = "top_left"
    BOTTOM_LEFT = "bottom_left"


@dataclass(frozen=True, slots=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains(self, p: Point) -> bool:
        # Half-open so a point on a shared edge belongs to one display only.
        return self.x <= p.x < self.right and self.y <= p.y < self.bottom


@dataclass(frozen=True, slots=True)
class Display:
    frame: Rect
    is_primary: bool = False
    name: str | None = None


def primary_display(displays: Sequence[Display]) -> Display | None:
    for d in displays:
        if d.is_primary:
            return d
    return displays[0] if displays else None


def display_at(pointer: Point, displays: Sequence[Display]) -> Display | None:
    """First display whose frame contains the pointer."""
    for d in displays:
        if d.frame.contains(pointer):
            return d
    return None


def flip_y(y: float, primary_height: float) -> float:
    """Convert a bottom-left Y into a top-left Y (the conversion is its own inverse)."""
    return primary_height - y


def window_position(
    pointer: Point,
    displays: Sequence[Display],
    window_width: float,
    *,
    origin: CoordinateOrigin = CoordinateOrigin.TOP_LEFT,
) -> Point | None:
    """
    Top-left corner for the window in top-left coordinates.

    Falls back to the primary display if no display contains the pointer.
    Returns None when there are no displays at all.
    """
    primary = primary_display(displays)
    if primary is None:
        return None

    target = display_at(pointer, displays) or primary
    frame = target.frame
    x = frame.right - window_width

    if origin is CoordinateOrigin.BOTTOM_LEFT:
        # In bottom-left space the top edge is the larger Y.
        y = flip_y(frame.bottom, primary.frame.height)
    else:
        y = frame.y

    return Point(x=x, y=y)
