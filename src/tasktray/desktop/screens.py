# src/tasktray/desktop/screens.py

from __future__ import annotations

import logging

from pynput import mouse
from screeninfo import get_monitors

from ..window.placement import CoordinateOrigin, Display, Point, Rect

logger = logging.getLogger(__name__)


class ScreenInfoDisplayProbe:
    """
    Monitors from screeninfo, pointer from pynput.

    Both libraries report virtual-desktop coordinates with the origin at the
    top-left of the primary monitor.
    """

    coordinate_origin = CoordinateOrigin.TOP_LEFT

    def __init__(self) -> None:
        self._mouse = mouse.Controller()

    def get_display_regions(self) -> list[Display]:
        displays = [
            Display(
                frame=Rect(x=m.x, y=m.y, width=m.width, height=m.height),
                is_primary=bool(m.is_primary),
                name=m.name,
            )
            for m in get_monitors()
        ]
        logger.debug("Displays: %s", displays)
        return displays

    def get_pointer_position(self) -> Point:
        x, y = self._mouse.position
        return Point(x=x, y=y)
