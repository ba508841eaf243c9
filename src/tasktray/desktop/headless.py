# src/tasktray/desktop/headless.py

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class HeadlessWindow:
    """WindowController used when no UI toolkit is attached: tracks state and logs it."""

    def __init__(self) -> None:
        self.visible = False
        self.position: tuple[float, float] | None = None

    def is_visible(self) -> bool:
        return self.visible

    def show(self) -> None:
        self.visible = True
        logger.info("Window shown at %s", self.position)

    def hide(self) -> None:
        self.visible = False
        logger.info("Window hidden")

    def focus(self) -> None:
        return

    def set_position(self, x: float, y: float) -> None:
        self.position = (x, y)
