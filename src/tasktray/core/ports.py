# src/tasktray/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

Global shortcuts, screens and the window itself belong to the host platform.
The core depends on these Protocols instead, so the resolver, binding manager
and placement logic can be exercised without a windowing system.
"""

from collections.abc import Callable, Sequence
from typing import Protocol

from ..hotkeys.resolver import KeyCombination, ShortcutEvent
from ..window.placement import CoordinateOrigin, Display, Point

ShortcutCallback = Callable[[ShortcutEvent], None]
# Invoked by the backend on its own thread, once per press and once per release.


class ShortcutBackend(Protocol):
    """OS-level global shortcut registry."""

    def register(self, combination: KeyCombination, callback: ShortcutCallback) -> None: ...
    def unregister(self, combination: KeyCombination) -> None: ...


class DisplayProbe(Protocol):
    """
    Current display layout and pointer location.

    Both are reported in the same coordinate space, described by
    `coordinate_origin`.
    """

    @property
    def coordinate_origin(self) -> CoordinateOrigin: ...

    def get_display_regions(self) -> Sequence[Display]: ...
    def get_pointer_position(self) -> Point: ...


class WindowController(Protocol):
    """The single utility window, owned by the UI toolkit."""

    def is_visible(self) -> bool: ...
    def show(self) -> None: ...
    def hide(self) -> None: ...
    def focus(self) -> None: ...
    def set_position(self, x: float, y: float) -> None: ...
