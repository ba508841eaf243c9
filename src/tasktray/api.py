# src/tasktray/api.py

"""
Operations the UI layer calls.

Every function takes the AppContext explicitly. Errors are raised as
tasktray.core.errors exceptions; the UI decides how to show them.
"""

from __future__ import annotations

import logging

from .config import DEFAULT_HOTKEY, DEFAULT_WINDOW_WIDTH
from .core.errors import HotkeyParseError
from .core.state import AppContext
from .hotkeys.resolver import KeyCombination, parse
from .tasks.task_models import HotkeyConfig, Task, TaskState
from .window.placement import window_position

logger = logging.getLogger(__name__)


def get_tasks(ctx: AppContext) -> TaskState:
    return ctx.tasks.read()


def save_state(ctx: AppContext, new_state: TaskState) -> None:
    """Replace the whole task state and write it to disk (no rollback on failure)."""
    ctx.tasks.replace(new_state)


def complete_task(ctx: AppContext, task: Task) -> None:
    ctx.done_log.append(task)


def archive_done(ctx: AppContext) -> str:
    return ctx.done_log.archive()


def get_hotkey(ctx: AppContext) -> str:
    return ctx.hotkey_config.get().hotkey


def set_hotkey(ctx: AppContext, hotkey: str) -> None:
    """
    Validate, rebind and persist a new global hotkey.

    A parse error leaves everything untouched. A registration error may leave
    no shortcut bound (see RebindPolicy); call get_hotkey() / ctx.shortcuts.current
    to see where things stand.
    """
    combination = parse(hotkey)

    # Held across rebind + save so the persisted text always matches the bound combination.
    with ctx.hotkey_config.lock() as slot:
        ctx.shortcuts.bind(combination, lambda: toggle_window(ctx))
        slot.value = HotkeyConfig(hotkey=hotkey)
        ctx.files.save_config(slot.value)

    logger.info("Hotkey changed to %s", hotkey)


def register_initial_hotkey(ctx: AppContext) -> KeyCombination:
    """
    Bind the configured hotkey at startup.

    An unparseable stored value falls back to the default combination; the
    stored text itself is left alone.
    """
    with ctx.hotkey_config.lock() as slot:
        hotkey = slot.value.hotkey
        try:
            combination = parse(hotkey)
        except HotkeyParseError as e:
            default = getattr(ctx.settings, "default_hotkey", DEFAULT_HOTKEY)
            logger.warning("Configured hotkey %r is invalid (%s); using %s", hotkey, e, default)
            combination = parse(default)

        ctx.shortcuts.bind(combination, lambda: toggle_window(ctx))
    return combination


def hide_window(ctx: AppContext) -> None:
    ctx.window.hide()


def toggle_window(ctx: AppContext) -> None:
    """Hide the window if shown, else move it to the pointer's display and show it."""
    window = ctx.window
    if window.is_visible():
        window.hide()
        return

    probe = ctx.displays
    try:
        pos = window_position(
            probe.get_pointer_position(),
            probe.get_display_regions(),
            getattr(ctx.settings, "window_width", DEFAULT_WINDOW_WIDTH),
            origin=probe.coordinate_origin,
        )
    except Exception:
        logger.warning("Could not query displays; showing window in place", exc_info=True)
        pos = None

    if pos is not None:
        window.set_position(pos.x, pos.y)
    window.show()
    window.focus()


def format_tooltip(task_count: int) -> str:
    return f"Task Log ({task_count} tasks)"


def tray_tooltip(ctx: AppContext) -> str:
    return format_tooltip(ctx.tasks.task_count())
