# src/tasktray/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the data directory exists,
- loads task state and hotkey config from disk (defaults on absence/corruption),
- wires the platform ports (shortcuts, displays, window) into AppContext.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.locks import Guarded
from ..core.ports import DisplayProbe, ShortcutBackend, WindowController
from ..core.state import AppContext
from ..hotkeys.binding import RebindPolicy, ShortcutBindingManager
from ..tasks.done_log import CompletionLog
from ..tasks.persistence import StateFiles
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    try:
        settings.data_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        # Saves will report the failure; loading works from defaults.
        logger.warning("Could not create data dir %s", settings.data_dir, exc_info=True)


def create_app_context(
    *,
    settings=None,
    backend: ShortcutBackend | None = None,
    displays: DisplayProbe | None = None,
    window: WindowController | None = None,
) -> AppContext:
    """
    Build AppContext from the provided settings and ports.

    Keeping settings and ports injectable makes the app testable without a
    windowing system. Missing ports fall back to the pynput/screeninfo desktop
    implementations and a headless window.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if backend is None:
        from ..desktop.shortcuts import PynputShortcutBackend

        backend = PynputShortcutBackend()
    if displays is None:
        from ..desktop.screens import ScreenInfoDisplayProbe

        displays = ScreenInfoDisplayProbe()
    if window is None:
        from ..desktop.headless import HeadlessWindow

        window = HeadlessWindow()

    files = StateFiles(
        settings.state_path,
        settings.config_path,
        default_hotkey=settings.default_hotkey,
    )
    config = files.load_config()
    logger.info("Loaded hotkey config: %s", config.hotkey)

    return AppContext(
        settings=settings,
        files=files,
        tasks=TaskStore.load(files),
        done_log=CompletionLog(settings.done_path),
        hotkey_config=Guarded(config, name="hotkey_config"),
        shortcuts=ShortcutBindingManager(backend, policy=RebindPolicy(settings.rebind_policy)),
        shortcut_backend=backend,
        displays=displays,
        window=window,
    )
