# src/tasktray/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..hotkeys.binding import ShortcutBindingManager
from ..tasks.done_log import CompletionLog
from ..tasks.persistence import StateFiles
from ..tasks.task_models import HotkeyConfig
from ..tasks.task_store import TaskStore
from .locks import Guarded
from .ports import DisplayProbe, ShortcutBackend, WindowController


@dataclass
class AppContext:
    """
    Everything the boundary operations need, built once at startup.

    Lives until process exit; only the shortcut listener is stopped on the way out.
    """

    # Store Settings on the context for easy access in other modules.
    settings: object

    files: StateFiles
    tasks: TaskStore
    done_log: CompletionLog
    hotkey_config: Guarded[HotkeyConfig]
    shortcuts: ShortcutBindingManager
    shortcut_backend: ShortcutBackend
    displays: DisplayProbe
    window: WindowController
