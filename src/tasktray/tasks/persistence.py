# src/tasktray/tasks/persistence.py

from __future__ import annotations

"""
JSON persistence for the task state and the hotkey configuration.

Loading never blocks startup: a missing file yields defaults, a corrupted file
is moved aside to `<name>.corrupted` (replacing any older copy) and also yields
defaults. Saving is a whole-file overwrite and raises StorageError on failure.
"""

import json
import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from ..config import DEFAULT_HOTKEY
from ..core.errors import StorageError
from .task_models import HotkeyConfig, TaskState

logger = logging.getLogger(__name__)

T = TypeVar("T")

CORRUPTED_SUFFIX = ".corrupted"


def corrupted_path(path: Path) -> Path:
    return path.with_name(path.name + CORRUPTED_SUFFIX)


class StateFiles:
    """Reads and writes `state.json` / `config.json` inside one data directory."""

    def __init__(
        self,
        state_path: str | Path,
        config_path: str | Path,
        *,
        default_hotkey: str = DEFAULT_HOTKEY,
    ) -> None:
        self._state_path = Path(state_path)
        self._config_path = Path(config_path)
        self._default_hotkey = default_hotkey

    @property
    def state_path(self) -> Path:
        return self._state_path

    @property
    def config_path(self) -> Path:
        return self._config_path

    # ---- task state ----

    def load_state(self) -> TaskState:
        return self._load(self._state_path, TaskState.from_dict, TaskState)

    def save_state(self, state: TaskState) -> None:
        self._save(self._state_path, state.to_dict())
        logger.debug(
            "Saved state current=%d shelf=%d to %s",
            len(state.current),
            len(state.shelf),
            self._state_path,
        )

    # ---- hotkey config ----

    def load_config(self) -> HotkeyConfig:
        return self._load(
            self._config_path,
            lambda raw: HotkeyConfig.from_dict(raw, default_hotkey=self._default_hotkey),
            lambda: HotkeyConfig(hotkey=self._default_hotkey),
        )

    def save_config(self, config: HotkeyConfig) -> None:
        self._save(self._config_path, config.to_dict())
        logger.debug("Saved config hotkey=%s to %s", config.hotkey, self._config_path)

    # ---- low-level helpers ----

    def _load(self, path: Path, decode: Callable[[Any], T], default: Callable[[], T]) -> T:
        if not path.exists():
            return default()

        try:
            raw = path.read_bytes()
        except OSError:
            logger.warning("Failed to read %s; starting with defaults", path, exc_info=True)
            return default()

        try:
            # Strict UTF-8: no BOM, no UTF-16/32 sniffing.
            return decode(json.loads(raw.decode("utf-8")))
        except (ValueError, TypeError, RecursionError) as e:
            logger.warning("Failed to parse %s: %s. Starting fresh.", path, e)
            self._quarantine(path)
            return default()

    @staticmethod
    def _quarantine(path: Path) -> None:
        backup = corrupted_path(path)
        try:
            os.replace(path, backup)
            logger.warning("Moved corrupted file to %s", backup)
        except OSError:
            logger.exception("Failed to move corrupted file %s aside", path)

    @staticmethod
    def _save(path: Path, payload: dict[str, Any]) -> None:
        content = json.dumps(payload, ensure_ascii=False, indent=2)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, "utf-8")
        except OSError as e:
            raise StorageError(f"Failed to write {path}: {e}") from e
