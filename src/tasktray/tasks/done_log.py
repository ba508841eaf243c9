# src/tasktray/tasks/done_log.py

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from ..core.errors import NothingToArchiveError, StorageError
from .task_models import Task

logger = logging.getLogger(__name__)

DONE_MARK = "✓"
OPEN_MARK = "○"


def format_done_entry(task: Task, when: datetime) -> str:
    """
    One markdown list item per finished task, notes indented below it:

        - 2024-05-01: Ship release
          ✓ tag the build
          ○ announce
    """
    lines = [f"- {when:%Y-%m-%d}: {task.text}\n"]
    for note in task.notes:
        mark = DONE_MARK if note.completed else OPEN_MARK
        lines.append(f"  {mark} {note.text}\n")
    return "".join(lines)


class CompletionLog:
    """Append-only `done.md` plus timestamped archives next to it."""

    def __init__(self, path: str | Path, *, clock: Callable[[], datetime] = datetime.now) -> None:
        self._path = Path(path)
        self._clock = clock

    @property
    def path(self) -> Path:
        return self._path

    def append(self, task: Task) -> None:
        entry = format_done_entry(task, self._clock())
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("a", encoding="utf-8") as f:
                f.write(entry)
        except OSError as e:
            raise StorageError(f"Failed to append to {self._path}: {e}") from e
        logger.info("Logged completed task (%d notes) to %s", len(task.notes), self._path)

    def archive(self) -> str:
        """
        Copy the live log to `done_<YYYY-MM-DD_HHMMSS>.md`, then truncate it.

        Returns the archive file name. Copy-then-truncate: a crash in between
        leaves the entries in both files.
        """
        try:
            if not self._path.exists() or self._path.stat().st_size == 0:
                raise NothingToArchiveError()
        except OSError as e:
            raise StorageError(f"Failed to inspect {self._path}: {e}") from e

        target = self._archive_target(self._clock())
        try:
            shutil.copyfile(self._path, target)
            self._path.write_text("", "utf-8")
        except OSError as e:
            raise StorageError(f"Failed to archive {self._path}: {e}") from e

        logger.info("Archived completion log to %s", target)
        return target.name

    def _archive_target(self, when: datetime) -> Path:
        stem = f"{self._path.stem}_{when:%Y-%m-%d_%H%M%S}"
        target = self._path.with_name(f"{stem}{self._path.suffix}")
        n = 1
        while target.exists():
            target = self._path.with_name(f"{stem}_{n}{self._path.suffix}")
            n += 1
        return target
