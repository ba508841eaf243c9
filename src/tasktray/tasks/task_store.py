# src/tasktray/tasks/task_store.py

from __future__ import annotations

import copy
import logging

from ..core.locks import Guarded
from .persistence import StateFiles
from .task_models import TaskState

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task state with write-through persistence.

    The UI never patches tasks one by one: it reads a snapshot, edits it and
    submits the whole aggregate back through replace().

    Thread-safety:
    - every read/replace holds the same lock, so replacements are totally
      ordered and the last writer wins
    - replace() writes to disk while holding the lock; if the write fails the
      new in-memory state is kept and the error goes to the caller
    """

    def __init__(self, files: StateFiles, initial: TaskState | None = None) -> None:
        self._files = files
        self._state: Guarded[TaskState] = Guarded(
            copy.deepcopy(initial) if initial is not None else TaskState(),
            name="tasks",
        )

    @classmethod
    def load(cls, files: StateFiles) -> TaskStore:
        state = files.load_state()
        logger.info(
            "TaskStore ready file=%s current=%d shelf=%d",
            files.state_path,
            len(state.current),
            len(state.shelf),
        )
        return cls(files, state)

    def read(self) -> TaskState:
        with self._state.lock() as slot:
            return copy.deepcopy(slot.value)

    def replace(self, new_state: TaskState) -> None:
        with self._state.lock() as slot:
            slot.value = copy.deepcopy(new_state)
            self._files.save_state(slot.value)

    def task_count(self) -> int:
        with self._state.lock() as slot:
            return slot.value.task_count()
