# src/tasktray/core/locks.py

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Generic, TypeVar

from .errors import TaskTrayError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Guarded(Generic[T]):
    """
    A value that is only read or replaced while holding its lock.

    If an unexpected exception escapes a `with guarded.lock() as slot:` block
    the value is marked poisoned (TaskTrayError is an ordinary outcome and
    does not count). The next holder gets a warning in the log and the value as
    it was left; poisoning never blocks or raises on acquisition.

    The lock is re-entrant so a holder may call helpers that lock again.
    """

    def __init__(self, value: T, *, name: str = "value") -> None:
        self._value = value
        self._name = name
        self._lock = threading.RLock()
        self._poisoned = False

    @property
    def poisoned(self) -> bool:
        return self._poisoned

    @contextmanager
    def lock(self) -> Iterator[Guarded[T]]:
        with self._lock:
            if self._poisoned:
                logger.warning(
                    "Lock for %s was poisoned by a failed holder; continuing with current value",
                    self._name,
                )
                self._poisoned = False
            try:
                yield self
            except TaskTrayError:
                raise
            except BaseException:
                self._poisoned = True
                raise

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new: T) -> None:
        self._value = new

    def get(self) -> T:
        """Read the value under the lock."""
        with self.lock() as slot:
            return slot.value
