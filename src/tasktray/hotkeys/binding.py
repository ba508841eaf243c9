# src/tasktray/hotkeys/binding.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from functools import partial

from ..core.errors import ShortcutRegistrationError
from ..core.locks import Guarded
from ..core.ports import ShortcutBackend
from .resolver import KeyCombination, ShortcutEvent

logger = logging.getLogger(__name__)

ShortcutAction = Callable[[], None]


class RebindPolicy(StrEnum):
    """
    What bind() does when the new combination cannot be registered.

    - fail_forward: the old binding is considered gone once unregistration was
      attempted; the manager stays unbound.
    - restore_previous: try to register the old combination again.
    """

    FAIL_FORWARD = "fail_forward"
    RESTORE_PREVIOUS = "restore_previous"


@dataclass(frozen=True, slots=True)
class Binding:
    combination: KeyCombination
    action: ShortcutAction


class ShortcutBindingManager:
    """
    Owns the single live global shortcut.

    Unbound -> bind() -> Bound(combination, action). Swapping unregisters the
    old combination first (best effort), then registers the new one.

    Presses are delivered by the backend on its own thread. The dispatch
    decision takes the same lock as bind(), so a press racing a swap runs
    exactly one action: the old one if it won the lock, the new one otherwise.
    Events for a combination that is no longer bound are dropped.
    """

    def __init__(
        self,
        backend: ShortcutBackend,
        *,
        policy: RebindPolicy = RebindPolicy.FAIL_FORWARD,
    ) -> None:
        self._backend = backend
        self._policy = policy
        self._binding: Guarded[Binding | None] = Guarded(None, name="shortcut")

    @property
    def policy(self) -> RebindPolicy:
        return self._policy

    @property
    def current(self) -> KeyCombination | None:
        binding = self._binding.get()
        return binding.combination if binding is not None else None

    def bind(self, combination: KeyCombination, action: ShortcutAction) -> None:
        with self._binding.lock() as slot:
            previous = slot.value
            if previous is not None:
                self._unregister_quietly(previous.combination)
                slot.value = None

            try:
                self._register(combination)
            except ShortcutRegistrationError:
                if previous is not None and self._policy is RebindPolicy.RESTORE_PREVIOUS:
                    slot.value = self._restore(previous)
                raise

            slot.value = Binding(combination, action)
            logger.info("Global shortcut bound: %s", combination)

    def unbind(self) -> None:
        with self._binding.lock() as slot:
            if slot.value is None:
                return
            self._unregister_quietly(slot.value.combination)
            logger.info("Global shortcut unbound: %s", slot.value.combination)
            slot.value = None

    # ---- internals ----

    def _register(self, combination: KeyCombination) -> None:
        try:
            self._backend.register(combination, partial(self._dispatch, combination))
        except ShortcutRegistrationError:
            raise
        except Exception as e:
            raise ShortcutRegistrationError(str(combination), str(e)) from e

    def _unregister_quietly(self, combination: KeyCombination) -> None:
        try:
            self._backend.unregister(combination)
        except Exception:
            # A stale registration is less harmful than refusing the new one.
            logger.warning("Failed to unregister shortcut %s", combination, exc_info=True)

    def _restore(self, previous: Binding) -> Binding | None:
        try:
            self._register(previous.combination)
        except ShortcutRegistrationError:
            logger.warning("Could not restore previous shortcut %s", previous.combination)
            return None
        logger.info("Restored previous shortcut %s", previous.combination)
        return previous

    def _dispatch(self, combination: KeyCombination, event: ShortcutEvent) -> None:
        if event is not ShortcutEvent.PRESSED:
            return

        with self._binding.lock() as slot:
            binding = slot.value
            if binding is None or binding.combination != combination:
                logger.debug("Dropping press for unbound shortcut %s", combination)
                return
            action = binding.action

        try:
            action()
        except Exception:
            logger.exception("Shortcut action failed for %s", combination)
