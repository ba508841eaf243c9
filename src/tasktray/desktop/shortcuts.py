# src/tasktray/desktop/shortcuts.py

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field

from pynput import keyboard

from ..core.errors import ShortcutRegistrationError
from ..core.ports import ShortcutCallback
from ..hotkeys.resolver import Key, KeyCombination, Modifiers, ShortcutEvent

logger = logging.getLogger(__name__)

_PYNPUT_MODIFIERS: tuple[tuple[Modifiers, str], ...] = (
    (Modifiers.SUPER, "<cmd>"),
    (Modifiers.CONTROL, "<ctrl>"),
    (Modifiers.ALT, "<alt>"),
    (Modifiers.SHIFT, "<shift>"),
)

_PYNPUT_NAMED: dict[Key, str] = {
    Key.SPACE: "<space>",
    Key.ENTER: "<enter>",
    Key.TAB: "<tab>",
    Key.ESCAPE: "<esc>",
    Key.BACKSPACE: "<backspace>",
    Key.DELETE: "<delete>",
    Key.ARROW_UP: "<up>",
    Key.ARROW_DOWN: "<down>",
    Key.ARROW_LEFT: "<left>",
    Key.ARROW_RIGHT: "<right>",
    **{Key(f"F{n}"): f"<f{n}>" for n in range(1, 13)},
}


def to_pynput_hotkey(combination: KeyCombination) -> str:
    """Render a combination in pynput's HotKey.parse syntax, e.g. "<ctrl>+<alt>+k"."""
    parts = [name for mod, name in _PYNPUT_MODIFIERS if combination.has(mod)]
    named = _PYNPUT_NAMED.get(combination.key)
    parts.append(named if named is not None else combination.key.label.lower())
    return "+".join(parts)


@dataclass
class _Registration:
    hotkey: keyboard.HotKey
    keys: set[keyboard.Key | keyboard.KeyCode]
    callback: ShortcutCallback
    held: bool = False
    fired: list[ShortcutEvent] = field(default_factory=list)


class PynputShortcutBackend:
    """
    Global shortcuts on top of one pynput keyboard listener.

    The listener thread is started on first registration and keeps running for
    the process lifetime. Callbacks run on that thread, outside the
    registration lock.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._registrations: dict[KeyCombination, _Registration] = {}
        self._listener: keyboard.Listener | None = None

    def register(self, combination: KeyCombination, callback: ShortcutCallback) -> None:
        with self._lock:
            if combination in self._registrations:
                raise ShortcutRegistrationError(str(combination), "already registered")

            try:
                keys = keyboard.HotKey.parse(to_pynput_hotkey(combination))
            except ValueError as e:
                raise ShortcutRegistrationError(str(combination), str(e)) from e

            fired: list[ShortcutEvent] = []
            self._registrations[combination] = _Registration(
                hotkey=keyboard.HotKey(keys, lambda: fired.append(ShortcutEvent.PRESSED)),
                keys=set(keys),
                callback=callback,
                fired=fired,
            )
            self._ensure_listener()

        logger.debug("pynput hotkey registered: %s", to_pynput_hotkey(combination))

    def unregister(self, combination: KeyCombination) -> None:
        with self._lock:
            if self._registrations.pop(combination, None) is None:
                raise ShortcutRegistrationError(str(combination), "not registered")
        logger.debug("pynput hotkey unregistered: %s", to_pynput_hotkey(combination))

    def stop(self) -> None:
        with self._lock:
            listener, self._listener = self._listener, None
        if listener is not None:
            listener.stop()

    # ---- listener side ----

    def _ensure_listener(self) -> None:
        if self._listener is not None:
            return
        listener = keyboard.Listener(on_press=self._on_press, on_release=self._on_release)
        listener.daemon = True
        try:
            listener.start()
        except Exception as e:
            raise ShortcutRegistrationError("listener", str(e)) from e
        self._listener = listener

    def _canonical(self, key):
        listener = self._listener
        return listener.canonical(key) if listener is not None else key

    def _on_press(self, key, injected: bool = False) -> None:
        canon = self._canonical(key)
        pending: list[tuple[ShortcutCallback, ShortcutEvent]] = []
        with self._lock:
            for reg in self._registrations.values():
                reg.hotkey.press(canon)
                while reg.fired:
                    reg.held = True
                    pending.append((reg.callback, reg.fired.pop(0)))
        self._deliver(pending)

    def _on_release(self, key, injected: bool = False) -> None:
        canon = self._canonical(key)
        pending: list[tuple[ShortcutCallback, ShortcutEvent]] = []
        with self._lock:
            for reg in self._registrations.values():
                reg.hotkey.release(canon)
                if reg.held and canon in reg.keys:
                    reg.held = False
                    pending.append((reg.callback, ShortcutEvent.RELEASED))
        self._deliver(pending)

    @staticmethod
    def _deliver(pending: list[tuple[ShortcutCallback, ShortcutEvent]]) -> None:
        for callback, event in pending:
            try:
                callback(event)
            except Exception:
                logger.exception("Shortcut callback failed (%s)", event)
