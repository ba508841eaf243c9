# src/tasktray/hotkeys/resolver.py

"""
Hotkey text -> KeyCombination.

Grammar: `[modifier+]*key`, split on "+". The last token is the key, every
token before it is a modifier. Matching is case-insensitive.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Flag, StrEnum, auto

from ..core.errors import EmptyHotkeyError, UnknownKeyError, UnknownModifierError


class Modifiers(Flag):
    SUPER = auto()
    CONTROL = auto()
    ALT = auto()
    SHIFT = auto()


class Key(StrEnum):
    """Physical key, named after the W3C `KeyboardEvent.code` values."""

    A = "KeyA"
    B = "KeyB"
    C = "KeyC"
    D = "KeyD"
    E = "KeyE"
    F = "KeyF"
    G = "KeyG"
    H = "KeyH"
    I = "KeyI"  # noqa: E741
    J = "KeyJ"
    K = "KeyK"
    L = "KeyL"
    M = "KeyM"
    N = "KeyN"
    O = "KeyO"  # noqa: E741
    P = "KeyP"
    Q = "KeyQ"
    R = "KeyR"
    S = "KeyS"
    T = "KeyT"
    U = "KeyU"
    V = "KeyV"
    W = "KeyW"
    X = "KeyX"
    Y = "KeyY"
    Z = "KeyZ"

    DIGIT_0 = "Digit0"
    DIGIT_1 = "Digit1"
    DIGIT_2 = "Digit2"
    DIGIT_3 = "Digit3"
    DIGIT_4 = "Digit4"
    DIGIT_5 = "Digit5"
    DIGIT_6 = "Digit6"
    DIGIT_7 = "Digit7"
    DIGIT_8 = "Digit8"
    DIGIT_9 = "Digit9"

    EQUAL = "Equal"
    MINUS = "Minus"
    BRACKET_LEFT = "BracketLeft"
    BRACKET_RIGHT = "BracketRight"
    BACKSLASH = "Backslash"
    SEMICOLON = "Semicolon"
    QUOTE = "Quote"
    BACKQUOTE = "Backquote"
    COMMA = "Comma"
    PERIOD = "Period"
    SLASH = "Slash"

    SPACE = "Space"
    ENTER = "Enter"
    TAB = "Tab"
    ESCAPE = "Escape"
    BACKSPACE = "Backspace"
    DELETE = "Delete"
    ARROW_UP = "ArrowUp"
    ARROW_DOWN = "ArrowDown"
    ARROW_LEFT = "ArrowLeft"
    ARROW_RIGHT = "ArrowRight"

    F1 = "F1"
    F2 = "F2"
    F3 = "F3"
    F4 = "F4"
    F5 = "F5"
    F6 = "F6"
    F7 = "F7"
    F8 = "F8"
    F9 = "F9"
    F10 = "F10"
    F11 = "F11"
    F12 = "F12"

    @property
    def label(self) -> str:
        """Text used when rendering a combination ("K", "7", "=", "Space")."""
        return _LABELS[self]


class ShortcutEvent(StrEnum):
    PRESSED = "pressed"
    RELEASED = "released"


_MODIFIER_ALIASES: dict[str, Modifiers] = {
    "cmd": Modifiers.SUPER,
    "command": Modifiers.SUPER,
    "super": Modifiers.SUPER,
    "meta": Modifiers.SUPER,
    "ctrl": Modifiers.CONTROL,
    "control": Modifiers.CONTROL,
    "alt": Modifiers.ALT,
    "option": Modifiers.ALT,
    "shift": Modifiers.SHIFT,
}

# Rendering order and names: Cmd+Ctrl+Alt+Shift+<key>
_MODIFIER_NAMES: tuple[tuple[Modifiers, str], ...] = (
    (Modifiers.SUPER, "Cmd"),
    (Modifiers.CONTROL, "Ctrl"),
    (Modifiers.ALT, "Alt"),
    (Modifiers.SHIFT, "Shift"),
)

_PUNCTUATION: dict[Key, tuple[str, str]] = {
    Key.EQUAL: ("=", "equal"),
    Key.MINUS: ("-", "minus"),
    Key.BRACKET_LEFT: ("[", "bracketleft"),
    Key.BRACKET_RIGHT: ("]", "bracketright"),
    Key.BACKSLASH: ("\\", "backslash"),
    Key.SEMICOLON: (";", "semicolon"),
    Key.QUOTE: ("'", "quote"),
    Key.BACKQUOTE: ("`", "backquote"),
    Key.COMMA: (",", "comma"),
    Key.PERIOD: (".", "period"),
    Key.SLASH: ("/", "slash"),
}

_NAMED: dict[Key, tuple[str, ...]] = {
    Key.SPACE: ("space",),
    Key.ENTER: ("enter", "return"),
    Key.TAB: ("tab",),
    Key.ESCAPE: ("escape", "esc"),
    Key.BACKSPACE: ("backspace",),
    Key.DELETE: ("delete",),
    Key.ARROW_UP: ("up",),
    Key.ARROW_DOWN: ("down",),
    Key.ARROW_LEFT: ("left",),
    Key.ARROW_RIGHT: ("right",),
}


def _build_tables() -> tuple[dict[str, Key], dict[Key, str]]:
    aliases: dict[str, Key] = {}
    labels: dict[Key, str] = {}

    for ch in string.ascii_lowercase:
        key = Key(f"Key{ch.upper()}")
        aliases[ch] = key
        labels[key] = ch.upper()

    for ch in string.digits:
        key = Key(f"Digit{ch}")
        aliases[ch] = key
        labels[key] = ch

    for key, (symbol, word) in _PUNCTUATION.items():
        aliases[symbol] = key
        aliases[word] = key
        labels[key] = symbol

    for key, names in _NAMED.items():
        for name in names:
            aliases[name] = key
        labels[key] = names[0].capitalize()

    for n in range(1, 13):
        key = Key(f"F{n}")
        aliases[f"f{n}"] = key
        labels[key] = f"F{n}"

    return aliases, labels


_KEY_ALIASES, _LABELS = _build_tables()


@dataclass(frozen=True, slots=True)
class KeyCombination:
    """A key plus an optional modifier set (None when no modifier is held)."""

    key: Key
    modifiers: Modifiers | None = None

    def has(self, modifier: Modifiers) -> bool:
        return self.modifiers is not None and modifier in self.modifiers

    def __str__(self) -> str:
        parts = [name for mod, name in _MODIFIER_NAMES if self.has(mod)]
        parts.append(self.key.label)
        return "+".join(parts)


def parse(spec: str) -> KeyCombination:
    """
    Parse text such as "Cmd+Ctrl+Alt+Shift+=" or "ctrl+alt+k".

    Raises EmptyHotkeyError, UnknownModifierError or UnknownKeyError; never
    returns a partially applied combination.
    """
    if not spec:
        raise EmptyHotkeyError()

    *modifier_tokens, key_token = spec.split("+")

    modifiers = Modifiers(0)
    for token in modifier_tokens:
        mod = _MODIFIER_ALIASES.get(token.lower())
        if mod is None:
            raise UnknownModifierError(token)
        modifiers |= mod

    key = _KEY_ALIASES.get(key_token.lower())
    if key is None:
        raise UnknownKeyError(key_token)

    return KeyCombination(key=key, modifiers=modifiers or None)
