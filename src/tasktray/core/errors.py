# src/tasktray/core/errors.py

"""
Error taxonomy.

- StorageError: filesystem failures, always surfaced to the caller.
- NothingToArchiveError: archive requested with an empty/missing log.
- HotkeyParseError (+ subclasses): malformed shortcut text, raised before any state change.
- ShortcutRegistrationError: the OS layer refused a binding.

Corrupted persisted JSON is not represented here: the persistence layer absorbs it.
"""

from __future__ import annotations


class TaskTrayError(Exception):
    """Base class for every error raised by tasktray."""


class StorageError(TaskTrayError, OSError):
    pass


class NothingToArchiveError(TaskTrayError):
    def __init__(self, message: str = "No completed tasks to archive") -> None:
        super().__init__(message)


class HotkeyParseError(TaskTrayError, ValueError):
    pass


class EmptyHotkeyError(HotkeyParseError):
    def __init__(self) -> None:
        super().__init__("Empty hotkey")


class UnknownModifierError(HotkeyParseError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown modifier: {token}")
        self.token = token


class UnknownKeyError(HotkeyParseError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown key: {token}")
        self.token = token


class ShortcutRegistrationError(TaskTrayError):
    def __init__(self, combination: str, reason: str) -> None:
        super().__init__(f"Failed to register shortcut {combination}: {reason}")
        self.combination = combination
        self.reason = reason
