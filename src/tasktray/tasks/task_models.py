# src/tasktray/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..config import DEFAULT_HOTKEY


def _require(obj: dict[str, Any], key: str, kind: type, what: str) -> Any:
    if key not in obj:
        raise ValueError(f"{what}: missing field '{key}'")
    val = obj[key]
    if not isinstance(val, kind):
        raise ValueError(f"{what}: field '{key}' must be {kind.__name__}")
    return val


def _require_object(raw: Any, what: str) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise ValueError(f"{what}: expected an object, got {type(raw).__name__}")
    return raw


@dataclass(slots=True)
class Note:
    text: str
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "completed": self.completed}

    @classmethod
    def from_dict(cls, raw: Any) -> Note:
        obj = _require_object(raw, "note")
        completed = obj.get("completed", False)
        if not isinstance(completed, bool):
            raise ValueError("note: field 'completed' must be bool")
        return cls(text=_require(obj, "text", str, "note"), completed=completed)


@dataclass(slots=True)
class Task:
    text: str
    notes: list[Note] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "notes": [n.to_dict() for n in self.notes]}

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        obj = _require_object(raw, "task")
        notes_raw = obj.get("notes", [])
        if not isinstance(notes_raw, list):
            raise ValueError("task: field 'notes' must be list")
        return cls(
            text=_require(obj, "text", str, "task"),
            notes=[Note.from_dict(n) for n in notes_raw],
        )


@dataclass(slots=True)
class TaskState:
    """
    Root aggregate: the working list and the shelf.

    Order inside each list is meaningful; duplicate texts are allowed.
    """

    current: list[Task] = field(default_factory=list)
    shelf: list[Task] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "current": [t.to_dict() for t in self.current],
            "shelf": [t.to_dict() for t in self.shelf],
        }

    @classmethod
    def from_dict(cls, raw: Any) -> TaskState:
        obj = _require_object(raw, "state")
        current = _require(obj, "current", list, "state")
        shelf = _require(obj, "shelf", list, "state")
        return cls(
            current=[Task.from_dict(t) for t in current],
            shelf=[Task.from_dict(t) for t in shelf],
        )

    def task_count(self) -> int:
        return len(self.current) + len(self.shelf)


@dataclass(slots=True)
class HotkeyConfig:
    hotkey: str = DEFAULT_HOTKEY

    def to_dict(self) -> dict[str, Any]:
        return {"hotkey": self.hotkey}

    @classmethod
    def from_dict(cls, raw: Any, *, default_hotkey: str = DEFAULT_HOTKEY) -> HotkeyConfig:
        obj = _require_object(raw, "config")
        hotkey = obj.get("hotkey", default_hotkey)
        if not isinstance(hotkey, str):
            raise ValueError("config: field 'hotkey' must be str")
        return cls(hotkey=hotkey)
