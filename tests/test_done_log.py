# tests/test_done_log.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from tasktray.core.errors import NothingToArchiveError
from tasktray.tasks.done_log import CompletionLog, format_done_entry
from tasktray.tasks.task_models import Note, Task


class _Clock:
    def __init__(self, *moments: datetime) -> None:
        self._moments = list(moments)

    def __call__(self) -> datetime:
        return self._moments.pop(0) if len(self._moments) > 1 else self._moments[0]


def test_entry_format_with_notes() -> None:
    task = Task("Ship release", [Note("tag the build", True), Note("announce")])
    assert format_done_entry(task, datetime(2024, 5, 1, 9, 30)) == (
        "- 2024-05-01: Ship release\n"
        "  ✓ tag the build\n"
        "  ○ announce\n"
    )


def test_append_keeps_call_order_and_creates_dirs(tmp_path: Path) -> None:
    log = CompletionLog(
        tmp_path / "nested" / "done.md",
        clock=_Clock(datetime(2024, 5, 2), datetime(2024, 5, 1)),
    )
    log.append(Task("later date first"))
    log.append(Task("earlier date second"))

    assert log.path.read_text("utf-8") == (
        "- 2024-05-02: later date first\n"
        "- 2024-05-01: earlier date second\n"
    )


def test_append_never_truncates(tmp_path: Path) -> None:
    path = tmp_path / "done.md"
    path.write_text("- 2023-01-01: old\n", "utf-8")

    CompletionLog(path, clock=lambda: datetime(2024, 1, 1)).append(Task("new"))
    assert path.read_text("utf-8") == "- 2023-01-01: old\n- 2024-01-01: new\n"


def test_archive_without_log_fails(tmp_path: Path) -> None:
    with pytest.raises(NothingToArchiveError):
        CompletionLog(tmp_path / "done.md").archive()


def test_archive_twice_second_has_nothing(tmp_path: Path) -> None:
    log = CompletionLog(tmp_path / "done.md", clock=lambda: datetime(2024, 6, 7, 8, 9, 10))
    log.append(Task("a"))

    name = log.archive()

    assert name == "done_2024-06-07_080910.md"
    assert (tmp_path / name).read_text("utf-8") == "- 2024-06-07: a\n"
    assert log.path.read_text("utf-8") == ""

    with pytest.raises(NothingToArchiveError, match="No completed tasks to archive"):
        log.archive()


def test_archive_in_same_second_does_not_overwrite(tmp_path: Path) -> None:
    log = CompletionLog(tmp_path / "done.md", clock=lambda: datetime(2024, 6, 7, 8, 9, 10))

    log.append(Task("first"))
    first = log.archive()
    log.append(Task("second"))
    second = log.archive()

    assert first != second
    assert second == "done_2024-06-07_080910_1.md"
    assert "first" in (tmp_path / first).read_text("utf-8")
    assert "second" in (tmp_path / second).read_text("utf-8")
