# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasktray.cli.bootstrap import create_app_context
from tasktray.core.state import AppContext
from tasktray.window.placement import Display, Rect

from .fakes import FakeDisplayProbe, FakeShortcutBackend, FakeWindow


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the bootstrap and api modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the user's environment and ~/.tasks.
    """
    data_dir = tmp_path / "tasks"
    return SimpleNamespace(
        app_name="tasktray-test",
        log_level="DEBUG",
        log_to_file=False,
        data_dir=data_dir,
        state_path=data_dir / "state.json",
        config_path=data_dir / "config.json",
        done_path=data_dir / "done.md",
        log_path=data_dir / "tasktray.log",
        default_hotkey="Cmd+Ctrl+Alt+Shift+=",
        window_width=400,
        rebind_policy="fail_forward",
    )


@pytest.fixture()
def backend() -> FakeShortcutBackend:
    return FakeShortcutBackend()


@pytest.fixture()
def displays() -> FakeDisplayProbe:
    return FakeDisplayProbe(displays=[Display(Rect(0, 0, 1920, 1080), is_primary=True)])


@pytest.fixture()
def window() -> FakeWindow:
    return FakeWindow()


@pytest.fixture()
def ctx(
    settings: SimpleNamespace,
    backend: FakeShortcutBackend,
    displays: FakeDisplayProbe,
    window: FakeWindow,
) -> AppContext:
    """
    AppContext wired with deterministic fakes.

    NOTE: persistence is real (files under tmp_path) because its behaviour is
    part of what we want to test.
    """
    return create_app_context(settings=settings, backend=backend, displays=displays, window=window)
