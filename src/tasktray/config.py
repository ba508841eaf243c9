# src/tasktray/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Every path derives from a single per-user data directory.
- Nothing touches the filesystem at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKTRAY"

DEFAULT_HOTKEY = "Cmd+Ctrl+Alt+Shift+="
DEFAULT_WINDOW_WIDTH = 400

REBIND_FAIL_FORWARD = "fail_forward"
REBIND_RESTORE_PREVIOUS = "restore_previous"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_choice(name: str, default: str, choices: set[str]) -> str:
    raw = _env(name, default).strip().lower()
    return raw if raw in choices else default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Local data paths ----
    data_dir: Path
    state_path: Path
    config_path: Path
    done_path: Path
    log_path: Path

    # ---- Hotkey / window ----
    default_hotkey: str
    window_width: int
    rebind_policy: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "tasktray").strip() or "tasktray"
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        log_to_file = _env_bool(_k("LOG_TO_FILE"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path.home() / ".tasks")

        default_hotkey = _env(_k("DEFAULT_HOTKEY"), DEFAULT_HOTKEY).strip() or DEFAULT_HOTKEY
        window_width = max(1, _env_int(_k("WINDOW_WIDTH"), DEFAULT_WINDOW_WIDTH))
        rebind_policy = _env_choice(
            _k("REBIND_POLICY"),
            REBIND_FAIL_FORWARD,
            {REBIND_FAIL_FORWARD, REBIND_RESTORE_PREVIOUS},
        )

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            data_dir=data_dir,
            state_path=data_dir / "state.json",
            config_path=data_dir / "config.json",
            done_path=data_dir / "done.md",
            log_path=data_dir / "tasktray.log",
            default_hotkey=default_hotkey,
            window_width=window_width,
            rebind_policy=rebind_policy,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Load .env (without overriding the real environment) and build Settings once."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
