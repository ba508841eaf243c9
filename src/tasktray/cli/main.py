# src/tasktray/cli/main.py

"""
CLI entrypoint.

`tasktray run` (default) initializes logging, builds the AppContext, binds the
configured global hotkey and waits for a signal.

The other subcommands are one-shot maintenance actions on the same data
directory. They never start the desktop backends, so they also work over SSH
or without a display; a changed hotkey takes effect on the next `run`.
"""

from __future__ import annotations

import argparse
import logging
import signal
import sys
import threading

from .. import api
from ..config import get_settings
from ..core.errors import TaskTrayError
from ..hotkeys.resolver import parse
from ..logging_setup import setup_logging
from ..tasks.done_log import CompletionLog
from ..tasks.persistence import StateFiles
from ..tasks.task_models import HotkeyConfig
from .bootstrap import create_app_context

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tasktray", description="Menu-bar task log backend.")
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("run", help="bind the global hotkey and wait (default)")
    sub.add_parser("archive", help="archive the completion log")
    sub.add_parser("status", help="print the tray tooltip")
    hk = sub.add_parser("hotkey", help="show or change the global hotkey")
    hk.add_argument("spec", nargs="?", help='e.g. "Cmd+Ctrl+Alt+Shift+="')
    return parser


def _files(settings) -> StateFiles:
    return StateFiles(settings.state_path, settings.config_path, default_hotkey=settings.default_hotkey)


def shutdown(ctx) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    try:
        ctx.shortcuts.unbind()
    except Exception:
        logger.exception("Failed to unbind the global hotkey.")

    try:
        backend = getattr(ctx, "shortcut_backend", None)
        if backend is not None and hasattr(backend, "stop"):
            backend.stop()
    except Exception:
        logger.debug("Shortcut listener stop failed.", exc_info=True)


def run_forever(settings) -> int:
    # IMPORTANT: reuse same settings object
    ctx = create_app_context(settings=settings)

    try:
        combination = api.register_initial_hotkey(ctx)
    except TaskTrayError:
        logger.exception("Could not bind the global hotkey")
        return 1
    logger.info("%s ready; toggle with %s", api.tray_tooltip(ctx), combination)

    # Use an Event so main can wait without a busy while-loop.
    stop_main = threading.Event()

    def _handle_signal(signum, _frame) -> None:
        logger.info("Signal %s received, shutting down...", signum)
        stop_main.set()

    try:
        signal.signal(signal.SIGINT, _handle_signal)
        signal.signal(signal.SIGTERM, _handle_signal)
    except (ValueError, OSError):
        # Some platforms may not support SIGTERM, etc.
        pass

    try:
        stop_main.wait()
    finally:
        shutdown(ctx)
        logger.info("Bye.")
    return 0


def show_or_set_hotkey(settings, spec: str | None) -> int:
    files = _files(settings)
    if spec is None:
        print(files.load_config().hotkey)
        return 0

    combination = parse(spec)
    files.save_config(HotkeyConfig(hotkey=spec))
    print(f"{spec} ({combination}); restart `tasktray run` to apply")
    return 0


def show_status(settings) -> int:
    state = _files(settings).load_state()
    print(api.format_tooltip(state.task_count()))
    return 0


def archive(settings) -> int:
    print(CompletionLog(settings.done_path).archive())
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    command = args.command or "run"

    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(
        log_file=settings.log_path if settings.log_to_file else None,
        console_level=console_level,
    )
    logger.debug("Starting %s command=%s", settings.app_name, command)

    if command == "run":
        return run_forever(settings)

    try:
        if command == "hotkey":
            return show_or_set_hotkey(settings, args.spec)
        if command == "status":
            return show_status(settings)
        return archive(settings)
    except TaskTrayError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
