# src/taskbot/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, loads the save file once, then runs the
console REPL until 'bye' (or EOF / Ctrl+C).
"""

from __future__ import annotations

import argparse
import logging

from ..cli.bootstrap import create_initial_state, load_tasks
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def build_parser(settings) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="taskbot", description="Chat-style task tracker (todos, deadlines, events)."
    )
    p.add_argument(
        "save_path",
        nargs="?",
        default=str(settings.save_path),
        help=f"Path to the save file (default: {settings.save_path})",
    )
    p.add_argument(
        "--log-level",
        default=settings.log_level,
        help=f"Console log level (default: {settings.log_level})",
    )
    p.add_argument(
        "--log-dir",
        default=str(settings.log_dir),
        help=f"Directory for taskbot.log (default: {settings.log_dir})",
    )
    return p


def main(argv: list[str] | None = None) -> None:
    settings = get_settings()
    args = build_parser(settings).parse_args(argv)

    console_level = getattr(logging, str(args.log_level).upper(), logging.WARNING)
    if not isinstance(console_level, int):
        console_level = logging.WARNING
    setup_logging(log_dir=args.log_dir, console_level=console_level)

    logger.info("Starting %s (save file: %s)...", settings.app_name, args.save_path)

    state = create_initial_state(save_path=args.save_path, settings=settings)
    load_tasks(state)
    run_console_loop(state)

    logger.info("Bye.")


if __name__ == "__main__":
    main()
