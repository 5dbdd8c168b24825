#!/usr/bin/env python3
"""
stask: directory-per-task manager (CLI/TUI).

Every task lives in <root>/<id>/task.txt. Without a command the
full-screen list is started.
"""

import argparse
import logging
import os
import sys
from importlib.metadata import version as pkg_version, PackageNotFoundError
from typing import List, Optional

from config import get_user_theme
from interface.cli_parser import build_parser as build_cli_parser
from interface.cli_commands import cmd_done, cmd_list, cmd_new, cmd_pending, cmd_rm, cmd_show
from interface.tasks_dir_resolver import get_tasks_dir
from interface.tui_app import cmd_tui
from interface.tui_themes import DEFAULT_THEME, THEMES

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(log_file: Optional[str] = None) -> None:
    """Route ``stask.*`` loggers to a file, or silence them.

    The TUI owns the terminal, so nothing is ever logged to stderr.
    """
    log_file = log_file or os.environ.get("STASK_LOG_FILE")
    stask_logger = logging.getLogger("stask")
    if log_file:
        target = os.path.abspath(log_file)
        for handler in stask_logger.handlers:
            if isinstance(handler, logging.FileHandler) and handler.baseFilename == target:
                return
        file_handler = logging.FileHandler(target, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        stask_logger.addHandler(file_handler)
        stask_logger.setLevel(logging.DEBUG)
    elif not stask_logger.handlers:
        stask_logger.addHandler(logging.NullHandler())


def default_theme() -> str:
    configured = get_user_theme()
    return configured if configured in THEMES else DEFAULT_THEME


def build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    return build_cli_parser(commands=sys.modules[__name__], themes=THEMES, default_theme=default_theme())


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "version", False):
        try:
            print(pkg_version("stask"))
        except PackageNotFoundError:
            print("0.0.0")
        return 0
    setup_logging(args.log_file)
    args.tasks_dir = get_tasks_dir(args.root)
    logging.getLogger("stask.cli").debug("Task root: %s", args.tasks_dir)
    if not getattr(args, "command", None):
        return cmd_tui(args)
    return args.func(args)


__all__ = [
    "build_parser",
    "main",
    "setup_logging",
    "cmd_tui",
    "cmd_list",
    "cmd_new",
    "cmd_show",
    "cmd_done",
    "cmd_pending",
    "cmd_rm",
]


if __name__ == "__main__":
    sys.exit(main())
