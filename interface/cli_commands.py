"""Non-interactive commands sharing the task store with the TUI."""

import argparse
import logging
import sys
from typing import Callable, Optional

from core import LIST_HEADER, Task, render_row
from application.task_list import order
from infrastructure.file_repository import FileTaskRepository
from infrastructure.launchers import SubprocessEditorLauncher
from infrastructure.task_file_parser import TaskFileParser

logger = logging.getLogger("stask.cli")


def _repository(args: argparse.Namespace) -> FileTaskRepository:
    return FileTaskRepository(args.tasks_dir)


def _error(message: str) -> int:
    print(f"stask: {message}", file=sys.stderr)
    return 1


def _load_or_fail(repo: FileTaskRepository, task_id: str) -> Optional[Task]:
    try:
        return repo.load(task_id)
    except ValueError as exc:
        _error(str(exc))
        return None


def cmd_list(args: argparse.Namespace) -> int:
    repo = _repository(args)
    try:
        tasks = order(repo.list())
    except OSError as exc:
        return _error(f"cannot read {repo.tasks_dir}: {exc}")
    print(LIST_HEADER)
    for task in tasks:
        print(render_row(task))
    return 0


def cmd_new(args: argparse.Namespace) -> int:
    repo = _repository(args)
    try:
        path = repo.create()
    except OSError as exc:
        return _error(str(exc))
    if not getattr(args, "no_edit", False):
        editor = SubprocessEditorLauncher()
        try:
            editor.open(path)
        except OSError as exc:
            logger.warning("Editor %r failed: %s", editor.command, exc)
            _error(f"editor {editor.command!r} failed: {exc}")
    print(path)
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    repo = _repository(args)
    task = _load_or_fail(repo, args.task_id)
    if task is None:
        return _error(f"no such task: {args.task_id}")
    print(TaskFileParser.serialize(task))
    return 0


def _toggle(args: argparse.Namespace, toggle: Callable[[FileTaskRepository, Task], None]) -> int:
    repo = _repository(args)
    task = _load_or_fail(repo, args.task_id)
    if task is None:
        return _error(f"no such task: {args.task_id}")
    try:
        toggle(repo, task)
    except OSError as exc:
        return _error(f"cannot update {task.id}: {exc}")
    print(render_row(task))
    return 0


def cmd_done(args: argparse.Namespace) -> int:
    return _toggle(args, FileTaskRepository.toggle_done)


def cmd_pending(args: argparse.Namespace) -> int:
    return _toggle(args, FileTaskRepository.toggle_pending)


def cmd_rm(args: argparse.Namespace) -> int:
    repo = _repository(args)
    try:
        removed = repo.delete(args.task_id)
    except ValueError as exc:
        return _error(str(exc))
    except OSError as exc:
        return _error(f"cannot delete {args.task_id}: {exc}")
    if not removed:
        logger.debug("Task %s was already gone", args.task_id)
    return 0


__all__ = ["cmd_list", "cmd_new", "cmd_show", "cmd_done", "cmd_pending", "cmd_rm"]
