import logging
import shutil
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

from core import Status, Task, TASK_FILE_NAME, format_timestamp, normalize_status
from application.ports import TaskRepository
from infrastructure.task_file_parser import TaskFileParser

logger = logging.getLogger("stask.store")

Clock = Callable[[], datetime]


class TaskAlreadyExistsError(FileExistsError):
    """A task directory for the generated id is already present."""


class FileTaskRepository(TaskRepository):
    def __init__(self, tasks_dir: Path, clock: Optional[Clock] = None):
        self.tasks_dir = Path(tasks_dir)
        self.clock: Clock = clock or datetime.now

    def _task_dir(self, task_id: str) -> Path:
        # SEC: ids are directory names directly under tasks_dir
        task_id = str(task_id or "")
        if not task_id or task_id in {".", ".."} or "/" in task_id or "\\" in task_id:
            raise ValueError(f"Invalid task_id: {task_id!r}")
        return self.tasks_dir / task_id

    def _now_stamp(self) -> str:
        return format_timestamp(self.clock())

    def list(self) -> List[Task]:
        """Load every task under tasks_dir, newest id first (string order)."""
        tasks: List[Task] = []
        for entry in self.tasks_dir.iterdir():
            if not entry.is_dir():
                continue
            parsed = TaskFileParser.parse(entry / TASK_FILE_NAME)
            if parsed:
                tasks.append(parsed)
        tasks.sort(key=lambda t: t.id, reverse=True)
        return tasks

    def load(self, task_id: str) -> Optional[Task]:
        return TaskFileParser.parse(self._task_dir(task_id) / TASK_FILE_NAME)

    def create(self) -> Path:
        """Create a task directory named after the current Unix time.

        Two creations within the same second collide; the second one raises
        TaskAlreadyExistsError and nothing is written.
        """
        now = self.clock()
        task_id = str(int(now.timestamp()))
        task_dir = self._task_dir(task_id)
        self.tasks_dir.mkdir(parents=True, exist_ok=True)
        try:
            task_dir.mkdir()
        except FileExistsError as exc:
            raise TaskAlreadyExistsError(f"Task {task_id} already exists: {task_dir}") from exc
        stamp = format_timestamp(now)
        task = Task(
            id=task_id,
            status=Status.TODO.code,
            created_at=stamp,
            last_edit_at=stamp,
            path=task_dir / TASK_FILE_NAME,
        )
        self.save(task)
        logger.info("Created task %s", task_id)
        return task.path

    def save(self, task: Task) -> None:
        if task.path is None:
            raise ValueError(f"Task {task.id!r} has no backing file")
        Path(task.path).write_text(TaskFileParser.serialize(task), encoding="utf-8")

    def set_status(self, task: Task, new_status: "str | Status") -> None:
        if task.path is None:
            raise ValueError(f"Task {task.id!r} has no backing file")
        task.status = normalize_status(new_status)
        task.last_edit_at = self._now_stamp()
        self.save(task)
        logger.debug("Task %s status -> %s", task.id, task.status)

    def toggle_done(self, task: Task) -> None:
        target = Status.TODO if task.status_value == Status.DONE else Status.DONE
        self.set_status(task, target)

    def toggle_pending(self, task: Task) -> None:
        target = Status.TODO if task.status_value == Status.PENDING else Status.PENDING
        self.set_status(task, target)

    def delete(self, task_id: str) -> bool:
        """Remove the task directory; a missing directory is not an error."""
        task_dir = self._task_dir(task_id)
        try:
            shutil.rmtree(task_dir)
        except FileNotFoundError:
            return False
        logger.info("Deleted task %s", task_id)
        return True
