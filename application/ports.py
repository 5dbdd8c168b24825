from pathlib import Path
from typing import List, Optional, Protocol

from core import Status, Task


class TaskRepository(Protocol):
    def list(self) -> List[Task]:
        ...

    def load(self, task_id: str) -> Optional[Task]:
        ...

    def create(self) -> Path:
        ...

    def save(self, task: Task) -> None:
        ...

    def set_status(self, task: Task, new_status: "str | Status") -> None:
        ...

    def toggle_done(self, task: Task) -> None:
        ...

    def toggle_pending(self, task: Task) -> None:
        ...

    def delete(self, task_id: str) -> bool:
        ...


class EditorLauncher(Protocol):
    """Opens a file in the user's editor and returns once the editor exits."""

    @property
    def command(self) -> str:
        ...

    def open(self, path: Path) -> int:
        ...


class FileOpener(Protocol):
    """Opens a directory in the platform file browser without waiting for it."""

    def open(self, directory: Path) -> None:
        ...
