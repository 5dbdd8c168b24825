from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional

from .status import Status

TASK_FILE_NAME = "task.txt"
TIMESTAMP_FORMAT = "%Y%m%d_%H%M"


def format_timestamp(moment: datetime) -> str:
    """Render a wall-clock moment as ``YYYYMMDD_HHMM``."""
    return moment.strftime(TIMESTAMP_FORMAT)


@dataclass
class Task:
    id: str = ""
    title: str = ""
    status: str = ""
    labels: str = ""
    origin: str = ""
    created_at: str = ""
    last_edit_at: str = ""
    details: str = ""
    path: Optional[Path] = None  # derived from the directory layout, never written to the file
    extra: Dict[str, str] = field(default_factory=dict)  # unknown header keys, by literal key text

    @property
    def status_value(self) -> Status:
        return Status.from_string(self.status)

    @property
    def directory(self) -> Optional[Path]:
        return self.path.parent if self.path else None
