import re
from pathlib import Path
from typing import Dict, List, Optional

from core import Task


class TaskFileParser:
    LINE_BREAK = re.compile(r"\r\n|\r|\n")
    HEADER_PATTERN = re.compile(r"^([^:]+):\s*(.*)$")
    DETAILS_PATTERN = re.compile(r"^Details:\s*$")
    DETAILS_MARKER = "Details:"

    # Header key on disk -> Task attribute, in the order they are written.
    FIELDS: Dict[str, str] = {
        "Title": "title",
        "Status": "status",
        "Labels": "labels",
        "Origin": "origin",
        "Created at": "created_at",
        "Last edit at": "last_edit_at",
    }

    @classmethod
    def parse_text(cls, text: Optional[str]) -> Task:
        """Parse task file content into a Task.

        Never raises: lines that are not ``key: value`` before the ``Details:``
        marker are skipped and absent fields stay empty. Everything after the
        marker is kept verbatim as the details body.
        """
        task = Task()
        if not text:
            return task
        details: List[str] = []
        in_details = False
        for line in cls.LINE_BREAK.split(text):
            if in_details:
                details.append(line)
                continue
            if cls.DETAILS_PATTERN.match(line):
                in_details = True
                continue
            match = cls.HEADER_PATTERN.match(line)
            if not match:
                continue
            key = match.group(1).strip()
            value = match.group(2).strip()
            attr = cls.FIELDS.get(key)
            if attr:
                setattr(task, attr, value)
            else:
                task.extra[key] = value
        task.details = "\n".join(details)
        return task

    @classmethod
    def parse(cls, filepath: Path) -> Optional[Task]:
        if not filepath.exists():
            return None
        task = cls.parse_text(filepath.read_text(encoding="utf-8", errors="replace"))
        task.path = filepath
        task.id = filepath.parent.name
        return task

    @classmethod
    def serialize(cls, task: Task) -> str:
        """Render a Task in the on-disk format (LF line endings).

        Only the six known header fields are written; keys collected in
        ``task.extra`` are dropped.
        """
        lines = [f"{key}: {getattr(task, attr) or ''}" for key, attr in cls.FIELDS.items()]
        lines.append(cls.DETAILS_MARKER)
        lines.append(task.details or "")
        return "\n".join(lines)
