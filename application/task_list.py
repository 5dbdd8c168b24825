"""Ordering and counting over a loaded task set."""

import re
from typing import Dict, Iterable, List, Optional, Sequence

from core import Status, Task

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def status_rank(status: str) -> int:
    """todo (and anything unrecognised) -> 0, done -> 1, pending -> 2."""
    return Status.from_string(status).rank


def numeric_id(task_id: str) -> int:
    """Leading integer of the id; ids without one sort as 0."""
    match = _LEADING_INT.match(task_id or "")
    return int(match.group(1)) if match else 0


def order(tasks: Iterable[Task]) -> List[Task]:
    """Order tasks for display: todo, then done, then pending; newest id first.

    Ties on both keys (e.g. "007" and "7") fall back to the id string,
    descending, so the output does not depend on input order.
    """
    by_id = sorted(tasks, key=lambda t: t.id, reverse=True)
    return sorted(by_id, key=lambda t: (status_rank(t.status), -numeric_id(t.id)))


def count_by_status(tasks: Iterable[Task]) -> Dict[str, int]:
    counts = {status.code: 0 for status in Status}
    for task in tasks:
        counts[task.status_value.code] += 1
    return counts


def index_of(tasks: Sequence[Task], task_id: str) -> Optional[int]:
    for idx, task in enumerate(tasks):
        if task.id == task_id:
            return idx
    return None


__all__ = ["status_rank", "numeric_id", "order", "count_by_status", "index_of"]
