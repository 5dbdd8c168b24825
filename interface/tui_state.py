"""Explicit UI state for StaskTUI plus the selection helpers that mutate it."""

import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from core import Task
from application.task_list import index_of


@dataclass
class AppState:
    tasks: List[Task] = field(default_factory=list)  # already ordered for display
    selected_index: int = 0
    view_offset: int = 0
    preview_visible: bool = False
    preview_offset: int = 0
    confirm_mode: bool = False
    confirm_message: str = ""
    confirm_action: Optional[Callable[[], None]] = None
    status_message: str = ""
    status_message_expires: float = 0.0

    @property
    def selected_task(self) -> Optional[Task]:
        if not self.tasks:
            return None
        idx = max(0, min(self.selected_index, len(self.tasks) - 1))
        return self.tasks[idx]


def clamp_selection(state: AppState) -> None:
    total = len(state.tasks)
    if total <= 0:
        state.selected_index = 0
        state.view_offset = 0
        return
    state.selected_index = max(0, min(state.selected_index, total - 1))


def move_selection(state: AppState, delta: int) -> bool:
    """Move the selection by ``delta`` rows; returns True if it changed."""
    total = len(state.tasks)
    if total <= 0:
        state.selected_index = 0
        return False
    current = max(0, min(state.selected_index, total - 1))
    new_index = max(0, min(current + delta, total - 1))
    state.selected_index = new_index
    return new_index != current


def select_task(state: AppState, task_id: str, fallback: int = 0) -> None:
    """Select a task by id; when it is gone, keep ``fallback`` (clamped)."""
    idx = index_of(state.tasks, task_id)
    state.selected_index = fallback if idx is None else idx
    clamp_selection(state)


def ensure_selection_visible(state: AppState, visible_rows: int) -> None:
    visible_rows = max(1, visible_rows)
    if state.selected_index < state.view_offset:
        state.view_offset = state.selected_index
    elif state.selected_index >= state.view_offset + visible_rows:
        state.view_offset = state.selected_index - visible_rows + 1
    max_offset = max(0, len(state.tasks) - visible_rows)
    state.view_offset = max(0, min(state.view_offset, max_offset))


def scroll_preview(state: AppState, delta: int, total_lines: int, visible_rows: int) -> None:
    max_offset = max(0, total_lines - max(1, visible_rows))
    state.preview_offset = max(0, min(state.preview_offset + delta, max_offset))


def set_status_message(state: AppState, message: str, ttl: float = 4.0, now: Optional[float] = None) -> None:
    state.status_message = message
    state.status_message_expires = (now if now is not None else time.time()) + ttl


def active_status_message(state: AppState, now: Optional[float] = None) -> str:
    ts = now if now is not None else time.time()
    if state.status_message and ts < state.status_message_expires:
        return state.status_message
    return ""


__all__ = [
    "AppState",
    "clamp_selection",
    "move_selection",
    "select_task",
    "ensure_selection_visible",
    "scroll_preview",
    "set_status_message",
    "active_status_message",
]
