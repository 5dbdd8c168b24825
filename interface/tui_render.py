"""Renderers for the list view, header, status bar and empty state."""

from typing import List, Tuple

from prompt_toolkit.formatted_text import FormattedText

from core import LIST_HEADER, render_row
from application.task_list import count_by_status
from interface.tui_state import active_status_message, ensure_selection_visible

NO_TASKS_MESSAGE = "No tasks found. Press `a` to add a task, or `q` to quit."


def render_header_text(tui) -> FormattedText:
    return FormattedText([("class:header", LIST_HEADER)])


def render_task_list_text(tui) -> FormattedText:
    state = tui.state
    if not state.tasks:
        return FormattedText([])
    width = max(1, tui.get_terminal_width())
    height = tui.list_height()
    ensure_selection_visible(state, height)

    result: List[Tuple[str, str]] = []
    visible = state.tasks[state.view_offset : state.view_offset + height]
    for offset, task in enumerate(visible):
        idx = state.view_offset + offset
        code = task.status_value.code
        # wcwidth columns: titles may carry emoji or fullwidth forms
        line = tui._pad_display(render_row(task), width)
        if idx == state.selected_index:
            result.append((f"class:selected.{code}", line))
        else:
            result.append((f"class:status.{code}", line))
        if offset < len(visible) - 1:
            result.append(("", "\n"))
    return FormattedText(result)


def status_counters(tasks) -> str:
    counts = count_by_status(tasks)
    return f"todo:{counts['todo']} done:{counts['done']} pending:{counts['pending']}"


def render_status_text(tui) -> FormattedText:
    state = tui.state
    if state.confirm_mode:
        return FormattedText([("class:confirm", f" {state.confirm_message} [y/n] ")])
    parts: List[Tuple[str, str]] = [
        ("class:statusbar", f"{status_counters(state.tasks)} `{tui.tasks_dir}` {tui.editor.command}"),
    ]
    message = active_status_message(state)
    if message:
        parts.append(("class:statusbar.message", f"  {message}"))
    return FormattedText(parts)


def render_empty_text(tui) -> FormattedText:
    return FormattedText([("class:text", NO_TASKS_MESSAGE)])


__all__ = [
    "NO_TASKS_MESSAGE",
    "render_header_text",
    "render_task_list_text",
    "render_status_text",
    "render_empty_text",
    "status_counters",
]
