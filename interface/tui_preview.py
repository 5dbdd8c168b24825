"""Details preview overlay for the selected task."""

from typing import List

from prompt_toolkit.formatted_text import FormattedText

from core import derive_title


def preview_title(tui) -> str:
    task = tui.state.selected_task
    if not task:
        return ""
    return f" {task.id}  {derive_title(task)} "


def preview_lines(tui) -> List[str]:
    """Wrapped details of the selected task; whitespace-only details show nothing."""
    task = tui.state.selected_task
    if not task:
        return []
    details = task.details or ""
    if not details.strip():
        return []
    return tui._wrap_block(details, tui.preview_content_width())


def build_preview_text(tui) -> FormattedText:
    lines = preview_lines(tui)
    height = max(1, tui.preview_content_height())
    offset = tui.state.preview_offset
    visible = lines[offset : offset + height]
    return FormattedText([("class:preview", "\n".join(visible))])


__all__ = ["preview_title", "preview_lines", "build_preview_text"]
