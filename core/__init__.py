from .status import Status, normalize_status
from .task import Task, TASK_FILE_NAME, TIMESTAMP_FORMAT, format_timestamp
from .display import (
    LIST_HEADER,
    ORIGIN_WIDTH,
    char_width,
    derive_title,
    display_width,
    is_cjk_char,
    pad_display_width,
    render_row,
    status_glyph,
)

__all__ = [
    "Status",
    "normalize_status",
    "Task",
    "TASK_FILE_NAME",
    "TIMESTAMP_FORMAT",
    "format_timestamp",
    # Row formatting
    "LIST_HEADER",
    "ORIGIN_WIDTH",
    "char_width",
    "derive_title",
    "display_width",
    "is_cjk_char",
    "pad_display_width",
    "render_row",
    "status_glyph",
]
