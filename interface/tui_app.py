#!/usr/bin/env python3
"""TUI application: StaskTUI class and cmd_tui command."""

import logging
import os
from pathlib import Path
from typing import Optional

from prompt_toolkit.application import Application, run_in_terminal
from prompt_toolkit.filters import Condition
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import ConditionalContainer, Float, FloatContainer, HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import Frame

from application.ports import EditorLauncher, FileOpener, TaskRepository
from application.task_list import order
from infrastructure.file_repository import FileTaskRepository
from infrastructure.launchers import SubprocessEditorLauncher, SubprocessFileOpener
from interface.tui_display import DisplayMixin
from interface.tui_controls import TaskListControl
from interface.tui_mouse import handle_body_mouse
from interface.tui_preview import build_preview_text, preview_lines, preview_title
from interface.tui_render import (
    render_empty_text,
    render_header_text,
    render_status_text,
    render_task_list_text,
)
from interface.tui_state import (
    AppState,
    clamp_selection,
    move_selection,
    scroll_preview,
    select_task,
    set_status_message,
)
from interface.tui_themes import DEFAULT_THEME, build_style

logger = logging.getLogger("stask.tui")

PREVIEW_WIDTH_RATIO = 0.8
PREVIEW_HEIGHT_RATIO = 0.7


class StaskTUI(DisplayMixin):
    def __init__(
        self,
        tasks_dir: Path,
        theme: str = DEFAULT_THEME,
        repository: Optional[TaskRepository] = None,
        editor: Optional[EditorLauncher] = None,
        opener: Optional[FileOpener] = None,
    ):
        self.tasks_dir = Path(tasks_dir)
        self.repository = repository or FileTaskRepository(self.tasks_dir)
        self.editor = editor or SubprocessEditorLauncher()
        self.opener = opener or SubprocessFileOpener()
        self.state = AppState()
        self.theme_name = theme
        self.style: Style = build_style(theme)
        self.load_tasks(selected_index=0)

        kb = KeyBindings()
        preview_open = Condition(lambda: self.state.preview_visible)
        confirm_active = Condition(lambda: self.state.confirm_mode)
        list_active = ~preview_open & ~confirm_active
        has_tasks = Condition(lambda: bool(self.state.tasks))

        @kb.add("c-c")
        def _(event):
            event.app.exit()

        @kb.add("q", filter=list_active)
        def _(event):
            event.app.exit()

        @kb.add("down", filter=~confirm_active)
        @kb.add("j", filter=~confirm_active)
        @kb.add(Keys.ScrollDown, filter=~confirm_active)
        def _(event):
            self.move_vertical_selection(1)

        @kb.add("up", filter=~confirm_active)
        @kb.add("k", filter=~confirm_active)
        @kb.add(Keys.ScrollUp, filter=~confirm_active)
        def _(event):
            self.move_vertical_selection(-1)

        @kb.add("g", filter=list_active)
        @kb.add("home", filter=list_active)
        def _(event):
            self.move_vertical_selection(-len(self.state.tasks))

        @kb.add("G", filter=list_active)
        @kb.add("end", filter=list_active)
        def _(event):
            self.move_vertical_selection(len(self.state.tasks))

        @kb.add("l", filter=list_active)
        @kb.add("r", filter=list_active)
        def _(event):
            self.load_tasks()

        @kb.add("a", filter=list_active)
        async def _(event):
            await self.add_task()

        @kb.add("e", filter=list_active)
        async def _(event):
            await self.edit_selected()

        @kb.add("space", filter=list_active)
        def _(event):
            self.open_preview()

        @kb.add("space", filter=preview_open)
        @kb.add("q", filter=preview_open)
        @kb.add("escape", filter=preview_open)
        @kb.add("enter", filter=preview_open)
        def _(event):
            self.close_preview()

        @kb.add("x", filter=list_active)
        def _(event):
            self.toggle_done_selected()

        @kb.add("p", filter=list_active)
        def _(event):
            self.toggle_pending_selected()

        @kb.add("enter", filter=list_active)
        def _(event):
            self.open_selected_folder()

        @kb.add("d", filter=list_active)
        def _(event):
            self.confirm_delete_selected()

        @kb.add("y", filter=confirm_active)
        def _(event):
            self.resolve_confirm(True)

        @kb.add("n", filter=confirm_active)
        @kb.add("escape", filter=confirm_active)
        def _(event):
            self.resolve_confirm(False)

        self.header = Window(content=FormattedTextControl(self.get_header_text), height=1, always_hide_cursor=True)
        self.body_control = TaskListControl(self.get_task_list_text, on_mouse=self._handle_body_mouse)
        self.task_list = Window(content=self.body_control, always_hide_cursor=True, wrap_lines=False)
        self.status_bar = Window(
            content=FormattedTextControl(self.get_status_text),
            height=1,
            always_hide_cursor=True,
            style="class:statusbar",
        )
        self.empty_box = Frame(
            Window(content=FormattedTextControl(render_empty_text(self)), always_hide_cursor=True, dont_extend_width=True),
            style="class:border",
        )
        self.preview_box = Frame(
            Window(content=FormattedTextControl(self.get_preview_text), always_hide_cursor=True, wrap_lines=False),
            title=lambda: preview_title(self),
            style="class:border",
        )

        body = HSplit(
            [
                ConditionalContainer(self.header, filter=has_tasks),
                ConditionalContainer(self.task_list, filter=has_tasks),
                ConditionalContainer(Window(), filter=~has_tasks),
                self.status_bar,
            ]
        )
        root = FloatContainer(
            content=body,
            floats=[
                Float(content=ConditionalContainer(self.empty_box, filter=~has_tasks)),
                Float(
                    content=ConditionalContainer(self.preview_box, filter=preview_open),
                    width=self.preview_width,
                    height=self.preview_height,
                ),
            ],
        )

        self.app = Application(
            layout=Layout(root),
            key_bindings=kb,
            style=self.style,
            full_screen=True,
            mouse_support=True,
        )

    # -------- sizes --------
    @staticmethod
    def get_terminal_width() -> int:
        """Get current terminal width, default to 100 if unavailable."""
        try:
            return os.get_terminal_size().columns
        except (AttributeError, ValueError, OSError):
            return 100

    @staticmethod
    def get_terminal_height() -> int:
        try:
            return os.get_terminal_size().lines
        except (AttributeError, ValueError, OSError):
            return 40

    def list_height(self) -> int:
        # header row + status bar
        return max(1, self.get_terminal_height() - 2)

    def preview_width(self) -> int:
        return max(10, int(self.get_terminal_width() * PREVIEW_WIDTH_RATIO))

    def preview_height(self) -> int:
        return max(5, int(self.get_terminal_height() * PREVIEW_HEIGHT_RATIO))

    def preview_content_width(self) -> int:
        return max(1, self.preview_width() - 2)

    def preview_content_height(self) -> int:
        return max(1, self.preview_height() - 2)

    # -------- rendering --------
    def force_render(self) -> None:
        app = getattr(self, "app", None)
        if app:
            app.invalidate()

    def get_header_text(self) -> FormattedText:
        return render_header_text(self)

    def get_task_list_text(self) -> FormattedText:
        return render_task_list_text(self)

    def get_status_text(self) -> FormattedText:
        return render_status_text(self)

    def get_preview_text(self) -> FormattedText:
        return build_preview_text(self)

    def _handle_body_mouse(self, mouse_event):
        return handle_body_mouse(self, mouse_event)

    def set_status_message(self, message: str, ttl: float = 4.0) -> None:
        set_status_message(self.state, message, ttl=ttl)
        self.force_render()

    # -------- loading / navigation --------
    def load_tasks(self, selected_index: Optional[int] = None, select_id: Optional[str] = None) -> None:
        """Re-read the task root and re-apply display order.

        Selection follows ``select_id`` when given, otherwise stays on the
        same row index.
        """
        state = self.state
        fallback = state.selected_index if selected_index is None else selected_index
        try:
            state.tasks = order(self.repository.list())
        except OSError as exc:
            logger.exception("Failed to list tasks in %s", self.tasks_dir)
            state.tasks = []
            self.set_status_message(f"Cannot read {self.tasks_dir}: {exc}", ttl=8)
        if select_id:
            select_task(state, select_id, fallback)
        else:
            state.selected_index = fallback
            clamp_selection(state)
        self.force_render()

    def move_vertical_selection(self, delta: int) -> None:
        state = self.state
        if state.preview_visible:
            scroll_preview(state, delta, len(preview_lines(self)), self.preview_content_height())
        else:
            move_selection(state, delta)
        self.force_render()

    def open_preview(self) -> None:
        if not self.state.selected_task:
            return
        self.state.preview_visible = True
        self.state.preview_offset = 0
        self.force_render()

    def close_preview(self) -> None:
        self.state.preview_visible = False
        self.state.preview_offset = 0
        self.force_render()

    # -------- actions --------
    async def edit_path(self, path: Path) -> bool:
        """Hand the terminal to the editor until it exits."""
        try:
            await run_in_terminal(lambda: self.editor.open(path))
        except OSError as exc:
            logger.exception("Editor %r failed on %s", self.editor.command, path)
            self.set_status_message(f"Editor failed: {exc}", ttl=8)
            return False
        return True

    async def add_task(self) -> None:
        try:
            path = self.repository.create()
        except OSError as exc:
            logger.warning("Task creation failed: %s", exc)
            self.set_status_message(str(exc), ttl=6)
            return
        await self.edit_path(path)
        self.load_tasks(select_id=path.parent.name)

    async def edit_selected(self) -> None:
        task = self.state.selected_task
        if not task or task.path is None:
            return
        await self.edit_path(task.path)
        self.load_tasks(select_id=task.id)

    def _set_selected_status(self, toggle) -> None:
        task = self.state.selected_task
        if not task:
            return
        try:
            toggle(task)
        except OSError as exc:
            logger.exception("Failed to update task %s", task.id)
            self.set_status_message(f"Cannot update {task.id}: {exc}", ttl=6)
            return
        self.load_tasks(select_id=task.id)

    def toggle_done_selected(self) -> None:
        self._set_selected_status(self.repository.toggle_done)

    def toggle_pending_selected(self) -> None:
        self._set_selected_status(self.repository.toggle_pending)

    def open_selected_folder(self) -> None:
        task = self.state.selected_task
        if task and task.directory is not None:
            self.opener.open(task.directory)

    def confirm_delete_selected(self) -> None:
        task = self.state.selected_task
        if not task:
            return
        self.state.confirm_mode = True
        self.state.confirm_message = f"Delete task {task.id}?"
        self.state.confirm_action = lambda: self.delete_task(task.id)
        self.force_render()

    def resolve_confirm(self, accepted: bool) -> None:
        action = self.state.confirm_action
        self.state.confirm_mode = False
        self.state.confirm_message = ""
        self.state.confirm_action = None
        if accepted and action:
            action()
        self.force_render()

    def delete_task(self, task_id: str) -> None:
        previous = max(0, self.state.selected_index - 1)
        try:
            self.repository.delete(task_id)
        except (OSError, ValueError) as exc:
            logger.exception("Failed to delete task %s", task_id)
            self.set_status_message(f"Cannot delete {task_id}: {exc}", ttl=6)
            return
        self.load_tasks(selected_index=previous)

    def run(self):
        self.app.run()


def cmd_tui(args) -> int:
    tui = StaskTUI(
        tasks_dir=args.tasks_dir,
        theme=getattr(args, "theme", DEFAULT_THEME),
    )
    tui.run()
    return 0
