#!/usr/bin/env python3
"""Unit tests for StaskTUI actions with injected launchers."""

import asyncio
from datetime import datetime, timezone
from pathlib import Path

import pytest
from prompt_toolkit.application import create_app_session
from prompt_toolkit.input import DummyInput
from prompt_toolkit.output import DummyOutput

from infrastructure.file_repository import FileTaskRepository
from interface import tui_app
from interface.tui_app import StaskTUI

FIXED = datetime(2024, 1, 2, 3, 4, tzinfo=timezone.utc)


class FakeEditor:
    command = "fake-editor"

    def __init__(self, body=None):
        self.opened = []
        self.body = body

    def open(self, path):
        self.opened.append(Path(path))
        if self.body is not None:
            Path(path).write_text(self.body, encoding="utf-8")
        return 0


class FakeOpener:
    def __init__(self):
        self.opened = []

    def open(self, directory):
        self.opened.append(Path(directory))


@pytest.fixture(autouse=True)
def _app_session():
    with create_app_session(input=DummyInput(), output=DummyOutput()):
        yield


@pytest.fixture
def inline_terminal(monkeypatch):
    async def fake_run_in_terminal(func, *args, **kwargs):
        return func()

    monkeypatch.setattr(tui_app, "run_in_terminal", fake_run_in_terminal)


def _write(root: Path, task_id: str, status: str = "todo", details: str = "") -> None:
    (root / task_id).mkdir(parents=True)
    (root / task_id / "task.txt").write_text(f"Title: \nStatus: {status}\nDetails:\n{details}", encoding="utf-8")


def _tui(root: Path, editor=None, opener=None) -> StaskTUI:
    return StaskTUI(
        tasks_dir=root,
        repository=FileTaskRepository(root, clock=lambda: FIXED),
        editor=editor or FakeEditor(),
        opener=opener or FakeOpener(),
    )


def _ids(tui):
    return [t.id for t in tui.state.tasks]


def test_loads_tasks_in_display_order(tmp_path: Path):
    _write(tmp_path, "100", "pending")
    _write(tmp_path, "300")
    _write(tmp_path, "200", "done")
    _write(tmp_path, "50")

    tui = _tui(tmp_path)

    assert _ids(tui) == ["300", "50", "200", "100"]
    assert tui.state.selected_index == 0


def test_missing_root_shows_empty_state_and_message(tmp_path: Path):
    tui = _tui(tmp_path / "absent")
    assert tui.state.tasks == []
    assert "Cannot read" in tui.state.status_message


def test_toggle_done_keeps_selection_on_task(tmp_path: Path):
    _write(tmp_path, "2")
    _write(tmp_path, "1")
    tui = _tui(tmp_path)

    tui.toggle_done_selected()

    assert _ids(tui) == ["1", "2"]
    assert tui.state.selected_task.id == "2"
    assert tui.state.selected_task.status == "done"
    assert tui.state.selected_task.last_edit_at == "20240102_0304"


def test_toggle_pending_twice_restores_todo(tmp_path: Path):
    _write(tmp_path, "1")
    tui = _tui(tmp_path)
    tui.toggle_pending_selected()
    assert tui.state.selected_task.status == "pending"
    tui.toggle_pending_selected()
    assert tui.state.selected_task.status == "todo"


def test_move_selection_and_preview_scroll(tmp_path: Path, monkeypatch):
    _write(tmp_path, "2", details="\n".join(f"line {i}" for i in range(50)))
    _write(tmp_path, "1")
    tui = _tui(tmp_path)
    monkeypatch.setattr(StaskTUI, "get_terminal_height", staticmethod(lambda: 20))

    tui.move_vertical_selection(1)
    assert tui.state.selected_index == 1
    tui.move_vertical_selection(-1)

    tui.open_preview()
    tui.move_vertical_selection(3)
    assert tui.state.selected_index == 0
    assert tui.state.preview_offset == 3

    tui.close_preview()
    assert not tui.state.preview_visible
    assert tui.state.preview_offset == 0


def test_open_preview_without_tasks_is_noop(tmp_path: Path):
    tui = _tui(tmp_path)
    tui.open_preview()
    assert not tui.state.preview_visible


def test_delete_requires_confirmation(tmp_path: Path):
    for task_id in ("3", "2", "1"):
        _write(tmp_path, task_id)
    tui = _tui(tmp_path)
    tui.move_vertical_selection(1)

    tui.confirm_delete_selected()
    assert tui.state.confirm_mode
    tui.resolve_confirm(False)
    assert (tmp_path / "2").exists()
    assert not tui.state.confirm_mode

    tui.confirm_delete_selected()
    tui.resolve_confirm(True)
    assert not (tmp_path / "2").exists()
    assert _ids(tui) == ["3", "1"]
    assert tui.state.selected_index == 0


def test_open_selected_folder(tmp_path: Path):
    _write(tmp_path, "1")
    opener = FakeOpener()
    tui = _tui(tmp_path, opener=opener)
    tui.open_selected_folder()
    assert opener.opened == [tmp_path / "1"]


def test_add_task_opens_editor_and_selects_new_task(tmp_path: Path, inline_terminal):
    _write(tmp_path, "9999999999")
    editor = FakeEditor(body="Title: fresh\nStatus: todo\nDetails:")
    tui = _tui(tmp_path, editor=editor)

    asyncio.run(tui.add_task())

    new_path = tmp_path / "1704164640" / "task.txt"
    assert editor.opened == [new_path]
    assert tui.state.selected_task.id == "1704164640"
    assert tui.state.selected_task.title == "fresh"


def test_add_task_collision_sets_message(tmp_path: Path, inline_terminal):
    (tmp_path / "1704164640").mkdir()
    editor = FakeEditor()
    tui = _tui(tmp_path, editor=editor)

    asyncio.run(tui.add_task())

    assert editor.opened == []
    assert "already exists" in tui.state.status_message


def test_edit_selected_reloads(tmp_path: Path, inline_terminal):
    _write(tmp_path, "1")
    editor = FakeEditor(body="Title: edited\nStatus: done\nDetails:")
    tui = _tui(tmp_path, editor=editor)

    asyncio.run(tui.edit_selected())

    assert tui.state.selected_task.title == "edited"
    assert tui.state.selected_task.status == "done"


def test_editor_failure_is_reported(tmp_path: Path, inline_terminal):
    class BrokenEditor(FakeEditor):
        def open(self, path):
            raise FileNotFoundError("no-such-editor")

    _write(tmp_path, "1")
    tui = _tui(tmp_path, editor=BrokenEditor())

    asyncio.run(tui.edit_selected())

    assert "Editor failed" in tui.state.status_message


def test_delete_dotted_id_task(tmp_path: Path):
    _write(tmp_path, "v1..2")
    tui = _tui(tmp_path)

    tui.confirm_delete_selected()
    tui.resolve_confirm(True)

    assert not (tmp_path / "v1..2").exists()
    assert tui.state.tasks == []


def test_delete_rejected_id_reports_instead_of_raising(tmp_path: Path, monkeypatch):
    _write(tmp_path, "1")
    tui = _tui(tmp_path)

    def reject(task_id):
        raise ValueError(f"Invalid task_id: {task_id!r}")

    monkeypatch.setattr(tui.repository, "delete", reject)
    tui.confirm_delete_selected()
    tui.resolve_confirm(True)

    assert "Cannot delete 1" in tui.state.status_message
    assert (tmp_path / "1").exists()
