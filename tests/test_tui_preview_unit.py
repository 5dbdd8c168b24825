"""Unit tests for the details preview overlay."""

from core import Task
from interface.tui_display import DisplayMixin
from interface.tui_preview import build_preview_text, preview_lines, preview_title
from interface.tui_state import AppState


class DummyTUI(DisplayMixin):
    def __init__(self, tasks, width=10, height=3, offset=0):
        self.state = AppState(tasks=tasks, preview_visible=True, preview_offset=offset)
        self._width = width
        self._height = height

    def preview_content_width(self):
        return self._width

    def preview_content_height(self):
        return self._height


def test_preview_title_uses_derived_title():
    tui = DummyTUI([Task(id="17", details="first words of body here")])
    assert preview_title(tui) == " 17  first words of "
    assert preview_title(DummyTUI([])) == ""


def test_preview_lines_wrap_and_keep_blank_lines():
    tui = DummyTUI([Task(id="1", details="abcdefghijklmno\n\nxyz")], width=10)
    assert preview_lines(tui) == ["abcdefghij", "klmno", "", "xyz"]


def test_preview_wraps_wide_characters_by_columns():
    tui = DummyTUI([Task(id="1", details="日本語のテキスト")], width=6)
    assert preview_lines(tui) == ["日本語", "のテキ", "スト"]


def test_whitespace_details_show_nothing():
    tui = DummyTUI([Task(id="1", details="  \n\t\n")])
    assert preview_lines(tui) == []
    assert build_preview_text(tui) == [("class:preview", "")]


def test_build_preview_text_scrolls_by_offset():
    tui = DummyTUI([Task(id="1", details="a\nb\nc\nd\ne")], height=2, offset=2)
    assert build_preview_text(tui) == [("class:preview", "c\nd")]
