#!/usr/bin/env python3
"""Unit tests for tui_themes module."""

from prompt_toolkit.styles import Style

from core import Status
from interface.tui_themes import DEFAULT_THEME, THEMES, build_style, get_theme_palette


def test_default_theme_exists():
    assert DEFAULT_THEME in THEMES


def test_every_theme_styles_each_status():
    for palette in THEMES.values():
        for status in Status:
            assert f"status.{status.code}" in palette
            assert f"selected.{status.code}" in palette
        for key in ("header", "statusbar", "statusbar.message", "preview", "confirm"):
            assert key in palette


def test_unknown_theme_falls_back():
    assert get_theme_palette("no-such-theme") == THEMES[DEFAULT_THEME]


def test_palette_is_a_copy():
    palette = get_theme_palette(DEFAULT_THEME)
    palette["header"] = "changed"
    assert THEMES[DEFAULT_THEME]["header"] != "changed"


def test_build_style():
    assert isinstance(build_style("dark-contrast"), Style)


def test_palettes_hold_only_rendered_classes():
    rendered = {"", "text", "header", "border", "statusbar", "statusbar.message", "preview", "confirm"}
    rendered |= {f"status.{s.code}" for s in Status} | {f"selected.{s.code}" for s in Status}
    for palette in THEMES.values():
        assert set(palette) == rendered
