#!/usr/bin/env python3
"""TUI themes and styling."""

from typing import Dict

from prompt_toolkit.styles import Style


THEMES: Dict[str, Dict[str, str]] = {
    "dark-olive": {
        "": "#d7dfe6",  # terminal background shows through
        "status.todo": "#d7dfe6",
        "status.done": "#9ad974",
        "status.pending": "#e5c07b",
        "text": "#d7dfe6",
        "selected.todo": "bg:#476eae #ffffff bold",
        "selected.done": "bg:#476eae #c8f5a8 bold",
        "selected.pending": "bg:#476eae #f6ff99 bold",
        "header": "#ffb347 bold",
        "border": "#4b525a",
        "statusbar": "bg:#4b525a #e8eaec",
        "statusbar.message": "bg:#4b525a #ffb347 bold",
        "preview": "#e8eaec",
        "confirm": "bg:#5a1f23 #ffffff bold",
    },
    "dark-contrast": {
        "": "#e8eaec",
        "status.todo": "#e8eaec",
        "status.done": "#b8f171",
        "status.pending": "#f0c674",
        "text": "#e8eaec",
        "selected.todo": "bg:#1f4fa0 #ffffff bold",
        "selected.done": "bg:#1f4fa0 #b8f171 bold",
        "selected.pending": "bg:#1f4fa0 #f0c674 bold",
        "header": "#ffb347 bold",
        "border": "#5a6169",
        "statusbar": "bg:#5a6169 #ffffff",
        "statusbar.message": "bg:#5a6169 #ffb347 bold",
        "preview": "#ffffff",
        "confirm": "bg:#8b0000 #ffffff bold",
    },
}

DEFAULT_THEME = "dark-olive"


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Get theme palette, falling back to default if theme not found."""
    base = THEMES.get(theme)
    if not base:
        base = THEMES[DEFAULT_THEME]
    return dict(base)


def build_style(theme: str) -> Style:
    """Build Style object from theme name."""
    palette = get_theme_palette(theme)
    return Style.from_dict(palette)
