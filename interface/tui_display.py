"""Display utilities mixin for TUI - terminal width, trimming, padding, wrapping.

Free text (the preview pane) is measured with wcwidth, the same way the
terminal lays it out. Task rows use the fixed rule in ``core.display``.
"""

from typing import List

from wcwidth import wcwidth


def _char_width(ch: str) -> int:
    w = wcwidth(ch)
    if w is None or w < 0:
        return 0
    return w


class DisplayMixin:
    """Mixin providing text display utilities with proper Unicode width handling."""

    @staticmethod
    def _display_width(text: str) -> int:
        """Return visual width of text accounting for wide/narrow characters."""
        return sum(_char_width(ch) for ch in text)

    @staticmethod
    def _trim_display(text: str, width: int) -> str:
        """Trim text so visible width doesn't exceed specified width."""
        acc = []
        used = 0
        for ch in text:
            w = _char_width(ch)
            if used + w > width:
                break
            acc.append(ch)
            used += w
        return "".join(acc)

    @classmethod
    def _pad_display(cls, text: str, width: int) -> str:
        """Trim and pad with spaces to exact visible width."""
        trimmed = cls._trim_display(text, width)
        trimmed_width = cls._display_width(trimmed)
        if trimmed_width < width:
            trimmed += " " * (width - trimmed_width)
        return trimmed

    @classmethod
    def _wrap_display(cls, text: str, width: int) -> List[str]:
        """Wrap one line of text into chunks of at most ``width`` columns."""
        width = max(1, width)
        lines: List[str] = []
        current = ""
        used = 0
        for ch in text.expandtabs(4):
            w = _char_width(ch)
            if used + w > width and current:
                lines.append(current)
                current = ch
                used = w
            else:
                current += ch
                used += w
        lines.append(current)
        return lines

    @classmethod
    def _wrap_block(cls, text: str, width: int) -> List[str]:
        """Wrap a multi-line block, keeping blank lines."""
        out: List[str] = []
        for line in text.splitlines():
            out.extend(cls._wrap_display(line, width))
        return out


__all__ = ["DisplayMixin"]
