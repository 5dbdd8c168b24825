"""Row formatting for the task list: status glyphs, CJK-aware padding, titles.

Column widths here follow a fixed rule rather than the terminal's own idea of
character width: characters of the Han, Hiragana, Katakana and Hangul scripts
take two columns, everything else takes one. Keeping the rule explicit makes
the row layout deterministic across terminals and wcwidth versions.
"""

from bisect import bisect_right
from typing import List, Tuple

from .status import Status
from .task import Task

ORIGIN_WIDTH = 8
EMPTY_TITLE = "(empty)"
TITLE_WORDS = 3
FIELD_SEP = "  "
LIST_HEADER = "     id          origin    edit_at        created_at     task"

# Inclusive code point ranges of the Han, Hiragana, Katakana and Hangul scripts.
_CJK_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x1100, 0x11FF),    # Hangul Jamo
    (0x2E80, 0x2E99),    # CJK Radicals Supplement
    (0x2E9B, 0x2EF3),
    (0x2F00, 0x2FD5),    # Kangxi Radicals
    (0x3005, 0x3005),    # ideographic iteration mark
    (0x3007, 0x3007),    # ideographic number zero
    (0x3021, 0x3029),    # Hangzhou numerals
    (0x302E, 0x302F),    # Hangul tone marks
    (0x3038, 0x303B),
    (0x3041, 0x3096),    # Hiragana
    (0x309D, 0x309F),
    (0x30A1, 0x30FA),    # Katakana
    (0x30FD, 0x30FF),
    (0x3131, 0x318E),    # Hangul Compatibility Jamo
    (0x31F0, 0x31FF),    # Katakana Phonetic Extensions
    (0x3200, 0x321E),    # parenthesized Hangul
    (0x3260, 0x327E),    # circled Hangul
    (0x32D0, 0x32FE),    # circled Katakana
    (0x3300, 0x3357),    # squared Katakana
    (0x3400, 0x4DBF),    # CJK Extension A
    (0x4E00, 0x9FFF),    # CJK Unified Ideographs
    (0xA960, 0xA97C),    # Hangul Jamo Extended-A
    (0xAC00, 0xD7A3),    # Hangul Syllables
    (0xD7B0, 0xD7C6),    # Hangul Jamo Extended-B
    (0xD7CB, 0xD7FB),
    (0xF900, 0xFA6D),    # CJK Compatibility Ideographs
    (0xFA70, 0xFAD9),
    (0xFF66, 0xFF6F),    # halfwidth Katakana
    (0xFF71, 0xFF9D),
    (0xFFA0, 0xFFBE),    # halfwidth Hangul
    (0xFFC2, 0xFFC7),
    (0xFFCA, 0xFFCF),
    (0xFFD2, 0xFFD7),
    (0xFFDA, 0xFFDC),
    (0x16FF0, 0x16FF1),
    (0x1AFF0, 0x1AFFE),  # Kana Extended-B
    (0x1B000, 0x1B122),  # Kana Supplement / Extended-A
    (0x1B132, 0x1B132),
    (0x1B150, 0x1B152),  # small Hiragana
    (0x1B155, 0x1B155),
    (0x1B164, 0x1B167),  # small Katakana
    (0x1F200, 0x1F200),  # squared Hiragana
    (0x20000, 0x2A6DF),  # CJK Extension B
    (0x2A700, 0x2EBEF),  # CJK Extensions C-F, I
    (0x2F800, 0x2FA1F),  # CJK Compatibility Supplement
    (0x30000, 0x323AF),  # CJK Extensions G-H
)
_CJK_STARTS: List[int] = [lo for lo, _ in _CJK_RANGES]


def is_cjk_char(ch: str) -> bool:
    """Return True if ``ch`` belongs to the Han, Hiragana, Katakana or Hangul script."""
    if not ch:
        return False
    cp = ord(ch[0])
    idx = bisect_right(_CJK_STARTS, cp) - 1
    if idx < 0:
        return False
    return cp <= _CJK_RANGES[idx][1]


def char_width(ch: str) -> int:
    return 2 if is_cjk_char(ch) else 1


def display_width(text: str) -> int:
    return sum(char_width(ch) for ch in text)


def pad_display_width(text: str, width: int) -> str:
    """Trim and pad ``text`` with spaces to exactly ``width`` display columns.

    A wide character that would overflow the target is dropped whole, so the
    result may end with a single padding space after a CJK run.
    """
    width = max(0, width)
    acc = []
    used = 0
    for ch in text or "":
        w = char_width(ch)
        if used + w > width:
            break
        acc.append(ch)
        used += w
    if used < width:
        acc.append(" " * (width - used))
    return "".join(acc)


def status_glyph(status: str) -> str:
    return Status.from_string(status).glyph


def derive_title(task: Task) -> str:
    """Title shown in the list; falls back to the start of the details body."""
    title = (task.title or "").strip()
    if title:
        return title
    lines = [line.strip() for line in (task.details or "").splitlines()]
    lines = [line for line in lines if line]
    if not lines:
        return EMPTY_TITLE
    first = lines[0]
    words = first.split()
    if len(words) > TITLE_WORDS:
        return " ".join(words[:TITLE_WORDS])
    return first


def render_row(task: Task) -> str:
    origin = pad_display_width((task.origin or "").strip(), ORIGIN_WIDTH)
    return FIELD_SEP.join(
        [
            status_glyph(task.status),
            task.id,
            origin,
            task.last_edit_at,
            task.created_at,
            derive_title(task),
        ]
    )


__all__ = [
    "LIST_HEADER",
    "ORIGIN_WIDTH",
    "EMPTY_TITLE",
    "is_cjk_char",
    "char_width",
    "display_width",
    "pad_display_width",
    "status_glyph",
    "derive_title",
    "render_row",
]
