"""ANSI-aware text measurement and line shaping utilities.

Frames are composed from styled strings; these helpers keep clipping and
centering aligned when color codes and wide chars are present.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    """Remove SGR/CSI escape sequences from ``text``."""
    return ANSI_ESCAPE_RE.sub("", text)


def printable_label(text: str, replacement: str = "?") -> str:
    """Replace control and undecodable characters so a name cannot move the cursor."""
    return "".join(
        ch if unicodedata.category(ch) not in {"Cc", "Cf", "Cs"} else replacement for ch in text
    )


def display_width(text: str) -> int:
    """Return visible column width of ``text`` ignoring escape sequences."""
    col = 0
    for ch in strip_ansi(text):
        col += char_display_width(ch, col)
    return col


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    ANSI escape sequences are preserved verbatim and do not count toward width.
    Tabs are expanded into spaces so clipping aligns with rendered terminal cells.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    while i < n and col < max_cols:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        w = char_display_width(ch, col)
        if ch == "\t":
            if col + w > max_cols:
                break
            out.append(" " * w)
            col += w
            i += 1
            continue
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
        i += 1

    # Keep trailing escapes (usually a reset) that follow the last visible cell.
    while i < n and text[i] == "\x1b":
        match = ANSI_ESCAPE_RE.match(text, i)
        if not match:
            break
        out.append(match.group(0))
        i = match.end()

    return "".join(out)


def center_line(text: str, width: int, fill: str = " ") -> str:
    """Pad ``text`` on both sides with ``fill`` to exactly ``width`` columns.

    Odd leftovers go to the right side. Text wider than ``width`` is returned
    unpadded.
    """
    visible = display_width(text)
    if visible >= width:
        return text
    left = (width - visible) // 2
    right = width - visible - left
    return f"{fill * left}{text}{fill * right}"


__all__ = [
    "ANSI_ESCAPE_RE",
    "TAB_STOP",
    "char_display_width",
    "strip_ansi",
    "printable_label",
    "display_width",
    "clip_ansi_line",
    "center_line",
]
