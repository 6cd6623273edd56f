"""Shell syntax coloring for command text shown in the UI.

Command text is run through Pygments' Bash lexer and terminal formatter.
The result carries ANSI codes only, so ``ansi`` helpers can still measure
and clip it.
"""

from __future__ import annotations

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import BashLexer

# Lexer options keep the typed text byte-for-byte: no stripped or added newlines.
_LEXER = BashLexer(stripnl=False, ensurenl=False)
_FORMATTER = TerminalFormatter(bg="dark")


def highlight_command(text: str) -> str:
    """Return ``text`` colored as a shell command."""
    if not text:
        return ""
    return highlight(text, _LEXER, _FORMATTER)


__all__ = ["highlight_command"]
