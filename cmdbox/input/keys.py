"""Key tokens and selection-key helpers shared by the state machine."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

ESC = "ESC"
ENTER = "ENTER"
BACKSPACE = "BACKSPACE"

MAX_SELECTABLE_ENTRIES = 26
SELECTION_KEYS = "abcdefghijklmnopqrstuvwxyz"

T = TypeVar("T")


def selection_index(key: str) -> int | None:
    """Map ``a``..``z`` to ``0``..``25``; any other token yields ``None``."""
    if len(key) != 1:
        return None
    idx = SELECTION_KEYS.find(key)
    return idx if idx >= 0 else None


def selection_key(index: int) -> str:
    """Return the selection letter for a listing position."""
    return SELECTION_KEYS[index]


def select_from(entries: Sequence[T], key: str) -> T | None:
    """Return the entry addressed by ``key`` or ``None`` when out of range.

    Only the first ``MAX_SELECTABLE_ENTRIES`` positions are addressable.
    """
    idx = selection_index(key)
    if idx is None or idx >= min(len(entries), MAX_SELECTABLE_ENTRIES):
        return None
    return entries[idx]


def is_printable_key(key: str) -> bool:
    """Return whether ``key`` is one printable ASCII character (space included)."""
    return len(key) == 1 and " " <= key <= "~"


__all__ = [
    "ESC",
    "ENTER",
    "BACKSPACE",
    "MAX_SELECTABLE_ENTRIES",
    "SELECTION_KEYS",
    "selection_index",
    "selection_key",
    "select_from",
    "is_printable_key",
]
