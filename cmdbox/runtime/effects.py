"""Side-effect requests emitted by state transitions.

Transitions never touch the filesystem or clipboard; they return these
values and ``SessionController`` performs them in order.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..storage import Entry


@dataclass(frozen=True)
class CreateFolder:
    parent: Path
    name: str


@dataclass(frozen=True)
class CreateCommand:
    """Write a command file; ``name`` excludes the command suffix."""

    parent: Path
    name: str
    content: str


@dataclass(frozen=True)
class RemoveEntry:
    entry: Entry


@dataclass(frozen=True)
class RelocateEntry:
    entry: Entry
    destination: Path


@dataclass(frozen=True)
class CopyCommand:
    entry: Entry


@dataclass(frozen=True)
class Notify:
    message: str
    error: bool = False


@dataclass(frozen=True)
class Refresh:
    """Re-read ``current_directory`` into ``visible_entries``."""


@dataclass(frozen=True)
class Quit:
    pass


Effect = CreateFolder | CreateCommand | RemoveEntry | RelocateEntry | CopyCommand | Notify | Refresh | Quit


__all__ = [
    "CreateFolder",
    "CreateCommand",
    "RemoveEntry",
    "RelocateEntry",
    "CopyCommand",
    "Notify",
    "Refresh",
    "Quit",
    "Effect",
]
