"""Domain datatypes for the command storage tree."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

COMMAND_SUFFIX = ".cmd"


class EntryKind(Enum):
    """Whether a listing row is a folder or a command file."""

    FOLDER = "folder"
    COMMAND = "command"


@dataclass(frozen=True)
class Entry:
    """One named child of a directory under the storage root."""

    name: str
    kind: EntryKind
    path: Path

    @property
    def is_folder(self) -> bool:
        return self.kind is EntryKind.FOLDER


@dataclass(frozen=True)
class StorageResult:
    """Outcome of one storage mutation.

    ``error`` holds a short user-facing reason when ``ok`` is false; reads
    carry the file text in ``content``.
    """

    ok: bool
    error: str = ""
    path: Path | None = None
    content: str = ""

    @classmethod
    def success(cls, path: Path | None = None, content: str = "") -> StorageResult:
        return cls(ok=True, path=path, content=content)

    @classmethod
    def failure(cls, error: str) -> StorageResult:
        return cls(ok=False, error=error)


class StorageError(Exception):
    """Raised when the storage root itself cannot be prepared."""


__all__ = [
    "COMMAND_SUFFIX",
    "EntryKind",
    "Entry",
    "StorageResult",
    "StorageError",
]
