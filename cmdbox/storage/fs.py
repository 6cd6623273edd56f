"""Filesystem accessor for the command storage tree.

Every operation is confined to one root directory. Mutations never raise into
callers: they return a ``StorageResult`` describing success or the reason for
failure, and log what happened.
"""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from .types import COMMAND_SUFFIX, Entry, EntryKind, StorageError, StorageResult

logger = logging.getLogger(__name__)


def command_file_name(name: str) -> str:
    """Return the on-disk file name for a command called ``name``."""
    return f"{name}{COMMAND_SUFFIX}"


def validate_entry_name(name: str) -> str | None:
    """Return a reason why ``name`` cannot be a child name, or ``None``."""
    if not name or not name.strip():
        return "name is empty"
    if name in {".", ".."}:
        return f"invalid name: {name!r}"
    if "/" in name or (os.sep != "/" and os.sep in name) or "\x00" in name:
        return f"name may not contain a path separator: {name!r}"
    return None


def _describe_os_error(exc: OSError) -> str:
    return exc.strerror or exc.__class__.__name__


class StorageTree:
    """List, create, remove, and relocate entries under ``root``."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root).expanduser().resolve()

    def ensure_root(self) -> Path:
        """Create the root directory on first run and return it.

        Raises ``StorageError`` when the root cannot be created or is not a
        directory.
        """
        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"cannot create storage root {self.root}: {_describe_os_error(exc)}") from exc
        if not self.root.is_dir():
            raise StorageError(f"storage root is not a directory: {self.root}")
        return self.root

    def contains(self, path: Path) -> bool:
        """Return whether ``path`` is the root or lies beneath it."""
        try:
            resolved = Path(path).resolve()
        except OSError:
            return False
        return resolved == self.root or resolved.is_relative_to(self.root)

    def list_entries(self, directory: Path) -> tuple[list[Entry], OSError | None]:
        """List children of ``directory``: folders first, then files, each by name.

        Returns ``(entries, scan_error)``; ``scan_error`` is set when the
        directory cannot be scanned and the entry list is empty.
        """
        folders: list[Entry] = []
        commands: list[Entry] = []
        try:
            with os.scandir(directory) as children:
                for child in children:
                    try:
                        is_dir = child.is_dir()
                    except OSError:
                        is_dir = False
                    kind = EntryKind.FOLDER if is_dir else EntryKind.COMMAND
                    entry = Entry(name=child.name, kind=kind, path=Path(child.path))
                    (folders if is_dir else commands).append(entry)
        except OSError as exc:
            logger.warning("cannot list %s: %s", directory, exc)
            return [], exc

        folders.sort(key=lambda item: item.name)
        commands.sort(key=lambda item: item.name)
        return folders + commands, None

    def _child_target(self, parent: Path, name: str) -> tuple[Path | None, str]:
        """Validate ``name`` under ``parent`` and return the target path."""
        reason = validate_entry_name(name)
        if reason is not None:
            return None, reason
        if not self.contains(parent):
            return None, f"{parent} is outside the storage root"
        target = Path(parent) / name
        if target.exists() or target.is_symlink():
            return None, f"{name!r} already exists"
        return target, ""

    def create_folder(self, parent: Path, name: str) -> StorageResult:
        """Create folder ``name`` inside ``parent``."""
        target, reason = self._child_target(parent, name)
        if target is None:
            logger.warning("create folder %r in %s rejected: %s", name, parent, reason)
            return StorageResult.failure(f"Cannot create folder: {reason}")
        try:
            target.mkdir()
        except OSError as exc:
            logger.warning("create folder %s failed: %s", target, exc)
            return StorageResult.failure(f"Cannot create folder: {_describe_os_error(exc)}")
        logger.info("created folder %s", target)
        return StorageResult.success(target)

    def create_file(self, parent: Path, name: str, content: str) -> StorageResult:
        """Write a new file ``name`` inside ``parent`` holding exactly ``content``."""
        target, reason = self._child_target(parent, name)
        if target is None:
            logger.warning("create file %r in %s rejected: %s", name, parent, reason)
            return StorageResult.failure(f"Cannot create command: {reason}")
        try:
            with open(target, "x", encoding="utf-8", newline="") as handle:
                handle.write(content)
        except OSError as exc:
            logger.warning("create file %s failed: %s", target, exc)
            return StorageResult.failure(f"Cannot create command: {_describe_os_error(exc)}")
        logger.info("created command file %s", target)
        return StorageResult.success(target)

    def read_command(self, entry: Entry) -> StorageResult:
        """Read the full text of a command file into ``StorageResult.content``."""
        if entry.is_folder:
            return StorageResult.failure(f"{entry.name!r} is a folder")
        try:
            with open(entry.path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
                content = handle.read()
        except OSError as exc:
            logger.warning("read %s failed: %s", entry.path, exc)
            return StorageResult.failure(f"Cannot read {entry.name}: {_describe_os_error(exc)}")
        return StorageResult.success(entry.path, content=content)

    def remove_recursive(self, entry: Entry) -> StorageResult:
        """Delete ``entry``; folders are removed with all their contents."""
        path = Path(entry.path)
        if path == self.root or not self.contains(path.parent):
            logger.warning("refusing to remove %s", path)
            return StorageResult.failure(f"Cannot delete {entry.name}: outside the storage tree")
        try:
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
            else:
                path.unlink()
        except OSError as exc:
            logger.warning("remove %s failed: %s", path, exc)
            return StorageResult.failure(f"Cannot delete {entry.name}: {_describe_os_error(exc)}")
        logger.info("removed %s", path)
        return StorageResult.success(path)

    def relocate(self, entry: Entry, new_parent: Path) -> StorageResult:
        """Move ``entry`` into ``new_parent`` keeping its name.

        Rejects moves into the entry's own parent, into the entry itself or a
        descendant of it, and moves that would replace an existing child.
        """
        source = Path(entry.path)
        destination_dir = Path(new_parent)
        if not self.contains(destination_dir) or not self.contains(source.parent):
            return StorageResult.failure(f"Cannot move {entry.name}: outside the storage tree")
        if destination_dir.resolve() == source.parent.resolve():
            return StorageResult.failure(f"{entry.name} is already in this folder")
        if entry.is_folder and (
            destination_dir.resolve() == source.resolve()
            or destination_dir.resolve().is_relative_to(source.resolve())
        ):
            logger.warning("refusing to move %s into itself (%s)", source, destination_dir)
            return StorageResult.failure(f"Cannot move {entry.name} into itself")
        target = destination_dir / source.name
        if target.exists() or target.is_symlink():
            return StorageResult.failure(f"Cannot move {entry.name}: destination already has that name")
        try:
            source.rename(target)
        except OSError as exc:
            logger.warning("move %s -> %s failed: %s", source, target, exc)
            return StorageResult.failure(f"Cannot move {entry.name}: {_describe_os_error(exc)}")
        logger.info("moved %s -> %s", source, target)
        return StorageResult.success(target)


__all__ = [
    "StorageTree",
    "command_file_name",
    "validate_entry_name",
]
