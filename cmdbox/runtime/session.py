"""Effect application for the interaction state machine.

``SessionController`` is the only place that mutates the storage tree or
writes the clipboard. It feeds keys through ``transitions.step`` and applies
the returned effects in order. Storage and clipboard failures become
notifications; the state stays in Browse with consistent navigation.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace

from ..storage import StorageResult, StorageTree, command_file_name
from .effects import (
    CopyCommand,
    CreateCommand,
    CreateFolder,
    Effect,
    Notify,
    Quit,
    Refresh,
    RelocateEntry,
    RemoveEntry,
)
from .state import SessionState
from .transitions import step

logger = logging.getLogger(__name__)

COPY_PREVIEW_MAX_CHARS = 60


def _copy_preview(text: str) -> str:
    """Single-line preview of copied text for the notification line."""
    flat = " ".join(text.split())
    if len(flat) > COPY_PREVIEW_MAX_CHARS:
        return flat[: COPY_PREVIEW_MAX_CHARS - 3] + "..."
    return flat


class SessionController:
    """Own the session state and apply transition effects."""

    def __init__(self, storage: StorageTree, copy_to_clipboard: Callable[[str], bool]) -> None:
        self.storage = storage
        self.copy_to_clipboard = copy_to_clipboard
        self.state = SessionState.initial(storage.root)
        self.running = True

    def start(self) -> SessionState:
        """Take the first listing of the root."""
        self.refresh()
        return self.state

    def refresh(self) -> None:
        """Re-read ``current_directory`` into ``visible_entries``."""
        entries, scan_error = self.storage.list_entries(self.state.current_directory)
        self.state = replace(self.state, visible_entries=tuple(entries))
        if scan_error is not None:
            self._notify_error(f"Cannot read {self.state.current_directory.name}: {scan_error.strerror or scan_error}")

    def handle_key(self, key: str) -> bool:
        """Process one key to completion; return ``True`` when the session should end."""
        transition = step(self.state, key)
        self.state = transition.state
        for effect in transition.effects:
            self._apply(effect)
        return not self.running

    def dismiss_notification(self) -> None:
        self.state = self.state.without_notification()

    def _apply(self, effect: Effect) -> None:
        if isinstance(effect, Refresh):
            self.refresh()
        elif isinstance(effect, CreateFolder):
            self._report(self.storage.create_folder(effect.parent, effect.name))
        elif isinstance(effect, CreateCommand):
            self._report(
                self.storage.create_file(effect.parent, command_file_name(effect.name), effect.content)
            )
        elif isinstance(effect, RemoveEntry):
            self._report(self.storage.remove_recursive(effect.entry))
        elif isinstance(effect, RelocateEntry):
            self._report(self.storage.relocate(effect.entry, effect.destination))
        elif isinstance(effect, CopyCommand):
            self._copy(effect)
        elif isinstance(effect, Notify):
            self.state = self.state.with_notification(effect.message, error=effect.error)
        elif isinstance(effect, Quit):
            logger.info("session ended by user")
            self.running = False
        else:
            raise TypeError(f"unknown effect: {effect!r}")

    def _report(self, result: StorageResult) -> None:
        if not result.ok:
            self.state = self.state.to_browse()
            self._notify_error(result.error)

    def _notify_error(self, message: str) -> None:
        self.state = self.state.with_notification(message, error=True)

    def _copy(self, effect: CopyCommand) -> None:
        read = self.storage.read_command(effect.entry)
        if not read.ok:
            self._notify_error(read.error)
            return
        if not self.copy_to_clipboard(read.content):
            logger.warning("clipboard write failed for %s", effect.entry.path)
            self._notify_error("Clipboard unavailable: could not copy command")
            return
        logger.info("copied %s to clipboard", effect.entry.path)
        self.state = self.state.with_notification(
            f"Copied to clipboard: {_copy_preview(read.content)}",
            timed=True,
        )


__all__ = ["SessionController"]
