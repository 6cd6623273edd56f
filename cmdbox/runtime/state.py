"""Session state for the interaction state machine.

State is immutable: transitions build a new ``SessionState`` with
``dataclasses.replace``. The transient payload is a tagged union whose
variant always matches ``mode``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path

from ..storage import Entry


class Mode(Enum):
    """Interaction modes of the command browser."""

    BROWSE = "browse"
    CREATE_FOLDER = "create_folder"
    CREATE_COMMAND = "create_command"
    DELETE = "delete"
    MOVE = "move"
    MOVE_SELECT_DESTINATION = "move_select_destination"
    CONFIRM_QUIT = "confirm_quit"


class ModeClass(Enum):
    """Banner color class of a mode."""

    NEUTRAL = "neutral"
    TRANSITIONAL = "transitional"
    DESTRUCTIVE = "destructive"


def mode_class(mode: Mode) -> ModeClass:
    if mode is Mode.BROWSE:
        return ModeClass.NEUTRAL
    if mode is Mode.DELETE:
        return ModeClass.DESTRUCTIVE
    return ModeClass.TRANSITIONAL


@dataclass(frozen=True)
class FolderNameInput:
    """Folder name typed so far in CreateFolder mode."""

    name: str = ""

    def typed(self, ch: str) -> FolderNameInput:
        return FolderNameInput(self.name + ch)

    def backspace(self) -> FolderNameInput:
        return FolderNameInput(self.name[:-1])


class CommandPhase(Enum):
    NAMING = "naming"
    WRITING = "writing"


@dataclass(frozen=True)
class CommandInput:
    """Two-phase command entry: a name first, then the command text.

    ``typed`` and ``backspace`` edit the buffer of the active phase only.
    ``submit`` advances Naming to Writing when a name exists; it returns
    ``(next_input, committed)`` where ``committed`` is true only when Writing
    holds non-empty content.
    """

    phase: CommandPhase = CommandPhase.NAMING
    name: str = ""
    content: str = ""

    @property
    def active_text(self) -> str:
        return self.name if self.phase is CommandPhase.NAMING else self.content

    def typed(self, ch: str) -> CommandInput:
        if self.phase is CommandPhase.NAMING:
            return replace(self, name=self.name + ch)
        return replace(self, content=self.content + ch)

    def backspace(self) -> CommandInput:
        if self.phase is CommandPhase.NAMING:
            return replace(self, name=self.name[:-1])
        return replace(self, content=self.content[:-1])

    def submit(self) -> tuple[CommandInput, bool]:
        if self.phase is CommandPhase.NAMING:
            if not self.name:
                return self, False
            return replace(self, phase=CommandPhase.WRITING), False
        return self, bool(self.content)


@dataclass(frozen=True)
class PendingMove:
    """Entry chosen for relocation and the directory it was chosen from."""

    entry: Entry
    source: Path


Transient = FolderNameInput | CommandInput | PendingMove | None

_TRANSIENT_FOR_MODE: dict[Mode, type | None] = {
    Mode.BROWSE: None,
    Mode.CREATE_FOLDER: FolderNameInput,
    Mode.CREATE_COMMAND: CommandInput,
    Mode.DELETE: None,
    Mode.MOVE: None,
    Mode.MOVE_SELECT_DESTINATION: PendingMove,
    Mode.CONFIRM_QUIT: None,
}


@dataclass(frozen=True)
class SessionState:
    """Everything the core knows about the running session.

    ``visible_entries`` is the snapshot taken at the last refresh; selection
    keys index into it positionally. ``notification`` is shown on the status
    line; a ``notification_timed`` one holds the loop for a fixed pause.
    """

    root: Path
    current_directory: Path
    mode: Mode = Mode.BROWSE
    visible_entries: tuple[Entry, ...] = ()
    transient: Transient = None
    notification: str = ""
    notification_is_error: bool = False
    notification_timed: bool = False

    @classmethod
    def initial(cls, root: Path) -> SessionState:
        return cls(root=root, current_directory=root)

    @property
    def at_root(self) -> bool:
        return self.current_directory == self.root

    @property
    def folder_input(self) -> FolderNameInput | None:
        return self.transient if isinstance(self.transient, FolderNameInput) else None

    @property
    def command_input(self) -> CommandInput | None:
        return self.transient if isinstance(self.transient, CommandInput) else None

    @property
    def pending_move(self) -> PendingMove | None:
        return self.transient if isinstance(self.transient, PendingMove) else None

    def transient_matches_mode(self) -> bool:
        expected = _TRANSIENT_FOR_MODE[self.mode]
        if expected is None:
            return self.transient is None
        return isinstance(self.transient, expected)

    def to_browse(self) -> SessionState:
        """Return to Browse, dropping any transient payload."""
        return replace(self, mode=Mode.BROWSE, transient=None)

    def with_notification(self, message: str, *, error: bool = False, timed: bool = False) -> SessionState:
        return replace(
            self,
            notification=message,
            notification_is_error=error,
            notification_timed=timed,
        )

    def without_notification(self) -> SessionState:
        if not self.notification and not self.notification_timed:
            return self
        return replace(self, notification="", notification_is_error=False, notification_timed=False)


__all__ = [
    "Mode",
    "ModeClass",
    "mode_class",
    "FolderNameInput",
    "CommandPhase",
    "CommandInput",
    "PendingMove",
    "Transient",
    "SessionState",
]
