"""Pure transition table for the interaction state machine.

``step(state, key)`` maps the current state and one key token to the next
state plus the effects that must run for it. Nothing here performs I/O;
navigation only does path arithmetic and asks for a ``Refresh`` so the next
key is never interpreted against a stale listing.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from pathlib import Path

from ..input import (
    BACKSPACE,
    ENTER,
    ESC,
    KeyComboBinding,
    KeyComboRegistry,
    is_printable_key,
    select_from,
)
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
from .state import CommandInput, FolderNameInput, Mode, PendingMove, SessionState


@dataclass(frozen=True)
class Transition:
    """Next state and the effects to apply, in order."""

    state: SessionState
    effects: tuple[Effect, ...] = ()


def _stay(state: SessionState) -> Transition:
    return Transition(state)


def _navigate(state: SessionState, directory: Path) -> Transition:
    return Transition(replace(state, current_directory=directory, visible_entries=()), (Refresh(),))


def _ascend(state: SessionState) -> Transition | None:
    """Move to the parent directory; ``None`` when already at the root."""
    if state.at_root:
        return None
    return _navigate(state, state.current_directory.parent)


def _handle_browse(state: SessionState, key: str) -> Transition:
    registry: KeyComboRegistry[Transition] = KeyComboRegistry()
    registry.register_bindings(
        KeyComboBinding(
            ("N",),
            lambda: Transition(replace(state, mode=Mode.CREATE_FOLDER, transient=FolderNameInput())),
        ),
        KeyComboBinding(
            ("C",),
            lambda: Transition(replace(state, mode=Mode.CREATE_COMMAND, transient=CommandInput())),
        ),
        KeyComboBinding(("D",), lambda: Transition(replace(state, mode=Mode.DELETE, transient=None))),
        KeyComboBinding(("M",), lambda: Transition(replace(state, mode=Mode.MOVE, transient=None))),
        KeyComboBinding(
            (ESC,),
            lambda: _ascend(state) or Transition(replace(state, mode=Mode.CONFIRM_QUIT, transient=None)),
        ),
    )
    handled = registry.dispatch(key)
    if handled is not None:
        return handled

    entry = select_from(state.visible_entries, key)
    if entry is None:
        return _stay(state)
    if entry.is_folder:
        return _navigate(state, entry.path)
    return Transition(state, (CopyCommand(entry),))


def _handle_create_folder(state: SessionState, key: str) -> Transition:
    buffer = state.folder_input or FolderNameInput()
    if key == ESC:
        return Transition(state.to_browse())
    if key == ENTER:
        if not buffer.name:
            return _stay(state)
        return Transition(
            state.to_browse(),
            (CreateFolder(state.current_directory, buffer.name), Refresh()),
        )
    if key == BACKSPACE:
        return Transition(replace(state, transient=buffer.backspace()))
    if is_printable_key(key):
        return Transition(replace(state, transient=buffer.typed(key)))
    return _stay(state)


def _handle_create_command(state: SessionState, key: str) -> Transition:
    buffer = state.command_input or CommandInput()
    if key == ESC:
        return Transition(state.to_browse())
    if key == ENTER:
        submitted, committed = buffer.submit()
        if not committed:
            return Transition(replace(state, transient=submitted))
        return Transition(
            state.to_browse(),
            (CreateCommand(state.current_directory, submitted.name, submitted.content), Refresh()),
        )
    if key == BACKSPACE:
        return Transition(replace(state, transient=buffer.backspace()))
    if is_printable_key(key):
        return Transition(replace(state, transient=buffer.typed(key)))
    return _stay(state)


def _handle_delete(state: SessionState, key: str) -> Transition:
    if key == ESC:
        return Transition(state.to_browse())
    entry = select_from(state.visible_entries, key)
    if entry is None:
        return _stay(state)
    return Transition(state.to_browse(), (RemoveEntry(entry), Refresh()))


def _handle_move(state: SessionState, key: str) -> Transition:
    if key == ESC:
        return Transition(state.to_browse())
    entry = select_from(state.visible_entries, key)
    if entry is None:
        return _stay(state)
    pending = PendingMove(entry=entry, source=state.current_directory)
    return Transition(replace(state, mode=Mode.MOVE_SELECT_DESTINATION, transient=pending))


def _handle_move_destination(state: SessionState, key: str) -> Transition:
    pending = state.pending_move
    if pending is None:
        return Transition(state.to_browse(), (Refresh(),))

    def back_to_source(*effects: Effect) -> Transition:
        restored = replace(state.to_browse(), current_directory=pending.source, visible_entries=())
        return Transition(restored, (*effects, Refresh()))

    if key == ESC:
        return back_to_source()
    if key == ENTER:
        if state.current_directory == pending.source:
            return back_to_source(Notify(f"{pending.entry.name} is already in this folder"))
        return back_to_source(RelocateEntry(pending.entry, state.current_directory))
    if key == BACKSPACE:
        return _ascend(state) or _stay(state)
    entry = select_from(state.visible_entries, key)
    if entry is None or not entry.is_folder:
        return _stay(state)
    return _navigate(state, entry.path)


def _handle_confirm_quit(state: SessionState, key: str) -> Transition:
    if key in {"Y", "y"}:
        return Transition(state, (Quit(),))
    if key in {"N", "n", ESC}:
        return Transition(state.to_browse())
    return _stay(state)


_MODE_HANDLERS: dict[Mode, Callable[[SessionState, str], Transition]] = {
    Mode.BROWSE: _handle_browse,
    Mode.CREATE_FOLDER: _handle_create_folder,
    Mode.CREATE_COMMAND: _handle_create_command,
    Mode.DELETE: _handle_delete,
    Mode.MOVE: _handle_move,
    Mode.MOVE_SELECT_DESTINATION: _handle_move_destination,
    Mode.CONFIRM_QUIT: _handle_confirm_quit,
}


def step(state: SessionState, key: str) -> Transition:
    """Compute the transition for one key token.

    Any notification from the previous key is dismissed first.
    """
    state = state.without_notification()
    return _MODE_HANDLERS[state.mode](state, key)


__all__ = ["Transition", "step"]
