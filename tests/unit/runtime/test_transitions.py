"""Tests for the pure transition table.

Every mode is driven with key tokens against hand-built listings; no
filesystem access happens here, only states and effect lists are compared.
"""

from __future__ import annotations

import unittest
from dataclasses import replace
from pathlib import Path

from cmdbox.runtime.effects import (
    CopyCommand,
    CreateCommand,
    CreateFolder,
    Notify,
    Quit,
    Refresh,
    RelocateEntry,
    RemoveEntry,
)
from cmdbox.runtime.state import (
    CommandInput,
    CommandPhase,
    FolderNameInput,
    Mode,
    PendingMove,
    SessionState,
)
from cmdbox.runtime.transitions import step
from cmdbox.storage import Entry, EntryKind

ROOT = Path("/srv/commands")


def _folder(parent: Path, name: str) -> Entry:
    return Entry(name=name, kind=EntryKind.FOLDER, path=parent / name)


def _command(parent: Path, name: str) -> Entry:
    return Entry(name=name, kind=EntryKind.COMMAND, path=parent / name)


def _browse(directory: Path = ROOT, *entries: Entry) -> SessionState:
    return replace(SessionState.initial(ROOT), current_directory=directory, visible_entries=tuple(entries))


def _feed(state: SessionState, *keys: str) -> SessionState:
    for key in keys:
        state = step(state, key).state
    return state


class BrowseTransitionTests(unittest.TestCase):
    def test_mode_letters_enter_their_modes_with_matching_transient(self) -> None:
        state = _browse()
        expected = {
            "N": (Mode.CREATE_FOLDER, FolderNameInput()),
            "C": (Mode.CREATE_COMMAND, CommandInput()),
            "D": (Mode.DELETE, None),
            "M": (Mode.MOVE, None),
        }
        for key, (mode, transient) in expected.items():
            with self.subTest(key=key):
                transition = step(state, key)
                self.assertEqual(transition.state.mode, mode)
                self.assertEqual(transition.state.transient, transient)
                self.assertEqual(transition.effects, ())
                self.assertTrue(transition.state.transient_matches_mode())

    def test_mode_letters_are_case_sensitive(self) -> None:
        work = _folder(ROOT, "work")
        state = _browse(ROOT, work)

        self.assertEqual(step(state, "n").state.mode, Mode.BROWSE)
        self.assertEqual(step(state, "d").state, state)

    def test_letter_on_folder_descends_and_requests_refresh(self) -> None:
        work = _folder(ROOT, "work")
        transition = step(_browse(ROOT, work), "a")

        self.assertEqual(transition.state.current_directory, ROOT / "work")
        self.assertEqual(transition.state.visible_entries, ())
        self.assertEqual(transition.effects, (Refresh(),))

    def test_letter_on_command_copies_without_state_change(self) -> None:
        ls = _command(ROOT, "ls.cmd")
        state = _browse(ROOT, ls)
        transition = step(state, "a")

        self.assertEqual(transition.state, state)
        self.assertEqual(transition.effects, (CopyCommand(ls),))

    def test_escape_ascends_below_root_and_confirms_quit_at_root(self) -> None:
        ascend = step(_browse(ROOT / "work" / "deep"), "ESC")
        self.assertEqual(ascend.state.current_directory, ROOT / "work")
        self.assertEqual(ascend.state.mode, Mode.BROWSE)
        self.assertEqual(ascend.effects, (Refresh(),))

        at_root = step(_browse(ROOT), "ESC")
        self.assertEqual(at_root.state.current_directory, ROOT)
        self.assertEqual(at_root.state.mode, Mode.CONFIRM_QUIT)
        self.assertEqual(at_root.effects, ())

    def test_out_of_range_selection_is_ignored(self) -> None:
        state = _browse(ROOT, _command(ROOT, "a.cmd"), _command(ROOT, "b.cmd"))
        for key in ("c", "z", "{", "UP", "ENTER", "BACKSPACE"):
            with self.subTest(key=key):
                transition = step(state, key)
                self.assertEqual(transition.state, state)
                self.assertEqual(transition.effects, ())

    def test_only_first_26_entries_are_selectable(self) -> None:
        entries = [_command(ROOT, f"cmd{idx:02d}.cmd") for idx in range(30)]
        state = _browse(ROOT, *entries)

        self.assertEqual(step(state, "z").effects, (CopyCommand(entries[25]),))
        copied = {step(state, key).effects for key in "abcdefghijklmnopqrstuvwxyz{|}~"}
        for idx in range(26, 30):
            self.assertNotIn((CopyCommand(entries[idx]),), copied)

    def test_notification_is_dismissed_by_next_key(self) -> None:
        state = _browse().with_notification("boom", error=True)
        after = step(state, "x").state

        self.assertEqual(after.notification, "")
        self.assertFalse(after.notification_is_error)


class CreateFolderTransitionTests(unittest.TestCase):
    def test_typing_backspace_and_submit(self) -> None:
        state = _feed(_browse(), "N", "w", "o", "r", "x", "BACKSPACE", "k")
        self.assertEqual(state.folder_input, FolderNameInput("work"))

        transition = step(state, "ENTER")
        self.assertEqual(transition.state.mode, Mode.BROWSE)
        self.assertIsNone(transition.state.transient)
        self.assertEqual(transition.effects, (CreateFolder(ROOT, "work"), Refresh()))

    def test_backspace_on_empty_buffer_is_noop(self) -> None:
        state = _feed(_browse(), "N", "BACKSPACE")
        self.assertEqual(state.mode, Mode.CREATE_FOLDER)
        self.assertEqual(state.folder_input, FolderNameInput(""))

    def test_enter_with_empty_name_stays_in_mode(self) -> None:
        state = _feed(_browse(), "N")
        transition = step(state, "ENTER")

        self.assertEqual(transition.state, state)
        self.assertEqual(transition.effects, ())

    def test_escape_discards_buffer(self) -> None:
        state = _feed(_browse(), "N", "t", "m", "p", "ESC")
        self.assertEqual(state.mode, Mode.BROWSE)
        self.assertIsNone(state.transient)

    def test_mode_letters_and_selection_keys_are_text(self) -> None:
        state = _feed(_browse(ROOT, _folder(ROOT, "x")), "N", "D", "a", "M", " ", "~")
        self.assertEqual(state.folder_input, FolderNameInput("DaM ~"))
        self.assertEqual(state.current_directory, ROOT)


class CreateCommandTransitionTests(unittest.TestCase):
    def test_name_then_content_then_commit(self) -> None:
        state = _feed(_browse(), "C", "l", "s", "ENTER")
        self.assertEqual(state.command_input, CommandInput(CommandPhase.WRITING, "ls", ""))

        state = _feed(state, "l", "s", " ", "-", "l", "a", "x", "BACKSPACE")
        self.assertEqual(state.command_input.content, "ls -la")
        self.assertEqual(state.command_input.name, "ls")

        transition = step(state, "ENTER")
        self.assertEqual(transition.state.mode, Mode.BROWSE)
        self.assertIsNone(transition.state.transient)
        self.assertEqual(transition.effects, (CreateCommand(ROOT, "ls", "ls -la"), Refresh()))

    def test_empty_submissions_stay_in_current_phase(self) -> None:
        naming = _feed(_browse(), "C")
        self.assertEqual(step(naming, "ENTER").state.command_input.phase, CommandPhase.NAMING)

        writing = _feed(naming, "x", "ENTER")
        transition = step(writing, "ENTER")
        self.assertEqual(transition.state.command_input.phase, CommandPhase.WRITING)
        self.assertEqual(transition.effects, ())

    def test_backspace_edits_only_active_phase(self) -> None:
        state = _feed(_browse(), "C", "a", "b", "ENTER", "BACKSPACE", "BACKSPACE")
        self.assertEqual(state.command_input, CommandInput(CommandPhase.WRITING, "ab", ""))

    def test_escape_during_content_discards_both_buffers(self) -> None:
        state = _feed(_browse(), "C", "a", "ENTER", "b", "ESC")
        self.assertEqual(state.mode, Mode.BROWSE)
        self.assertIsNone(state.transient)


class DeleteTransitionTests(unittest.TestCase):
    def test_valid_selection_deletes_once_and_returns_to_browse(self) -> None:
        target = _command(ROOT, "b.cmd")
        state = _feed(_browse(ROOT, _command(ROOT, "a.cmd"), target), "D")
        transition = step(state, "b")

        self.assertEqual(transition.state.mode, Mode.BROWSE)
        self.assertEqual(transition.effects, (RemoveEntry(target), Refresh()))

    def test_invalid_selection_keeps_delete_mode(self) -> None:
        state = _feed(_browse(ROOT, _command(ROOT, "a.cmd")), "D")
        transition = step(state, "q")

        self.assertEqual(transition.state.mode, Mode.DELETE)
        self.assertEqual(transition.effects, ())
        self.assertEqual(step(state, "ESC").state.mode, Mode.BROWSE)


class MoveTransitionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.item = _command(ROOT / "a", "e.cmd")
        self.state = _feed(_browse(ROOT / "a", self.item), "M")

    def test_selection_captures_entry_and_source(self) -> None:
        state = step(self.state, "a").state

        self.assertEqual(state.mode, Mode.MOVE_SELECT_DESTINATION)
        self.assertEqual(state.pending_move, PendingMove(self.item, ROOT / "a"))

    def test_invalid_selection_and_escape_in_move(self) -> None:
        self.assertEqual(step(self.state, "k").state.mode, Mode.MOVE)
        self.assertEqual(step(self.state, "ESC").state.mode, Mode.BROWSE)

    def test_enter_in_source_directory_does_not_relocate(self) -> None:
        selecting = step(self.state, "a").state
        transition = step(selecting, "ENTER")

        self.assertEqual(transition.state.mode, Mode.BROWSE)
        self.assertEqual(transition.state.current_directory, ROOT / "a")
        self.assertFalse(any(isinstance(effect, RelocateEntry) for effect in transition.effects))
        self.assertTrue(any(isinstance(effect, Notify) for effect in transition.effects))

    def test_navigate_then_enter_relocates_and_restores_source(self) -> None:
        selecting = step(self.state, "a").state
        at_root = step(selecting, "BACKSPACE").state
        self.assertEqual(at_root.current_directory, ROOT)
        self.assertEqual(at_root.mode, Mode.MOVE_SELECT_DESTINATION)

        listed = replace(at_root, visible_entries=(_folder(ROOT, "a"), _folder(ROOT, "b"), _command(ROOT, "x.cmd")))
        ignored_file = step(listed, "c").state
        self.assertEqual(ignored_file.current_directory, ROOT)

        in_b = step(listed, "b").state
        self.assertEqual(in_b.current_directory, ROOT / "b")

        transition = step(in_b, "ENTER")
        self.assertEqual(transition.state.mode, Mode.BROWSE)
        self.assertEqual(transition.state.current_directory, ROOT / "a")
        self.assertIsNone(transition.state.transient)
        self.assertEqual(transition.effects, (RelocateEntry(self.item, ROOT / "b"), Refresh()))

    def test_backspace_at_root_is_blocked(self) -> None:
        selecting = replace(step(self.state, "a").state, current_directory=ROOT)
        self.assertEqual(step(selecting, "BACKSPACE").state.current_directory, ROOT)

    def test_escape_aborts_and_restores_source(self) -> None:
        selecting = step(self.state, "a").state
        elsewhere = replace(selecting, current_directory=ROOT / "b")
        transition = step(elsewhere, "ESC")

        self.assertEqual(transition.state.mode, Mode.BROWSE)
        self.assertEqual(transition.state.current_directory, ROOT / "a")
        self.assertEqual(transition.effects, (Refresh(),))


class ConfirmQuitTransitionTests(unittest.TestCase):
    def test_yes_quits_and_no_or_escape_returns(self) -> None:
        state = step(_browse(), "ESC").state
        self.assertEqual(state.mode, Mode.CONFIRM_QUIT)

        self.assertEqual(step(state, "Y").effects, (Quit(),))
        self.assertEqual(step(state, "N").state.mode, Mode.BROWSE)
        self.assertEqual(step(state, "ESC").state.mode, Mode.BROWSE)

    def test_other_keys_keep_prompt(self) -> None:
        state = step(_browse(), "ESC").state
        transition = step(state, "a")
        self.assertEqual(transition.state.mode, Mode.CONFIRM_QUIT)
        self.assertEqual(transition.effects, ())


if __name__ == "__main__":
    unittest.main()
