"""Tests for the clipboard sink command selection and fallbacks."""

from __future__ import annotations

import subprocess
import unittest
from unittest import mock

from cmdbox.runtime import clipboard


class ClipboardCandidateTests(unittest.TestCase):
    def test_macos_uses_pbcopy(self) -> None:
        with mock.patch.object(clipboard.sys, "platform", "darwin"):
            self.assertEqual(clipboard.clipboard_command_candidates(), [["pbcopy"]])

    def test_linux_prefers_wl_copy_under_wayland(self) -> None:
        with mock.patch.object(clipboard.sys, "platform", "linux"), mock.patch.object(
            clipboard.os, "name", "posix"
        ), mock.patch.dict(clipboard.os.environ, {"WAYLAND_DISPLAY": "wayland-0"}, clear=True):
            candidates = clipboard.clipboard_command_candidates()

        self.assertEqual(candidates[0], ["wl-copy"])
        self.assertEqual(candidates.count(["wl-copy"]), 1)

    def test_linux_x11_tries_xclip_first(self) -> None:
        with mock.patch.object(clipboard.sys, "platform", "linux"), mock.patch.object(
            clipboard.os, "name", "posix"
        ), mock.patch.dict(clipboard.os.environ, {}, clear=True):
            candidates = clipboard.clipboard_command_candidates()

        self.assertEqual(candidates[0], ["xclip", "-selection", "clipboard"])
        self.assertEqual(candidates[-1], ["wl-copy"])


class CopyTextTests(unittest.TestCase):
    def test_skips_missing_tools_and_sends_text_to_first_available(self) -> None:
        candidates = [["missing-tool"], ["xsel", "--clipboard", "--input"]]
        completed = subprocess.CompletedProcess(args=candidates[1], returncode=0)
        with mock.patch.object(clipboard, "clipboard_command_candidates", return_value=candidates), mock.patch.object(
            clipboard.shutil, "which", side_effect=lambda name: None if name == "missing-tool" else f"/usr/bin/{name}"
        ), mock.patch.object(clipboard.subprocess, "run", return_value=completed) as run_mock:
            self.assertTrue(clipboard.copy_text_to_clipboard("ls -la"))

        run_mock.assert_called_once()
        self.assertEqual(run_mock.call_args.args[0], ["xsel", "--clipboard", "--input"])
        self.assertEqual(run_mock.call_args.kwargs["input"], b"ls -la")

    def test_surrogate_escaped_text_is_sent_as_original_bytes(self) -> None:
        completed = subprocess.CompletedProcess(args=["pbcopy"], returncode=0)
        with mock.patch.object(clipboard, "clipboard_command_candidates", return_value=[["pbcopy"]]), mock.patch.object(
            clipboard.shutil, "which", return_value="/usr/bin/pbcopy"
        ), mock.patch.object(clipboard.subprocess, "run", return_value=completed) as run_mock:
            self.assertTrue(clipboard.copy_text_to_clipboard(b"echo caf\xe9".decode("utf-8", errors="surrogateescape")))

        self.assertEqual(run_mock.call_args.kwargs["input"], b"echo caf\xe9")
        self.assertNotIn("text", run_mock.call_args.kwargs)

    def test_returns_false_when_every_tool_fails(self) -> None:
        candidates = [["a"], ["b"]]
        failed = subprocess.CompletedProcess(args=["b"], returncode=1)
        with mock.patch.object(clipboard, "clipboard_command_candidates", return_value=candidates), mock.patch.object(
            clipboard.shutil, "which", return_value="/usr/bin/tool"
        ), mock.patch.object(clipboard.subprocess, "run", side_effect=[OSError("boom"), failed]):
            self.assertFalse(clipboard.copy_text_to_clipboard("x"))

    def test_returns_false_without_any_tool(self) -> None:
        with mock.patch.object(clipboard.shutil, "which", return_value=None):
            self.assertFalse(clipboard.copy_text_to_clipboard("x"))


if __name__ == "__main__":
    unittest.main()
