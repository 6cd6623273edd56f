"""Clipboard sink: hand command text to the host platform's clipboard tool."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys

logger = logging.getLogger(__name__)

CLIPBOARD_TIMEOUT_SECONDS = 2.0


def clipboard_command_candidates() -> list[list[str]]:
    """Return clipboard writer commands to try, in preference order."""
    if sys.platform == "darwin":
        return [["pbcopy"]]
    if os.name == "nt":
        return [["clip"]]
    candidates: list[list[str]] = []
    if os.environ.get("WAYLAND_DISPLAY"):
        candidates.append(["wl-copy"])
    candidates.extend(
        [
            ["xclip", "-selection", "clipboard"],
            ["xsel", "--clipboard", "--input"],
        ]
    )
    if ["wl-copy"] not in candidates:
        candidates.append(["wl-copy"])
    return candidates


def copy_text_to_clipboard(text: str) -> bool:
    """Best-effort clipboard copy across macOS, Windows, and common Linux tools.

    Text read with ``surrogateescape`` goes back out as its original bytes.
    """
    payload = text.encode("utf-8", errors="surrogateescape")
    for command in clipboard_command_candidates():
        if shutil.which(command[0]) is None:
            logger.debug("clipboard tool %s not found", command[0])
            continue
        try:
            proc = subprocess.run(
                command,
                input=payload,
                check=False,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                timeout=CLIPBOARD_TIMEOUT_SECONDS,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            logger.debug("clipboard tool %s failed: %s", command[0], exc)
            continue
        if proc.returncode == 0:
            return True
        logger.debug("clipboard tool %s exited with %s", command[0], proc.returncode)
    return False


__all__ = ["copy_text_to_clipboard", "clipboard_command_candidates"]
