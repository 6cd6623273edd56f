"""Composition root for an interactive cmdbox session.

Prepares the storage root, builds the controller, and hands everything to
``run_main_loop`` inside raw terminal mode.
"""

from __future__ import annotations

import logging
import sys

from ..storage import StorageTree
from ..terminal import TerminalController
from ..ui_theme import resolve_theme
from .clipboard import copy_text_to_clipboard
from .config import Settings
from .loop import RuntimeLoopTiming, run_main_loop
from .session import SessionController

logger = logging.getLogger(__name__)


def run_app(settings: Settings, no_color: bool = False) -> None:
    """Run the interactive browser over ``settings.root`` until the user quits.

    Raises ``StorageError`` when the storage root cannot be prepared.
    """
    storage = StorageTree(settings.root)
    root = storage.ensure_root()
    logger.info("session started at %s", root)

    controller = SessionController(storage, copy_text_to_clipboard)
    controller.start()

    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)
    run_main_loop(
        controller,
        terminal,
        stdin_fd,
        resolve_theme(settings.theme, no_color=no_color),
        RuntimeLoopTiming(notify_seconds=settings.notify_seconds),
    )
