"""Main interactive event loop for the terminal UI.

Render, read one key, let the controller process it to completion, repeat.
This loop is intentionally wiring-heavy; behavior lives in the controller.
"""

from __future__ import annotations

import logging
import shutil
import time
from collections.abc import Callable
from dataclasses import dataclass

from ..input import ENTER, read_key
from ..render import RenderContext, context_for_state, render_frame
from ..terminal import TerminalController
from ..ui_theme import UITheme
from .session import SessionController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    notify_seconds: float


@dataclass(frozen=True)
class RuntimeLoopIO:
    """Injected terminal-facing operations; defaults talk to the real tty."""

    read_key: Callable[[int], str] = read_key
    render: Callable[[RenderContext], None] = render_frame
    sleep: Callable[[float], None] = time.sleep


def normalize_enter(key: str, skip_next_lf: bool) -> tuple[str | None, bool]:
    """Collapse CR, LF, and CRLF into a single ``ENTER`` token.

    Returns ``(key_or_None, skip_next_lf)``; ``None`` means the key is the LF
    half of a CRLF pair and must be dropped.
    """
    if skip_next_lf and key == "ENTER_LF":
        return None, False
    if key == "ENTER_CR":
        return ENTER, True
    if key == "ENTER_LF":
        return ENTER, False
    return key, False


def run_main_loop(
    controller: SessionController,
    terminal: TerminalController,
    stdin_fd: int,
    theme: UITheme,
    timing: RuntimeLoopTiming,
    io: RuntimeLoopIO | None = None,
) -> None:
    """Run the read-render-mutate loop until the user confirms quitting.

    A timed notification (post-copy) is painted and then holds the loop for
    ``timing.notify_seconds`` before it is dismissed. End of input also ends
    the loop so a closed terminal cannot spin it.
    """
    ops = io if io is not None else RuntimeLoopIO()
    skip_next_lf = False

    with terminal.raw_mode():
        while True:
            term = shutil.get_terminal_size((80, 24))
            ops.render(context_for_state(controller.state, term.columns, term.lines, theme))

            if controller.state.notification_timed:
                ops.sleep(timing.notify_seconds)
                controller.dismiss_notification()
                continue

            try:
                raw_key = ops.read_key(stdin_fd)
            except KeyboardInterrupt:
                # Ignore SIGINT-style interrupts; quitting goes through the confirm prompt.
                continue
            if raw_key == "":
                logger.warning("input stream closed; leaving session")
                break

            key, skip_next_lf = normalize_enter(raw_key, skip_next_lf)
            if key is None:
                continue
            if controller.handle_key(key):
                break
