"""Rendering engine for the command browser.

Defines render context data, composes full frames as plain line lists, and
writes them to the terminal. Nothing here reads the filesystem or mutates
session state; the listing shown is whatever the controller last refreshed.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from ..ansi import center_line, clip_ansi_line, printable_label
from ..input import MAX_SELECTABLE_ENTRIES, selection_key
from ..runtime.state import CommandInput, Mode, ModeClass, SessionState, mode_class
from ..storage import Entry
from ..ui_theme import UITheme
from .footer import footer_lines

APP_TITLE = " Command Clipboard Manager "
BANNER_MAX_WIDTH = 80
CLEAR_SCREEN = "\033[H\033[2J"

MODE_SUBTITLES: dict[Mode, str] = {
    Mode.DELETE: " -- DELETE MODE --",
    Mode.CREATE_FOLDER: " -- CREATE FOLDER --",
    Mode.CREATE_COMMAND: " -- CREATE COMMAND --",
    Mode.MOVE: " -- MOVE MODE --",
    Mode.MOVE_SELECT_DESTINATION: " -- MOVE MODE --",
    Mode.CONFIRM_QUIT: " -- QUIT --",
}


@dataclass
class RenderContext:
    mode: Mode
    root: Path
    current_directory: Path
    entries: tuple[Entry, ...]
    width: int
    height: int
    theme: UITheme
    folder_name: str = ""
    command_input: CommandInput | None = None
    moving_name: str = ""
    notification: str = ""
    notification_is_error: bool = False


def context_for_state(state: SessionState, width: int, height: int, theme: UITheme) -> RenderContext:
    """Project session state into the fields the renderer consumes."""
    folder = state.folder_input
    pending = state.pending_move
    return RenderContext(
        mode=state.mode,
        root=state.root,
        current_directory=state.current_directory,
        entries=state.visible_entries,
        width=width,
        height=height,
        theme=theme,
        folder_name=folder.name if folder is not None else "",
        command_input=state.command_input,
        moving_name=pending.entry.name if pending is not None else "",
        notification=state.notification,
        notification_is_error=state.notification_is_error,
    )


def location_label(root: Path, current: Path) -> str:
    """Breadcrumb: the root's name followed by the root-relative path."""
    try:
        relative = current.relative_to(root)
    except ValueError:
        return printable_label(str(current))
    return printable_label("/".join((root.name or str(root), *relative.parts)))


def banner_color(mode: Mode, theme: UITheme) -> str:
    klass = mode_class(mode)
    if klass is ModeClass.DESTRUCTIVE:
        return theme.banner_destructive
    if klass is ModeClass.TRANSITIONAL:
        return theme.banner_transitional
    return theme.banner_neutral


def banner_lines(mode: Mode, theme: UITheme, width: int) -> list[str]:
    color = banner_color(mode, theme)
    rows = [center_line("", width, "="), center_line(APP_TITLE, width)]
    subtitle = MODE_SUBTITLES.get(mode)
    if subtitle:
        rows.append(center_line(subtitle, width))
    rows.append(center_line("", width, "="))
    return [f"{color}{theme.bold}{row}{theme.reset}" for row in rows]


def entry_line(index: int, entry: Entry, mode: Mode, theme: UITheme) -> str:
    prefix = " [X] " if mode is Mode.DELETE else " "
    key = f"{theme.bold}{selection_key(index)}{theme.reset}"
    name = printable_label(entry.name)
    if entry.is_folder:
        label = f"{theme.folder}[DIR] {name}{theme.reset}"
    else:
        label = name
    return f"{prefix}{key} | {label}"


def entry_lines(context: RenderContext, max_rows: int) -> list[str]:
    """Indexed rows for selectable entries, trimmed to ``max_rows``."""
    theme = context.theme
    if not context.entries:
        return [f"{theme.dim}  (empty directory){theme.reset}"]
    selectable = context.entries[:MAX_SELECTABLE_ENTRIES]
    rows = [entry_line(idx, entry, context.mode, theme) for idx, entry in enumerate(selectable)]
    hidden = len(context.entries) - len(selectable)
    if len(rows) > max_rows:
        hidden += len(rows) - max(1, max_rows - 1)
        rows = rows[: max(1, max_rows - 1)]
    if hidden > 0:
        rows.append(f"{theme.dim}  ... {hidden} more not shown{theme.reset}")
    return rows


def notification_line(context: RenderContext) -> str:
    if not context.notification:
        return ""
    theme = context.theme
    color = theme.notification_error if context.notification_is_error else theme.notification
    return f"{color} * {printable_label(context.notification)}{theme.reset}"


def build_frame(context: RenderContext) -> list[str]:
    """Compose one full frame as display lines clipped to the terminal width."""
    theme = context.theme
    width = max(1, context.width)
    banner_width = min(width, BANNER_MAX_WIDTH)

    head = banner_lines(context.mode, theme, banner_width)
    head.append("")
    head.append(
        f"{theme.dim}Location: {theme.reset}{theme.location}"
        f"{location_label(context.root, context.current_directory)}{theme.reset}"
    )
    head.append("")

    tail = ["", "-" * banner_width, ""]
    tail.extend(
        footer_lines(
            context.mode,
            theme,
            folder_name=context.folder_name,
            command_input=context.command_input,
            moving_name=context.moving_name,
        )
    )
    notice = notification_line(context)
    if notice:
        tail.extend(["", notice])

    budget = max(1, context.height - len(head) - len(tail))
    frame = head + entry_lines(context, budget) + tail
    return [clip_ansi_line(line, width) if line else line for line in frame]


def render_frame(context: RenderContext, out_fd: int | None = None) -> None:
    """Clear the screen and paint ``context`` as one write."""
    fd = sys.stdout.fileno() if out_fd is None else out_fd
    payload = CLEAR_SCREEN + "\r\n".join(build_frame(context))
    os.write(fd, payload.encode("utf-8", errors="replace"))


__all__ = [
    "RenderContext",
    "context_for_state",
    "location_label",
    "banner_color",
    "build_frame",
    "render_frame",
]
