"""Mode-specific footer and prompt lines."""

from __future__ import annotations

from ..ansi import printable_label
from ..highlight import highlight_command
from ..runtime.state import CommandInput, CommandPhase, Mode
from ..ui_theme import UITheme

INPUT_CURSOR = "_"


def _prompt(theme: UITheme, label: str, text: str, active: bool) -> str:
    cursor = f"{theme.dim}{INPUT_CURSOR}{theme.reset}" if active else ""
    return f" {label}: {text}{cursor}"


def footer_lines(
    mode: Mode,
    theme: UITheme,
    *,
    folder_name: str = "",
    command_input: CommandInput | None = None,
    moving_name: str = "",
) -> list[str]:
    """Return the hint/prompt block shown under the listing for ``mode``."""
    if mode is Mode.BROWSE:
        return [
            f"{theme.heading_normal} Commands:{theme.reset}",
            " [N]ew folder   [C]reate command   [D]elete item   [M]ove item",
            " [a-z] open folder / copy command   [ESC] back, or exit at top level",
        ]
    if mode is Mode.DELETE:
        return [
            f"{theme.heading_delete} DELETE MODE{theme.reset}",
            " Select item to delete or [ESC] to cancel",
        ]
    if mode is Mode.CREATE_FOLDER:
        return [
            f"{theme.heading_normal} CREATE FOLDER{theme.reset}",
            " Enter name or [ESC] to cancel",
            "",
            _prompt(theme, "Name", folder_name, active=True),
        ]
    if mode is Mode.CREATE_COMMAND:
        entry = command_input or CommandInput()
        naming = entry.phase is CommandPhase.NAMING
        lines = [
            f"{theme.heading_normal} CREATE COMMAND{theme.reset}",
            " Enter name or [ESC] to cancel" if naming else " Enter command text or [ESC] to cancel",
            "",
            _prompt(theme, "Name", entry.name, active=naming),
        ]
        if not naming:
            content = highlight_command(entry.content) if theme.highlight_commands else entry.content
            lines.append(_prompt(theme, "Content", content, active=True))
        return lines
    if mode is Mode.MOVE:
        return [
            f"{theme.heading_move} MOVE MODE{theme.reset}",
            " Select item to move or [ESC] to cancel",
        ]
    if mode is Mode.MOVE_SELECT_DESTINATION:
        return [
            f"{theme.heading_move} MOVE MODE - SELECTING DESTINATION{theme.reset}",
            f" Moving: {printable_label(moving_name)}",
            " Press [ENTER] to move here, [BACKSPACE] to go back, or select a folder",
        ]
    return [
        f"{theme.heading_delete} QUIT{theme.reset}",
        " Are you sure you want to quit? [Y/N]",
    ]
