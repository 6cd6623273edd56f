"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the banner, listing, footer, and notification
line. The banner color is picked per mode class by the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    bold: str
    dim: str
    banner_neutral: str
    banner_transitional: str
    banner_destructive: str
    location: str
    folder: str
    heading_normal: str
    heading_move: str
    heading_delete: str
    notification: str
    notification_error: str
    highlight_commands: bool = True


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    bold="\033[1m",
    dim="\033[2m",
    banner_neutral="\033[34m",
    banner_transitional="\033[32m",
    banner_destructive="\033[31m",
    location="\033[36m",
    folder="\033[34m",
    heading_normal="\033[32m",
    heading_move="\033[33m",
    heading_delete="\033[31m",
    notification="\033[32m",
    notification_error="\033[31m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    bold="\033[1m",
    dim="\033[2;38;5;110m",
    banner_neutral="\033[38;5;39m",
    banner_transitional="\033[38;5;84m",
    banner_destructive="\033[38;5;203m",
    location="\033[38;5;153m",
    folder="\033[1;38;5;45m",
    heading_normal="\033[38;5;84m",
    heading_move="\033[38;5;215m",
    heading_delete="\033[38;5;203m",
    notification="\033[38;5;84m",
    notification_error="\033[38;5;203m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    bold="",
    dim="",
    banner_neutral="",
    banner_transitional="",
    banner_destructive="",
    location="",
    folder="",
    heading_normal="",
    heading_move="",
    heading_delete="",
    notification="",
    notification_error="",
    highlight_commands=False,
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if not candidate:
        return DEFAULT_THEME.name
    if candidate == PLAIN_THEME.name:
        return DEFAULT_THEME.name
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    normalized = normalize_theme_name(name)
    return _THEMES.get(normalized, DEFAULT_THEME)


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
