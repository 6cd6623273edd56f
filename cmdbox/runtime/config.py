"""Persistent JSON config helpers.

Stores the storage root, UI theme, and copy-notification duration.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir

APP_NAME = "cmdbox"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_ROOT = Path(user_data_dir(APP_NAME, appauthor=False)) / "commands"
DEFAULT_NOTIFY_SECONDS = 1.0
MAX_NOTIFY_SECONDS = 10.0

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Effective settings after merging config file and CLI overrides."""

    root: Path
    theme: str | None = None
    notify_seconds: float = DEFAULT_NOTIFY_SECONDS


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> bool:
    """Persist config data as pretty-printed JSON; return whether it was written."""
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("cannot write config %s: %s", CONFIG_PATH, exc)
        return False
    return True


def load_root() -> Path:
    """Return the configured storage root, or the platform data default."""
    value = load_config().get("root")
    if not isinstance(value, str) or not value.strip():
        return DEFAULT_ROOT
    return Path(value.strip()).expanduser()


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def coerce_notify_seconds(value: object) -> float | None:
    """Accept finite numbers in ``(0, MAX_NOTIFY_SECONDS]``; anything else is ``None``."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value) or value <= 0 or value > MAX_NOTIFY_SECONDS:
        return None
    return float(value)


def load_notify_seconds() -> float:
    coerced = coerce_notify_seconds(load_config().get("notify_seconds"))
    return DEFAULT_NOTIFY_SECONDS if coerced is None else coerced


def load_settings(
    root: Path | None = None,
    theme: str | None = None,
    notify_seconds: float | None = None,
) -> Settings:
    """Merge explicit overrides over persisted values."""
    return Settings(
        root=root if root is not None else load_root(),
        theme=theme if theme is not None else load_theme_name(),
        notify_seconds=notify_seconds if notify_seconds is not None else load_notify_seconds(),
    )


def save_settings(settings: Settings) -> bool:
    """Persist root and theme (and a non-default notify duration)."""
    config = load_config()
    config["root"] = str(settings.root)
    if settings.theme:
        config["theme"] = settings.theme.strip()
    if settings.notify_seconds != DEFAULT_NOTIFY_SECONDS:
        config["notify_seconds"] = settings.notify_seconds
    return save_config(config)
