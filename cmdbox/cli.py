"""Command-line front door for cmdbox.

Parses CLI options, merges them with the persisted config, configures the
log file, and dispatches into the interactive runtime.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from . import __version__
from .logs import configure_logging
from .runtime import run_app
from .runtime.config import (
    CONFIG_PATH,
    MAX_NOTIFY_SECONDS,
    coerce_notify_seconds,
    load_settings,
    save_settings,
)
from .storage import StorageError
from .ui_theme import available_theme_names

logger = logging.getLogger(__name__)


def _notify_seconds(value: str) -> float:
    """argparse type for the copy-notification duration."""
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from exc
    coerced = coerce_notify_seconds(parsed)
    if coerced is None:
        raise argparse.ArgumentTypeError(f"value must be in (0, {MAX_NOTIFY_SECONDS:g}]")
    return coerced


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cmdbox",
        description="Browse a folder tree of shell command snippets and copy one to the clipboard.",
    )
    parser.add_argument("--root", type=Path, default=None, help="Storage root directory for command snippets.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--notify-seconds",
        type=_notify_seconds,
        default=None,
        help="How long the copy notification stays on screen.",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Write the log to this file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details.")
    parser.add_argument(
        "--save-config",
        action="store_true",
        help=f"Persist the effective root and theme to {CONFIG_PATH}.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch the interactive browser."""
    args = build_parser().parse_args(argv)

    configure_logging(args.log_file, logging.DEBUG if args.verbose else logging.INFO)
    settings = load_settings(root=args.root, theme=args.theme, notify_seconds=args.notify_seconds)
    if args.save_config and not save_settings(settings):
        raise SystemExit(f"Cannot write config: {CONFIG_PATH}")

    if not sys.stdin.isatty():
        raise SystemExit("cmdbox needs an interactive terminal on stdin.")

    no_color = args.no_color or bool(os.environ.get("NO_COLOR"))
    try:
        run_app(settings, no_color=no_color)
    except StorageError as exc:
        logger.error("%s", exc)
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
