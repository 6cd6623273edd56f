"""Logging configuration for cmdbox.

The interactive UI owns the terminal, so records go to a log file under the
platform log directory instead of stderr.
"""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_log_dir

LOGGER_NAME = "cmdbox"
LOG_FILENAME = "cmdbox.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def default_log_path() -> Path:
    return Path(user_log_dir(LOGGER_NAME, appauthor=False)) / LOG_FILENAME


def configure_logging(log_path: Path | None = None, level: int = logging.INFO) -> Path | None:
    """Attach a file handler to the package logger.

    Returns the log file path, or ``None`` when the file cannot be opened;
    in that case records are dropped rather than written over the UI.
    """
    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(level)
    root.propagate = False

    for existing in list(root.handlers):
        root.removeHandler(existing)
        existing.close()

    path = log_path if log_path is not None else default_log_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(path, encoding="utf-8")
    except OSError:
        root.addHandler(logging.NullHandler())
        return None

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    return path
