"""Public runtime orchestration entry points.

This package groups the session bootstrap (`run_app`), the pure transition
table, the effect-applying controller, and the event loop used by tests and
composition code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .loop import RuntimeLoopIO, RuntimeLoopTiming


def run_app(*args, **kwargs):
    """Lazily import app entrypoint to avoid heavy bootstrap on import."""
    from .app import run_app as _run_app

    return _run_app(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


def __getattr__(name: str):
    if name in {"RuntimeLoopIO", "RuntimeLoopTiming"}:
        from . import loop as _loop

        return getattr(_loop, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "run_app",
    "run_main_loop",
    "RuntimeLoopIO",
    "RuntimeLoopTiming",
]
