"""Reusable key-combo registry primitives."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

R = TypeVar("R")


@dataclass(frozen=True)
class KeyComboBinding(Generic[R]):
    """Mapping from one or more key tokens to a single action callback."""

    combos: tuple[str, ...]
    handler: Callable[[], R]


class KeyComboRegistry(Generic[R]):
    """Small exact-match key-dispatch table."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[], R]] = {}

    def register_binding(self, binding: KeyComboBinding[R]) -> KeyComboRegistry[R]:
        """Register one binding, overwriting existing handlers for same combos."""
        for combo in binding.combos:
            self._handlers[combo] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding[R]) -> KeyComboRegistry[R]:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(self, key: str) -> R | None:
        """Invoke bound handler for ``key`` and return its result."""
        handler = self._handlers.get(key)
        if handler is None:
            return None
        return handler()
