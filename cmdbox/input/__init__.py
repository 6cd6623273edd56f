"""Input-layer public API for key decoding and selection addressing.

Exports are split between low-level terminal decoding (`read_key`) and the
key-token helpers consumed by the state machine.
"""

from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key
from .key_registry import KeyComboBinding, KeyComboRegistry
from .keys import (
    BACKSPACE,
    ENTER,
    ESC,
    MAX_SELECTABLE_ENTRIES,
    is_printable_key,
    select_from,
    selection_index,
    selection_key,
)

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyComboBinding",
    "KeyComboRegistry",
    "ESC",
    "ENTER",
    "BACKSPACE",
    "MAX_SELECTABLE_ENTRIES",
    "is_printable_key",
    "select_from",
    "selection_index",
    "selection_key",
]
