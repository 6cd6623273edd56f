"""Domain model and filesystem accessor for the command storage tree.

This package contains non-UI primitives:
- entry datatypes (folders and command files) and operation results
- the root-confined accessor that lists and mutates the tree
"""

from __future__ import annotations

from .types import COMMAND_SUFFIX, Entry, EntryKind, StorageError, StorageResult
from .fs import StorageTree, command_file_name, validate_entry_name

__all__ = [
    "COMMAND_SUFFIX",
    "Entry",
    "EntryKind",
    "StorageError",
    "StorageResult",
    "StorageTree",
    "command_file_name",
    "validate_entry_name",
]
