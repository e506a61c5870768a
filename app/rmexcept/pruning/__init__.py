"""Selective directory pruning.

This module provides path resolution for entries to keep, directory
enumeration, and the pruner that deletes everything else.
"""

from rmexcept.pruning.enumerator import classify_entry, list_children
from rmexcept.pruning.errors import (
    DirectoryUnreadableError,
    NotInTargetDirectoryError,
    PathNotFoundError,
    PruneError,
)
from rmexcept.pruning.models import (
    DirectoryEntry,
    EntryError,
    EntryType,
    EnumerationResult,
    PruneActionResult,
    PruneOutcome,
    PruneReport,
)
from rmexcept.pruning.pruner import Pruner, prune
from rmexcept.pruning.resolver import resolve_keep_set, resolve_path, validate_membership

__all__ = [
    "DirectoryEntry",
    "DirectoryUnreadableError",
    "EntryError",
    "EntryType",
    "EnumerationResult",
    "NotInTargetDirectoryError",
    "PathNotFoundError",
    "PruneActionResult",
    "PruneError",
    "PruneOutcome",
    "PruneReport",
    "Pruner",
    "classify_entry",
    "list_children",
    "prune",
    "resolve_keep_set",
    "resolve_path",
    "validate_membership",
]
