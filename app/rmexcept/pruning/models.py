"""Pruning domain models.

This module defines the data structures passed between the enumerator
and the pruner: typed directory entries, per-entry enumeration errors,
and the per-entry outcome of a pruning pass.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class EntryType(str, Enum):
    """Type of a directory entry as far as deletion is concerned.

    Attributes:
        FILE: Regular file or symlink to an existing target (removed by unlink).
        DIRECTORY: Real directory (removed recursively).
        OTHER: Dangling symlink, FIFO, socket or device node (never removed).
    """

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


class PruneOutcome(str, Enum):
    """Outcome of processing a single scheduled entry.

    Attributes:
        DELETED: Entry was removed.
        WOULD_DELETE: Dry-run; entry would have been removed.
        VANISHED: Entry disappeared before it could be removed.
        UNSUPPORTED: Entry type cannot be removed and was skipped.
        FAILED: Removal was attempted and failed.
    """

    DELETED = "deleted"
    WOULD_DELETE = "would_delete"
    VANISHED = "vanished"
    UNSUPPORTED = "unsupported"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """A direct child of a directory.

    Attributes:
        path: Canonical absolute path of the entry.
        entry_type: Deletion-relevant type of the entry.
    """

    path: Path
    entry_type: EntryType

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.path.is_absolute():
            msg = f"Entry path must be absolute, got {self.path}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class EntryError:
    """A child that could not be inspected while listing a directory.

    Attributes:
        path: Absolute path of the offending entry.
        reason: Human-readable cause.
    """

    path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class EnumerationResult:
    """Direct children of a directory plus the entries that failed inspection."""

    directory: Path
    entries: tuple[DirectoryEntry, ...] = ()
    errors: tuple[EntryError, ...] = ()

    @property
    def paths(self) -> frozenset[Path]:
        """Set of entry paths, for membership checks."""
        return frozenset(entry.path for entry in self.entries)


@dataclass(frozen=True, slots=True)
class PruneActionResult:
    """Result of processing a single entry scheduled for deletion.

    Attributes:
        path: Absolute path that was operated on.
        entry_type: Type the entry had when it was listed.
        outcome: What happened to the entry.
        error: Error message for FAILED and UNSUPPORTED outcomes, None otherwise.
    """

    path: Path
    entry_type: EntryType
    outcome: PruneOutcome
    error: str | None = None

    @property
    def success(self) -> bool:
        """Check if the entry is gone (or would be, in a dry-run)."""
        return self.outcome in (
            PruneOutcome.DELETED,
            PruneOutcome.WOULD_DELETE,
            PruneOutcome.VANISHED,
        )

    @property
    def failed(self) -> bool:
        """Check if removal was attempted and failed."""
        return self.outcome == PruneOutcome.FAILED


@dataclass(slots=True)
class PruneReport:
    """Collected results of one pruning pass.

    Attributes:
        target_dir: Directory that was pruned.
        dry_run: Whether the pass was a dry-run.
        results: One result per entry scheduled for deletion.
        entry_errors: Children that could not be inspected during listing.
        kept: Entries that were left in place because they are in the keep set.
    """

    target_dir: Path
    dry_run: bool = False
    results: list[PruneActionResult] = field(default_factory=list)
    entry_errors: list[EntryError] = field(default_factory=list)
    kept: list[Path] = field(default_factory=list)

    @property
    def deleted(self) -> list[PruneActionResult]:
        """Results for entries that are gone or would be gone."""
        return [r for r in self.results if r.success]

    @property
    def failed(self) -> list[PruneActionResult]:
        """Results for entries whose removal failed."""
        return [r for r in self.results if r.failed]

    @property
    def unsupported(self) -> list[PruneActionResult]:
        """Results for entries skipped because of their type."""
        return [r for r in self.results if r.outcome == PruneOutcome.UNSUPPORTED]

    @property
    def has_failures(self) -> bool:
        """Check if any removal or inspection failed."""
        return bool(self.failed or self.entry_errors)
