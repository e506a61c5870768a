"""Exceptions raised while validating and pruning a directory.

All of these are raised before any entry is deleted; per-entry problems
during the deletion pass are reported as results instead.
"""

from pathlib import Path


class PruneError(Exception):
    """Base exception for pruning-related errors."""


class PathNotFoundError(PruneError):
    """Raised when a path to keep does not exist."""

    def __init__(self, path: str | Path) -> None:
        self.path = str(path)
        super().__init__(f"Path does not exist: {self.path}")


class NotInTargetDirectoryError(PruneError):
    """Raised when a path to keep is not a direct child of the target directory."""

    def __init__(self, path: str | Path, target_dir: str | Path) -> None:
        self.path = str(path)
        self.target_dir = str(target_dir)
        super().__init__(f"Entry {self.path} is not located directly in {self.target_dir}")


class DirectoryUnreadableError(PruneError):
    """Raised when a directory cannot be listed."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot read directory {self.path}: {reason}")
