"""Resolution and validation of paths to keep.

Turns user-supplied path strings into canonical absolute paths and
checks that each one names a direct child of the target directory.
"""

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from rmexcept.pruning.enumerator import list_children
from rmexcept.pruning.errors import NotInTargetDirectoryError, PathNotFoundError

logger = logging.getLogger(__name__)


def resolve_path(raw: str | Path, *, cwd: Path | None = None) -> Path:
    """Resolve a user-supplied path to its canonical absolute form.

    Relative paths are anchored at ``cwd``. The parent chain is resolved
    through the filesystem (``.``, ``..`` and symlinks), while the final
    component is kept as-is so that a symlink names the link itself.
    A final component of ``.`` or ``..`` resolves the whole path.

    Args:
        raw: Path as given by the user.
        cwd: Directory for relative paths. Defaults to the process working directory.

    Returns:
        Canonical absolute path of an existing entry.

    Raises:
        PathNotFoundError: If the path (or its parent) does not exist.
    """
    path = Path(raw)
    if not path.is_absolute():
        path = (cwd or Path.cwd()) / path

    try:
        if path.name in ("", "..") or os.path.basename(os.fspath(raw)) in (".", ".."):
            return path.resolve(strict=True)
        resolved = path.parent.resolve(strict=True) / path.name
    except (OSError, RuntimeError) as e:
        raise PathNotFoundError(raw) from e

    if not os.path.lexists(resolved):
        raise PathNotFoundError(raw)

    return resolved


def validate_membership(
    target_dir: Path,
    entry: Path,
    *,
    children: frozenset[Path] | None = None,
) -> None:
    """Check that an entry is a direct child of the target directory.

    The check is made against a full listing of ``target_dir`` (hidden
    entries included), so nested descendants and paths outside the
    directory are both rejected.

    Args:
        target_dir: Canonical absolute target directory.
        entry: Canonical absolute path to check.
        children: Pre-computed listing of ``target_dir`` to reuse.

    Raises:
        ValueError: If either path is not absolute.
        NotInTargetDirectoryError: If the entry is not a direct child.
        DirectoryUnreadableError: If ``target_dir`` cannot be listed.
    """
    if not target_dir.is_absolute() or not entry.is_absolute():
        msg = f"Non-absolute path passed for membership check: {target_dir}, {entry}"
        raise ValueError(msg)

    if children is None:
        children = list_children(target_dir, skip_hidden=False).paths

    if entry not in children:
        raise NotInTargetDirectoryError(entry, target_dir)


def resolve_keep_set(raw_paths: Iterable[str | Path], target_dir: Path) -> frozenset[Path]:
    """Resolve and validate every path to keep.

    Validation is all-or-nothing: the first invalid path raises, so the
    caller never starts deleting with a partially validated keep set.

    Args:
        raw_paths: Paths as given by the user, relative to ``target_dir``.
        target_dir: Canonical absolute target directory.

    Returns:
        Frozen set of canonical absolute paths to keep.

    Raises:
        PathNotFoundError: If a path does not exist.
        NotInTargetDirectoryError: If a path is not a direct child of ``target_dir``.
        DirectoryUnreadableError: If ``target_dir`` cannot be listed.
    """
    resolved = [resolve_path(raw, cwd=target_dir) for raw in raw_paths]
    if not resolved:
        return frozenset()

    children = list_children(target_dir, skip_hidden=False).paths
    for path in resolved:
        validate_membership(target_dir, path, children=children)
        logger.debug("Keeping %s", path)

    return frozenset(resolved)
