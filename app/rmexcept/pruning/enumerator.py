"""Directory enumeration for pruning.

Lists the direct children of a directory and classifies each one by
how it would be removed. Entries that cannot be inspected are isolated
per entry so one bad entry does not hide the rest of the listing.
"""

import logging
import stat
from pathlib import Path

from rmexcept.pruning.errors import DirectoryUnreadableError
from rmexcept.pruning.models import DirectoryEntry, EntryError, EntryType, EnumerationResult
from rmexcept.utils.formatting import printable

logger = logging.getLogger(__name__)


def list_children(directory: Path, *, skip_hidden: bool) -> EnumerationResult:
    """List the direct children of a directory.

    Each child is reported as ``<canonical directory>/<name>``, so the
    entry itself is never resolved through a symlink. Children that
    vanish while the listing is in progress are dropped silently; any
    other inspection failure is recorded in ``errors``.

    Args:
        directory: Directory to list.
        skip_hidden: If True, leave out entries whose name starts with a dot.

    Returns:
        EnumerationResult with entries sorted by name.

    Raises:
        DirectoryUnreadableError: If the directory cannot be opened.
    """
    try:
        base = directory.resolve(strict=True)
        children = sorted(base.iterdir())
    except OSError as e:
        raise DirectoryUnreadableError(directory, e.strerror or str(e)) from e

    entries: list[DirectoryEntry] = []
    errors: list[EntryError] = []

    for child in children:
        if skip_hidden and child.name.startswith("."):
            continue

        try:
            entry_type = classify_entry(child)
        except FileNotFoundError:
            logger.debug("Entry vanished while listing: %s", child)
            continue
        except OSError as e:
            logger.warning("Cannot inspect entry %s: %s", printable(str(child)), e)
            errors.append(EntryError(path=child, reason=e.strerror or str(e)))
            continue

        entries.append(DirectoryEntry(path=child, entry_type=entry_type))

    return EnumerationResult(directory=base, entries=tuple(entries), errors=tuple(errors))


def classify_entry(path: Path) -> EntryType:
    """Determine how an entry would be removed.

    Uses lstat so the entry itself is classified, not what it points to.
    A symlink counts as a file when its target exists, since removing it
    only unlinks the link.

    Args:
        path: Entry to classify.

    Returns:
        EntryType classification.

    Raises:
        OSError: If the entry cannot be stat'ed (FileNotFoundError if it is gone).
    """
    mode = path.lstat().st_mode

    if stat.S_ISDIR(mode):
        return EntryType.DIRECTORY
    if stat.S_ISREG(mode):
        return EntryType.FILE
    if stat.S_ISLNK(mode):
        # Dead symlinks are left alone
        return EntryType.FILE if path.exists() else EntryType.OTHER

    return EntryType.OTHER
