"""File system operations: existence check, enumeration and metadata."""

import logging
import os
from datetime import timezone, tzinfo

from lstable.formatting import format_entry
from lstable.identity import OwnerLookup, lookup_user_name
from lstable.models import EntryMetadata, FormattedRecord

logger = logging.getLogger(__name__)


def path_exists(path: str | os.PathLike) -> bool:
    """Check whether a path exists without hiding failures of the check.

    Args:
        path: Path to check

    Returns:
        True if the path exists, False if it is missing

    Raises:
        OSError: If the check itself fails, e.g. permission denied on a parent
            or a path component that is not a directory
    """
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    return True


def fetch_metadata(entry: os.DirEntry) -> EntryMetadata:
    """Stat a directory entry, following symlinks.

    Raises:
        OSError: If the entry cannot be stat'ed
    """
    return EntryMetadata.from_stat(entry.stat(follow_symlinks=True))


def read_directory(
    path: str | os.PathLike,
    lookup: OwnerLookup = lookup_user_name,
    tz: tzinfo | None = timezone.utc,
) -> list[FormattedRecord]:
    """Format every immediate entry of a directory.

    Records come back in the order the OS enumerates entries. A directory
    that cannot be opened yields an empty list; an entry whose metadata
    cannot be read is left out.

    Args:
        path: Directory to list
        lookup: Owner id to name resolver
        tz: Timezone for modification times, None for local time

    Returns:
        List of FormattedRecord objects
    """
    records: list[FormattedRecord] = []

    try:
        with os.scandir(path) as entries:
            for entry in entries:
                try:
                    metadata = fetch_metadata(entry)
                except OSError as e:
                    logger.debug("Skipping %s: %s", entry.path, e)
                    continue
                records.append(format_entry(entry.name, metadata, lookup, tz))
    except OSError as e:
        # TODO: tell an unreadable directory apart from an empty one
        logger.debug("Could not read directory %s: %s", path, e)

    return records
