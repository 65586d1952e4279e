"""Derivation of display fields from raw entry metadata.

Every function here is total: an unusable value turns into a placeholder
instead of an exception, so one odd entry never aborts the listing.
"""

import logging
import math
from datetime import datetime, timezone, tzinfo

from lstable.constants import (
    DIR_MARKER,
    DIR_SIZE_PLACEHOLDER,
    FILE_MARKER,
    KIB,
    MIB,
    MODIFIED_PLACEHOLDER,
    MODIFIED_TIME_FORMAT,
    NAME_PLACEHOLDER,
    OWNER_PLACEHOLDER,
    PERMISSION_FLAGS,
    UNSET_PERMISSION,
)
from lstable.identity import OwnerLookup, lookup_user_name
from lstable.models import EntryMetadata, FileType, FormattedRecord, StyledText, StyleTag

logger = logging.getLogger(__name__)

_OWNER_STYLES = {
    "r": StyleTag.ATTENTION,
    "w": StyleTag.DANGER,
    "x": StyleTag.ATTENTION,
}


def classify_type(is_dir: bool) -> FileType:
    """Pick the type tag for an entry.

    Args:
        is_dir: Whether the entry is a directory

    Returns:
        FileType.DIR for directories, FileType.FILE for everything else
    """
    return FileType.DIR if is_dir else FileType.FILE


def _round_half_up(value: float) -> int:
    # Quotients are never negative here
    return math.floor(value + 0.5)


def format_size(byte_length: int, is_dir: bool) -> StyledText:
    """Format a byte length using the b/k/m tiers.

    Quotients are rounded half away from zero.

    Args:
        byte_length: Size in bytes
        is_dir: Directories get a placeholder whatever their length

    Returns:
        Styled size string

    Examples:
        >>> format_size(2048, False).plain
        '2k'
        >>> format_size(1024 * 1024, False).plain
        '1024k'
    """
    if is_dir:
        return StyledText.single(DIR_SIZE_PLACEHOLDER, StyleTag.INFO)
    if byte_length < KIB:
        return StyledText.single(str(byte_length), StyleTag.SIZE_SMALL)
    if byte_length > MIB:
        return StyledText.single(f"{_round_half_up(byte_length / MIB)}m", StyleTag.SIZE_LARGE)
    return StyledText.single(f"{_round_half_up(byte_length / KIB)}k", StyleTag.SIZE_LARGE)


def format_owner(uid: int, lookup: OwnerLookup = lookup_user_name) -> str:
    """Resolve an owner id to a name, or the error sentinel on failure.

    Args:
        uid: Numeric owner id
        lookup: Owner id to name resolver

    Returns:
        The owner name, or "User error" if the lookup fails or finds nothing
    """
    try:
        name = lookup(uid)
    except (KeyError, OSError, OverflowError, ValueError) as e:
        logger.debug("Owner lookup failed for uid %s: %s", uid, e)
        name = None
    return name or OWNER_PLACEHOLDER


def format_name(name: str | bytes, is_dir: bool) -> StyledText:
    """Style an entry name, replacing names that are not valid text.

    Args:
        name: Entry name as returned by the OS; str names carrying
            surrogate escapes are treated as undecodable
        is_dir: Directories are rendered bold blue

    Returns:
        Styled name
    """
    try:
        text = name.decode("utf-8") if isinstance(name, bytes) else name
        text.encode("utf-8")
    except UnicodeError:
        logger.debug("Undecodable entry name %r", name)
        text = NAME_PLACEHOLDER

    return StyledText.single(text, StyleTag.DIRECTORY if is_dir else StyleTag.NEUTRAL)


def format_modified(timestamp: float | None, tz: tzinfo | None = timezone.utc) -> str:
    """Format a modification time as e.g. "14 Jun 09:32".

    Args:
        timestamp: POSIX timestamp, None if the platform could not supply one
        tz: Timezone to display in; None means local time

    Returns:
        Formatted time, or an empty string if unavailable
    """
    if timestamp is None:
        return MODIFIED_PLACEHOLDER
    try:
        moment = datetime.fromtimestamp(timestamp, tz)
    except (OverflowError, OSError, ValueError) as e:
        logger.debug("Unusable timestamp %r: %s", timestamp, e)
        return MODIFIED_PLACEHOLDER
    return f"{moment.day:>2} {moment.strftime(MODIFIED_TIME_FORMAT)}"


def format_permissions(is_dir: bool, mode: int) -> StyledText:
    """Render a directory marker plus the nine rwx permission characters.

    Set owner bits are highlighted individually (write stands out from read
    and execute); set group and other bits share one style. Clear bits show
    as a muted "-".

    Args:
        is_dir: Selects the leading marker, independent of mode
        mode: Permission bits

    Returns:
        Ten-character styled string, bold as a whole

    Examples:
        >>> format_permissions(False, 0o754).plain
        '.rwxr-xr--'
    """
    if is_dir:
        segments = [(DIR_MARKER, StyleTag.DIRECTORY_MARKER)]
    else:
        segments = [(FILE_MARKER, StyleTag.NEUTRAL)]

    for i, (bit, char) in enumerate(PERMISSION_FLAGS):
        if not mode & bit:
            segments.append((UNSET_PERMISSION, StyleTag.MUTED))
        elif i < 3:
            segments.append((char, _OWNER_STYLES[char]))
        else:
            segments.append((char, StyleTag.GRANTED))

    return StyledText(tuple(segments), bold=True)


def format_entry(
    name: str | bytes,
    metadata: EntryMetadata,
    lookup: OwnerLookup = lookup_user_name,
    tz: tzinfo | None = timezone.utc,
) -> FormattedRecord:
    """Build the table row for one entry from its name and metadata."""
    return FormattedRecord(
        permissions=format_permissions(metadata.is_dir, metadata.mode),
        length=format_size(metadata.length, metadata.is_dir),
        owner=format_owner(metadata.uid, lookup),
        name=format_name(name, metadata.is_dir),
        e_type=classify_type(metadata.is_dir),
        modified=format_modified(metadata.modified, tz),
    )
