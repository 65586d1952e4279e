"""Data models for lstable."""

import os
import stat
from dataclasses import dataclass
from enum import Enum


class FileType(Enum):
    """Type tag shown in the Type column."""

    FILE = "File"
    DIR = "Dir"

    def __str__(self) -> str:
        return self.value


class StyleTag(Enum):
    """Semantic style of a piece of formatted text.

    Tags are mapped to concrete terminal styles only when the table is
    rendered, so formatting results can be compared as plain values.
    """

    ATTENTION = "attention"
    DANGER = "danger"
    GRANTED = "granted"
    MUTED = "muted"
    NEUTRAL = "neutral"
    DIRECTORY = "directory"
    DIRECTORY_MARKER = "directory_marker"
    SIZE_SMALL = "size_small"
    SIZE_LARGE = "size_large"
    INFO = "info"


@dataclass(frozen=True)
class StyledText:
    """Text split into styled segments.

    Attributes:
        segments: Ordered (text, tag) pairs
        bold: Whether the whole string is emphasized
    """

    segments: tuple[tuple[str, StyleTag], ...]
    bold: bool = False

    @classmethod
    def single(cls, text: str, tag: StyleTag) -> "StyledText":
        """Build a one-segment StyledText.

        Args:
            text: The text
            tag: Style of the whole text

        Returns:
            StyledText holding a single segment, not bold
        """
        return cls(((text, tag),))

    @property
    def plain(self) -> str:
        """Undecorated text.

        Returns:
            All segment texts joined in order, without styling
        """
        return "".join(text for text, _ in self.segments)

    def __str__(self) -> str:
        return self.plain


@dataclass(frozen=True)
class EntryMetadata:
    """Point-in-time snapshot of one filesystem object's attributes.

    Attributes:
        is_dir: Whether the object is a directory
        length: Size in bytes
        mode: Permission bits (file type bits stripped)
        uid: Numeric owner id
        modified: Last modification as a POSIX timestamp, None if unavailable
    """

    is_dir: bool
    length: int
    mode: int
    uid: int
    modified: float | None = None

    @classmethod
    def from_stat(cls, st: os.stat_result) -> "EntryMetadata":
        return cls(
            is_dir=stat.S_ISDIR(st.st_mode),
            length=st.st_size,
            mode=stat.S_IMODE(st.st_mode),
            uid=st.st_uid,
            modified=getattr(st, "st_mtime", None),
        )


@dataclass(frozen=True)
class FormattedRecord:
    """One table row; every field is always populated."""

    permissions: StyledText
    length: StyledText
    owner: str
    name: StyledText
    e_type: FileType
    modified: str
