"""lstable: list a directory's contents as a formatted, color-coded table.

This package reads one directory's immediate entries, turns each entry's
metadata into display strings (permissions, size, owner, name, type,
modification time) and prints them as a rounded terminal table.
"""

from lstable.cli import main
from lstable.models import FormattedRecord

__version__ = "0.1.0"
__all__ = ["main", "FormattedRecord"]
