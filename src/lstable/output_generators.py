"""Table rendering and the top-level listing run."""

import logging
import os
from datetime import timezone, tzinfo

from rich import box
from rich.console import Console
from rich.measure import Measurement
from rich.table import Table
from rich.text import Text

from lstable.constants import COLUMN_HEADERS, PATH_ERROR_MESSAGE, PATH_MISSING_MESSAGE
from lstable.file_operations import path_exists, read_directory
from lstable.identity import OwnerLookup, lookup_user_name
from lstable.models import FormattedRecord, StyledText, StyleTag

logger = logging.getLogger(__name__)

STYLE_MAP: dict[StyleTag, str] = {
    StyleTag.ATTENTION: "bright_yellow",
    StyleTag.DANGER: "bright_red",
    StyleTag.GRANTED: "green",
    StyleTag.MUTED: "bright_black",
    StyleTag.NEUTRAL: "white",
    StyleTag.DIRECTORY: "bold blue",
    StyleTag.DIRECTORY_MARKER: "bright_blue",
    StyleTag.SIZE_SMALL: "green",
    StyleTag.SIZE_LARGE: "bright_yellow",
    StyleTag.INFO: "cyan",
}

HEADER_STYLE = "bright_green"
_UNBOUNDED_WIDTH = 10_000
COLUMN_STYLES = {
    "Owner": "bright_yellow",
    "Type": "blue",
}


def to_rich_text(styled: StyledText) -> Text:
    """Convert tagged segments into a rich Text.

    Args:
        styled: Formatter output

    Returns:
        Text carrying the concrete style of every segment
    """
    text = Text()
    for segment, tag in styled.segments:
        text.append(segment, style=STYLE_MAP[tag])
    if styled.bold:
        text.stylize("bold")
    return text


def build_table(records: list[FormattedRecord]) -> Table:
    """Build the rounded listing table, one row per record, in order."""
    table = Table(box=box.ROUNDED, header_style=HEADER_STYLE)
    for header in COLUMN_HEADERS:
        table.add_column(Text(header, justify="center"), style=COLUMN_STYLES.get(header))

    for record in records:
        table.add_row(
            to_rich_text(record.permissions),
            to_rich_text(record.length),
            Text(record.owner),
            to_rich_text(record.name),
            Text(str(record.e_type)),
            Text(record.modified),
        )

    return table


def print_table(console: Console, table: Table) -> None:
    """Print a table without cropping or wrapping any cell.

    A table wider than the console is printed at its natural width, running
    past the right edge.

    Args:
        console: Console to print to
        table: Table to print
    """
    options = console.options.update_width(_UNBOUNDED_WIDTH)
    natural_width = Measurement.get(console, options, table).maximum
    if natural_width > console.width:
        table.width = natural_width
    console.print(table, crop=False)


def list_directory(
    target: str | os.PathLike,
    console: Console,
    lookup: OwnerLookup = lookup_user_name,
    tz: tzinfo | None = timezone.utc,
) -> int:
    """List one directory as a table on the given console.

    Args:
        target: Directory to list
        console: Console the table or error message is printed to
        lookup: Owner id to name resolver
        tz: Timezone for modification times, None for local time

    Returns:
        Exit status: 0 when a table was printed, 1 for a missing path or a
        failed existence check
    """
    try:
        exists = path_exists(target)
    except (OSError, ValueError) as e:
        logger.debug("Existence check failed for %s: %s", target, e)
        console.print(PATH_ERROR_MESSAGE, style="red", markup=False, highlight=False)
        return 1

    if not exists:
        console.print(PATH_MISSING_MESSAGE, style="red", markup=False, highlight=False)
        return 1

    records = read_directory(target, lookup, tz)
    logger.debug("Listed %d entries in %s", len(records), target)
    print_table(console, build_table(records))
    return 0
