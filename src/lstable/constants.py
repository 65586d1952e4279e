"""Thresholds, placeholders and layout constants shared across lstable."""

KIB = 1024
MIB = 1024 * 1024

# Placeholders substituted when a value is unavailable
DIR_SIZE_PLACEHOLDER = "-"
OWNER_PLACEHOLDER = "User error"
NAME_PLACEHOLDER = "Unknown name"
MODIFIED_PLACEHOLDER = ""

DIR_MARKER = "d"
FILE_MARKER = "."
UNSET_PERMISSION = "-"

# Owner, group, other; highest bit first
PERMISSION_FLAGS: tuple[tuple[int, str], ...] = (
    (0o400, "r"),
    (0o200, "w"),
    (0o100, "x"),
    (0o040, "r"),
    (0o020, "w"),
    (0o010, "x"),
    (0o004, "r"),
    (0o002, "w"),
    (0o001, "x"),
)

# Day of month is space padded, as strftime's %e
MODIFIED_TIME_FORMAT = "%b %H:%M"

COLUMN_HEADERS: tuple[str, ...] = (
    "Permissions",
    "Size",
    "Owner",
    "Name",
    "Type",
    "Modified",
)

PATH_MISSING_MESSAGE = "Path does not exist"
PATH_ERROR_MESSAGE = "Error reading directory"
