"""Command-line interface for lstable."""

import argparse
import logging
import sys
from datetime import timezone
from importlib import metadata

from rich.console import Console

from lstable.output_generators import list_directory


def main(argv: list[str] | None = None):
    """Main entry point for the lstable CLI."""
    parser = argparse.ArgumentParser(
        prog="lstable",
        description="List a directory as a color-coded table, like ls -la.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("path", nargs="?", default=".", help="The directory to list.")
    parser.add_argument(
        "--local-time",
        action="store_true",
        help="Show modification times in the local timezone instead of UTC.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log skipped entries and read failures to stderr.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {metadata.version('lstable')}")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    console = Console(no_color=args.no_color)
    status = list_directory(
        args.path,
        console,
        tz=None if args.local_time else timezone.utc,
    )
    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
