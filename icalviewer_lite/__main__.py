"""Command-line entry for icalviewer_lite.

Reads a calendar document from a file or stdin and prints the validation
outcome and parsed events as JSON.
"""

from __future__ import annotations

import argparse
import sys
from typing import NoReturn

from . import run_cli


def _create_parser() -> argparse.ArgumentParser:
    """Create argument parser for icalviewer_lite CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="icalviewer",
        description="iCal Viewer Lite - validate an iCal file and list its events",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m icalviewer_lite calendar.ics          # Parse a local file
  curl -s URL | python -m icalviewer_lite -       # Parse from stdin
        """,
    )

    parser.add_argument(
        "source",
        nargs="?",
        default="-",
        help="Path to an .ics file, or - to read stdin (default: -)",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="YAML config file (default: $ICALVIEWER_CONFIG or ./icalviewer.yaml)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging and include parse warnings in the output",
    )
    parser.add_argument(
        "--indent",
        type=int,
        metavar="N",
        help="JSON indent (0 for compact output; default from config)",
    )

    return parser


def main() -> NoReturn:
    """Run the icalviewer_lite CLI."""
    parser = _create_parser()
    args = parser.parse_args()
    sys.exit(run_cli(args))


if __name__ == "__main__":
    main()
