"""Command-line entry point: epoch-calendar <timestamp>."""

from __future__ import annotations

import sys

from epoch_calendar.formatting import parse_unix
from epoch_calendar.schema import parse_timestamp_argument
from epoch_calendar.types import TimestampArgumentError


def main(argv: list[str] | None = None) -> int:
    """Print the UTC date for one timestamp argument. Returns the exit code.

    argv excludes the program name; defaults to sys.argv[1:].
    User errors print a one-line message to stdout and return 1.
    """
    args = sys.argv[1:] if argv is None else list(argv)

    try:
        timestamp = parse_timestamp_argument(args)
    except TimestampArgumentError as e:
        print(e.message)
        return 1

    print(parse_unix(timestamp))
    return 0
