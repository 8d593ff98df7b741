"""Input validation for the command-line timestamp argument."""

from __future__ import annotations

import logging
import re

from epoch_calendar.types import TimestampArgumentError

logger = logging.getLogger(__name__)

WRONG_ARGUMENT_COUNT = "Wrong number of arguments, need one."
INVALID_TIMESTAMP = "Invalid unix timestamp."

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Plain base-10 only: no whitespace, underscores or non-ASCII digits,
# all of which int() would otherwise accept.
_TIMESTAMP_RE = re.compile(r"[+-]?[0-9]+")


def validate_arguments(args: list[str]) -> list[str]:
    """Validate positional arguments. Returns list of error messages (empty = valid).

    Checks:
    - Exactly one argument
    - It is a base-10 signed integer
    - It fits in a signed 64-bit counter
    """
    if len(args) != 1:
        return [WRONG_ARGUMENT_COUNT]

    raw = args[0]
    if not _TIMESTAMP_RE.fullmatch(raw):
        return [INVALID_TIMESTAMP]
    if not INT64_MIN <= int(raw) <= INT64_MAX:
        return [INVALID_TIMESTAMP]
    return []


def parse_timestamp_argument(args: list[str]) -> int:
    """Turn the positional arguments into a timestamp.

    Raises TimestampArgumentError carrying the user-facing message.
    """
    errors = validate_arguments(args)
    if errors:
        argument = args[0] if len(args) == 1 else None
        reason = "argument count" if errors[0] == WRONG_ARGUMENT_COUNT else "syntax"
        logger.debug("rejected arguments %r: %s", args, reason)
        raise TimestampArgumentError(errors[0], argument=argument, reason=reason)
    return int(args[0])
