"""Calendar decomposer: epoch seconds <-> CivilDateTime.

The decomposer moves a single cursor (epoch seconds of the start of the
unit being resolved) from the epoch toward the target timestamp, one
calendar unit at a time: year, month, day, hour, minute, second.
"""

from __future__ import annotations

import logging

from epoch_calendar.calendar import month_lengths, seconds_in_year
from epoch_calendar.types import CivilDateTime
from epoch_calendar.units import (
    DAY,
    EPOCH_YEAR,
    GREGORIAN_CYCLE_YEARS,
    HOUR,
    MINUTE,
    SECONDS_PER_DAY,
    SECONDS_PER_GREGORIAN_CYCLE,
)

logger = logging.getLogger(__name__)

EPOCH = CivilDateTime(year=EPOCH_YEAR, month=1, day=1)


def _require_int(value: object, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def _step_year(year: int, cursor: int, step: int) -> tuple[int, int]:
    """Move the (year, cursor) boundary one year forward (+1) or back (-1).

    Going forward consumes the current year; going back consumes the
    previous one. Either way the cursor stays on a January 1st.
    """
    crossed = year if step > 0 else year + step
    return year + step, cursor + step * seconds_in_year(crossed)


def _skip_cycles(step: int, cycles: int) -> tuple[int, int]:
    """Jump whole 400-year cycles away from the epoch."""
    year = EPOCH_YEAR + step * cycles * GREGORIAN_CYCLE_YEARS
    cursor = step * cycles * SECONDS_PER_GREGORIAN_CYCLE
    return year, cursor


def resolve_year(t: int) -> tuple[int, int]:
    """Find the year containing t.

    Returns (year, cursor) where cursor is the epoch second of
    January 1, year, 00:00:00, so that
    cursor <= t < cursor + seconds_in_year(year).
    A timestamp exactly on a year boundary belongs to the later year.
    """
    step = 1 if t >= 0 else -1
    cycles = abs(t) // SECONDS_PER_GREGORIAN_CYCLE
    year, cursor = _skip_cycles(step, cycles)

    while not cursor <= t < cursor + seconds_in_year(year):
        year, cursor = _step_year(year, cursor, step)

    logger.debug(
        "t=%d resolved to year %d (cursor=%d, cycles skipped=%d)",
        t, year, cursor, cycles,
    )
    return year, cursor


def resolve_month(t: int, year: int, cursor: int) -> tuple[int, int]:
    """Walk forward through the months of year.

    Returns (month, cursor) with cursor at 00:00:00 on the first of that
    month. Always a forward walk: resolve_year leaves cursor <= t.
    """
    month = 1
    for days in month_lengths(year):
        seconds = days * SECONDS_PER_DAY
        if cursor + seconds > t:
            break
        cursor += seconds
        month += 1
    return month, cursor


def resolve_clock(t: int, cursor: int) -> tuple[int, int, int, int]:
    """Resolve (day, hour, minute, second) from the start of the month."""
    day_offset, consumed = DAY.split(t - cursor)
    cursor += consumed

    hour, consumed = HOUR.split(t - cursor)
    cursor += consumed

    minute, consumed = MINUTE.split(t - cursor)
    cursor += consumed

    return day_offset + 1, hour, minute, t - cursor


def decompose(t: int) -> CivilDateTime:
    """Convert seconds since 1970-01-01T00:00:00Z into a UTC CivilDateTime.

    Negative t gives instants before the epoch. Python ints do not
    overflow, so any int is accepted; run time grows by at most 400
    year steps plus the 400-year cycle arithmetic.

    Raises TypeError if t is not an int.
    """
    _require_int(t, "t")
    if t == 0:
        return EPOCH

    year, cursor = resolve_year(t)
    month, cursor = resolve_month(t, year, cursor)
    day, hour, minute, second = resolve_clock(t, cursor)

    return CivilDateTime(
        year=year,
        month=month,
        day=day,
        hour=hour,
        minute=minute,
        second=second,
    )


def to_timestamp(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> int:
    """Epoch seconds of a civil UTC instant. Inverse of decompose.

    Uses the same cycle skip and year stepping as resolve_year. Only the
    month is range-checked; other fields are added as plain offsets.

    Raises ValueError if month is outside 1-12.
    """
    for name, value in (
        ("year", year), ("month", month), ("day", day),
        ("hour", hour), ("minute", minute), ("second", second),
    ):
        _require_int(value, name)
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month: {month} (must be 1-12)")

    offset = year - EPOCH_YEAR
    step = 1 if offset >= 0 else -1
    cur_year, cursor = _skip_cycles(step, abs(offset) // GREGORIAN_CYCLE_YEARS)
    while cur_year != year:
        cur_year, cursor = _step_year(cur_year, cursor, step)

    cursor += sum(month_lengths(year)[: month - 1]) * DAY.unit_seconds
    cursor += (day - 1) * DAY.unit_seconds
    cursor += hour * HOUR.unit_seconds + minute * MINUTE.unit_seconds + second
    return cursor
