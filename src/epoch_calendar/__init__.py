"""epoch-calendar: UTC calendar dates from signed epoch-second counts."""

from epoch_calendar.calendar import (
    days_in_month,
    days_in_year,
    is_leap_year,
    month_lengths,
    seconds_in_year,
)
from epoch_calendar.decompose import decompose, to_timestamp
from epoch_calendar.formatting import format_civil, month_name, parse_unix
from epoch_calendar.types import (
    CalendarInvariantError,
    CivilDateTime,
    TimestampArgumentError,
)
from epoch_calendar.units import DAY, HOUR, MINUTE, TimeUnit

__all__ = [
    "CalendarInvariantError",
    "CivilDateTime",
    "DAY",
    "HOUR",
    "MINUTE",
    "TimeUnit",
    "TimestampArgumentError",
    "days_in_month",
    "days_in_year",
    "decompose",
    "format_civil",
    "is_leap_year",
    "month_lengths",
    "month_name",
    "parse_unix",
    "seconds_in_year",
    "to_timestamp",
]
