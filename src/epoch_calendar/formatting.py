"""Formatter: render a CivilDateTime as a fixed English UTC string."""

from __future__ import annotations

from epoch_calendar.types import CalendarInvariantError, CivilDateTime

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def month_name(month: int) -> str:
    """Full English name for month 1-12.

    Raises CalendarInvariantError for any other value: a month outside
    the table can only come from a broken decomposition.
    """
    if not 1 <= month <= 12:
        raise CalendarInvariantError("month", month, "1-12")
    return MONTH_NAMES[month - 1]


def format_civil(dt: CivilDateTime) -> str:
    """'<day> <MonthName> <year>, <hh>:<mm>:<ss> UTC'.

    >>> format_civil(CivilDateTime(2000, 1, 1, 0, 5, 9))
    '1 January 2000, 00:05:09 UTC'
    """
    return (
        f"{dt.day} {month_name(dt.month)} {dt.year}, "
        f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d} UTC"
    )


def parse_unix(t: int) -> str:
    """Decompose t and format it in one call."""
    from epoch_calendar.decompose import decompose

    return format_civil(decompose(t))
