"""Proleptic Gregorian calendar rules: leap years and month lengths."""

from __future__ import annotations

from epoch_calendar.units import SECONDS_PER_DAY

MONTH_DAYS: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
LEAP_MONTH_DAYS: tuple[int, ...] = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Gregorian 4/100/400 rule, extended to year 0 and negative years.

    Python's % takes the sign of the divisor, so the checks hold for
    negative years without adjustment.
    """
    if year % 4 != 0:
        return False
    if year % 100 != 0:
        return True
    if year % 400 != 0:
        return False
    return True


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def seconds_in_year(year: int) -> int:
    """Number of seconds spanned by the given year."""
    return days_in_year(year) * SECONDS_PER_DAY


def month_lengths(year: int) -> tuple[int, ...]:
    """Ordered day counts for January..December of the given year."""
    return LEAP_MONTH_DAYS if is_leap_year(year) else MONTH_DAYS


def days_in_month(year: int, month: int) -> int:
    """Day count of a month (1-12). Raises ValueError for other months."""
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month: {month} (must be 1-12)")
    return month_lengths(year)[month - 1]
