"""Boundary: TimeUnit — fixed-length units used by the decomposer."""

from __future__ import annotations

from dataclasses import dataclass

EPOCH_YEAR = 1970

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR

# Every run of 400 consecutive Gregorian years holds exactly 97 leap years.
GREGORIAN_CYCLE_YEARS = 400
GREGORIAN_CYCLE_DAYS = 400 * 365 + 97
SECONDS_PER_GREGORIAN_CYCLE = GREGORIAN_CYCLE_DAYS * SECONDS_PER_DAY


@dataclass(frozen=True)
class TimeUnit:
    """A fixed number of seconds with a label. Immutable.

    Only units whose length never varies belong here; months and years
    are resolved by walking the calendar.
    """

    unit_seconds: int
    label: str

    def split(self, remaining: int) -> tuple[int, int]:
        """Split a non-negative offset into (whole units, seconds consumed).

        Raises ValueError if remaining is negative.
        """
        if remaining < 0:
            raise ValueError(
                f"cannot split negative offset {remaining}s into "
                f"{self.label}s; the cursor has passed the target."
            )
        count = remaining // self.unit_seconds
        return count, count * self.unit_seconds


DAY = TimeUnit(unit_seconds=SECONDS_PER_DAY, label="day")
HOUR = TimeUnit(unit_seconds=SECONDS_PER_HOUR, label="hour")
MINUTE = TimeUnit(unit_seconds=SECONDS_PER_MINUTE, label="minute")
