"""Shared types: CivilDateTime and the two error kinds."""

from __future__ import annotations

from dataclasses import dataclass

from epoch_calendar.calendar import days_in_month


@dataclass(frozen=True)
class CivilDateTime:
    """Immutable UTC calendar instant produced by one decomposition.

    Years use astronomical numbering: year 0 exists and 1 BC is year 0.

    Invariants:
        - 1 <= month <= 12
        - 1 <= day <= days_in_month(year, month)
        - 0 <= hour <= 23, 0 <= minute <= 59, 0 <= second <= 59
        - decompose(dt.to_timestamp()) == dt
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    def validate(self) -> None:
        """Raise CalendarInvariantError naming the first out-of-range field."""
        if not 1 <= self.month <= 12:
            raise CalendarInvariantError("month", self.month, "1-12")
        limit = days_in_month(self.year, self.month)
        if not 1 <= self.day <= limit:
            raise CalendarInvariantError("day", self.day, f"1-{limit}")
        for name, value, upper in (
            ("hour", self.hour, 23),
            ("minute", self.minute, 59),
            ("second", self.second, 59),
        ):
            if not 0 <= value <= upper:
                raise CalendarInvariantError(name, value, f"0-{upper}")

    def is_valid(self) -> bool:
        """Whether every field is within its calendar range."""
        try:
            self.validate()
        except CalendarInvariantError:
            return False
        return True

    def to_timestamp(self) -> int:
        """Seconds since the epoch for this instant."""
        from epoch_calendar.decompose import to_timestamp

        return to_timestamp(
            self.year, self.month, self.day, self.hour, self.minute, self.second
        )

    def __str__(self) -> str:
        from epoch_calendar.formatting import format_civil

        return format_civil(self)


class TimestampArgumentError(ValueError):
    """Raised when command-line input cannot be turned into a timestamp."""

    def __init__(
        self,
        message: str,
        argument: str | None = None,
        reason: str = "",
    ) -> None:
        self.message = message
        self.argument = argument
        self.reason = reason
        super().__init__(message)


class CalendarInvariantError(AssertionError):
    """Raised when a calendar field is out of range inside the library.

    This signals a defect in the conversion, not bad user input.
    """

    def __init__(self, field: str, value: int, allowed: str) -> None:
        self.field = field
        self.value = value
        self.allowed = allowed
        super().__init__(
            f"Internal error: invalid {field} {value!r} (allowed {allowed})"
        )
