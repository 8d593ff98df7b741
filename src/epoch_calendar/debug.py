"""ASCII trace of a decomposition for development-time verification.

This module is dev-only and not imported by production code.
"""

from __future__ import annotations

from epoch_calendar.decompose import resolve_clock, resolve_month, resolve_year
from epoch_calendar.formatting import month_name
from epoch_calendar.units import DAY, HOUR, MINUTE


def show_decomposition(t: int) -> str:
    """Print a stage-by-stage table of how t is decomposed.

    Each row shows the value resolved at that stage, the cursor left
    behind (epoch seconds) and the seconds still to consume.
    Returns the string and also prints to stdout.
    """
    lines: list[str] = []

    year, year_cursor = resolve_year(t)
    month, month_cursor = resolve_month(t, year, year_cursor)
    day, hour, minute, second = resolve_clock(t, month_cursor)

    day_cursor = month_cursor + (day - 1) * DAY.unit_seconds
    hour_cursor = day_cursor + hour * HOUR.unit_seconds
    minute_cursor = hour_cursor + minute * MINUTE.unit_seconds

    rows = [
        ("year", str(year), year_cursor),
        ("month", f"{month} ({month_name(month)})", month_cursor),
        ("day", str(day), day_cursor),
        ("hour", str(hour), hour_cursor),
        ("minute", str(minute), minute_cursor),
        ("second", str(second), t),
    ]

    value_width = max(len("value"), *(len(v) for _, v, _ in rows))
    cursor_width = max(len("cursor"), *(len(str(c)) for _, _, c in rows))

    lines.append(f"t = {t}")
    lines.append(
        f"{'stage':<8s}  {'value':<{value_width}s}  "
        f"{'cursor':>{cursor_width}s}  remaining"
    )
    lines.append(f"{'-' * 8}  {'-' * value_width}  {'-' * cursor_width}  ---------")
    for stage, value, cursor in rows:
        lines.append(
            f"{stage:<8s}  {value:<{value_width}s}  "
            f"{cursor:>{cursor_width}d}  {t - cursor}"
        )

    result = "\n".join(lines)
    print(result)
    return result
