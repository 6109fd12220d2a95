from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta
from typing import Any, Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_time_of_day(value: Any) -> Optional[time]:
    """Best-effort parse of a time-of-day value.

    Accepts ``datetime.time``, ``timedelta`` (how mysql-connector returns TIME
    columns) and strings like ``"07:00"`` or ``"07:00:00"``. Anything else,
    including malformed strings, yields ``None``.
    """

    if value is None or value == "":
        return None
    if isinstance(value, time):
        return value
    if isinstance(value, timedelta):
        total_seconds = int(value.total_seconds()) % 86400
        return time(hour=total_seconds // 3600, minute=(total_seconds % 3600) // 60)
    if isinstance(value, str):
        parts = value.strip().split(":")
        if len(parts) < 2:
            return None
        try:
            hours = int(parts[0])
            minutes = int(parts[1])
            seconds = int(parts[2]) if len(parts) >= 3 and parts[2] else 0
            return time(hour=hours, minute=minutes, second=seconds)
        except ValueError:
            return None
    return None


def format_hhmm(value: Optional[time]) -> str:
    return value.strftime("%H:%M") if value else ""


def days_in_month(year: int, month_index: int) -> int:
    """Number of days for a zero-based month index."""
    return calendar.monthrange(year, month_index + 1)[1]


def month_bounds(year: int, month_index: int) -> tuple[date, date]:
    first = date(year, month_index + 1, 1)
    last = date(year, month_index + 1, days_in_month(year, month_index))
    return first, last


def is_weekend(day: date) -> bool:
    return day.weekday() >= 5
