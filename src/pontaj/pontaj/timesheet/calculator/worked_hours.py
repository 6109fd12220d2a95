from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import time
from typing import Any, Optional

from ...common.datetime_utils import parse_time_of_day
from ...core.constants import MAX_SHIFT_SPAN_HOURS
from ...core.exceptions import ValidationError
from .base import BreakPolicy
from .break_policies import StandardBreakPolicy


@dataclass(frozen=True)
class WorkedTime:
    worked_hours: float
    break_minutes: int
    total_interval_hours: float

    def to_dict(self) -> dict:
        return {
            "worked_hours": self.worked_hours,
            "break_minutes": self.break_minutes,
            "total_interval": self.total_interval_hours,
        }


ZERO = WorkedTime(0.0, 0, 0.0)


def round_to_quarter(hours: float) -> float:
    # Half-up, so 7.875h becomes 8.0 rather than banker's-rounding to 7.75.
    return math.floor(hours * 4 + 0.5) / 4


def interval_hours(start: time, end: time) -> float:
    """Span between two times of day; end <= start means the shift crosses midnight."""

    start_min = start.hour * 60 + start.minute
    end_min = end.hour * 60 + end.minute
    if end_min <= start_min:
        end_min += 24 * 60
    return (end_min - start_min) / 60


def compute_worked_hours(
    start_time: Any,
    end_time: Any,
    shift_type: Optional[str] = None,
    *,
    policy: Optional[BreakPolicy] = None,
) -> WorkedTime:
    """Worked hours for a start/end pair after the break deduction.

    Fails soft: a missing or malformed time returns a zero result.
    """

    start = parse_time_of_day(start_time)
    end = parse_time_of_day(end_time)
    if start is None or end is None:
        return ZERO

    total = interval_hours(start, end)
    breaks = (policy or StandardBreakPolicy()).break_minutes(total, shift_type)
    worked = max(0.0, total - breaks / 60)
    return WorkedTime(round_to_quarter(worked), breaks, total)


def validate_time_range(start_time: Any, end_time: Any) -> float:
    """Strict check used on manual entry; returns the span in hours."""

    start = parse_time_of_day(start_time)
    end = parse_time_of_day(end_time)
    if start is None or end is None:
        raise ValidationError("Format oră invalid (așteptat HH:MM)")
    hours = interval_hours(start, end)
    if hours > MAX_SHIFT_SPAN_HOURS:
        raise ValidationError(f"Intervalul de lucru nu poate depăși {MAX_SHIFT_SPAN_HOURS} ore")
    return hours
