from __future__ import annotations

from typing import Optional

from ...core.constants import LONG_SHIFT_TYPE
from .base import BreakPolicy


class StandardBreakPolicy(BreakPolicy):
    """60 min for the long shift type or spans over 10h, 30 min over 6h, else none."""

    name = "standard"

    def __init__(
        self,
        *,
        long_shift_type: str = LONG_SHIFT_TYPE,
        long_threshold_hours: float = 10,
        short_threshold_hours: float = 6,
        long_break_minutes: int = 60,
        short_break_minutes: int = 30,
    ):
        self.long_shift_type = long_shift_type
        self.long_threshold_hours = long_threshold_hours
        self.short_threshold_hours = short_threshold_hours
        self.long_break_minutes = long_break_minutes
        self.short_break_minutes = short_break_minutes

    def break_minutes(self, total_hours: float, shift_type: Optional[str] = None) -> int:
        if shift_type == self.long_shift_type or total_hours > self.long_threshold_hours:
            return self.long_break_minutes
        if total_hours > self.short_threshold_hours:
            return self.short_break_minutes
        return 0


class LegacyBreakPolicy(StandardBreakPolicy):
    """Older server-side rule: the 30 minute break already applies above 5h."""

    name = "legacy"

    def __init__(self, **kwargs):
        kwargs.setdefault("short_threshold_hours", 5)
        super().__init__(**kwargs)


_POLICIES = {
    StandardBreakPolicy.name: StandardBreakPolicy,
    LegacyBreakPolicy.name: LegacyBreakPolicy,
}


def policy_for_name(name: Optional[str]) -> BreakPolicy:
    key = (name or StandardBreakPolicy.name).strip().lower()
    if key not in _POLICIES:
        raise ValueError(f"Unknown break policy: {name!r} (expected one of {sorted(_POLICIES)})")
    return _POLICIES[key]()
