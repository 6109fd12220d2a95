from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class BreakPolicy(ABC):
    """Break deduction rule (Strategy Pattern for the time calculator)."""

    name: str = "base"

    @abstractmethod
    def break_minutes(self, total_hours: float, shift_type: Optional[str] = None) -> int:
        raise NotImplementedError
