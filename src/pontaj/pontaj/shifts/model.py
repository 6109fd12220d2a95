from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Optional


@dataclass(frozen=True)
class ShiftPreset:
    """Șablon de schimb aplicabil în bloc (ex: SCHIMB_I 07:00-15:30)."""

    preset_id: str
    name: str
    start_time: time
    end_time: time
    worked_hours: float
    break_minutes: int = 0
    description: Optional[str] = None
    active: bool = True

    def to_dict(self) -> dict:
        return {
            "id": self.preset_id,
            "name": self.name,
            "start_time": self.start_time.strftime("%H:%M"),
            "end_time": self.end_time.strftime("%H:%M"),
            "worked_hours": self.worked_hours,
            "break_minutes": self.break_minutes,
            "description": self.description,
            "active": self.active,
        }
