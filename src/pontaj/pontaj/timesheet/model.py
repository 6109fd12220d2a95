from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional

from ..common.datetime_utils import format_hhmm
from ..core.enums import RecordStatus


@dataclass(frozen=True)
class TimeRecord:
    """Entitate de domeniu: o zi de pontaj, unică pe (angajat, dată)."""

    employee_id: str
    work_date: date
    status: RecordStatus = RecordStatus.PRESENT
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    worked_hours: float = 0.0
    break_minutes: int = 0
    shift_type: Optional[str] = None
    notes: Optional[str] = None

    @property
    def key(self) -> tuple[str, date]:
        return self.employee_id.upper(), self.work_date

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "date": self.work_date.isoformat(),
            "start_time": format_hhmm(self.start_time) or None,
            "end_time": format_hhmm(self.end_time) or None,
            "worked_hours": self.worked_hours,
            "break_minutes": self.break_minutes,
            "shift_type": self.shift_type,
            "status": self.status.value,
            "notes": self.notes,
        }
