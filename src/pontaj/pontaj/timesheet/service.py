from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import format_hhmm, parse_time_of_day
from ..common.validators import require_date
from ..core.enums import RecordStatus
from ..core.exceptions import NotFoundError, ReferenceDataError, ValidationError
from ..employees.repository import EmployeeRepository
from ..shifts.repository import ShiftPresetRepository
from .calculator.base import BreakPolicy
from .calculator.break_policies import StandardBreakPolicy
from .calculator.worked_hours import WorkedTime, compute_worked_hours, validate_time_range
from .model import TimeRecord
from .repository import TimeRecordRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PresetApplication:
    applied: int
    shift_type: str
    preset_name: str
    work_date: date
    start_time: str
    end_time: str
    worked_hours: float

    def to_dict(self) -> dict:
        return {
            "success": True,
            "applied": self.applied,
            "shiftType": self.shift_type,
            "presetName": self.preset_name,
            "date": self.work_date.isoformat(),
            "details": {
                "startTime": self.start_time,
                "endTime": self.end_time,
                "workedHours": self.worked_hours,
            },
        }


def _require_status(value: Any) -> RecordStatus:
    if not value:
        return RecordStatus.PRESENT
    try:
        return RecordStatus(str(value).strip().lower())
    except ValueError as exc:
        allowed = ", ".join(s.value for s in RecordStatus)
        raise ValidationError(f"Status invalid: {value!r} (permis: {allowed})") from exc


class TimeRecordService:
    """Use case: manual time entry and bulk shift-preset application."""

    def __init__(
        self,
        time_records: TimeRecordRepository,
        employees: EmployeeRepository,
        shifts: ShiftPresetRepository,
        *,
        policy: Optional[BreakPolicy] = None,
    ):
        self._records = time_records
        self._employees = employees
        self._shifts = shifts
        self._policy = policy or StandardBreakPolicy()

    def calculate(self, start_time: Any, end_time: Any, shift_type: Optional[str] = None) -> WorkedTime:
        return compute_worked_hours(start_time, end_time, shift_type, policy=self._policy)

    def list_records(
        self,
        *,
        start: date,
        end: date,
        department: Optional[str] = None,
        employee_id: Optional[str] = None,
    ) -> Sequence[TimeRecord]:
        if end < start:
            raise ValidationError("Data de sfârșit trebuie să fie după data de început")
        records = self._records.list_between(start_date=start, end_date=end, department=department, employee_id=employee_id)
        logger.info("Retrieved %d time records (%s..%s, department=%s)", len(records), start, end, department)
        return records

    def save_record(self, data: Mapping[str, Any]) -> TimeRecord:
        """Create or overwrite the record for (employee, date)."""

        employee_id = str(data.get("employee_id") or "").strip().upper()
        if not employee_id:
            raise ValidationError("ID angajat și data sunt obligatorii")
        work_date = require_date(data.get("date"))

        employee = self._employees.get_by_id(employee_id)
        if not employee or not employee.active:
            raise NotFoundError(f"Angajatul {employee_id} nu există sau nu este activ")

        status = _require_status(data.get("status"))
        shift_type = data.get("shift_type") or employee.shift_type
        if data.get("shift_type") and not self._shifts.get_by_id(shift_type):
            raise ReferenceDataError(f"Presetul de schimb '{shift_type}' nu există")

        start_raw, end_raw = data.get("start_time"), data.get("end_time")
        if start_raw and end_raw:
            validate_time_range(start_raw, end_raw)

        worked_hours = 0.0
        break_minutes = 0
        if status is RecordStatus.PRESENT:
            # client-sent worked_hours is ignored; zero unless both times are set
            computed = self.calculate(start_raw, end_raw, shift_type)
            worked_hours = computed.worked_hours
            break_minutes = computed.break_minutes

        record = TimeRecord(
            employee_id=employee.employee_id,
            work_date=work_date,
            status=status,
            start_time=parse_time_of_day(start_raw),
            end_time=parse_time_of_day(end_raw),
            worked_hours=worked_hours,
            break_minutes=break_minutes,
            shift_type=shift_type,
            notes=data.get("notes") or None,
        )
        saved = self._records.upsert(record)
        logger.info("Time record saved: %s - %s (%s, %.2fh)", saved.employee_id, saved.work_date, saved.status.value, saved.worked_hours)
        return saved

    def apply_shift_preset(self, *, employee_ids: Sequence[str], work_date: Any, shift_type: str) -> PresetApplication:
        """Write the preset as a 'present' record for every listed employee on one date."""

        if not employee_ids or isinstance(employee_ids, str):
            raise ValidationError("Lista de ID-uri angajați este obligatorie")
        if not work_date or not shift_type:
            raise ValidationError("Data și tipul de schimb sunt obligatorii")
        day = require_date(work_date)

        preset = self._shifts.get_by_id(shift_type)
        if not preset or not preset.active:
            raise ReferenceDataError(f"Presetul de schimb '{shift_type}' nu există sau nu este activ")

        ids = [str(i).strip().upper() for i in employee_ids]
        missing = [i for i in ids if not getattr(self._employees.get_by_id(i), "active", False)]
        if missing:
            raise ValidationError(f"Unii angajați nu există sau nu sunt activi: {', '.join(missing)}")

        records = [
            TimeRecord(
                employee_id=employee_id,
                work_date=day,
                status=RecordStatus.PRESENT,
                start_time=preset.start_time,
                end_time=preset.end_time,
                worked_hours=preset.worked_hours,
                break_minutes=preset.break_minutes,
                shift_type=preset.preset_id,
            )
            for employee_id in ids
        ]
        applied = self._records.upsert_many(records)
        logger.info("Shift preset %s applied on %s to %d employees", preset.preset_id, day, applied)

        return PresetApplication(
            applied=applied,
            shift_type=preset.preset_id,
            preset_name=preset.name,
            work_date=day,
            start_time=format_hhmm(preset.start_time),
            end_time=format_hhmm(preset.end_time),
            worked_hours=preset.worked_hours,
        )
