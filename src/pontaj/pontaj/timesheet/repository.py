from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import TimeRecord


class TimeRecordRepository(Protocol):
    def list_between(
        self,
        *,
        start_date: date,
        end_date: date,
        department: Optional[str] = None,
        employee_id: Optional[str] = None,
    ) -> Sequence[TimeRecord]:
        raise NotImplementedError

    def get(self, employee_id: str, work_date: date) -> Optional[TimeRecord]:
        raise NotImplementedError

    def upsert(self, record: TimeRecord) -> TimeRecord:
        """Insert or overwrite the record keyed by (employee_id, work_date)."""

        raise NotImplementedError

    def upsert_many(self, records: Sequence[TimeRecord]) -> int:
        """Same as ``upsert`` for a batch, all-or-nothing."""

        raise NotImplementedError

    def count_for_employee(self, employee_id: str) -> int:
        raise NotImplementedError
