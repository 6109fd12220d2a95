from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..core.enums import RecordStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall, fetchone, normalize_mysql_time
from .model import TimeRecord
from .repository import TimeRecordRepository

_UPSERT_SQL = """
    INSERT INTO time_records(employee_id, date, start_time, end_time, worked_hours, break_minutes,
                             shift_type, status, notes)
    VALUES(UPPER(%s),%s,%s,%s,%s,%s,%s,%s,%s)
    ON DUPLICATE KEY UPDATE
        start_time=VALUES(start_time),
        end_time=VALUES(end_time),
        worked_hours=VALUES(worked_hours),
        break_minutes=VALUES(break_minutes),
        shift_type=VALUES(shift_type),
        status=VALUES(status),
        notes=VALUES(notes)
"""


def _to_record(r: Dict[str, Any]) -> TimeRecord:
    return TimeRecord(
        employee_id=r["employee_id"],
        work_date=r["date"],
        status=RecordStatus(r.get("status") or RecordStatus.PRESENT.value),
        start_time=normalize_mysql_time(r.get("start_time")),
        end_time=normalize_mysql_time(r.get("end_time")),
        worked_hours=as_float(r.get("worked_hours")),
        break_minutes=int(r.get("break_minutes") or 0),
        shift_type=r.get("shift_type"),
        notes=r.get("notes"),
    )


def _params(record: TimeRecord) -> tuple:
    return (
        record.employee_id,
        record.work_date,
        record.start_time,
        record.end_time,
        record.worked_hours,
        record.break_minutes,
        record.shift_type,
        record.status.value,
        record.notes,
    )


class MySQLTimeRecordRepository(TimeRecordRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_between(
        self,
        *,
        start_date: date,
        end_date: date,
        department: Optional[str] = None,
        employee_id: Optional[str] = None,
    ) -> Sequence[TimeRecord]:
        sql = """
            SELECT tr.employee_id, tr.date, tr.start_time, tr.end_time, tr.worked_hours, tr.break_minutes,
                   tr.shift_type, tr.status, tr.notes
            FROM time_records tr
            JOIN employees e ON e.id = tr.employee_id
            WHERE tr.date BETWEEN %s AND %s
        """
        params: list[Any] = [start_date, end_date]
        if department:
            sql += " AND e.department=%s"
            params.append(department)
        if employee_id:
            sql += " AND UPPER(tr.employee_id)=UPPER(%s)"
            params.append(employee_id)
        sql += " ORDER BY tr.date, e.department, e.name"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [_to_record(r) for r in fetchall(cur)]

    def get(self, employee_id: str, work_date: date) -> Optional[TimeRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, date, start_time, end_time, worked_hours, break_minutes, shift_type, status, notes
                FROM time_records
                WHERE UPPER(employee_id)=UPPER(%s) AND date=%s
                """,
                (employee_id, work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def upsert(self, record: TimeRecord) -> TimeRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_UPSERT_SQL, _params(record))
        return self.get(record.employee_id, record.work_date) or record

    def upsert_many(self, records: Sequence[TimeRecord]) -> int:
        # One connection, one commit: db_cursor rolls back if any row fails.
        with db_cursor(self._conn_factory) as (_, cur):
            for record in records:
                cur.execute(_UPSERT_SQL, _params(record))
        return len(records)

    def count_for_employee(self, employee_id: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM time_records WHERE UPPER(employee_id)=UPPER(%s)", (employee_id,))
            r = fetchone(cur)
            return int(r["n"]) if r else 0
