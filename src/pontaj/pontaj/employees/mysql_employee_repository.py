from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "id, name, department, position, shift_type, active, inactive_date, email, phone, notes, hire_date"


def _to_employee(r: Dict[str, Any]) -> Employee:
    return Employee(
        employee_id=r["id"],
        name=r["name"],
        department=r["department"],
        position=r.get("position") or "Operator",
        shift_type=r.get("shift_type"),
        active=bool(r.get("active", 1)),
        inactive_date=r.get("inactive_date"),
        email=r.get("email"),
        phone=r.get("phone"),
        notes=r.get("notes"),
        hire_date=r.get("hire_date"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_active(self, *, as_of: date, department: Optional[str] = None) -> Sequence[Employee]:
        return self.search(department=department, include_inactive=False, as_of=as_of)

    def search(
        self,
        *,
        department: Optional[str] = None,
        include_inactive: bool = False,
        as_of: Optional[date] = None,
        text: Optional[str] = None,
    ) -> Sequence[Employee]:
        where = ["1=1"]
        params: list[Any] = []

        if not include_inactive:
            where.append("active=1 AND (inactive_date IS NULL OR inactive_date >= %s)")
            params.append(as_of or date.today())
        if department:
            where.append("department=%s")
            params.append(department)
        if text:
            where.append("(name LIKE %s OR id LIKE %s)")
            params.extend([f"%{text}%", f"%{text}%"])

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE {' AND '.join(where)} ORDER BY department, name",
                tuple(params),
            )
            return [_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE UPPER(id)=UPPER(%s)", (employee_id,))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def create(self, employee: Employee) -> Employee:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(id, name, department, position, shift_type, active, inactive_date,
                                      email, phone, notes, hire_date)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    employee.employee_id,
                    employee.name,
                    employee.department,
                    employee.position,
                    employee.shift_type,
                    int(employee.active),
                    employee.inactive_date,
                    employee.email,
                    employee.phone,
                    employee.notes,
                    employee.hire_date or date.today(),
                ),
            )
        return self.get_by_id(employee.employee_id) or employee

    def update(self, employee: Employee) -> Employee:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET name=%s, department=%s, position=%s, shift_type=%s, active=%s, inactive_date=%s,
                    email=%s, phone=%s, notes=%s
                WHERE UPPER(id)=UPPER(%s)
                """,
                (
                    employee.name,
                    employee.department,
                    employee.position,
                    employee.shift_type,
                    int(employee.active),
                    employee.inactive_date,
                    employee.email,
                    employee.phone,
                    employee.notes,
                    employee.employee_id,
                ),
            )
        return self.get_by_id(employee.employee_id) or employee

    def deactivate(self, employee_id: str, *, inactive_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE employees SET active=0, inactive_date=%s WHERE UPPER(id)=UPPER(%s)",
                (inactive_date, employee_id),
            )
            return cur.rowcount > 0

    def delete(self, employee_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE UPPER(id)=UPPER(%s)", (employee_id,))
            return cur.rowcount > 0

    def upsert_many(self, employees: Sequence[Employee]) -> tuple[int, int]:
        inserted = 0
        updated = 0
        with db_cursor(self._conn_factory) as (_, cur):
            for e in employees:
                cur.execute(
                    """
                    INSERT INTO employees(id, name, department, position, shift_type, hire_date)
                    VALUES(%s,%s,%s,%s,%s,CURRENT_DATE)
                    ON DUPLICATE KEY UPDATE
                        name=VALUES(name), department=VALUES(department), shift_type=VALUES(shift_type)
                    """,
                    (e.employee_id, e.name, e.department, e.position, e.shift_type),
                )
                # MySQL reports 1 affected row for an insert and 2 for an update.
                if cur.rowcount == 1:
                    inserted += 1
                else:
                    updated += 1
        return inserted, updated
