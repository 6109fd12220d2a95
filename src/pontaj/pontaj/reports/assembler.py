from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Mapping, Optional

from ..common.datetime_utils import format_hhmm, is_weekend, month_bounds
from ..common.validators import require_report_period
from ..core.constants import DEFAULT_DIRECT_LABOR_DEPARTMENTS
from ..core.enums import CellTag, RecordStatus
from ..core.exceptions import ReferenceDataError
from ..employees.model import Employee
from ..timesheet.model import TimeRecord
from .grid import DayCell, DayColumn, DepartmentTotal, EmployeeRow, LaborSplit, ReportGrid, SummaryCounters

# status -> counter incremented by one day
_DAY_COUNTERS = {
    RecordStatus.SICK: "sick_days",
    RecordStatus.VACATION: "vacation_days",
    RecordStatus.ABSENT: "absent_days",
    RecordStatus.DELEGATION: "delegation_days",
    RecordStatus.UNPAID: "unpaid_days",
    RecordStatus.FREE: "free_days",
}


def select_roster(
    employees: Iterable[Employee],
    month_end: date,
    department: Optional[str] = None,
) -> list[Employee]:
    """Employees still active at month end, ordered by (department, name)."""

    roster = [
        e
        for e in employees
        if e.is_active_on(month_end) and (not department or e.department == department)
    ]
    return sorted(roster, key=lambda e: (e.department, e.name))


def present_text(record: TimeRecord) -> str:
    return f"{format_hhmm(record.start_time)}-{format_hhmm(record.end_time)}\n{record.worked_hours:g}h"


def _build_cell(
    day: int,
    record: Optional[TimeRecord],
    counters: SummaryCounters,
    *,
    count_zero_hour_present: bool,
) -> DayCell:
    if record is None:
        return DayCell(day=day)

    if record.status is RecordStatus.PRESENT:
        hours = round(float(record.worked_hours or 0.0), 2)
        if hours > 0 or count_zero_hour_present:
            counters.total_hours += hours
            counters.worked_days += 1
        return DayCell(day=day, tag=CellTag.VALUE, text=present_text(record), hours=hours, status=record.status)

    counter = _DAY_COUNTERS[record.status]
    setattr(counters, counter, getattr(counters, counter) + 1)
    return DayCell(day=day, tag=CellTag.STATUS, text=record.status.code, status=record.status)


def assemble_report(
    employees: Iterable[Employee],
    time_records: Iterable[TimeRecord],
    holidays: Iterable[date],
    year: int,
    month: int,
    department: Optional[str] = None,
    *,
    departments: Optional[Mapping[str, str]] = None,
    direct_departments: Iterable[str] = DEFAULT_DIRECT_LABOR_DEPARTMENTS,
    count_zero_hour_present: bool = False,
) -> ReportGrid:
    """Reconcile roster, sparse records and holidays into a ``ReportGrid``.

    ``month`` is zero-based (January = 0). ``departments`` maps department
    codes to display names; when given, every roster department must be in
    it. A present record with zero hours feeds no counter unless
    ``count_zero_hour_present`` is set, in which case it counts as a worked
    day. Weekend and holiday flags never influence counters.
    """

    year, month = require_report_period(year, month)
    first, last = month_bounds(year, month)

    holiday_set = {h for h in holidays if h.year == year}
    columns = tuple(
        DayColumn(day=d.day, date=d, weekend=is_weekend(d), holiday=d in holiday_set)
        for d in (first + timedelta(days=i) for i in range(last.day))
    )

    by_key: dict[tuple[str, date], TimeRecord] = {}
    for record in time_records:
        if first <= record.work_date <= last:
            by_key[record.key] = record

    roster = select_roster(employees, last, department)

    rows: list[EmployeeRow] = []
    daily = [0.0] * len(columns)
    grand = SummaryCounters()
    per_department: dict[str, float] = {}

    for employee in roster:
        counters = SummaryCounters()
        cells = []
        for i, column in enumerate(columns):
            record = by_key.get((employee.employee_id.upper(), column.date))
            cell = _build_cell(column.day, record, counters, count_zero_hour_present=count_zero_hour_present)
            daily[i] += cell.hours
            cells.append(cell)
        counters.total_hours = round(counters.total_hours, 2)

        rows.append(
            EmployeeRow(
                employee_id=employee.employee_id,
                name=employee.name,
                department=employee.department,
                cells=tuple(cells),
                counters=counters,
            )
        )
        grand.add(counters)
        per_department[employee.department] = per_department.get(employee.department, 0.0) + counters.total_hours

    grand.total_hours = round(grand.total_hours, 2)

    department_totals = []
    for code, hours in per_department.items():
        if departments is not None and code not in departments:
            raise ReferenceDataError(f"Departamentul {code} nu există")
        name = departments[code] if departments is not None else code
        department_totals.append(DepartmentTotal(code=code, name=name, hours=round(hours, 2)))

    direct = set(direct_departments)
    labor = LaborSplit(
        direct_hours=round(sum(d.hours for d in department_totals if d.code in direct), 2),
        indirect_hours=round(sum(d.hours for d in department_totals if d.code not in direct), 2),
    )

    return ReportGrid(
        year=year,
        month=month,
        department=department,
        columns=columns,
        rows=tuple(rows),
        daily_totals=tuple(round(h, 2) for h in daily),
        grand_totals=grand,
        departments=tuple(department_totals),
        labor=labor,
    )
