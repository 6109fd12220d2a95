from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Union

from ..common.datetime_utils import month_bounds
from ..common.validators import require_report_period
from ..core.constants import DEFAULT_DIRECT_LABOR_DEPARTMENTS
from ..core.exceptions import ReferenceDataError
from ..departments.repository import DepartmentRepository
from ..employees.repository import EmployeeRepository
from ..holidays.repository import HolidayRepository
from ..timesheet.repository import TimeRecordRepository
from .assembler import assemble_report
from .grid import ReportGrid
from .xlsx_renderer import render, to_bytes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportResult:
    success: bool = False
    path: Optional[str] = None
    cancelled: bool = False
    error: Optional[str] = None

    def to_dict(self) -> dict:
        if self.cancelled:
            return {"cancelled": True}
        if self.success:
            return {"success": True, "filePath": self.path}
        return {"success": False, "error": self.error}


class ReportService:
    def __init__(
        self,
        employees: EmployeeRepository,
        time_records: TimeRecordRepository,
        holidays: HolidayRepository,
        departments: DepartmentRepository,
        *,
        direct_departments: Iterable[str] = DEFAULT_DIRECT_LABOR_DEPARTMENTS,
        count_zero_hour_present: bool = False,
    ):
        self._employees = employees
        self._time_records = time_records
        self._holidays = holidays
        self._departments = departments
        self._direct_departments = tuple(direct_departments)
        self._count_zero_hour_present = count_zero_hour_present

    def generate_collective_report(self, year, month, department: Optional[str] = None) -> ReportGrid:
        """Load the month's roster, records and holidays and assemble the grid.

        ``month`` is zero-based. The period is validated before any query runs.
        """

        year, month = require_report_period(year, month)
        department = (department or "").strip().upper() or None

        names = {d.code: d.name for d in self._departments.list_all()}
        if department and department not in names:
            raise ReferenceDataError(f"Departamentul {department} nu există")

        started = time.perf_counter()
        first, last = month_bounds(year, month)
        employees = self._employees.list_active(as_of=last, department=department)
        records = self._time_records.list_between(start_date=first, end_date=last, department=department)
        holidays = [h.holiday_date for h in self._holidays.list_for_year(year)]

        grid = assemble_report(
            employees,
            records,
            holidays,
            year,
            month,
            department,
            departments=names,
            direct_departments=self._direct_departments,
            count_zero_hour_present=self._count_zero_hour_present,
        )
        logger.info(
            "Collective report %04d-%02d: %d employees, %d records, %.2f hours",
            year,
            month + 1,
            len(grid.rows),
            len(records),
            grid.grand_totals.total_hours,
            extra={
                "report_period": f"{year:04d}-{month + 1:02d}",
                "department": department,
                "duration_ms": round((time.perf_counter() - started) * 1000, 1),
            },
        )
        return grid

    def export_report_to_file(self, grid: ReportGrid, destination: Optional[Union[str, Path]]) -> ExportResult:
        """Write the rendered report to ``destination``; ``None`` means the user cancelled."""

        if not destination:
            logger.info("Report export cancelled")
            return ExportResult(cancelled=True)

        content = to_bytes(render(grid))
        path = Path(destination)
        try:
            path.write_bytes(content)
        except OSError as exc:
            logger.error("Report export failed for %s: %s", path, exc)
            return ExportResult(success=False, error=exc.strerror or str(exc))

        logger.info("Report exported to %s (%d bytes)", path, len(content))
        return ExportResult(success=True, path=str(path))
