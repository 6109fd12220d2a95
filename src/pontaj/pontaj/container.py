from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .core.constants import DEFAULT_DIRECT_LABOR_DEPARTMENTS
from .database.connection import DBConfig, DatabaseConnection
from .departments.mysql_department_repository import MySQLDepartmentRepository
from .departments.repository import DepartmentRepository
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .holidays.client import DEFAULT_API_URL, PublicHolidayClient
from .holidays.mysql_holiday_repository import MySQLHolidayRepository
from .holidays.repository import HolidayRepository
from .holidays.service import HolidayService
from .reports.service import ReportService
from .shifts.mysql_shift_repository import MySQLShiftPresetRepository
from .shifts.repository import ShiftPresetRepository
from .timesheet.calculator.break_policies import policy_for_name
from .timesheet.mysql_time_record_repository import MySQLTimeRecordRepository
from .timesheet.repository import TimeRecordRepository
from .timesheet.service import TimeRecordService


@dataclass(frozen=True)
class Container:
    departments_repo: DepartmentRepository
    shifts_repo: ShiftPresetRepository
    employees_repo: EmployeeRepository
    time_records_repo: TimeRecordRepository
    holidays_repo: HolidayRepository

    employee_service: EmployeeService
    time_record_service: TimeRecordService
    holiday_service: HolidayService
    report_service: ReportService

    conn: Optional[DatabaseConnection] = None


def wire_services(
    *,
    departments_repo: DepartmentRepository,
    shifts_repo: ShiftPresetRepository,
    employees_repo: EmployeeRepository,
    time_records_repo: TimeRecordRepository,
    holidays_repo: HolidayRepository,
    holiday_client: PublicHolidayClient,
    settings: Any = None,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Build services on top of the given repositories using ``settings`` values."""

    direct = getattr(settings, "DIRECT_LABOR_DEPARTMENTS", DEFAULT_DIRECT_LABOR_DEPARTMENTS)
    policy = policy_for_name(getattr(settings, "BREAK_POLICY", "standard"))

    return Container(
        departments_repo=departments_repo,
        shifts_repo=shifts_repo,
        employees_repo=employees_repo,
        time_records_repo=time_records_repo,
        holidays_repo=holidays_repo,
        employee_service=EmployeeService(employees_repo, departments_repo, shifts_repo, time_records_repo),
        time_record_service=TimeRecordService(time_records_repo, employees_repo, shifts_repo, policy=policy),
        holiday_service=HolidayService(holidays_repo, holiday_client),
        report_service=ReportService(
            employees_repo,
            time_records_repo,
            holidays_repo,
            departments_repo,
            direct_departments=direct,
            count_zero_hour_present=bool(getattr(settings, "COUNT_ZERO_HOUR_PRESENT", False)),
        ),
        conn=conn,
    )


def build_container(*, db_config: dict, settings: Any = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    holiday_client = PublicHolidayClient(
        api_url=getattr(settings, "HOLIDAY_API_URL", DEFAULT_API_URL),
        country=getattr(settings, "HOLIDAY_COUNTRY", "RO"),
        timeout=float(getattr(settings, "HOLIDAY_API_TIMEOUT", 10)),
    )

    return wire_services(
        departments_repo=MySQLDepartmentRepository(conn),
        shifts_repo=MySQLShiftPresetRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        time_records_repo=MySQLTimeRecordRepository(conn),
        holidays_repo=MySQLHolidayRepository(conn),
        holiday_client=holiday_client,
        settings=settings,
        conn=conn,
    )
