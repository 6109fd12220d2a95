from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import date
from typing import IO, Any, Mapping, Optional, Union

import pandas as pd

from ..common.validators import department_prefix, require_date, require_employee_id, require_non_empty
from ..core.constants import DEFAULT_POSITION, DEFAULT_SHIFT_BY_DEPARTMENT, DEFAULT_SHIFT_TYPE
from ..core.enums import DeleteKind
from ..core.exceptions import ConflictError, NotFoundError, ReferenceDataError, ValidationError
from ..departments.repository import DepartmentRepository
from ..shifts.repository import ShiftPresetRepository
from ..timesheet.repository import TimeRecordRepository
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteResult:
    kind: DeleteKind
    affected: int
    message: str

    def to_dict(self) -> dict:
        return {"type": self.kind.value, "affected": self.affected, "message": self.message}


@dataclass(frozen=True)
class ImportResult:
    imported: int
    updated: int
    total: int
    errors: list[dict] = field(default_factory=list)

    def to_dict(self) -> dict:
        out = {"success": True, "imported": self.imported, "updated": self.updated, "total": self.total}
        if self.errors:
            out["errors"] = self.errors
        return out


def default_shift_for_department(department: str) -> str:
    return DEFAULT_SHIFT_BY_DEPARTMENT.get(department, DEFAULT_SHIFT_TYPE)


class EmployeeService:
    """Use case: manage the roster (add/update/delete/import)."""

    def __init__(
        self,
        employees: EmployeeRepository,
        departments: DepartmentRepository,
        shifts: ShiftPresetRepository,
        time_records: TimeRecordRepository,
    ):
        self._employees = employees
        self._departments = departments
        self._shifts = shifts
        self._time_records = time_records

    def _department_codes(self) -> set[str]:
        return {d.code for d in self._departments.list_all()}

    def _require_department(self, code: Optional[str], codes: Optional[set[str]] = None) -> str:
        code = (code or "").strip().upper()
        if code not in (codes if codes is not None else self._department_codes()):
            raise ReferenceDataError(f"Departamentul {code or '-'} nu există")
        return code

    def _require_shift_type(self, shift_type: Optional[str]) -> Optional[str]:
        if not shift_type:
            return None
        if not self._shifts.get_by_id(shift_type):
            raise ReferenceDataError(f"Presetul de schimb '{shift_type}' nu există")
        return shift_type

    def list_employees(
        self,
        *,
        department: Optional[str] = None,
        include_inactive: bool = False,
        as_of: Optional[date] = None,
        search: Optional[str] = None,
    ):
        employees = self._employees.search(
            department=department,
            include_inactive=include_inactive,
            as_of=as_of or date.today(),
            text=search,
        )
        logger.info("Retrieved %d employees (department=%s, include_inactive=%s)", len(employees), department, include_inactive)
        return employees

    def get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Angajatul cu ID-ul {employee_id} nu există")
        return employee

    def add_employee(self, data: Mapping[str, Any]) -> Employee:
        employee_id = require_employee_id(data.get("id", ""))
        name = require_non_empty(data.get("name", ""), "Numele").upper()

        codes = self._department_codes()
        self._require_department(department_prefix(employee_id), codes)
        department = self._require_department(data.get("department") or department_prefix(employee_id), codes)

        if self._employees.get_by_id(employee_id):
            raise ConflictError(f"Angajatul cu ID-ul {employee_id} există deja")

        inactive_date = data.get("inactive_date")
        employee = Employee(
            employee_id=employee_id,
            name=name,
            department=department,
            position=data.get("position") or DEFAULT_POSITION,
            shift_type=self._require_shift_type(data.get("shift_type")) or default_shift_for_department(department),
            active=data.get("active") is not False,
            inactive_date=require_date(inactive_date, "Data inactivării") if inactive_date else None,
            email=data.get("email") or None,
            phone=data.get("phone") or None,
            notes=data.get("notes") or None,
            hire_date=date.today(),
        )
        created = self._employees.create(employee)
        logger.info("Employee added: %s - %s (%s)", created.employee_id, created.name, created.department)
        return created

    def update_employee(self, employee_id: str, data: Mapping[str, Any]) -> Employee:
        current = self.get_employee(employee_id)

        changes: dict[str, Any] = {}
        if data.get("name"):
            changes["name"] = require_non_empty(data["name"], "Numele").upper()
        if data.get("department"):
            changes["department"] = self._require_department(data["department"])
        if data.get("position"):
            changes["position"] = data["position"]
        if data.get("shift_type"):
            changes["shift_type"] = self._require_shift_type(data["shift_type"])
        if data.get("active") is not None:
            changes["active"] = bool(data["active"])
        if "inactive_date" in data:
            value = data.get("inactive_date")
            changes["inactive_date"] = require_date(value, "Data inactivării") if value else None
        for key in ("email", "phone", "notes"):
            if key in data:
                changes[key] = data.get(key) or None

        updated = self._employees.update(replace(current, **changes))
        logger.info("Employee updated: %s", updated.employee_id)
        return updated

    def delete_employee(self, employee_id: str, *, today: Optional[date] = None) -> DeleteResult:
        """Soft delete (deactivate) when time records reference the employee, else remove."""

        employee = self.get_employee(employee_id)

        if self._time_records.count_for_employee(employee.employee_id) > 0:
            self._employees.deactivate(employee.employee_id, inactive_date=today or date.today())
            logger.info("Employee deactivated (soft delete): %s", employee.employee_id)
            return DeleteResult(DeleteKind.SOFT, 1, "Angajat dezactivat (are înregistrări de pontaj)")

        if not self._employees.delete(employee.employee_id):
            raise NotFoundError(f"Angajatul cu ID-ul {employee_id} nu există")
        logger.info("Employee deleted completely: %s", employee.employee_id)
        return DeleteResult(DeleteKind.HARD, 1, "Angajat șters complet")

    def import_csv(self, source: Union[str, IO]) -> ImportResult:
        """Import a roster CSV: first column id, second column name.

        The department is taken from the id prefix and the default shift from
        the department. Rows that fail validation are reported, not imported.
        """

        try:
            frame = pd.read_csv(source, dtype=str, keep_default_na=False)
        except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError) as exc:
            raise ValidationError(f"Fișier CSV invalid: {exc}") from exc

        if frame.shape[1] < 2:
            raise ValidationError("Fișierul CSV trebuie să conțină cel puțin coloanele ID și Nume")

        codes = self._department_codes()
        employees: list[Employee] = []
        errors: list[dict] = []
        for raw_id, raw_name in frame.iloc[:, :2].itertuples(index=False, name=None):
            raw_id = str(raw_id).replace('"', "").strip()
            raw_name = str(raw_name).replace('"', "").strip()
            if not raw_id and not raw_name:
                continue
            try:
                employee_id = require_employee_id(raw_id)
                name = require_non_empty(raw_name, "Numele").upper()
                department = self._require_department(department_prefix(employee_id), codes)
            except (ValidationError, ReferenceDataError) as e:
                errors.append({"id": raw_id, "error": str(e)})
                continue
            employees.append(
                Employee(
                    employee_id=employee_id,
                    name=" ".join(name.split()),
                    department=department,
                    position=DEFAULT_POSITION,
                    shift_type=default_shift_for_department(department),
                )
            )

        inserted, updated = self._employees.upsert_many(employees) if employees else (0, 0)
        logger.info(
            "Employee import completed: imported=%d updated=%d errors=%d total=%d",
            inserted,
            updated,
            len(errors),
            len(employees) + len(errors),
        )
        return ImportResult(imported=inserted, updated=updated, total=len(employees) + len(errors), errors=errors)
