from __future__ import annotations

from dataclasses import replace
from datetime import date, time

import pytest

from src.pontaj.pontaj.container import wire_services
from src.pontaj.pontaj.departments.model import Department
from src.pontaj.pontaj.employees.model import Employee
from src.pontaj.pontaj.shifts.model import ShiftPreset

DEPARTMENTS = [
    Department("DC", "Depozit Cherestea"),
    Department("FA", "Fabrica"),
    Department("MO", "Echipa Montaj"),
    Department("AM", "Atelier Mecanic"),
    Department("PC", "Paza cazan"),
    Department("DI", "Diversi"),
    Department("AU", "Auto"),
    Department("MA", "Magazia"),
    Department("TE", "TESA"),
]

PRESETS = [
    ShiftPreset("SCHIMB_I", "Schimb I", time(7, 0), time(15, 30), 8.0, 30),
    ShiftPreset("SCHIMB_II", "Schimb II", time(15, 30), time(0, 0), 8.0, 30),
    ShiftPreset("TURA", "Tură 12h", time(7, 0), time(19, 0), 11.0, 60),
    ShiftPreset("TESA1", "TESA 1", time(8, 0), time(16, 30), 8.0, 30),
    ShiftPreset("TESA2", "TESA 2", time(9, 0), time(17, 30), 8.0, 30),
]


class FakeDepartmentRepo:
    def __init__(self, departments=None):
        self._departments = list(DEPARTMENTS if departments is None else departments)

    def list_all(self):
        return sorted(self._departments, key=lambda d: d.code)


class FakeShiftRepo:
    def __init__(self, presets=None):
        self._presets = {p.preset_id: p for p in (PRESETS if presets is None else presets)}

    def list_active(self):
        return [p for p in self._presets.values() if p.active]

    def get_by_id(self, preset_id):
        return self._presets.get(preset_id)


class FakeEmployeeRepo:
    def __init__(self, employees=()):
        self._rows = {e.employee_id.upper(): e for e in employees}

    def list_active(self, *, as_of, department=None):
        return self.search(department=department, include_inactive=False, as_of=as_of)

    def search(self, *, department=None, include_inactive=False, as_of=None, text=None):
        out = []
        for e in self._rows.values():
            if not include_inactive and not e.is_active_on(as_of or date.today()):
                continue
            if department and e.department != department:
                continue
            if text and text.lower() not in e.name.lower() and text.lower() not in e.employee_id.lower():
                continue
            out.append(e)
        return sorted(out, key=lambda e: (e.department, e.name))

    def get_by_id(self, employee_id):
        return self._rows.get(str(employee_id).upper())

    def create(self, employee):
        self._rows[employee.employee_id.upper()] = employee
        return employee

    def update(self, employee):
        self._rows[employee.employee_id.upper()] = employee
        return employee

    def deactivate(self, employee_id, *, inactive_date):
        e = self.get_by_id(employee_id)
        if not e:
            return False
        self._rows[e.employee_id.upper()] = replace(e, active=False, inactive_date=inactive_date)
        return True

    def delete(self, employee_id):
        return self._rows.pop(str(employee_id).upper(), None) is not None

    def upsert_many(self, employees):
        inserted = updated = 0
        for e in employees:
            current = self.get_by_id(e.employee_id)
            if current:
                self._rows[e.employee_id.upper()] = replace(
                    current, name=e.name, department=e.department, shift_type=e.shift_type
                )
                updated += 1
            else:
                self._rows[e.employee_id.upper()] = e
                inserted += 1
        return inserted, updated


class FakeTimeRecordRepo:
    def __init__(self, records=(), employees=None):
        self._rows = {r.key: r for r in records}
        self._employees = employees
        self.upsert_many_calls = 0

    def list_between(self, *, start_date, end_date, department=None, employee_id=None):
        out = []
        for r in self._rows.values():
            if not (start_date <= r.work_date <= end_date):
                continue
            if employee_id and r.employee_id.upper() != employee_id.upper():
                continue
            if department and self._employees is not None:
                e = self._employees.get_by_id(r.employee_id)
                if not e or e.department != department:
                    continue
            out.append(r)
        return sorted(out, key=lambda r: (r.work_date, r.employee_id))

    def get(self, employee_id, work_date):
        return self._rows.get((employee_id.upper(), work_date))

    def upsert(self, record):
        self._rows[record.key] = record
        return record

    def upsert_many(self, records):
        self.upsert_many_calls += 1
        for r in records:
            self._rows[r.key] = r
        return len(records)

    def count_for_employee(self, employee_id):
        return sum(1 for key in self._rows if key[0] == employee_id.upper())


class FakeHolidayRepo:
    def __init__(self, holidays=()):
        self._rows = {h.holiday_date: h for h in holidays}

    def list_for_year(self, year):
        return sorted((h for h in self._rows.values() if h.holiday_date.year == year), key=lambda h: h.holiday_date)

    def upsert_many(self, holidays):
        for h in holidays:
            self._rows[h.holiday_date] = h
        return len(holidays)


class FakeHolidayClient:
    def __init__(self, holidays=(), error=None):
        self._holidays = list(holidays)
        self._error = error
        self.calls = []

    def fetch_year(self, year):
        self.calls.append(year)
        if self._error:
            raise self._error
        return list(self._holidays)


def make_employee(employee_id, name, *, active=True, inactive_date=None, shift_type="SCHIMB_I"):
    department = "".join(ch for ch in employee_id if ch.isalpha())
    return Employee(
        employee_id=employee_id,
        name=name,
        department=department,
        shift_type=shift_type,
        active=active,
        inactive_date=inactive_date,
    )


@pytest.fixture
def employees_repo():
    return FakeEmployeeRepo(
        [
            make_employee("FA1", "POPESCU ION"),
            make_employee("FA2", "IONESCU MARIA"),
            make_employee("DC1", "GHEORGHE VASILE"),
            make_employee("TE1", "CONSTANTIN ANA", shift_type="TESA1"),
        ]
    )


@pytest.fixture
def time_records_repo(employees_repo):
    return FakeTimeRecordRepo(employees=employees_repo)


@pytest.fixture
def holidays_repo():
    return FakeHolidayRepo()


@pytest.fixture
def holiday_client():
    return FakeHolidayClient()


@pytest.fixture
def container(employees_repo, time_records_repo, holidays_repo, holiday_client):
    return wire_services(
        departments_repo=FakeDepartmentRepo(),
        shifts_repo=FakeShiftRepo(),
        employees_repo=employees_repo,
        time_records_repo=time_records_repo,
        holidays_repo=holidays_repo,
        holiday_client=holiday_client,
    )
