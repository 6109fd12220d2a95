from datetime import date, time

import pytest

from src.pontaj.pontaj.core.enums import RecordStatus
from src.pontaj.pontaj.core.exceptions import NotFoundError, ReferenceDataError, ValidationError
from src.pontaj.pontaj.timesheet.calculator.break_policies import LegacyBreakPolicy
from src.pontaj.pontaj.timesheet.service import TimeRecordService

from conftest import FakeShiftRepo, make_employee


@pytest.fixture
def service(container):
    return container.time_record_service


def test_save_present_record_computes_hours(service, time_records_repo):
    saved = service.save_record(
        {"employee_id": "fa1", "date": "2024-03-04", "start_time": "07:00", "end_time": "15:30", "shift_type": "SCHIMB_I"}
    )
    assert saved.employee_id == "FA1"
    assert saved.worked_hours == 8.0
    assert saved.break_minutes == 30
    assert saved.start_time == time(7, 0)
    assert time_records_repo.get("FA1", date(2024, 3, 4)) == saved


def test_save_defaults_shift_type_from_employee(service):
    saved = service.save_record({"employee_id": "TE1", "date": "2024-03-04", "start_time": "08:00", "end_time": "16:30"})
    assert saved.shift_type == "TESA1"


def test_client_worked_hours_are_recomputed_from_times(service):
    saved = service.save_record(
        {"employee_id": "FA1", "date": "2024-03-04", "start_time": "07:00", "end_time": "15:30", "worked_hours": 12}
    )
    assert saved.worked_hours == 8.0
    assert saved.break_minutes == 30


def test_present_without_times_has_zero_hours(service):
    saved = service.save_record({"employee_id": "FA1", "date": "2024-03-04", "worked_hours": "abc"})
    assert saved.status is RecordStatus.PRESENT
    assert saved.worked_hours == 0.0


def test_non_present_status_has_zero_hours_even_with_times(service):
    saved = service.save_record(
        {"employee_id": "FA1", "date": "2024-03-05", "status": "vacation", "start_time": "07:00", "end_time": "15:30"}
    )
    assert saved.status is RecordStatus.VACATION
    assert saved.worked_hours == 0.0
    assert saved.break_minutes == 0


def test_save_is_upsert_on_employee_and_date(service, time_records_repo):
    service.save_record({"employee_id": "FA1", "date": "2024-03-04", "start_time": "07:00", "end_time": "15:30"})
    service.save_record({"employee_id": "FA1", "date": "2024-03-04", "status": "sick"})
    records = time_records_repo.list_between(start_date=date(2024, 3, 1), end_date=date(2024, 3, 31))
    assert len(records) == 1
    assert records[0].status is RecordStatus.SICK


def test_save_rejects_unknown_or_inactive_employee(service, employees_repo):
    with pytest.raises(NotFoundError):
        service.save_record({"employee_id": "FA99", "date": "2024-03-04"})
    employees_repo.create(make_employee("FA9", "PLECAT", active=False, inactive_date=date(2024, 1, 1)))
    with pytest.raises(NotFoundError):
        service.save_record({"employee_id": "FA9", "date": "2024-03-04"})


@pytest.mark.parametrize(
    "payload",
    [
        {"employee_id": "", "date": "2024-03-04"},
        {"employee_id": "FA1", "date": "04.03.2024"},
        {"employee_id": "FA1", "date": "2024-03-04", "status": "holiday"},
        {"employee_id": "FA1", "date": "2024-03-04", "start_time": "06:00", "end_time": "23:00"},
        {"employee_id": "FA1", "date": "2024-03-04", "start_time": "xx", "end_time": "15:00"},
    ],
)
def test_save_validation_errors(service, payload):
    with pytest.raises(ValidationError):
        service.save_record(payload)


def test_save_rejects_unknown_shift_type(service):
    with pytest.raises(ReferenceDataError):
        service.save_record({"employee_id": "FA1", "date": "2024-03-04", "shift_type": "NOAPTE"})


def test_apply_shift_preset_writes_one_record_per_employee(service, time_records_repo):
    result = service.apply_shift_preset(employee_ids=["FA1", "fa2", "DC1"], work_date="2024-03-04", shift_type="SCHIMB_I")

    assert result.applied == 3
    assert result.preset_name == "Schimb I"
    assert time_records_repo.upsert_many_calls == 1
    for employee_id in ("FA1", "FA2", "DC1"):
        record = time_records_repo.get(employee_id, date(2024, 3, 4))
        assert record.status is RecordStatus.PRESENT
        assert record.worked_hours == 8.0
        assert record.shift_type == "SCHIMB_I"

    payload = result.to_dict()
    assert payload["shiftType"] == "SCHIMB_I"
    assert payload["date"] == "2024-03-04"
    assert payload["details"] == {"startTime": "07:00", "endTime": "15:30", "workedHours": 8.0}


def test_apply_shift_preset_is_all_or_nothing(service, time_records_repo):
    with pytest.raises(ValidationError):
        service.apply_shift_preset(employee_ids=["FA1", "XX9"], work_date="2024-03-04", shift_type="SCHIMB_I")
    assert time_records_repo.upsert_many_calls == 0
    assert time_records_repo.get("FA1", date(2024, 3, 4)) is None


def test_apply_unknown_preset(service):
    with pytest.raises(ReferenceDataError):
        service.apply_shift_preset(employee_ids=["FA1"], work_date="2024-03-04", shift_type="NOAPTE")


def test_apply_requires_employee_list(service):
    with pytest.raises(ValidationError):
        service.apply_shift_preset(employee_ids=[], work_date="2024-03-04", shift_type="SCHIMB_I")


def test_list_records_rejects_reversed_range(service):
    with pytest.raises(ValidationError):
        service.list_records(start=date(2024, 3, 31), end=date(2024, 3, 1))


def test_calculate_uses_configured_policy(employees_repo, time_records_repo):
    service = TimeRecordService(time_records_repo, employees_repo, FakeShiftRepo(), policy=LegacyBreakPolicy())
    assert service.calculate("08:00", "13:30").break_minutes == 30
