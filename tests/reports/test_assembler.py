from datetime import date, time

import pytest

from src.pontaj.pontaj.core.enums import CellTag, RecordStatus
from src.pontaj.pontaj.core.exceptions import ReferenceDataError, ValidationError
from src.pontaj.pontaj.reports.assembler import assemble_report
from src.pontaj.pontaj.timesheet.calculator.worked_hours import compute_worked_hours
from src.pontaj.pontaj.timesheet.model import TimeRecord

from conftest import DEPARTMENTS, make_employee

NAMES = {d.code: d.name for d in DEPARTMENTS}


def present(employee_id, day, start, end, shift_type=None):
    worked = compute_worked_hours(start, end, shift_type)
    return TimeRecord(
        employee_id=employee_id,
        work_date=day,
        status=RecordStatus.PRESENT,
        start_time=time.fromisoformat(start),
        end_time=time.fromisoformat(end),
        worked_hours=worked.worked_hours,
        break_minutes=worked.break_minutes,
        shift_type=shift_type,
    )


def status(employee_id, day, value):
    return TimeRecord(employee_id=employee_id, work_date=day, status=value)


@pytest.fixture
def roster():
    return [
        make_employee("FA1", "POPESCU ION"),
        make_employee("TE1", "CONSTANTIN ANA"),
        make_employee("DC1", "GHEORGHE VASILE"),
        make_employee("FA2", "IONESCU MARIA"),
    ]


@pytest.fixture
def records():
    return [
        present("FA1", date(2024, 3, 4), "07:00", "15:30", "SCHIMB_I"),
        present("FA1", date(2024, 3, 5), "07:00", "15:30", "SCHIMB_I"),
        present("TE1", date(2024, 3, 4), "07:00", "20:00", "TURA"),
        present("DC1", date(2024, 3, 2), "07:00", "15:30", "SCHIMB_I"),
        status("FA2", date(2024, 3, 4), RecordStatus.SICK),
        status("FA2", date(2024, 3, 5), RecordStatus.ABSENT),
        status("FA2", date(2024, 3, 6), RecordStatus.DELEGATION),
        status("FA2", date(2024, 3, 7), RecordStatus.UNPAID),
        status("FA2", date(2024, 3, 8), RecordStatus.FREE),
        status("FA2", date(2024, 3, 11), RecordStatus.VACATION),
    ]


def build(roster, records, holidays=(), **kwargs):
    kwargs.setdefault("departments", NAMES)
    return assemble_report(roster, records, holidays, 2024, 2, **kwargs)


def row_for(grid, employee_id):
    return next(r for r in grid.rows if r.employee_id == employee_id)


def test_rows_sorted_by_department_then_name(roster, records):
    grid = build(roster, records)
    assert [r.employee_id for r in grid.rows] == ["DC1", "FA2", "FA1", "TE1"]


def test_sort_is_case_sensitive():
    grid = build([make_employee("FA1", "abc"), make_employee("FA2", "ZED")], [])
    assert [r.name for r in grid.rows] == ["ZED", "abc"]


def test_day_columns_cover_the_month_with_weekend_and_holiday_flags(roster):
    grid = build(roster, [], holidays=[date(2024, 3, 8), date(2023, 3, 9)])
    assert len(grid.columns) == 31
    assert grid.columns[0].label == "01 mar"
    weekend_days = [c.day for c in grid.columns if c.weekend]
    assert weekend_days[:4] == [2, 3, 9, 10]
    assert [c.day for c in grid.columns if c.holiday] == [8]


def test_scenario_a_day_shift(roster, records):
    row = row_for(build(roster, records), "FA1")
    cell = row.cells[3]
    assert cell.tag is CellTag.VALUE
    assert cell.text == "07:00-15:30\n8h"
    assert cell.hours == 8.0
    assert row.counters.total_hours == 16.0
    assert row.counters.worked_days == 2


def test_scenario_b_long_shift(roster, records):
    row = row_for(build(roster, records), "TE1")
    assert row.counters.total_hours == 12.0
    assert row.cells[3].text == "07:00-20:00\n12h"


def test_scenario_c_vacation_with_times_counts_no_hours():
    record = TimeRecord(
        employee_id="FA1",
        work_date=date(2024, 3, 4),
        status=RecordStatus.VACATION,
        start_time=time(7, 0),
        end_time=time(15, 30),
        worked_hours=8.0,
    )
    row = build([make_employee("FA1", "POPESCU ION")], [record]).rows[0]
    assert row.counters.vacation_days == 1
    assert row.counters.total_hours == 0.0
    assert row.cells[3].text == "CO"
    assert row.cells[3].tag is CellTag.STATUS


def test_each_status_feeds_exactly_one_counter(roster, records):
    counters = row_for(build(roster, records), "FA2").counters
    assert counters.to_dict() == {
        "total_hours": 0.0,
        "worked_days": 0,
        "free_days": 1,
        "delegation_days": 1,
        "unpaid_days": 1,
        "sick_days": 1,
        "absent_days": 1,
        "vacation_days": 1,
    }
    texts = [c.text for c in row_for(build(roster, records), "FA2").cells[3:11]]
    assert texts == ["CM", "A", "D", "CFP", "L", "", "", "CO"]


def test_weekend_present_record_still_counts(roster, records):
    row = row_for(build(roster, records), "DC1")
    assert row.counters.worked_days == 1
    assert row.counters.total_hours == 8.0


def test_scenario_d_inactivation_boundary():
    roster = [
        make_employee("FA1", "INACTIV ZIUA 10", inactive_date=date(2024, 3, 10)),
        make_employee("FA2", "INACTIV LA SFARSIT", inactive_date=date(2024, 3, 31)),
        make_employee("FA3", "INACTIV LUNA VIITOARE", inactive_date=date(2024, 4, 1)),
        make_employee("FA4", "DEZACTIVAT", active=False),
    ]
    grid = build(roster, [])
    assert [r.employee_id for r in grid.rows] == ["FA2", "FA3"]


def test_scenario_e_empty_roster_gives_zero_aggregates(records):
    grid = build([], records)
    assert grid.rows == ()
    assert len(grid.daily_totals) == 31
    assert all(h == 0 for h in grid.daily_totals)
    assert grid.grand_totals.values() == [0.0, 0, 0, 0, 0, 0, 0, 0]
    assert grid.departments == ()
    assert (grid.labor.direct_hours, grid.labor.indirect_hours, grid.labor.company_hours) == (0.0, 0.0, 0.0)


def test_daily_totals_sum_to_employee_hours(roster, records):
    grid = build(roster, records)
    assert sum(grid.daily_totals) == pytest.approx(sum(r.counters.total_hours for r in grid.rows))
    assert grid.daily_totals[3] == 8.0 + 12.0
    assert grid.grand_totals.total_hours == 36.0


def test_daily_and_employee_totals_agree_for_fractional_hours(roster):
    day = date(2024, 3, 4)
    fractional = [
        TimeRecord(employee_id=e.employee_id, work_date=day, status=RecordStatus.PRESENT, worked_hours=0.333)
        for e in roster[:3]
    ]
    grid = build(roster, fractional)

    assert [r.counters.total_hours for r in grid.rows if r.counters.worked_days] == [0.33, 0.33, 0.33]
    assert grid.daily_totals[3] == pytest.approx(0.99)
    assert sum(grid.daily_totals) == pytest.approx(sum(r.counters.total_hours for r in grid.rows))
    assert grid.grand_totals.total_hours == pytest.approx(0.99)


def test_department_totals_and_labor_split(roster, records):
    grid = build(roster, records)
    by_code = {d.code: (d.name, d.hours) for d in grid.departments}
    assert by_code == {"DC": ("Depozit Cherestea", 8.0), "FA": ("Fabrica", 16.0), "TE": ("TESA", 12.0)}
    assert grid.labor.direct_hours == 24.0
    assert grid.labor.indirect_hours == 12.0
    assert grid.labor.company_hours == sum(d.hours for d in grid.departments)


def test_direct_departments_are_configurable(roster, records):
    grid = build(roster, records, direct_departments=("TE",))
    assert grid.labor.direct_hours == 12.0
    assert grid.labor.indirect_hours == 24.0


def test_department_filter(roster, records):
    grid = build(roster, records, department="FA")
    assert {r.department for r in grid.rows} == {"FA"}
    assert grid.labor.indirect_hours == 0.0


def test_unknown_department_code_in_mapping_is_rejected():
    with pytest.raises(ReferenceDataError):
        build([make_employee("XY1", "NECUNOSCUT")], [])


def test_without_mapping_department_name_falls_back_to_code():
    grid = build([make_employee("XY1", "NECUNOSCUT")], [], departments=None)
    assert grid.departments[0].name == "XY"


def test_zero_hour_present_counts_nothing_by_default():
    record = TimeRecord(employee_id="FA1", work_date=date(2024, 3, 4), worked_hours=0.0)
    row = build([make_employee("FA1", "POPESCU ION")], [record]).rows[0]
    assert row.counters.worked_days == 0
    assert row.cells[3].tag is CellTag.VALUE


def test_zero_hour_present_counts_as_worked_day_when_enabled():
    record = TimeRecord(employee_id="FA1", work_date=date(2024, 3, 4), worked_hours=0.0)
    row = build([make_employee("FA1", "POPESCU ION")], [record], count_zero_hour_present=True).rows[0]
    assert row.counters.worked_days == 1
    assert row.counters.total_hours == 0.0


def test_records_outside_month_or_roster_are_ignored(roster):
    extra = [
        present("FA1", date(2024, 4, 1), "07:00", "15:30"),
        present("ZZ1", date(2024, 3, 4), "07:00", "15:30"),
    ]
    grid = build(roster, extra)
    assert grid.grand_totals.total_hours == 0.0


def test_assembly_is_idempotent(roster, records):
    assert build(roster, records) == build(roster, records)


@pytest.mark.parametrize("year,month", [(2024, 12), (2024, -1), (2024, "3"), (2024, 2.0), (True, 2), (0, 2), (10000, 1)])
def test_invalid_period_rejected(roster, year, month):
    with pytest.raises(ValidationError):
        assemble_report(roster, [], [], year, month)


def test_title_uses_romanian_dates(roster):
    grid = build(roster, [])
    assert grid.title == "FOAIE COLECTIVA DE PREZENTA SI PONTAJ - DE LA 01.03.2024 LA 31.03.2024"
