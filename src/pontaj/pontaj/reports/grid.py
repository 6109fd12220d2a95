"""Presentation-free model of the monthly collective report.

The assembler fills these structures with every business decision already
taken (counters, aggregates, overlay flags, display strings); layout and
rendering only position and style what is here.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import date
from typing import Optional

from ..core.constants import RO_MONTHS, RO_MONTHS_SHORT
from ..core.enums import CellTag, RecordStatus


@dataclass(frozen=True)
class DayColumn:
    day: int
    date: date
    weekend: bool = False
    holiday: bool = False

    @property
    def label(self) -> str:
        """Header text, e.g. ``"01 ian"``."""
        return f"{self.day:02d} {RO_MONTHS_SHORT[self.date.month - 1]}"


@dataclass(frozen=True)
class DayCell:
    day: int
    tag: CellTag = CellTag.EMPTY
    text: str = ""
    hours: float = 0.0
    status: Optional[RecordStatus] = None


@dataclass
class SummaryCounters:
    """The eight per-employee summary columns, in report order."""

    total_hours: float = 0.0
    worked_days: int = 0
    free_days: int = 0
    delegation_days: int = 0
    unpaid_days: int = 0
    sick_days: int = 0
    absent_days: int = 0
    vacation_days: int = 0

    def values(self) -> list:
        return [getattr(self, f.name) for f in fields(self)]

    def add(self, other: "SummaryCounters") -> None:
        for f in fields(self):
            setattr(self, f.name, getattr(self, f.name) + getattr(other, f.name))

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


SUMMARY_HEADERS = (
    "Total Ore",
    "Zile Lucrate",
    "Zile Libere",
    "Delegație",
    "Zile CFP",
    "CM",
    "Nemotivate",
    "Zile CO",
)


@dataclass(frozen=True)
class EmployeeRow:
    employee_id: str
    name: str
    department: str
    cells: tuple[DayCell, ...]
    counters: SummaryCounters

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "name": self.name,
            "department": self.department,
            "days": [{"day": c.day, "tag": c.tag.value, "text": c.text, "hours": c.hours} for c in self.cells],
            "summary": self.counters.to_dict(),
        }


@dataclass(frozen=True)
class DepartmentTotal:
    code: str
    name: str
    hours: float


@dataclass(frozen=True)
class LaborSplit:
    direct_hours: float = 0.0
    indirect_hours: float = 0.0

    @property
    def company_hours(self) -> float:
        return round(self.direct_hours + self.indirect_hours, 2)


@dataclass(frozen=True)
class ReportGrid:
    year: int
    month: int
    department: Optional[str]
    columns: tuple[DayColumn, ...]
    rows: tuple[EmployeeRow, ...]
    daily_totals: tuple[float, ...]
    grand_totals: SummaryCounters
    departments: tuple[DepartmentTotal, ...] = field(default_factory=tuple)
    labor: LaborSplit = field(default_factory=LaborSplit)

    @property
    def start_date(self) -> date:
        return date(self.year, self.month + 1, 1)

    @property
    def end_date(self) -> date:
        return self.columns[-1].date

    @property
    def title(self) -> str:
        return (
            "FOAIE COLECTIVA DE PREZENTA SI PONTAJ - DE LA "
            f"{self.start_date:%d.%m.%Y} LA {self.end_date:%d.%m.%Y}"
        )

    @property
    def month_name(self) -> str:
        return RO_MONTHS[self.month]

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "month": self.month,
            "department": self.department,
            "title": self.title,
            "columns": [
                {"day": c.day, "date": c.date.isoformat(), "label": c.label, "weekend": c.weekend, "holiday": c.holiday}
                for c in self.columns
            ],
            "employees": [r.to_dict() for r in self.rows],
            "daily_totals": list(self.daily_totals),
            "grand_totals": self.grand_totals.to_dict(),
            "departments": [{"code": d.code, "name": d.name, "hours": d.hours} for d in self.departments],
            "labor": {
                "direct_hours": self.labor.direct_hours,
                "indirect_hours": self.labor.indirect_hours,
                "company_hours": self.labor.company_hours,
            },
        }
