from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..core.constants import REPORT_SHEET_NAME
from ..core.enums import CellTag, RecordStatus
from .grid import SUMMARY_HEADERS, DayColumn, DayCell, ReportGrid

NAME_WIDTH = 25
DEPARTMENT_WIDTH = 12
DAY_WIDTH = 3
SUMMARY_WIDTH = 6

# Department table and labor block put their value across these columns.
_VALUE_SPAN = (2, 4)


@dataclass(frozen=True)
class LayoutCell:
    value: Any
    tag: CellTag
    status: Optional[RecordStatus] = None


@dataclass
class SheetLayout:
    """Cells positioned by 0-based (row, col), merges and column widths."""

    sheet_name: str = REPORT_SHEET_NAME
    cells: dict[tuple[int, int], LayoutCell] = field(default_factory=dict)
    merges: list[tuple[int, int, int, int]] = field(default_factory=list)
    widths: dict[int, float] = field(default_factory=dict)

    def put(self, row: int, col: int, value: Any, tag: CellTag, status: Optional[RecordStatus] = None) -> None:
        self.cells[(row, col)] = LayoutCell(value=value, tag=tag, status=status)

    def merge(self, first_row: int, first_col: int, last_row: int, last_col: int) -> None:
        self.merges.append((first_row, first_col, last_row, last_col))


def _day_tag(column: DayColumn, cell: DayCell) -> CellTag:
    if cell.tag is CellTag.STATUS:
        return CellTag.STATUS
    if column.holiday:
        return CellTag.HOLIDAY
    if column.weekend:
        return CellTag.WEEKEND
    return cell.tag


def _labeled_value_row(layout: SheetLayout, row: int, label: Any, value: Any, tag: CellTag, *, label_span: bool) -> None:
    layout.put(row, 0, label, tag)
    if label_span:
        layout.put(row, 1, None, tag)
        layout.merge(row, 0, row, 1)
    first, last = _VALUE_SPAN
    layout.put(row, first, value, tag)
    for col in range(first + 1, last + 1):
        layout.put(row, col, None, tag)
    layout.merge(row, first, row, last)


def build_layout(grid: ReportGrid) -> SheetLayout:
    layout = SheetLayout()
    n_days = len(grid.columns)
    first_summary = n_days + 2
    last_col = first_summary + len(SUMMARY_HEADERS) - 1

    layout.put(0, 0, grid.title, CellTag.TITLE)
    layout.merge(0, 0, 0, last_col)

    layout.put(1, 0, "Angajat", CellTag.HEADER)
    layout.put(1, 1, "Departament", CellTag.HEADER)
    for i, column in enumerate(grid.columns):
        layout.put(1, i + 2, column.label, CellTag.HEADER)
    for i, header in enumerate(SUMMARY_HEADERS):
        layout.put(1, first_summary + i, header, CellTag.HEADER)

    row = 2
    for employee in grid.rows:
        layout.put(row, 0, employee.name, CellTag.LABEL)
        layout.put(row, 1, employee.department, CellTag.LABEL)
        for i, (column, cell) in enumerate(zip(grid.columns, employee.cells)):
            layout.put(row, i + 2, cell.text or None, _day_tag(column, cell), cell.status)
        for i, value in enumerate(employee.counters.values()):
            layout.put(row, first_summary + i, value, CellTag.TOTAL if i == 0 else CellTag.VALUE)
        row += 1

    layout.put(row, 0, "Total ore pe zi", CellTag.TOTAL)
    layout.put(row, 1, None, CellTag.TOTAL)
    layout.merge(row, 0, row, 1)
    for i, hours in enumerate(grid.daily_totals):
        layout.put(row, i + 2, hours, CellTag.TOTAL)
    row += 1

    layout.put(row, 0, "Total general", CellTag.TOTAL)
    layout.put(row, 1, None, CellTag.TOTAL)
    layout.merge(row, 0, row, 1)
    for i, value in enumerate(grid.grand_totals.values()):
        layout.put(row, first_summary + i, value, CellTag.TOTAL)
    row += 2

    _labeled_value_row(layout, row, "Cod", "Total ore", CellTag.HEADER, label_span=False)
    layout.put(row, 1, "Departament", CellTag.HEADER)
    row += 1
    for dept in grid.departments:
        _labeled_value_row(layout, row, dept.code, dept.hours, CellTag.VALUE, label_span=False)
        layout.put(row, 1, dept.name, CellTag.LABEL)
        row += 1
    row += 1

    for label, value in (
        ("Total ore directe", grid.labor.direct_hours),
        ("Total ore indirecte", grid.labor.indirect_hours),
        ("Total ore firmă", grid.labor.company_hours),
    ):
        _labeled_value_row(layout, row, label, value, CellTag.TOTAL, label_span=True)
        row += 1

    layout.widths[0] = NAME_WIDTH
    layout.widths[1] = DEPARTMENT_WIDTH
    for i in range(n_days):
        layout.widths[i + 2] = DAY_WIDTH
    for i in range(len(SUMMARY_HEADERS)):
        layout.widths[first_summary + i] = SUMMARY_WIDTH

    return layout


def default_report_filename(grid: ReportGrid) -> str:
    return f"Pontaj {grid.month_name.upper()} {grid.year}.xlsx"
