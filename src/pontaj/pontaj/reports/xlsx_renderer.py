from __future__ import annotations

import io

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from ..core.enums import CellTag, RecordStatus
from .grid import ReportGrid
from .layout import LayoutCell, SheetLayout, build_layout

STATUS_FILLS = {
    RecordStatus.SICK: "D1ECF1",
    RecordStatus.VACATION: "FFF3CD",
    RecordStatus.ABSENT: "F5C6CB",
    RecordStatus.DELEGATION: "D4EDDA",
    RecordStatus.UNPAID: "E2E3E5",
    RecordStatus.FREE: "E2E3E5",
}
WEEKEND_FILL = "FFFF00"
HOLIDAY_FILL = "FF0000"

_THIN = Side(style="thin")
_BORDER = Border(left=_THIN, right=_THIN, top=_THIN, bottom=_THIN)
_CENTER = Alignment(horizontal="center", vertical="center", wrap_text=True)


def _fill(rgb: str) -> PatternFill:
    return PatternFill(start_color=rgb, end_color=rgb, fill_type="solid")


def _style(ws_cell, cell: LayoutCell) -> None:
    if cell.tag is CellTag.TITLE:
        ws_cell.font = Font(bold=True, size=16)
        ws_cell.alignment = Alignment(horizontal="center")
        return

    ws_cell.border = _BORDER
    if cell.tag in (CellTag.HEADER, CellTag.TOTAL):
        ws_cell.font = Font(bold=True)
    if cell.tag is not CellTag.LABEL:
        ws_cell.alignment = _CENTER

    if cell.tag is CellTag.STATUS and cell.status in STATUS_FILLS:
        ws_cell.fill = _fill(STATUS_FILLS[cell.status])
    elif cell.tag is CellTag.HOLIDAY:
        ws_cell.fill = _fill(HOLIDAY_FILL)
    elif cell.tag is CellTag.WEEKEND:
        ws_cell.fill = _fill(WEEKEND_FILL)


def render_layout(layout: SheetLayout) -> Workbook:
    wb = Workbook()
    ws = wb.active
    ws.title = layout.sheet_name

    for (row, col), cell in sorted(layout.cells.items()):
        ws_cell = ws.cell(row=row + 1, column=col + 1)
        if cell.value is not None:
            ws_cell.value = cell.value
        _style(ws_cell, cell)

    for first_row, first_col, last_row, last_col in layout.merges:
        ws.merge_cells(
            start_row=first_row + 1,
            start_column=first_col + 1,
            end_row=last_row + 1,
            end_column=last_col + 1,
        )

    for col, width in layout.widths.items():
        ws.column_dimensions[get_column_letter(col + 1)].width = width

    return wb


def render(grid: ReportGrid) -> Workbook:
    """Collective report as a single-sheet openpyxl workbook."""
    return render_layout(build_layout(grid))


def to_bytes(wb: Workbook) -> bytes:
    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()
