from __future__ import annotations

import re
from datetime import date
from typing import Any

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date

EMPLOYEE_ID_PATTERN = re.compile(r"^([A-Z]{1,3})(\d+)$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} este obligatoriu")
    return value.strip()


def require_employee_id(value: str) -> str:
    """Normalize an employee id and check the 'department code + number' format."""

    value = require_non_empty(value, "ID angajat").upper()
    if not EMPLOYEE_ID_PATTERN.match(value):
        raise ValidationError("ID-ul trebuie să aibă formatul: cod departament + număr (ex: DC1, FA2)")
    return value


def department_prefix(employee_id: str) -> str:
    match = EMPLOYEE_ID_PATTERN.match(employee_id.upper())
    return match.group(1) if match else ""


def require_date(value: Any, field_name: str = "Data") -> date:
    if isinstance(value, date):
        return value
    if not value:
        raise ValidationError(f"{field_name} este obligatorie")
    try:
        return parse_iso_date(str(value))
    except ValueError as exc:
        raise ValidationError(f"{field_name} are un format invalid (așteptat YYYY-MM-DD): {value!r}") from exc


def require_report_period(year: Any, month: Any) -> tuple[int, int]:
    """Validate a report request: integer year and zero-based month index."""

    if isinstance(year, bool) or not isinstance(year, int):
        raise ValidationError(f"Anul trebuie să fie un număr întreg: {year!r}")
    if isinstance(month, bool) or not isinstance(month, int):
        raise ValidationError(f"Luna trebuie să fie un număr întreg: {month!r}")
    if not 1 <= year <= 9999:
        raise ValidationError(f"An invalid: {year}")
    if not 0 <= month <= 11:
        raise ValidationError(f"Luna trebuie să fie între 0 și 11 (Ianuarie=0): {month}")
    return year, month


def require_year(value: Any) -> int:
    text = str(value or "").strip()
    if len(text) != 4 or not text.isdigit():
        raise ValidationError(f"Anul trebuie să aibă 4 cifre: {value!r}")
    return int(text)
