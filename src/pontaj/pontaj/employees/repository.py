from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def list_active(self, *, as_of: date, department: Optional[str] = None) -> Sequence[Employee]:
        """Employees active on ``as_of`` ordered by (department, name)."""

        raise NotImplementedError

    def search(
        self,
        *,
        department: Optional[str] = None,
        include_inactive: bool = False,
        as_of: Optional[date] = None,
        text: Optional[str] = None,
    ) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, employee: Employee) -> Employee:
        raise NotImplementedError

    def update(self, employee: Employee) -> Employee:
        raise NotImplementedError

    def deactivate(self, employee_id: str, *, inactive_date: date) -> bool:
        raise NotImplementedError

    def delete(self, employee_id: str) -> bool:
        raise NotImplementedError

    def upsert_many(self, employees: Sequence[Employee]) -> tuple[int, int]:
        """Insert or update in one transaction; returns (inserted, updated)."""

        raise NotImplementedError
