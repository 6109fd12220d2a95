from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Entitate de domeniu: angajat.

    ``employee_id`` is the department code followed by a number (``"DC1"``).
    """

    employee_id: str
    name: str
    department: str
    position: str = "Operator"
    shift_type: Optional[str] = None
    active: bool = True
    inactive_date: Optional[date] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    notes: Optional[str] = None
    hire_date: Optional[date] = None

    def is_active_on(self, day: date) -> bool:
        """Active on ``day``: flagged active and not inactivated before that day."""
        # >=: inactivated exactly on ``day`` still counts (month-end roster boundary)
        return self.active and (self.inactive_date is None or self.inactive_date >= day)

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "name": self.name,
            "department": self.department,
            "position": self.position,
            "shift_type": self.shift_type,
            "active": self.active,
            "inactive_date": self.inactive_date.isoformat() if self.inactive_date else None,
            "email": self.email,
            "phone": self.phone,
            "notes": self.notes,
            "hire_date": self.hire_date.isoformat() if self.hire_date else None,
        }
