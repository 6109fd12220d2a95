from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class LegalHoliday:
    """Zi de sărbătoare legală (nelucrătoare)."""

    holiday_date: date
    name: str
    type: str = "national"

    def to_dict(self) -> dict:
        return {"date": self.holiday_date.isoformat(), "name": self.name, "type": self.type}
