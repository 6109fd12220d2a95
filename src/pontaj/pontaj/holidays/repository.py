from __future__ import annotations

from typing import Protocol, Sequence

from .model import LegalHoliday


class HolidayRepository(Protocol):
    def list_for_year(self, year: int) -> Sequence[LegalHoliday]:
        raise NotImplementedError

    def upsert_many(self, holidays: Sequence[LegalHoliday]) -> int:
        """Insert or rename holidays keyed by date; returns the number written."""

        raise NotImplementedError
