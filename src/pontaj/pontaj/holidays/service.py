from __future__ import annotations

import logging
from typing import Any, Sequence

from ..common.validators import require_year
from .client import PublicHolidayClient
from .model import LegalHoliday
from .repository import HolidayRepository

logger = logging.getLogger(__name__)


class HolidayService:
    def __init__(self, holidays: HolidayRepository, client: PublicHolidayClient):
        self._holidays = holidays
        self._client = client

    def list_holidays(self, year: Any) -> Sequence[LegalHoliday]:
        return self._holidays.list_for_year(require_year(year))

    def import_year(self, year: Any) -> dict:
        """Pull the public holidays of ``year`` and upsert them by date."""

        year = require_year(year)
        fetched = [h for h in self._client.fetch_year(year) if h.holiday_date.year == year]
        saved = self._holidays.upsert_many(fetched) if fetched else 0
        logger.info("Imported %d legal holidays for %d", saved, year)
        return {"success": True, "year": year, "imported": saved}
