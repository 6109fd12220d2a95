from __future__ import annotations

import logging
from typing import Optional, Sequence

import requests

from ..common.datetime_utils import parse_iso_date
from ..core.exceptions import ExternalServiceError
from .model import LegalHoliday

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://date.nager.at/api/v3/PublicHolidays/{year}/{country}"


class PublicHolidayClient:
    """Fetches national public holidays from a Nager.Date compatible API."""

    def __init__(
        self,
        *,
        api_url: str = DEFAULT_API_URL,
        country: str = "RO",
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self._api_url = api_url
        self._country = country
        self._timeout = timeout
        self._session = session or requests.Session()

    def fetch_year(self, year: int) -> Sequence[LegalHoliday]:
        url = self._api_url.format(year=year, country=self._country)
        try:
            resp = self._session.get(url, timeout=self._timeout)
            resp.raise_for_status()
            payload = resp.json()
        except requests.HTTPError as exc:
            logger.warning("Holiday API returned HTTP error for %s: %s", year, exc)
            raise ExternalServiceError(f"Serviciul de sărbători legale a răspuns cu eroare: {exc}") from exc
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Holiday API unreachable for %s: %s", year, exc)
            raise ExternalServiceError(f"Nu s-au putut prelua sărbătorile legale: {exc}") from exc

        holidays = []
        for item in payload or []:
            try:
                holidays.append(
                    LegalHoliday(
                        holiday_date=parse_iso_date(item["date"]),
                        name=item.get("localName") or item.get("name") or "",
                        type="national",
                    )
                )
            except (KeyError, TypeError, ValueError):
                logger.debug("Skipping malformed holiday entry: %r", item)
        return holidays
