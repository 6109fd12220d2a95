from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import LegalHoliday
from .repository import HolidayRepository


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_year(self, year: int) -> Sequence[LegalHoliday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT date, name, type FROM legal_holidays WHERE YEAR(date)=%s ORDER BY date",
                (year,),
            )
            return [
                LegalHoliday(holiday_date=r["date"], name=r["name"], type=r.get("type") or "national")
                for r in fetchall(cur)
            ]

    def upsert_many(self, holidays: Sequence[LegalHoliday]) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            for h in holidays:
                cur.execute(
                    """
                    INSERT INTO legal_holidays(date, name, type)
                    VALUES(%s,%s,%s)
                    ON DUPLICATE KEY UPDATE name=VALUES(name), type=VALUES(type)
                    """,
                    (h.holiday_date, h.name, h.type),
                )
        return len(holidays)
