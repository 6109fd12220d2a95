from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import time
from decimal import Decimal
from typing import Any, Dict, List, Optional

from ..common.datetime_utils import parse_time_of_day
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """One connection and one transaction: commit on success, roll back on any error."""

    conn = conn_factory.connect()
    cur = None
    try:
        cur = conn.cursor(dictionary=dictionary)
        yield conn, cur
        conn.commit()
    except Exception:
        logger.debug("Rolling back transaction", exc_info=True)
        conn.rollback()
        raise
    finally:
        if cur is not None:
            cur.close()
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    return cur.fetchone() or None


def fetchall(cur) -> List[Dict[str, Any]]:
    return list(cur.fetchall() or [])


def normalize_mysql_time(value: Any) -> Optional[time]:
    """TIME columns arrive as ``timedelta`` (or ``time``/``str`` depending on the connector).

    NULL stays ``None``; anything unparsable is a data error.
    """

    if value is None:
        return None
    parsed = parse_time_of_day(value)
    if parsed is None:
        raise ValueError(f"Invalid time value: {value!r}")
    return parsed


def as_float(value: Any) -> float:
    """DECIMAL columns come back as Decimal; the domain works in floats."""

    if value is None:
        return 0.0
    if isinstance(value, Decimal):
        return float(value)
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0
