from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall, fetchone, normalize_mysql_time
from .model import ShiftPreset
from .repository import ShiftPresetRepository

_COLUMNS = "id, name, start_time, end_time, worked_hours, break_minutes, description, active"


def _to_preset(r: Dict[str, Any]) -> ShiftPreset:
    return ShiftPreset(
        preset_id=r["id"],
        name=r["name"],
        start_time=normalize_mysql_time(r["start_time"]),
        end_time=normalize_mysql_time(r["end_time"]),
        worked_hours=as_float(r.get("worked_hours")),
        break_minutes=int(r.get("break_minutes") or 0),
        description=r.get("description"),
        active=bool(r.get("active", 1)),
    )


class MySQLShiftPresetRepository(ShiftPresetRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_active(self) -> Sequence[ShiftPreset]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM shift_presets WHERE active=1 ORDER BY id")
            return [_to_preset(r) for r in fetchall(cur)]

    def get_by_id(self, preset_id: str) -> Optional[ShiftPreset]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM shift_presets WHERE id=%s", (preset_id,))
            r = fetchone(cur)
            return _to_preset(r) if r else None
