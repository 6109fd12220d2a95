from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterator, Optional

import mysql.connector

from .connection import DBConfig

logger = logging.getLogger(__name__)

REQUIRED_TABLES = ("departments", "shift_presets", "employees", "time_records", "legal_holidays")

_DB_DIRECTIVES = re.compile(r"(?im)^\s*(CREATE\s+DATABASE|USE)\b[^;]*;\s*$")


def _connect(db_config: dict, *, with_database: bool = True):
    target = DBConfig.from_dict(db_config)
    options = {"host": target.host, "port": target.port, "user": target.user, "password": target.password}
    if with_database:
        options["database"] = target.database
    return mysql.connector.connect(use_pure=True, **options)


def iter_sql_statements(sql: str) -> Iterator[str]:
    """Yield the statements of a script.

    Splits on ``;`` outside string literals; ``--`` comment lines and
    CREATE DATABASE / USE directives are dropped so the configured database
    name wins over whatever the script names.
    """

    body = "\n".join(line for line in _DB_DIRECTIVES.sub("", sql).splitlines() if not line.lstrip().startswith("--"))

    start = 0
    quote: Optional[str] = None
    i = 0
    while i < len(body):
        ch = body[i]
        if quote:
            if ch == "\\":
                i += 1
            elif ch == quote:
                quote = None
        elif ch in ("'", '"'):
            quote = ch
        elif ch == ";":
            stmt = body[start:i].strip()
            if stmt:
                yield stmt
            start = i + 1
        i += 1

    tail = body[start:].strip()
    if tail:
        yield tail


def ensure_database_exists(db_config: dict) -> None:
    database = DBConfig.from_dict(db_config).database
    conn = _connect(db_config, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(f"CREATE DATABASE IF NOT EXISTS `{database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci")
        conn.commit()
    finally:
        conn.close()


def run_sql_file(db_config: dict, path: str | Path) -> int:
    """Execute every statement of ``path`` in one transaction; returns the statement count."""

    path = Path(path)
    statements = list(iter_sql_statements(path.read_text(encoding="utf-8")))
    conn = _connect(db_config)
    try:
        cur = conn.cursor()
        for stmt in statements:
            cur.execute(stmt)
        conn.commit()
    except mysql.connector.Error:
        conn.rollback()
        logger.exception("Failed while applying %s", path.name)
        raise
    finally:
        conn.close()
    logger.info("Applied %s (%d statements)", path.name, len(statements))
    return len(statements)


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    run_sql_file(db_config, schema_path)
    missing = sorted(set(REQUIRED_TABLES) - set(list_tables(db_config)))
    if missing:
        logger.warning("Schema applied but tables are missing: %s", ", ".join(missing))


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> None:
    """Seed departments, shift presets and the predefined roster (idempotent upserts)."""
    run_sql_file(db_config, seed_path)


def list_tables(db_config: dict) -> list[str]:
    conn = _connect(db_config)
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
