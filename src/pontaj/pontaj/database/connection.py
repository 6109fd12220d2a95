from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import mysql.connector

logger = logging.getLogger(__name__)


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    charset: str = "utf8mb4"
    connection_timeout: int = 10

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "pontaj_db")),
            charset=str(db_config.get("charset", "utf8mb4")),
            connection_timeout=int(db_config.get("connection_timeout", 10)),
        )


class DatabaseConnection:
    """Process-wide factory handing out one short-lived connection per repository call.

    Romanian names (ă, ș, ț) need the utf8mb4 charset end to end.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self._config = config

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None:
            cls._instance = DatabaseConnection(config)
        return cls._instance

    @property
    def config(self) -> DBConfig:
        return self._config

    def connect(self):
        cfg = self._config
        try:
            return mysql.connector.connect(
                host=cfg.host,
                port=cfg.port,
                user=cfg.user,
                password=cfg.password,
                database=cfg.database,
                charset=cfg.charset,
                connection_timeout=cfg.connection_timeout,
            )
        except mysql.connector.Error:
            logger.error("Cannot connect to MySQL at %s:%s/%s", cfg.host, cfg.port, cfg.database)
            raise
