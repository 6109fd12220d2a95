from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .container import Container, build_container
from .core.exceptions import DomainError
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .logging_config import setup_logging
from .employees.controller import register as register_employees
from .holidays.controller import register as register_holidays
from .reports.controller import register as register_reports
from .shifts.controller import register as register_shifts
from .timesheet.controller import register as register_timesheet

logger = logging.getLogger(__name__)

ROOT_DIR = Path(__file__).resolve().parents[3]


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        logger.warning("%s: %s", type(e).__name__, e)
        return jsonify({"success": False, "error": str(e)}), e.status_code

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        # Let Flask render its own HTTP errors (404 for unknown routes, 405, ...).
        code = getattr(e, "code", None)
        if isinstance(code, int):
            return jsonify({"success": False, "error": getattr(e, "description", str(e))}), code
        logger.exception("Unhandled error")
        message = str(e) if app.config.get("DEBUG") else "Eroare internă de server"
        return jsonify({"success": False, "error": message}), 500


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"), json_output=bool(getattr(settings, "LOG_JSON", False)))
    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if container is None:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=ROOT_DIR / "database" / "schema.sql")
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=ROOT_DIR / "database" / "seed.sql")
            logger.info("Reference data seeded")
        container = build_container(db_config=db_config, settings=settings)

    app.extensions["pontaj.container"] = container

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "OK", "service": "pontaj"})

    register_error_handlers(app)
    register_shifts(app, container)
    register_employees(app, container)
    register_timesheet(app, container)
    register_holidays(app, container)
    register_reports(app, container)

    return app
