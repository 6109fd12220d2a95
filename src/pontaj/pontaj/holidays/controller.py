from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/holidays/<year>", methods=["GET"], endpoint="api_holidays")
    def holidays(year: str):
        return jsonify([h.to_dict() for h in container.holiday_service.list_holidays(year)])

    @app.route("/api/holidays/import/<year>", methods=["POST"], endpoint="api_import_holidays")
    def import_holidays(year: str):
        return jsonify(container.holiday_service.import_year(year))
