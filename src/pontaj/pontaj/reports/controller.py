from __future__ import annotations

import io
from datetime import date

from flask import Flask, jsonify, request, send_file

from ..core.exceptions import ValidationError
from ..container import Container
from .layout import default_report_filename
from .xlsx_renderer import render, to_bytes

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    def _period_from_args() -> tuple[int, int]:
        today = date.today()
        try:
            year = int(request.args.get("year", today.year))
            # zero-based, January = 0
            month = int(request.args.get("month", today.month - 1))
        except ValueError as exc:
            raise ValidationError("Anul și luna trebuie să fie numere întregi") from exc
        return year, month

    def _grid():
        year, month = _period_from_args()
        return container.report_service.generate_collective_report(
            year, month, request.args.get("department") or None
        )

    @app.route("/api/reports/collective", methods=["GET"], endpoint="api_collective_report")
    def collective_report():
        return jsonify(_grid().to_dict())

    @app.route("/api/reports/collective.xlsx", methods=["GET"], endpoint="api_collective_report_xlsx")
    def collective_report_xlsx():
        grid = _grid()
        buf = io.BytesIO(to_bytes(render(grid)))
        return send_file(
            buf,
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name=default_report_filename(grid),
        )
