from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..common.datetime_utils import month_bounds
from ..common.validators import require_date
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/time-records", methods=["GET"], endpoint="api_list_time_records")
    def list_time_records():
        args = request.args
        if args.get("date"):
            start = end = require_date(args["date"])
        elif args.get("start_date") or args.get("end_date"):
            start = require_date(args.get("start_date"), "start_date")
            end = require_date(args.get("end_date"), "end_date")
        else:
            today = date.today()
            start, end = month_bounds(today.year, today.month - 1)

        records = container.time_record_service.list_records(
            start=start,
            end=end,
            department=args.get("department") or None,
            employee_id=args.get("employee_id") or None,
        )
        return jsonify([r.to_dict() for r in records])

    @app.route("/api/time-records", methods=["POST"], endpoint="api_save_time_record")
    def save_time_record():
        data = request.get_json(silent=True) or {}
        record = container.time_record_service.save_record(data)
        return jsonify({"success": True, "record": record.to_dict()})

    @app.route("/api/apply-shift-preset", methods=["POST"], endpoint="api_apply_shift_preset")
    def apply_shift_preset():
        data = request.get_json(silent=True) or {}
        result = container.time_record_service.apply_shift_preset(
            employee_ids=data.get("employeeIds") or data.get("employee_ids") or [],
            work_date=data.get("date"),
            shift_type=data.get("shiftType") or data.get("shift_type") or "",
        )
        return jsonify(result.to_dict())

    @app.route("/api/calculate-worked-hours", methods=["POST"], endpoint="api_calculate_worked_hours")
    def calculate_worked_hours():
        data = request.get_json(silent=True) or {}
        result = container.time_record_service.calculate(
            data.get("start_time"), data.get("end_time"), data.get("shift_type")
        )
        return jsonify(result.to_dict())
