from __future__ import annotations

import io

from flask import Flask, jsonify, request

from ..common.validators import require_date
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="api_list_employees")
    def list_employees():
        as_of = request.args.get("as_of")
        employees = container.employee_service.list_employees(
            department=request.args.get("department") or None,
            include_inactive=request.args.get("include_inactive") in ("1", "true", "True"),
            as_of=require_date(as_of, "as_of") if as_of else None,
            search=request.args.get("search") or None,
        )
        return jsonify([e.to_dict() for e in employees])

    @app.route("/api/employees", methods=["POST"], endpoint="api_add_employee")
    def add_employee():
        data = request.get_json(silent=True) or {}
        employee = container.employee_service.add_employee(data)
        return jsonify({"success": True, "employee": employee.to_dict()}), 201

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="api_update_employee")
    def update_employee(employee_id: str):
        data = request.get_json(silent=True) or {}
        employee = container.employee_service.update_employee(employee_id, data)
        return jsonify({"success": True, "employee": employee.to_dict()})

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="api_delete_employee")
    def delete_employee(employee_id: str):
        result = container.employee_service.delete_employee(employee_id)
        return jsonify({"success": True, **result.to_dict()})

    @app.route("/api/employees/import", methods=["POST"], endpoint="api_import_employees")
    def import_employees():
        upload = request.files.get("file")
        if upload is not None:
            source = io.BytesIO(upload.read())
        elif request.data:
            source = io.BytesIO(request.data)
        else:
            raise ValidationError("Lipsește fișierul CSV")
        result = container.employee_service.import_csv(source)
        return jsonify(result.to_dict())
