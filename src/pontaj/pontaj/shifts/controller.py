from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/departments", methods=["GET"], endpoint="api_departments")
    def departments():
        return jsonify(
            [{"code": d.code, "name": d.name, "description": d.description} for d in container.departments_repo.list_all()]
        )

    @app.route("/api/shift-presets", methods=["GET"], endpoint="api_shift_presets")
    def shift_presets():
        return jsonify([p.to_dict() for p in container.shifts_repo.list_active()])
