import io
from datetime import date

import pytest
from openpyxl import load_workbook

from src.pontaj.pontaj.core.exceptions import ExternalServiceError
from src.pontaj.pontaj.main import create_app


@pytest.fixture
def client(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container)
    return app.test_client()


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json()["status"] == "OK"


def test_reference_data(client):
    codes = [d["code"] for d in client.get("/api/departments").get_json()]
    assert "FA" in codes and "TE" in codes
    presets = {p["id"]: p for p in client.get("/api/shift-presets").get_json()}
    assert presets["SCHIMB_I"]["start_time"] == "07:00"


def test_employee_crud(client):
    resp = client.post("/api/employees", json={"id": "ma4", "name": "stan elena"})
    assert resp.status_code == 201
    assert resp.get_json()["employee"]["id"] == "MA4"

    assert client.post("/api/employees", json={"id": "MA4", "name": "dublura"}).status_code == 409
    assert client.post("/api/employees", json={"id": "4MA", "name": "x"}).status_code == 400

    resp = client.put("/api/employees/MA4", json={"position": "Magaziner"})
    assert resp.get_json()["employee"]["position"] == "Magaziner"

    resp = client.delete("/api/employees/MA4")
    assert resp.get_json()["type"] == "hard_delete"
    assert client.delete("/api/employees/MA4").status_code == 404


def test_employee_import_upload(client):
    data = {"file": (io.BytesIO(b"ID,Nume\nPC2,paznic nou\n"), "angajati.csv")}
    resp = client.post("/api/employees/import", data=data, content_type="multipart/form-data")
    assert resp.status_code == 200
    assert resp.get_json()["imported"] == 1


def test_time_records_roundtrip(client):
    resp = client.post(
        "/api/time-records",
        json={"employee_id": "FA1", "date": "2024-03-04", "start_time": "07:00", "end_time": "15:30"},
    )
    assert resp.status_code == 200
    assert resp.get_json()["record"]["worked_hours"] == 8.0

    listed = client.get("/api/time-records?start_date=2024-03-01&end_date=2024-03-31").get_json()
    assert [(r["employee_id"], r["date"]) for r in listed] == [("FA1", "2024-03-04")]

    assert client.get("/api/time-records?date=04-03-2024").status_code == 400


def test_apply_shift_preset(client):
    resp = client.post(
        "/api/apply-shift-preset",
        json={"employeeIds": ["FA1", "FA2"], "date": "2024-03-04", "shiftType": "TURA"},
    )
    body = resp.get_json()
    assert resp.status_code == 200
    assert body["applied"] == 2
    assert body["details"]["workedHours"] == 11.0

    bad = client.post("/api/apply-shift-preset", json={"employeeIds": ["FA1"], "date": "2024-03-04", "shiftType": "X"})
    assert bad.status_code == 400


def test_calculate_worked_hours(client):
    body = client.post("/api/calculate-worked-hours", json={"start_time": "22:00", "end_time": "06:00"}).get_json()
    assert body == {"worked_hours": 7.5, "break_minutes": 30, "total_interval": 8.0}


def test_collective_report_json(client):
    client.post("/api/time-records", json={"employee_id": "TE1", "date": "2024-03-04", "status": "sick"})
    body = client.get("/api/reports/collective?year=2024&month=2").get_json()
    assert body["title"].endswith("LA 31.03.2024")
    assert len(body["columns"]) == 31
    te1 = next(e for e in body["employees"] if e["id"] == "TE1")
    assert te1["summary"]["sick_days"] == 1


@pytest.mark.parametrize("query", ["year=2024&month=12", "year=abc&month=1", "year=2024&month=1&department=ZZ"])
def test_collective_report_rejects_bad_requests(client, query):
    assert client.get(f"/api/reports/collective?{query}").status_code == 400


def test_collective_report_download(client):
    resp = client.get("/api/reports/collective.xlsx?year=2024&month=2&department=FA")
    assert resp.status_code == 200
    assert "Pontaj MARTIE 2024.xlsx" in resp.headers["Content-Disposition"]
    ws = load_workbook(io.BytesIO(resp.data)).active
    assert ws.title == "Foaie de Pontaj"
    assert ws["A3"].value == "IONESCU MARIA"


def test_holiday_routes(client, holiday_client):
    holiday_client._holidays = []
    assert client.post("/api/holidays/import/2024").get_json()["imported"] == 0
    assert client.get("/api/holidays/24").status_code == 400
    assert client.get("/api/holidays/2024").get_json() == []


def test_holiday_service_outage_maps_to_503(client, holiday_client):
    holiday_client._error = ExternalServiceError("offline")
    assert client.post("/api/holidays/import/2024").status_code == 503


def test_unknown_route_is_404(client):
    assert client.get("/api/nu-exista").status_code == 404
