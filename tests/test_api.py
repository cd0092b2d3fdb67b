from __future__ import annotations

from datetime import datetime

import pytest

from src.ride_ledger.ride_ledger.container import wire
from src.ride_ledger.ride_ledger.core.enums import RideStatus
from src.ride_ledger.ride_ledger.main import create_app
from src.ride_ledger.ride_ledger.rides.model import Ride


@pytest.fixture
def client(rides_repo, passengers_repo):
    rides_repo.create(Ride("r1", "Sara", "Home", "KSU", datetime(2025, 6, 2, 7, 0), 25, RideStatus.COMPLETED, passenger_id="p-sara"))
    rides_repo.create(Ride("r2", "Ahmed", "Airport", "Hotel", datetime(2025, 6, 10, 21, 0), 40, RideStatus.COMPLETED))
    app = create_app(wire(rides_repo, passengers_repo), settings_module="config.testing")
    return app.test_client()


def test_passengers_filter_by_kind(client):
    body = client.get("/api/passengers?kind=regular").get_json()

    assert body["success"] is True
    assert [p["name"] for p in body["data"]] == ["Sara"]
    assert client.get("/api/passengers?kind=vip").status_code == 400


def test_create_passenger_validation_error_is_400(client):
    resp = client.post("/api/passengers", json={"name": "", "phone": "1"})

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_ride_lifecycle_over_http(client):
    resp = client.post("/api/rides", json={"passenger_id": "p-sara", "pickup_time": "2025-06-03T07:00:00"})
    assert resp.status_code == 201
    ride = resp.get_json()["data"]
    assert ride["pickup_location"] == "Al Olaya"
    assert ride["status"] == "scheduled"

    resp = client.post(f"/api/rides/{ride['ride_id']}/attendance", json={"attendance": "absent"})
    assert resp.get_json()["data"]["attendance"] == "absent"

    resp = client.post(f"/api/rides/{ride['ride_id']}/complete", json={"fare": 25})
    assert resp.status_code == 400

    assert client.post(f"/api/rides/{ride['ride_id']}/cancel").get_json()["data"]["status"] == "cancelled"


def test_unknown_ride_is_404(client):
    assert client.delete("/api/rides/missing").status_code == 404


def test_rides_list_filters(client):
    body = client.get("/api/rides?period=all&status=completed").get_json()
    assert {r["ride_id"] for r in body["data"]} == {"r1", "r2"}

    body = client.get("/api/rides?passenger_id=p-sara").get_json()
    assert [r["ride_id"] for r in body["data"]] == ["r1"]

    assert client.get("/api/rides?period=fortnight").status_code == 400


def test_billing_report(client):
    body = client.get("/api/billing?month=2025-06").get_json()["data"]

    assert body["label"] == "June 2025"
    assert [b["key"] for b in body["bills"]] == ["Ahmed", "p-sara"]
    assert body["summary"]["total_earnings"] == "65"


def test_bad_month_is_400(client):
    assert client.get("/api/billing?month=2025-13").status_code == 400


def test_attendance_grid(client):
    body = client.get("/api/attendance?month=2025-06").get_json()["data"]

    assert body["previous"] == "2025-05"
    assert body["next"] == "2025-07"
    assert len(body["days"]) == 30
    assert body["rows"][0]["passenger"]["name"] == "Sara"
    assert body["rows"][0]["present_count"] == 1


def test_billing_csv_download(client):
    resp = client.get("/api/billing/export.csv?month=2025-06")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "billing-2025-06.csv" in resp.headers["Content-Disposition"]
    assert "Total Earnings: SAR 65" in resp.get_data(as_text=True)


def test_bill_message(client):
    body = client.get("/api/billing/message?month=2025-06&client=p-sara").get_json()["data"]

    assert "*Sara*" in body["message"]
    assert body["share_link"].startswith("https://wa.me/966500000001?text=")

    assert client.get("/api/billing/message?month=2025-06&client=Nobody").status_code == 404
    assert client.get("/api/billing/message?month=2025-06").status_code == 400


def test_patch_with_non_text_value_is_400(client):
    for field in ("pickup_location", "passenger_name"):
        resp = client.patch("/api/rides/r1", json={field: 5})

        assert resp.status_code == 400
        assert resp.get_json()["success"] is False


def test_patch_passenger_regular_flag_from_text(client):
    resp = client.patch("/api/passengers/p-sara", json={"is_regular": "false"})

    assert resp.status_code == 200
    assert resp.get_json()["data"]["is_regular"] is False
