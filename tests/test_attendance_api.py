import pytest
from fastapi import Depends
from sqlalchemy.orm import Session
from app.api.deps import get_attendance_service
from app.core.database import get_db
from app.repositories.sql import SqlAttendanceRepository
from app.services.attendance_service import AttendanceService
from main import app


@pytest.fixture
def pinned_clock(clock):
    """Route the attendance endpoints through the test clock."""
    def override(db: Session = Depends(get_db)):
        return AttendanceService(SqlAttendanceRepository(db), clock=clock)

    app.dependency_overrides[get_attendance_service] = override
    yield clock
    app.dependency_overrides.pop(get_attendance_service, None)


def test_check_in(client, register_user):
    user = register_user()
    response = client.post("/api/check/in", headers=user["headers"])
    assert response.status_code == 200
    data = response.json()
    assert data["user_id"] == user["user_id"]
    assert data["id"]
    assert data["check_in"]
    assert data["check_out"] is None
    assert data["worked_hours"] is None


def test_check_in_twice(client, auth_headers):
    assert client.post("/api/check/in", headers=auth_headers).status_code == 200
    response = client.post("/api/check/in", headers=auth_headers)
    assert response.status_code == 400
    assert response.json() == {"message": "Already checked in today"}


def test_check_out_without_check_in(client, auth_headers):
    response = client.post("/api/check/out", headers=auth_headers)
    assert response.status_code == 404
    assert response.json() == {"message": "No check-in found"}


def test_check_out(client, auth_headers):
    client.post("/api/check/in", headers=auth_headers)
    response = client.post("/api/check/out", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["check_out"] is not None
    assert data["worked_hours"] is not None


def test_worked_hours_with_pinned_clock(client, auth_headers, pinned_clock):
    check_in = client.post("/api/check/in", headers=auth_headers).json()
    assert check_in["day"] == "2025-03-10"

    pinned_clock.advance(milliseconds=5_400_000)
    data = client.post("/api/check/out", headers=auth_headers).json()
    assert data["worked_hours"] == 1.5
    assert data["check_in"].startswith("2025-03-10T09:00:00")
    assert data["check_out"].startswith("2025-03-10T10:30:00")


def test_second_check_out_recomputes(client, auth_headers, pinned_clock):
    client.post("/api/check/in", headers=auth_headers)
    pinned_clock.advance(hours=2)
    assert client.post("/api/check/out", headers=auth_headers).json()["worked_hours"] == 2.0
    pinned_clock.advance(hours=1)
    assert client.post("/api/check/out", headers=auth_headers).json()["worked_hours"] == 3.0


def test_users_have_separate_ledgers(client, register_user):
    alice = register_user(name="Alice", email="alice@example.com")
    bob = register_user(name="Bob", email="bob@example.com")

    client.post("/api/check/in", headers=alice["headers"])
    assert client.post("/api/check/out", headers=bob["headers"]).status_code == 404
    assert client.post("/api/check/in", headers=bob["headers"]).status_code == 200


def test_today(client, auth_headers):
    response = client.get("/api/check/today", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() is None

    client.post("/api/check/in", headers=auth_headers)
    assert client.get("/api/check/today", headers=auth_headers).json()["check_out"] is None


def test_history_and_stats(client, auth_headers, pinned_clock):
    for _ in range(2):
        client.post("/api/check/in", headers=auth_headers)
        pinned_clock.advance(hours=8)
        client.post("/api/check/out", headers=auth_headers)
        pinned_clock.advance(hours=16)

    history = client.get("/api/check/history", headers=auth_headers).json()
    assert [r["day"] for r in history] == ["2025-03-11", "2025-03-10"]

    stats = client.get("/api/check/stats", headers=auth_headers).json()
    assert stats == {
        "total_days": 2,
        "total_hours": 16.0,
        "average_hours_per_day": 8.0,
        "current_month_days": 2,
        "current_month_hours": 16.0,
    }


def test_history_rejects_bad_paging(client, auth_headers):
    response = client.get("/api/check/history?limit=0", headers=auth_headers)
    assert response.status_code == 400
