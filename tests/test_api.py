"""
Tests for the REST API.
"""

import pytest
from fastapi.testclient import TestClient

from business_calendar.api import app


@pytest.fixture
def client():
    return TestClient(app)


class TestClassifyEndpoint:
    """Tests for GET /classify/{day}."""

    def test_holiday(self, client):
        response = client.get("/classify/2024-11-28")

        assert response.status_code == 200
        assert response.json() == {
            "date": "2024-11-28",
            "kind": "holiday",
            "holiday_name": "Thanksgiving",
            "mode": "gregorian",
        }

    def test_legacy_mode(self, client):
        response = client.get("/classify/2024-11-28", params={"mode": "legacy"})

        assert response.status_code == 200
        assert response.json()["kind"] == "business_day"
        assert response.json()["mode"] == "legacy"

    def test_weekend(self, client):
        assert client.get("/classify/2024-04-13").json()["kind"] == "weekend"

    def test_invalid_date(self, client):
        assert client.get("/classify/2024-02-30").status_code == 422


class TestHolidaysEndpoints:
    """Tests for the holiday listing endpoints."""

    def test_holidays_for_year(self, client):
        response = client.get("/holidays/2024")

        assert response.status_code == 200
        holidays = response.json()
        assert len(holidays) == 10
        assert holidays[-1] == {
            "date": "2024-12-25",
            "name": "Christmas",
            "weekday": "Wednesday",
            "rule": "fixed_month_day",
        }

    def test_year_out_of_range(self, client):
        assert client.get("/holidays/0").status_code == 400

    def test_holidays_in_range(self, client):
        response = client.get("/holidays", params={"start": "2024-12-20", "end": "2025-01-05"})

        assert response.status_code == 200
        assert [h["date"] for h in response.json()] == ["2024-12-25", "2025-01-01"]

    def test_range_end_before_start(self, client):
        response = client.get("/holidays", params={"start": "2025-01-05", "end": "2024-12-20"})

        assert response.status_code == 400


class TestBusinessDaysEndpoint:
    """Tests for POST /business-days."""

    def test_count(self, client):
        response = client.post(
            "/business-days", json={"start_date": "2024-12-20", "end_date": "2025-01-05"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["calendar_days"] == 17
        assert data["business_days"] == 9
        assert data["saturdays"] == 3
        assert data["sundays"] == 3

    def test_end_before_start(self, client):
        response = client.post(
            "/business-days", json={"start_date": "2025-01-05", "end_date": "2024-12-20"}
        )

        assert response.status_code == 400


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
