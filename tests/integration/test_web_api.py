"""Integration tests for the REST API."""

import pytest
from fastapi.testclient import TestClient

from trimplan.web import create_app

pytestmark = pytest.mark.integration


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestOptimizeEndpoint:
    """Tests for POST /api/v1/optimize."""

    def test_plan(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/optimize",
            json={
                "config": {
                    "measurements": [
                        {"id": "N", "size": 60, "room": "Den"},
                        {"id": "S", "size": 60},
                        {"id": "E", "size": 80},
                        {"id": "W", "size": 80},
                    ]
                }
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["summary"]["total_boards"] == 2
        assert data["summary"]["board_counts"] == {"144": 2}
        assert data["summary"]["total_waste"] == pytest.approx(7.75)
        assert [board["name"] for board in data["boards"]] == ["A", "B"]
        first_cuts = data["boards"][0]["cuts"]
        assert [cut["offset"] for cut in first_cuts] == [0, 80.125]
        assert data["warnings"] == []

    def test_no_lengths(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/optimize",
            json={"config": {"measurements": [{"size": 50}], "available_lengths": []}},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["boards"] == []
        assert data["warnings"][0]["code"] == "no_stock_lengths"

    def test_room_focus(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/optimize",
            json={
                "config": {
                    "measurements": [
                        {"size": 90, "room": "Kitchen"},
                        {"size": 90, "room": "Hallway"},
                    ],
                    "available_lengths": [96],
                    "output": {"room": "Hallway"},
                }
            },
        )

        data = response.json()
        assert data["room"] == "Hallway"
        assert data["summary"]["total_boards"] == 1
        assert data["boards"][0]["name"] == "B"

    def test_invalid_config(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/optimize",
            json={"config": {"measurements": [{"size": "ten"}]}},
        )

        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "length_parse"
        assert data["details"][0]["path"] == "measurements[0].size"

    def test_strict_unplaceable(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/optimize",
            json={
                "config": {
                    "measurements": [
                        {"id": "long", "size": 359.88, "split": "balanced"}
                    ],
                    "available_lengths": [120],
                    "snap_to_sixteenth": False,
                },
                "strict": True,
            },
        )

        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "unplaceable_piece"
        assert data["details"]["measurement_id"] == "long"


class TestValidateEndpoint:
    """Tests for POST /api/v1/validate."""

    def test_valid(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate", json={"config": {"measurements": [{"size": 50}]}}
        )

        assert response.status_code == 200
        assert response.json() == {"is_valid": True, "errors": [], "warnings": []}

    def test_errors_and_warnings(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate",
            json={
                "config": {
                    "measurements": [{"id": "A", "size": 50}, {"id": "A", "size": 0}],
                }
            },
        )

        data = response.json()
        assert data["is_valid"] is False
        assert data["errors"][0]["path"] == "measurements[1].id"
        assert data["warnings"][0]["path"] == "measurements[1].size"

    def test_schema_error(self, client: TestClient) -> None:
        response = client.post("/api/v1/validate", json={"config": {"version": "9"}})

        assert response.status_code == 422
        assert response.json()["error_type"] == "validation"
