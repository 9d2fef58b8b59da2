"""Integration tests for the REST API.

These tests verify:
- Camel case request and response bodies
- Occupancy grid wire format
- Infeasible pieces map to HTTP 400, malformed bodies to 422
- The versioned and unversioned routes behave the same
- CORS and health endpoints
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from cutstock.infrastructure.colors import color_for_key
from cutstock.web import create_app


@pytest.fixture
def client() -> TestClient:
    """Create a test client for a fresh application."""
    return TestClient(create_app())


def _request(**overrides) -> dict:
    body = {
        "sheetLength": 4,
        "sheetWidth": 4,
        "pieces": [{"length": 2, "width": 2, "quantity": 4}],
    }
    body.update(overrides)
    return body


class TestOptimizeEndpoint:
    """Tests for POST /optimize."""

    def test_four_squares(self, client: TestClient) -> None:
        response = client.post("/optimize", json=_request())

        assert response.status_code == 200
        data = response.json()
        assert data["waste"] == 0
        assert data["sheetCount"] == 1
        assert len(data["placements"]) == 1
        color = color_for_key("2x2")
        assert data["placements"][0] == [[color] * 4] * 4

    def test_free_cells_are_false(self, client: TestClient) -> None:
        response = client.post(
            "/optimize",
            json=_request(pieces=[{"length": 1, "width": 1, "quantity": 1}]),
        )

        grid = response.json()["placements"][0]
        assert grid[0][0] == color_for_key("1x1")
        assert grid[0][1] is False
        assert grid[3] == [False] * 4

    def test_grid_dimensions_follow_sheet(self, client: TestClient) -> None:
        response = client.post(
            "/optimize",
            json=_request(sheetLength=3, sheetWidth=5, pieces=[]),
        )

        grid = response.json()["placements"][0]
        assert len(grid) == 3
        assert all(len(row) == 5 for row in grid)
        assert response.json()["waste"] == 15

    def test_capacity_exhaustion(self, client: TestClient) -> None:
        response = client.post(
            "/optimize",
            json={
                "sheetLength": 10,
                "sheetWidth": 10,
                "sheetQuantity": 1,
                "pieces": [{"length": 10, "width": 10, "quantity": 2}],
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["waste"] == 100
        assert data["sheetCount"] == 1
        assert data["unplacedCount"] == 1
        assert data["unplacedArea"] == 100

    def test_rotation_can_be_disabled(self, client: TestClient) -> None:
        body = _request(
            sheetLength=2,
            sheetWidth=5,
            pieces=[{"length": 5, "width": 2, "quantity": 1}],
        )
        assert client.post("/optimize", json=body).status_code == 200

        body["allowRotation"] = False
        assert client.post("/optimize", json=body).status_code == 400

    def test_snake_case_accepted(self, client: TestClient) -> None:
        response = client.post(
            "/optimize",
            json={"sheet_length": 4, "sheet_width": 4, "pieces": []},
        )
        assert response.status_code == 200

    def test_versioned_route(self, client: TestClient) -> None:
        response = client.post("/api/v1/optimize", json=_request())
        assert response.status_code == 200
        assert response.json()["waste"] == 0

    def test_deterministic(self, client: TestClient) -> None:
        body = _request(
            sheetLength=6,
            pieces=[
                {"length": 3, "width": 2, "quantity": 3},
                {"length": 1, "width": 1, "quantity": 5},
            ],
        )
        first = client.post("/optimize", json=body).json()
        second = client.post("/optimize", json=body).json()
        assert first == second


class TestOptimizeErrors:
    """Tests for error responses."""

    def test_infeasible_piece(self, client: TestClient) -> None:
        response = client.post(
            "/optimize",
            json={
                "sheetLength": 3,
                "sheetWidth": 3,
                "pieces": [{"length": 4, "width": 1, "quantity": 1}],
            },
        )

        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "Piece 4x1 is larger than the sheet dimensions 3x3."
        assert data["error_type"] == "invalid_piece_dimensions"
        assert data["details"]["piece"] == {"length": 4, "width": 1}
        assert data["details"]["sheet"] == {"length": 3, "width": 3}

    def test_missing_field(self, client: TestClient) -> None:
        response = client.post("/optimize", json={"sheetLength": 4, "pieces": []})
        assert response.status_code == 422

    def test_non_positive_dimension(self, client: TestClient) -> None:
        response = client.post(
            "/optimize",
            json=_request(pieces=[{"length": 0, "width": 2, "quantity": 1}]),
        )
        assert response.status_code == 422

    def test_zero_sheet_quantity(self, client: TestClient) -> None:
        response = client.post("/optimize", json=_request(sheetQuantity=0))
        assert response.status_code == 422


class TestDiagramEndpoint:
    """Tests for POST /optimize/svg."""

    def test_svg_per_sheet(self, client: TestClient) -> None:
        response = client.post(
            "/optimize/svg",
            json={
                "sheetLength": 2,
                "sheetWidth": 2,
                "pieces": [{"length": 2, "width": 2, "quantity": 2}],
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert len(data["sheets"]) == 2
        assert data["sheets"][0].startswith("<svg")
        assert "Total Sheets: 2" in data["summary"]


class TestAppEndpoints:
    """Tests for health and middleware."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_cors_preflight(self, client: TestClient) -> None:
        response = client.options(
            "/optimize",
            headers={
                "Origin": "http://example.com",
                "Access-Control-Request-Method": "POST",
            },
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
