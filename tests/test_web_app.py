"""Mini README: Tests for the FastAPI service.

Exercises each route through ``TestClient`` so request validation and
error mapping (400 for engine errors, 422 for schema errors) stay stable.
"""

from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from driftpath.interface import create_application

VARANASI_LOOP = [
    {"lat": 25.2630, "lng": 82.9922},
    {"lat": 25.3176, "lng": 82.9739},
    {"lat": 25.2847, "lng": 83.0066},
    {"lat": 25.2630, "lng": 82.9922},
]


@pytest.fixture()
def client() -> TestClient:
    return TestClient(create_application())


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_generate_path_returns_trajectory_and_summary(client: TestClient) -> None:
    response = client.post("/generate-path", json={"vertices": VARANASI_LOOP})

    assert response.status_code == 200
    body = response.json()
    assert body["batteryDepleted"] is False
    assert body["finalWaypointIndex"] == len(body["waypoints"]) - 1
    assert body["waypoints"][0]["id"] == 0
    assert body["summary"]["totalIdealDistance"] > 0
    assert len(body["flightTime"].split(":")) == 3


def test_generate_path_reports_battery_depletion(client: TestClient) -> None:
    response = client.post(
        "/generate-path",
        json={
            "vertices": [{"lat": 0, "lng": 0}, {"lat": 0, "lng": 10}],
            "max_flight_time_minutes": 1,
        },
    )
    assert response.status_code == 200
    assert response.json()["batteryDepleted"] is True


def test_generate_path_rejects_single_vertex(client: TestClient) -> None:
    response = client.post("/generate-path", json={"vertices": VARANASI_LOOP[:1]})
    assert response.status_code == 400


def test_generate_path_validates_wind_range(client: TestClient) -> None:
    response = client.post(
        "/generate-path",
        json={"vertices": VARANASI_LOOP, "wind": {"use_custom_wind": True, "wind_speed": 150}},
    )
    assert response.status_code == 422


def test_compare_wind(client: TestClient) -> None:
    response = client.post(
        "/compare-wind",
        json={
            "vertices": VARANASI_LOOP,
            "wind": {"use_custom_wind": True, "wind_speed": 30, "wind_direction": 90},
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert body["playground"] is not None
    assert body["flightTimeDeltaHours"] > 0


def test_mission_summary_from_exported_waypoints(client: TestClient) -> None:
    generated = client.post("/generate-path", json={"vertices": VARANASI_LOOP}).json()
    response = client.post(
        "/mission-summary",
        json={"waypoints": generated["waypoints"], "ideal_coords": generated["idealCoords"]},
    )

    assert response.status_code == 200
    assert response.json()["totalRealisticDistance"] == pytest.approx(
        generated["summary"]["totalRealisticDistance"]
    )


def test_mission_summary_rejects_malformed_waypoints(client: TestClient) -> None:
    response = client.post("/mission-summary", json={"waypoints": [{"lat": 1.0}]})
    assert response.status_code == 400


def test_parse_coordinates_form(client: TestClient) -> None:
    response = client.post("/parse-coordinates", data={"raw_text": "1.5, 2.5\n3, 4"})
    assert response.status_code == 200
    assert response.json()["vertices"] == [{"lat": 1.5, "lng": 2.5}, {"lat": 3.0, "lng": 4.0}]

    assert client.post("/parse-coordinates", data={"raw_text": "none"}).status_code == 400


def test_upload_coordinates(client: TestClient) -> None:
    payload = json.dumps([[25.263, 82.9922], {"lat": 25.3176, "lng": 82.9739}]).encode("utf-8")
    response = client.post(
        "/upload-coordinates",
        files={"coordinates": ("route.json", payload, "application/json")},
    )
    assert response.status_code == 200
    assert len(response.json()["vertices"]) == 2


def test_generate_path_accepts_near_antipodal_vertices(client: TestClient) -> None:
    response = client.post(
        "/generate-path",
        json={
            "vertices": [{"lat": 0.08, "lng": 10}, {"lat": -0.08, "lng": -170}],
            "max_flight_time_minutes": 1,
        },
    )
    assert response.status_code == 200
    assert response.json()["batteryDepleted"] is True
