"""Mini README: Tests for waypoint export and GeoJSON overlays."""

from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from driftpath.export import DEFAULT_WAYPOINT_FILENAME, WaypointExporter, load_waypoints
from driftpath.geometry import Coordinate
from driftpath.route_planning import PathGenerator
from driftpath.utils.geojson import coordinates_from_geojson, paths_to_geojson

VERTICES = [Coordinate(25.2630, 82.9922), Coordinate(25.3176, 82.9739)]


def _path():
    generator = PathGenerator(clock=lambda: datetime(2024, 1, 1, tzinfo=timezone.utc))
    return generator.generate(VERTICES)


def test_export_writes_waypoint_array(tmp_path) -> None:
    path = _path()
    exporter = WaypointExporter(output_directory=tmp_path / "out")

    destination = exporter.export(path.waypoints)

    assert destination == tmp_path / "out" / DEFAULT_WAYPOINT_FILENAME
    records = json.loads(destination.read_text(encoding="utf-8"))
    assert len(records) == len(path.waypoints)
    assert records[0]["elapsedTimeHours"] == 0.0
    assert records[-1]["type"] == "initial"
    assert load_waypoints(destination) == list(path.waypoints)


def test_export_rejects_empty_trajectory(tmp_path) -> None:
    with pytest.raises(ValueError):
        WaypointExporter(output_directory=tmp_path).export([])


def test_overlay_uses_lng_lat_order(tmp_path) -> None:
    path = _path()
    destination = WaypointExporter(output_directory=tmp_path).export_overlay(
        path.ideal_coords, path.waypoints
    )

    overlay = json.loads(destination.read_text(encoding="utf-8"))
    ideal, realistic = overlay["features"]
    assert ideal["properties"]["role"] == "ideal"
    assert realistic["properties"]["point_count"] == len(path.waypoints)
    assert ideal["geometry"]["coordinates"][0] == [82.9922, 25.2630]


def test_geojson_line_round_trips_to_vertices() -> None:
    collection = paths_to_geojson(VERTICES, VERTICES)
    feature = collection["features"][0]

    assert coordinates_from_geojson(feature) == VERTICES
    assert coordinates_from_geojson(json.dumps(feature["geometry"])) == VERTICES


@pytest.mark.parametrize(
    "payload",
    [
        "{broken",
        json.dumps({"type": "Polygon", "coordinates": [[[0, 0], [1, 1]]]}),
        json.dumps({"type": "LineString", "coordinates": []}),
        json.dumps({"type": "MultiPoint", "coordinates": [[1]]}),
    ],
)
def test_geojson_rejects_unsupported_payloads(payload: str) -> None:
    with pytest.raises(ValueError):
        coordinates_from_geojson(payload)


def test_geojson_feature_with_non_object_geometry_is_rejected() -> None:
    with pytest.raises(ValueError, match="geometry must be an object"):
        coordinates_from_geojson({"type": "Feature", "geometry": [1]})
