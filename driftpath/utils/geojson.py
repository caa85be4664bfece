"""Mini README: GeoJSON helper utilities for Driftpath.

This module converts trajectories into GeoJSON overlays and reads vertices
back out of LineString or MultiPoint payloads. Keeping the logic isolated
avoids importing web framework dependencies when running unit tests or
reusing the helper in other modules. GeoJSON positions are ``[lng, lat]``.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Sequence, Union

from ..geometry import Coordinate


def _line_feature(points: Sequence[Coordinate], role: str) -> Dict[str, Any]:
    return {
        "type": "Feature",
        "geometry": {
            "type": "LineString",
            "coordinates": [[point.lng, point.lat] for point in points],
        },
        "properties": {"role": role, "point_count": len(points)},
    }


def paths_to_geojson(
    ideal_coords: Sequence[Coordinate],
    realistic_points: Sequence[Coordinate],
) -> Dict[str, Any]:
    """Return a FeatureCollection holding the ideal and realistic lines."""

    return {
        "type": "FeatureCollection",
        "features": [
            _line_feature(ideal_coords, "ideal"),
            _line_feature(realistic_points, "realistic"),
        ],
    }


def coordinates_from_geojson(payload: Union[str, Dict[str, Any]]) -> List[Coordinate]:
    """Validate a LineString/MultiPoint GeoJSON payload and return its vertices."""

    if isinstance(payload, str):
        try:
            geojson = json.loads(payload)
        except json.JSONDecodeError as error:
            raise ValueError("GeoJSON payload is invalid JSON") from error
    else:
        geojson = payload

    if not isinstance(geojson, dict):
        raise ValueError("GeoJSON payload must be an object")

    if geojson.get("type") == "Feature":
        geometry = geojson.get("geometry") or {}
    else:
        geometry = geojson

    if not isinstance(geometry, dict):
        raise ValueError("GeoJSON geometry must be an object")

    if geometry.get("type") not in {"LineString", "MultiPoint"}:
        raise ValueError("Only LineString or MultiPoint GeoJSON payloads are supported")

    coordinates = geometry.get("coordinates")
    if not coordinates:
        raise ValueError("GeoJSON coordinates are required")

    try:
        return [Coordinate(lat=float(position[1]), lng=float(position[0])) for position in coordinates]
    except (TypeError, ValueError, IndexError) as error:
        raise ValueError("GeoJSON positions must be [lng, lat] pairs") from error
