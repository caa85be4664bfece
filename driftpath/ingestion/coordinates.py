"""Mini README: Operator coordinate ingestion.

Structure:
    * parse_coordinate_text - extract ``lat, lng`` pairs from free text.
    * load_coordinates_json - read an uploaded JSON array of coordinates.
    * load_coordinates_file - pick the right reader from a file suffix
      (``.json`` array, ``.geojson`` line, anything else as text).
    * format_coordinate_text - render vertices back into the text format.

Operators either type pairs such as ``25.2630, 82.9922`` one per line or
upload a JSON array of ``[lat, lng]`` lists / ``{"lat", "lng"}`` objects.
All readers raise ``ValueError`` with a message suitable for display.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Iterable, List, Optional

from ..geometry import Coordinate
from ..logging_utils import get_logger
from ..utils.geojson import coordinates_from_geojson

LOGGER = get_logger(__name__)

PAIR_PATTERN = re.compile(r"(-?\d+\.?\d*)\s*,\s*(-?\d+\.?\d*)")


def parse_coordinate_text(raw_text: str) -> List[Coordinate]:
    """Return every ``lat, lng`` pair found in ``raw_text`` in order."""

    points = [
        Coordinate(lat=float(match.group(1)), lng=float(match.group(2)))
        for match in PAIR_PATTERN.finditer(raw_text)
    ]
    if not points:
        raise ValueError("No valid 'lat, lng' pairs found. Please use the format: 25.1, 82.1")
    LOGGER.debug("Parsed %s coordinate pairs from text input", len(points))
    return points


def _coerce_item(item: Any) -> Optional[Coordinate]:
    if isinstance(item, (list, tuple)) and len(item) >= 2:
        lat, lng = item[0], item[1]
    elif isinstance(item, dict) and "lat" in item and "lng" in item:
        lat, lng = item["lat"], item["lng"]
    else:
        return None
    # bool is an int subclass; reject it explicitly.
    if isinstance(lat, bool) or isinstance(lng, bool):
        return None
    if not isinstance(lat, (int, float)) or not isinstance(lng, (int, float)):
        return None
    return Coordinate(lat=float(lat), lng=float(lng))


def load_coordinates_json(payload: str) -> List[Coordinate]:
    """Parse a JSON array of coordinates, skipping entries that are not coordinates."""

    try:
        data = json.loads(payload)
    except json.JSONDecodeError as error:
        raise ValueError("Failed to parse JSON file. Make sure it is valid JSON.") from error

    if not isinstance(data, list):
        raise ValueError("Invalid JSON format. Expected an array of coordinates.")

    points: List[Coordinate] = []
    for index, item in enumerate(data):
        coordinate = _coerce_item(item)
        if coordinate is None:
            LOGGER.warning("Skipping JSON item %s: not a coordinate (%r)", index, item)
            continue
        points.append(coordinate)

    if not points:
        raise ValueError("JSON file is an array, but items are not valid coordinates.")
    LOGGER.info("Loaded %s coordinates from JSON (%s items)", len(points), len(data))
    return points


def load_coordinates_file(path: Path) -> List[Coordinate]:
    """Read vertices from ``path``, choosing the parser from its suffix."""

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as error:
        raise ValueError(f"Failed to read the file {path}") from error
    suffix = path.suffix.lower()
    if suffix == ".json":
        return load_coordinates_json(content)
    if suffix == ".geojson":
        return coordinates_from_geojson(content)
    return parse_coordinate_text(content)


def format_coordinate_text(points: Iterable[Coordinate]) -> str:
    """Render coordinates as newline separated ``lat, lng`` pairs."""

    return "\n".join(f"{point.lat}, {point.lng}" for point in points)
