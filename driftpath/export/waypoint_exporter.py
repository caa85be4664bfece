"""Mini README: Persist generated trajectories for downstream consumers.

Structure:
    * WaypointExporter - writes waypoint arrays and map overlays to disk.

The waypoint file is the literal array of waypoint records (camelCase field
names) so map overlays and summary displays can reload it unchanged.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, Sequence

from ..configuration import get_settings
from ..geometry import Coordinate
from ..logging_utils import get_logger
from ..route_planning import Waypoint
from ..utils.geojson import paths_to_geojson

LOGGER = get_logger(__name__)

DEFAULT_WAYPOINT_FILENAME = "drone_waypoints.json"


class WaypointExporter:
    """Serialise trajectories as JSON files."""

    def __init__(self, output_directory: Optional[Path] = None) -> None:
        self.output_directory = output_directory or get_settings().export_directory

    def export(self, waypoints: Sequence[Waypoint], destination: Optional[Path] = None) -> Path:
        """Write ``waypoints`` as an indented JSON array and return the file path."""

        if not waypoints:
            raise ValueError("No waypoint data to export. Generate a path first.")
        destination = destination or self.output_directory / DEFAULT_WAYPOINT_FILENAME
        LOGGER.info("Exporting %s waypoints to %s", len(waypoints), destination)
        destination.parent.mkdir(parents=True, exist_ok=True)
        with destination.open("w", encoding="utf-8") as export_file:
            json.dump([waypoint.as_dict() for waypoint in waypoints], export_file, indent=2)
        return destination

    def export_overlay(
        self,
        ideal_coords: Sequence[Coordinate],
        waypoints: Sequence[Waypoint],
        destination: Optional[Path] = None,
    ) -> Path:
        """Write the ideal and realistic lines as a GeoJSON FeatureCollection."""

        destination = destination or self.output_directory / "drone_paths.geojson"
        LOGGER.info("Exporting path overlay to %s", destination)
        destination.parent.mkdir(parents=True, exist_ok=True)
        with destination.open("w", encoding="utf-8") as overlay_file:
            json.dump(paths_to_geojson(ideal_coords, waypoints), overlay_file, indent=2)
        return destination


def load_waypoints(path: Path) -> list[Waypoint]:
    """Reload an exported waypoint file."""

    try:
        records = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as error:
        raise ValueError(f"Waypoint file {path} is invalid JSON") from error
    if not isinstance(records, list):
        raise ValueError("Waypoint file must contain a JSON array")
    return [Waypoint.from_dict(record) for record in records]
