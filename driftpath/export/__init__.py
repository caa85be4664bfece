"""Mini README: Export utilities for Driftpath trajectories.

Exposes the waypoint exporter that writes mission files and GeoJSON
overlays, plus the matching loader for previously exported files.
"""

from .waypoint_exporter import DEFAULT_WAYPOINT_FILENAME, WaypointExporter, load_waypoints

__all__ = ["DEFAULT_WAYPOINT_FILENAME", "WaypointExporter", "load_waypoints"]
