"""Mini README: Core package initializer for Driftpath.

Driftpath simulates a drone flying between operator waypoints, contrasting
the ideal straight-segment route with the route actually flown once wind
drift and battery limits are applied. The most frequently used entry points
are re-exported here so callers can simply ``import driftpath``.
"""

from .logging_utils import get_logger
from .mission import MissionSummary, calculate_mission_summary
from .route_planning import Coordinate, GeneratedPath, PathGenerator, Waypoint, generate_path

__version__ = "0.1.0"

__all__ = [
    "Coordinate",
    "GeneratedPath",
    "MissionSummary",
    "PathGenerator",
    "Waypoint",
    "calculate_mission_summary",
    "generate_path",
    "get_logger",
]
