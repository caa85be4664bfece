"""Mini README: Route planning subsystem for drift-aware mission simulation.

Exports the path generator and the records it produces. Callers either use
``generate_path`` with the reference constants or build a ``PathGenerator``
from settings to tune speed and spacing.
"""

from ..geometry import Coordinate
from .models import GeneratedPath, Waypoint, WaypointType, WindConfiguration
from .planner import DRONE_SPEED_KMPH, INTERPOLATION_SPACING_KM, PathGenerator, generate_path

__all__ = [
    "Coordinate",
    "DRONE_SPEED_KMPH",
    "GeneratedPath",
    "INTERPOLATION_SPACING_KM",
    "PathGenerator",
    "Waypoint",
    "WaypointType",
    "WindConfiguration",
    "generate_path",
]
