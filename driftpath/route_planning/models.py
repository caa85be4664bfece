"""Mini README: Data records produced by the path generator.

Structure:
    * WaypointType - ``initial`` (operator vertex) or ``interpolated``.
    * Waypoint - drift-adjusted point with environment and timing data.
    * WindConfiguration - playground wind override supplied by operators.
    * GeneratedPath - full result of one generation run.

Every record is frozen; a new trajectory is produced for each run instead
of editing an old one. ``as_dict`` emits the camelCase field names used by
exported mission files, so they must not be renamed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Tuple

from ..geometry import Coordinate


class WaypointType(str, Enum):
    """Origin of a waypoint within the trajectory."""

    INITIAL = "initial"
    INTERPOLATED = "interpolated"


@dataclass(frozen=True, slots=True)
class Waypoint(Coordinate):
    """Single trajectory point as flown by the drone."""

    id: int
    type: WaypointType
    timestamp: str
    temperature: float
    wind_speed: float
    wind_direction: float
    elapsed_time_hours: float

    def as_dict(self) -> Dict[str, Any]:
        """Export the waypoint with serialisable values."""

        return {
            "lat": self.lat,
            "lng": self.lng,
            "id": self.id,
            "type": self.type.value,
            "timestamp": self.timestamp,
            "temperature": self.temperature,
            "windSpeed": self.wind_speed,
            "windDirection": self.wind_direction,
            "elapsedTimeHours": self.elapsed_time_hours,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Waypoint":
        """Rebuild a waypoint from an exported record."""

        try:
            return cls(
                lat=float(payload["lat"]),
                lng=float(payload["lng"]),
                id=int(payload["id"]),
                type=WaypointType(payload["type"]),
                timestamp=str(payload["timestamp"]),
                temperature=float(payload["temperature"]),
                wind_speed=float(payload["windSpeed"]),
                wind_direction=float(payload["windDirection"]),
                elapsed_time_hours=float(payload["elapsedTimeHours"]),
            )
        except KeyError as error:
            raise ValueError(f"Waypoint record is missing field {error}") from error
        except (TypeError, ValueError) as error:
            raise ValueError(f"Waypoint record is malformed: {error}") from error


@dataclass(frozen=True, slots=True)
class WindConfiguration:
    """Operator wind settings; speed in km/h, direction in degrees clockwise from North."""

    use_custom_wind: bool = False
    wind_speed: float = 0.0
    wind_direction: float = 0.0


@dataclass(frozen=True, slots=True)
class GeneratedPath:
    """Trajectory, ideal reference line and battery outcome of one run."""

    waypoints: Tuple[Waypoint, ...]
    ideal_coords: Tuple[Coordinate, ...]
    battery_depleted: bool
    final_waypoint_index: int

    def as_dict(self) -> Dict[str, Any]:
        return {
            "waypoints": [waypoint.as_dict() for waypoint in self.waypoints],
            "idealCoords": [coordinate.as_dict() for coordinate in self.ideal_coords],
            "batteryDepleted": self.battery_depleted,
            "finalWaypointIndex": self.final_waypoint_index,
        }
