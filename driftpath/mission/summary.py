"""Mini README: Mission accounting over a generated trajectory.

Structure:
    * MissionSummary - distance, time and environmental extrema of a run.
    * calculate_mission_summary - reduce waypoints and ideal coordinates.
    * format_flight_time - ``HH:MM:SS`` rendering used by summary displays.

Degenerate input (fewer than two waypoints) yields an all-zero summary
rather than an exception so dashboards can render before a run exists.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Sequence

from ..geometry import Coordinate, haversine_distance
from ..logging_utils import get_logger
from ..route_planning import Waypoint

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class MissionSummary:
    """Aggregate statistics of a single trajectory (distances in km)."""

    total_ideal_distance: float = 0.0
    total_realistic_distance: float = 0.0
    total_flight_time_hours: float = 0.0
    max_temperature: float = 0.0
    min_temperature: float = 0.0
    max_wind_speed: float = 0.0
    min_wind_speed: float = 0.0

    @property
    def drift_overhead_km(self) -> float:
        """Extra distance flown compared with the ideal route."""

        return self.total_realistic_distance - self.total_ideal_distance

    def as_dict(self) -> Dict[str, float]:
        return {
            "totalIdealDistance": self.total_ideal_distance,
            "totalRealisticDistance": self.total_realistic_distance,
            "totalFlightTimeHours": self.total_flight_time_hours,
            "maxTemperature": self.max_temperature,
            "minTemperature": self.min_temperature,
            "maxWindSpeed": self.max_wind_speed,
            "minWindSpeed": self.min_wind_speed,
        }


def _path_length(points: Sequence[Coordinate]) -> float:
    return sum(haversine_distance(a, b) for a, b in zip(points, points[1:]))


def calculate_mission_summary(
    waypoints: Sequence[Waypoint],
    ideal_coords: Sequence[Coordinate],
) -> MissionSummary:
    """Summarise a trajectory; the first waypoint counts towards every extremum."""

    if len(waypoints) < 2:
        LOGGER.debug("Summary requested for %s waypoints; returning zeros", len(waypoints))
        return MissionSummary()

    temperatures = [waypoint.temperature for waypoint in waypoints]
    wind_speeds = [waypoint.wind_speed for waypoint in waypoints]
    summary = MissionSummary(
        total_ideal_distance=_path_length(ideal_coords),
        total_realistic_distance=_path_length(waypoints),
        total_flight_time_hours=waypoints[-1].elapsed_time_hours,
        max_temperature=max(temperatures),
        min_temperature=min(temperatures),
        max_wind_speed=max(wind_speeds),
        min_wind_speed=min(wind_speeds),
    )
    LOGGER.info(
        "Mission summary -> ideal: %.3f km realistic: %.3f km time: %.4f h",
        summary.total_ideal_distance,
        summary.total_realistic_distance,
        summary.total_flight_time_hours,
    )
    return summary


def format_flight_time(hours: float) -> str:
    """Render elapsed hours as zero-padded ``HH:MM:SS``."""

    total_minutes = math.floor(hours * 60)
    seconds = math.floor(math.fmod(hours * 3600, 60))
    return f"{total_minutes // 60:02d}:{total_minutes % 60:02d}:{seconds:02d}"
