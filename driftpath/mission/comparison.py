"""Mini README: Side-by-side comparison of official and playground wind.

Structure:
    * MissionComparison - both runs with their summaries and deltas.
    * compare_wind_scenarios - run the generator under both wind sources.

The official run always uses the position-derived wind sample. When the
operator enables a playground wind, a second run with that constant wind is
produced so its effect on distance and flight time can be read directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

from ..geometry import Coordinate
from ..logging_utils import get_logger
from ..route_planning import GeneratedPath, PathGenerator, WindConfiguration
from .summary import MissionSummary, calculate_mission_summary

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class MissionComparison:
    """Official run plus an optional playground-wind run."""

    official_path: GeneratedPath
    official_summary: MissionSummary
    playground_path: Optional[GeneratedPath] = None
    playground_summary: Optional[MissionSummary] = None

    @property
    def distance_delta_km(self) -> float:
        if self.playground_summary is None:
            return 0.0
        return (
            self.playground_summary.total_realistic_distance
            - self.official_summary.total_realistic_distance
        )

    @property
    def flight_time_delta_hours(self) -> float:
        if self.playground_summary is None:
            return 0.0
        return (
            self.playground_summary.total_flight_time_hours
            - self.official_summary.total_flight_time_hours
        )

    def as_dict(self) -> Dict[str, Any]:
        return {
            "official": {
                "path": self.official_path.as_dict(),
                "summary": self.official_summary.as_dict(),
            },
            "playground": (
                {
                    "path": self.playground_path.as_dict(),
                    "summary": self.playground_summary.as_dict(),
                }
                if self.playground_path is not None and self.playground_summary is not None
                else None
            ),
            "distanceDeltaKm": self.distance_delta_km,
            "flightTimeDeltaHours": self.flight_time_delta_hours,
        }


def compare_wind_scenarios(
    vertices: Sequence[Coordinate],
    wind: WindConfiguration,
    max_flight_time_minutes: Optional[float] = None,
    generator: Optional[PathGenerator] = None,
) -> MissionComparison:
    """Generate the official path and, if requested, the playground-wind path."""

    generator = generator or PathGenerator()
    official = generator.generate(vertices, WindConfiguration(), max_flight_time_minutes)
    official_summary = calculate_mission_summary(official.waypoints, official.ideal_coords)
    if not wind.use_custom_wind:
        return MissionComparison(official_path=official, official_summary=official_summary)

    playground = generator.generate(vertices, wind, max_flight_time_minutes)
    comparison = MissionComparison(
        official_path=official,
        official_summary=official_summary,
        playground_path=playground,
        playground_summary=calculate_mission_summary(playground.waypoints, playground.ideal_coords),
    )
    LOGGER.info(
        "Playground wind %.1f km/h @ %.0f deg changes distance by %+.3f km and time by %+.4f h",
        wind.wind_speed,
        wind.wind_direction,
        comparison.distance_delta_km,
        comparison.flight_time_delta_hours,
    )
    return comparison
