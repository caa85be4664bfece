"""Mini README: Wind-aware flight path generation.

Structure:
    * PathGenerator - configurable generator turning vertices into a
      drift-adjusted, time-stamped trajectory.
    * generate_path - functional entry point using the reference constants.

Each segment between operator vertices is split into points roughly every
500 m. Every step is flown from where the wind actually left the drone (the
previous realistic point), so drift accumulates across a segment until the
drone corrects back onto the next vertex. An optional flight-time ceiling
models battery capacity and truncates the trajectory once exceeded.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional, Sequence

from ..configuration import DriftpathSettings, get_settings
from ..geometry import (
    Coordinate,
    EnvironmentReading,
    apply_drift,
    get_simulated_data,
    haversine_distance,
    interpolate_point,
)
from ..logging_utils import get_logger
from .models import GeneratedPath, Waypoint, WaypointType, WindConfiguration

LOGGER = get_logger(__name__)

DRONE_SPEED_KMPH = 60.0
INTERPOLATION_SPACING_KM = 0.5
TIMESTAMP_STEP_SECONDS = 10.0


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _isoformat(stamp: datetime) -> str:
    """Render ``YYYY-MM-DDTHH:MM:SS.mmmZ`` as browsers' ``toISOString`` does."""

    stamp = stamp.astimezone(timezone.utc)
    return stamp.strftime("%Y-%m-%dT%H:%M:%S") + f".{stamp.microsecond // 1000:03d}Z"


@dataclass(slots=True)
class _FlightState:
    """Accumulator threaded through one generation run."""

    last_realistic: Coordinate
    clock: datetime
    ceiling_hours: Optional[float]
    waypoints: List[Waypoint] = field(default_factory=list)
    ideal_coords: List[Coordinate] = field(default_factory=list)
    elapsed_hours: float = 0.0
    depleted: bool = False


class PathGenerator:
    """Generate ideal and realistic trajectories for a list of vertices."""

    def __init__(
        self,
        *,
        cruise_speed_kmph: float = DRONE_SPEED_KMPH,
        interpolation_spacing_km: float = INTERPOLATION_SPACING_KM,
        timestamp_step_seconds: float = TIMESTAMP_STEP_SECONDS,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        if cruise_speed_kmph <= 0:
            raise ValueError("Cruise speed must be positive")
        if interpolation_spacing_km <= 0:
            raise ValueError("Interpolation spacing must be positive")
        self.cruise_speed_kmph = cruise_speed_kmph
        self.interpolation_spacing_km = interpolation_spacing_km
        self.timestamp_step = timedelta(seconds=timestamp_step_seconds)
        self._clock = clock
        LOGGER.debug(
            "Initialised PathGenerator with cruise_speed=%s spacing=%s",
            cruise_speed_kmph,
            interpolation_spacing_km,
        )

    @classmethod
    def from_settings(cls, settings: Optional[DriftpathSettings] = None) -> "PathGenerator":
        """Build a generator from environment-aware settings."""

        settings = settings or get_settings()
        return cls(
            cruise_speed_kmph=settings.cruise_speed_kmph,
            interpolation_spacing_km=settings.interpolation_spacing_km,
            timestamp_step_seconds=settings.timestamp_step_seconds,
        )

    def generate(
        self,
        vertices: Sequence[Coordinate],
        wind: Optional[WindConfiguration] = None,
        max_flight_time_minutes: Optional[float] = None,
    ) -> GeneratedPath:
        """Fly through ``vertices`` in order and return the resulting trajectory."""

        if len(vertices) < 2:
            raise ValueError("At least two vertices are required to generate a path")
        wind = wind or WindConfiguration()
        ceiling_hours = max_flight_time_minutes / 60 if max_flight_time_minutes is not None else None
        LOGGER.info(
            "Generating path through %s vertices (custom_wind=%s, max_flight_minutes=%s)",
            len(vertices),
            wind.use_custom_wind,
            max_flight_time_minutes,
        )

        start = vertices[0]
        state = _FlightState(last_realistic=start, clock=self._clock(), ceiling_hours=ceiling_hours)
        self._emit(state, start, WaypointType.INITIAL, get_simulated_data(start.lat, start.lng))
        state.ideal_coords.append(start)

        for p1, p2 in zip(vertices, vertices[1:]):
            self._fly_segment(state, p1, p2, wind)
            if state.depleted:
                LOGGER.warning(
                    "Battery depleted after %.4f h; trajectory truncated at waypoint %s",
                    state.elapsed_hours,
                    len(state.waypoints) - 1,
                )
                break

        LOGGER.info(
            "Generated %s waypoints over %.4f h", len(state.waypoints), state.elapsed_hours
        )
        return GeneratedPath(
            waypoints=tuple(state.waypoints),
            ideal_coords=tuple(state.ideal_coords),
            battery_depleted=state.depleted,
            final_waypoint_index=len(state.waypoints) - 1,
        )

    def _fly_segment(
        self,
        state: _FlightState,
        p1: Coordinate,
        p2: Coordinate,
        wind: WindConfiguration,
    ) -> None:
        extra_points = math.floor(haversine_distance(p1, p2) / self.interpolation_spacing_km)
        for j in range(1, extra_points + 1):
            ideal = interpolate_point(p1, p2, j / (extra_points + 1))
            state.ideal_coords.append(ideal)
            reading = self._sample(ideal, wind)
            step_hours = self._advance(state, ideal, reading.wind_speed, wind.use_custom_wind)
            if step_hours is None:
                return
            realistic = apply_drift(ideal, reading.wind_speed, reading.wind_direction, step_hours)
            self._emit(state, realistic, WaypointType.INTERPOLATED, reading)
            state.last_realistic = realistic

        # The drone corrects onto the planned vertex, so p2 itself is never drifted.
        closing = get_simulated_data(p2.lat, p2.lng)
        closing_speed = wind.wind_speed if wind.use_custom_wind else closing.wind_speed
        if self._advance(state, p2, closing_speed, wind.use_custom_wind) is None:
            return
        self._emit(state, p2, WaypointType.INITIAL, closing)
        state.ideal_coords.append(p2)
        state.last_realistic = p2

    @staticmethod
    def _sample(point: Coordinate, wind: WindConfiguration) -> EnvironmentReading:
        reading = get_simulated_data(point.lat, point.lng)
        if not wind.use_custom_wind:
            return reading
        return EnvironmentReading(
            temperature=reading.temperature,
            wind_speed=wind.wind_speed,
            wind_direction=wind.wind_direction,
        )

    def _advance(
        self,
        state: _FlightState,
        target: Coordinate,
        wind_speed: float,
        penalise: bool,
    ) -> Optional[float]:
        """Fly from the last realistic point to ``target``.

        Returns the step duration in hours, or ``None`` once the flight-time
        ceiling is exceeded, in which case the state is marked depleted and
        nothing else may be appended.
        """

        distance_km = haversine_distance(state.last_realistic, target)
        penalty = 1 + wind_speed / 100 if penalise else 1.0
        step_hours = distance_km / self.cruise_speed_kmph * penalty
        elapsed = state.elapsed_hours + step_hours
        if state.ceiling_hours is not None and elapsed > state.ceiling_hours:
            state.depleted = True
            return None
        state.elapsed_hours = elapsed
        LOGGER.debug("Step of %.4f km took %.6f h (penalty x%.2f)", distance_km, step_hours, penalty)
        return step_hours

    def _emit(
        self,
        state: _FlightState,
        point: Coordinate,
        waypoint_type: WaypointType,
        reading: EnvironmentReading,
    ) -> None:
        state.clock += self.timestamp_step
        state.waypoints.append(
            Waypoint(
                lat=point.lat,
                lng=point.lng,
                id=len(state.waypoints),
                type=waypoint_type,
                timestamp=_isoformat(state.clock),
                temperature=reading.temperature,
                wind_speed=reading.wind_speed,
                wind_direction=reading.wind_direction,
                elapsed_time_hours=state.elapsed_hours,
            )
        )


def generate_path(
    vertices: Sequence[Coordinate],
    use_custom_wind: bool = False,
    custom_wind_speed: float = 0.0,
    custom_wind_direction: float = 0.0,
    max_flight_time_minutes: Optional[float] = None,
) -> GeneratedPath:
    """Generate a trajectory with the reference cruise speed and spacing."""

    wind = WindConfiguration(
        use_custom_wind=use_custom_wind,
        wind_speed=custom_wind_speed,
        wind_direction=custom_wind_direction,
    )
    return PathGenerator().generate(vertices, wind, max_flight_time_minutes)
