"""Mini README: Deterministic stand-in for a weather feed.

Structure:
    * EnvironmentReading - temperature and wind at a point.
    * get_simulated_data - pure function of (lat, lng).

The arithmetic is a fixture rather than a model, so it must reproduce the
reference vectors exactly. ``mod`` is truncating (the result takes the sign
of the dividend), hence ``math.fmod`` rather than Python's ``%``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True, slots=True)
class EnvironmentReading:
    """Environmental readings attached to each waypoint."""

    temperature: float
    wind_speed: float
    wind_direction: float

    def as_dict(self) -> Dict[str, float]:
        return {
            "temperature": self.temperature,
            "windSpeed": self.wind_speed,
            "windDirection": self.wind_direction,
        }


def get_simulated_data(lat: float, lng: float) -> EnvironmentReading:
    """Return the position-derived temperature (C), wind speed (km/h) and direction (deg)."""

    return EnvironmentReading(
        temperature=20 + math.fmod(lat, 5) - math.fmod(lng, 3),
        wind_speed=10 + math.fmod(lat, 3) + math.fmod(lng, 2),
        wind_direction=math.floor(math.fmod(lng + lat, 360)),
    )
