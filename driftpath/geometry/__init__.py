"""Mini README: Geometry and environment primitives for path simulation.

Leaf-level helpers with no dependencies on the rest of the package: the
great-circle distance, straight-line interpolation, wind drift projection
and the deterministic position-derived environment sample.
"""

from .environment import EnvironmentReading, get_simulated_data
from .primitives import (
    EARTH_RADIUS_KM,
    KM_PER_DEG_LAT,
    Coordinate,
    apply_drift,
    drift_offset,
    haversine_distance,
    interpolate_point,
)

__all__ = [
    "Coordinate",
    "EARTH_RADIUS_KM",
    "EnvironmentReading",
    "KM_PER_DEG_LAT",
    "apply_drift",
    "drift_offset",
    "get_simulated_data",
    "haversine_distance",
    "interpolate_point",
]
