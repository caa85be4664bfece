"""Mini README: Distance, interpolation and drift primitives.

Structure:
    * Coordinate - immutable latitude/longitude pair in decimal degrees.
    * haversine_distance - great-circle distance in kilometres.
    * interpolate_point - straight lat/lng interpolation (not geodesic).
    * drift_offset / apply_drift - convert wind exposure into degree deltas.

All functions are pure. Bearings follow the aviation convention: 0 degrees
is North and angles grow clockwise.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Tuple

EARTH_RADIUS_KM = 6371.0
KM_PER_DEG_LAT = 111.1


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Geographic point in decimal degrees."""

    lat: float
    lng: float

    def as_dict(self) -> Dict[str, float]:
        """Export using the field names shared with map overlays."""

        return {"lat": self.lat, "lng": self.lng}


def haversine_distance(p1: Coordinate, p2: Coordinate) -> float:
    """Return the great-circle distance between two points in kilometres."""

    d_lat = math.radians(p2.lat - p1.lat)
    d_lng = math.radians(p2.lng - p1.lng)
    lat1 = math.radians(p1.lat)
    lat2 = math.radians(p2.lat)
    # cos(lat1) * cos(lat2) is grouped first so swapping the points is bit-exact.
    a = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2
    # Rounding can push near-antipodal pairs just past 1.
    a = min(1.0, a)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def interpolate_point(p1: Coordinate, p2: Coordinate, t: float) -> Coordinate:
    """Return the point at fraction ``t`` along the straight line from ``p1`` to ``p2``."""

    if t == 0:
        return Coordinate(lat=p1.lat, lng=p1.lng)
    if t == 1:
        return Coordinate(lat=p2.lat, lng=p2.lng)
    return Coordinate(
        lat=p1.lat + (p2.lat - p1.lat) * t,
        lng=p1.lng + (p2.lng - p1.lng) * t,
    )


def drift_offset(
    wind_speed_kmph: float,
    wind_direction_deg: float,
    exposure_hours: float,
    latitude: float,
) -> Tuple[float, float]:
    """Return the ``(lat, lng)`` degree shift caused by wind over ``exposure_hours``.

    The east/west component is divided by the longitude degree length at
    ``latitude``; without that correction the error grows toward the poles.
    """

    direction = math.radians(wind_direction_deg)
    drift_km = wind_speed_kmph * exposure_hours
    north_km = drift_km * math.cos(direction)
    east_km = drift_km * math.sin(direction)
    km_per_deg_lng = KM_PER_DEG_LAT * math.cos(math.radians(latitude))
    return north_km / KM_PER_DEG_LAT, east_km / km_per_deg_lng


def apply_drift(
    point: Coordinate,
    wind_speed_kmph: float,
    wind_direction_deg: float,
    exposure_hours: float,
) -> Coordinate:
    """Shift ``point`` downwind by the drift accumulated over ``exposure_hours``."""

    d_lat, d_lng = drift_offset(wind_speed_kmph, wind_direction_deg, exposure_hours, point.lat)
    return Coordinate(lat=point.lat + d_lat, lng=point.lng + d_lng)
