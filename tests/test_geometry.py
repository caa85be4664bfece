"""Mini README: Tests for the geometry and environment primitives.

Covers haversine symmetry, exact interpolation endpoints, the truncating
modulo of the simulated environment and the latitude-corrected drift.
"""

from __future__ import annotations

import math

import pytest

from driftpath.geometry import (
    KM_PER_DEG_LAT,
    Coordinate,
    apply_drift,
    drift_offset,
    get_simulated_data,
    haversine_distance,
    interpolate_point,
)

PAIRS = [
    (Coordinate(0.0, 0.0), Coordinate(0.0, 10.0)),
    (Coordinate(25.2630, 82.9922), Coordinate(25.3176, 82.9739)),
    (Coordinate(-33.8688, 151.2093), Coordinate(51.5074, -0.1278)),
    (Coordinate(60.0, 5.0), Coordinate(59.0, -3.0)),
]


@pytest.mark.parametrize("a, b", PAIRS)
def test_haversine_is_symmetric_and_zero_on_identity(a: Coordinate, b: Coordinate) -> None:
    assert haversine_distance(a, b) == haversine_distance(b, a)
    assert haversine_distance(a, a) == 0.0
    assert haversine_distance(a, b) > 0.0


def test_haversine_one_degree_on_equator() -> None:
    """One degree of longitude on the equator is R * pi / 180."""

    distance = haversine_distance(Coordinate(0.0, 0.0), Coordinate(0.0, 1.0))
    assert distance == pytest.approx(6371.0 * math.pi / 180)


def test_interpolation_endpoints_are_exact() -> None:
    a, b = Coordinate(0.1, 82.9922), Coordinate(0.3, 83.0066)
    assert interpolate_point(a, b, 0) == a
    assert interpolate_point(a, b, 1) == b
    midpoint = interpolate_point(a, b, 0.5)
    assert midpoint.lat == pytest.approx(0.2)
    assert midpoint.lng == pytest.approx(82.9994)


def test_simulated_data_for_positive_coordinates() -> None:
    reading = get_simulated_data(25.263, 82.9922)
    assert reading.temperature == pytest.approx(20 + 0.263 - 1.9922)
    assert reading.wind_speed == pytest.approx(10 + 1.263 + 0.9922)
    assert reading.wind_direction == 108


def test_simulated_data_uses_truncating_modulo_for_negatives() -> None:
    """Negative inputs keep the sign of the dividend, unlike Python's ``%``."""

    reading = get_simulated_data(-1.5, -2.5)
    assert reading.temperature == pytest.approx(21.0)
    assert reading.wind_speed == pytest.approx(8.0)
    assert reading.wind_direction == -4


def test_simulated_data_is_deterministic() -> None:
    assert get_simulated_data(12.34, -56.78) == get_simulated_data(12.34, -56.78)


def test_northerly_drift_only_moves_latitude() -> None:
    d_lat, d_lng = drift_offset(30.0, 0.0, 0.5, latitude=45.0)
    assert d_lat == pytest.approx(15.0 / KM_PER_DEG_LAT)
    assert d_lng == pytest.approx(0.0)


def test_easterly_drift_is_corrected_for_latitude() -> None:
    d_lat, d_lng = drift_offset(60.0, 90.0, 1.0, latitude=60.0)
    assert d_lat == pytest.approx(0.0, abs=1e-12)
    # A degree of longitude at 60 degrees is half as long as at the equator.
    assert d_lng == pytest.approx(60.0 / (KM_PER_DEG_LAT * 0.5))
    _, equator_lng = drift_offset(60.0, 90.0, 1.0, latitude=0.0)
    assert d_lng == pytest.approx(2 * equator_lng)


def test_zero_wind_leaves_point_unchanged() -> None:
    point = Coordinate(25.2630, 82.9922)
    assert apply_drift(point, 0.0, 137.0, 2.0) == point


@pytest.mark.parametrize("lat", [0.08, 0.12, 0.31, 45.0, 89.99])
def test_near_antipodal_points_measure_half_circumference(lat: float) -> None:
    """Rounding on nearly opposite points must not leave the sqrt domain."""

    distance = haversine_distance(Coordinate(lat, 10.0), Coordinate(-lat, -170.0))
    assert distance == pytest.approx(math.pi * 6371.0, rel=1e-6)
