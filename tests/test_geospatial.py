import math

import pytest

from sachet.services.geospatial import bounding_box, haversine_km

HQ = (5.6037, -0.1870)


def test_haversine_identity_is_zero() -> None:
    assert haversine_km(*HQ, *HQ) == 0.0
    assert haversine_km(-33.9, 151.2, -33.9, 151.2) == 0.0


def test_haversine_is_symmetric() -> None:
    forward = haversine_km(5.6037, -0.1870, 6.6885, -1.6244)
    backward = haversine_km(6.6885, -1.6244, 5.6037, -0.1870)
    assert forward == pytest.approx(backward, rel=1e-12)


def test_haversine_known_distance_near_accra() -> None:
    # 0.0537 deg of latitude and 0.013 deg of longitude near the equator
    assert haversine_km(5.6037, -0.1870, 5.5500, -0.2000) == pytest.approx(6.142, abs=0.01)


def test_haversine_one_degree_of_latitude_uses_6371_km_radius() -> None:
    assert haversine_km(0.0, 0.0, 1.0, 0.0) == pytest.approx(111.19493, rel=1e-6)


def test_haversine_does_not_reject_impossible_coordinates() -> None:
    distance = haversine_km(120.0, 400.0, -95.0, -720.0)
    assert distance >= 0.0


def test_bounding_box_orders_south_west_north_east() -> None:
    box = bounding_box([(5.60, -0.20), (5.70, -0.10), (5.55, -0.15)])
    assert box == pytest.approx((5.55, -0.20, 5.70, -0.10))


def test_bounding_box_empty_and_single_point() -> None:
    assert bounding_box([]) is None
    assert bounding_box([(5.6, -0.18)]) == pytest.approx((5.6, -0.18, 5.6, -0.18))


def test_haversine_near_antipodal_points_return_half_circumference() -> None:
    distance = haversine_km(80.05814743531747, 28.530813846926918, -80.05814743531747, 208.530813846926918)
    assert distance == pytest.approx(math.pi * 6371.0, rel=1e-9)
