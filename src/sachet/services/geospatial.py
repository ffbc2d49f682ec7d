"""Geospatial helper functions."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from shapely.geometry import MultiPoint

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # Rounding can push a just past 1 for near-antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def bounding_box(points: Sequence[tuple[float, float]]) -> Optional[tuple[float, float, float, float]]:
    """Return (south, west, north, east) enclosing the given (lat, lon) points."""

    if not points:
        return None
    min_lon, min_lat, max_lon, max_lat = MultiPoint([(lon, lat) for lat, lon in points]).bounds
    return min_lat, min_lon, max_lat, max_lon
