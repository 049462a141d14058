from __future__ import annotations

import math
from typing import Iterable

from src.domain.models.stop import GeoPoint

EARTH_RADIUS_M = 6371000.0


def haversine_distance_m(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance in meters."""

    if a == b:
        return 0.0

    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    dlat = lat2 - lat1
    dlon = math.radians(b.lon - a.lon)

    s = (
        math.sin(dlat / 2.0) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2.0) ** 2
    )
    return 2.0 * EARTH_RADIUS_M * math.asin(math.sqrt(s))


def polyline_distance_m(points: Iterable[GeoPoint]) -> float:
    """Sum of great-circle distances between consecutive points."""

    points = tuple(points)
    return float(sum(haversine_distance_m(a, b) for a, b in zip(points, points[1:])))
