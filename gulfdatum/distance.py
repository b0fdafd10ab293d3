"""Distances between converted points"""

__all__ = ['grid_distance_meters', 'haversine_distance_meters', 'path_length_meters']

import math
from typing import Sequence

from gulfdatum._const import EARTH_RADIUS_METERS
from gulfdatum.models import GeodeticPoint, UTMPoint


def haversine_distance_meters(start: GeodeticPoint, end: GeodeticPoint) -> float:
    """Calculate distance using the Haversine formula (spherical earth)."""
    lat1, lon1 = math.radians(start.latitude), math.radians(start.longitude)
    lat2, lon2 = math.radians(end.latitude), math.radians(end.longitude)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = (math.sin(dlat / 2) ** 2 +
         math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_METERS * c


def path_length_meters(points: Sequence[GeodeticPoint]) -> float:
    """
    Total haversine length of the path visiting each point in order.

    Args:
        points:
            The path's vertices, in order

    Returns:
        (float) the length in meters; 0 if fewer than two points are given
    """
    return sum(
        haversine_distance_meters(start, end)
        for start, end in zip(points, points[1:])
    )


def grid_distance_meters(start: UTMPoint, end: UTMPoint) -> float:
    """
    Planar distance between two UTM points of the same zone. Grid distances
    include the projection's scale distortion (0.9996 on the central meridian).
    """
    if start.zone != end.zone:
        raise ValueError(
            f'Cannot measure grid distance across UTM zones ({start.zone} and {end.zone})'
        )

    return math.hypot(end.easting - start.easting, end.northing - start.northing)
