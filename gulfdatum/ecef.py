"""
Conversions between geodetic coordinates and earth-centered, earth-fixed
(ECEF) cartesian coordinates on a given ellipsoid
"""

__all__ = ['geodetic_to_ecef', 'ecef_to_geodetic']

import numpy as np

from gulfdatum.models import CartesianPoint, Ellipsoid, GeodeticPoint, WGS84
from gulfdatum.utils.functions import check_latitude


def geodetic_to_ecef(
    latitude,
    longitude,
    height=0.0,
    ellipsoid: Ellipsoid = WGS84,
    strict: bool = False,
) -> CartesianPoint:
    """
    Converts a geodetic position to ECEF cartesian coordinates.

    Args:
        latitude:
            Latitude in decimal degrees

        longitude:
            Longitude in decimal degrees

        height:
            (Default 0) Height above the ellipsoid, in meters

        ellipsoid:
            (Default WGS84) The ellipsoid the position is expressed on

        strict:
            (Default False) Raise OutOfDomainError for latitudes beyond the poles
            instead of logging a warning

    Returns:
        CartesianPoint, in meters
    """
    check_latitude(latitude, strict)

    lat = np.radians(latitude)
    lon = np.radians(longitude)
    e2 = ellipsoid.e2

    sin_lat = np.sin(lat)
    n = ellipsoid.a / np.sqrt(1 - e2 * sin_lat * sin_lat)

    return CartesianPoint(
        (n + height) * np.cos(lat) * np.cos(lon),
        (n + height) * np.cos(lat) * np.sin(lon),
        (n * (1 - e2) + height) * sin_lat,
    )


def ecef_to_geodetic(x, y, z, ellipsoid: Ellipsoid = WGS84) -> GeodeticPoint:
    """
    Converts ECEF cartesian coordinates to a geodetic position using Bowring's
    closed-form approximation.

    The latitude is corrected once from the parametric latitude and is not
    iterated. The error is negligible at terrestrial heights but grows away from
    the ellipsoid surface, so results are not survey grade.

    Args:
        x, y, z:
            ECEF coordinates in meters

        ellipsoid:
            (Default WGS84) The ellipsoid to express the position on

    Returns:
        GeodeticPoint in decimal degrees and meters
    """
    a, f = ellipsoid.a, ellipsoid.f
    e2, ep2 = ellipsoid.e2, ellipsoid.ep2

    p = np.sqrt(x * x + y * y)
    theta = np.arctan2(z * a, p * (1 - f) * a)
    lon = np.arctan2(y, x)
    lat = np.arctan2(
        z + ep2 * (1 - f) * a * np.sin(theta) ** 3,
        p - e2 * a * np.cos(theta) ** 3
    )

    sin_lat = np.sin(lat)
    n = a / np.sqrt(1 - e2 * sin_lat * sin_lat)
    height = p / np.cos(lat) - n

    return GeodeticPoint(np.degrees(lat), np.degrees(lon), height)
