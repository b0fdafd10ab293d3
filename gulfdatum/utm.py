"""
Universal Transverse Mercator projection (northern hemisphere) using the
closed-form series from Snyder, "Map Projections: A Working Manual" (1987).

Defaults to the Clarke 1880 ellipsoid used by PSD93. Zones are supplied by the
caller and are not checked against the longitude; the series lose accuracy as
the distance from the central meridian grows.
"""

__all__ = [
    'central_meridian', 'geodetic_to_utm', 'psd93_to_utm',
    'utm_to_geodetic', 'utm_to_psd93', 'zone_for_longitude',
]

import math

import numpy as np

from gulfdatum._const import UTM_FALSE_EASTING, UTM_MAX_SERIES_ARG, UTM_SCALE_FACTOR
from gulfdatum.models import CLARKE_1880, Ellipsoid, GeodeticPoint, UTMPoint
from gulfdatum.utils.functions import check_domain, check_latitude


def central_meridian(zone: int) -> float:
    """Longitude of a zone's central meridian, in decimal degrees"""
    return 6 * zone - 183


def zone_for_longitude(longitude: float) -> int:
    """
    The standard 6-degree UTM zone number containing a longitude. Longitudes
    beyond the antimeridian are clamped to zone 1 or 60 rather than wrapped.
    """
    return min(60, max(1, int(math.floor((longitude + 180) / 6)) + 1))


def _meridional_arc(lat, ellipsoid: Ellipsoid):
    """Distance along the meridian from the equator to lat (radians), in meters"""
    e2 = ellipsoid.e2
    e4 = e2 * e2
    e6 = e4 * e2
    return ellipsoid.a * (
        (1 - e2 / 4 - 3 * e4 / 64 - 5 * e6 / 256) * lat
        - (3 * e2 / 8 + 3 * e4 / 32 + 45 * e6 / 1024) * np.sin(2 * lat)
        + (15 * e4 / 256 + 45 * e6 / 1024) * np.sin(4 * lat)
        - (35 * e6 / 3072) * np.sin(6 * lat)
    )


def geodetic_to_utm(
    latitude,
    longitude,
    zone: int,
    ellipsoid: Ellipsoid = CLARKE_1880,
    strict: bool = False,
) -> UTMPoint:
    """
    Projects a geodetic position to UTM easting/northing in a given zone.

    No false northing is applied, so only northern hemisphere results are
    meaningful.

    Args:
        latitude:
            Latitude in decimal degrees

        longitude:
            Longitude in decimal degrees

        zone:
            The UTM zone to project into

        ellipsoid:
            (Default Clarke 1880) The ellipsoid the position is expressed on

        strict:
            (Default False) Raise OutOfDomainError for latitudes beyond the
            poles, or longitudes too far from the zone's central meridian,
            instead of logging a warning

    Returns:
        UTMPoint
    """
    check_latitude(latitude, strict)

    k0 = UTM_SCALE_FACTOR
    e2, ep2 = ellipsoid.e2, ellipsoid.ep2

    lat = np.radians(latitude)
    lon = np.radians(longitude)
    lon0 = np.radians(central_meridian(zone))

    sin_lat, cos_lat, tan_lat = np.sin(lat), np.cos(lat), np.tan(lat)
    n = ellipsoid.a / np.sqrt(1 - e2 * sin_lat * sin_lat)
    t = tan_lat * tan_lat
    c = ep2 * cos_lat * cos_lat
    a = cos_lat * (lon - lon0)

    check_domain(
        np.abs(a) > UTM_MAX_SERIES_ARG,
        f'Longitude too far from the central meridian of UTM zone {zone}; '
        'projection accuracy is degraded',
        strict
    )

    m = _meridional_arc(lat, ellipsoid)

    easting = UTM_FALSE_EASTING + k0 * n * (
        a
        + (1 - t + c) * a ** 3 / 6
        + (5 - 18 * t + t * t + 72 * c - 58 * ep2) * a ** 5 / 120
    )
    northing = k0 * (
        m + n * tan_lat * (
            a * a / 2
            + (5 - t + 9 * c + 4 * c * c) * a ** 4 / 24
            + (61 - 58 * t + t * t + 600 * c - 330 * ep2) * a ** 6 / 720
        )
    )

    return UTMPoint(easting, northing, zone)


def utm_to_geodetic(
    easting,
    northing,
    zone: int,
    ellipsoid: Ellipsoid = CLARKE_1880,
    strict: bool = False,
) -> GeodeticPoint:
    """
    Inverts the UTM projection via the footpoint latitude.

    Args:
        easting:
            Easting in meters, including the 500,000m false easting

        northing:
            Northing in meters from the equator

        zone:
            The UTM zone the grid coordinates belong to

        ellipsoid:
            (Default Clarke 1880) The ellipsoid to express the position on

        strict:
            (Default False) Raise OutOfDomainError for eastings too far from the
            central meridian instead of logging a warning

    Returns:
        GeodeticPoint with a height of 0 (an array of zeros for array inputs)
    """
    k0 = UTM_SCALE_FACTOR
    e2, ep2 = ellipsoid.e2, ellipsoid.ep2
    e4 = e2 * e2
    e6 = e4 * e2
    root = math.sqrt(1 - e2)
    e1 = (1 - root) / (1 + root)

    lon0 = np.radians(central_meridian(zone))
    x = easting - UTM_FALSE_EASTING

    m = northing / k0
    mu = m / (ellipsoid.a * (1 - e2 / 4 - 3 * e4 / 64 - 5 * e6 / 256))

    # Footpoint latitude
    phi1 = (
        mu
        + (3 * e1 / 2 - 27 * e1 ** 3 / 32) * np.sin(2 * mu)
        + (21 * e1 ** 2 / 16 - 55 * e1 ** 4 / 32) * np.sin(4 * mu)
        + (151 * e1 ** 3 / 96) * np.sin(6 * mu)
        + (1097 * e1 ** 4 / 512) * np.sin(8 * mu)
    )

    sin_phi1, cos_phi1, tan_phi1 = np.sin(phi1), np.cos(phi1), np.tan(phi1)
    w = 1 - e2 * sin_phi1 * sin_phi1
    n1 = ellipsoid.a / np.sqrt(w)
    r1 = ellipsoid.a * (1 - e2) / w ** 1.5
    t1 = tan_phi1 * tan_phi1
    c1 = ep2 * cos_phi1 * cos_phi1
    d = x / (n1 * k0)

    check_domain(
        np.abs(d) > UTM_MAX_SERIES_ARG,
        f'Easting too far from the central meridian of UTM zone {zone}; '
        'inverse projection accuracy is degraded',
        strict
    )

    lat = phi1 - (n1 * tan_phi1 / r1) * (
        d * d / 2
        - (5 + 3 * t1 + 10 * c1 - 4 * c1 * c1 - 9 * ep2) * d ** 4 / 24
        + (61 + 90 * t1 + 298 * c1 + 45 * t1 * t1 - 252 * ep2 - 3 * c1 * c1) * d ** 6 / 720
    )
    lon = lon0 + (
        d
        - (1 + 2 * t1 + c1) * d ** 3 / 6
        + (5 - 2 * c1 + 28 * t1 - 3 * c1 * c1 + 8 * ep2 + 24 * t1 * t1) * d ** 5 / 120
    ) / cos_phi1

    return GeodeticPoint(np.degrees(lat), np.degrees(lon), np.zeros_like(lat))


def psd93_to_utm(latitude, longitude, zone: int, strict: bool = False) -> UTMPoint:
    """Projects a PSD93 geodetic position to PSD93 / UTM"""
    return geodetic_to_utm(latitude, longitude, zone, CLARKE_1880, strict)


def utm_to_psd93(easting, northing, zone: int, strict: bool = False) -> GeodeticPoint:
    """Converts PSD93 / UTM grid coordinates to a PSD93 geodetic position"""
    return utm_to_geodetic(easting, northing, zone, CLARKE_1880, strict)
