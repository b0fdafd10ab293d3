"""
Datum conversion between WGS84 and PSD93 (EPSG:4134).

Each conversion lifts the position to ECEF on the source ellipsoid, applies
a 7-parameter Helmert transform, and recovers geodetic coordinates on the
target ellipsoid. Neither step is exactly invertible (first-order Helmert
inverse, single-pass Bowring recovery), so a round trip lands within a few
centimeters of the start rather than on it.

The Helmert parameters reuse the EPSG:1439 values in the WGS84 -> PSD93
direction. EPSG:1439 is defined PSD93 -> WGS84, so positions here differ by
several hundred meters from EPSG-conformant tools such as PROJ.
"""

__all__ = [
    'psd93_to_wgs84', 'transform_datum', 'utm_to_wgs84',
    'wgs84_to_psd93', 'wgs84_to_utm',
]

from typing import Literal

from gulfdatum._const import DEFAULT_UTM_ZONE
from gulfdatum.ecef import ecef_to_geodetic, geodetic_to_ecef
from gulfdatum.helmert import apply_helmert
from gulfdatum.models import (
    CLARKE_1880, Ellipsoid, GeodeticPoint, HelmertParameters, UTMPoint,
    WGS84, WGS84_TO_PSD93
)
from gulfdatum.utm import psd93_to_utm, utm_to_psd93


def transform_datum(
    point: GeodeticPoint,
    source: Ellipsoid,
    target: Ellipsoid,
    params: HelmertParameters,
    direction: Literal['forward', 'inverse'] = 'forward',
    strict: bool = False,
) -> GeodeticPoint:
    """
    Converts a geodetic position from one datum to another.

    Args:
        point:
            The position on the source datum

        source:
            The source datum's ellipsoid

        target:
            The target datum's ellipsoid

        params:
            Helmert parameters relating the two datums' cartesian frames

        direction:
            (Default 'forward') 'forward' if params describe source -> target,
            'inverse' if they describe target -> source

        strict:
            (Default False) Raise OutOfDomainError for latitudes beyond the poles
            instead of logging a warning

    Returns:
        GeodeticPoint on the target datum
    """
    cartesian = geodetic_to_ecef(*point, ellipsoid=source, strict=strict)
    transformed = apply_helmert(cartesian, params, direction)
    return ecef_to_geodetic(*transformed, ellipsoid=target)


def wgs84_to_psd93(latitude, longitude, height=0.0, strict: bool = False) -> GeodeticPoint:
    """Converts a WGS84 geodetic position to PSD93"""
    return transform_datum(
        GeodeticPoint(latitude, longitude, height),
        WGS84, CLARKE_1880, WGS84_TO_PSD93, 'forward', strict
    )


def psd93_to_wgs84(latitude, longitude, height=0.0, strict: bool = False) -> GeodeticPoint:
    """Converts a PSD93 geodetic position to WGS84"""
    return transform_datum(
        GeodeticPoint(latitude, longitude, height),
        CLARKE_1880, WGS84, WGS84_TO_PSD93, 'inverse', strict
    )


def wgs84_to_utm(
    latitude,
    longitude,
    zone: int = DEFAULT_UTM_ZONE,
    strict: bool = False,
) -> UTMPoint:
    """
    Converts a WGS84 geodetic position straight to PSD93 / UTM grid coordinates.

    Args:
        latitude:
            WGS84 latitude in decimal degrees

        longitude:
            WGS84 longitude in decimal degrees

        zone:
            (Default 40) The UTM zone to project into

        strict:
            (Default False) Raise OutOfDomainError for out-of-domain inputs
            instead of logging a warning

    Returns:
        UTMPoint
    """
    lat, lon, _ = wgs84_to_psd93(latitude, longitude, strict=strict)
    return psd93_to_utm(lat, lon, zone, strict)


def utm_to_wgs84(
    easting,
    northing,
    zone: int = DEFAULT_UTM_ZONE,
    strict: bool = False,
) -> GeodeticPoint:
    """Converts PSD93 / UTM grid coordinates straight to a WGS84 geodetic position"""
    lat, lon, _ = utm_to_psd93(easting, northing, zone, strict)
    return psd93_to_wgs84(lat, lon, strict=strict)
