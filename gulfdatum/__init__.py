
from gulfdatum._version import __version__  # noqa: F401
from gulfdatum.utils.logging import LOGGER
from gulfdatum.errors import OutOfDomainError
from gulfdatum.models import (
    CLARKE_1880, CartesianPoint, Ellipsoid, GeodeticPoint, HelmertParameters,
    UTMPoint, WGS84, WGS84_TO_PSD93
)
from gulfdatum.ecef import ecef_to_geodetic, geodetic_to_ecef
from gulfdatum.helmert import apply_helmert
from gulfdatum.datum import (
    psd93_to_wgs84, transform_datum, utm_to_wgs84, wgs84_to_psd93, wgs84_to_utm
)
from gulfdatum.utm import (
    central_meridian, geodetic_to_utm, psd93_to_utm, utm_to_geodetic,
    utm_to_psd93, zone_for_longitude
)
from gulfdatum.distance import (
    grid_distance_meters, haversine_distance_meters, path_length_meters
)

__all__ = [
    'CLARKE_1880',
    'CartesianPoint',
    'Ellipsoid',
    'GeodeticPoint',
    'HelmertParameters',
    'OutOfDomainError',
    'UTMPoint',
    'WGS84',
    'WGS84_TO_PSD93',
    'apply_helmert',
    'central_meridian',
    'ecef_to_geodetic',
    'geodetic_to_ecef',
    'geodetic_to_utm',
    'grid_distance_meters',
    'haversine_distance_meters',
    'path_length_meters',
    'psd93_to_utm',
    'psd93_to_wgs84',
    'transform_datum',
    'utm_to_geodetic',
    'utm_to_psd93',
    'utm_to_wgs84',
    'wgs84_to_psd93',
    'wgs84_to_utm',
    'zone_for_longitude',
    'LOGGER',
]
