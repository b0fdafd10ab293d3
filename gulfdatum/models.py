"""
Value types shared by every conversion stage.

All of them are immutable. Point types are named tuples so they can be
unpacked like plain ``(lat, lon, h)`` tuples; their fields may also hold numpy
arrays, in which case every conversion operates element-wise.
"""

__all__ = [
    'CartesianPoint', 'Ellipsoid', 'GeodeticPoint', 'HelmertParameters', 'UTMPoint',
    'CLARKE_1880', 'WGS84', 'WGS84_TO_PSD93',
]

from dataclasses import dataclass
from typing import NamedTuple, Tuple

from gulfdatum._const import (
    ARCSEC_TO_RADIANS, CLARKE_1880_A, CLARKE_1880_F, HELMERT_DX, HELMERT_DY,
    HELMERT_DZ, HELMERT_RX, HELMERT_RY, HELMERT_RZ, HELMERT_SCALE, PPM,
    WGS84_A, WGS84_F
)


@dataclass(frozen=True)
class Ellipsoid:
    """A reference ellipsoid, defined by its semi-major axis and flattening"""
    a: float
    f: float
    name: str = ''

    @property
    def b(self) -> float:
        """Semi-minor axis (meters)"""
        return self.a * (1 - self.f)

    @property
    def e2(self) -> float:
        """First eccentricity squared"""
        return 2 * self.f - self.f * self.f

    @property
    def ep2(self) -> float:
        """Second eccentricity squared"""
        return self.e2 / (1 - self.e2)


@dataclass(frozen=True)
class HelmertParameters:
    """
    Parameters of a 7-parameter (Position Vector) similarity transform between
    two Cartesian frames.

    Args:
        dx, dy, dz:
            Translations, in meters

        rx, ry, rz:
            Rotations, in arc-seconds

        scale:
            Scale correction, in parts per million
    """
    dx: float
    dy: float
    dz: float
    rx: float
    ry: float
    rz: float
    scale: float

    @property
    def rotations_radians(self) -> Tuple[float, float, float]:
        return (
            self.rx * ARCSEC_TO_RADIANS,
            self.ry * ARCSEC_TO_RADIANS,
            self.rz * ARCSEC_TO_RADIANS,
        )

    @property
    def scale_factor(self) -> float:
        """Scale correction as a dimensionless factor"""
        return self.scale * PPM

    def inverse(self) -> 'HelmertParameters':
        """
        Returns the parameters of the reverse transform by negating all seven
        values. This is only a first-order inverse: applying a transform and
        then its inverse leaves a residual on the order of the parameters
        squared (centimeters for WGS84 <-> PSD93).
        """
        return HelmertParameters(
            -self.dx, -self.dy, -self.dz,
            -self.rx, -self.ry, -self.rz,
            -self.scale,
        )


class GeodeticPoint(NamedTuple):
    """Latitude/longitude in decimal degrees, ellipsoidal height in meters"""
    latitude: float
    longitude: float
    height: float = 0.0


class CartesianPoint(NamedTuple):
    """Earth-centered, earth-fixed coordinates in meters, tied to one datum"""
    x: float
    y: float
    z: float


class UTMPoint(NamedTuple):
    """UTM grid coordinates in meters, northern hemisphere"""
    easting: float
    northing: float
    zone: int


WGS84 = Ellipsoid(WGS84_A, WGS84_F, 'WGS84')
CLARKE_1880 = Ellipsoid(CLARKE_1880_A, CLARKE_1880_F, 'Clarke 1880 (RGS)')

WGS84_TO_PSD93 = HelmertParameters(
    dx=HELMERT_DX, dy=HELMERT_DY, dz=HELMERT_DZ,
    rx=HELMERT_RX, ry=HELMERT_RY, rz=HELMERT_RZ,
    scale=HELMERT_SCALE,
)
