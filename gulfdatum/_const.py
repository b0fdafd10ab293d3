"""
Constants declarations for gulfdatum
"""
import math

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening

# Clarke 1880 (RGS) Ellipsoid Constants, used by PSD93 (EPSG:4134)
CLARKE_1880_A = 6378249.145
CLARKE_1880_F = 1 / 293.465

# WGS84 -> PSD93 Helmert parameters (Position Vector). These are the EPSG:1439
# values applied in the WGS84 -> PSD93 direction, whereas EPSG:1439 itself is
# defined PSD93 -> WGS84, so results differ from EPSG-conformant tools
HELMERT_DX = -180.624  # meters
HELMERT_DY = -225.516
HELMERT_DZ = 173.919
HELMERT_RX = -0.81  # arc-seconds
HELMERT_RY = -1.898
HELMERT_RZ = 8.336
HELMERT_SCALE = 16.71006  # ppm

ARCSEC_TO_RADIANS = math.pi / (180 * 3600)
PPM = 1e-6

# UTM
UTM_SCALE_FACTOR = 0.9996
UTM_FALSE_EASTING = 500_000.0
DEFAULT_UTM_ZONE = 40

# Largest series argument (A forward, D inverse) in radians before results are
# considered out of domain; ~4 degrees of longitude at the equator
UTM_MAX_SERIES_ARG = 0.07

# Mean Earth Radius (approximate for Haversine)
EARTH_RADIUS_METERS = 6_371_000.0
