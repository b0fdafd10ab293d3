import pytest
from pytest import approx

from gulfdatum.models import *


def test_ellipsoid():
    assert WGS84.b == approx(6_356_752.314245, abs=1e-6)
    assert WGS84.e2 == approx(0.00669437999014, abs=1e-13)
    assert WGS84.ep2 == approx(0.00673949674228, abs=1e-13)

    assert CLARKE_1880.a == 6378249.145
    assert CLARKE_1880.e2 == approx(0.0068035, abs=1e-7)

    with pytest.raises(AttributeError):
        WGS84.a = 1.


def test_helmert_parameters():
    params = HelmertParameters(1., 2., 3., 4., 5., 6., 7.)
    assert params.inverse() == HelmertParameters(-1., -2., -3., -4., -5., -6., -7.)
    assert params.inverse().inverse() == params

    assert params.scale_factor == approx(7e-6, rel=1e-12)
    assert params.rotations_radians[0] == approx(4 * 4.84813681109536e-6, rel=1e-12)

    assert WGS84_TO_PSD93.rotations_radians[2] == approx(4.04141e-5, rel=1e-5)
    assert WGS84_TO_PSD93.scale_factor == approx(1.671006e-5, rel=1e-12)


def test_points():
    lat, lon, h = GeodeticPoint(1., 2.)
    assert (lat, lon, h) == (1., 2., 0.)

    x, y, z = CartesianPoint(1., 2., 3.)
    assert (x, y, z) == (1., 2., 3.)

    assert UTMPoint(500_000., 2_600_000., 40)._asdict() == {
        'easting': 500_000.,
        'northing': 2_600_000.,
        'zone': 40,
    }
