import pytest
from pytest import approx

from gulfdatum.ecef import geodetic_to_ecef
from gulfdatum.helmert import *
from gulfdatum.models import CartesianPoint, HelmertParameters, WGS84, WGS84_TO_PSD93


MUSCAT_ECEF = geodetic_to_ecef(23.588, 58.3829, 0., WGS84)


def test_apply_helmert_identity():
    params = HelmertParameters(0., 0., 0., 0., 0., 0., 0.)
    assert apply_helmert(MUSCAT_ECEF, params) == MUSCAT_ECEF
    assert apply_helmert(MUSCAT_ECEF, params, 'inverse') == MUSCAT_ECEF


def test_apply_helmert_translation():
    params = HelmertParameters(10., 20., 30., 0., 0., 0., 0.)
    x, y, z = apply_helmert(CartesianPoint(1., 2., 3.), params)
    assert (x, y, z) == approx((11., 22., 33.))

    x, y, z = apply_helmert(CartesianPoint(1., 2., 3.), params, 'inverse')
    assert (x, y, z) == approx((-9., -18., -27.))


def test_apply_helmert_scale_and_rotation():
    # 1 ppm scale on a 1000km axis-aligned vector adds 1 meter
    params = HelmertParameters(0., 0., 0., 0., 0., 0., 1.)
    x, y, z = apply_helmert(CartesianPoint(1_000_000., 0., 0.), params)
    assert (x, y, z) == approx((1_000_001., 0., 0.))

    # Position Vector: positive rz rotates X towards +Y
    rz_arcsec = 1.
    params = HelmertParameters(0., 0., 0., 0., 0., rz_arcsec, 0.)
    x, y, z = apply_helmert(CartesianPoint(1_000_000., 0., 0.), params)
    assert x == approx(1_000_000.)
    assert y == approx(1_000_000. * 4.84813681109536e-6, rel=1e-12)
    assert z == 0.


def test_apply_helmert_inverse_consistency():
    forward = apply_helmert(MUSCAT_ECEF, WGS84_TO_PSD93, 'forward')

    # The shift between the two frames is several hundred meters
    assert abs(forward.x - MUSCAT_ECEF.x) > 10.

    # Negating the parameters is a first-order inverse; the residual is centimeters
    back = apply_helmert(forward, WGS84_TO_PSD93, 'inverse')
    assert back.x == approx(MUSCAT_ECEF.x, abs=0.05)
    assert back.y == approx(MUSCAT_ECEF.y, abs=0.05)
    assert back.z == approx(MUSCAT_ECEF.z, abs=0.05)

    # Identical to feeding the negated parameters through the forward formula
    assert back == apply_helmert(forward, WGS84_TO_PSD93.inverse(), 'forward')


def test_apply_helmert_bad_direction():
    with pytest.raises(ValueError):
        apply_helmert(MUSCAT_ECEF, WGS84_TO_PSD93, 'backward')
