from pytest import approx

from gulfdatum import GeodeticPoint

# Latitude/longitude tolerances, in degrees
CENTIMETER_DEG = 1e-7
METER_DEG = 1e-5


def assert_geodetic_equal(p1: GeodeticPoint, p2: GeodeticPoint, abs_tol=CENTIMETER_DEG, height_tol=None):
    """
    Asserts that two geodetic points are equal within a specified absolute tolerance.

    Args:
        p1: The first GeodeticPoint
        p2: The second GeodeticPoint
        abs_tol: The absolute tolerance for latitude/longitude, in degrees.
                 Default is 1e-7 (approx 1.1cm at the equator).
        height_tol: The absolute tolerance for height in meters. Heights are not
                    compared if None.
    """
    try:
        assert p1.latitude == approx(p2.latitude, abs=abs_tol)
        assert p1.longitude == approx(p2.longitude, abs=abs_tol)

        if height_tol is not None:
            assert p1.height == approx(p2.height, abs=height_tol)
    except AssertionError as e:
        print(p1)
        print(p2)
        raise e
