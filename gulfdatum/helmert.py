"""
7-parameter Helmert similarity transform between two cartesian frames
"""

__all__ = ['apply_helmert']

from typing import Literal

from gulfdatum.models import CartesianPoint, HelmertParameters, WGS84_TO_PSD93

_DIRECTIONS = ('forward', 'inverse')


def apply_helmert(
    point: CartesianPoint,
    params: HelmertParameters = WGS84_TO_PSD93,
    direction: Literal['forward', 'inverse'] = 'forward',
) -> CartesianPoint:
    """
    Applies a Helmert transform using the Position Vector convention
    (EPSG method 9606), linearized for small rotations:

        X' = X + dx + s*X - rz*Y + ry*Z
        Y' = Y + dy + rz*X + s*Y - rx*Z
        Z' = Z + dz - ry*X + rx*Y + s*Z

    The inverse direction negates all seven parameters and reuses the same
    formula, which is exact only to first order in the parameters.

    Args:
        point:
            The cartesian point, in the source frame for 'forward' or the
            target frame for 'inverse'

        params:
            (Default WGS84 -> PSD93) The transform parameters

        direction:
            (Default 'forward') Either 'forward' or 'inverse'

    Returns:
        CartesianPoint in the other frame
    """
    if direction not in _DIRECTIONS:
        raise ValueError(
            f"Unknown Helmert direction '{direction}'. Options: {list(_DIRECTIONS)}"
        )

    if direction == 'inverse':
        params = params.inverse()

    x, y, z = point
    rx, ry, rz = params.rotations_radians
    s = params.scale_factor

    return CartesianPoint(
        x + params.dx + s * x - rz * y + ry * z,
        y + params.dy + rz * x + s * y - rx * z,
        z + params.dz - ry * x + rx * y + s * z,
    )
