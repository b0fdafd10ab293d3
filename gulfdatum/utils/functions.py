"""Module for miscellaneous multi-use functions"""

__all__ = ['check_domain', 'check_latitude']

import numpy as np

from gulfdatum.errors import OutOfDomainError
from gulfdatum.utils.logging import warn_once


def check_domain(violated, message: str, strict: bool = False) -> None:
    """
    Reports an out-of-domain input. Comparisons against NaN are False, so NaN
    inputs pass through unreported and propagate through the arithmetic.

    Args:
        violated:
            A boolean, or array of booleans, where True marks an offending value

        message:
            Description of the violation

        strict:
            (Default False) If True, raise OutOfDomainError instead of logging
            a warning

    Returns:
        None
    """
    if not np.any(violated):
        return

    if strict:
        raise OutOfDomainError(message)

    warn_once(f'{message} (this warning will not repeat)')


def check_latitude(latitude, strict: bool = False) -> None:
    """Flags latitudes beyond the poles"""
    check_domain(
        np.abs(latitude) > 90,
        'Latitude outside [-90, 90]; results will be numerically degraded',
        strict
    )
