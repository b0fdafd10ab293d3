"""Exceptions raised by gulfdatum"""

__all__ = ['OutOfDomainError']


class OutOfDomainError(ValueError):
    """
    Raised by conversions called with strict=True when an input lies outside
    the range the formulas are valid for (e.g. latitude beyond +/-90 degrees,
    or a longitude too far from the UTM zone's central meridian).
    """
