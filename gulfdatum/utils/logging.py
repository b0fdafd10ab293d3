"""
Logging utility for gulfdatum.

Conversions never fail on out-of-domain input unless called with strict=True;
they report it through this logger instead, once per distinct message.
"""

__all__ = ['LOGGER', 'reset_warnings', 'warn_once']

import logging
from typing import Set

LOGGER = logging.getLogger('gulfdatum')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)

_WARNINGS: Set[str] = set()


def warn_once(warning: str) -> None:
    """
    Logs a warning through the package logger, unless the same message has
    already been logged by this process.

    Args:
        warning:
            The warning message

    Returns:
        None
    """
    if warning not in _WARNINGS:
        LOGGER.warning(warning)
        _WARNINGS.add(warning)


def reset_warnings() -> None:
    """Forgets previously logged warnings so they will be logged again"""
    _WARNINGS.clear()
