"""Process-wide numeric settings: differentiation step and integration bin count.

Defaults come from NUMCALC_DX / NUMCALC_BINS when set, else 1e-8 and 1000.
Use reset() at test start to restore them. Not synchronised: the settings are
shared by every caller in the process.
"""

import logging
import os

from numcalc.status import InvalidArgumentError, NegativeStepError, reports_status

logger = logging.getLogger(__name__)

DEFAULT_DX = float(os.getenv("NUMCALC_DX", "1e-8"))
DEFAULT_BINS = int(os.getenv("NUMCALC_BINS", "1000"))


class Settings:
    """Step size for forward differences and bin count for bin integration."""

    __slots__ = ('dx', 'bins')

    def __init__(self, dx: float = DEFAULT_DX, bins: int = DEFAULT_BINS):
        self.dx = dx
        self.bins = bins

    def __repr__(self):
        return f"Settings(dx={self.dx!r}, bins={self.bins!r})"


# Global instance
_settings = Settings()


def reset():
    """Restore the default step and bin count."""
    global _settings
    _settings = Settings()


@reports_status()
def set_dx(dx: float):
    if dx < 0:
        raise NegativeStepError(f"dx must be >= 0, got {dx}")
    logger.debug("dx %r -> %r", _settings.dx, dx)
    _settings.dx = float(dx)


def get_dx() -> float:
    return _settings.dx


@reports_status()
def set_bins(n: int):
    if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
        raise InvalidArgumentError(f"bin count must be a positive integer, got {n!r}")
    logger.debug("bins %r -> %r", _settings.bins, n)
    _settings.bins = n


def get_bins() -> int:
    return _settings.bins
