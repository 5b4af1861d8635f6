"""Numeric differentiation and secant root finding for unary real functions.

Arithmetic is IEEE float64: a zero denominator yields inf or nan instead of
raising, and no convergence check is made. The caller picks the step and the
iteration count.
"""

from typing import Callable

import numpy as np

from numcalc import settings
from numcalc.interval import Interval
from numcalc.status import InvalidArgumentError, reports_status

UnaryFunction = Callable[[float], float]


@reports_status(sentinel=0.0)
def secant(f: UnaryFunction, interval: Interval, iterations: int) -> float:
    """Approximate a root of f seeded with the interval endpoints."""
    if interval is None:
        raise InvalidArgumentError("interval is required")
    if iterations <= 0:
        raise InvalidArgumentError(f"iterations must be > 0, got {iterations}")

    x0 = np.float64(interval.min)
    x1 = np.float64(interval.max)
    x2 = x1
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        for _ in range(iterations):
            f0 = np.float64(f(x0))
            f1 = np.float64(f(x1))
            x2 = x1 - f1 * (x1 - x0) / (f1 - f0)
            x0, x1 = x1, x2
    return float(x2)


@reports_status(sentinel=0.0)
def diff(f: UnaryFunction, x: float) -> float:
    """Forward difference (f(x + dx) - f(x)) / dx with the global step."""
    dx = np.float64(settings.get_dx())
    x = np.float64(x)
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        return float((np.float64(f(x + dx)) - np.float64(f(x))) / dx)
