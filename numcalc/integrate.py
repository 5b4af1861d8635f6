"""Definite-integral approximations of unary real functions over an Interval."""

import logging
import math

from numcalc import settings
from numcalc.calculus import UnaryFunction
from numcalc.interval import Interval
from numcalc.status import InvalidArgumentError, reports_status

logger = logging.getLogger(__name__)


def _check(interval: Interval | None, subintervals: int = 0):
    if interval is None:
        raise InvalidArgumentError("interval is required")
    if subintervals < 0:
        raise InvalidArgumentError(f"subintervals must be >= 0, got {subintervals}")


@reports_status(sentinel=0.0)
def integrate_bins(f: UnaryFunction, interval: Interval) -> float:
    """Left Riemann sum over the global number of bins.

    The abscissa is accumulated in floating point and the loop runs while it
    stays <= max, so drift can add or drop a bin relative to the count.
    """
    _check(interval)
    step = interval.width / settings.get_bins()

    area = 0.0
    cur = interval.min
    evaluations = 0
    while cur <= interval.max:
        area += step * f(cur)
        evaluations += 1
        nxt = cur + step
        # a step below the spacing at cur, or an infinite abscissa, never advances
        if nxt == cur or not math.isfinite(nxt):
            break
        cur = nxt
    logger.debug("integrate_bins: %d evaluations for %d bins",
                 evaluations, settings.get_bins())
    return area


@reports_status(sentinel=0.0)
def integrate_rect(f: UnaryFunction, interval: Interval, subintervals: int) -> float:
    """Midpoint rule; composite over `subintervals` pieces when > 0."""
    _check(interval, subintervals)
    if subintervals == 0:
        return interval.width * f(interval.midpoint)

    h = interval.width / subintervals
    body = 0.0
    for k in range(subintervals):
        body += f(interval.min + (k + 0.5) * h)
    return h * body


@reports_status(sentinel=0.0)
def integrate_trap(f: UnaryFunction, interval: Interval, subintervals: int) -> float:
    """Trapezoid rule; composite over `subintervals` pieces when > 0."""
    _check(interval, subintervals)
    ends = f(interval.min) + f(interval.max)
    if subintervals == 0:
        return interval.width * ends / 2

    h = interval.width / subintervals
    body = ends / 2
    for k in range(1, subintervals):
        body += f(interval.min + k * h)
    return h * body
