"""Test utilities: sample functions, polynomial builders, assertion helpers."""

import math

from numcalc.interval import Interval
from numcalc.polynomial import Polynomial
from numcalc.status import Status, last_status


def poly(*coeffs):
    """Polynomial from coefficients listed low to high power."""
    return Polynomial(list(coeffs))


def interval(lo, hi):
    return Interval(float(lo), float(hi))


def one(x):
    return 1.0


def identity(x):
    return x


def square_minus_612(x):
    return x * x - 612


SQRT_612 = 6 * math.sqrt(17)


def assert_status(result, status, value=None):
    """Assert a Result's status, its mirror, and optionally its value."""
    assert result.status is status, f"got {result.status.name}, expected {status.name}"
    assert last_status() is status
    if value is not None:
        assert result.value == value, f"got {result.value!r}, expected {value!r}"


def assert_ok(result):
    assert_status(result, Status.OK)
    return result.value
