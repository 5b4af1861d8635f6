"""Tests for Interval construction and width."""

import math

import pytest

from numcalc.interval import Interval, make_range, range_width
from numcalc.status import Status, InvalidRangeError, last_status
from utils import assert_ok, assert_status


def test_make_range():
    r = assert_ok(make_range(1, 4))
    assert r.min == 1.0
    assert r.max == 4.0
    assert range_width(r) == 3.0


def test_make_range_degenerate():
    r = assert_ok(make_range(2.5, 2.5))
    assert range_width(r) == 0.0


def test_make_range_inverted():
    assert_status(make_range(3, 1), Status.INVALID_RANGE)
    assert make_range(3, 1).value is None


def test_width_does_not_touch_status():
    r = make_range(0, 1).value
    make_range(1, 0)
    assert range_width(r) == 1.0
    assert last_status() is Status.INVALID_RANGE


def test_constructor_raises():
    with pytest.raises(InvalidRangeError):
        Interval(1.0, 0.0)


def test_immutable():
    r = Interval(0.0, 1.0)
    with pytest.raises(AttributeError):
        r.min = -1.0


def test_midpoint():
    assert Interval(-2.0, 6.0).midpoint == 2.0


def test_make_range_nan_endpoint():
    assert_status(make_range(math.nan, 1), Status.INVALID_RANGE, None)
    assert_status(make_range(0, math.nan), Status.INVALID_RANGE, None)
