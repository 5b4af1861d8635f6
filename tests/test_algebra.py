"""Tests for gcd and lcm."""

from numcalc.algebra import gcd, lcm
from numcalc.status import Status
from utils import assert_ok, assert_status


def test_gcd():
    assert assert_ok(gcd(12, 18)) == 6
    assert assert_ok(gcd(18, 12)) == 6
    assert assert_ok(gcd(17, 5)) == 1


def test_gcd_with_zero():
    assert assert_ok(gcd(0, 9)) == 9
    assert assert_ok(gcd(9, 0)) == 9


def test_gcd_zero_zero_is_invalid():
    assert_status(gcd(0, 0), Status.INVALID_OPERATION, 0)


def test_gcd_negative():
    assert_status(gcd(-4, 2), Status.INVALID_ARGUMENT, 0)


def test_lcm():
    assert assert_ok(lcm(4, 6)) == 12
    assert assert_ok(lcm(7, 3)) == 21


def test_lcm_zero():
    assert assert_ok(lcm(0, 0)) == 0
    assert assert_ok(lcm(0, 5)) == 0
