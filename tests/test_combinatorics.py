"""Tests for factorial and binomial coefficients."""

import math

from numcalc.combinatorics import fact, factl, binom_coeff, binom_coeffl
from numcalc.status import Status
from utils import assert_ok, assert_status


def test_fact_small():
    assert assert_ok(fact(0)) == 1
    assert assert_ok(fact(1)) == 1
    assert assert_ok(fact(5)) == 120


def test_fact_largest_32bit():
    assert assert_ok(fact(12)) == math.factorial(12)


def test_fact_overflow_32bit():
    assert_status(fact(13), Status.FACTORIAL_OVERFLOW, 0)
    assert fact(13).value == 0


def test_factl_range():
    assert assert_ok(factl(13)) == math.factorial(13)
    assert assert_ok(factl(20)) == math.factorial(20)
    assert_status(factl(21), Status.FACTORIAL_OVERFLOW, 0)


def test_fact_negative():
    assert_status(fact(-1), Status.INVALID_ARGUMENT, 0)


def test_binom():
    assert assert_ok(binom_coeff(5, 2)) == 10
    assert assert_ok(binom_coeff(5, 0)) == 1
    assert assert_ok(binom_coeff(5, 5)) == 1


def test_binom_m_less_than_n():
    r = binom_coeff(2, 5)
    assert_status(r, Status.INVALID_ARGUMENT, 0)
    assert r.value == 0


def test_binom_wide():
    assert assert_ok(binom_coeffl(20, 10)) == math.comb(20, 10)
    assert_status(binom_coeffl(2, 3), Status.INVALID_ARGUMENT, 0)


def test_binom_intermediate_overflow_is_reported():
    # C(13, 1) = 13 fits, but 13! does not
    assert_status(binom_coeff(13, 1), Status.FACTORIAL_OVERFLOW, 0)
    assert assert_ok(binom_coeffl(13, 1)) == 13
