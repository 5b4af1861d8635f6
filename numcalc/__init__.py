"""Numeric utilities: polynomials, numeric calculus, combinatorics, gcd/lcm."""

import logging

from numcalc.status import (Status, Result, NumcalcError, last_status,
                            clear_status)
from numcalc.interval import Interval, make_range, range_width
from numcalc.polynomial import (Polynomial, make_poly, poly_deg, poly_coeff,
                                poly_lead, poly_trail, poly_isconst, poly_copy,
                                poly_eval, poly_diff, poly_integ, poly_integ_range,
                                poly_cmp, poly_print, poly_printf, poly_func)
from numcalc.settings import set_dx, get_dx, set_bins, get_bins
from numcalc.calculus import secant, diff
from numcalc.integrate import integrate_bins, integrate_rect, integrate_trap
from numcalc.combinatorics import fact, factl, binom_coeff, binom_coeffl
from numcalc.algebra import gcd, lcm

logging.getLogger(__name__).addHandler(logging.NullHandler())
