"""Real polynomials in one variable: construction, calculus, comparison, formatting."""

from typing import Callable, Sequence

import numpy as np

from numcalc.interval import Interval
from numcalc.status import (Result, Status, InvalidArgumentError,
                            reports_status)

DEFAULT_FORMAT = "%g"


class Polynomial:
    """Polynomial over the reals. coeffs[0] = constant term."""

    __slots__ = ('coeffs',)

    def __init__(self, coeffs: Sequence[float]):
        if len(coeffs) == 0:
            raise InvalidArgumentError("a polynomial needs at least one coefficient")
        self.coeffs = tuple(float(c) for c in coeffs)

    @property
    def degree(self) -> int:
        return len(self.coeffs) - 1

    def leading(self) -> float:
        return self.coeffs[-1]

    def trailing(self) -> float:
        return self.coeffs[0]

    def is_constant(self) -> bool:
        return self.degree == 0

    def evaluate(self, x: float) -> float:
        """Evaluate polynomial at x using Horner's method in float64."""
        x = np.float64(x)
        result = np.float64(0.0)
        with np.errstate(over='ignore', invalid='ignore'):
            for coeff in reversed(self.coeffs):
                result = result * x + coeff
        return float(result)

    __call__ = evaluate

    def derivative(self) -> 'Polynomial':
        if self.degree == 0:
            return Polynomial([0.0])
        return Polynomial([self.coeffs[k + 1] * (k + 1) for k in range(self.degree)])

    def antiderivative(self, constant: float = 0.0) -> 'Polynomial':
        """Antiderivative whose constant term is `constant`."""
        coeffs = [constant]
        for k, c in enumerate(self.coeffs):
            coeffs.append(c / (k + 1))
        return Polynomial(coeffs)

    def integrate(self, interval: Interval) -> float:
        """Definite integral over interval via the zero-constant antiderivative."""
        prim = self.antiderivative(0.0)
        return prim.evaluate(interval.max) - prim.evaluate(interval.min)

    def copy(self) -> 'Polynomial':
        return Polynomial(self.coeffs)

    def format(self, fmt: str = DEFAULT_FORMAT) -> str:
        """Terms in ascending power: "<sign> <|coeff|>x^<k> " each."""
        parts = []
        for k, c in enumerate(self.coeffs):
            parts.append("- " if c < 0 else "+ ")
            parts.append(fmt % abs(c))
            parts.append(f"x^{k} ")
        return "".join(parts)

    def __eq__(self, other):
        if isinstance(other, Polynomial):
            return self.coeffs == other.coeffs
        return NotImplemented

    def __hash__(self):
        return hash(self.coeffs)

    def __repr__(self):
        return f"Polynomial({list(self.coeffs)!r})"


def compare(p: Polynomial, q: Polynomial) -> int:
    """Legacy comparison: 0 if equal, else a signed distance.

    Different degrees give deg(p) - deg(q). Same degree with a mismatch at
    the lowest differing index i gives deg(p) + 1 - i. Not monotonic and
    not a total order; do not use it as a sort key.
    """
    if p.degree != q.degree:
        return p.degree - q.degree
    for i, (a, b) in enumerate(zip(p.coeffs, q.coeffs)):
        if a != b:
            return p.degree + 1 - i
    return 0


def _require(p: Polynomial | None, what: str = "polynomial"):
    if p is None:
        raise InvalidArgumentError(f"{what} is required")


# --- Status-reporting operations ---

@reports_status()
def make_poly(degree: int, coeffs: Sequence[float]) -> Polynomial:
    """Copy the first degree + 1 values of coeffs into a new Polynomial."""
    if degree < 0:
        raise InvalidArgumentError(f"degree must be >= 0, got {degree}")
    if coeffs is None or len(coeffs) < degree + 1:
        have = 0 if coeffs is None else len(coeffs)
        raise InvalidArgumentError(f"degree {degree} needs {degree + 1} coefficients, got {have}")
    return Polynomial(coeffs[:degree + 1])


@reports_status(sentinel=0)
def poly_deg(p: Polynomial) -> int:
    _require(p)
    return p.degree


@reports_status(sentinel=0.0)
def poly_coeff(p: Polynomial, index: int) -> float | Result:
    """Coefficient of x^index. Past the degree, the leading coefficient is
    returned with INDEX_EXCEEDS_DEGREE instead of failing."""
    _require(p)
    if index < 0:
        raise InvalidArgumentError(f"index must be >= 0, got {index}")
    if index > p.degree:
        return Result(p.leading(), Status.INDEX_EXCEEDS_DEGREE)
    return p.coeffs[index]


@reports_status(sentinel=0.0)
def poly_lead(p: Polynomial) -> float:
    _require(p)
    return p.leading()


@reports_status(sentinel=0.0)
def poly_trail(p: Polynomial) -> float:
    _require(p)
    return p.trailing()


@reports_status(sentinel=False)
def poly_isconst(p: Polynomial) -> bool:
    _require(p)
    return p.is_constant()


@reports_status()
def poly_copy(p: Polynomial) -> Polynomial:
    _require(p)
    return p.copy()


@reports_status(sentinel=0.0)
def poly_eval(p: Polynomial, x: float) -> float:
    _require(p)
    return p.evaluate(x)


@reports_status()
def poly_diff(p: Polynomial) -> Polynomial:
    _require(p)
    return p.derivative()


@reports_status()
def poly_integ(p: Polynomial, c: float) -> Polynomial:
    _require(p)
    return p.antiderivative(c)


@reports_status(sentinel=0.0)
def poly_integ_range(p: Polynomial, interval: Interval) -> float:
    _require(p)
    _require(interval, "interval")
    return p.integrate(interval)


@reports_status(sentinel=0)
def poly_cmp(p: Polynomial, q: Polynomial) -> int:
    _require(p)
    _require(q)
    return compare(p, q)


@reports_status(sentinel="")
def poly_printf(p: Polynomial, fmt: str, dest: str = "") -> str:
    """Return dest with the formatted terms of p appended."""
    _require(p)
    return dest + p.format(fmt)


def poly_print(p: Polynomial, dest: str = "") -> Result:
    return poly_printf(p, DEFAULT_FORMAT, dest)


@reports_status()
def poly_func(p: Polynomial) -> Callable[[float], float]:
    """Unary function evaluating this particular polynomial."""
    _require(p)
    bound = p.copy()

    def f(x: float) -> float:
        return bound.evaluate(x)
    return f
