"""Factorial and binomial coefficient in fixed unsigned ranges.

fact/binom_coeff emulate 32-bit unsigned results, factl/binom_coeffl 64-bit.
"""

from numcalc.status import (Result, FactorialOverflowError, InvalidArgumentError,
                            reports_status)

UINT32_MAX = (1 << 32) - 1
UINT64_MAX = (1 << 64) - 1


def _factorial(x: int, limit: int) -> int:
    if x < 0:
        raise InvalidArgumentError(f"factorial of negative number {x}")
    res = 1
    for i in range(2, x + 1):
        res *= i
        if res > limit:
            raise FactorialOverflowError(f"{x}! exceeds {limit}")
    return res


def _binomial(m: int, n: int, fact) -> int | Result:
    if n < 0 or m < n:
        raise InvalidArgumentError(f"binomial({m}, {n}) needs 0 <= n <= m")
    # Factorial overflow is not avoided; the first failing term decides.
    terms = [fact(m), fact(n), fact(m - n)]
    for term in terms:
        if not term.ok:
            return Result(0, term.status)
    return terms[0].value // (terms[1].value * terms[2].value)


@reports_status(sentinel=0)
def fact(x: int) -> int:
    return _factorial(x, UINT32_MAX)


@reports_status(sentinel=0)
def factl(x: int) -> int:
    return _factorial(x, UINT64_MAX)


@reports_status(sentinel=0)
def binom_coeff(m: int, n: int) -> int:
    return _binomial(m, n, fact)


@reports_status(sentinel=0)
def binom_coeffl(m: int, n: int) -> int:
    return _binomial(m, n, factl)
