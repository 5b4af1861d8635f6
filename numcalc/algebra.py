"""Greatest common divisor and least common multiple of non-negative integers."""

from numcalc.status import InvalidArgumentError, InvalidOperationError, reports_status


def _check_natural(*values: int):
    for v in values:
        if v < 0:
            raise InvalidArgumentError(f"expected a non-negative integer, got {v}")


def _euclid(m: int, n: int) -> int:
    while n:
        m, n = n, m % n
    return m


@reports_status(sentinel=0)
def gcd(m: int, n: int) -> int:
    """gcd(0, n) = n and gcd(m, 0) = m; gcd(0, 0) is undefined."""
    _check_natural(m, n)
    if m == 0 and n == 0:
        raise InvalidOperationError("gcd(0, 0) is undefined")
    return _euclid(m, n)


@reports_status(sentinel=0)
def lcm(m: int, n: int) -> int:
    _check_natural(m, n)
    if m == 0 or n == 0:
        return 0
    return m * n // _euclid(m, n)
