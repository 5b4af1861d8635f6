"""Closed real interval [min, max] used as an integration or search domain."""

from dataclasses import dataclass

from numcalc.status import InvalidRangeError, reports_status


@dataclass(frozen=True)
class Interval:
    """Immutable [min, max] with min <= max."""
    min: float
    max: float

    def __post_init__(self):
        if not self.min <= self.max:
            raise InvalidRangeError(f"min {self.min} > max {self.max}")

    @property
    def width(self) -> float:
        return self.max - self.min

    @property
    def midpoint(self) -> float:
        return (self.min + self.max) / 2


@reports_status()
def make_range(min: float, max: float) -> Interval:
    return Interval(float(min), float(max))


def range_width(interval: Interval) -> float:
    return interval.width
