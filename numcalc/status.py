"""Operation outcomes: status codes, typed errors, results, last-status mirror.

Every public operation returns a Result carrying its value and Status.
Failures hold the legacy sentinel value (0, None, or a degraded substitute).
A thread-local last-status mirror is kept for callers that poll the outcome of
the most recent call instead of inspecting the Result.
"""

import functools
import logging
import threading
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable

logger = logging.getLogger(__name__)


class Status(IntEnum):
    OK = 0
    ALLOCATION_FAILURE = 101
    INVALID_ARGUMENT = 102
    INVALID_OPERATION = 201
    INDEX_EXCEEDS_DEGREE = 401
    FACTORIAL_OVERFLOW = 501
    INVALID_RANGE = 506
    NEGATIVE_STEP = 601


class NumcalcError(Exception):
    """Base class for failures raised inside numcalc operations."""
    status = Status.INVALID_ARGUMENT


class AllocationFailureError(NumcalcError, MemoryError):
    status = Status.ALLOCATION_FAILURE


class InvalidArgumentError(NumcalcError, ValueError):
    status = Status.INVALID_ARGUMENT


class InvalidOperationError(NumcalcError, ValueError):
    status = Status.INVALID_OPERATION


class IndexExceedsDegreeError(NumcalcError, IndexError):
    status = Status.INDEX_EXCEEDS_DEGREE


class FactorialOverflowError(NumcalcError, OverflowError):
    status = Status.FACTORIAL_OVERFLOW


class InvalidRangeError(NumcalcError, ValueError):
    status = Status.INVALID_RANGE


class NegativeStepError(NumcalcError, ValueError):
    status = Status.NEGATIVE_STEP


_ERRORS = {cls.status: cls for cls in (
    AllocationFailureError, InvalidArgumentError, InvalidOperationError,
    IndexExceedsDegreeError, FactorialOverflowError, InvalidRangeError,
    NegativeStepError,
)}


def error_for(status: Status) -> type[NumcalcError]:
    """Exception class raised by Result.unwrap() for a failed status."""
    if status is Status.OK:
        raise ValueError("Status.OK has no error class")
    return _ERRORS[status]


@dataclass(frozen=True)
class Result:
    """Outcome of a single operation. value is the sentinel when not ok."""
    value: Any
    status: Status = Status.OK

    @property
    def ok(self) -> bool:
        return self.status is Status.OK

    def unwrap(self):
        if not self.ok:
            raise error_for(self.status)(f"{self.status.name} (value={self.value!r})")
        return self.value


# --- Last-status mirror ---

_local = threading.local()


def last_status() -> Status:
    """Status of the most recent operation on this thread."""
    return getattr(_local, 'status', Status.OK)


def _set_status(status: Status):
    _local.status = status


def clear_status():
    _set_status(Status.OK)


def reports_status(sentinel=None) -> Callable:
    """Wrap an operation so it returns a Result and updates the mirror.

    Raised NumcalcError becomes Result(sentinel, err.status); MemoryError
    becomes ALLOCATION_FAILURE. A returned Result is passed through as is.
    """
    def decorate(fn):
        @functools.wraps(fn)
        def wrapper(*args, **kwargs) -> Result:
            try:
                out = fn(*args, **kwargs)
            except NumcalcError as err:
                logger.debug("%s failed: %s (%s)", fn.__name__, err.status.name, err)
                out = Result(sentinel, err.status)
            except MemoryError:
                logger.debug("%s failed: out of memory", fn.__name__)
                out = Result(sentinel, Status.ALLOCATION_FAILURE)
            if not isinstance(out, Result):
                out = Result(out)
            elif not out.ok:
                logger.debug("%s degraded: %s", fn.__name__, out.status.name)
            _set_status(out.status)
            return out
        return wrapper
    return decorate
