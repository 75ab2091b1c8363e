import enum
import math
from typing import NamedTuple


class Status(enum.IntEnum):
    """Outcome of an evaluation, ordered from best to worst.

    ``SUCCESS`` and ``PRECISION_LOSS`` carry usable values; every other
    status means the value must not be relied upon.
    """

    SUCCESS = 0
    PRECISION_LOSS = 1
    MAX_ITERATIONS = 2
    UNDERFLOW = 3
    OVERFLOW = 4
    DOMAIN_ERROR = 5
    INTERNAL_FAILURE = 6

    @property
    def usable(self) -> bool:
        return self <= Status.PRECISION_LOSS


def worst(*statuses: Status) -> Status:
    """Return the most severe of ``statuses``."""
    return Status(max(statuses, default=Status.SUCCESS))


class Result(NamedTuple):
    """Value of a special function together with its status.

    Parameters
    ----------
    value : float
        Computed value. ``0.0`` whenever ``status`` reports a failure,
        except ``MAX_ITERATIONS`` which keeps the last partial estimate.
    status : Status
        How far ``value`` can be trusted.
    """

    value: float
    status: Status = Status.SUCCESS

    @classmethod
    def failure(cls, status: Status) -> "Result":
        return cls(0.0, status)

    @classmethod
    def checked(cls, value: float, status: Status = Status.SUCCESS) -> "Result":
        """Build a result, mapping a non-finite value to ``OVERFLOW``."""
        if not math.isfinite(value):
            return cls.failure(Status.OVERFLOW)
        return cls(value, status)

    @property
    def ok(self) -> bool:
        return self.status.usable


class Approximation(NamedTuple):
    """Value from an iterative evaluator with its estimated relative error.

    Internal to the evaluators; the precision decides whether a value is
    accepted or another method is tried.
    """

    value: float
    precision: float
    status: Status = Status.SUCCESS

    def result(self) -> Result:
        # An exhausted iteration still reports its last estimate.
        if self.status.usable or self.status == Status.MAX_ITERATIONS:
            return Result.checked(self.value, self.status)
        return Result.failure(self.status)


__all__ = ["Approximation", "Result", "Status", "worst"]
