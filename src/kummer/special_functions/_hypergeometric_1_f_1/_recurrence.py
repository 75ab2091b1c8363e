"""Three-term recurrences of 1F1 in its parameters.

In ``a`` (DLMF 13.3.1)::

    (b - a) M(a - 1) + (2a - b + x) M(a) - a M(a + 1) = 0

and in ``b`` (DLMF 13.3.2)::

    b (b - 1) M(b - 1) + b (1 - b - x) M(b) + x (b - a) M(b + 1) = 0

A recurrence only reproduces M in the direction in which M dominates the
second solution; the callers pick the direction.
"""

import dataclasses
import math

from .._constants import RESCALE_THRESHOLD
from .._primitives import exp_sign
from .._result import Result, Status, worst


@dataclasses.dataclass
class RecurrenceState:
    """Two consecutive members of a recurrence.

    The members are stored as ``value * exp(log_scale)`` so long runs can
    neither overflow nor underflow. ``parameter`` is the shifted
    parameter (``a`` or ``b``) of ``current``; ``previous`` is the member
    one step behind it in the direction of travel.
    """

    parameter: float
    previous: float
    current: float
    log_scale: float = 0.0
    steps: int = 0

    def advance(self, following: float, step: float) -> None:
        self.previous = self.current
        self.current = following
        self.parameter += step
        self.steps += 1
        magnitude = max(abs(self.previous), abs(self.current))
        if magnitude > RESCALE_THRESHOLD or 0.0 < magnitude < 1.0 / RESCALE_THRESHOLD:
            self.previous /= magnitude
            self.current /= magnitude
            self.log_scale += math.log(magnitude)

    def result(self, status: Status = Status.SUCCESS) -> Result:
        """Value of ``current`` when the seeds were true values."""
        if self.current == 0.0:
            return Result(0.0, status)
        value = exp_sign(math.log(abs(self.current)) + self.log_scale, self.current)
        if not value.ok:
            return value
        return Result(value.value, worst(value.status, status))

    def normalized(self, reference: Result, seed: float = 1.0) -> Result:
        """Rescale a run started from an arbitrary ``seed``.

        ``reference`` is the true value of the member at the end of the
        run; the value returned is the true member the run started from.
        """
        if not reference.ok:
            return Result.failure(reference.status)
        if reference.value == 0.0:
            return Result.failure(Status.INTERNAL_FAILURE)
        if self.current == 0.0:
            return Result.failure(Status.OVERFLOW)
        log_value = (
            math.log(abs(reference.value))
            + math.log(abs(seed))
            - math.log(abs(self.current))
            - self.log_scale
        )
        sign = math.copysign(1.0, reference.value) * math.copysign(1.0, seed) * math.copysign(1.0, self.current)
        value = exp_sign(log_value, sign)
        if not value.ok:
            return value
        return Result(value.value, reference.status)


def recur_a_upward(state: RecurrenceState, b: float, x: float, steps: int) -> RecurrenceState:
    """Step ``a -> a + 1``; stable where ``b < 2a + x``."""
    for _ in range(steps):
        a = state.parameter
        following = ((b - a) * state.previous + (2.0 * a - b + x) * state.current) / a
        state.advance(following, 1.0)
    return state


def recur_a_downward(state: RecurrenceState, b: float, x: float, steps: int) -> RecurrenceState:
    """Step ``a -> a - 1``; stable where ``b > 2a + x``."""
    for _ in range(steps):
        a = state.parameter
        following = (a * state.previous - (2.0 * a - b + x) * state.current) / (b - a)
        state.advance(following, -1.0)
    return state


def recur_b_downward(state: RecurrenceState, a: float, x: float, steps: int) -> RecurrenceState:
    """Step ``b -> b - 1``; M is the minimal solution as ``b -> +inf``."""
    for _ in range(steps):
        b = state.parameter
        following = ((x + b - 1.0) * state.current - x * (b - a) / b * state.previous) / (b - 1.0)
        state.advance(following, -1.0)
    return state
