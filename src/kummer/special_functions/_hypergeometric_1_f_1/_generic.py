"""1F1(a; b; x) for parameters away from every special case.

The positive case follows the stability analysis of the recurrence in
``a``: upward is stable for ``b < 2a + x`` and downward for
``b > 2a + x``. Runs started from an arbitrary seed are normalized
against an independently computed value at the far end. Negative ``a``
with positive ``x`` runs the recurrence in ``b`` instead, down from a
``b`` large enough for the series.
"""

import math

from .._constants import MAX_RECURRENCE_STEPS
from .._result import Result, Status, worst
from ._asymptotic import large_negative_a
from ._continued_fraction import shift_ratio
from ._recurrence import RecurrenceState, recur_a_downward, recur_a_upward, recur_b_downward
from ._reflection import Evaluator, exp_times
from ._series import convergent_series
from ._special_cases import b_near_a, descend_b, small_a


def _upward_from_b(a: float, b: float, x: float, depth: int) -> Result:
    # Both seeds sit within one of a = b, so the recurrence starts from
    # true values; stable because b >= -x.
    steps = int(math.floor(a - b))
    eps = a - b - steps
    lower = b_near_a(eps - 1.0, b, x, depth)
    upper = b_near_a(eps, b, x, depth)
    status = worst(lower.status, upper.status)
    if not status.usable:
        return Result.failure(status)
    state = RecurrenceState(parameter=b + eps, previous=lower.value, current=upper.value)
    return recur_a_upward(state, b, x, steps).result(status)


def _downward_to_small_a(a: float, b: float, x: float) -> Result:
    ratio = shift_ratio(a, b, x)
    if ratio.status not in (Status.SUCCESS, Status.MAX_ITERATIONS):
        return Result.failure(ratio.status)
    steps = int(math.ceil(a - 0.5))
    state = RecurrenceState(parameter=a, previous=ratio.value, current=1.0)
    recur_a_downward(state, b, x, steps)
    reference = small_a(a - steps, b, x)
    normalized = state.normalized(reference)
    if not normalized.ok:
        return normalized
    return Result(normalized.value, worst(normalized.status, ratio.status))


def _upward_to_b(a: float, b: float, x: float, depth: int) -> Result:
    ratio = shift_ratio(a, b, x)
    if ratio.status not in (Status.SUCCESS, Status.MAX_ITERATIONS):
        return Result.failure(ratio.status)
    steps = max(int(math.ceil(b - a - 1.5)), 0)
    state = RecurrenceState(parameter=a + 1.0, previous=1.0, current=ratio.value)
    recur_a_upward(state, b, x, steps)
    reference = b_near_a(state.parameter - b, b, x, depth)
    normalized = state.normalized(reference)
    if not normalized.ok:
        return normalized
    return Result(normalized.value, worst(normalized.status, ratio.status))


def generic_positive(a: float, b: float, x: float, depth: int = 0) -> Result:
    """1F1(a; b; x) for ``a > 0`` and ``b > 0``."""
    ax = abs(x)
    if (b < 10.0 and a < 10.0 and ax < 5.0) or b > a * ax or (b > a and ax < 5.0):
        return convergent_series(a, b, x).result()
    if abs(b - a) <= 1.0:
        return b_near_a(a - b, b, x, depth)
    if a > b + 1.0:
        if b >= -x:
            return _upward_from_b(a, b, x, depth)
        # Kummer image has b - a < -1 and a positive argument.
        return exp_times(x, negative_a_positive_x(b - a, b, -x))
    if b > 2.0 * a + x:
        return _downward_to_small_a(a, b, x)
    return _upward_to_b(a, b, x, depth)


def negative_a_positive_x(a: float, b: float, x: float) -> Result:
    """1F1(a; b; x) for ``a < 0``, ``b > 0`` and ``x > 0``.

    The terms of the series alternate in sign while ``k < -a``, losing
    about ``((1 + x/b) / (1 - x/b))^{-a}``, which is near ``exp(2)`` once
    ``b >= max(1.4, -a) x``. The seeds are summed there and the
    recurrence in ``b`` brings them down. Runs longer than
    ``MAX_RECURRENCE_STEPS`` use the large negative ``a`` asymptotic form.
    """
    steps = max(int(math.ceil(max(1.4, -a) * x - b)) + 1, 0)
    if steps > MAX_RECURRENCE_STEPS:
        return large_negative_a(a, b, x)
    return descend_b(a, b, x, steps)


def b_recurrence(a: float, b: float, x: float, evaluate: Evaluator, depth: int = 0) -> Result:
    """1F1(a; b; x) for negative non-integer ``b``.

    Two seeds with ``b`` lifted into ``(1, 3)`` come from ``evaluate``,
    then the recurrence in ``b`` runs down. For ``x > 0`` the run is on
    M itself. For ``x < 0`` it is on the Kummer image
    ``M(b - a, b, -x)``, whose seeds are ``M(a + n, b + n, x)`` up to a
    common factor ``exp(x)``, so the walk follows the diagonal and
    needs no reflection of its own.
    """
    n = int(math.ceil(-b)) + 1
    top = b + n
    if x > 0.0:
        upper = evaluate(a, top + 1.0, x, depth)
        lower = evaluate(a, top, x, depth)
        fixed, argument = a, x
    else:
        upper = evaluate(a + n + 1.0, top + 1.0, x, depth)
        lower = evaluate(a + n, top, x, depth)
        fixed, argument = b - a, -x
    status = worst(upper.status, lower.status)
    if not status.usable:
        return Result.failure(status)
    state = RecurrenceState(parameter=top, previous=upper.value, current=lower.value)
    return recur_b_downward(state, fixed, argument, n).result(status)
