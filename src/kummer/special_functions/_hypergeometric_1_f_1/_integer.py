"""1F1(m; n; x) for integer parameters."""

import math

from .._constants import SPECIALISED_ASYMPTOTIC_ARGUMENT
from .._primitives import exp, exp_sign, exprel, exprel_n
from .._result import Result, Status, worst
from ._asymptotic import asymptotic_negative_x, asymptotic_positive_x, companion_negligible
from ._continued_fraction import shift_ratio
from ._generic import negative_a_positive_x
from ._recurrence import RecurrenceState, recur_a_downward, recur_a_upward
from ._reflection import exp_times
from ._series import convergent_series, negative_integer_polynomial
from ._special_cases import b_equals_2a, diagonal_end_step, diagonal_step


def _exp_polynomial(x: float, polynomial: float) -> Result:
    # exp(x) * polynomial with the overflow decided in log space.
    if polynomial == 0.0:
        return Result(0.0)
    return exp_sign(x + math.log(abs(polynomial)), polynomial)


def _diagonal_seeds(n: int, x: float):
    # M(a_start - 1, n, x) and M(a_start, n, x) on either side of n = 2a.
    if n % 2 == 0:
        a_start = n // 2 + 1
        if n == 2:
            return a_start, exprel(x), exp(x)
        lower = b_equals_2a(n // 2, x)
        far = b_equals_2a(n // 2 + 1, x)
        status = worst(lower.status, far.status)
        if not status.usable:
            return a_start, Result.failure(status), Result.failure(status)
        upper, _ = diagonal_end_step(n // 2, n, x, lower.value, far.value)
        return a_start, lower, Result.checked(upper, status)
    a_start = (n + 1) // 2
    if n == 1:
        return a_start, Result(1.0), exp(x)
    corner = b_equals_2a((n - 1) // 2, x)
    far = b_equals_2a((n + 1) // 2, x)
    status = worst(corner.status, far.status)
    if not status.usable:
        return a_start, Result.failure(status), Result.failure(status)
    upper, lower = diagonal_step((n - 1) // 2, n - 1, x, corner.value, far.value)
    return a_start, Result.checked(lower, status), Result.checked(upper, status)


def _negative_m_positive_x(m: int, n: int, x: float) -> Result:
    # The polynomial alternates; when it cancels, run down in b instead.
    polynomial = convergent_series(m, n, x)
    if polynomial.status == Status.SUCCESS:
        return polynomial.result()
    return negative_a_positive_x(float(m), float(n), x)


def _positive(m: int, n: int, x: float) -> Result:
    ax = abs(x)
    if m == n:
        return exp(x)
    if m == 1:
        return exprel_n(n - 1, x)
    if n == m + 1:
        # Kummer image is 1F1(1; m + 1; -x).
        return exp_times(x, exprel_n(m, -x))
    if m == n + 1:
        return _exp_polynomial(x, 1.0 + x / n)
    if m == n + 2:
        return _exp_polynomial(x, 1.0 + x / n * (2.0 + x / (n + 1.0)))
    if n == 2 * m:
        return b_equals_2a(m, x)
    if (n < 10 and m < 10 and ax < 5.0) or n > m * ax or (n > m and ax < 5.0):
        return convergent_series(m, n, x).result()
    if m > n:
        if n >= -x:
            # Upward from M(n, n) = e^x and M(n + 1, n) = e^x (1 + x/n).
            state = RecurrenceState(parameter=n + 1.0, previous=1.0, current=1.0 + x / n, log_scale=x)
            return recur_a_upward(state, n, x, m - n - 1).result()
        # Kummer image has a negative integer a and a positive argument.
        return exp_times(x, _negative_m_positive_x(n - m, n, -x))
    if n > 2 * m + x:
        ratio = shift_ratio(m, n, x)
        if ratio.status not in (Status.SUCCESS, Status.MAX_ITERATIONS):
            return Result.failure(ratio.status)
        state = RecurrenceState(parameter=float(m), previous=ratio.value, current=1.0)
        recur_a_downward(state, n, x, m)
        normalized = state.normalized(Result(1.0))
        if not normalized.ok:
            return normalized
        return Result(normalized.value, worst(normalized.status, ratio.status))
    if 2 * m > n:
        a_start, lower, upper = _diagonal_seeds(n, x)
        status = worst(lower.status, upper.status)
        if not status.usable:
            return Result.failure(status)
        state = RecurrenceState(parameter=float(a_start), previous=lower.value, current=upper.value)
        return recur_a_upward(state, n, x, m - a_start).result(status)
    # 2m <= n <= 2m + x: upward to a = b and normalize against e^x.
    ratio = shift_ratio(m, n, x)
    if ratio.status not in (Status.SUCCESS, Status.MAX_ITERATIONS):
        return Result.failure(ratio.status)
    state = RecurrenceState(parameter=m + 1.0, previous=1.0, current=ratio.value)
    recur_a_upward(state, n, x, n - m - 1)
    normalized = state.normalized(exp(x))
    if not normalized.ok:
        return normalized
    return Result(normalized.value, worst(normalized.status, ratio.status))


def _both_negative(m: int, n: int, x: float) -> Result:
    # n <= m <= -1; the polynomial has one-signed terms for x > 0. The
    # Kummer transformation does not hold for the truncated series, so
    # x < 0 sums the alternating polynomial with its rounding estimate.
    if x > 0.0:
        return negative_integer_polynomial(m, n, x)
    return convergent_series(m, n, x).result()


def integer_parameters(m: int, n: int, x: float) -> Result:
    """1F1(m; n; x) for integers ``m`` and ``n``."""
    if x == 0.0:
        return Result(1.0)
    if m == n:
        return exp(x)
    if n == 0:
        return Result.failure(Status.DOMAIN_ERROR)
    if m == 0:
        return Result(1.0)
    if n < 0 and (m < n or m > 0):
        return Result.failure(Status.DOMAIN_ERROR)
    if (
        x > SPECIALISED_ASYMPTOTIC_ARGUMENT
        and m > 0
        and n > 0
        and max(1.0, abs(n - m)) * max(1.0, abs(1.0 - m)) < 0.5 * x
        and companion_negligible(m, n, x)
    ):
        asymptotic = asymptotic_positive_x(m, n, x)
        if asymptotic.status == Status.SUCCESS:
            return asymptotic.result()
    if (
        x < -SPECIALISED_ASYMPTOTIC_ARGUMENT
        and n > 0
        and n > m
        and max(1.0, abs(m)) * max(1.0, abs(1.0 + m - n)) < 0.5 * abs(x)
        and companion_negligible(m, n, x)
    ):
        asymptotic = asymptotic_negative_x(m, n, x)
        if asymptotic.status == Status.SUCCESS:
            return asymptotic.result()
    if m < 0 and n < 0:
        return _both_negative(m, n, x)
    if m < 0:
        if x < 0.0:
            return negative_integer_polynomial(m, n, x)
        return _negative_m_positive_x(m, n, x)
    return _positive(m, n, x)
