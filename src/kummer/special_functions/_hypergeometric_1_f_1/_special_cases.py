"""Closed forms and restricted-parameter evaluators for 1F1(a; b; x)."""

import math
from typing import Tuple

from .._constants import (
    MAX_RECURRENCE_STEPS,
    PRECISION_TOLERANCE,
    SPECIALISED_ASYMPTOTIC_ARGUMENT,
    VANISHING_B_TOLERANCE,
)
from .._primitives import (
    bessel_inu_scaled,
    exp,
    exp_sign,
    expm1,
    exprel_n,
    log_gamma,
)
from .._result import Result, Status, worst
from ._asymptotic import asymptotic_negative_x, asymptotic_positive_x, companion_negligible
from ._luke import luke
from ._recurrence import RecurrenceState, recur_b_downward
from ._reflection import Evaluator, exp_times, kummer_reflection
from ._series import convergent_series, one_series


def vanishing_b(a: float, b: float, x: float, evaluate: Evaluator) -> Result:
    """1F1(a; b; x) for ``b -> 0``.

    Splitting off the first term of the series,

    .. math::

       M(a, b, x) = 1 + \\frac{a x}{b} M(a + 1, 2, x) + O(a x)

    The neglected part is of relative order ``|b|``. When ``a`` vanishes
    as well the tail is ``M(1, 2, x) = (e^x - 1) / x``, so the correction
    is ``(a / b) expm1(x)``.
    """
    if abs(a) < VANISHING_B_TOLERANCE:
        change = expm1(x)
        if not change.ok:
            return change
        status = Status.SUCCESS
        log_term = math.log(abs(a)) + math.log(abs(change.value)) - math.log(abs(b))
        sign = math.copysign(1.0, a) * math.copysign(1.0, change.value) * math.copysign(1.0, b)
    else:
        tail = evaluate(a + 1.0, 2.0, x, 0)
        if not tail.ok:
            return Result.failure(tail.status)
        status = tail.status
        if tail.value == 0.0:
            return Result(1.0, status)
        log_term = math.log(abs(a)) + math.log(abs(x)) + math.log(abs(tail.value)) - math.log(abs(b))
        sign = math.copysign(1.0, a) * math.copysign(1.0, x) * math.copysign(1.0, tail.value) * math.copysign(1.0, b)
    if abs(b) > PRECISION_TOLERANCE:
        status = worst(status, Status.PRECISION_LOSS)
    term = exp_sign(log_term, sign)
    if not term.ok:
        return term
    return Result.checked(1.0 + term.value, status)


def near_equal_parameters(a: float, b: float, x: float) -> Result:
    """1F1(a; a + eps; x) to first order in ``eps = b - a``.

    .. math::

       M(a, a + \\epsilon, x) = e^{ax/b}
       \\left(1 + \\epsilon x^2 (v_2 + v_3 x + \\cdots)\\right)

    with ``v2 = a / (2 b^2 (b + 1))`` and
    ``v3 = a (b - 2a) / (3 b^3 (b + 1)(b + 2))`` (Luke, Mathematical
    Functions and Their Approximations, p. 292).
    """
    eps = b - a
    exab = exp(a * x / b)
    if not exab.ok:
        return exab
    v2 = a / (2.0 * b * b * (b + 1.0))
    v3 = a * (b - 2.0 * a) / (3.0 * b * b * b * (b + 1.0) * (b + 2.0))
    v = v2 + v3 * x
    return Result.checked(exab.value * (1.0 + eps * x * x * v))


def descend_b(a: float, b: float, x: float, steps: int) -> Result:
    """1F1(a; b; x), ``x > 0``, by the recurrence in ``b`` from ``b + steps``.

    M is the minimal solution as ``b -> inf``, so the run down is stable
    and only the two seeds, summed directly, set the accuracy.
    """
    top = b + steps
    upper = convergent_series(a, top + 1.0, x)
    lower = convergent_series(a, top, x)
    status = worst(upper.status, lower.status)
    if not status.usable:
        return Result.failure(status)
    state = RecurrenceState(parameter=top, previous=upper.value, current=lower.value)
    return recur_b_downward(state, a, x, steps).result(status)


def _backward_from_large_b(a: float, b: float, x: float) -> Result:
    steps = int(math.ceil(1.4 * x - b)) + 1
    if steps > MAX_RECURRENCE_STEPS:
        return exp_times(x, luke(b - a, b, -x).result())
    return descend_b(a, b, x, steps)


def one(b: float, x: float) -> Result:
    """1F1(1; b; x) for ``b > 0``."""
    ax = abs(x)
    nearest = math.floor(b + 0.5)
    if b == 1.0:
        return exp(x)
    if b >= 1.4 * ax:
        return one_series(b, x).result()
    if b >= 1.0 and abs(b - nearest) < PRECISION_TOLERANCE:
        return exprel_n(int(nearest) - 1, x)
    if x > 0.0:
        if x > SPECIALISED_ASYMPTOTIC_ARGUMENT and b < 0.75 * x and companion_negligible(1.0, b, x):
            asymptotic = asymptotic_positive_x(1.0, b, x)
            if asymptotic.status == Status.SUCCESS:
                return asymptotic.result()
        steps = int(math.ceil(1.4 * x - b)) + 1
        if steps > MAX_RECURRENCE_STEPS:
            return exp_times(x, luke(b - 1.0, b, -x).result())
        # M(1, b - 1, x) = 1 + x / (b - 1) M(1, b, x)
        bp = b + steps
        seed = one_series(bp, x)
        m = seed.value
        for _ in range(steps):
            bp -= 1.0
            m = 1.0 + x / bp * m
        return Result.checked(m, seed.status)
    if ax < 10.0 and b < 10.0:
        return convergent_series(1.0, b, x).result()
    if ax >= SPECIALISED_ASYMPTOTIC_ARGUMENT and max(abs(2.0 - b), 1.0) < 0.99 * ax and companion_negligible(1.0, b, x):
        asymptotic = asymptotic_negative_x(1.0, b, x)
        if asymptotic.status == Status.SUCCESS:
            return asymptotic.result()
    return luke(1.0, b, x).result()


def small_a(a: float, b: float, x: float, depth: int = 0) -> Result:
    """1F1(a; b; x) for ``|a| <= 1`` and ``b > 0``.

    Never reflects, so it is safe at any reflection depth.
    """
    ax = abs(x)
    if a == 0.0:
        return Result(1.0)
    if a == 1.0:
        return one(b, x)
    if a == -1.0:
        return Result.checked(1.0 - x / b)
    if b >= 1.4 * ax:
        return convergent_series(a, b, x).result()
    if x > 0.0:
        if (
            x > SPECIALISED_ASYMPTOTIC_ARGUMENT
            and abs(b - a) * abs(1.0 - a) < 0.9 * x
            and companion_negligible(a, b, x)
        ):
            asymptotic = asymptotic_positive_x(a, b, x)
            if asymptotic.status == Status.SUCCESS:
                return asymptotic.result()
        return _backward_from_large_b(a, b, x)
    if ax < 10.0 and b < 10.0:
        return convergent_series(a, b, x).result()
    if (
        ax >= SPECIALISED_ASYMPTOTIC_ARGUMENT
        and max(abs(1.0 + a - b), 1.0) < 0.99 * ax
        and companion_negligible(a, b, x)
    ):
        asymptotic = asymptotic_negative_x(a, b, x)
        if asymptotic.status == Status.SUCCESS:
            return asymptotic.result()
    return luke(a, b, x).result()


def b_near_a(eps: float, b: float, x: float, depth: int) -> Result:
    """1F1(b + eps; b; x) for ``|eps| <= 1``, ``b > 0``, via Kummer and small a."""
    return kummer_reflection(small_a, b + eps, b, x, depth)


def b_equals_2a(a: float, x: float) -> Result:
    """1F1(a; 2a; x) for ``a >= 1/2`` through the modified Bessel function.

    .. math::

       M(a, 2a, x) = \\Gamma(a + \\tfrac{1}{2}) e^{\\max(x, 0)}
       \\left(\\frac{|x|}{4}\\right)^{1/2 - a}
       e^{-|x|/2} I_{a - 1/2}\\left(\\frac{|x|}{2}\\right)
    """
    if x == 0.0:
        return Result(1.0)
    bessel = bessel_inu_scaled(a - 0.5, 0.5 * abs(x))
    if not bessel.ok:
        return bessel
    if bessel.value == 0.0:
        # I_nu underflows for large order and small argument, where the
        # series is harmless.
        return convergent_series(a, 2.0 * a, x).result()
    log_gamma_value = log_gamma(a + 0.5)
    if not log_gamma_value.ok:
        return log_gamma_value
    log_value = (
        log_gamma_value.value
        + max(x, 0.0)
        + (0.5 - a) * math.log(0.25 * abs(x))
        + math.log(abs(bessel.value))
    )
    return exp_sign(log_value, 1.0)


def diagonal_step(a: float, b: float, x: float, m_ab: float, m_ap1_bp2: float) -> Tuple[float, float]:
    """From M(a, b) and M(a + 1, b + 2) get M(a + 1, b + 1) and M(a, b + 1)."""
    if a == b:
        return m_ab, m_ab - x / (b + 1.0) * m_ap1_bp2
    m_ap1_bp1 = m_ab - x * (a - b) / (b * (b + 1.0)) * m_ap1_bp2
    m_a_bp1 = (a * m_ap1_bp1 - b * m_ab) / (a - b)
    return m_ap1_bp1, m_a_bp1


def diagonal_end_step(a: float, b: float, x: float, m_ab: float, m_ap1_bp2: float) -> Tuple[float, float]:
    """From M(a, b) and M(a + 1, b + 2) get M(a + 1, b) and M(a + 1, b + 1)."""
    m_ap1_bp1 = m_ab - x * (a - b) / (b * (b + 1.0)) * m_ap1_bp2
    m_ap1_b = m_ab + x / b * m_ap1_bp1
    return m_ap1_b, m_ap1_bp1
