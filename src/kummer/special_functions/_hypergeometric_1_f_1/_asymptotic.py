"""Asymptotic forms of 1F1(a; b; x) for large |x| and for large -a.

The large-|x| forms are the two halves of the complete expansion (DLMF
13.7.2)

.. math::

   \\frac{M(a, b, x)}{\\Gamma(b)} \\sim
   \\frac{e^x x^{a-b}}{\\Gamma(a)} {}_2F_0(b - a, 1 - a; 1/x)
   + \\frac{(-x)^{-a}}{\\Gamma(b - a)} {}_2F_0(a, a - b + 1; -1/x)

where only one half is kept, so the other one has to be negligible.
"""

import math

from .._constants import DBL_EPSILON, LOG_DBL_EPSILON, LOG_DBL_MAX, LOG_DBL_MIN
from .._hypergeometric_2_f_0 import _hypergeometric_2_f_0_series
from .._primitives import exp_sign, is_nonpositive_integer, log_gamma_sign
from .._result import Approximation, Result, Status, worst


def _log_abs_reciprocal_gamma(x: float) -> float:
    if is_nonpositive_integer(x):
        return -math.inf
    return -math.lgamma(x)


def companion_negligible(a: float, b: float, x: float) -> bool:
    """Whether the half of the expansion dropped at this ``x`` is below eps.

    The dropped half is the ``(-x)^{-a}`` one for ``x > 0`` and the
    ``e^x`` one for ``x < 0``. A vanishing reciprocal gamma removes it.
    """
    log_abs_x = math.log(abs(x))
    if x > 0.0:
        log_kept = x + (a - b) * log_abs_x + _log_abs_reciprocal_gamma(a)
        log_dropped = -a * log_abs_x + _log_abs_reciprocal_gamma(b - a)
    else:
        log_kept = -a * log_abs_x + _log_abs_reciprocal_gamma(b - a)
        log_dropped = x + (a - b) * log_abs_x + _log_abs_reciprocal_gamma(a)
    if log_dropped == -math.inf:
        return True
    if log_kept == -math.inf:
        return False
    return log_dropped - log_kept < LOG_DBL_EPSILON


def _combine(log_prefactor: float, sign: float, series: Approximation, margin: float) -> Approximation:
    if not series.status.usable:
        return Approximation(0.0, 1.0, series.status)
    if series.value == 0.0:
        return Approximation(0.0, series.precision, series.status)
    log_value = log_prefactor + math.log(abs(series.value))
    if log_value > LOG_DBL_MAX - margin:
        return Approximation(0.0, 1.0, Status.OVERFLOW)
    if log_value < LOG_DBL_MIN:
        return Approximation(0.0, 1.0, Status.UNDERFLOW)
    value = exp_sign(log_value, sign * series.value).value
    return Approximation(value, series.precision, series.status)


def asymptotic_negative_x(a: float, b: float, x: float) -> Approximation:
    """1F1(a; b; x) for ``x -> -inf``.

    Requires ``b`` and ``b - a`` away from the non-positive integers.
    """
    log_gamma_b, sign_b = log_gamma_sign(b)
    log_gamma_bma, sign_bma = log_gamma_sign(b - a)
    if not (log_gamma_b.ok and log_gamma_bma.ok):
        return Approximation(0.0, 1.0, Status.DOMAIN_ERROR)
    series = _hypergeometric_2_f_0_series(a, 1.0 + a - b, -1.0 / x)
    log_prefactor = log_gamma_b.value - a * math.log(-x) - log_gamma_bma.value
    return _combine(log_prefactor, sign_b * sign_bma, series, 1.0)


def asymptotic_positive_x(a: float, b: float, x: float) -> Approximation:
    """1F1(a; b; x) for ``x -> +inf``.

    Requires ``a`` and ``b`` away from the non-positive integers.
    """
    log_gamma_b, sign_b = log_gamma_sign(b)
    log_gamma_a, sign_a = log_gamma_sign(a)
    if not (log_gamma_b.ok and log_gamma_a.ok):
        return Approximation(0.0, 1.0, Status.DOMAIN_ERROR)
    series = _hypergeometric_2_f_0_series(b - a, 1.0 - a, 1.0 / x)
    log_prefactor = log_gamma_b.value - log_gamma_a.value + x + (a - b) * math.log(x)
    return _combine(log_prefactor, sign_b * sign_a, series, 0.0)


def large_negative_a(a: float, b: float, x: float) -> Result:
    """Leading term of 1F1(a; b; x) for ``a -> -inf`` with ``0 < x < 2b - 4a``.

    Plancherel-Rotach type form, with ``x = (2b - 4a) cos^2(phi)``:

    .. math::

       M \\approx \\Gamma(b) e^{x/2} \\left(\\frac{x\\eta}{4}\\right)^{(1-b)/2}
       \\left(\\tfrac{1}{2}\\pi\\eta \\sin\\phi\\cos\\phi\\right)^{-1/2}
       \\sin\\left(\\chi - \\tfrac{1}{2}b\\pi + \\tfrac{3}{4}\\pi\\right)

    where ``eta = 2b - 4a`` and ``chi = (eta/4)(2 theta + sin 2 theta)``,
    ``theta = pi/2 - phi``. The relative error is of order ``1/eta`` away
    from the turning points, so the value is flagged as a precision loss.
    """
    eta = 2.0 * b - 4.0 * a
    cos2 = x / eta
    if not (0.0 < cos2 < 1.0):
        return Result.failure(Status.DOMAIN_ERROR)
    theta = math.asin(math.sqrt(cos2))
    sin_cos = math.sqrt(cos2 * (1.0 - cos2))
    log_gamma_b, sign_b = log_gamma_sign(b)
    if not log_gamma_b.ok:
        return log_gamma_b
    chi = 0.25 * eta * (2.0 * theta + math.sin(2.0 * theta))
    oscillation = math.sin(chi - 0.5 * b * math.pi + 0.75 * math.pi)
    if oscillation == 0.0:
        return Result(0.0, Status.PRECISION_LOSS)
    log_value = (
        log_gamma_b.value
        + 0.5 * x
        + 0.5 * (1.0 - b) * math.log(0.25 * x * eta)
        - 0.5 * math.log(0.5 * math.pi * eta * sin_cos)
        + math.log(abs(oscillation))
    )
    value = exp_sign(log_value, sign_b * oscillation)
    if not value.ok:
        return value
    status = Status.PRECISION_LOSS if 1.0 / eta > DBL_EPSILON else Status.SUCCESS
    return Result(value.value, worst(value.status, status))
