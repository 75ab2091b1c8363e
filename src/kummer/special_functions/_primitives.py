"""Elementary special functions consumed by the hypergeometric evaluators.

Every function returns a :class:`Result` so that overflow, underflow and
domain problems flow into the callers' status accounting instead of
surfacing as ``inf``/``nan``.
"""

from __future__ import annotations

import math
from typing import Tuple

from scipy import special

from ._constants import (
    DBL_EPSILON,
    LOG_DBL_MAX,
    LOG_DBL_MIN,
    SERIES_MAX_TERMS,
)
from ._result import Result, Status


def exp(x: float) -> Result:
    if x > LOG_DBL_MAX:
        return Result.failure(Status.OVERFLOW)
    if x < LOG_DBL_MIN:
        return Result.failure(Status.UNDERFLOW)
    return Result(math.exp(x))


def exp_sign(log_value: float, sign: float) -> Result:
    """Compute ``sign * exp(log_value)`` with range checking."""
    if sign == 0.0:
        return Result(0.0)
    magnitude = exp(log_value)
    if not magnitude.ok:
        return magnitude
    return Result(math.copysign(magnitude.value, sign))


def expm1(x: float) -> Result:
    if x > LOG_DBL_MAX:
        return Result.failure(Status.OVERFLOW)
    return Result(math.expm1(x))


def is_nonpositive_integer(x: float) -> bool:
    return x <= 0.0 and x == math.floor(x)


def log_gamma_sign(x: float) -> Tuple[Result, float]:
    """Return ``(log|Gamma(x)|, sign(Gamma(x)))``.

    The poles at the non-positive integers give a domain error.
    """
    if is_nonpositive_integer(x):
        return Result.failure(Status.DOMAIN_ERROR), 0.0
    return Result(float(special.gammaln(x))), float(special.gammasgn(x))


def log_gamma(x: float) -> Result:
    return log_gamma_sign(x)[0]


def bessel_inu_scaled(nu: float, x: float) -> Result:
    """``exp(-|x|) I_nu(x)`` for ``x >= 0``."""
    if x < 0.0:
        return Result.failure(Status.DOMAIN_ERROR)
    return Result.checked(float(special.ive(nu, x)))


def exprel(x: float) -> Result:
    """``(exp(x) - 1) / x``, equal to ``1F1(1, 2, x)``."""
    if x == 0.0:
        return Result(1.0)
    if abs(x) < 1.0:
        return Result(math.expm1(x) / x)
    if x > 0.0:
        # log((e^x - 1)/x) = x + log(-expm1(-x)) - log(x)
        return exp_sign(x + math.log(-math.expm1(-x)) - math.log(x), 1.0)
    return Result(math.expm1(x) / x)


def _exprel_n_series(n: int, x: float) -> Result:
    # sum_k x^k n! / (n + k)!
    total = 1.0
    term = 1.0
    k = 1
    while k < SERIES_MAX_TERMS:
        term *= x / (n + k)
        total += term
        if abs(term) < 0.5 * DBL_EPSILON * abs(total):
            return Result.checked(total)
        k += 1
    return Result(total, Status.MAX_ITERATIONS)


def exprel_n(n: int, x: float) -> Result:
    """N-th relative exponential, ``n! / x^n (exp(x) - sum_{k<n} x^k/k!)``.

    Equal to ``1F1(1, n + 1, x)``.
    """
    if n < 0:
        return Result.failure(Status.DOMAIN_ERROR)
    if n == 0:
        return exp(x)
    if n == 1:
        return exprel(x)
    if x == 0.0:
        return Result(1.0)
    if abs(x) <= n + 1:
        return _exprel_n_series(n, x)
    if x > 0.0:
        # n! x^{-n} e^x P(n, x), with P the regularized lower incomplete gamma
        p = float(special.gammainc(n, x))
        log_value = math.lgamma(n + 1.0) - n * math.log(x) + x + math.log(p)
        return exp_sign(log_value, 1.0)
    # x < -(n + 1): (n/y) sum_j (-1)^j (n-1)!/((n-1-j)! y^j)
    #               + (-1)^n n! y^{-n} e^{-y},  y = -x
    y = -x
    total = 1.0
    term = 1.0
    for j in range(1, n):
        term *= -(n - j) / y
        total += term
    correction = exp(math.lgamma(n + 1.0) - n * math.log(y) - y)
    value = n / y * total
    if correction.ok:
        value += correction.value if n % 2 == 0 else -correction.value
    return Result.checked(value)


__all__ = [
    "bessel_inu_scaled",
    "exp",
    "exp_sign",
    "expm1",
    "exprel",
    "exprel_n",
    "is_nonpositive_integer",
    "log_gamma",
    "log_gamma_sign",
]
