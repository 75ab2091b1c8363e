import math

from .._constants import (
    DBL_EPSILON,
    DBL_MAX,
    NEAR_INTEGER_TOLERANCE,
    SERIES_MAX_TERMS,
)
from .._result import Approximation, Result, Status


def convergent_series(
    a: float,
    b: float,
    x: float,
    *,
    max_terms: int = SERIES_MAX_TERMS,
) -> Approximation:
    r"""
    Sum the defining series of 1F1(a; b; x) term by term.

    .. math::

       t_{k+1} = t_k \frac{(a + k) x}{(b + k)(k + 1)}

    Summation stops once a term is below ``10 * eps`` relative to the
    partial sum, but never while ``b + k`` is still negative, since the
    terms can grow again as ``b + k`` passes through ``(-1, 0)``.

    The precision estimate combines the truncation with the rounding
    error of the largest term, so cancellation between large terms of
    alternating sign shows up as ``PRECISION_LOSS``.
    """
    total = 1.0
    term = 1.0
    max_abs_term = 1.0
    an = a
    bn = b
    n = 1.0
    converged = False
    while n <= max_terms:
        if bn == 0.0:
            return Approximation(0.0, 1.0, Status.DOMAIN_ERROR)
        if an == 0.0:
            # Terminating series.
            converged = True
            break
        u = x * (an / (bn * n))
        abs_u = abs(u)
        if abs_u > 1.0 and max_abs_term > DBL_MAX / abs_u:
            return Approximation(0.0, 1.0, Status.OVERFLOW)
        term *= u
        total += term
        max_abs_term = max(max_abs_term, abs(term))
        if bn > 0.0 and abs(term) < 10.0 * DBL_EPSILON * abs(total):
            converged = True
            break
        an += 1.0
        bn += 1.0
        n += 1.0

    if not math.isfinite(total):
        return Approximation(0.0, 1.0, Status.OVERFLOW)
    truncation = 0.0 if converged else abs(term)
    error = truncation + DBL_EPSILON * n * max_abs_term
    precision = error / (error + abs(total)) if total != 0.0 else 1.0
    if precision > NEAR_INTEGER_TOLERANCE:
        return Approximation(total, precision, Status.PRECISION_LOSS)
    return Approximation(total, precision)


def one_series(b: float, x: float, *, max_terms: int = SERIES_MAX_TERMS) -> Approximation:
    """Series for 1F1(1; b; x), assuming ``b > 0``."""
    term = 1.0
    total = 1.0
    n = 1.0
    while abs(term / total) > 10.0 * DBL_EPSILON:
        if n > max_terms:
            return Approximation(total, abs(term / total), Status.MAX_ITERATIONS)
        term *= x / (b + n - 1.0)
        total += term
        n += 1.0
    return Approximation(total, 10.0 * DBL_EPSILON)


def negative_integer_polynomial(m: int, b: float, x: float) -> Result:
    """Terminating series for a non-positive integer ``a = m``.

    Horner evaluation of the polynomial, meant for the case where all the
    terms share one sign.
    """
    if m == 0:
        return Result(1.0)
    poly = 1.0
    for k in range(-m - 1, -1, -1):
        t = (m + k) / (b + k) * (x / (k + 1))
        # P_k = 1 + t_k P_{k+1}
        if abs(t) > 1.0 and abs(poly) > 0.9 * DBL_MAX / abs(t):
            return Result.failure(Status.OVERFLOW)
        poly = 1.0 + t * poly
    return Result.checked(poly)
