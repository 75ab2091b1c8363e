import math

from ._constants import (
    ASYMPTOTIC_MAX_TERMS,
    DBL_EPSILON,
    DBL_MAX,
    NEAR_INTEGER_TOLERANCE,
)
from ._result import Approximation, Result, Status


def _hypergeometric_2_f_0_series(
    a: float,
    b: float,
    x: float,
    *,
    max_terms: int = ASYMPTOTIC_MAX_TERMS,
) -> Approximation:
    # Past n^2 > |(a - 1)(b - 1)| the term ratio grows monotonically in
    # magnitude, so the first ratio of magnitude >= 1 there marks the
    # smallest term. The truncation error is bounded by the first
    # neglected term.
    turning = abs((a - 1.0) * (b - 1.0))
    total = 1.0
    term = 1.0
    max_abs_term = 1.0
    truncation = 0.0
    an = a
    bn = b
    n = 1.0
    while True:
        if an == 0.0 or bn == 0.0:
            truncation = 0.0
            break
        if n > max_terms:
            truncation = abs(term)
            break
        u = an * (bn / n * x)
        abs_u = abs(u)
        if abs_u >= 1.0 and n * n > turning:
            truncation = abs(term) * abs_u
            break
        if abs_u > 1.0 and max_abs_term > DBL_MAX / abs_u:
            return Approximation(total, 1.0, Status.OVERFLOW)
        term *= u
        total += term
        max_abs_term = max(max_abs_term, abs(term))
        if abs(term) < DBL_EPSILON * abs(total):
            truncation = abs(term)
            break
        an += 1.0
        bn += 1.0
        n += 1.0

    error = truncation + DBL_EPSILON * (n + max_abs_term)
    precision = error / (error + abs(total))
    if not math.isfinite(total):
        return Approximation(0.0, 1.0, Status.OVERFLOW)
    status = Status.PRECISION_LOSS if precision > NEAR_INTEGER_TOLERANCE else Status.SUCCESS
    return Approximation(total, precision, status)


def hypergeometric_2_f_0_series(a: float, b: float, x: float) -> Result:
    r"""
    Asymptotic series of the hypergeometric function 2F0(a, b; x).

    .. math::

       {}_2F_0(a, b; x) \sim \sum_{k=0}^{\infty} (a)_k (b)_k \frac{x^k}{k!}

    The series diverges for every ``x != 0`` unless ``a`` or ``b`` is a
    non-positive integer. It is summed up to its smallest term, so the
    truncation error is bounded by the first neglected term.

    Parameters
    ----------
    a, b : float
        Parameters.
    x : float
        Argument. Useful only for small ``|x|``.

    Returns
    -------
    Result
        The truncated sum. The status is ``PRECISION_LOSS`` when the
        estimated relative error exceeds ``1000 * eps``.
    """
    return _hypergeometric_2_f_0_series(float(a), float(b), float(x)).result()


__all__ = ["hypergeometric_2_f_0_series"]
