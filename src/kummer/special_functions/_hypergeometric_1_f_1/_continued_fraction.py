from .._constants import CONTINUED_FRACTION_MAX_ITERATIONS, DBL_EPSILON
from .._result import Result, Status


def derivative_ratio(
    a: float,
    b: float,
    x: float,
    *,
    max_iterations: int = CONTINUED_FRACTION_MAX_ITERATIONS,
) -> Result:
    """M'(a, b, x) / M(a, b, x) from Gautschi's series form of the CF.

    Convergence is monotone for ``b > x`` (Gautschi, Math. Comp. 31, 994,
    1977); assumes ``a >= -1``.
    """
    if a == 0.0:
        return Result(0.0)
    total = 1.0
    p_k = 1.0
    rho_k = 0.0
    for k in range(1, max_iterations):
        a_k = (a + k) * x / ((b - x + k - 1.0) * (b - x + k))
        rho_k = -a_k * (1.0 + rho_k) / (1.0 + a_k * (1.0 + rho_k))
        p_k *= rho_k
        total += p_k
        if abs(p_k / total) < 2.0 * DBL_EPSILON:
            return Result.checked(a / (b - x) * total)
    return Result(a / (b - x) * total, Status.MAX_ITERATIONS)


def shift_ratio(a: float, b: float, x: float) -> Result:
    """M(a + 1, b, x) / M(a, b, x), assuming ``b > a + 1``.

    For ``b > x`` this comes straight from :func:`derivative_ratio`. For
    ``b <= x`` the fraction converges anomalously, so the ratio is taken
    from its Kummer image instead,

    .. math::

       \\frac{M(a+1, b, x)}{M(a, b, x)} = \\frac{M(b-a-1, b, -x)}{M(b-a, b, -x)}

    whose parameters are back in the stable region.
    """
    if b > x:
        ratio = derivative_ratio(a, b, x)
        if ratio.status not in (Status.SUCCESS, Status.MAX_ITERATIONS):
            return ratio
        return Result(1.0 + x / a * ratio.value, ratio.status)
    c = b - a - 1.0
    ratio = derivative_ratio(c, b, -x)
    if ratio.status not in (Status.SUCCESS, Status.MAX_ITERATIONS):
        return ratio
    reflected = 1.0 + (-x / c) * ratio.value
    if reflected == 0.0:
        return Result.failure(Status.INTERNAL_FAILURE)
    return Result(1.0 / reflected, ratio.status)
