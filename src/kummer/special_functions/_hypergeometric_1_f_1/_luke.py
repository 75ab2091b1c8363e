from .._constants import (
    DBL_EPSILON,
    LUKE_MAX_ITERATIONS,
    NEAR_INTEGER_TOLERANCE,
    PRECISION_TOLERANCE,
    RESCALE_THRESHOLD,
)
from .._result import Approximation, Status


def _negative_integer(value: float) -> bool:
    return value < -0.5 and abs(value - round(value)) < NEAR_INTEGER_TOLERANCE


def luke(
    a: float,
    c: float,
    x: float,
    *,
    max_iterations: int = LUKE_MAX_ITERATIONS,
) -> Approximation:
    """Luke's rational approximation to 1F1(a; c; x).

    The approximants A_n / B_n obey a four-term recurrence in ``n``
    (Luke, Algorithms for the Computation of Mathematical Functions,
    p. 182) and converge for ``x < 0``. The three most recent ``A`` and
    ``B`` values are rescaled together whenever ``A_n`` or ``B_n``
    leaves ``[1e-50, 1e50]``.

    The approximants degenerate when ``a`` or ``c - a`` is a negative
    integer, which is reported as a domain error.
    """
    if _negative_integer(a) or _negative_integer(c - a):
        return Approximation(0.0, 1.0, Status.DOMAIN_ERROR)
    z = -x
    z3 = z * z * z
    t0 = a / c
    t1 = (a + 1.0) / (2.0 * c)
    t2 = (a + 2.0) / (2.0 * (c + 1.0))

    b_nm3 = 1.0
    b_nm2 = 1.0 + t1 * z
    b_nm1 = 1.0 + t2 * z * (1.0 + t1 / 3.0 * z)

    a_nm3 = 1.0
    a_nm2 = b_nm2 - t0 * z
    a_nm1 = b_nm1 - t0 * (1.0 + t2 * z) * z + t0 * t1 * (c / (c + 1.0)) * z * z

    value = 1.0
    precision = 1.0
    n = 3
    while True:
        npam1 = n + a - 1.0
        npcm1 = n + c - 1.0
        npam2 = n + a - 2.0
        npcm2 = n + c - 2.0
        tnm1 = 2.0 * n - 1.0
        tnm3 = 2.0 * n - 3.0
        tnm5 = 2.0 * n - 5.0
        f1 = (n - a - 2.0) / (2.0 * tnm3 * npcm1)
        f2 = (n + a) * npam1 / (4.0 * tnm1 * tnm3 * npcm2 * npcm1)
        f3 = -npam2 * npam1 * (n - a - 2.0) / (8.0 * tnm3 * tnm3 * tnm5 * (n + c - 3.0) * npcm2 * npcm1)
        e = -npam1 * (n - c - 1.0) / (2.0 * tnm3 * npcm2 * npcm1)

        a_n = (1.0 + f1 * z) * a_nm1 + (e + f2 * z) * z * a_nm2 + f3 * z3 * a_nm3
        b_n = (1.0 + f1 * z) * b_nm1 + (e + f2 * z) * z * b_nm2 + f3 * z3 * b_nm3
        ratio = a_n / b_n

        precision = abs((value - ratio) / value) if value != 0.0 else abs(ratio)
        value = ratio

        if precision < DBL_EPSILON or n > max_iterations:
            break

        magnitude = max(abs(a_n), abs(b_n))
        if magnitude > RESCALE_THRESHOLD:
            scale = 1.0 / RESCALE_THRESHOLD
        elif magnitude < 1.0 / RESCALE_THRESHOLD:
            scale = RESCALE_THRESHOLD
        else:
            scale = 1.0
        if scale != 1.0:
            a_n *= scale
            b_n *= scale
            a_nm1 *= scale
            b_nm1 *= scale
            a_nm2 *= scale
            b_nm2 *= scale

        n += 1
        b_nm3 = b_nm2
        b_nm2 = b_nm1
        b_nm1 = b_n
        a_nm3 = a_nm2
        a_nm2 = a_nm1
        a_nm1 = a_n

    if precision > PRECISION_TOLERANCE:
        return Approximation(value, precision, Status.PRECISION_LOSS)
    return Approximation(value, precision)
