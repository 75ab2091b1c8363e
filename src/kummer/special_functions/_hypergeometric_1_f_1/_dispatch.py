"""Regime selection for 1F1(a; b; x).

The regimes form an ordered table; the first one whose predicate holds
evaluates the triple. Later predicates may assume that every earlier one
failed, except that an asymptotic row whose expansion falls short hands
the triple on to the next row that accepts it.
"""

import math
from typing import Callable, NamedTuple, Tuple

from .._constants import (
    ASYMPTOTIC_ARGUMENT,
    NEAR_INTEGER_TOLERANCE,
    SQRT_DBL_EPSILON,
    VANISHING_B_TOLERANCE,
)
from .._primitives import exp
from .._result import Result, Status
from ._asymptotic import (
    asymptotic_negative_x,
    asymptotic_positive_x,
    companion_negligible,
)
from ._generic import b_recurrence, generic_positive, negative_a_positive_x
from ._integer import integer_parameters
from ._reflection import exp_times, kummer_reflection
from ._series import convergent_series, negative_integer_polynomial
from ._special_cases import near_equal_parameters, small_a, vanishing_b


def _near_integer(value: float) -> bool:
    return abs(value - round(value)) < NEAR_INTEGER_TOLERANCE


class Triple(NamedTuple):
    """Arguments of one evaluation with the integer tests done once."""

    a: float
    b: float
    x: float
    a_integer: bool
    b_integer: bool
    a_negative_integer: bool
    b_negative_integer: bool
    bma_negative_integer: bool

    @classmethod
    def of(cls, a: float, b: float, x: float) -> "Triple":
        bma = b - a
        a_integer = _near_integer(a)
        b_integer = _near_integer(b)
        return cls(
            a,
            b,
            x,
            a_integer,
            b_integer,
            a < -0.1 and a_integer,
            b < -0.1 and b_integer,
            bma < -0.1 and _near_integer(bma),
        )


class Regime(NamedTuple):
    name: str
    applies: Callable[[Triple], bool]
    evaluate: Callable[[Triple, int], Result]


def _series_applies(t: Triple) -> bool:
    return (abs(t.x) < 5.0 and abs(t.a) < 10.0 and abs(t.b) < 10.0) or (
        t.b > 0.8 * max(abs(t.a), 1.0) * abs(t.x)
    )


def _kummer_series_applies(t: Triple) -> bool:
    bma = t.b - t.a
    return (abs(t.x) < 5.0 and abs(bma) < 10.0 and abs(t.b) < 10.0) or (
        t.b > 0.8 * max(abs(bma), 1.0) * abs(t.x)
    )


def _kummer_series(t: Triple, depth: int) -> Result:
    return exp_times(t.x, convergent_series(t.b - t.a, t.b, -t.x).result())


def _fall_through(name: str, t: Triple, depth: int) -> Result:
    # Evaluate as if the row called ``name`` had declined the triple.
    names = [regime.name for regime in REGIMES]
    for regime in REGIMES[names.index(name) + 1 :]:
        if regime.applies(t):
            return regime.evaluate(t, depth)
    raise AssertionError("the last regime accepts every triple")


def _asymptotic_negative_applies(t: Triple) -> bool:
    return (
        t.x < -ASYMPTOTIC_ARGUMENT
        and max(abs(t.a), 1.0) * max(abs(1.0 + t.a - t.b), 1.0) < 0.99 * abs(t.x)
        and not t.b_negative_integer
        and not t.bma_negative_integer
        and companion_negligible(t.a, t.b, t.x)
    )


def _asymptotic_negative(t: Triple, depth: int) -> Result:
    asymptotic = asymptotic_negative_x(t.a, t.b, t.x)
    if asymptotic.status == Status.SUCCESS:
        return asymptotic.result()
    return _fall_through("asymptotic_negative_x", t, depth)


def _asymptotic_positive_applies(t: Triple) -> bool:
    return (
        t.x > ASYMPTOTIC_ARGUMENT
        and max(abs(t.b - t.a), 1.0) * max(abs(1.0 - t.a), 1.0) < 0.99 * abs(t.x)
        and not t.b_negative_integer
        and not t.a_negative_integer
        and companion_negligible(t.a, t.b, t.x)
    )


def _asymptotic_positive(t: Triple, depth: int) -> Result:
    asymptotic = asymptotic_positive_x(t.a, t.b, t.x)
    if asymptotic.status == Status.SUCCESS:
        return asymptotic.result()
    return _fall_through("asymptotic_positive_x", t, depth)


def _negative_integer_a(t: Triple, depth: int) -> Result:
    m = int(round(t.a))
    if t.x < 0.0:
        return negative_integer_polynomial(m, t.b, t.x)
    polynomial = convergent_series(float(m), t.b, t.x)
    if polynomial.status == Status.SUCCESS:
        return polynomial.result()
    return negative_a_positive_x(float(m), t.b, t.x)


def _negative_a(t: Triple, depth: int) -> Result:
    if t.x > 0.0:
        return negative_a_positive_x(t.a, t.b, t.x)
    return kummer_reflection(generic_positive, t.a, t.b, t.x, depth)


def _b_recurrence(t: Triple, depth: int) -> Result:
    return b_recurrence(t.a, t.b, t.x, _evaluate, depth)


REGIMES: Tuple[Regime, ...] = (
    Regime(
        "zero_argument",
        lambda t: t.x == 0.0,
        lambda t, depth: Result(1.0),
    ),
    Regime(
        "zero_b",
        lambda t: t.b == 0.0,
        lambda t, depth: Result.failure(Status.DOMAIN_ERROR),
    ),
    Regime(
        "zero_a",
        lambda t: t.a == 0.0,
        lambda t, depth: Result(1.0),
    ),
    Regime(
        "equal_parameters",
        lambda t: t.a == t.b,
        lambda t, depth: exp(t.x),
    ),
    Regime(
        "vanishing_b",
        lambda t: abs(t.b) < VANISHING_B_TOLERANCE,
        lambda t, depth: vanishing_b(t.a, t.b, t.x, _evaluate),
    ),
    Regime(
        "integer_parameters",
        lambda t: t.a_integer and t.b_integer,
        lambda t, depth: integer_parameters(int(round(t.a)), int(round(t.b)), t.x),
    ),
    Regime(
        "negative_integer_b",
        lambda t: t.b_negative_integer,
        lambda t, depth: Result.failure(Status.DOMAIN_ERROR),
    ),
    Regime(
        "series",
        _series_applies,
        lambda t, depth: convergent_series(t.a, t.b, t.x).result(),
    ),
    Regime(
        "kummer_series",
        _kummer_series_applies,
        _kummer_series,
    ),
    Regime(
        "asymptotic_negative_x",
        _asymptotic_negative_applies,
        _asymptotic_negative,
    ),
    Regime(
        "asymptotic_positive_x",
        _asymptotic_positive_applies,
        _asymptotic_positive,
    ),
    Regime(
        "near_equal_parameters",
        lambda t: t.b > NEAR_INTEGER_TOLERANCE and abs(t.b - t.a) < SQRT_DBL_EPSILON and abs(t.b) > abs(t.x),
        lambda t, depth: near_equal_parameters(t.a, t.b, t.x),
    ),
    Regime(
        "small_a",
        lambda t: -1.0 <= t.a <= 1.0 and t.b > 0.0,
        lambda t, depth: small_a(t.a, t.b, t.x),
    ),
    Regime(
        "negative_integer_a",
        lambda t: t.a_negative_integer and t.b > 0.0,
        _negative_integer_a,
    ),
    Regime(
        "negative_a",
        lambda t: t.a < 0.0 and t.b > 0.0,
        _negative_a,
    ),
    Regime(
        "negative_b",
        lambda t: t.a > 0.0 and t.b < 0.0,
        _b_recurrence,
    ),
    Regime(
        "negative_a_and_b",
        lambda t: t.a < 0.0 and t.b < 0.0,
        _b_recurrence,
    ),
    Regime(
        "generic_positive",
        lambda t: True,
        lambda t, depth: generic_positive(t.a, t.b, t.x, depth),
    ),
)


def select_regime(a: float, b: float, x: float) -> Tuple[Regime, Triple]:
    triple = Triple.of(a, b, x)
    for regime in REGIMES:
        if regime.applies(triple):
            return regime, triple
    raise AssertionError("the last regime accepts every triple")


def _evaluate(a: float, b: float, x: float, depth: int = 0) -> Result:
    regime, triple = select_regime(a, b, x)
    return regime.evaluate(triple, depth)


def evaluate(a: float, b: float, x: float) -> Result:
    """Dispatch one finite triple."""
    if not (math.isfinite(a) and math.isfinite(b) and math.isfinite(x)):
        return Result.failure(Status.DOMAIN_ERROR)
    return _evaluate(a, b, x)


def regime_name(a: float, b: float, x: float) -> str:
    if not (math.isfinite(a) and math.isfinite(b) and math.isfinite(x)):
        return "non_finite_input"
    return select_regime(a, b, x)[0].name
