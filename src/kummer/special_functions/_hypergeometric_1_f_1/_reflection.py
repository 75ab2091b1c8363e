import math
from typing import Callable

from .._constants import MAX_REFLECTION_DEPTH
from .._primitives import exp_sign
from .._result import Result, Status, worst

Evaluator = Callable[[float, float, float, int], Result]


def exp_times(x: float, factor: Result) -> Result:
    """``exp(x) * factor``, formed in log space."""
    if not factor.ok:
        return Result.failure(factor.status)
    if factor.value == 0.0:
        return Result(0.0, factor.status)
    product = exp_sign(math.log(abs(factor.value)) + x, factor.value)
    if not product.ok:
        return product
    return Result(product.value, worst(product.status, factor.status))


def kummer_reflection(evaluate: Evaluator, a: float, b: float, x: float, depth: int) -> Result:
    """Evaluate M(a, b, x) as ``exp(x) M(b - a, b, -x)``.

    ``evaluate`` receives the reflected triple and ``depth + 1``. Chains
    longer than ``MAX_REFLECTION_DEPTH`` report an internal failure.
    """
    if depth >= MAX_REFLECTION_DEPTH:
        return Result.failure(Status.INTERNAL_FAILURE)
    return exp_times(x, evaluate(b - a, b, -x, depth + 1))
