import numbers
import warnings

import torch
from torch import Tensor

from .._exceptions import exception_for, warning_for
from .._result import Result
from ._dispatch import evaluate, regime_name
from ._integer import integer_parameters


def _as_real(name: str, value) -> float:
    if isinstance(value, Tensor):
        if value.ndim != 0:
            raise ValueError(f"{name} must be a scalar, got a tensor of shape {tuple(value.shape)}")
        if value.is_complex():
            raise TypeError(f"{name} must be real, got {value.dtype}")
        return float(value.item())
    if not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}")
    return float(value)


def _as_integer(name: str, value) -> int:
    if isinstance(value, Tensor):
        if value.ndim != 0:
            raise ValueError(f"{name} must be a scalar, got a tensor of shape {tuple(value.shape)}")
        if value.is_floating_point() or value.is_complex() or value.dtype == torch.bool:
            raise TypeError(f"{name} must be an integer, got {value.dtype}")
        return int(value.item())
    if not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return int(value)


def _value_or_raise(result: Result, function: str) -> float:
    exception = exception_for(result.status)
    if exception is not None:
        raise exception(f"{function}: {result.status.name.lower()}")
    category = warning_for(result.status)
    if category is not None:
        warnings.warn(f"{function}: {result.status.name.lower()}", category, stacklevel=3)
    return result.value


def evaluate_hypergeometric_1_f_1(a, b, x) -> Result:
    r"""
    Confluent hypergeometric function 1F1(a; b; x) (Kummer M) with status.

    .. math::

       {}_1F_1(a; b; x) = \sum_{k=0}^{\infty} \frac{(a)_k}{(b)_k} \frac{x^k}{k!}

    The triple is classified into one of several numerical regimes
    (convergent series, asymptotic expansions, Luke's rational
    approximation, recurrences in ``a`` or ``b`` seeded by a continued
    fraction, Kummer's transformation, closed forms) and evaluated by the
    method that is stable there. See
    :func:`classify_hypergeometric_1_f_1`.

    Parameters
    ----------
    a : float or Tensor
        Numerator parameter.
    b : float or Tensor
        Denominator parameter. The function is undefined when ``b`` is a
        non-positive integer, unless ``a`` is a non-positive integer with
        ``b <= a``.
    x : float or Tensor
        Argument.

    Returns
    -------
    Result
        ``(value, status)``. ``SUCCESS`` and ``PRECISION_LOSS`` values are
        usable; any other status means the value must not be relied upon.

    Raises
    ------
    TypeError
        If an argument is not a real number.
    ValueError
        If a tensor argument has more than zero dimensions.
    """
    return evaluate(_as_real("a", a), _as_real("b", b), _as_real("x", x))


def evaluate_hypergeometric_1_f_1_int(m, n, x) -> Result:
    """1F1(m; n; x) with status for integer parameters ``m`` and ``n``.

    Agrees with :func:`evaluate_hypergeometric_1_f_1` on integer
    arguments but skips the classification of general parameters.
    """
    return integer_parameters(_as_integer("m", m), _as_integer("n", n), _as_real("x", x))


def hypergeometric_1_f_1(a, b, x) -> float:
    """
    Confluent hypergeometric function 1F1(a; b; x).

    Warns with :class:`PrecisionLossWarning` or :class:`UnderflowWarning`
    for values of reduced quality and raises a
    :class:`HypergeometricError` subclass for unusable ones.
    """
    result = evaluate_hypergeometric_1_f_1(a, b, x)
    return _value_or_raise(result, "hypergeometric_1_f_1")


def hypergeometric_1_f_1_int(m, n, x) -> float:
    """Integer-parameter 1F1(m; n; x), raising or warning like
    :func:`hypergeometric_1_f_1`."""
    result = evaluate_hypergeometric_1_f_1_int(m, n, x)
    return _value_or_raise(result, "hypergeometric_1_f_1_int")


def classify_hypergeometric_1_f_1(a, b, x) -> str:
    """Name of the regime that evaluates 1F1(a; b; x)."""
    return regime_name(_as_real("a", a), _as_real("b", b), _as_real("x", x))


__all__ = [
    "classify_hypergeometric_1_f_1",
    "evaluate_hypergeometric_1_f_1",
    "evaluate_hypergeometric_1_f_1_int",
    "hypergeometric_1_f_1",
    "hypergeometric_1_f_1_int",
]
