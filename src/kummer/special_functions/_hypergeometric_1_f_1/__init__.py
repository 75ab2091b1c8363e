"""Confluent hypergeometric function 1F1(a; b; x)."""

from ._dispatch import REGIMES, Regime
from ._hypergeometric_1_f_1 import (
    classify_hypergeometric_1_f_1,
    evaluate_hypergeometric_1_f_1,
    evaluate_hypergeometric_1_f_1_int,
    hypergeometric_1_f_1,
    hypergeometric_1_f_1_int,
)

__all__ = [
    "REGIMES",
    "Regime",
    "classify_hypergeometric_1_f_1",
    "evaluate_hypergeometric_1_f_1",
    "evaluate_hypergeometric_1_f_1_int",
    "hypergeometric_1_f_1",
    "hypergeometric_1_f_1_int",
]
