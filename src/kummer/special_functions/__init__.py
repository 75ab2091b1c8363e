from ._exceptions import (
    ConvergenceError,
    DomainError,
    HypergeometricError,
    InternalFailureError,
    PrecisionLossWarning,
    ResultOverflowError,
    UnderflowWarning,
)
from ._hypergeometric_1_f_1 import (
    classify_hypergeometric_1_f_1,
    evaluate_hypergeometric_1_f_1,
    evaluate_hypergeometric_1_f_1_int,
    hypergeometric_1_f_1,
    hypergeometric_1_f_1_int,
)
from ._hypergeometric_2_f_0 import hypergeometric_2_f_0_series
from ._result import Result, Status

__all__ = [
    "ConvergenceError",
    "DomainError",
    "HypergeometricError",
    "InternalFailureError",
    "PrecisionLossWarning",
    "Result",
    "ResultOverflowError",
    "Status",
    "UnderflowWarning",
    "classify_hypergeometric_1_f_1",
    "evaluate_hypergeometric_1_f_1",
    "evaluate_hypergeometric_1_f_1_int",
    "hypergeometric_1_f_1",
    "hypergeometric_1_f_1_int",
    "hypergeometric_2_f_0_series",
]
