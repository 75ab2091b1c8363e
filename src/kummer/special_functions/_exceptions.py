"""Special function exceptions and warnings."""

from ._result import Status

__all__ = [
    "ConvergenceError",
    "DomainError",
    "HypergeometricError",
    "InternalFailureError",
    "PrecisionLossWarning",
    "ResultOverflowError",
    "UnderflowWarning",
    "exception_for",
    "warning_for",
]


class HypergeometricError(ArithmeticError):
    """Base exception for hypergeometric function errors."""

    pass


class DomainError(HypergeometricError, ValueError):
    """Raised when the parameters are outside the function's domain."""

    pass


class ResultOverflowError(HypergeometricError, OverflowError):
    """Raised when the result exceeds the representable range."""

    pass


class ConvergenceError(HypergeometricError):
    """Raised when an iteration cap is reached without convergence."""

    pass


class InternalFailureError(HypergeometricError):
    """Raised when sub-evaluators return an inconsistent combination."""

    pass


class PrecisionLossWarning(RuntimeWarning):
    """Issued when a value is returned with reduced accuracy."""

    pass


class UnderflowWarning(RuntimeWarning):
    """Issued when the result underflows and is returned as zero."""

    pass


_EXCEPTIONS = {
    Status.MAX_ITERATIONS: ConvergenceError,
    Status.OVERFLOW: ResultOverflowError,
    Status.DOMAIN_ERROR: DomainError,
    Status.INTERNAL_FAILURE: InternalFailureError,
}

_WARNINGS = {
    Status.PRECISION_LOSS: PrecisionLossWarning,
    Status.UNDERFLOW: UnderflowWarning,
}


def exception_for(status: Status):
    """Exception class raised for ``status``, or None if it only warns."""
    return _EXCEPTIONS.get(status)


def warning_for(status: Status):
    """Warning category issued for ``status``, or None."""
    return _WARNINGS.get(status)
