import pytest

from kummer.special_functions import (
    ConvergenceError,
    DomainError,
    HypergeometricError,
    InternalFailureError,
    PrecisionLossWarning,
    ResultOverflowError,
    Status,
    UnderflowWarning,
)
from kummer.special_functions._exceptions import exception_for, warning_for


class TestExceptions:
    """Status to exception and warning mapping."""

    @pytest.mark.parametrize(
        "status, exception",
        [
            (Status.MAX_ITERATIONS, ConvergenceError),
            (Status.OVERFLOW, ResultOverflowError),
            (Status.DOMAIN_ERROR, DomainError),
            (Status.INTERNAL_FAILURE, InternalFailureError),
        ],
    )
    def test_exception_for(self, status, exception):
        assert exception_for(status) is exception
        assert issubclass(exception, HypergeometricError)
        assert warning_for(status) is None

    @pytest.mark.parametrize(
        "status, warning",
        [
            (Status.PRECISION_LOSS, PrecisionLossWarning),
            (Status.UNDERFLOW, UnderflowWarning),
        ],
    )
    def test_warning_for(self, status, warning):
        assert warning_for(status) is warning
        assert issubclass(warning, RuntimeWarning)
        assert exception_for(status) is None

    def test_success_is_silent(self):
        assert exception_for(Status.SUCCESS) is None
        assert warning_for(Status.SUCCESS) is None

    def test_builtin_bases(self):
        assert issubclass(DomainError, ValueError)
        assert issubclass(ResultOverflowError, OverflowError)
        assert issubclass(HypergeometricError, ArithmeticError)
