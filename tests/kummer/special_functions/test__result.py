import math

import pytest

from kummer.special_functions import Result, Status
from kummer.special_functions._result import Approximation, worst


class TestStatus:
    """Severity order of statuses."""

    def test_order(self):
        assert (
            Status.SUCCESS
            < Status.PRECISION_LOSS
            < Status.MAX_ITERATIONS
            < Status.UNDERFLOW
            < Status.OVERFLOW
            < Status.DOMAIN_ERROR
            < Status.INTERNAL_FAILURE
        )

    @pytest.mark.parametrize(
        "status, usable",
        [
            (Status.SUCCESS, True),
            (Status.PRECISION_LOSS, True),
            (Status.MAX_ITERATIONS, False),
            (Status.UNDERFLOW, False),
            (Status.DOMAIN_ERROR, False),
        ],
    )
    def test_usable(self, status, usable):
        assert status.usable is usable

    def test_worst(self):
        assert worst(Status.SUCCESS, Status.OVERFLOW, Status.PRECISION_LOSS) == Status.OVERFLOW
        assert worst() == Status.SUCCESS
        assert isinstance(worst(Status.UNDERFLOW), Status)


class TestResult:
    """Result construction."""

    def test_default_status(self):
        assert Result(2.0) == (2.0, Status.SUCCESS)
        assert Result(2.0).ok

    def test_failure(self):
        result = Result.failure(Status.DOMAIN_ERROR)
        assert result.value == 0.0
        assert not result.ok

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_checked_non_finite(self, value):
        assert Result.checked(value) == Result(0.0, Status.OVERFLOW)

    def test_checked_keeps_status(self):
        assert Result.checked(1.5, Status.PRECISION_LOSS) == Result(1.5, Status.PRECISION_LOSS)


class TestApproximation:
    """Conversion of self-estimated values to results."""

    def test_success(self):
        assert Approximation(3.0, 1e-17).result() == Result(3.0)

    def test_max_iterations_keeps_estimate(self):
        assert Approximation(3.0, 1e-3, Status.MAX_ITERATIONS).result() == Result(3.0, Status.MAX_ITERATIONS)

    def test_failure_drops_value(self):
        assert Approximation(3.0, 1.0, Status.DOMAIN_ERROR).result() == Result(0.0, Status.DOMAIN_ERROR)
