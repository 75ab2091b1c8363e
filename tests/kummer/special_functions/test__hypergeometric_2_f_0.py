import math

import mpmath
import pytest

import kummer.special_functions
from kummer.special_functions import Status
from kummer.special_functions._hypergeometric_2_f_0 import _hypergeometric_2_f_0_series


class TestHypergeometric2F0Series:
    """Tests for the optimally truncated 2F0 series."""

    def test_terminating(self):
        # 2F0(-2, b; x) = 1 - 2 b x + b (b + 1) x^2
        result = kummer.special_functions.hypergeometric_2_f_0_series(-2.0, 1.5, 0.1)
        assert result.status == Status.SUCCESS
        assert math.isclose(result.value, 1.0 - 0.3 + 1.5 * 2.5 * 0.01, rel_tol=1e-15)

    def test_zero_parameter(self):
        result = kummer.special_functions.hypergeometric_2_f_0_series(0.0, 3.0, 0.5)
        assert result.value == 1.0
        assert result.status == Status.SUCCESS

    @pytest.mark.parametrize(
        "a, b, x",
        [
            (1.0, 1.0, -0.01),
            (0.5, 1.5, -0.02),
            (2.5, -0.5, -0.025),
        ],
    )
    def test_against_mpmath(self, a, b, x):
        result = kummer.special_functions.hypergeometric_2_f_0_series(a, b, x)
        with mpmath.workdps(30):
            expected = float(mpmath.re(mpmath.hyp2f0(a, b, x)))
        assert result.status == Status.SUCCESS
        assert math.isclose(result.value, expected, rel_tol=1e-12)

    def test_precision_loss_for_large_argument(self):
        # Terms stop shrinking at the second one.
        approximation = _hypergeometric_2_f_0_series(1.0, 1.0, -0.5)
        assert approximation.status == Status.PRECISION_LOSS
        assert approximation.value == 0.5
        assert approximation.precision > 0.1

    def test_term_cap(self):
        approximation = _hypergeometric_2_f_0_series(1.0, 1.0, -0.01, max_terms=5)
        assert approximation.status == Status.PRECISION_LOSS
        assert math.isfinite(approximation.value)

    def test_precision_estimate(self):
        approximation = _hypergeometric_2_f_0_series(1.0, 1.0, -0.01)
        assert 0.0 < approximation.precision < 1e-13
