import math

import mpmath
import pytest

from kummer.special_functions import Status
from kummer.special_functions._hypergeometric_1_f_1._asymptotic import (
    asymptotic_negative_x,
    asymptotic_positive_x,
    companion_negligible,
    large_negative_a,
)


def _reference(a, b, x, dps=30):
    with mpmath.workdps(dps):
        return float(mpmath.hyp1f1(a, b, x))


class TestCompanionNegligible:
    def test_large_argument(self):
        assert companion_negligible(1.5, 2.5, 50.0)

    def test_moderate_argument(self):
        assert not companion_negligible(1.5, 2.5, 5.0)

    def test_vanishing_reciprocal_gamma(self):
        # 1 / Gamma(b - a) is zero, so the (-x)^{-a} half is absent.
        assert companion_negligible(3.5, 1.5, 41.0)


class TestLargeArgument:
    @pytest.mark.parametrize(
        "a, b, x",
        [
            (1.5, 2.5, 80.0),
            (0.7, 3.2, 120.0),
            (4.25, 1.5, 200.0),
        ],
    )
    def test_positive_x(self, a, b, x):
        approximation = asymptotic_positive_x(a, b, x)
        assert approximation.status == Status.SUCCESS
        assert math.isclose(approximation.value, _reference(a, b, x), rel_tol=1e-12)

    @pytest.mark.parametrize(
        "a, b, x",
        [
            (1.5, 2.5, -80.0),
            (0.7, 3.2, -60.0),
            (2.25, 1.5, -150.0),
        ],
    )
    def test_negative_x(self, a, b, x):
        approximation = asymptotic_negative_x(a, b, x)
        assert approximation.status == Status.SUCCESS
        assert math.isclose(approximation.value, _reference(a, b, x), rel_tol=1e-12)

    def test_pole_of_gamma(self):
        assert asymptotic_positive_x(-2.0, 2.5, 50.0).status == Status.DOMAIN_ERROR
        assert asymptotic_negative_x(1.5, -3.0, -50.0).status == Status.DOMAIN_ERROR


class TestLargeNegativeA:
    def test_oscillatory_region(self):
        a, b = -500.25, 1.5
        eta = 2.0 * b - 4.0 * a
        checked = 0
        for x in [50.0 + 2.5 * k for k in range(21)]:
            theta = math.asin(math.sqrt(x / eta))
            chi = 0.25 * eta * (2.0 * theta + math.sin(2.0 * theta))
            oscillation = math.sin(chi - 0.5 * b * math.pi + 0.75 * math.pi)
            if abs(oscillation) < 0.5:
                continue
            result = large_negative_a(a, b, x)
            assert result.status == Status.PRECISION_LOSS
            expected = _reference(a, b, x, dps=250)
            assert abs(result.value - expected) < 2e-2 * abs(expected)
            checked += 1
        assert checked > 0

    @pytest.mark.parametrize("x", [-1.0, 0.0, 2004.0, 3000.0])
    def test_outside_oscillatory_region(self, x):
        assert large_negative_a(-500.25, 1.5, x).status == Status.DOMAIN_ERROR
