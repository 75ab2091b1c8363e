import math

import mpmath
import pytest

from kummer.special_functions import Status
from kummer.special_functions._hypergeometric_1_f_1._generic import (
    generic_positive,
    negative_a_positive_x,
)
from kummer.special_functions._hypergeometric_1_f_1._special_cases import descend_b


def _reference(a, b, x):
    with mpmath.workdps(50):
        return float(mpmath.hyp1f1(a, b, x))


class TestNegativeAPositiveX:
    """Recurrence in b for a < 0 < b, x."""

    @pytest.mark.parametrize(
        "a, b, x",
        [
            (-20.5, 3.0, 60.0),
            (-12.5, 2.0, 40.0),
            (-9.5, 9.7827, 57.237),
            (-4.5, 2.5, 30.0),
            (-2.0, 1.4132562258663266, 176.61),
            (-19.0, 20.0, 108.61),
            (-1.25, 0.3, 12.0),
        ],
    )
    def test_against_mpmath(self, a, b, x):
        result = negative_a_positive_x(a, b, x)
        assert result.ok
        assert math.isclose(result.value, _reference(a, b, x), rel_tol=1e-10)

    def test_long_run_uses_large_negative_a(self):
        result = negative_a_positive_x(-5000.25, 1.5, 50.0)
        assert result.status == Status.PRECISION_LOSS

    def test_long_run_outside_oscillatory_region(self):
        assert negative_a_positive_x(-5000.25, 1.5, 30000.0).status == Status.DOMAIN_ERROR


class TestDescendB:
    def test_no_steps(self):
        result = descend_b(-0.5, 40.0, 3.0, 0)
        assert math.isclose(result.value, _reference(-0.5, 40.0, 3.0), rel_tol=1e-14)

    def test_from_large_b(self):
        result = descend_b(-3.5, 1.5, 20.0, 120)
        assert result.ok
        assert math.isclose(result.value, _reference(-3.5, 1.5, 20.0), rel_tol=1e-11)


class TestGenericPositive:
    """a > b + 1 with x < -b, through the Kummer image."""

    @pytest.mark.parametrize(
        "a, b, x",
        [
            (10.5, 6.4678, -53.962),
            (7.0, 2.5, -30.0),
            (15.5, 3.25, -35.0),
        ],
    )
    def test_against_mpmath(self, a, b, x):
        result = generic_positive(a, b, x)
        assert result.ok
        assert math.isclose(result.value, _reference(a, b, x), rel_tol=1e-10)
