import math

import mpmath
import pytest

from kummer.special_functions import Status
from kummer.special_functions._hypergeometric_1_f_1._integer import integer_parameters


def _reference(a, b, x):
    with mpmath.workdps(40):
        return float(mpmath.hyp1f1(a, b, x))


class TestIntegerParameters:
    @pytest.mark.parametrize(
        "m, n, x",
        [
            (1, 5, 7.5),
            (1, 5, -12.0),
            (1, 3, 150.0),
            (4, 3, 2.5),
            (5, 3, -1.5),
            (3, 6, 8.0),
            (3, 4, 20.0),
            (12, 5, 20.0),
            (3, 20, 12.0),
            (7, 10, 30.0),
            (7, 11, 30.0),
            (5, 14, 10.0),
            (-3, 2, 10.0),
            (-4, 3, -6.0),
            (2, 9, 20.0),
            (7, 9, -20.0),
            (3, 7, -150.0),
            (-19, 20, 108.61),
            (-8, 2, 60.0),
            (9, 3, -45.0),
        ],
    )
    def test_against_mpmath(self, m, n, x):
        result = integer_parameters(m, n, x)
        assert result.ok
        assert math.isclose(result.value, _reference(m, n, x), rel_tol=1e-10)

    @pytest.mark.parametrize("m, n", [(3, 0), (2, -4), (-6, -4)])
    def test_domain(self, m, n):
        assert integer_parameters(m, n, 1.5).status == Status.DOMAIN_ERROR

    def test_zero_a(self):
        assert integer_parameters(0, 7, 30.0).value == 1.0

    def test_zero_argument(self):
        assert integer_parameters(5, -2, 0.0).value == 1.0

    @pytest.mark.parametrize("x", [3.0, -2.0])
    def test_both_negative_polynomial(self, x):
        result = integer_parameters(-2, -5, x)
        assert result.ok
        assert math.isclose(result.value, 1.0 + 0.4 * x + x * x / 20.0, rel_tol=1e-14)
