import math

import mpmath
import pytest

from kummer.special_functions import Result, Status
from kummer.special_functions._hypergeometric_1_f_1._special_cases import (
    b_equals_2a,
    diagonal_end_step,
    diagonal_step,
    near_equal_parameters,
    one,
    small_a,
    vanishing_b,
)


def _reference(a, b, x):
    with mpmath.workdps(30):
        return float(mpmath.hyp1f1(a, b, x))


def _unused_evaluator(a, b, x, depth):
    raise AssertionError("evaluator called")


class TestVanishingB:
    @pytest.mark.parametrize("x", [2.0, -3.0, 40.0])
    def test_vanishing_a(self, x):
        a, b = 1e-14, 1e-13
        result = vanishing_b(a, b, x, _unused_evaluator)
        assert result.status == Status.PRECISION_LOSS
        assert math.isclose(result.value, 1.0 + a / b * math.expm1(x), rel_tol=1e-12)

    def test_tail_from_evaluator(self):
        def tail(a, b, x, depth):
            assert (a, b, depth) == (1.3, 2.0, 0)
            return Result(_reference(a, b, x))

        result = vanishing_b(0.3, 1e-13, 2.0, tail)
        assert result.status == Status.PRECISION_LOSS
        assert math.isclose(result.value, _reference(0.3, 1e-13, 2.0), rel_tol=1e-9)


class TestNearEqualParameters:
    def test_first_order(self):
        b = 3.0 + 1e-9
        result = near_equal_parameters(3.0, b, 2.0)
        assert result.ok
        assert math.isclose(result.value, _reference(3.0, b, 2.0), rel_tol=1e-9)


class TestBEquals2A:
    @pytest.mark.parametrize("x", [7.0, -7.0, 0.5, -40.0])
    def test_bessel_form(self, x):
        result = b_equals_2a(2.5, x)
        assert result.status == Status.SUCCESS
        assert math.isclose(result.value, _reference(2.5, 5.0, x), rel_tol=1e-12)

    def test_zero_argument(self):
        assert b_equals_2a(3.0, 0.0).value == 1.0

    def test_bessel_underflow_falls_back_to_series(self):
        result = b_equals_2a(150.0, 0.01)
        assert result.ok
        assert math.isclose(result.value, _reference(150.0, 300.0, 0.01), rel_tol=1e-13)


class TestOne:
    @pytest.mark.parametrize(
        "b, x",
        [
            (2.5, 30.0),
            (2.5, -30.0),
            (3.0, 7.5),
            (0.5, 2.0),
            (2.5, 150.0),
            (2.5, -150.0),
            (40.0, 12.0),
        ],
    )
    def test_against_mpmath(self, b, x):
        result = one(b, x)
        assert result.ok
        assert math.isclose(result.value, _reference(1.0, b, x), rel_tol=1e-10)

    def test_b_one(self):
        assert math.isclose(one(1.0, 3.0).value, math.exp(3.0), rel_tol=1e-15)


class TestSmallA:
    def test_minus_one(self):
        assert small_a(-1.0, 2.0, 5.0).value == -1.5

    def test_zero(self):
        assert small_a(0.0, 2.0, 5.0).value == 1.0

    @pytest.mark.parametrize(
        "a, b, x",
        [
            (0.5, 1.5, 3.0),
            (0.3, 1.2, 25.0),
            (-0.4, 2.0, -30.0),
            (0.7, 1.2, 150.0),
            (-0.6, 3.5, -8.0),
            (0.25, 0.75, -120.0),
        ],
    )
    def test_against_mpmath(self, a, b, x):
        result = small_a(a, b, x)
        assert result.ok
        assert math.isclose(result.value, _reference(a, b, x), rel_tol=1e-10)


class TestDiagonalSteps:
    a, b, x = 2.0, 3.0, 1.7

    def test_step(self):
        m_ab = _reference(self.a, self.b, self.x)
        m_ap1_bp2 = _reference(self.a + 1, self.b + 2, self.x)
        m_ap1_bp1, m_a_bp1 = diagonal_step(self.a, self.b, self.x, m_ab, m_ap1_bp2)
        assert math.isclose(m_ap1_bp1, _reference(3.0, 4.0, self.x), rel_tol=1e-12)
        assert math.isclose(m_a_bp1, _reference(2.0, 4.0, self.x), rel_tol=1e-12)

    def test_end_step(self):
        m_ab = _reference(self.a, self.b, self.x)
        m_ap1_bp2 = _reference(self.a + 1, self.b + 2, self.x)
        m_ap1_b, m_ap1_bp1 = diagonal_end_step(self.a, self.b, self.x, m_ab, m_ap1_bp2)
        assert math.isclose(m_ap1_b, math.exp(self.x), rel_tol=1e-12)
        assert math.isclose(m_ap1_bp1, _reference(3.0, 4.0, self.x), rel_tol=1e-12)
