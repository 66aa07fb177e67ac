"""Tests for closed-form polynomial root finding."""

import pytest

from scicalc.core.algebra import (
    cubic_roots,
    evaluate_polynomial,
    linear_root,
    polynomial_derivative,
    polynomial_roots,
    quadratic_roots,
)
from scicalc.core.errors import InvalidArgument
from scicalc.core.outcome import Status


class TestQuadratic:
    def test_two_roots_ordered(self):
        out = quadratic_roots(1, -3, 2)
        assert out.is_ok
        x1, x2 = out.value
        assert x1 == pytest.approx(2.0)
        assert x2 == pytest.approx(1.0)

    def test_negative_leading_coefficient_still_ordered(self):
        x1, x2 = quadratic_roots(-1, 3, -2).unwrap()
        assert x1 >= x2

    def test_repeated_root(self):
        x1, x2 = quadratic_roots(1, -2, 1).unwrap()
        assert x1 == pytest.approx(1.0)
        assert x2 == pytest.approx(1.0)

    def test_complex_roots_no_result(self):
        out = quadratic_roots(1, 0, 1)
        assert out.status is Status.NO_RESULT

    def test_zero_leading_coefficient(self):
        with pytest.raises(InvalidArgument):
            quadratic_roots(0, 1, 1)


class TestCubic:
    def test_three_real_roots(self):
        # (x - 1)(x - 2)(x - 3)
        assert cubic_roots(1, -6, 11, -6) == pytest.approx([1.0, 2.0, 3.0])

    def test_single_real_root(self):
        # x³ + x + 2 = (x + 1)(x² - x + 2)
        assert cubic_roots(1, 0, 1, 2) == pytest.approx([-1.0])

    def test_triple_root(self):
        assert cubic_roots(1, -3, 3, -1) == pytest.approx([1.0])

    @pytest.mark.parametrize(
        "coeffs, expected",
        [
            # (x - 1000)²(x - 2000)
            ((1, -4000, 5e6, -2e9), [1000.0, 1000.0, 2000.0]),
            # (x - 1e4)²(x - 3e4), scaled by a = 2
            ((2, -1e5, 1.4e9, -6e12), [1e4, 1e4, 3e4]),
        ],
    )
    def test_double_root_of_large_cubic(self, coeffs, expected):
        assert cubic_roots(*coeffs) == pytest.approx(expected, rel=1e-6)

    def test_large_triple_root(self):
        # (x - 1000)³
        assert cubic_roots(1, -3000, 3e6, -1e9) == pytest.approx([1000.0])

    def test_degenerates_to_quadratic(self):
        assert cubic_roots(0, 1, -3, 2) == pytest.approx([1.0, 2.0])


class TestPolynomialRoots:
    def test_linear(self):
        assert polynomial_roots([2, -4]).unwrap() == pytest.approx([2.0])
        assert linear_root(2, -4) == pytest.approx(2.0)

    def test_quadratic(self):
        assert polynomial_roots([1, 0, -4]).unwrap() == pytest.approx([-2.0, 2.0])

    def test_quartic_unsupported(self):
        assert polynomial_roots([1, 0, 0, 0, -1]).status is Status.UNSUPPORTED

    def test_constant_rejected(self):
        with pytest.raises(InvalidArgument):
            polynomial_roots([5])


class TestPolynomialHelpers:
    def test_horner(self):
        assert evaluate_polynomial([2, -3, 1], 2.0) == pytest.approx(3.0)

    def test_derivative(self):
        assert polynomial_derivative([3, 2, 1]) == [6, 2]
