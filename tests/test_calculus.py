"""Tests for finite differences and trapezoidal integration."""

import math

import pytest

from scicalc.core.calculus import (
    derivative,
    integral,
    integral_by_parts,
    limit,
    mean_value_slope,
    second_derivative,
)
from scicalc.core.errors import InvalidArgument


class TestDifferentiation:
    def test_central_difference(self):
        assert derivative(lambda x: x**3, 2.0) == pytest.approx(12.0, rel=1e-6)

    def test_second_derivative(self):
        assert second_derivative(math.sin, 1.0, h=1e-3) == pytest.approx(-math.sin(1.0), rel=1e-4)

    def test_step_must_be_positive(self):
        with pytest.raises(InvalidArgument):
            derivative(math.sin, 0.0, h=0.0)


class TestIntegral:
    def test_polynomial(self):
        assert integral(lambda x: x**2, 0.0, 3.0) == pytest.approx(9.0, rel=1e-5)

    def test_sine_over_half_period(self):
        assert integral(math.sin, 0.0, math.pi) == pytest.approx(2.0, rel=1e-5)

    def test_empty_interval(self):
        assert integral(math.exp, 1.0, 1.0) == 0.0

    def test_reversed_limits_flip_sign(self):
        forward = integral(math.exp, 0.0, 1.0)
        assert integral(math.exp, 1.0, 0.0) == pytest.approx(-forward)

    def test_intervals_validated(self):
        with pytest.raises(InvalidArgument):
            integral(math.exp, 0.0, 1.0, n=0)


class TestMisc:
    def test_limit_sinc(self):
        assert limit(lambda x: math.sin(x) / x, 0.0, side="both") == pytest.approx(1.0)

    def test_limit_bad_side(self):
        with pytest.raises(InvalidArgument):
            limit(math.sin, 0.0, side="up")

    def test_mean_value_slope(self):
        assert mean_value_slope(lambda x: x**2, 1.0, 3.0) == pytest.approx(4.0)

    def test_integral_by_parts(self):
        # ∫₀¹ x·eˣ dx = 1
        result = integral_by_parts(lambda x: x, math.exp, 0.0, 1.0, n=100)
        assert result == pytest.approx(1.0, rel=1e-3)
