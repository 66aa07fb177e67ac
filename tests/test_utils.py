"""Tests for utility modules."""

import numpy as np
import pytest

from scicalc.core.errors import InvalidArgument, NotSquare
from scicalc.utils.constants import DEG_TO_RAD, EPS_PIVOT, EPS_SINGULAR, PI, RAD_TO_DEG
from scicalc.utils.validation import (
    Severity,
    ValidationResult,
    as_matrix,
    as_square_matrix,
    as_vector,
    require_non_negative_int,
    require_probability,
    validate_positive,
    validate_range,
)


class TestConstants:
    def test_angle_conversion(self):
        assert 180.0 * DEG_TO_RAD == pytest.approx(PI)
        assert PI * RAD_TO_DEG == pytest.approx(180.0)

    def test_tolerances_ordered(self):
        assert 0 < EPS_SINGULAR < EPS_PIVOT


class TestValidation:
    def test_positive_pass(self):
        result = ValidationResult()
        validate_positive("x", 1.0, result)
        assert result.is_valid

    def test_positive_fail(self):
        result = ValidationResult()
        validate_positive("x", -1.0, result)
        assert not result.is_valid
        assert len(result.errors) == 1

    def test_range_warning(self):
        result = ValidationResult()
        validate_range("x", 15.0, 0.0, 10.0, result, severity=Severity.WARNING)
        assert result.is_valid
        assert len(result.warnings) == 1

    def test_raise_if_invalid(self):
        result = ValidationResult()
        validate_positive("a", 0.0, result)
        validate_positive("b", -2.0, result)
        with pytest.raises(InvalidArgument, match="a must be positive.*b must be positive"):
            result.raise_if_invalid()


class TestGuards:
    def test_as_vector(self):
        assert as_vector([1, 2]).dtype == np.float64

    def test_as_vector_rejects_matrix(self):
        with pytest.raises(InvalidArgument):
            as_vector([[1, 2]])

    def test_as_matrix_ragged(self):
        with pytest.raises(InvalidArgument):
            as_matrix([[1, 2], [3]])

    def test_as_square_matrix(self):
        with pytest.raises(NotSquare):
            as_square_matrix([[1, 2, 3]])

    def test_non_negative_int(self):
        require_non_negative_int("n", 0)
        with pytest.raises(InvalidArgument):
            require_non_negative_int("n", 2.5)
        with pytest.raises(InvalidArgument):
            require_non_negative_int("n", True)

    def test_probability(self):
        with pytest.raises(InvalidArgument):
            require_probability("q", -0.1)
