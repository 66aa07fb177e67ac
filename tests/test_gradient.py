"""Tests for gradient descent and the linear-programming placeholder."""

import numpy as np
import pytest

from scicalc.core.errors import InvalidArgument, UnsupportedError
from scicalc.core.outcome import Status
from scicalc.optimization.gradient import gradient_descent, linear_programming


def _bowl(x):
    """f = (x-3)² + 2(y+1)²."""
    return (x[0] - 3.0) ** 2 + 2.0 * (x[1] + 1.0) ** 2


def _bowl_grad(x):
    return [2.0 * (x[0] - 3.0), 4.0 * (x[1] + 1.0)]


class TestGradientDescent:
    def test_scalar_parabola(self):
        """A scalar start hands plain floats to f and grad and returns a float."""
        result = gradient_descent(
            lambda x: (x - 3.0) ** 2, lambda x: 2 * (x - 3.0), 0.0, learning_rate=0.1
        )
        assert result.converged
        assert isinstance(result.x, float)
        assert result.x == pytest.approx(3.0, abs=1e-4)
        assert result.value == pytest.approx(0.0, abs=1e-7)

    def test_one_element_vector_start(self):
        """A length-1 list start keeps array semantics and a 1-D result."""
        result = gradient_descent(
            lambda x: (x - 3.0) ** 2, lambda x: 2 * (x - 3.0), [0.0], learning_rate=0.1
        )
        assert result.converged
        assert result.x.shape == (1,)
        assert result.x[0] == pytest.approx(3.0, abs=1e-4)

    def test_objective_must_be_scalar(self):
        with pytest.raises(InvalidArgument, match="single number"):
            gradient_descent(lambda x: x, lambda x: [1.0, 1.0], [0.0, 0.0], learning_rate=0.1)

    def test_two_dimensional_bowl(self):
        result = gradient_descent(_bowl, _bowl_grad, [0.0, 0.0], learning_rate=0.1)
        assert result.converged
        assert np.allclose(result.x, [3.0, -1.0], atol=1e-4)
        assert result.value == pytest.approx(0.0, abs=1e-7)

    def test_history_decreases(self):
        result = gradient_descent(_bowl, _bowl_grad, [0.0, 0.0], learning_rate=0.1)
        assert len(result.history) == result.iterations
        assert all(b <= a for a, b in zip(result.history, result.history[1:]))

    def test_iteration_cap(self):
        result = gradient_descent(_bowl, _bowl_grad, [0.0, 0.0], learning_rate=1e-4, max_iter=5)
        assert not result.converged
        assert result.iterations == 5

    def test_invalid_learning_rate(self):
        with pytest.raises(InvalidArgument):
            gradient_descent(_bowl, _bowl_grad, [0.0, 0.0], learning_rate=0.0)


class TestLinearProgramming:
    def test_always_unsupported(self):
        out = linear_programming([1, 2], [[1, 1]], [4])
        assert out.status is Status.UNSUPPORTED
        with pytest.raises(UnsupportedError):
            out.unwrap()
