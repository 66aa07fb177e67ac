"""Fixed-step gradient descent and the linear-programming placeholder."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Sequence

import numpy as np

from scicalc.core.errors import InvalidArgument
from scicalc.core.outcome import Outcome
from scicalc.utils.constants import DEFAULT_LEARNING_RATE, DEFAULT_TOLERANCE
from scicalc.utils.validation import as_vector, require_positive

logger = logging.getLogger(__name__)

Objective = Callable[[np.ndarray], float]
Gradient = Callable[[np.ndarray], Sequence[float]]


@dataclass
class DescentResult:
    """Result of a gradient descent run.

    ``x`` is a float when the run started from a scalar, else a 1-D array.
    """

    x: np.ndarray | float
    value: float
    iterations: int = 0
    converged: bool = False
    history: list[float] = field(default_factory=list)  # objective per iteration


def _as_scalar(value: Any, name: str) -> float:
    arr = np.asarray(value, dtype=float)
    if arr.size != 1:
        raise InvalidArgument(f"{name} must return a single number, got shape {arr.shape}")
    return float(arr.item())


def gradient_descent(
    f: Objective,
    grad: Gradient,
    x0: Sequence[float] | float,
    learning_rate: float = DEFAULT_LEARNING_RATE,
    tol: float = DEFAULT_TOLERANCE,
    max_iter: int = 1000,
) -> DescentResult:
    """Steepest descent x ← x - lr·∇f(x) with a fixed step size.

    Converges when the Euclidean distance between successive iterates
    drops below ``tol``. A scalar ``x0`` makes f and grad receive plain
    floats, so one-dimensional objectives can be written without indexing.

    Args:
        f: Objective, evaluated on a 1-D array (or a float for scalar x0).
        grad: Gradient of f, returning a sequence the size of x.
        x0: Starting point (scalar or vector).
        learning_rate: Fixed step multiplier.
        tol: Step-length convergence threshold.
        max_iter: Iteration cap.
    """
    require_positive("learning_rate", learning_rate)
    require_positive("tol", tol)
    require_positive("max_iter", max_iter)

    scalar = np.ndim(x0) == 0
    x = as_vector(np.atleast_1d(x0), "x0").copy()

    def point(v: np.ndarray) -> np.ndarray | float:
        return float(v[0]) if scalar else v

    history: list[float] = []
    for i in range(1, max_iter + 1):
        g = np.asarray(grad(point(x)), dtype=float).reshape(x.shape)
        x_new = x - learning_rate * g
        step = float(np.linalg.norm(x_new - x))
        x = x_new
        history.append(_as_scalar(f(point(x)), "objective"))
        if step < tol:
            logger.debug("Gradient descent converged in %d iterations", i)
            return DescentResult(
                x=point(x), value=history[-1], iterations=i, converged=True, history=history
            )

    logger.warning("Gradient descent did not converge in %d iterations", max_iter)
    return DescentResult(
        x=point(x), value=history[-1], iterations=max_iter, converged=False, history=history
    )


def linear_programming(*args: Any, **kwargs: Any) -> Outcome[Any]:
    """Placeholder kept for API compatibility; always unsupported."""
    return Outcome.unsupported("Linear programming is not implemented")
