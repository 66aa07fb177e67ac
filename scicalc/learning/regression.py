"""Ordinary least squares line fitting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from scicalc.core.errors import InvalidArgument
from scicalc.utils.validation import as_vector, require_same_length


@dataclass
class RegressionResult:
    """Fitted line y = slope·x + intercept."""

    slope: float
    intercept: float
    r_squared: float = 1.0

    def predict(self, x: float) -> float:
        return self.slope * x + self.intercept


def linear_regression(x: Sequence[float], y: Sequence[float]) -> RegressionResult:
    """Closed-form OLS slope and intercept.

    m = (n·Σxy - Σx·Σy) / (n·Σx² - (Σx)²),  b = (Σy - m·Σx) / n

    Raises:
        InvalidArgument: On empty or mismatched input, or when every x is equal.
    """
    xs = as_vector(x, "x")
    ys = as_vector(y, "y")
    require_same_length(xs, ys)
    n = xs.size

    sx, sy = xs.sum(), ys.sum()
    denom = n * (xs @ xs) - sx * sx
    if abs(denom) < 1e-12 * max(1.0, n * (xs @ xs)):
        raise InvalidArgument("Regression is undefined when all x values are equal")
    slope = (n * (xs @ ys) - sx * sy) / denom
    intercept = (sy - slope * sx) / n

    residual = ys - (slope * xs + intercept)
    ss_tot = float(np.sum((ys - ys.mean()) ** 2))
    r_squared = 1.0 - float(residual @ residual) / ss_tot if ss_tot > 0 else 1.0
    return RegressionResult(slope=float(slope), intercept=float(intercept), r_squared=r_squared)


def least_squares(x: Sequence[float], y: Sequence[float]) -> RegressionResult:
    """Least squares line fit; identical to :func:`linear_regression`."""
    return linear_regression(x, y)
