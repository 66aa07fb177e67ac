"""Initial value problem integrators.

First-order equations y' = f(x, y) use explicit (forward) Euler;
second-order equations y'' = f(x, y, y') use classical fourth-order
Runge-Kutta on the state pair (y, y').
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

import numpy as np

from scicalc.core.errors import InvalidArgument
from scicalc.utils.validation import require_positive


@dataclass
class ODESolution:
    """Solution sampled on a uniform grid."""

    x: np.ndarray
    y: np.ndarray
    dy: np.ndarray = field(default_factory=lambda: np.array([]))  # y' for second-order problems

    @property
    def final(self) -> float:
        return float(self.y[-1])


def _grid(x0: float, x_end: float, h: float) -> tuple[np.ndarray, float]:
    """Uniform grid from x0 to x_end with step as close to h as divides the span."""
    require_positive("h", h)
    if x_end <= x0:
        raise InvalidArgument(f"x_end ({x_end}) must exceed x0 ({x0})")
    n = max(1, int(round((x_end - x0) / h)))
    return np.linspace(x0, x_end, n + 1), (x_end - x0) / n


def solve_first_order_ode(
    f: Callable[[float, float], float],
    x0: float,
    y0: float,
    x_end: float,
    h: float,
) -> ODESolution:
    """Forward Euler: y_{n+1} = y_n + h·f(x_n, y_n)."""
    xs, step = _grid(x0, x_end, h)
    ys = np.empty_like(xs)
    ys[0] = y0
    for i in range(len(xs) - 1):
        ys[i + 1] = ys[i] + step * f(xs[i], ys[i])
    return ODESolution(x=xs, y=ys)


def solve_second_order_ode(
    f: Callable[[float, float, float], float],
    x0: float,
    y0: float,
    dy0: float,
    x_end: float,
    h: float,
) -> ODESolution:
    """RK4 for y'' = f(x, y, y') with y(x0) = y0, y'(x0) = dy0."""
    xs, step = _grid(x0, x_end, h)
    ys = np.empty_like(xs)
    vs = np.empty_like(xs)
    ys[0], vs[0] = y0, dy0

    for i in range(len(xs) - 1):
        x, y, v = xs[i], ys[i], vs[i]
        k1y, k1v = v, f(x, y, v)
        k2y, k2v = v + 0.5 * step * k1v, f(x + 0.5 * step, y + 0.5 * step * k1y, v + 0.5 * step * k1v)
        k3y, k3v = v + 0.5 * step * k2v, f(x + 0.5 * step, y + 0.5 * step * k2y, v + 0.5 * step * k2v)
        k4y, k4v = v + step * k3v, f(x + step, y + step * k3y, v + step * k3v)
        ys[i + 1] = y + step / 6.0 * (k1y + 2.0 * k2y + 2.0 * k3y + k4y)
        vs[i + 1] = v + step / 6.0 * (k1v + 2.0 * k2v + 2.0 * k3v + k4v)
    return ODESolution(x=xs, y=ys, dy=vs)
