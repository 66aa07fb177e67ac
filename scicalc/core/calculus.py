"""Numerical calculus on caller-supplied functions.

Finite-difference derivatives, the composite trapezoidal integrator
(also used by the Laplace transform approximation) and related helpers.
The functions passed in must be pure and deterministic.
"""

from __future__ import annotations

from typing import Callable

from scicalc.core.errors import InvalidArgument
from scicalc.utils.constants import DEFAULT_INTEGRATION_STEPS, DEFAULT_STEP

Func = Callable[[float], float]


def derivative(f: Func, x: float, h: float = DEFAULT_STEP) -> float:
    """Central-difference first derivative f'(x)."""
    if h <= 0:
        raise InvalidArgument(f"Step h must be positive, got {h}")
    return (f(x + h) - f(x - h)) / (2.0 * h)


def second_derivative(f: Func, x: float, h: float = DEFAULT_STEP) -> float:
    """Second derivative f''(x) by the three-point stencil."""
    if h <= 0:
        raise InvalidArgument(f"Step h must be positive, got {h}")
    return (f(x + h) - 2.0 * f(x) + f(x - h)) / (h * h)


def integral(f: Func, a: float, b: float, n: int = DEFAULT_INTEGRATION_STEPS) -> float:
    """Definite integral of f over [a, b] by the composite trapezoidal rule.

    Args:
        f: Integrand.
        a: Lower limit.
        b: Upper limit (may be below ``a``; the sign follows).
        n: Number of sub-intervals.

    Returns:
        Approximate integral value (0.0 when a == b).
    """
    if n < 1:
        raise InvalidArgument(f"Number of intervals must be >= 1, got {n}")
    if a == b:
        return 0.0
    h = (b - a) / n
    total = 0.5 * (f(a) + f(b))
    for i in range(1, n):
        total += f(a + i * h)
    return total * h


def limit(f: Func, x: float, h: float = DEFAULT_STEP, side: str = "right") -> float:
    """Approximate the limit of f at x by evaluating at a small offset.

    Args:
        side: ``"right"`` (x + h), ``"left"`` (x - h) or ``"both"`` (mean of both).
    """
    if side == "right":
        return f(x + h)
    if side == "left":
        return f(x - h)
    if side == "both":
        return 0.5 * (f(x + h) + f(x - h))
    raise InvalidArgument(f"side must be 'left', 'right' or 'both', got {side!r}")


def mean_value_slope(f: Func, a: float, b: float) -> float:
    """Average rate of change (f(b) - f(a)) / (b - a) from the mean value theorem."""
    if a == b:
        raise InvalidArgument("Interval endpoints must differ")
    return (f(b) - f(a)) / (b - a)


def integral_by_parts(u: Func, dv: Func, a: float, b: float, n: int = 200) -> float:
    """∫ u·dv over [a, b] evaluated as [u·v] - ∫ v·du.

    v is the running integral of dv from a; du is the numeric derivative of u.
    Cost is O(n²) integrand evaluations.
    """

    def v(x: float) -> float:
        return integral(dv, a, x, n)

    def v_du(x: float) -> float:
        return v(x) * derivative(u, x)

    return u(b) * v(b) - u(a) * v(a) - integral(v_du, a, b, n)
