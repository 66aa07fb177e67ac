"""Scalar root finding: Newton-Raphson and bisection."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from scicalc.core.errors import InvalidArgument
from scicalc.core.outcome import Outcome
from scicalc.utils.constants import DEFAULT_MAX_ITERATIONS, DEFAULT_TOLERANCE, EPS_DERIVATIVE
from scicalc.utils.validation import require_positive

logger = logging.getLogger(__name__)

Func = Callable[[float], float]


@dataclass
class RootResult:
    """Approximate root of a scalar function."""

    root: float
    iterations: int
    converged: bool
    residual: float = 0.0  # f(root)


def newton_method(
    f: Func,
    df: Func,
    x0: float,
    tol: float = DEFAULT_TOLERANCE,
    max_iter: int = DEFAULT_MAX_ITERATIONS,
) -> Outcome[RootResult]:
    """Newton-Raphson iteration x ← x - f(x)/f'(x).

    Converges when the step |Δx| drops below ``tol``.

    Returns:
        Outcome with a RootResult (``converged`` False if the iteration
        cap was hit), or no-result when |f'(x)| falls below
        ``EPS_DERIVATIVE``.
    """
    require_positive("tol", tol)
    require_positive("max_iter", max_iter)

    x = x0
    for i in range(1, max_iter + 1):
        slope = df(x)
        if abs(slope) < EPS_DERIVATIVE:
            logger.debug("Newton: derivative %g too small at x=%g", slope, x)
            return Outcome.no_result(f"Derivative vanishes near x = {x:.6g}")
        step = f(x) / slope
        x -= step
        if abs(step) < tol:
            return Outcome.ok(RootResult(root=x, iterations=i, converged=True, residual=f(x)))

    logger.warning("Newton did not converge in %d iterations (x=%g)", max_iter, x)
    return Outcome.ok(RootResult(root=x, iterations=max_iter, converged=False, residual=f(x)))


def bisection_method(
    f: Func,
    a: float,
    b: float,
    tol: float = DEFAULT_TOLERANCE,
    max_iter: int = DEFAULT_MAX_ITERATIONS,
) -> RootResult:
    """Bisection on a sign-changing bracket [a, b].

    Converges when the half-width of the bracket drops below ``tol``
    or an exact zero is hit.

    Raises:
        InvalidArgument: If a >= b or f(a) and f(b) have the same sign.
    """
    require_positive("tol", tol)
    require_positive("max_iter", max_iter)
    if a >= b:
        raise InvalidArgument(f"Bracket must satisfy a < b, got [{a}, {b}]")

    fa, fb = f(a), f(b)
    if fa == 0:
        return RootResult(root=a, iterations=0, converged=True, residual=0.0)
    if fb == 0:
        return RootResult(root=b, iterations=0, converged=True, residual=0.0)
    if (fa > 0) == (fb > 0):
        raise InvalidArgument(
            f"f(a) and f(b) must have opposite signs (f({a})={fa:.6g}, f({b})={fb:.6g})"
        )

    mid = 0.5 * (a + b)
    for i in range(1, max_iter + 1):
        mid = 0.5 * (a + b)
        fm = f(mid)
        if fm == 0 or 0.5 * (b - a) < tol:
            return RootResult(root=mid, iterations=i, converged=True, residual=fm)
        if (fm > 0) == (fa > 0):
            a, fa = mid, fm
        else:
            b = mid

    logger.warning("Bisection did not converge in %d iterations", max_iter)
    return RootResult(root=mid, iterations=max_iter, converged=False, residual=f(mid))
