"""Closed-form polynomial root finding.

Linear, quadratic and cubic equations are solved analytically; higher
degrees are reported as unsupported rather than approximated.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from scicalc.core.errors import InvalidArgument
from scicalc.core.outcome import Outcome

# Discriminants below this are treated as zero (repeated roots). The cubic
# solver scales it by the magnitude of its roots.
_EPS_DISCRIMINANT = 1e-12


def linear_root(a: float, b: float) -> float:
    """Root of a·x + b = 0."""
    if a == 0:
        raise InvalidArgument("Coefficient 'a' of a linear equation cannot be zero")
    return -b / a


def quadratic_roots(a: float, b: float, c: float) -> Outcome[tuple[float, float]]:
    """Real roots of a·x² + b·x + c = 0.

    Returns:
        Outcome holding ``(x1, x2)`` with x1 >= x2, or no-result when the
        discriminant is negative (complex roots).

    Raises:
        InvalidArgument: If a == 0.
    """
    if a == 0:
        raise InvalidArgument("Coefficient 'a' of a quadratic cannot be zero")
    disc = b * b - 4.0 * a * c
    if disc < -_EPS_DISCRIMINANT:
        return Outcome.no_result(f"Negative discriminant ({disc:.6g}): no real roots")
    sq = math.sqrt(max(disc, 0.0))
    x1 = (-b + sq) / (2.0 * a)
    x2 = (-b - sq) / (2.0 * a)
    return Outcome.ok((max(x1, x2), min(x1, x2)))


def cubic_roots(a: float, b: float, c: float, d: float) -> list[float]:
    """All real roots of a·x³ + b·x² + c·x + d = 0, sorted ascending.

    Uses the depressed-cubic form: Cardano's formula when a single real
    root exists, the trigonometric form for three real roots. When a == 0
    the equation is solved as a quadratic (or linear) instead.
    """
    if a == 0:
        if b == 0:
            return [linear_root(c, d)]
        quad = quadratic_roots(b, c, d)
        return sorted(set(quad.value)) if quad.is_ok else []

    # Depressed cubic t³ + f·t + g = 0 with x = t - b/(3a)
    f = (3.0 * c / a - (b * b) / (a * a)) / 3.0
    g = (2.0 * b**3 / a**3 - 9.0 * b * c / (a * a) + 27.0 * d / a) / 27.0
    h = g * g / 4.0 + f**3 / 27.0
    shift = b / (3.0 * a)

    # f, g and h grow like r², r³ and r⁶ for roots of magnitude r
    r = max(1.0, abs(b / a), math.sqrt(abs(c / a)), abs(float(np.cbrt(d / a))))
    if abs(f) < _EPS_DISCRIMINANT * r**2 and abs(g) < _EPS_DISCRIMINANT * r**3:
        # Triple root
        return [float(np.cbrt(-d / a))]

    if h > _EPS_DISCRIMINANT * r**6:
        sq = math.sqrt(h)
        s = float(np.cbrt(-g / 2.0 + sq))
        u = float(np.cbrt(-g / 2.0 - sq))
        return [s + u - shift]

    # Three real roots (two coincide when h ~ 0)
    i = math.sqrt(max(g * g / 4.0 - h, 0.0))
    j = float(np.cbrt(i))
    cos_arg = max(-1.0, min(1.0, -g / (2.0 * i)))
    k = math.acos(cos_arg)
    m = math.cos(k / 3.0)
    n = math.sqrt(3.0) * math.sin(k / 3.0)
    roots = [
        2.0 * j * m - shift,
        -j * (m + n) - shift,
        -j * (m - n) - shift,
    ]
    return sorted(roots)


def polynomial_roots(coefficients: Sequence[float]) -> Outcome[list[float]]:
    """Real roots of a polynomial given highest-degree coefficient first.

    Degrees 1 to 3 are solved in closed form. Degree 4 and above is
    reported as unsupported.
    """
    coeffs = [float(x) for x in coefficients]
    degree = len(coeffs) - 1
    if degree < 1:
        raise InvalidArgument("A polynomial needs at least two coefficients")
    if coeffs[0] == 0:
        raise InvalidArgument("Leading coefficient cannot be zero")

    if degree == 1:
        return Outcome.ok([linear_root(*coeffs)])
    if degree == 2:
        quad = quadratic_roots(*coeffs)
        if not quad.is_ok:
            return Outcome.no_result(quad.reason)
        return Outcome.ok(sorted(quad.value))
    if degree == 3:
        return Outcome.ok(cubic_roots(*coeffs))
    return Outcome.unsupported(f"Polynomial degree {degree} > 3 is not supported")


def evaluate_polynomial(coefficients: Sequence[float], x: float) -> float:
    """Horner evaluation, highest-degree coefficient first."""
    result = 0.0
    for c in coefficients:
        result = result * x + c
    return result


def polynomial_derivative(coefficients: Sequence[float]) -> list[float]:
    """Coefficients of the derivative polynomial, highest-degree first."""
    degree = len(coefficients) - 1
    return [c * (degree - i) for i, c in enumerate(coefficients[:-1])]
