"""One-dimensional boundary value solver for u''(x) = f(x).

The second derivative is discretised with the three-point stencil on
uniformly spaced nodes, Dirichlet values are imposed at both ends, and the
resulting tridiagonal system goes through ``solve_linear_system``.
"""

from __future__ import annotations

from typing import Callable, Sequence

import numpy as np

from scicalc.core.errors import InvalidArgument
from scicalc.core.linalg import solve_linear_system
from scicalc.core.outcome import Outcome
from scicalc.utils.validation import as_vector

# Relative tolerance on node spacing
_UNIFORM_RTOL = 1e-9


def assemble_stiffness(n: int) -> np.ndarray:
    """n x n matrix with Dirichlet identity rows at both ends and the
    (1, -2, 1) stencil on interior rows."""
    if n < 3:
        raise InvalidArgument(f"At least 3 nodes are required, got {n}")
    K = np.zeros((n, n))
    K[0, 0] = 1.0
    K[-1, -1] = 1.0
    for i in range(1, n - 1):
        K[i, i - 1] = 1.0
        K[i, i] = -2.0
        K[i, i + 1] = 1.0
    return K


def solve_fem(
    f: Callable[[float], float],
    nodes: Sequence[float],
    boundary_conditions: tuple[float, float],
) -> Outcome[np.ndarray]:
    """Solve u'' = f(x) on ``nodes`` with u(first) and u(last) prescribed.

    Args:
        f: Right-hand side source term.
        nodes: Strictly increasing, uniformly spaced coordinates (>= 3).
        boundary_conditions: ``(u_left, u_right)``.

    Returns:
        Outcome with nodal values of u, or no-result if elimination hits a
        near-zero pivot.
    """
    x = as_vector(nodes, "nodes")
    if x.size < 3:
        raise InvalidArgument(f"At least 3 nodes are required, got {x.size}")
    spacing = np.diff(x)
    h = spacing[0]
    if h <= 0 or not np.allclose(spacing, h, rtol=_UNIFORM_RTOL, atol=0.0):
        raise InvalidArgument("Nodes must be strictly increasing and uniformly spaced")
    try:
        u_left, u_right = boundary_conditions
    except (TypeError, ValueError) as exc:
        raise InvalidArgument("boundary_conditions must be a (left, right) pair") from exc

    K = assemble_stiffness(x.size)
    rhs = np.array([h * h * f(xi) for xi in x])
    rhs[0] = u_left
    rhs[-1] = u_right
    return solve_linear_system(K, rhs)
