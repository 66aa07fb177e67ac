"""Linear algebra engine for SciCalc.

Dense matrix arithmetic, cofactor-based determinant/adjugate/inverse,
closed-form 2x2 eigen-decomposition and Gaussian elimination.

Matrices are accepted as any rectangular nested sequence of real numbers
and returned as ``np.ndarray`` of float. The cofactor expansion is O(n!)
and therefore capped at ``MAX_COFACTOR_ORDER``; it exists for its exact
behaviour on small integer matrices, not for scale.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

import numpy as np

from scicalc.core.errors import InvalidArgument
from scicalc.core.outcome import Outcome
from scicalc.utils.constants import (
    EPS_MATRIX_COMPARE,
    EPS_PIVOT,
    EPS_SINGULAR,
    MAX_COFACTOR_ORDER,
)
from scicalc.utils.validation import as_matrix, as_square_matrix, as_vector

logger = logging.getLogger(__name__)

MatrixLike = Sequence[Sequence[float]] | np.ndarray
VectorLike = Sequence[float] | np.ndarray


# --- Constructors ---


def identity(n: int) -> np.ndarray:
    """n x n identity matrix."""
    if n < 1:
        raise InvalidArgument(f"Size must be positive, got {n}")
    return np.eye(n)


def zeros(rows: int, cols: int) -> np.ndarray:
    if rows < 1 or cols < 1:
        raise InvalidArgument(f"Dimensions must be positive, got {rows}x{cols}")
    return np.zeros((rows, cols))


def ones(rows: int, cols: int) -> np.ndarray:
    if rows < 1 or cols < 1:
        raise InvalidArgument(f"Dimensions must be positive, got {rows}x{cols}")
    return np.ones((rows, cols))


def diagonal(values: VectorLike) -> np.ndarray:
    """Square matrix with ``values`` on the main diagonal."""
    return np.diag(as_vector(values, "values"))


def outer_product(u: VectorLike, v: VectorLike) -> np.ndarray:
    return np.outer(as_vector(u, "u"), as_vector(v, "v"))


def row_matrix(v: VectorLike) -> np.ndarray:
    """1 x n matrix from a vector."""
    return as_vector(v).reshape(1, -1)


def column_matrix(v: VectorLike) -> np.ndarray:
    """n x 1 matrix from a vector."""
    return as_vector(v).reshape(-1, 1)


# --- Arithmetic ---


def matrix_add(a: MatrixLike, b: MatrixLike) -> np.ndarray:
    """Element-wise sum of two matrices of identical shape."""
    A = as_matrix(a, "a")
    B = as_matrix(b, "b")
    if A.shape != B.shape:
        raise InvalidArgument(f"Matrix dimensions must match ({A.shape} != {B.shape})")
    return A + B


def matrix_multiply(a: MatrixLike, b: MatrixLike) -> np.ndarray:
    """Matrix product A·B; columns of A must equal rows of B."""
    A = as_matrix(a, "a")
    B = as_matrix(b, "b")
    if A.shape[1] != B.shape[0]:
        raise InvalidArgument(
            f"Columns of the first matrix ({A.shape[1]}) must equal "
            f"rows of the second ({B.shape[0]})"
        )
    return A @ B


def transpose(a: MatrixLike) -> np.ndarray:
    return as_matrix(a).T.copy()


def hermitian(a: MatrixLike) -> np.ndarray:
    """Conjugate transpose; equal to the transpose for real matrices."""
    return as_square_matrix(a).conj().T.copy()


def upper_triangular(a: MatrixLike) -> np.ndarray:
    """Copy of a square matrix with entries below the diagonal zeroed."""
    return np.triu(as_square_matrix(a))


def lower_triangular(a: MatrixLike) -> np.ndarray:
    """Copy of a square matrix with entries above the diagonal zeroed."""
    return np.tril(as_square_matrix(a))


# --- Predicates ---


def is_square(a: MatrixLike) -> bool:
    try:
        A = as_matrix(a)
    except InvalidArgument:
        return False
    return A.shape[0] == A.shape[1]


def matrices_equal(a: MatrixLike, b: MatrixLike, tol: float = EPS_MATRIX_COMPARE) -> bool:
    """True when both matrices have the same shape and agree element-wise within tol."""
    A = as_matrix(a, "a")
    B = as_matrix(b, "b")
    return A.shape == B.shape and bool(np.all(np.abs(A - B) <= tol))


def is_symmetric(a: MatrixLike, tol: float = EPS_MATRIX_COMPARE) -> bool:
    if not is_square(a):
        return False
    A = as_matrix(a)
    return matrices_equal(A, A.T, tol)


def is_orthogonal(a: MatrixLike, tol: float = EPS_MATRIX_COMPARE) -> bool:
    """True when A·Aᵀ equals the identity within tol."""
    if not is_square(a):
        return False
    A = as_matrix(a)
    return matrices_equal(A @ A.T, np.eye(A.shape[0]), tol)


# --- Determinant, adjugate, inverse ---


def minor(a: MatrixLike, row: int, col: int) -> np.ndarray:
    """Sub-matrix with the given row and column removed."""
    A = as_square_matrix(a)
    n = A.shape[0]
    if n < 2:
        raise InvalidArgument("A 1x1 matrix has no minors")
    if not (0 <= row < n and 0 <= col < n):
        raise InvalidArgument(f"Index ({row}, {col}) out of range for {n}x{n} matrix")
    return np.delete(np.delete(A, row, axis=0), col, axis=1)


def _cofactor_det(A: np.ndarray) -> float:
    n = A.shape[0]
    if n == 1:
        return float(A[0, 0])
    if n == 2:
        return float(A[0, 0] * A[1, 1] - A[0, 1] * A[1, 0])
    det = 0.0
    for j in range(n):
        if A[0, j] == 0:
            continue
        sign = 1.0 if j % 2 == 0 else -1.0
        sub = np.delete(A[1:], j, axis=1)
        det += sign * A[0, j] * _cofactor_det(sub)
    return det


def determinant(a: MatrixLike) -> float:
    """Determinant by Laplace expansion along the first row.

    Raises:
        NotSquare: If the matrix is not square.
        InvalidArgument: If the order exceeds ``MAX_COFACTOR_ORDER``.
    """
    A = as_square_matrix(a)
    n = A.shape[0]
    if n > MAX_COFACTOR_ORDER:
        raise InvalidArgument(
            f"Cofactor expansion is limited to order {MAX_COFACTOR_ORDER}, got {n}"
        )
    return _cofactor_det(A)


def cofactor_matrix(a: MatrixLike) -> np.ndarray:
    """Matrix of signed cofactors C[i, j] = (-1)^(i+j)·det(minor(i, j))."""
    A = as_square_matrix(a)
    n = A.shape[0]
    if n > MAX_COFACTOR_ORDER:
        raise InvalidArgument(
            f"Cofactor expansion is limited to order {MAX_COFACTOR_ORDER}, got {n}"
        )
    if n == 1:
        return np.ones((1, 1))
    C = np.empty((n, n))
    for i in range(n):
        for j in range(n):
            sign = 1.0 if (i + j) % 2 == 0 else -1.0
            C[i, j] = sign * _cofactor_det(minor(A, i, j))
    return C


def adjugate(a: MatrixLike) -> np.ndarray:
    """Transpose of the cofactor matrix."""
    return cofactor_matrix(a).T.copy()


def inverse(a: MatrixLike) -> Outcome[np.ndarray]:
    """Inverse as adjugate(A) / det(A).

    Singularity is judged relative to Hadamard's bound, the product of
    the row 2-norms, so uniformly scaled matrices invert alike.

    Returns:
        Outcome with the inverse, or no-result when |det(A)| is at most
        ``EPS_SINGULAR`` times the Hadamard bound.
    """
    A = as_square_matrix(a)
    det = determinant(A)
    bound = float(np.prod(np.linalg.norm(A, axis=1)))
    if abs(det) <= EPS_SINGULAR * bound:
        logger.debug("Matrix is singular (det=%g, bound=%g), no inverse", det, bound)
        return Outcome.no_result(f"Matrix is singular (determinant {det:.3g})")
    return Outcome.ok(adjugate(A) / det)


# --- 2x2 eigen-decomposition ---


def _require_2x2(a: MatrixLike) -> np.ndarray | None:
    A = as_square_matrix(a)
    return A if A.shape == (2, 2) else None


def eigenvalues_2x2(a: MatrixLike) -> Outcome[tuple[float, float]]:
    """Eigenvalues of a 2x2 matrix from its characteristic quadratic.

    λ = tr/2 ± sqrt(tr²/4 - det)

    Returns:
        Outcome with ``(λ1, λ2)``, λ1 >= λ2. Unsupported for complex
        eigenvalues or any order other than 2.
    """
    A = _require_2x2(a)
    if A is None:
        return Outcome.unsupported("Eigenvalues are only available for 2x2 matrices")
    tr = A[0, 0] + A[1, 1]
    det = A[0, 0] * A[1, 1] - A[0, 1] * A[1, 0]
    disc = tr * tr / 4.0 - det
    if disc < -EPS_SINGULAR:
        return Outcome.unsupported("Complex eigenvalues are not supported")
    root = math.sqrt(max(disc, 0.0))
    return Outcome.ok((float(tr / 2.0 + root), float(tr / 2.0 - root)))


def eigenvectors_2x2(a: MatrixLike) -> Outcome[list[np.ndarray]]:
    """Unit eigenvectors of a 2x2 matrix, ordered as ``eigenvalues_2x2``."""
    A = _require_2x2(a)
    if A is None:
        return Outcome.unsupported("Eigenvectors are only available for 2x2 matrices")
    values = eigenvalues_2x2(A)
    if not values.is_ok:
        return Outcome.unsupported(values.reason)

    (p, q), (r, s) = A
    vectors: list[np.ndarray] = []
    for i, lam in enumerate(values.value):
        if abs(q) > EPS_SINGULAR:
            v = np.array([q, lam - p])
        elif abs(r) > EPS_SINGULAR:
            v = np.array([lam - s, r])
        else:
            # Diagonal matrix: the axes are the eigenvectors
            if p == s:
                v = np.eye(2)[i]
            elif abs(lam - p) <= abs(lam - s):
                v = np.array([1.0, 0.0])
            else:
                v = np.array([0.0, 1.0])
        vectors.append(v / np.linalg.norm(v))
    return Outcome.ok(vectors)


# --- Linear systems ---


def solve_linear_system(a: MatrixLike, b: VectorLike) -> Outcome[np.ndarray]:
    """Solve A·x = b by Gaussian elimination without pivoting.

    Returns:
        Outcome with x, or no-result ("near-singular") when any pivot
        magnitude falls below ``EPS_PIVOT``.

    Raises:
        NotSquare: If A is not square.
        InvalidArgument: If b does not match the order of A.
    """
    A = as_square_matrix(a, "a")
    rhs = as_vector(b, "b")
    n = A.shape[0]
    if rhs.size != n:
        raise InvalidArgument(f"Right-hand side has {rhs.size} entries, expected {n}")

    aug = np.hstack([A, rhs.reshape(-1, 1)])

    # Forward elimination
    for k in range(n):
        pivot = aug[k, k]
        if abs(pivot) < EPS_PIVOT:
            logger.debug("Pivot %d is %g, aborting elimination", k, pivot)
            return Outcome.no_result(f"Matrix is near-singular (pivot {k} = {pivot:.3g})")
        for i in range(k + 1, n):
            factor = aug[i, k] / pivot
            aug[i, k:] -= factor * aug[k, k:]

    # Back substitution
    x = np.zeros(n)
    for i in range(n - 1, -1, -1):
        x[i] = (aug[i, n] - aug[i, i + 1 : n] @ x[i + 1 :]) / aug[i, i]
    return Outcome.ok(x)
