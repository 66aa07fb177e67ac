"""Distance and similarity metrics between vectors and sets.

All pairwise metrics require operands of equal length.
"""

from __future__ import annotations

from typing import Hashable, Iterable, Sequence

import numpy as np

from scicalc.core.errors import InvalidArgument
from scicalc.utils.validation import as_vector, require_positive, require_same_length

VectorLike = Sequence[float] | np.ndarray


def _pair(u: VectorLike, v: VectorLike) -> tuple[np.ndarray, np.ndarray]:
    a = as_vector(u, "u")
    b = as_vector(v, "v")
    require_same_length(a, b)
    return a, b


def euclidean_distance(u: VectorLike, v: VectorLike) -> float:
    """L2 distance sqrt(Σ (u_i - v_i)²)."""
    a, b = _pair(u, v)
    return float(np.sqrt(np.sum((a - b) ** 2)))


def manhattan_distance(u: VectorLike, v: VectorLike) -> float:
    """L1 distance Σ |u_i - v_i|."""
    a, b = _pair(u, v)
    return float(np.sum(np.abs(a - b)))


def chebyshev_distance(u: VectorLike, v: VectorLike) -> float:
    """L∞ distance max |u_i - v_i|."""
    a, b = _pair(u, v)
    return float(np.max(np.abs(a - b)))


def minkowski_distance(u: VectorLike, v: VectorLike, p: float = 2.0) -> float:
    """Lp distance (Σ |u_i - v_i|^p)^(1/p); p = 1 is Manhattan, p = 2 Euclidean."""
    require_positive("p", p)
    a, b = _pair(u, v)
    return float(np.sum(np.abs(a - b) ** p) ** (1.0 / p))


def dot_product(u: VectorLike, v: VectorLike) -> float:
    a, b = _pair(u, v)
    return float(a @ b)


def cosine_similarity(u: VectorLike, v: VectorLike) -> float:
    """u·v / (|u|·|v|), in [-1, 1]."""
    a, b = _pair(u, v)
    na = np.linalg.norm(a)
    nb = np.linalg.norm(b)
    if na == 0 or nb == 0:
        raise InvalidArgument("Cosine similarity is undefined for a zero vector")
    return float(a @ b / (na * nb))


def cosine_distance(u: VectorLike, v: VectorLike) -> float:
    """1 - cosine similarity."""
    return 1.0 - cosine_similarity(u, v)


def pearson_similarity(u: VectorLike, v: VectorLike) -> float:
    """Pearson linear correlation coefficient, in [-1, 1]."""
    a, b = _pair(u, v)
    da = a - a.mean()
    db = b - b.mean()
    denom = np.sqrt(np.sum(da**2) * np.sum(db**2))
    if denom == 0:
        raise InvalidArgument("Pearson similarity is undefined when a vector has zero variance")
    return float(np.sum(da * db) / denom)


def jaccard_similarity(set_a: Iterable[Hashable], set_b: Iterable[Hashable]) -> float:
    """|A ∩ B| / |A ∪ B| over the distinct elements of each collection."""
    a = set(set_a)
    b = set(set_b)
    union = a | b
    if not union:
        raise InvalidArgument("Jaccard similarity is undefined for two empty sets")
    return len(a & b) / len(union)
