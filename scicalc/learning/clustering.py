"""Clustering algorithms: k-means and DBSCAN.

Both are deterministic. k-means seeds its centroids with the first k
points; DBSCAN visits points in input order.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from scicalc.core.errors import InvalidArgument
from scicalc.utils.constants import DEFAULT_MAX_ITERATIONS, EPS_CENTROID
from scicalc.utils.validation import as_matrix, require_positive

logger = logging.getLogger(__name__)


@dataclass
class KMeansResult:
    """Result of a k-means run.

    ``clusters`` maps cluster index to the member points (rows);
    ``labels`` gives the cluster index of every input point. When a
    cluster empties during recomputation it is dropped, so
    ``len(centroids)`` can be smaller than the requested k.
    """

    centroids: np.ndarray
    clusters: dict[int, np.ndarray] = field(default_factory=dict)
    labels: list[int] = field(default_factory=list)
    iterations: int = 0
    converged: bool = False


@dataclass
class DBSCANResult:
    """Result of a DBSCAN run; clusters and noise hold point indices."""

    clusters: dict[int, list[int]] = field(default_factory=dict)
    noise: list[int] = field(default_factory=list)
    labels: list[int] = field(default_factory=list)  # -1 marks noise


def _assign(X: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    dists = np.linalg.norm(X[:, None, :] - centroids[None, :, :], axis=2)
    # argmin returns the lowest index on ties
    return np.argmin(dists, axis=1)


def kmeans(
    data: Sequence[Sequence[float]],
    k: int,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> KMeansResult:
    """Lloyd's algorithm seeded with the first k points.

    Iterates assign → recompute until no centroid moves by more than
    ``EPS_CENTROID`` or ``max_iterations`` is reached.

    Args:
        data: Points as equal-length vectors.
        k: Number of clusters, 1 <= k <= len(data).
        max_iterations: Iteration cap.

    Returns:
        KMeansResult with final centroids, members and convergence flag.
    """
    X = as_matrix(data, "data")
    n = X.shape[0]
    if not 1 <= k <= n:
        raise InvalidArgument(f"k must lie in [1, {n}], got {k}")
    require_positive("max_iterations", max_iterations)

    centroids = X[:k].copy()
    converged = False
    iteration = 0
    for iteration in range(1, max_iterations + 1):
        labels = _assign(X, centroids)
        new_centroids = np.array(
            [X[labels == j].mean(axis=0) for j in range(len(centroids)) if np.any(labels == j)]
        )
        if len(new_centroids) < len(centroids):
            logger.warning(
                "k-means dropped %d empty cluster(s) at iteration %d",
                len(centroids) - len(new_centroids),
                iteration,
            )
        elif np.all(np.abs(new_centroids - centroids) <= EPS_CENTROID):
            converged = True
            centroids = new_centroids
            break
        centroids = new_centroids

    if not converged:
        logger.warning("k-means did not converge in %d iterations", max_iterations)

    labels = _assign(X, centroids)
    clusters = {j: X[labels == j] for j in range(len(centroids))}
    logger.debug("k-means finished after %d iterations (converged=%s)", iteration, converged)
    return KMeansResult(
        centroids=centroids,
        clusters=clusters,
        labels=[int(j) for j in labels],
        iterations=iteration,
        converged=converged,
    )


def _region_query(X: np.ndarray, index: int, eps: float) -> list[int]:
    """Indices within eps of point ``index``, excluding the point itself."""
    d = np.linalg.norm(X - X[index], axis=1)
    return [int(i) for i in np.flatnonzero(d <= eps) if i != index]


def dbscan(data: Sequence[Sequence[float]], eps: float, min_pts: int) -> DBSCANResult:
    """Density-based clustering.

    A point is a core point when at least ``min_pts`` other points lie
    within ``eps`` of it. Clusters grow from core points through
    neighbour-of-neighbour expansion; a non-core point joins the first
    cluster that reaches it. Points never reached are noise.
    """
    X = as_matrix(data, "data")
    require_positive("eps", eps)
    if min_pts < 1:
        raise InvalidArgument(f"min_pts must be >= 1, got {min_pts}")

    n = X.shape[0]
    labels = [None] * n  # None = unvisited, -1 = noise
    cluster_id = 0

    for i in range(n):
        if labels[i] is not None:
            continue
        neighbours = _region_query(X, i, eps)
        if len(neighbours) < min_pts:
            labels[i] = -1
            continue

        labels[i] = cluster_id
        queue = deque(neighbours)
        while queue:
            j = queue.popleft()
            if labels[j] == -1:
                # Border point previously marked as noise
                labels[j] = cluster_id
            if labels[j] is not None:
                continue
            labels[j] = cluster_id
            j_neighbours = _region_query(X, j, eps)
            if len(j_neighbours) >= min_pts:
                queue.extend(j_neighbours)
        cluster_id += 1

    result = DBSCANResult(labels=[int(lbl) for lbl in labels])
    for i, lbl in enumerate(result.labels):
        if lbl == -1:
            result.noise.append(i)
        else:
            result.clusters.setdefault(lbl, []).append(i)
    return result
