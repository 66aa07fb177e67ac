"""Classifiers: k-nearest neighbours, linear SVM/SVR and Gaussian Naive Bayes.

The SVM and SVR here are heuristics: a fixed number of online subgradient
epochs on a hinge (or epsilon-insensitive) loss with a linear decision
function. There is no quadratic-programming solver and convergence is not
guaranteed.
"""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from typing import Hashable, Sequence

import numpy as np

from scicalc.core.errors import InvalidArgument
from scicalc.learning.dataset import Dataset, split_dataset
from scicalc.utils.constants import (
    EPS_VARIANCE,
    SVM_EPOCHS,
    SVM_LEARNING_RATE,
    SVR_EPSILON,
)


@dataclass
class LinearModel:
    """Linear decision function f(x) = w·x + b."""

    weights: np.ndarray
    bias: float = 0.0

    def decision(self, x: Sequence[float]) -> float:
        return float(np.dot(self.weights, np.asarray(x, dtype=float)) + self.bias)


# --- k-nearest neighbours ---


def knn_classify(data: Dataset, point: Sequence[float], k: int = 3) -> Hashable:
    """Majority vote among the k training points nearest to ``point``.

    Distances are Euclidean. Equal distances keep dataset order; a tied
    vote goes to the label of the nearest neighbour among the tied labels.
    """
    X, labels, query = split_dataset(data, point)
    if k < 1:
        raise InvalidArgument(f"k must be >= 1, got {k}")
    dists = np.linalg.norm(X - query, axis=1)
    nearest = np.argsort(dists, kind="stable")[:k]
    votes = Counter(labels[i] for i in nearest)
    return votes.most_common(1)[0][0]


# --- Linear SVM / SVR ---


def _signed(label: Hashable) -> float:
    return 1.0 if label == 1 else -1.0


def train_linear_svm(
    data: Dataset,
    learning_rate: float = SVM_LEARNING_RATE,
    epochs: int = SVM_EPOCHS,
) -> LinearModel:
    """Online subgradient descent on the regularised hinge loss.

    Labels equal to 1 form the positive class; every other label is -1.
    """
    X, labels, _ = split_dataset(data)
    y = np.array([_signed(lbl) for lbl in labels])
    w = np.zeros(X.shape[1])
    b = 0.0
    for _ in range(epochs):
        for xi, yi in zip(X, y):
            if yi * (w @ xi + b) <= 1.0:
                w += learning_rate * (yi * xi - 2.0 * w / epochs)
                b += learning_rate * yi
    return LinearModel(weights=w, bias=b)


def svm_classify(
    data: Dataset,
    point: Sequence[float],
    learning_rate: float = SVM_LEARNING_RATE,
    epochs: int = SVM_EPOCHS,
) -> int:
    """Train a linear SVM on ``data`` and return 1 or -1 for ``point``."""
    _, _, query = split_dataset(data, point)
    model = train_linear_svm(data, learning_rate, epochs)
    return 1 if model.decision(query) >= 0 else -1


def train_linear_svr(
    data: Dataset,
    epsilon: float = SVR_EPSILON,
    learning_rate: float = SVM_LEARNING_RATE,
    epochs: int = SVM_EPOCHS,
) -> LinearModel:
    """Online subgradient descent on the epsilon-insensitive loss."""
    X, labels, _ = split_dataset(data)
    try:
        y = np.array(labels, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"Regression targets must be numeric: {exc}") from exc
    w = np.zeros(X.shape[1])
    b = 0.0
    for _ in range(epochs):
        for xi, yi in zip(X, y):
            error = w @ xi + b - yi
            if abs(error) > epsilon:
                sign = 1.0 if error > 0 else -1.0
                w -= learning_rate * sign * xi
                b -= learning_rate * sign
    return LinearModel(weights=w, bias=b)


def svr_predict(
    data: Dataset,
    point: Sequence[float],
    epsilon: float = SVR_EPSILON,
    learning_rate: float = SVM_LEARNING_RATE,
    epochs: int = SVM_EPOCHS,
) -> float:
    """Train a linear SVR on ``data`` and predict the target at ``point``."""
    _, _, query = split_dataset(data, point)
    model = train_linear_svr(data, epsilon, learning_rate, epochs)
    return model.decision(query)


# --- Gaussian Naive Bayes ---


@dataclass
class ClassStats:
    """Per-class prior and per-feature Gaussian parameters."""

    prior: float
    means: np.ndarray
    variances: np.ndarray


def fit_naive_bayes(data: Dataset) -> dict[Hashable, ClassStats]:
    """Estimate priors, means and (floored) sample variances per class."""
    X, labels, _ = split_dataset(data)
    n = len(labels)
    stats: dict[Hashable, ClassStats] = {}
    for cls in dict.fromkeys(labels):
        rows = X[[i for i, lbl in enumerate(labels) if lbl == cls]]
        ddof = 1 if len(rows) > 1 else 0
        variances = np.maximum(rows.var(axis=0, ddof=ddof), EPS_VARIANCE)
        stats[cls] = ClassStats(prior=len(rows) / n, means=rows.mean(axis=0), variances=variances)
    return stats


def naive_bayes_classify(data: Dataset, point: Sequence[float]) -> Hashable:
    """Class maximising log prior plus summed Gaussian log-likelihoods."""
    _, _, query = split_dataset(data, point)
    best_cls: Hashable = None
    best_score = -math.inf
    for cls, s in fit_naive_bayes(data).items():
        log_lik = -0.5 * np.log(2.0 * math.pi * s.variances) - (query - s.means) ** 2 / (
            2.0 * s.variances
        )
        score = math.log(s.prior) + float(np.sum(log_lik))
        if score > best_score:
            best_cls, best_score = cls, score
    return best_cls
