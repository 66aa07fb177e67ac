"""Descriptive statistics and probability distributions.

Sample statistics follow the (n - 1) convention. Special functions
(gamma, regularised incomplete gamma, normal CDF) come from
``scipy.special``.
"""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from scipy import special

from scicalc.core.distance import pearson_similarity
from scicalc.core.errors import InvalidArgument
from scicalc.utils.constants import SQRT_TWO_PI
from scicalc.utils.validation import (
    as_vector,
    require_non_negative_int,
    require_positive,
    require_probability,
)

VectorLike = Sequence[float] | np.ndarray


def _at_least(values: VectorLike, n: int) -> np.ndarray:
    arr = as_vector(values, "values")
    if arr.size < n:
        raise InvalidArgument(f"At least {n} values are required, got {arr.size}")
    return arr


# --- Descriptive statistics ---


def mean(values: VectorLike) -> float:
    return float(np.mean(as_vector(values, "values")))


def sample_variance(values: VectorLike) -> float:
    """Unbiased sample variance (divides by n - 1)."""
    return float(np.var(_at_least(values, 2), ddof=1))


def standard_deviation(values: VectorLike) -> float:
    """Sample standard deviation."""
    return math.sqrt(sample_variance(values))


def median(values: VectorLike) -> float:
    return float(np.median(as_vector(values, "values")))


def mode(values: Sequence[float]) -> float:
    """Most frequent value; ties go to the value seen first."""
    if len(values) == 0:
        raise InvalidArgument("values is empty")
    return Counter(values).most_common(1)[0][0]


def value_range(values: VectorLike) -> float:
    """max - min."""
    arr = as_vector(values, "values")
    return float(arr.max() - arr.min())


def quantile(values: VectorLike, q: float) -> float:
    """q-th quantile (linear interpolation), q in [0, 1]."""
    require_probability("q", q)
    return float(np.quantile(as_vector(values, "values"), q))


def skewness(values: VectorLike) -> float:
    """Sample skewness m3 / s³ with the sample standard deviation s."""
    arr = _at_least(values, 2)
    s = float(np.std(arr, ddof=1))
    if s == 0:
        raise InvalidArgument("Skewness is undefined for zero standard deviation")
    m3 = float(np.mean((arr - arr.mean()) ** 3))
    return m3 / s**3


def kurtosis(values: VectorLike) -> float:
    """Excess kurtosis m4 / s⁴ - 3 with the sample standard deviation s."""
    arr = _at_least(values, 2)
    s = float(np.std(arr, ddof=1))
    if s == 0:
        raise InvalidArgument("Kurtosis is undefined for zero standard deviation")
    m4 = float(np.mean((arr - arr.mean()) ** 4))
    return m4 / s**4 - 3.0


def interquartile_range(values: VectorLike) -> float:
    """Q3 - Q1 with quartiles taken as medians of the lower and upper halves."""
    arr = np.sort(_at_least(values, 4))
    n = arr.size
    lower = arr[: n // 2]
    upper = arr[(n + 1) // 2 :]
    return float(np.median(upper) - np.median(lower))


@dataclass
class Summary:
    """Descriptive summary of a sample."""

    count: int
    mean: float
    std: float
    minimum: float
    median: float
    maximum: float
    iqr: float | None = None


def describe(values: VectorLike) -> Summary:
    """Count, mean, sample std, min, median, max and (for n >= 4) IQR."""
    arr = as_vector(values, "values")
    return Summary(
        count=int(arr.size),
        mean=float(arr.mean()),
        std=float(np.std(arr, ddof=1)) if arr.size > 1 else 0.0,
        minimum=float(arr.min()),
        median=float(np.median(arr)),
        maximum=float(arr.max()),
        iqr=interquartile_range(arr) if arr.size >= 4 else None,
    )


def pearson_correlation(x: VectorLike, y: VectorLike) -> float:
    """Pearson correlation coefficient between two samples."""
    return pearson_similarity(x, y)


# --- Distributions ---


def poisson_pmf(k: int, lam: float) -> float:
    """P(X = k) for a Poisson variable with rate lam."""
    require_non_negative_int("k", k)
    require_positive("lam", lam)
    # log-space avoids overflow of lam**k and k! for large k
    return math.exp(k * math.log(lam) - lam - math.lgamma(k + 1))


def normal_pdf(z: float, mu: float = 0.0, sigma: float = 1.0) -> float:
    """Normal probability density."""
    require_positive("sigma", sigma)
    u = (z - mu) / sigma
    return math.exp(-0.5 * u * u) / (sigma * SQRT_TWO_PI)


def normal_cdf(z: float, mu: float = 0.0, sigma: float = 1.0) -> float:
    """Normal cumulative distribution Φ((z - mu) / sigma)."""
    require_positive("sigma", sigma)
    return float(special.ndtr((z - mu) / sigma))


def gamma_function(z: float) -> float:
    """Γ(z); poles at non-positive integers are rejected."""
    if z <= 0 and float(z).is_integer():
        raise InvalidArgument(f"Gamma function has a pole at {z}")
    return float(special.gamma(z))


def lower_incomplete_gamma(a: float, x: float) -> float:
    """Unregularised lower incomplete gamma γ(a, x) = Γ(a)·P(a, x)."""
    require_positive("a", a)
    if x < 0:
        raise InvalidArgument(f"x must be non-negative, got {x}")
    return float(special.gammainc(a, x) * special.gamma(a))


def chi_square_cdf(x: float, k: int) -> float:
    """CDF of the chi-square distribution with k degrees of freedom."""
    if k < 1:
        raise InvalidArgument(f"Degrees of freedom must be >= 1, got {k}")
    if x < 0:
        raise InvalidArgument(f"x must be non-negative, got {x}")
    if x == 0:
        return 0.0
    return float(special.gammainc(k / 2.0, x / 2.0))
