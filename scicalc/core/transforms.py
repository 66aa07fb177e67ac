"""Transform approximations: direct DFT and a numeric Laplace transform."""

from __future__ import annotations

from typing import Callable, Sequence

import numpy as np

from scicalc.core.calculus import integral
from scicalc.core.errors import InvalidArgument
from scicalc.utils.constants import LAPLACE_HORIZON, LAPLACE_STEPS, TWO_PI
from scicalc.utils.validation import as_matrix, as_vector, require_positive


def fourier_transform(signal: Sequence[float]) -> list[tuple[float, float]]:
    """Discrete Fourier transform by direct summation, O(n²).

    X_k = Σ_n x_n · exp(-2πi·k·n / N)

    Returns:
        One ``(real, imaginary)`` pair per frequency bin k = 0..N-1.
    """
    x = as_vector(signal, "signal")
    n = x.size
    idx = np.arange(n)
    kernel = np.exp(-1j * TWO_PI * np.outer(idx, idx) / n)
    spectrum = kernel @ x
    return [(float(c.real), float(c.imag)) for c in spectrum]


def inverse_fourier_transform(spectrum: Sequence[tuple[float, float]]) -> list[float]:
    """Real part of the inverse DFT of ``(real, imaginary)`` bins.

    An empty spectrum gives an empty signal.

    Raises:
        InvalidArgument: If any bin is not a ``(real, imaginary)`` pair.
    """
    if len(spectrum) == 0:
        return []
    bins = as_matrix(spectrum, "spectrum")
    if bins.shape[1] != 2:
        raise InvalidArgument(
            f"spectrum bins must be (real, imaginary) pairs, got width {bins.shape[1]}"
        )
    n = bins.shape[0]
    idx = np.arange(n)
    kernel = np.exp(1j * TWO_PI * np.outer(idx, idx) / n)
    signal = kernel @ (bins[:, 0] + 1j * bins[:, 1]) / n
    return [float(v) for v in signal.real]


def magnitude_spectrum(signal: Sequence[float]) -> list[float]:
    """|X_k| for each DFT bin."""
    return [float(np.hypot(re, im)) for re, im in fourier_transform(signal)]


def laplace_transform(
    f: Callable[[float], float],
    s: float,
    horizon: float = LAPLACE_HORIZON,
    n: int = LAPLACE_STEPS,
) -> float:
    """Numeric Laplace transform F(s) = ∫₀^∞ f(t)·e^(-st) dt.

    The infinite upper limit is truncated at ``horizon`` and the integral
    evaluated with the trapezoidal rule. Results are only meaningful when
    f(t)·e^(-st) has decayed by ``horizon``; non-decaying integrands are
    not detected.
    """
    require_positive("horizon", horizon)
    return float(integral(lambda t: f(t) * np.exp(-s * t), 0.0, horizon, n))
