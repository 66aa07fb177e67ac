"""Input validation for SciCalc.

Two flavours live here: the ``require_*`` / ``as_*`` guards that every
operation calls before computing (raising ``InvalidArgument``), and the
``ValidationResult`` collector used to check settings files where all
problems should be reported at once.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Sequence

import numpy as np

from scicalc.core.errors import InvalidArgument, NotSquare


class Severity(Enum):
    """Severity level for validation messages."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding."""

    severity: Severity
    parameter: str
    message: str
    value: Any = None


@dataclass
class ValidationResult:
    """Aggregated validation result."""

    messages: list[ValidationMessage] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not any(m.severity == Severity.ERROR for m in self.messages)

    @property
    def errors(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    def add(self, severity: Severity, parameter: str, message: str, **kwargs: Any) -> None:
        self.messages.append(
            ValidationMessage(severity=severity, parameter=parameter, message=message, **kwargs)
        )

    def error(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.ERROR, parameter, message, **kwargs)

    def warning(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.WARNING, parameter, message, **kwargs)

    def raise_if_invalid(self) -> None:
        """Raise ``InvalidArgument`` listing every error message."""
        if not self.is_valid:
            raise InvalidArgument("; ".join(m.message for m in self.errors))


def validate_positive(name: str, value: float, result: ValidationResult) -> None:
    """Record an error unless value is strictly positive."""
    if value <= 0:
        result.error(name, f"{name} must be positive, got {value}", value=value)


def validate_range(
    name: str,
    value: float,
    low: float,
    high: float,
    result: ValidationResult,
    severity: Severity = Severity.ERROR,
) -> None:
    """Record a finding unless value falls within [low, high]."""
    if value < low or value > high:
        result.add(severity, name, f"{name} = {value} is outside [{low}, {high}]", value=value)


# --- Guards raising immediately ---


def as_vector(values: Sequence[float] | np.ndarray, name: str = "vector") -> np.ndarray:
    """Convert input to a non-empty 1-D float array."""
    try:
        arr = np.asarray(values, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"{name} must be a sequence of real numbers: {exc}") from exc
    if arr.ndim != 1:
        raise InvalidArgument(f"{name} must be one-dimensional, got shape {arr.shape}")
    if arr.size == 0:
        raise InvalidArgument(f"{name} is empty")
    return arr


def as_matrix(matrix: Sequence[Sequence[float]] | np.ndarray, name: str = "matrix") -> np.ndarray:
    """Convert input to a non-empty rectangular 2-D float array."""
    try:
        arr = np.asarray(matrix, dtype=float)
    except (TypeError, ValueError) as exc:
        # ragged rows end up here
        raise InvalidArgument(f"{name} must be rectangular: {exc}") from exc
    if arr.ndim != 2:
        raise InvalidArgument(f"{name} must be two-dimensional, got shape {arr.shape}")
    if arr.size == 0:
        raise InvalidArgument(f"{name} is empty")
    return arr


def as_square_matrix(
    matrix: Sequence[Sequence[float]] | np.ndarray, name: str = "matrix"
) -> np.ndarray:
    """Convert input to a square 2-D float array, raising ``NotSquare`` otherwise."""
    arr = as_matrix(matrix, name)
    if arr.shape[0] != arr.shape[1]:
        raise NotSquare(f"{name} must be square, got {arr.shape[0]}x{arr.shape[1]}")
    return arr


def require_same_length(u: np.ndarray, v: np.ndarray) -> None:
    """Pairwise operations need operands of equal length."""
    if len(u) != len(v):
        raise InvalidArgument(f"Vector lengths must match ({len(u)} != {len(v)})")


def require_positive(name: str, value: float) -> None:
    if value <= 0:
        raise InvalidArgument(f"{name} must be positive, got {value}")


def require_non_negative_int(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 0:
        raise InvalidArgument(f"{name} must be a non-negative integer, got {value!r}")


def require_probability(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise InvalidArgument(f"{name} must lie in [0, 1], got {value}")
