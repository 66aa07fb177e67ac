"""Solver settings and their JSON persistence.

Module constants in ``scicalc.utils.constants`` are the library defaults.
``SolverSettings`` bundles the subset a user may want to override from
the command line or a settings file.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from scicalc.core.errors import InvalidArgument
from scicalc.utils.constants import (
    DEFAULT_INTEGRATION_STEPS,
    DEFAULT_LEARNING_RATE,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_TOLERANCE,
    LAPLACE_HORIZON,
)
from scicalc.utils.validation import ValidationResult, validate_positive, validate_range

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolverSettings:
    """Tunable defaults for iterative solvers."""

    tolerance: float = DEFAULT_TOLERANCE
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    learning_rate: float = DEFAULT_LEARNING_RATE
    integration_steps: int = DEFAULT_INTEGRATION_STEPS
    laplace_horizon: float = LAPLACE_HORIZON

    def validate(self) -> ValidationResult:
        """Check every field, collecting all problems."""
        result = ValidationResult()
        validate_positive("tolerance", self.tolerance, result)
        validate_positive("max_iterations", self.max_iterations, result)
        validate_positive("learning_rate", self.learning_rate, result)
        validate_positive("integration_steps", self.integration_steps, result)
        validate_positive("laplace_horizon", self.laplace_horizon, result)
        if self.tolerance > 1e-2:
            result.warning("tolerance", f"Tolerance {self.tolerance} is very loose")
        validate_range("learning_rate", self.learning_rate, 0.0, 1.0, result)
        return result


def save_settings(settings: SolverSettings, path: str | Path) -> None:
    """Write settings to a JSON file."""
    path = Path(path)
    with open(path, "w") as f:
        json.dump(asdict(settings), f, indent=2)
    logger.info("Saved settings to %s", path)


def _check_types(data: dict) -> ValidationResult:
    """Reject JSON values whose type cannot fill the matching field."""
    result = ValidationResult()
    for f in fields(SolverSettings):
        if f.name not in data:
            continue
        value = data[f.name]
        if f.type == "int":
            if isinstance(value, bool) or not isinstance(value, int):
                result.error(f.name, f"{f.name} must be an integer, got {value!r}")
        elif isinstance(value, bool) or not isinstance(value, (int, float)):
            result.error(f.name, f"{f.name} must be a number, got {value!r}")
    return result


def load_settings(path: str | Path) -> SolverSettings:
    """Read settings from a JSON file; missing keys keep their defaults.

    Raises:
        InvalidArgument: On unknown keys, values of the wrong type, or
            values out of range.
    """
    path = Path(path)
    with open(path) as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise InvalidArgument(f"Settings file {path} must contain a JSON object")

    known = {f.name for f in fields(SolverSettings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise InvalidArgument(f"Unknown settings: {', '.join(unknown)}")
    _check_types(data).raise_if_invalid()

    settings = SolverSettings(**data)
    check = settings.validate()
    for w in check.warnings:
        logger.warning("%s", w.message)
    check.raise_if_invalid()
    return settings
