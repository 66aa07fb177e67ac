"""Helpers shared by the CLI commands."""

from __future__ import annotations

import json
from typing import Any

import click
from rich.console import Console

from scicalc.core.outcome import Outcome

EXIT_NO_RESULT = 1
EXIT_INVALID = 2


def get_console(ctx: click.Context) -> Console:
    return ctx.obj.get("console", Console())


def parse_json(text: str, what: str) -> Any:
    """Decode a JSON command-line argument, failing with a usage error."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"{what} is not valid JSON: {exc.msg}") from exc


def fail_invalid(console: Console, exc: Exception) -> None:
    console.print(f"[red]Error:[/red] {exc}")
    raise SystemExit(EXIT_INVALID)


def unwrap_or_exit(console: Console, outcome: Outcome[Any]) -> Any:
    """Return the outcome value, or report why there is none and exit 1."""
    if outcome.is_ok:
        return outcome.value
    console.print(f"[yellow]{outcome.status.value}:[/yellow] {outcome.reason}")
    raise SystemExit(EXIT_NO_RESULT)


def format_number(x: float) -> str:
    return f"{x:.6g}"


def parse_coefficients(text: str, minimum: int = 2) -> list[float]:
    """Decode a JSON list of polynomial coefficients, highest degree first."""
    coeffs = parse_json(text, "COEFFS")
    if not isinstance(coeffs, list) or len(coeffs) < minimum:
        noun = "number" if minimum == 1 else "numbers"
        raise click.BadParameter(f"COEFFS must be a JSON list of at least {minimum} {noun}")
    try:
        return [float(c) for c in coeffs]
    except (TypeError, ValueError) as exc:
        raise click.BadParameter(f"COEFFS must contain only numbers: {exc}") from exc
