"""CLI commands for numeric integration and the Laplace transform.

Both commands integrate a polynomial given as COEFFS with the trapezoidal
rule, using ``integration_steps`` from the active solver settings.
"""

from __future__ import annotations

import click
from rich.table import Table

from scicalc.cli.common import fail_invalid, format_number, get_console, parse_coefficients
from scicalc.core.algebra import evaluate_polynomial
from scicalc.core.calculus import integral
from scicalc.core.config import SolverSettings
from scicalc.core.errors import InvalidArgument
from scicalc.core.transforms import laplace_transform


@click.group("calculus")
def calculus() -> None:
    """Integrals of polynomials. COEFFS is a JSON list, highest degree first."""


@calculus.command("integrate")
@click.argument("coeffs")
@click.option("--a", "lower", type=float, required=True, help="Lower limit.")
@click.option("--b", "upper", type=float, required=True, help="Upper limit.")
@click.pass_context
def calculus_integrate(ctx: click.Context, coeffs: str, lower: float, upper: float) -> None:
    """Definite integral of the polynomial over [A, B]."""
    console = get_console(ctx)
    settings: SolverSettings = ctx.obj["settings"]
    c = parse_coefficients(coeffs, minimum=1)
    try:
        value = integral(
            lambda x: evaluate_polynomial(c, x), lower, upper, n=settings.integration_steps
        )
    except InvalidArgument as exc:
        fail_invalid(console, exc)

    table = Table(title="Trapezoidal Integral")
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_row("Interval", f"[{format_number(lower)}, {format_number(upper)}]")
    table.add_row("Steps", str(settings.integration_steps))
    table.add_row("Integral", format_number(value))
    console.print(table)


@calculus.command("laplace")
@click.argument("coeffs")
@click.option(
    "--s",
    "s",
    type=click.FloatRange(min=0.0, min_open=True),
    required=True,
    help="Transform variable (must be positive).",
)
@click.pass_context
def calculus_laplace(ctx: click.Context, coeffs: str, s: float) -> None:
    """Laplace transform F(S) of the polynomial f(t).

    The integral is truncated at ``laplace_horizon`` from the settings.
    """
    console = get_console(ctx)
    settings: SolverSettings = ctx.obj["settings"]
    c = parse_coefficients(coeffs, minimum=1)
    try:
        value = laplace_transform(
            lambda t: evaluate_polynomial(c, t),
            s,
            horizon=settings.laplace_horizon,
            n=settings.integration_steps,
        )
    except InvalidArgument as exc:
        fail_invalid(console, exc)

    table = Table(title="Laplace Transform")
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_row("s", format_number(s))
    table.add_row("Horizon", format_number(settings.laplace_horizon))
    table.add_row("Steps", str(settings.integration_steps))
    table.add_row("F(s)", format_number(value))
    console.print(table)
