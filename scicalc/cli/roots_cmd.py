"""CLI commands for polynomial root finding."""

from __future__ import annotations

import click
from rich.table import Table

from scicalc.cli.common import (
    fail_invalid,
    format_number,
    get_console,
    parse_coefficients,
    unwrap_or_exit,
)
from scicalc.core.algebra import evaluate_polynomial, polynomial_derivative
from scicalc.core.config import SolverSettings
from scicalc.core.errors import InvalidArgument
from scicalc.solvers.roots import RootResult, bisection_method, newton_method


def _print_root(ctx: click.Context, title: str, result: RootResult) -> None:
    console = get_console(ctx)
    table = Table(title=title)
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_row("Root", format_number(result.root))
    table.add_row("f(root)", format_number(result.residual))
    table.add_row("Iterations", str(result.iterations))
    table.add_row("Converged", "yes" if result.converged else "[yellow]no[/yellow]")
    console.print(table)


@click.group("roots")
def roots() -> None:
    """Root finding for polynomials. COEFFS is a JSON list, highest degree first."""


@roots.command("newton")
@click.argument("coeffs")
@click.option("--x0", type=float, default=1.0, show_default=True, help="Initial guess.")
@click.pass_context
def roots_newton(ctx: click.Context, coeffs: str, x0: float) -> None:
    """Newton-Raphson iteration from X0."""
    console = get_console(ctx)
    settings: SolverSettings = ctx.obj["settings"]
    c = parse_coefficients(coeffs)
    dc = polynomial_derivative(c)
    try:
        outcome = newton_method(
            lambda x: evaluate_polynomial(c, x),
            lambda x: evaluate_polynomial(dc, x),
            x0,
            tol=settings.tolerance,
            max_iter=settings.max_iterations,
        )
    except InvalidArgument as exc:
        fail_invalid(console, exc)
    _print_root(ctx, "Newton's Method", unwrap_or_exit(console, outcome))


@roots.command("bisect")
@click.argument("coeffs")
@click.option("--a", "lower", type=float, required=True, help="Left end of the bracket.")
@click.option("--b", "upper", type=float, required=True, help="Right end of the bracket.")
@click.pass_context
def roots_bisect(ctx: click.Context, coeffs: str, lower: float, upper: float) -> None:
    """Bisection on the bracket [A, B]."""
    console = get_console(ctx)
    settings: SolverSettings = ctx.obj["settings"]
    c = parse_coefficients(coeffs)
    try:
        result = bisection_method(
            lambda x: evaluate_polynomial(c, x),
            lower,
            upper,
            tol=settings.tolerance,
            max_iter=settings.max_iterations,
        )
    except InvalidArgument as exc:
        fail_invalid(console, exc)
    _print_root(ctx, "Bisection", result)
