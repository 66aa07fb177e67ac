"""CLI command for fixed-step gradient descent on a polynomial."""

from __future__ import annotations

import click
from rich.table import Table

from scicalc.cli.common import fail_invalid, format_number, get_console, parse_coefficients
from scicalc.core.algebra import evaluate_polynomial, polynomial_derivative
from scicalc.core.config import SolverSettings
from scicalc.core.errors import InvalidArgument
from scicalc.optimization.gradient import gradient_descent


@click.group("optimize")
def optimize() -> None:
    """Minimization of polynomials. COEFFS is a JSON list, highest degree first."""


@optimize.command("descent")
@click.argument("coeffs")
@click.option("--x0", type=float, default=0.0, show_default=True, help="Starting point.")
@click.pass_context
def optimize_descent(ctx: click.Context, coeffs: str, x0: float) -> None:
    """Gradient descent from X0 using the configured learning rate."""
    console = get_console(ctx)
    settings: SolverSettings = ctx.obj["settings"]
    c = parse_coefficients(coeffs)
    dc = polynomial_derivative(c)
    try:
        result = gradient_descent(
            lambda x: evaluate_polynomial(c, x),
            lambda x: evaluate_polynomial(dc, x),
            x0,
            learning_rate=settings.learning_rate,
            tol=settings.tolerance,
            max_iter=settings.max_iterations,
        )
    except InvalidArgument as exc:
        fail_invalid(console, exc)

    table = Table(title="Gradient Descent")
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_row("Learning rate", format_number(settings.learning_rate))
    table.add_row("x*", format_number(result.x))
    table.add_row("f(x*)", format_number(result.value))
    table.add_row("Iterations", str(result.iterations))
    table.add_row("Converged", "yes" if result.converged else "[yellow]no[/yellow]")
    console.print(table)
