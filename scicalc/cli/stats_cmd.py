"""CLI commands for descriptive statistics and regression."""

from __future__ import annotations

import click
from rich.table import Table

from scicalc.cli.common import fail_invalid, format_number, get_console, parse_json
from scicalc.core.errors import InvalidArgument
from scicalc.core.statistics import describe
from scicalc.learning.regression import linear_regression


@click.group("stats")
def stats() -> None:
    """Statistics on JSON lists of numbers."""


@stats.command("describe")
@click.argument("values")
@click.pass_context
def stats_describe(ctx: click.Context, values: str) -> None:
    """Summary statistics of VALUES."""
    console = get_console(ctx)
    try:
        summary = describe(parse_json(values, "VALUES"))
    except InvalidArgument as exc:
        fail_invalid(console, exc)

    table = Table(title="Summary")
    table.add_column("Statistic", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_row("Count", str(summary.count))
    table.add_row("Mean", format_number(summary.mean))
    table.add_row("Std. deviation", format_number(summary.std))
    table.add_row("Minimum", format_number(summary.minimum))
    table.add_row("Median", format_number(summary.median))
    table.add_row("Maximum", format_number(summary.maximum))
    if summary.iqr is not None:
        table.add_row("IQR", format_number(summary.iqr))
    console.print(table)


@stats.command("regress")
@click.argument("x")
@click.argument("y")
@click.pass_context
def stats_regress(ctx: click.Context, x: str, y: str) -> None:
    """Least squares line through the points (X, Y)."""
    console = get_console(ctx)
    try:
        fit = linear_regression(parse_json(x, "X"), parse_json(y, "Y"))
    except InvalidArgument as exc:
        fail_invalid(console, exc)

    table = Table(title="Linear Regression")
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_row("Slope", format_number(fit.slope))
    table.add_row("Intercept", format_number(fit.intercept))
    table.add_row("R²", format_number(fit.r_squared))
    console.print(table)
