"""CLI commands for linear algebra."""

from __future__ import annotations

import click
import numpy as np
from rich.table import Table

from scicalc.cli.common import fail_invalid, format_number, get_console, parse_json, unwrap_or_exit
from scicalc.core import linalg as la
from scicalc.core.errors import InvalidArgument


def _matrix_table(title: str, m: np.ndarray) -> Table:
    table = Table(title=title, show_header=False)
    for _ in range(m.shape[1]):
        table.add_column(justify="right", style="green")
    for row in m:
        table.add_row(*(format_number(v) for v in row))
    return table


@click.group("linalg")
def linalg() -> None:
    """Matrix operations. MATRIX is a JSON list of rows, e.g. '[[1,2],[3,4]]'."""


@linalg.command("det")
@click.argument("matrix")
@click.pass_context
def linalg_det(ctx: click.Context, matrix: str) -> None:
    """Determinant by cofactor expansion."""
    console = get_console(ctx)
    try:
        det = la.determinant(parse_json(matrix, "MATRIX"))
    except InvalidArgument as exc:
        fail_invalid(console, exc)
    console.print(f"[cyan]det[/cyan] = [green]{format_number(det)}[/green]")


@linalg.command("inverse")
@click.argument("matrix")
@click.pass_context
def linalg_inverse(ctx: click.Context, matrix: str) -> None:
    """Inverse via the adjugate."""
    console = get_console(ctx)
    try:
        outcome = la.inverse(parse_json(matrix, "MATRIX"))
    except InvalidArgument as exc:
        fail_invalid(console, exc)
    console.print(_matrix_table("Inverse", unwrap_or_exit(console, outcome)))


@linalg.command("solve")
@click.argument("matrix")
@click.argument("rhs")
@click.pass_context
def linalg_solve(ctx: click.Context, matrix: str, rhs: str) -> None:
    """Solve MATRIX·x = RHS by Gaussian elimination."""
    console = get_console(ctx)
    try:
        outcome = la.solve_linear_system(parse_json(matrix, "MATRIX"), parse_json(rhs, "RHS"))
    except InvalidArgument as exc:
        fail_invalid(console, exc)
    x = unwrap_or_exit(console, outcome)

    table = Table(title="Solution")
    table.add_column("Variable", style="cyan")
    table.add_column("Value", style="green", justify="right")
    for i, v in enumerate(x):
        table.add_row(f"x{i}", format_number(v))
    console.print(table)


@linalg.command("eigen")
@click.argument("matrix")
@click.pass_context
def linalg_eigen(ctx: click.Context, matrix: str) -> None:
    """Eigenvalues and unit eigenvectors of a 2x2 matrix."""
    console = get_console(ctx)
    try:
        m = parse_json(matrix, "MATRIX")
        values = unwrap_or_exit(console, la.eigenvalues_2x2(m))
        vectors = unwrap_or_exit(console, la.eigenvectors_2x2(m))
    except InvalidArgument as exc:
        fail_invalid(console, exc)

    table = Table(title="Eigen-decomposition")
    table.add_column("λ", style="cyan", justify="right")
    table.add_column("Eigenvector", style="green")
    for lam, v in zip(values, vectors):
        table.add_row(format_number(lam), "[" + ", ".join(format_number(c) for c in v) + "]")
    console.print(table)
