"""CLI command listing modules, active settings and numerical tolerances."""

from __future__ import annotations

from dataclasses import asdict
from types import ModuleType

import click
from rich.tree import Tree

from scicalc import __app_name__, __version__
from scicalc.cli.common import get_console
from scicalc.core import algebra, calculus, distance, graph, linalg, primitives, statistics, transforms
from scicalc.learning import classification, clustering, regression
from scicalc.optimization import gradient
from scicalc.solvers import fem, ode, roots
from scicalc.utils import constants

_MODULES: tuple[ModuleType, ...] = (
    primitives, algebra, calculus, linalg, distance, statistics, graph, transforms,
    clustering, classification, regression,
    roots, ode, fem,
    gradient,
)


def _summary(module: ModuleType) -> str:
    doc = (module.__doc__ or "").strip()
    return doc.splitlines()[0] if doc else ""


@click.command("info")
@click.pass_context
def info(ctx: click.Context) -> None:
    """Show the toolkit's modules, active solver settings and tolerances."""
    console = get_console(ctx)

    tree = Tree(f"[bold]{__app_name__} {__version__}[/bold]")
    mods = tree.add("[cyan]Modules[/cyan]")
    for module in _MODULES:
        mods.add(f"{module.__name__}: [dim]{_summary(module)}[/dim]")

    solver = tree.add("[cyan]Solver settings[/cyan]")
    for key, value in asdict(ctx.obj["settings"]).items():
        solver.add(f"{key}: {value}")

    tol = tree.add("[cyan]Tolerances[/cyan]")
    for name in ("EPS_PIVOT", "EPS_SINGULAR", "EPS_MATRIX_COMPARE", "EPS_DERIVATIVE", "EPS_CENTROID"):
        tol.add(f"{name}: {getattr(constants, name)}")
    tol.add(f"MAX_COFACTOR_ORDER: {constants.MAX_COFACTOR_ORDER}")

    console.print(tree)
