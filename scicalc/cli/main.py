"""SciCalc command-line interface.

Entry point for the ``scicalc`` CLI tool.
"""

from __future__ import annotations

import json
import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from scicalc import __app_name__, __version__
from scicalc.core.config import SolverSettings, load_settings
from scicalc.core.errors import InvalidArgument

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


@click.group()
@click.version_option(version=__version__, prog_name=__app_name__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.option(
    "--settings",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON file overriding solver defaults.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, settings: str | None) -> None:
    """SciCalc - scientific and mathematical computation toolkit.

    Linear algebra, graph algorithms, root finding, statistics, integrals
    and gradient descent from the command line. Matrices, vectors, graphs
    and polynomial coefficients are passed as JSON.
    """
    _configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["console"] = console

    if settings is not None:
        try:
            ctx.obj["settings"] = load_settings(settings)
        except (InvalidArgument, json.JSONDecodeError) as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise SystemExit(2)
    else:
        ctx.obj["settings"] = SolverSettings()


# Import and register sub-command groups
from scicalc.cli.calculus_cmd import calculus  # noqa: E402
from scicalc.cli.graph_cmd import graph  # noqa: E402
from scicalc.cli.info_cmd import info  # noqa: E402
from scicalc.cli.linalg_cmd import linalg  # noqa: E402
from scicalc.cli.optimize_cmd import optimize  # noqa: E402
from scicalc.cli.roots_cmd import roots  # noqa: E402
from scicalc.cli.stats_cmd import stats  # noqa: E402

cli.add_command(linalg)
cli.add_command(graph)
cli.add_command(roots)
cli.add_command(stats)
cli.add_command(calculus)
cli.add_command(optimize)
cli.add_command(info)


def main() -> None:
    """Convenience wrapper for entry-point scripts."""
    cli()
