"""CLI commands for graph algorithms.

Graphs are JSON objects ``{"A": {"B": 1.5}}``. JSON object keys are
always strings, so keys that look like integers are converted back to
``int`` to let ``{"0": {"1": 2}}`` refer to vertex 0.
"""

from __future__ import annotations

from typing import Any

import click
from rich.table import Table

from scicalc.cli.common import fail_invalid, format_number, get_console, parse_json, unwrap_or_exit
from scicalc.core import graph as g
from scicalc.core.errors import InvalidArgument


def _vertex(key: str) -> Any:
    try:
        return int(key)
    except ValueError:
        return key


def _load_graph(text: str) -> dict:
    raw = parse_json(text, "GRAPH")
    if not isinstance(raw, dict) or not all(isinstance(v, dict) for v in raw.values()):
        raise click.BadParameter("GRAPH must be an object of objects, e.g. '{\"A\": {\"B\": 1}}'")
    try:
        return {
            _vertex(u): {_vertex(v): float(w) for v, w in nbrs.items()} for u, nbrs in raw.items()
        }
    except (TypeError, ValueError) as exc:
        raise click.BadParameter(f"Edge weights must be numbers: {exc}") from exc


def _format_path(path: list) -> str:
    return " → ".join(str(v) for v in path)


@click.group("graph")
def graph() -> None:
    """Graph algorithms on weighted adjacency maps given as JSON."""


@graph.command("shortest-path")
@click.argument("graph_json", metavar="GRAPH")
@click.argument("start")
@click.argument("end")
@click.pass_context
def graph_shortest_path(ctx: click.Context, graph_json: str, start: str, end: str) -> None:
    """Dijkstra shortest path from START to END."""
    console = get_console(ctx)
    try:
        outcome = g.shortest_path_dijkstra(_load_graph(graph_json), _vertex(start), _vertex(end))
    except InvalidArgument as exc:
        fail_invalid(console, exc)
    result = unwrap_or_exit(console, outcome)
    console.print(f"[cyan]Path:[/cyan] {_format_path(result.path)}")
    console.print(f"[cyan]Distance:[/cyan] [green]{format_number(result.distance)}[/green]")


@graph.command("mst")
@click.argument("graph_json", metavar="GRAPH")
@click.pass_context
def graph_mst(ctx: click.Context, graph_json: str) -> None:
    """Minimum spanning tree by Kruskal's algorithm."""
    console = get_console(ctx)
    try:
        tree = g.minimum_spanning_tree_kruskal(_load_graph(graph_json))
    except InvalidArgument as exc:
        fail_invalid(console, exc)

    table = Table(title="Minimum Spanning Tree")
    table.add_column("From", style="cyan")
    table.add_column("To", style="cyan")
    table.add_column("Weight", style="green", justify="right")
    for u, v, w in tree.edges:
        table.add_row(str(u), str(v), format_number(w))
    console.print(table)
    console.print(f"[cyan]Total weight:[/cyan] [green]{format_number(tree.total_weight)}[/green]")


@graph.command("hamiltonian")
@click.argument("graph_json", metavar="GRAPH")
@click.pass_context
def graph_hamiltonian(ctx: click.Context, graph_json: str) -> None:
    """Hamiltonian path starting at the first vertex."""
    console = get_console(ctx)
    try:
        outcome = g.hamiltonian_path(_load_graph(graph_json))
    except InvalidArgument as exc:
        fail_invalid(console, exc)
    console.print(f"[cyan]Path:[/cyan] {_format_path(unwrap_or_exit(console, outcome))}")


@graph.command("eulerian")
@click.argument("graph_json", metavar="GRAPH")
@click.pass_context
def graph_eulerian(ctx: click.Context, graph_json: str) -> None:
    """Eulerian circuit of an undirected graph."""
    console = get_console(ctx)
    try:
        outcome = g.eulerian_circuit(_load_graph(graph_json))
    except InvalidArgument as exc:
        fail_invalid(console, exc)
    console.print(f"[cyan]Circuit:[/cyan] {_format_path(unwrap_or_exit(console, outcome))}")
