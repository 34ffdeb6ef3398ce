"""CLI entry point — build a graph from --edge options and analyse it."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, NoReturn

import typer

from adjgraph.analysis import run_analysis
from adjgraph.config import load_config
from adjgraph.errors import GraphError
from adjgraph.graph import AdjacencyGraph, build_graph
from adjgraph.model import GraphKind
from adjgraph.outputs.output_console import render_console
from adjgraph.outputs.output_json import render_json
from adjgraph.processors.paths import BreadthFirstPaths
from adjgraph.processors.shortest_path import ShortestPath

app = typer.Typer(no_args_is_help=True)

KindOption = Annotated[GraphKind, typer.Option("--kind", help="Graph variant to build")]
EdgeOption = Annotated[
    list[str] | None,
    typer.Option("--edge", help="Edge as 'v1,v2' or 'v1,v2,weight'; repeat for each edge"),
]


@app.callback(invoke_without_command=True)
def _callback() -> None:
    """adjgraph — adjacency-list graph analysis."""


def _fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise SystemExit(2)


def _parse_edges(values: list[str] | None, kind: GraphKind) -> list[tuple[object, ...]]:
    weighted = kind in (GraphKind.WEIGHTED_UNDIRECTED, GraphKind.WEIGHTED_DIRECTED)
    expected = 3 if weighted else 2
    edges: list[tuple[object, ...]] = []
    for raw in values or []:
        parts = [part.strip() for part in raw.split(",")]
        if len(parts) != expected or not parts[0] or not parts[1]:
            shape = "v1,v2,weight" if weighted else "v1,v2"
            _fail(f"invalid edge '{raw}'. Expected {shape} for a {kind.value} graph.")
        if not weighted:
            edges.append((parts[0], parts[1]))
            continue
        try:
            weight = float(parts[2])
        except ValueError:
            _fail(f"invalid weight '{parts[2]}' in edge '{raw}'.")
        edges.append((parts[0], parts[1], weight))
    return edges


def _build(kind: GraphKind, edge: list[str] | None) -> AdjacencyGraph:
    return build_graph(kind, _parse_edges(edge, kind))


@app.command()
def analyze(
    kind: KindOption = GraphKind.UNDIRECTED,
    edge: EdgeOption = None,
    source: Annotated[
        str | None, typer.Option("--source", help="Source vertex for path processors")
    ] = None,
    config_path: Annotated[
        Path | None, typer.Option("--config", help="Path to adjgraph.yml")
    ] = None,
    out: Annotated[
        Path | None, typer.Option("--out", help="Directory to write analysis.json into")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", help="Enable verbose logging")] = False,
) -> None:
    """Run every applicable processor and print a summary."""
    if verbose:
        import logging

        logging.basicConfig(level=logging.DEBUG)

    graph = _build(kind, edge)
    cfg = load_config(config_path)

    try:
        report = run_analysis(graph, source, cfg)
    except GraphError as e:
        _fail(str(e))

    render_console(report)

    if out is not None:
        try:
            json_path = render_json(report, out)
            typer.echo(f"Wrote report (JSON): {json_path.resolve()}")
        except Exception as e:
            typer.echo(f"Error writing JSON: {e}", err=True)
            raise


@app.command()
def path(
    source: Annotated[str, typer.Option("--source", help="Start vertex")],
    target: Annotated[str, typer.Option("--target", help="Destination vertex")],
    kind: KindOption = GraphKind.UNDIRECTED,
    edge: EdgeOption = None,
) -> None:
    """Print the shortest path from --source to --target.

    Weighted graphs use Dijkstra; unweighted graphs use breadth-first search.
    """
    graph = _build(kind, edge)
    try:
        finder = ShortestPath(graph, source) if graph.weighted else BreadthFirstPaths(graph, source)
        finder.initialize()
        found = finder.shortest_path_to(target)
        distance = finder.distance_to(target)
    except GraphError as e:
        _fail(str(e))

    if found is None:
        typer.echo(f"No path from {source} to {target}")
        raise SystemExit(1)

    typer.echo(" -> ".join(reversed(found)))
    typer.echo(f"hops: {len(found) - 1}, distance: {distance:g}")
