"""Console output — TTY summary with Rich tables."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from adjgraph.model import AnalysisReport, PathReport


def render_console(report: AnalysisReport, console: Console | None = None) -> None:
    """Print a TTY-friendly summary of *report*."""
    console = console or Console()
    stats = report.stats

    table = Table(title=f"Graph ({stats.kind.value})")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    table.add_row("Vertices", str(stats.vertex_count))
    table.add_row("Edges", str(stats.edge_count))
    table.add_row("Average degree", f"{stats.average_degree:.3g}")
    if stats.max_degree is not None:
        table.add_row("Max degree", str(stats.max_degree))
    if stats.max_in_degree is not None:
        table.add_row("Max in-degree", str(stats.max_in_degree))
    if stats.max_out_degree is not None:
        table.add_row("Max out-degree", str(stats.max_out_degree))
    table.add_row("Self-loops", str(stats.self_loop_count))
    console.print(table)

    if report.source is not None:
        console.print(
            f"\n[bold]Reachable from {report.source}:[/bold] {len(report.reachable)} vertex(es)"
        )
    _print_paths(console, "Breadth-first paths", report.breadth_first_paths)
    _print_paths(console, "Shortest paths", report.shortest_paths)

    if report.has_cycle is not None:
        status = "[red]yes[/red]" if report.has_cycle else "[green]no[/green]"
        console.print(f"\nCycle: {status}")
    if report.topological_order is not None:
        console.print(f"Topological order: {' '.join(report.topological_order)}")
    if report.components is not None:
        console.print(f"\n[bold]Connected components ({len(report.components)}):[/bold]")
        for component in report.components:
            console.print(f"  [{component.id}] {', '.join(component.members)}")
    if report.spanning_tree is not None:
        console.print(
            f"\n[bold]Minimum spanning tree[/bold] (weight {report.spanning_tree_weight:.6g}):"
        )
        for edge in report.spanning_tree:
            console.print(f"  {edge.v1} - {edge.v2}  {edge.weight:g}")

    for skipped in report.skipped:
        console.print(f"[dim]Skipped {skipped.processor.value}: {skipped.reason}[/dim]")


def _print_paths(console: Console, title: str, paths: list[PathReport]) -> None:
    if not paths:
        return
    console.print(f"\n[bold]{title}:[/bold]")
    for p in paths:
        path_str = " -> ".join(p.path)
        distance = f", distance {p.distance:g}" if p.distance is not None else ""
        console.print(f"  {p.target}: ({p.hops} hops{distance}) {path_str}")
