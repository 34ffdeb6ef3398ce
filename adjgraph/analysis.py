"""Analysis pipeline — run every applicable processor and assemble a report."""

from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import TYPE_CHECKING

from adjgraph.errors import CycleError, DisconnectedGraphError
from adjgraph.logger import logger
from adjgraph.model import (
    AdjGraphConfig,
    AnalysisReport,
    ComponentReport,
    GraphStats,
    PathReport,
    ProcessorName,
    SkippedProcessor,
    TopologicalOrder,
    VertexId,
)
from adjgraph.processors.components import ConnectedComponents
from adjgraph.processors.cycle import DirectedCycle, UndirectedCycle
from adjgraph.processors.mst import MinimumSpanningTree
from adjgraph.processors.paths import BreadthFirstPaths, DepthFirstPaths
from adjgraph.processors.shortest_path import ShortestPath
from adjgraph.processors.topological import TopologicalSort

if TYPE_CHECKING:
    from adjgraph.graph import AdjacencyGraph

# A step returns None when it ran, or the reason it was skipped.
_Step = Callable[["AdjacencyGraph", "VertexId | None", AdjGraphConfig, AnalysisReport], "str | None"]


def run_analysis(
    graph: AdjacencyGraph,
    source: Hashable | None = None,
    config: AdjGraphConfig | None = None,
) -> AnalysisReport:
    """Run the configured processors that apply to *graph* and report results."""
    cfg = config or AdjGraphConfig()
    src = graph.require_vertex(source) if source is not None else None
    report = AnalysisReport(stats=graph_stats(graph), source=src)

    enabled = set(cfg.analysis.processors)
    for name, step in _STEPS:
        if name not in enabled:
            continue
        reason = step(graph, src, cfg, report)
        if reason is not None:
            logger.info("Skipping %s: %s", name.value, reason)
            report.skipped.append(SkippedProcessor(processor=name, reason=reason))
    return report


def graph_stats(graph: AdjacencyGraph) -> GraphStats:
    stats = GraphStats(
        kind=graph.kind,
        vertex_count=graph.vertex_count,
        edge_count=graph.edge_count,
        average_degree=graph.average_degree(),  # type: ignore[attr-defined]
        self_loop_count=graph.self_loop_count(),  # type: ignore[attr-defined]
    )
    if graph.directed:
        stats.max_in_degree = graph.max_in_degree()  # type: ignore[attr-defined]
        stats.max_out_degree = graph.max_out_degree()  # type: ignore[attr-defined]
    else:
        stats.max_degree = graph.max_degree()  # type: ignore[attr-defined]
    return stats


def _path_report(target: VertexId, path: list[VertexId], distance: float | None) -> PathReport:
    forward = path[::-1]
    return PathReport(target=target, path=forward, hops=len(forward) - 1, distance=distance)


def _step_depth_first(
    graph: AdjacencyGraph, source: VertexId | None, cfg: AdjGraphConfig, report: AnalysisReport
) -> str | None:
    if source is None:
        return "no source vertex given"
    dfs = DepthFirstPaths(graph, source)
    dfs.initialize()
    report.reachable = dfs.reachable()
    for vertex in dfs.reachable()[1:]:
        path = dfs.path_to(vertex)
        if path is not None:
            report.depth_first_paths.append(_path_report(vertex, path, None))
    return None


def _step_breadth_first(
    graph: AdjacencyGraph, source: VertexId | None, cfg: AdjGraphConfig, report: AnalysisReport
) -> str | None:
    if source is None:
        return "no source vertex given"
    bfs = BreadthFirstPaths(graph, source)
    bfs.initialize()
    if not report.reachable:
        report.reachable = bfs.reachable()
    for vertex in bfs.reachable()[1:]:
        path = bfs.path_to(vertex)
        if path is not None:
            report.breadth_first_paths.append(_path_report(vertex, path, bfs.distance_to(vertex)))
    return None


def _step_cycle(
    graph: AdjacencyGraph, source: VertexId | None, cfg: AdjGraphConfig, report: AnalysisReport
) -> str | None:
    processor = DirectedCycle(graph) if graph.directed else UndirectedCycle(graph)
    report.has_cycle = processor.initialize().has_cycle
    return None


def _step_topological(
    graph: AdjacencyGraph, source: VertexId | None, cfg: AdjGraphConfig, report: AnalysisReport
) -> str | None:
    if not graph.directed:
        return "graph is undirected"
    if report.has_cycle:
        return "graph has a cycle"
    topo = TopologicalSort(graph)
    try:
        topo.initialize()
    except CycleError:
        return "graph has a cycle"
    if cfg.analysis.topological_order is TopologicalOrder.SOURCES_FIRST:
        report.topological_order = topo.reverse_order()
    else:
        report.topological_order = topo.order()
    return None


def _step_components(
    graph: AdjacencyGraph, source: VertexId | None, cfg: AdjGraphConfig, report: AnalysisReport
) -> str | None:
    if graph.directed:
        return "graph is directed"
    cc = ConnectedComponents(graph)
    cc.initialize()
    report.components = [
        ComponentReport(id=i, members=cc.members(i)) for i in range(cc.component_count())
    ]
    return None


def _step_shortest_path(
    graph: AdjacencyGraph, source: VertexId | None, cfg: AdjGraphConfig, report: AnalysisReport
) -> str | None:
    if not graph.weighted:
        return "graph is unweighted"
    if source is None:
        return "no source vertex given"
    sp = ShortestPath(graph, source)
    sp.initialize()
    for vertex in sp.reachable()[1:]:
        path = sp.shortest_path_to(vertex)
        if path is not None:
            report.shortest_paths.append(_path_report(vertex, path, sp.distance_to(vertex)))
    return None


def _step_spanning_tree(
    graph: AdjacencyGraph, source: VertexId | None, cfg: AdjGraphConfig, report: AnalysisReport
) -> str | None:
    if graph.directed or not graph.weighted:
        return "graph is not edge-weighted undirected"
    if graph.vertex_count == 0:
        return "graph is empty"
    mst = MinimumSpanningTree(graph, on_disconnected=cfg.analysis.mst_on_disconnected)
    try:
        mst.initialize()
    except DisconnectedGraphError:
        return "graph is disconnected"
    report.spanning_tree = mst.edges()
    report.spanning_tree_weight = mst.weight()
    return None


_STEPS: list[tuple[ProcessorName, _Step]] = [
    (ProcessorName.DEPTH_FIRST_PATHS, _step_depth_first),
    (ProcessorName.BREADTH_FIRST_PATHS, _step_breadth_first),
    (ProcessorName.CYCLE, _step_cycle),
    (ProcessorName.TOPOLOGICAL_SORT, _step_topological),
    (ProcessorName.CONNECTED_COMPONENTS, _step_components),
    (ProcessorName.SHORTEST_PATH, _step_shortest_path),
    (ProcessorName.MINIMUM_SPANNING_TREE, _step_spanning_tree),
]
