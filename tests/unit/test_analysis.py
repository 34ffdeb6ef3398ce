"""Tests for analysis.run_analysis()."""

from __future__ import annotations

import pytest

from adjgraph.analysis import graph_stats, run_analysis
from adjgraph.errors import UnknownVertexError
from adjgraph.graph import DirectedGraph, UndirectedGraph
from adjgraph.model import (
    AdjGraphConfig,
    AnalysisConfig,
    AnalysisReport,
    DisconnectedPolicy,
    GraphKind,
    ProcessorName,
    TopologicalOrder,
)
from adjgraph.weighted import EdgeWeightedDirectedGraph, EdgeWeightedUndirectedGraph


def _config(**analysis: object) -> AdjGraphConfig:
    return AdjGraphConfig(analysis=AnalysisConfig(**analysis))


def _skipped(report: AnalysisReport) -> dict[str, str]:
    return {s.processor.value: s.reason for s in report.skipped}


class TestGraphStats:
    def test_undirected_stats(self, component_graph: UndirectedGraph) -> None:
        stats = graph_stats(component_graph)
        assert stats.kind == GraphKind.UNDIRECTED
        assert stats.vertex_count == 14
        assert stats.edge_count == 15
        assert stats.self_loop_count == 2
        assert stats.max_degree == component_graph.max_degree()
        assert stats.max_in_degree is None

    def test_directed_stats(self, dag: DirectedGraph) -> None:
        stats = graph_stats(dag)
        assert stats.kind == GraphKind.DIRECTED
        assert stats.max_degree is None
        assert stats.max_in_degree == 1
        assert stats.max_out_degree == 2
        assert stats.average_degree == pytest.approx(6 / 7)


class TestDirectedAnalysis:
    def test_dag_with_source(self, dag: DirectedGraph) -> None:
        report = run_analysis(dag, 0)
        assert report.source == "0"
        assert report.reachable == ["0", "7", "1", "2", "4", "3", "5"]
        assert report.has_cycle is False
        assert report.topological_order == ["7", "4", "2", "5", "3", "1", "0"]
        assert report.components is None
        assert report.spanning_tree is None
        assert _skipped(report) == {
            "connected_components": "graph is directed",
            "shortest_path": "graph is unweighted",
            "minimum_spanning_tree": "graph is not edge-weighted undirected",
        }

    def test_paths_listed_source_first(self, dag: DirectedGraph) -> None:
        report = run_analysis(dag, 0)
        by_target = {p.target: p for p in report.breadth_first_paths}
        assert by_target["4"].path == ["0", "1", "2", "4"]
        assert by_target["4"].hops == 3
        assert by_target["4"].distance == 3
        assert len(report.depth_first_paths) == 6

    def test_sources_first_order(self, dag: DirectedGraph) -> None:
        report = run_analysis(dag, config=_config(topological_order=TopologicalOrder.SOURCES_FIRST))
        assert report.topological_order == ["0", "1", "3", "5", "2", "4", "7"]

    def test_cycle_skips_topological_sort(self) -> None:
        report = run_analysis(DirectedGraph([(0, 1), (1, 0)]))
        assert report.has_cycle is True
        assert report.topological_order is None
        assert _skipped(report)["topological_sort"] == "graph has a cycle"

    def test_weighted_directed_shortest_paths(self, ewd: EdgeWeightedDirectedGraph) -> None:
        report = run_analysis(ewd, 0)
        by_target = {p.target: p for p in report.shortest_paths}
        assert by_target["6"].path == ["0", "4", "5", "2", "6"]
        assert by_target["6"].distance == 25
        assert report.topological_order is not None


class TestUndirectedAnalysis:
    def test_weighted_undirected(self, ewg: EdgeWeightedUndirectedGraph) -> None:
        report = run_analysis(ewg, 0)
        assert report.has_cycle is True
        assert report.components is not None
        assert len(report.components) == 1
        assert report.spanning_tree is not None
        assert len(report.spanning_tree) == 7
        assert report.spanning_tree_weight == pytest.approx(1.81)
        assert [p.target for p in report.shortest_paths] == ["7", "2", "1", "4", "3", "5", "6"]
        assert _skipped(report) == {"topological_sort": "graph is undirected"}

    def test_components_report(self, component_graph: UndirectedGraph) -> None:
        report = run_analysis(component_graph)
        assert report.components is not None
        assert [c.id for c in report.components] == [0, 1, 2, 3]
        assert report.components[3].members == ["14"]

    def test_disconnected_error_policy_skips_tree(self) -> None:
        graph = EdgeWeightedUndirectedGraph([(0, 1, 1.0), (2, 3, 2.0)])
        report = run_analysis(graph)
        assert report.spanning_tree is None
        assert _skipped(report)["minimum_spanning_tree"] == "graph is disconnected"

    def test_disconnected_forest_policy(self) -> None:
        graph = EdgeWeightedUndirectedGraph([(0, 1, 1.0), (2, 3, 2.0)])
        report = run_analysis(graph, config=_config(mst_on_disconnected=DisconnectedPolicy.FOREST))
        assert report.spanning_tree is not None
        assert len(report.spanning_tree) == 2
        assert report.spanning_tree_weight == pytest.approx(3.0)

    def test_empty_weighted_graph_skips_tree(self) -> None:
        report = run_analysis(EdgeWeightedUndirectedGraph())
        assert _skipped(report)["minimum_spanning_tree"] == "graph is empty"


class TestSelection:
    def test_no_source_skips_path_processors(self, connected_graph: UndirectedGraph) -> None:
        report = run_analysis(connected_graph)
        assert report.source is None
        assert report.reachable == []
        skipped = _skipped(report)
        assert skipped["depth_first_paths"] == "no source vertex given"
        assert skipped["breadth_first_paths"] == "no source vertex given"

    def test_processor_subset(self, connected_graph: UndirectedGraph) -> None:
        report = run_analysis(connected_graph, 0, _config(processors=[ProcessorName.CYCLE]))
        assert report.has_cycle is True
        assert report.reachable == []
        assert report.components is None
        assert report.skipped == []

    def test_unknown_source_raises(self, connected_graph: UndirectedGraph) -> None:
        with pytest.raises(UnknownVertexError):
            run_analysis(connected_graph, "missing")
