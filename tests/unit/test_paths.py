"""Tests for processors.paths DepthFirstPaths and BreadthFirstPaths."""

from __future__ import annotations

import pytest

from adjgraph.errors import AlreadyInitializedError, NotInitializedError, UnknownVertexError
from adjgraph.graph import AdjacencyGraph, DirectedGraph, UndirectedGraph
from adjgraph.processors.paths import BfsResult, BreadthFirstPaths, DepthFirstPaths
from adjgraph.weighted import EdgeWeightedUndirectedGraph


def _dfs(graph: AdjacencyGraph, source: object) -> DepthFirstPaths:
    processor = DepthFirstPaths(graph, source)  # type: ignore[arg-type]
    processor.initialize()
    return processor


def _bfs(graph: AdjacencyGraph, source: object) -> BreadthFirstPaths:
    processor = BreadthFirstPaths(graph, source)  # type: ignore[arg-type]
    processor.initialize()
    return processor


def _is_walk(graph: AdjacencyGraph, path: list[str]) -> bool:
    forward = path[::-1]
    return all(b in graph.neighbors(a) for a, b in zip(forward, forward[1:]))


class TestDepthFirstPaths:
    def test_preorder_discovery(self, connected_graph: UndirectedGraph) -> None:
        dfs = _dfs(connected_graph, 0)
        assert dfs.reachable() == ["0", "5", "3", "2", "4", "1"]

    def test_path_is_destination_first(self, connected_graph: UndirectedGraph) -> None:
        dfs = _dfs(connected_graph, 0)
        assert dfs.path_to(4) == ["4", "2", "3", "5", "0"]
        assert dfs.path_to(1) == ["1", "2", "3", "5", "0"]

    def test_path_to_source(self, connected_graph: UndirectedGraph) -> None:
        assert _dfs(connected_graph, 0).path_to("0") == ["0"]

    def test_paths_are_edge_walks(self, connected_graph: UndirectedGraph) -> None:
        dfs = _dfs(connected_graph, 0)
        for vertex in connected_graph.vertices():
            path = dfs.path_to(vertex)
            assert path is not None
            assert path[-1] == "0"
            assert _is_walk(connected_graph, path)

    def test_unreachable_vertex(self, connected_graph: UndirectedGraph) -> None:
        connected_graph.add_vertex("island")
        dfs = _dfs(connected_graph, 0)
        assert dfs.has_path_to("island") is False
        assert dfs.path_to("island") is None

    def test_directed_respects_edge_direction(self) -> None:
        graph = DirectedGraph([(0, 1), (1, 2), (2, 0), (3, 0)])
        dfs = _dfs(graph, 0)
        assert dfs.has_path_to(2)
        assert not dfs.has_path_to(3)

    def test_long_chain_does_not_recurse(self) -> None:
        graph = DirectedGraph([(i, i + 1) for i in range(5000)])
        path = _dfs(graph, 0).path_to(5000)
        assert path is not None
        assert len(path) == 5001

    def test_weighted_graph_traversed_by_neighbors(self) -> None:
        graph = EdgeWeightedUndirectedGraph([("a", "b", 1.0), ("b", "c", 2.0)])
        assert _dfs(graph, "a").path_to("c") == ["c", "b", "a"]

    def test_queries_idempotent(self, connected_graph: UndirectedGraph) -> None:
        dfs = _dfs(connected_graph, 0)
        assert dfs.path_to(3) == dfs.path_to(3)
        assert dfs.has_path_to(3) == dfs.has_path_to(3)


class TestBreadthFirstPaths:
    def test_layer_order_and_distances(self, connected_graph: UndirectedGraph) -> None:
        bfs = _bfs(connected_graph, 0)
        assert bfs.reachable() == ["0", "5", "1", "2", "3", "4"]
        assert [bfs.distance_to(v) for v in ["0", "5", "1", "2", "3", "4"]] == [0, 1, 1, 1, 2, 2]

    def test_fewest_edges_paths(self, connected_graph: UndirectedGraph) -> None:
        bfs = _bfs(connected_graph, 0)
        assert bfs.path_to(4) == ["4", "2", "0"]
        assert bfs.shortest_path_to(3) == ["3", "5", "0"]

    def test_distance_matches_path_length(self, connected_graph: UndirectedGraph) -> None:
        bfs = _bfs(connected_graph, 0)
        for vertex in connected_graph.vertices():
            path = bfs.path_to(vertex)
            assert path is not None
            assert bfs.distance_to(vertex) == len(path) - 1
            assert _is_walk(connected_graph, path)

    def test_unreachable_vertex(self) -> None:
        graph = DirectedGraph([(0, 1), (2, 0)])
        bfs = _bfs(graph, 0)
        assert bfs.distance_to(2) is None
        assert bfs.path_to(2) is None

    def test_mixed_id_types(self) -> None:
        graph = UndirectedGraph([("0", 1), (1, "2")])
        bfs = _bfs(graph, 0)
        assert bfs.distance_to("2") == 2
        assert bfs.path_to(2) == ["2", "1", "0"]

    def test_initialize_returns_result(self, connected_graph: UndirectedGraph) -> None:
        result = BreadthFirstPaths(connected_graph, 0).initialize()
        assert isinstance(result, BfsResult)
        assert result.source == "0"
        assert result.parent["4"] == "2"
        assert "0" not in result.parent


class TestLifecycle:
    def test_unknown_source_raises(self, connected_graph: UndirectedGraph) -> None:
        with pytest.raises(UnknownVertexError):
            DepthFirstPaths(connected_graph, "missing")
        with pytest.raises(UnknownVertexError):
            BreadthFirstPaths(connected_graph, 42)

    def test_unknown_query_vertex_raises(self, connected_graph: UndirectedGraph) -> None:
        bfs = _bfs(connected_graph, 0)
        with pytest.raises(UnknownVertexError):
            bfs.has_path_to("missing")
        with pytest.raises(UnknownVertexError):
            bfs.path_to("missing")

    def test_query_before_initialize_raises(self, connected_graph: UndirectedGraph) -> None:
        dfs = DepthFirstPaths(connected_graph, 0)
        assert not dfs.initialized
        with pytest.raises(NotInitializedError):
            dfs.path_to(1)

    def test_second_initialize_raises(self, connected_graph: UndirectedGraph) -> None:
        bfs = _bfs(connected_graph, 0)
        assert bfs.initialized
        with pytest.raises(AlreadyInitializedError):
            bfs.initialize()
