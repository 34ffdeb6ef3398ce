"""Edge-weighted graphs — adjacency lists of weighted edge models."""

from __future__ import annotations

from collections.abc import Hashable
from typing import ClassVar

from adjgraph.graph import DirectedBase, UndirectedBase
from adjgraph.model import DirectedWeightedEdge, GraphKind, VertexId, WeightedEdge


class EdgeWeightedUndirectedGraph(UndirectedBase[WeightedEdge]):
    """Undirected graph whose adjacency records are WeightedEdge models.

    add_edge stores one edge instance under both endpoints (twice under the
    same vertex for a self-loop).
    """

    kind: ClassVar[GraphKind] = GraphKind.WEIGHTED_UNDIRECTED
    weighted: ClassVar[bool] = True

    def add_edge(self, v1: Hashable, v2: Hashable, weight: float) -> WeightedEdge:  # type: ignore[override]
        a = self._ensure_vertex(v1)
        b = self._ensure_vertex(v2)
        edge = WeightedEdge(v1=a, v2=b, weight=weight)
        self.adjacency[a].append(edge)
        self.adjacency[b].append(edge)
        self.edge_count += 1
        self._mutated()
        return edge

    def weighted_neighbors(self, vertex: Hashable) -> list[tuple[VertexId, float]]:
        v = self.require_vertex(vertex)
        return [(edge.other(v), edge.weight) for edge in self.adjacency[v]]

    def _neighbor(self, owner: VertexId, record: WeightedEdge) -> VertexId:
        return record.other(owner)


class EdgeWeightedDirectedGraph(DirectedBase[DirectedWeightedEdge]):
    kind: ClassVar[GraphKind] = GraphKind.WEIGHTED_DIRECTED
    weighted: ClassVar[bool] = True

    def add_edge(self, v1: Hashable, v2: Hashable, weight: float) -> DirectedWeightedEdge:  # type: ignore[override]
        """Add the edge v1 -> v2 carrying *weight*; only v1's list receives it."""
        tail = self._ensure_vertex(v1)
        head = self._ensure_vertex(v2)
        edge = DirectedWeightedEdge(v1=tail, v2=head, weight=weight)
        self.adjacency[tail].append(edge)
        self.edge_count += 1
        self._mutated()
        return edge

    def weighted_neighbors(self, vertex: Hashable) -> list[tuple[VertexId, float]]:
        v = self.require_vertex(vertex)
        return [(edge.to(), edge.weight) for edge in self.adjacency[v]]

    def _neighbor(self, owner: VertexId, record: DirectedWeightedEdge) -> VertexId:
        return record.to()
