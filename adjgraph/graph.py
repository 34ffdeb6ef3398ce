"""Graph engine — adjacency substrate, unweighted graphs and build_graph."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from typing import ClassVar, Generic, TypeVar

from adjgraph.errors import DuplicateVertexError, UnknownVertexError
from adjgraph.model import GraphKind, VertexId, to_vertex_id

R = TypeVar("R")


class AdjacencyGraph(Generic[R]):
    """Adjacency list keyed by vertex id.

    ``adjacency`` maps every vertex to the ordered list of its adjacency
    records: neighbor ids for unweighted graphs, edge models for weighted
    ones. Dict insertion order is the vertex order and list order is the
    neighbor order every processor traverses in.

    Self-loops and parallel edges are kept as given. Vertices named by an
    edge are added on the fly, so every record target is also a key.
    """

    kind: ClassVar[GraphKind]
    directed: ClassVar[bool] = False
    weighted: ClassVar[bool] = False

    def __init__(self, edges: Iterable[Sequence[Hashable]] | None = None) -> None:
        self.adjacency: dict[VertexId, list[R]] = {}
        self.vertex_count = 0
        self.edge_count = 0
        for edge in edges or ():
            self.add_edge(*edge)

    def add_vertex(self, vertex: Hashable) -> VertexId:
        """Insert *vertex* with no neighbors and return its normalized id."""
        v = to_vertex_id(vertex)
        if v in self.adjacency:
            raise DuplicateVertexError(f"Vertex {v!r} already exists in the graph")
        self.adjacency[v] = []
        self.vertex_count += 1
        self._mutated()
        return v

    def add_edge(self, v1: Hashable, v2: Hashable, *weight: float) -> object:
        raise NotImplementedError

    def adjacent(self, vertex: Hashable) -> list[R]:
        return self.adjacency[self.require_vertex(vertex)]

    def neighbors(self, vertex: Hashable) -> list[VertexId]:
        """Neighbor ids of *vertex* in adjacency order, whatever the record type."""
        v = self.require_vertex(vertex)
        return [self._neighbor(v, record) for record in self.adjacency[v]]

    def vertices(self) -> list[VertexId]:
        return list(self.adjacency)

    def has_vertex(self, vertex: Hashable) -> bool:
        return to_vertex_id(vertex) in self.adjacency

    def require_vertex(self, vertex: Hashable) -> VertexId:
        """Normalize *vertex*, raising UnknownVertexError if it is not in the graph."""
        v = to_vertex_id(vertex)
        if v not in self.adjacency:
            raise UnknownVertexError(f"Vertex {v!r} does not exist in the graph")
        return v

    def __contains__(self, vertex: object) -> bool:
        return isinstance(vertex, Hashable) and self.has_vertex(vertex)

    def __len__(self) -> int:
        return self.vertex_count

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={self.vertex_count}, edges={self.edge_count})"
        )

    def _ensure_vertex(self, vertex: Hashable) -> VertexId:
        v = to_vertex_id(vertex)
        if v not in self.adjacency:
            self.add_vertex(v)
        return v

    def _neighbor(self, owner: VertexId, record: R) -> VertexId:
        raise NotImplementedError

    def _mutated(self) -> None:
        """Hook run after every vertex or edge insertion."""

    def _self_loop_entries(self) -> int:
        return sum(
            1
            for owner, records in self.adjacency.items()
            for record in records
            if self._neighbor(owner, record) == owner
        )


class UndirectedBase(AdjacencyGraph[R]):
    """Degree queries shared by both undirected variants.

    Each edge is stored under both endpoints, so a self-loop contributes two
    entries to its vertex's list and the degree sum is twice the edge count.
    """

    def degree(self, vertex: Hashable) -> int:
        return len(self.adjacent(vertex))

    def average_degree(self) -> float:
        if self.vertex_count == 0:
            return 0.0
        return 2 * self.edge_count / self.vertex_count

    def max_degree(self) -> int:
        return max((len(records) for records in self.adjacency.values()), default=0)

    def self_loop_count(self) -> int:
        return self._self_loop_entries() // 2


class DirectedBase(AdjacencyGraph[R]):
    """Degree queries shared by both directed variants.

    Edges live only in the tail's list. in_degree scans every list unless
    reverse() has built the reversed map; the map is dropped again on the
    next insertion.
    """

    directed: ClassVar[bool] = True

    def __init__(self, edges: Iterable[Sequence[Hashable]] | None = None) -> None:
        self._reversed: dict[VertexId, list[VertexId]] | None = None
        super().__init__(edges)

    def out_degree(self, vertex: Hashable) -> int:
        return len(self.adjacent(vertex))

    def in_degree(self, vertex: Hashable) -> int:
        target = self.require_vertex(vertex)
        if self._reversed is not None:
            return len(self._reversed[target])
        return sum(
            1
            for owner, records in self.adjacency.items()
            for record in records
            if self._neighbor(owner, record) == target
        )

    def max_in_degree(self) -> int:
        reversed_map = self._reversed if self._reversed is not None else self._build_reversed()
        return max((len(tails) for tails in reversed_map.values()), default=0)

    def max_out_degree(self) -> int:
        return max((len(records) for records in self.adjacency.values()), default=0)

    def average_degree(self) -> float:
        if self.vertex_count == 0:
            return 0.0
        return self.edge_count / self.vertex_count

    def self_loop_count(self) -> int:
        return self._self_loop_entries()

    def reverse(self) -> dict[VertexId, list[VertexId]]:
        """Build and cache the reversed adjacency map (head -> tails).

        Tails appear once per edge, so parallel edges repeat.
        """
        self._reversed = self._build_reversed()
        return self._reversed

    def _build_reversed(self) -> dict[VertexId, list[VertexId]]:
        reversed_map: dict[VertexId, list[VertexId]] = {v: [] for v in self.adjacency}
        for owner, records in self.adjacency.items():
            for record in records:
                reversed_map[self._neighbor(owner, record)].append(owner)
        return reversed_map

    def _mutated(self) -> None:
        self._reversed = None


class UndirectedGraph(UndirectedBase[VertexId]):
    kind: ClassVar[GraphKind] = GraphKind.UNDIRECTED

    def add_edge(self, v1: Hashable, v2: Hashable) -> None:  # type: ignore[override]
        """Connect *v1* and *v2*, adding either vertex if needed."""
        a = self._ensure_vertex(v1)
        b = self._ensure_vertex(v2)
        self.adjacency[a].append(b)
        self.adjacency[b].append(a)
        self.edge_count += 1
        self._mutated()

    def _neighbor(self, owner: VertexId, record: VertexId) -> VertexId:
        return record


class DirectedGraph(DirectedBase[VertexId]):
    kind: ClassVar[GraphKind] = GraphKind.DIRECTED

    def add_edge(self, v1: Hashable, v2: Hashable) -> None:  # type: ignore[override]
        """Add the edge v1 -> v2, adding either vertex if needed."""
        tail = self._ensure_vertex(v1)
        head = self._ensure_vertex(v2)
        self.adjacency[tail].append(head)
        self.edge_count += 1
        self._mutated()

    def _neighbor(self, owner: VertexId, record: VertexId) -> VertexId:
        return record


def build_graph(
    kind: GraphKind, edges: Iterable[Sequence[Hashable]] | None = None
) -> AdjacencyGraph:
    """Build the graph variant named by *kind* from an edge list."""
    from adjgraph.weighted import EdgeWeightedDirectedGraph, EdgeWeightedUndirectedGraph

    variants: dict[GraphKind, type[AdjacencyGraph]] = {
        GraphKind.UNDIRECTED: UndirectedGraph,
        GraphKind.DIRECTED: DirectedGraph,
        GraphKind.WEIGHTED_UNDIRECTED: EdgeWeightedUndirectedGraph,
        GraphKind.WEIGHTED_DIRECTED: EdgeWeightedDirectedGraph,
    }
    return variants[kind](edges)
