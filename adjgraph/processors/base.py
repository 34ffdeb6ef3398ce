"""Processor lifecycle — bind a graph, initialize() once, then query."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

from adjgraph.errors import AlreadyInitializedError, NotInitializedError
from adjgraph.logger import logger

if TYPE_CHECKING:
    from adjgraph.graph import AdjacencyGraph
    from adjgraph.model import VertexId

ResultT = TypeVar("ResultT")


@dataclass
class SearchResult:
    """Vertices reached from a source and the tree that reached them."""

    source: VertexId
    visited: set[VertexId] = field(default_factory=set)
    parent: dict[VertexId, VertexId] = field(default_factory=dict)
    order: list[VertexId] = field(default_factory=list)

    def mark(self, vertex: VertexId, parent: VertexId | None = None) -> None:
        self.visited.add(vertex)
        self.order.append(vertex)
        if parent is not None:
            self.parent[vertex] = parent


def walk_parents(
    parent: dict[VertexId, VertexId], source: VertexId, destination: VertexId
) -> list[VertexId]:
    """Follow parent links from *destination* back to *source*.

    The returned list starts at the destination and ends at the source.
    """
    path: list[VertexId] = []
    vertex = destination
    while vertex != source:
        path.append(vertex)
        vertex = parent[vertex]
    path.append(source)
    return path


class Processor(Generic[ResultT]):
    """An algorithm bound to one graph.

    Construction only validates arguments. initialize() runs the single
    processing pass and returns its result object; it may be called once.
    Queries read that result and raise NotInitializedError before it exists.
    The graph must not be mutated once the processor is bound to it.
    """

    def __init__(self, graph: AdjacencyGraph) -> None:
        self.graph = graph
        self._result: ResultT | None = None

    @property
    def initialized(self) -> bool:
        return self._result is not None

    @property
    def result(self) -> ResultT:
        if self._result is None:
            raise NotInitializedError(f"Call {type(self).__name__}.initialize() first")
        return self._result

    def initialize(self) -> ResultT:
        if self._result is not None:
            raise AlreadyInitializedError(f"{type(self).__name__} is already initialized")
        logger.debug(
            "Running %s on %d vertices, %d edges",
            type(self).__name__,
            self.graph.vertex_count,
            self.graph.edge_count,
        )
        self._result = self._process()
        return self._result

    def _process(self) -> ResultT:
        raise NotImplementedError


class SourceProcessor(Processor[ResultT]):
    """Processor rooted at a source vertex that must already be in the graph."""

    def __init__(self, graph: AdjacencyGraph, source: Hashable) -> None:
        super().__init__(graph)
        self.source = graph.require_vertex(source)

    def _search(self) -> SearchResult:
        return self.result  # type: ignore[return-value]

    def has_path_to(self, vertex: Hashable) -> bool:
        search = self._search()
        return self.graph.require_vertex(vertex) in search.visited

    def reachable(self) -> list[VertexId]:
        """Reached vertices in the order the search settled them."""
        return list(self._search().order)

    def _path_to(self, vertex: Hashable) -> list[VertexId] | None:
        if not self.has_path_to(vertex):
            return None
        search = self._search()
        return walk_parents(search.parent, self.source, self.graph.require_vertex(vertex))
