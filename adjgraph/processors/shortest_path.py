"""Single-source shortest paths with lazy-deletion Dijkstra.

Requires non-negative weights. Negative weights are not rejected; they
silently produce wrong distances.
"""

from __future__ import annotations

import math
from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from adjgraph.logger import logger
from adjgraph.priority_queue import MinPriorityQueue
from adjgraph.processors.base import SearchResult, SourceProcessor

if TYPE_CHECKING:
    from adjgraph.graph import AdjacencyGraph
    from adjgraph.model import VertexId


@dataclass
class ShortestPathResult(SearchResult):
    distance_from_source: dict[VertexId, float] = field(default_factory=dict)


class ShortestPath(SourceProcessor[ShortestPathResult]):
    """Dijkstra without decrease-key.

    Every improvement pushes a fresh (distance, vertex) entry; entries for
    vertices already finalized are discarded when popped. Queue space grows
    to O(E) in exchange for a plain binary heap.

    Works on directed weighted graphs and, because undirected adjacency is
    symmetric, on undirected weighted graphs too.
    """

    def __init__(self, graph: AdjacencyGraph, source: Hashable) -> None:
        if not graph.weighted:
            raise TypeError(f"ShortestPath needs a weighted graph, got {type(graph).__name__}")
        super().__init__(graph, source)

    def _process(self) -> ShortestPathResult:
        result = ShortestPathResult(source=self.source)
        distance = result.distance_from_source
        for vertex in self.graph.vertices():
            distance[vertex] = math.inf
        distance[self.source] = 0.0

        queue: MinPriorityQueue[VertexId] = MinPriorityQueue()
        queue.insert(0.0, self.source)
        stale = 0
        while not queue.is_empty():
            vertex = queue.delete_min().value
            if vertex in result.visited:
                stale += 1
                continue
            result.mark(vertex)

            for neighbor, weight in self.graph.weighted_neighbors(vertex):  # type: ignore[attr-defined]
                candidate = distance[vertex] + weight
                if candidate >= distance[neighbor]:
                    continue
                distance[neighbor] = candidate
                result.parent[neighbor] = vertex
                queue.insert(candidate, neighbor)

        # Unreached vertices keep no distance entry.
        for vertex in self.graph.vertices():
            if vertex not in result.visited:
                del distance[vertex]

        if stale:
            logger.debug("Dijkstra from %s discarded %d stale queue entries", self.source, stale)
        return result

    def distance_to(self, vertex: Hashable) -> float | None:
        if not self.has_path_to(vertex):
            return None
        return self.result.distance_from_source[self.graph.require_vertex(vertex)]

    def shortest_path_to(self, vertex: Hashable) -> list[VertexId] | None:
        """Return the cheapest path from *vertex* back to the source, or None."""
        return self._path_to(vertex)
