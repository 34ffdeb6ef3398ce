"""Depth-first and breadth-first paths from a single source."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from adjgraph.processors.base import SearchResult, SourceProcessor

if TYPE_CHECKING:
    from adjgraph.model import VertexId


@dataclass
class BfsResult(SearchResult):
    distance_from_source: dict[VertexId, int] = field(default_factory=dict)


class DepthFirstPaths(SourceProcessor[SearchResult]):
    """Paths found by a pre-order depth-first search.

    A vertex gets its parent the moment it is first discovered, and children
    are explored in adjacency order. An explicit stack of neighbor iterators
    replaces recursion so long paths cannot exhaust the call stack.
    """

    def _process(self) -> SearchResult:
        result = SearchResult(source=self.source)
        result.mark(self.source)
        stack: list[tuple[VertexId, Iterator[VertexId]]] = [
            (self.source, iter(self.graph.neighbors(self.source)))
        ]
        while stack:
            vertex, neighbors = stack[-1]
            for neighbor in neighbors:
                if neighbor not in result.visited:
                    result.mark(neighbor, vertex)
                    stack.append((neighbor, iter(self.graph.neighbors(neighbor))))
                    break
            else:
                stack.pop()
        return result

    def path_to(self, vertex: Hashable) -> list[VertexId] | None:
        """Return the DFS tree path from *vertex* back to the source, or None."""
        return self._path_to(vertex)


class BreadthFirstPaths(SourceProcessor[BfsResult]):
    """Shortest unweighted paths, searched one distance layer at a time."""

    def _process(self) -> BfsResult:
        result = BfsResult(source=self.source)
        result.mark(self.source)
        result.distance_from_source[self.source] = 0

        frontier = [self.source]
        distance = 0
        while frontier:
            distance += 1
            next_frontier: list[VertexId] = []
            for vertex in frontier:
                for neighbor in self.graph.neighbors(vertex):
                    if neighbor in result.visited:
                        continue
                    result.mark(neighbor, vertex)
                    result.distance_from_source[neighbor] = distance
                    next_frontier.append(neighbor)
            frontier = next_frontier
        return result

    def path_to(self, vertex: Hashable) -> list[VertexId] | None:
        """Return a fewest-edges path from *vertex* back to the source, or None."""
        return self._path_to(vertex)

    def shortest_path_to(self, vertex: Hashable) -> list[VertexId] | None:
        return self._path_to(vertex)

    def distance_to(self, vertex: Hashable) -> int | None:
        if not self.has_path_to(vertex):
            return None
        return self.result.distance_from_source[self.graph.require_vertex(vertex)]
