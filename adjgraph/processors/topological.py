"""Topological sort of a directed acyclic graph by DFS finish order."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from adjgraph.errors import CycleError
from adjgraph.processors.base import Processor
from adjgraph.processors.cycle import DirectedCycle

if TYPE_CHECKING:
    from adjgraph.graph import AdjacencyGraph
    from adjgraph.model import VertexId


@dataclass
class TopologicalResult:
    sorted: list[VertexId] = field(default_factory=list)


class TopologicalSort(Processor[TopologicalResult]):
    """Order the vertices of a DAG by depth-first finish time.

    A vertex is appended only once every vertex reachable from it has been
    appended, so for each edge u -> v, v comes before u in ``order()``.
    ``reverse_order()`` gives the conventional sources-first orientation.

    Raises:
        TypeError: At construction, if the graph is undirected.
        CycleError: From initialize(), if the graph has a directed cycle.
    """

    def __init__(self, graph: AdjacencyGraph) -> None:
        if not graph.directed:
            raise TypeError(f"TopologicalSort needs a directed graph, got {type(graph).__name__}")
        super().__init__(graph)

    def _process(self) -> TopologicalResult:
        cycle = DirectedCycle(self.graph)
        if cycle.initialize().has_cycle:
            raise CycleError("Cycle found; topological sort requires an acyclic graph")

        result = TopologicalResult()
        visited: set[VertexId] = set()
        for root in self.graph.vertices():
            if root in visited:
                continue
            visited.add(root)
            stack: list[tuple[VertexId, Iterator[VertexId]]] = [
                (root, iter(self.graph.neighbors(root)))
            ]
            while stack:
                vertex, neighbors = stack[-1]
                for neighbor in neighbors:
                    if neighbor not in visited:
                        visited.add(neighbor)
                        stack.append((neighbor, iter(self.graph.neighbors(neighbor))))
                        break
                else:
                    stack.pop()
                    result.sorted.append(vertex)
        return result

    def order(self) -> list[VertexId]:
        """Vertices in finish order: every edge's head precedes its tail."""
        return list(self.result.sorted)

    def reverse_order(self) -> list[VertexId]:
        """Vertices sources-first: every edge's tail precedes its head."""
        return self.result.sorted[::-1]
