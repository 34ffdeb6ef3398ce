"""Cycle detection for directed and undirected graphs."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from adjgraph.processors.base import Processor

if TYPE_CHECKING:
    from adjgraph.graph import AdjacencyGraph
    from adjgraph.model import VertexId


@dataclass
class CycleResult:
    has_cycle: bool


class DirectedCycle(Processor[CycleResult]):
    """Detect a directed cycle with a depth-first search over every vertex.

    A cycle exists iff the search meets a vertex that is still on the current
    DFS path. Vertices finished by an earlier pass are skipped without being
    treated as cycles, so diamonds (two paths into one vertex) are acyclic.
    """

    def __init__(self, graph: AdjacencyGraph) -> None:
        if not graph.directed:
            raise TypeError(f"DirectedCycle needs a directed graph, got {type(graph).__name__}")
        super().__init__(graph)

    def _process(self) -> CycleResult:
        visited: set[VertexId] = set()
        for vertex in self.graph.vertices():
            if vertex in visited:
                continue
            if self._has_back_edge(vertex, visited):
                return CycleResult(has_cycle=True)
        return CycleResult(has_cycle=False)

    def _has_back_edge(self, root: VertexId, visited: set[VertexId]) -> bool:
        visited.add(root)
        on_stack: set[VertexId] = {root}
        stack: list[tuple[VertexId, Iterator[VertexId]]] = [
            (root, iter(self.graph.neighbors(root)))
        ]
        while stack:
            vertex, neighbors = stack[-1]
            for neighbor in neighbors:
                if neighbor in on_stack:
                    return True
                if neighbor not in visited:
                    visited.add(neighbor)
                    on_stack.add(neighbor)
                    stack.append((neighbor, iter(self.graph.neighbors(neighbor))))
                    break
            else:
                stack.pop()
                on_stack.discard(vertex)
        return False

    def has_cycle(self) -> bool:
        return self.result.has_cycle


class UndirectedCycle(Processor[CycleResult]):
    """Detect a cycle in an undirected graph.

    Every undirected edge shows up twice in adjacency storage, so the search
    only treats a visited neighbor as a cycle when it is not the vertex it
    came from. That rule cannot see self-loops or parallel edges, which are
    checked first.
    """

    def __init__(self, graph: AdjacencyGraph) -> None:
        if graph.directed:
            raise TypeError(
                f"UndirectedCycle needs an undirected graph, got {type(graph).__name__}"
            )
        super().__init__(graph)

    def _process(self) -> CycleResult:
        if self._has_self_loop() or self._has_parallel_edges():
            return CycleResult(has_cycle=True)

        visited: set[VertexId] = set()
        for vertex in self.graph.vertices():
            if vertex in visited:
                continue
            if self._reaches_visited(vertex, visited):
                return CycleResult(has_cycle=True)
        return CycleResult(has_cycle=False)

    def _has_self_loop(self) -> bool:
        return any(
            neighbor == vertex
            for vertex in self.graph.vertices()
            for neighbor in self.graph.neighbors(vertex)
        )

    def _has_parallel_edges(self) -> bool:
        for vertex in self.graph.vertices():
            neighbors = self.graph.neighbors(vertex)
            if len(set(neighbors)) != len(neighbors):
                return True
        return False

    def _reaches_visited(self, root: VertexId, visited: set[VertexId]) -> bool:
        visited.add(root)
        stack: list[tuple[VertexId, VertexId | None, Iterator[VertexId]]] = [
            (root, None, iter(self.graph.neighbors(root)))
        ]
        while stack:
            vertex, came_from, neighbors = stack[-1]
            for neighbor in neighbors:
                if neighbor in visited:
                    if neighbor == came_from:
                        continue
                    return True
                visited.add(neighbor)
                stack.append((neighbor, vertex, iter(self.graph.neighbors(neighbor))))
                break
            else:
                stack.pop()
        return False

    def has_cycle(self) -> bool:
        return self.result.has_cycle
