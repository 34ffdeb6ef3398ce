"""Connected components of an undirected graph by DFS flood fill."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from adjgraph.processors.base import Processor

if TYPE_CHECKING:
    from adjgraph.graph import AdjacencyGraph
    from adjgraph.model import VertexId


@dataclass
class ComponentsResult:
    component_id: dict[VertexId, int] = field(default_factory=dict)
    component_count: int = 0


class ConnectedComponents(Processor[ComponentsResult]):
    """Label every vertex with a 0-based component id.

    Ids are handed out in the order components are first met while scanning
    vertices in insertion order.
    """

    def __init__(self, graph: AdjacencyGraph) -> None:
        if graph.directed:
            raise TypeError(
                f"ConnectedComponents needs an undirected graph, got {type(graph).__name__}"
            )
        super().__init__(graph)

    def _process(self) -> ComponentsResult:
        result = ComponentsResult()
        for seed in self.graph.vertices():
            if seed in result.component_id:
                continue
            self._flood(seed, result.component_count, result.component_id)
            result.component_count += 1
        return result

    def _flood(self, seed: VertexId, label: int, component_id: dict[VertexId, int]) -> None:
        component_id[seed] = label
        stack = [seed]
        while stack:
            vertex = stack.pop()
            for neighbor in self.graph.neighbors(vertex):
                if neighbor not in component_id:
                    component_id[neighbor] = label
                    stack.append(neighbor)

    def component_id(self, vertex: Hashable) -> int:
        result = self.result
        return result.component_id[self.graph.require_vertex(vertex)]

    def component_count(self) -> int:
        return self.result.component_count

    def connected(self, v: Hashable, w: Hashable) -> bool:
        return self.component_id(v) == self.component_id(w)

    def members(self, component_id: int) -> list[VertexId]:
        """Vertices labelled *component_id*, in graph insertion order."""
        result = self.result
        if not 0 <= component_id < result.component_count:
            raise ValueError(
                f"Component id {component_id} out of range 0..{result.component_count - 1}"
            )
        return [v for v in self.graph.vertices() if result.component_id[v] == component_id]
