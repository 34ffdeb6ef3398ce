"""Minimum spanning tree of an edge-weighted undirected graph (lazy Prim)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from adjgraph.errors import DisconnectedGraphError, EmptyGraphError
from adjgraph.logger import logger
from adjgraph.model import DisconnectedPolicy, WeightedEdge
from adjgraph.priority_queue import MinPriorityQueue
from adjgraph.processors.base import Processor

if TYPE_CHECKING:
    from adjgraph.graph import AdjacencyGraph
    from adjgraph.model import VertexId


@dataclass
class SpanningTreeResult:
    edges: list[WeightedEdge] = field(default_factory=list)
    weight: float = 0.0
    tree_count: int = 0


class MinimumSpanningTree(Processor[SpanningTreeResult]):
    """Lazy Prim's algorithm.

    Grows one tree from the first vertex, pushing every incident edge of each
    vertex it absorbs onto a min-queue keyed by weight. An edge popped with
    both endpoints already in the tree is stale and dropped.

    ``on_disconnected`` decides what happens when the queue runs dry before
    every vertex is in a tree: ``ERROR`` raises DisconnectedGraphError,
    ``FOREST`` restarts from the next vertex not yet covered and returns a
    minimum spanning forest.
    """

    def __init__(
        self,
        graph: AdjacencyGraph,
        on_disconnected: DisconnectedPolicy = DisconnectedPolicy.ERROR,
    ) -> None:
        if graph.directed or not graph.weighted:
            raise TypeError(
                "MinimumSpanningTree needs an edge-weighted undirected graph, "
                f"got {type(graph).__name__}"
            )
        super().__init__(graph)
        self.on_disconnected = DisconnectedPolicy(on_disconnected)

    def _process(self) -> SpanningTreeResult:
        if self.graph.vertex_count == 0:
            raise EmptyGraphError("Cannot build a spanning tree of an empty graph")

        result = SpanningTreeResult()
        in_tree: set[VertexId] = set()
        queue: MinPriorityQueue[WeightedEdge] = MinPriorityQueue()
        unvisited = iter(self.graph.vertices())

        while len(in_tree) < self.graph.vertex_count:
            if queue.is_empty():
                if result.tree_count and self.on_disconnected is DisconnectedPolicy.ERROR:
                    raise DisconnectedGraphError(
                        f"Graph is disconnected: tree covers {len(in_tree)} of "
                        f"{self.graph.vertex_count} vertices"
                    )
                root = next(v for v in unvisited if v not in in_tree)
                self._absorb(root, in_tree, queue)
                result.tree_count += 1
                continue

            edge = queue.delete_min().value
            v = edge.either()
            w = edge.other(v)
            if v in in_tree and w in in_tree:
                continue
            result.edges.append(edge)
            result.weight += edge.weight
            self._absorb(w if v in in_tree else v, in_tree, queue)

        logger.debug(
            "Spanning %s: %d edges, weight %s",
            "forest" if result.tree_count > 1 else "tree",
            len(result.edges),
            result.weight,
        )
        return result

    def _absorb(
        self,
        vertex: VertexId,
        in_tree: set[VertexId],
        queue: MinPriorityQueue[WeightedEdge],
    ) -> None:
        in_tree.add(vertex)
        for edge in self.graph.adjacent(vertex):
            queue.insert(edge.weight, edge)

    def edges(self) -> list[WeightedEdge]:
        """Tree edges in the order Prim accepted them."""
        return list(self.result.edges)

    def weight(self) -> float:
        return self.result.weight

    def tree_count(self) -> int:
        """Number of trees: 1 for a connected graph, more for a forest."""
        return self.result.tree_count
