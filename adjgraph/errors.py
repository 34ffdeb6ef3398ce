"""Error taxonomy — precondition violations raised by graphs and processors."""

from __future__ import annotations


class GraphError(Exception):
    """Base class for every error raised by adjgraph."""


class DuplicateVertexError(GraphError):
    """Raised when add_vertex is called with an identifier already in the graph."""


class UnknownVertexError(GraphError):
    """Raised when a query references a vertex that is not in the graph."""


class CycleError(GraphError):
    """Raised when a topological order is requested for a graph with a cycle."""


class EmptyGraphError(GraphError):
    """Raised when an algorithm needs at least one vertex and the graph has none."""


class EmptyQueueError(GraphError):
    """Raised when deleting from an empty priority queue."""


class DisconnectedGraphError(GraphError):
    """Raised when a spanning tree is requested for a disconnected graph."""


class AlreadyInitializedError(GraphError):
    """Raised when a processor's initialize() is called a second time."""


class NotInitializedError(GraphError):
    """Raised when a processor is queried before initialize() has run."""
