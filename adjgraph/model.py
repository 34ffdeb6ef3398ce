"""Canonical model — vertex ids, weighted edges, config and analysis report."""

from __future__ import annotations

from collections.abc import Hashable
from enum import StrEnum
from typing import NewType

from pydantic import BaseModel, ConfigDict, Field, field_validator

from adjgraph.errors import UnknownVertexError

VertexId = NewType("VertexId", str)


def to_vertex_id(value: Hashable) -> VertexId:
    """Normalize any hashable identifier to its canonical vertex id.

    Strings pass through unchanged, integral floats collapse to their integer
    text and everything else goes through ``str``, so ``0``, ``0.0`` and
    ``"0"`` all name the same vertex.
    """
    if isinstance(value, str):
        return VertexId(value)
    if isinstance(value, float) and value.is_integer():
        return VertexId(str(int(value)))
    return VertexId(str(value))


class GraphKind(StrEnum):
    UNDIRECTED = "undirected"
    DIRECTED = "directed"
    WEIGHTED_UNDIRECTED = "weighted-undirected"
    WEIGHTED_DIRECTED = "weighted-directed"


class ProcessorName(StrEnum):
    DEPTH_FIRST_PATHS = "depth_first_paths"
    BREADTH_FIRST_PATHS = "breadth_first_paths"
    CYCLE = "cycle"
    TOPOLOGICAL_SORT = "topological_sort"
    CONNECTED_COMPONENTS = "connected_components"
    SHORTEST_PATH = "shortest_path"
    MINIMUM_SPANNING_TREE = "minimum_spanning_tree"


class DisconnectedPolicy(StrEnum):
    """What a spanning tree does when the graph has more than one component."""

    ERROR = "error"
    FOREST = "forest"


class TopologicalOrder(StrEnum):
    """Orientation used when reporting a topological sort."""

    FINISH = "finish"
    SOURCES_FIRST = "sources_first"


class WeightedEdge(BaseModel):
    """Undirected weighted edge, shared by both endpoints' adjacency lists."""

    model_config = ConfigDict(frozen=True)

    v1: str
    v2: str
    weight: float

    @field_validator("v1", "v2", mode="before")
    @classmethod
    def _normalize_vertex(cls, value: Hashable) -> VertexId:
        return to_vertex_id(value)

    def either(self) -> VertexId:
        return VertexId(self.v1)

    def other(self, vertex: Hashable) -> VertexId:
        """Return the endpoint opposite *vertex*."""
        v = to_vertex_id(vertex)
        if v == self.v1:
            return VertexId(self.v2)
        if v == self.v2:
            return VertexId(self.v1)
        raise UnknownVertexError(f"Vertex {v!r} is not an endpoint of edge {self.v1}-{self.v2}")


class DirectedWeightedEdge(BaseModel):
    """Directed weighted edge v1 -> v2, stored only in the tail's adjacency list."""

    model_config = ConfigDict(frozen=True)

    v1: str
    v2: str
    weight: float

    @field_validator("v1", "v2", mode="before")
    @classmethod
    def _normalize_vertex(cls, value: Hashable) -> VertexId:
        return to_vertex_id(value)

    def from_(self) -> VertexId:
        return VertexId(self.v1)

    def to(self) -> VertexId:
        return VertexId(self.v2)


class AnalysisConfig(BaseModel):
    processors: list[ProcessorName] = Field(default_factory=lambda: list(ProcessorName))
    topological_order: TopologicalOrder = TopologicalOrder.FINISH
    mst_on_disconnected: DisconnectedPolicy = DisconnectedPolicy.ERROR


class AdjGraphConfig(BaseModel):
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)


class GraphStats(BaseModel):
    kind: GraphKind
    vertex_count: int
    edge_count: int
    average_degree: float
    self_loop_count: int
    max_degree: int | None = None
    max_in_degree: int | None = None
    max_out_degree: int | None = None


class PathReport(BaseModel):
    """A path listed source-first, as printed in reports."""

    target: str
    path: list[str]
    hops: int
    distance: float | None = None


class ComponentReport(BaseModel):
    id: int
    members: list[str]


class SkippedProcessor(BaseModel):
    processor: ProcessorName
    reason: str


class AnalysisReport(BaseModel):
    """Assembled by analysis.run_analysis() from every processor that ran."""

    stats: GraphStats
    source: str | None = None
    reachable: list[str] = Field(default_factory=list)
    depth_first_paths: list[PathReport] = Field(default_factory=list)
    breadth_first_paths: list[PathReport] = Field(default_factory=list)
    has_cycle: bool | None = None
    topological_order: list[str] | None = None
    components: list[ComponentReport] | None = None
    shortest_paths: list[PathReport] = Field(default_factory=list)
    spanning_tree: list[WeightedEdge] | None = None
    spanning_tree_weight: float | None = None
    skipped: list[SkippedProcessor] = Field(default_factory=list)
