"""Shared test fixtures — textbook graphs used across processor tests."""

from __future__ import annotations

import pytest

from adjgraph.graph import DirectedGraph, UndirectedGraph
from adjgraph.weighted import EdgeWeightedDirectedGraph, EdgeWeightedUndirectedGraph

# Undirected graph with four components, two of them carrying self-loops.
COMPONENT_EDGES = [
    (0, 5),
    (4, 3),
    (0, 1),
    (9, 12),
    (6, 4),
    (5, 4),
    (0, 2),
    (11, 12),
    (9, 10),
    (0, 6),
    (7, 8),
    (9, 11),
    (5, 3),
    (5, 5),
    (14, 14),
]

# Small undirected graph with several routes between its six vertices.
CONNECTED_EDGES = [
    (0, 5),
    (2, 4),
    (2, 3),
    (1, 2),
    (0, 1),
    (3, 4),
    (3, 5),
    (0, 2),
]

DAG_EDGES = [(0, 7), (0, 1), (1, 2), (2, 4), (1, 3), (3, 5)]

EWD_EDGES = [
    (0, 1, 5),
    (0, 4, 9),
    (0, 7, 8),
    (1, 2, 12),
    (1, 3, 15),
    (1, 7, 4),
    (2, 3, 3),
    (2, 6, 11),
    (3, 6, 9),
    (4, 5, 4),
    (4, 6, 20),
    (4, 7, 5),
    (5, 2, 1),
    (5, 6, 13),
    (7, 5, 6),
    (7, 2, 7),
]

EWG_EDGES = [
    (0, 7, 0.16),
    (2, 3, 0.17),
    (1, 7, 0.19),
    (0, 2, 0.26),
    (5, 7, 0.28),
    (1, 3, 0.29),
    (1, 5, 0.32),
    (2, 7, 0.34),
    (4, 5, 0.35),
    (1, 2, 0.36),
    (4, 7, 0.37),
    (0, 4, 0.38),
    (6, 2, 0.40),
    (3, 6, 0.52),
    (6, 0, 0.58),
    (6, 4, 0.93),
]


@pytest.fixture()
def component_graph() -> UndirectedGraph:
    return UndirectedGraph(COMPONENT_EDGES)


@pytest.fixture()
def connected_graph() -> UndirectedGraph:
    return UndirectedGraph(CONNECTED_EDGES)


@pytest.fixture()
def dag() -> DirectedGraph:
    return DirectedGraph(DAG_EDGES)


@pytest.fixture()
def ewd() -> EdgeWeightedDirectedGraph:
    return EdgeWeightedDirectedGraph(EWD_EDGES)


@pytest.fixture()
def ewg() -> EdgeWeightedUndirectedGraph:
    return EdgeWeightedUndirectedGraph(EWG_EDGES)
