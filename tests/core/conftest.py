"""Shared test fixtures."""

import pytest

from graphwalk.core.graph import Graph

SAMPLE_EDGES = [(0, 1), (0, 2), (0, 3), (1, 4), (3, 7), (3, 5), (1, 2)]


@pytest.fixture
def sample_edges():
    """Fixture providing the edges of a small tree plus one extra edge (1, 2)."""
    return list(SAMPLE_EDGES)


@pytest.fixture
def sample_graph(sample_edges) -> Graph:
    """Undirected graph built from the sample edges."""
    return Graph.from_edges(sample_edges)


@pytest.fixture
def directed_sample_graph(sample_edges) -> Graph:
    """Directed graph built from the sample edges."""
    return Graph.from_edges(sample_edges, directed=True)


@pytest.fixture
def binary_tree() -> Graph:
    """Directed binary search tree over 1..7 rooted at 4."""
    return Graph.from_edges([(4, 2), (4, 6), (2, 1), (2, 3), (6, 5), (6, 7)], directed=True)
