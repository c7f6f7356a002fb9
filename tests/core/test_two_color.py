"""Tests for two-coloring and bipartiteness."""

import pytest

from graphwalk.core.graph import Graph
from graphwalk.core.graph_operations.coloring import TwoColorResult, two_color


@pytest.fixture
def square() -> Graph:
    """A four-cycle, which is bipartite."""
    return Graph.from_edges([(0, 1), (1, 2), (2, 3), (3, 0)])


@pytest.fixture
def triangle_and_pair() -> Graph:
    """An odd cycle plus a separate edge."""
    return Graph.from_edges([(0, 1), (1, 2), (2, 0), (3, 4)])


def test_bipartite_graph(square):
    """Test coloring an even cycle."""
    result = square.two_color()

    assert result.is_bipartite
    assert not result.is_not_bipartite
    assert result.conflicts == ()
    assert result.nodes_with_color(False) == (0, 2)
    assert result.nodes_with_color(True) == (1, 3)
    for node in square.nodes:
        for neighbor in square.edges(node):
            assert result.color_of(node) != result.color_of(neighbor)


def test_odd_cycle_is_not_bipartite(triangle_and_pair):
    """Test that a conflict is recorded and coloring continues."""
    result = triangle_and_pair.two_color()

    assert result.is_not_bipartite
    assert result.conflicts == ((1, 2),)
    assert result.have_same_color(1, 2)
    assert all(result.is_colored(node) for node in triangle_and_pair.nodes)
    assert result.color_of(3) is False
    assert result.color_of(4) is True


def test_halt_on_failure(triangle_and_pair):
    """Test that halting leaves later nodes uncolored."""
    result = two_color(triangle_and_pair, halt_on_failure=True)

    assert result.is_not_bipartite
    assert result.conflicts == ((1, 2),)
    assert not result.is_colored(3)
    assert result.color_of(3) is None
    assert result.search is not None
    assert result.search.stopped


def test_self_loop_conflicts():
    """Test that a self-loop always makes a graph non-bipartite."""
    graph = Graph()
    graph.add_edge(0, 0)

    result = graph.two_color()

    assert result.is_not_bipartite
    assert result.conflicts == ((0, 0),)


def test_every_component_is_colored():
    """Test that each component starts with the color False."""
    graph = Graph.from_edges([("a", "b"), ("c", "d")])
    graph.add_node("e")

    result = graph.two_color()

    assert result.is_bipartite
    assert dict(result.colors) == {"a": False, "b": True, "c": False, "d": True, "e": False}


def test_directed_graph_coloring():
    """Test coloring follows edge directions in directed graphs."""
    graph = Graph.from_edges([("a", "b"), ("b", "c"), ("c", "a")], directed=True)

    result = graph.two_color()

    assert result.is_not_bipartite
    assert result.conflicts == (("c", "a"),)


def test_empty_graph_is_bipartite():
    """Test coloring an empty graph."""
    result = two_color(Graph())

    assert isinstance(result, TwoColorResult)
    assert result.is_bipartite
    assert result.search is None
    assert dict(result.colors) == {}


def test_colors_view_is_read_only(square):
    """Test that callers can not change the coloring."""
    result = square.two_color()
    with pytest.raises(TypeError):
        result.colors[0] = True  # type: ignore[index]


def test_even_cycles_are_bipartite():
    """Test a graph whose cycles are all even."""
    graph = Graph.from_edges([(0, 1), (0, 2), (1, 3), (1, 4), (2, 3), (2, 5), (5, 1)])

    result = graph.two_color()

    assert result.is_bipartite
    assert result.nodes_with_color(False) == (0, 3, 4, 5)


def test_odd_cycle_through_shared_neighbor():
    """Test that the triangle 2-3-5 closed by (5, 3) is detected."""
    graph = Graph.from_edges([(0, 1), (0, 2), (1, 3), (1, 4), (2, 3), (2, 5), (5, 3)])

    assert graph.two_color().is_not_bipartite
