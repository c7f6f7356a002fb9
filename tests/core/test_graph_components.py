"""Tests for graph component analysis."""

from graphwalk.core.graph import Graph
from graphwalk.core.graph_operations.components import ComponentAnalysis, connected_components


def test_single_component(sample_graph):
    """Test a connected graph yields one component in search order."""
    assert sample_graph.connected_components() == [[0, 1, 2, 3, 4, 7, 5]]


def test_component_analysis():
    """Test basic component analysis functionality."""
    graph = Graph.from_edges([("A", "B"), ("B", "C"), ("D", "E")])
    graph.add_node("F")

    analysis = ComponentAnalysis(graph)

    assert analysis.get_components() == [["A", "B", "C"], ["D", "E"], ["F"]]
    assert analysis.get_component_count() == 3
    assert analysis.component_of("E") == ["D", "E"]
    assert analysis.component_of("missing") is None
    assert analysis.are_connected("A", "C")
    assert not analysis.are_connected("A", "D")
    assert not analysis.are_connected("A", "missing")
    assert analysis.get_largest_component() == ["A", "B", "C"]
    assert analysis.get_isolated_nodes() == ["F"]


def test_empty_graph():
    """Test components of an empty graph."""
    analysis = ComponentAnalysis(Graph())

    assert analysis.get_components() == []
    assert analysis.get_largest_component() == []
    assert analysis.get_isolated_nodes() == []


def test_largest_component_tie_goes_to_earliest():
    """Test that the first of equally large components is the largest."""
    graph = Graph.from_edges([(1, 2), (3, 4)])
    assert ComponentAnalysis(graph).get_largest_component() == [1, 2]


def test_self_loop_node_is_isolated():
    """Test that a node whose only edge is a self-loop counts as isolated."""
    graph = Graph.from_edges([("a", "a"), ("b", "c")])
    assert ComponentAnalysis(graph).get_isolated_nodes() == ["a"]


def test_directed_components_merge():
    """Test that a later search reaching earlier components merges them."""
    graph = Graph.from_edges([(0, 1), (2, 3), (4, 1), (4, 3)], directed=True)

    assert connected_components(graph) == [[0, 1, 2, 3, 4]]


def test_directed_edge_against_insertion_order():
    """Test that a node only reachable against edge direction is not split off."""
    graph = Graph(directed=True)
    graph.add_node("sink")
    graph.add_edge("source", "sink")
    graph.add_node("lonely")

    assert graph.connected_components() == [["sink", "source"], ["lonely"]]


def test_components_partition_nodes():
    """Test that every node lands in exactly one component."""
    edges = [(0, 1), (2, 3), (3, 2), (5, 4), (6, 5), (7, 7), (8, 0)]
    for directed in (False, True):
        graph = Graph.from_edges(edges, directed=directed)
        graph.add_node(9)

        components = graph.connected_components()
        members = [node for component in components for node in component]

        assert sorted(members) == sorted(graph.nodes)
        assert len(members) == len(set(members))
        assert len(components) == 5


def test_analysis_is_a_snapshot():
    """Test that an analysis does not follow later graph mutations."""
    graph = Graph.from_edges([("a", "b")])
    analysis = ComponentAnalysis(graph)
    graph.add_node("c")

    assert analysis.get_component_count() == 1
    assert ComponentAnalysis(graph).get_component_count() == 2


def test_directed_components_from_two_roots():
    """Test two disjoint directed stars."""
    graph = Graph.from_edges([(0, 1), (0, 2), (3, 4), (3, 5)], directed=True)

    assert graph.connected_components() == [[0, 1, 2], [3, 4, 5]]
