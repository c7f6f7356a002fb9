"""
Tests for custom exceptions and validation.
"""

import pytest

from graphwalk.core.exceptions import (
    EdgeInputError,
    EdgeNotFoundError,
    GraphOperationError,
    InvalidWeightError,
    NodeNotFoundError,
    ResourceNotFoundError,
    ValidationError,
)
from graphwalk.core.graph import Graph, validate_weight


def test_validation_error_message():
    """Test validation errors carry a prefix."""
    assert str(ValidationError("bad input")) == "Validation Error: bad input"
    assert str(InvalidWeightError("bad weight")) == "Validation Error: bad weight"


def test_graph_operation_error_message():
    """Test graph operation errors carry a prefix."""
    assert str(GraphOperationError("broken chain")) == "Graph Operation Error: broken chain"


def test_exception_hierarchy():
    """Test the exception class relationships."""
    assert issubclass(InvalidWeightError, ValidationError)
    assert issubclass(EdgeInputError, ValidationError)
    assert issubclass(NodeNotFoundError, ResourceNotFoundError)
    assert issubclass(EdgeNotFoundError, ResourceNotFoundError)
    assert not issubclass(ResourceNotFoundError, ValidationError)


@pytest.mark.parametrize("weight,expected", [(1, 1.0), (2.5, 2.5), (-3, -3.0), (0, 0.0)])
def test_validate_weight_accepts_numbers(weight, expected):
    """Test that any real number is a valid weight."""
    assert validate_weight(weight) == expected


@pytest.mark.parametrize("weight", [None, "1.0", False, object(), 1j])
def test_validate_weight_rejects_non_numbers(weight):
    """Test that non-numeric weights are rejected."""
    with pytest.raises(InvalidWeightError):
        validate_weight(weight)


def test_missing_start_node_error():
    """Test the error raised for a search from an unknown node."""
    graph = Graph.from_edges([("a", "b")])

    with pytest.raises(NodeNotFoundError, match="'z'"):
        graph.breadth_first_search(start="z")


def test_missing_edge_error_is_resource_error():
    """Test that a missing edge can be caught as a missing resource."""
    graph = Graph()
    graph.add_node("a")

    with pytest.raises(ResourceNotFoundError):
        graph.get_weight("a", "a")
