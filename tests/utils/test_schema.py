"""Tests for edge-list schema validation."""

import pytest

from graphwalk.core.exceptions import EdgeInputError, ValidationError
from graphwalk.utils.validation import parse_edge_list, validate_edge_list


def test_valid_edge_list():
    """Test edge lists with and without weights."""
    result = validate_edge_list([["a", "b"], [1, 2, 2.5], ["a", 3, 4]])

    assert result.is_valid
    assert result.errors == []
    assert result.warnings == []
    assert result.context == {"edge_count": 3}


def test_empty_edge_list_warns():
    """Test that an empty list is valid but produces a warning."""
    result = validate_edge_list([])

    assert result.is_valid
    assert result.warnings == ["Edge list is empty"]


@pytest.mark.parametrize(
    "data",
    [
        {"a": "b"},
        [["a"]],
        [["a", "b", 1.0, "extra"]],
        [["a", "b", "heavy"]],
        [[1.5, 2]],
        [["a", None]],
        ["ab"],
    ],
)
def test_invalid_edge_lists(data):
    """Test data that does not match the schema."""
    result = validate_edge_list(data)

    assert not result.is_valid
    assert len(result.errors) == 1
    assert result.errors[0].startswith("Schema validation failed at ")


def test_error_location():
    """Test that errors name the offending entry."""
    result = validate_edge_list([["a", "b"], ["b", "c", "x"]])

    assert "1/2" in result.errors[0]


def test_parse_edge_list():
    """Test conversion into edge tuples."""
    assert parse_edge_list([["a", "b"], ["b", "c", 2]]) == [("a", "b"), ("b", "c", 2)]


def test_parse_edge_list_rejects_bad_input():
    """Test that malformed input raises an edge input error."""
    with pytest.raises(EdgeInputError) as excinfo:
        parse_edge_list([["a"]])

    assert isinstance(excinfo.value, ValidationError)
    assert str(excinfo.value).startswith("Validation Error: Schema validation failed")
