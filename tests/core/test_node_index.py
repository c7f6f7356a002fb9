"""Tests for node handles."""

import copy
import gc
import weakref

import pytest

from graphwalk.core.exceptions import NodeNotFoundError
from graphwalk.core.index import NodeIndex


def test_register_assigns_sequential_handles():
    index: NodeIndex = NodeIndex()

    assert index.register("a") == (0, True)
    assert index.register("b") == (1, True)
    assert index.register("a") == (0, False)
    assert len(index) == 2
    assert list(index) == ["a", "b"]
    assert "a" in index


def test_release_keeps_numbering():
    index: NodeIndex = NodeIndex()
    index.register("a")
    index.register("b")

    assert index.release("a") == 0
    assert index.release("a") is None
    assert "a" not in index
    with pytest.raises(NodeNotFoundError):
        index.node_at(0)

    assert index.register("a") == (2, True)
    assert index.node_at(2) == "a"
    # The old handle stays dead after the node comes back
    with pytest.raises(NodeNotFoundError):
        index.node_at(0)


@pytest.mark.parametrize("handle", [-1, 5])
def test_unknown_handle(handle):
    index: NodeIndex = NodeIndex()
    index.register("a")

    with pytest.raises(NodeNotFoundError):
        index.node_at(handle)


def test_clear():
    index: NodeIndex = NodeIndex()
    index.register("a")
    index.clear()

    assert len(index) == 0
    assert index.handle_of("a") is None
    assert index.register("b") == (1, True)


def test_copy_preserves_handles():
    """Test that a deep copy resolves the same handles."""
    index: NodeIndex = NodeIndex()
    index.register("a")
    index.register("b")
    index.release("a")

    clone = copy.deepcopy(index)

    assert clone.node_at(1) == "b"
    with pytest.raises(NodeNotFoundError):
        clone.node_at(0)


class Payload:
    """Weak-referenceable node value."""


def test_release_drops_node_value():
    """Test that a released node is not kept alive by the index."""
    index: NodeIndex = NodeIndex()
    node = Payload()
    index.register(node)
    index.register("other")
    ref = weakref.ref(node)

    index.release(node)
    del node
    gc.collect()

    assert ref() is None
    assert index.node_at(1) == "other"


def test_clear_drops_node_values():
    index: NodeIndex = NodeIndex()
    node = Payload()
    index.register(node)
    ref = weakref.ref(node)

    index.clear()
    del node
    gc.collect()

    assert ref() is None
