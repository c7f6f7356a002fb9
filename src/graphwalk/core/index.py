"""
Stable integer handles for graph nodes.

Every node stored in a graph is registered in a per-graph NodeIndex, an arena
that assigns integer handles in insertion order. Handles stay valid for the
lifetime of the node and are never reassigned after the node is released, so a
handle captured before a removal can not silently start pointing at another
node.
"""

from typing import Dict, Generic, Hashable, Iterator, Optional, Tuple, TypeVar

from .exceptions import NodeNotFoundError

T = TypeVar("T", bound=Hashable)


class NodeIndex(Generic[T]):
    """
    Arena mapping node values to integer handles and back.

    Attributes:
        _nodes (Dict[int, T]): Node value per live handle
        _handles (Dict[T, int]): Current handle of every registered node
        _next_handle (int): Handle the next new node receives
    """

    def __init__(self) -> None:
        self._nodes: Dict[int, T] = {}
        self._handles: Dict[T, int] = {}
        self._next_handle = 0

    def register(self, node: T) -> Tuple[int, bool]:
        """
        Return the handle of a node, assigning a new one if needed.

        Returns:
            Tuple[int, bool]: The handle and whether it was newly assigned
        """
        handle = self._handles.get(node)
        if handle is not None:
            return handle, False
        handle = self._next_handle
        self._next_handle += 1
        self._nodes[handle] = node
        self._handles[node] = handle
        return handle, True

    def release(self, node: T) -> Optional[int]:
        """Forget a node. Returns the released handle, or None if unknown."""
        handle = self._handles.pop(node, None)
        if handle is not None:
            del self._nodes[handle]
        return handle

    def handle_of(self, node: T) -> Optional[int]:
        """Get the handle of a node, or None if it is not registered."""
        return self._handles.get(node)

    def node_at(self, handle: int) -> T:
        """
        Get the node registered under a handle.

        Raises:
            NodeNotFoundError: If the handle was never assigned or its node was released
        """
        if handle in self._nodes:
            return self._nodes[handle]
        raise NodeNotFoundError(f"No node is registered under handle {handle}")

    def __contains__(self, node: object) -> bool:
        return node in self._handles

    def __len__(self) -> int:
        return len(self._handles)

    def __iter__(self) -> Iterator[T]:
        return iter(self._handles)

    def clear(self) -> None:
        """Release every node. Handle numbering continues where it left off."""
        self._nodes.clear()
        self._handles.clear()
