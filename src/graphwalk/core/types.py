"""
Core type definitions and protocols.

This module provides the protocol the traversal engine and the derived
algorithms use to read a graph, so that algorithms are decoupled from the
storage class.
"""

from typing import Any, Iterable, Mapping, Protocol


class GraphProtocol(Protocol):
    """Protocol defining the read-only graph operations used by algorithms."""

    @property
    def is_directed(self) -> bool:
        """Whether edges are one-way."""
        ...

    @property
    def nodes(self) -> Iterable[Any]:
        """All nodes, in insertion order."""
        ...

    def has_node(self, node: Any) -> bool:
        """Check if a node exists."""
        ...

    def edges(self, node: Any) -> Mapping[Any, float]:
        """Outgoing neighbors of a node mapped to edge weights."""
        ...
