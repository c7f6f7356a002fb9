"""
Enumerations used by the traversal engine.

- Frontier: how the engine chooses the next node to expand
- TraversalOrder: when a depth-first search emits a node into its visit order
- EdgeType: classification of an examined edge relative to the search tree
"""

from enum import Enum


class Frontier(Enum):
    """Pending-work policy of the traversal engine."""

    QUEUE = "queue"  # First in, first out: breadth-first search
    STACK = "stack"  # Last in, first out: depth-first search


class TraversalOrder(Enum):
    """
    Node emission timing for depth-first search.

    Breadth-first search always emits nodes in the order they leave the queue.
    """

    PRE_ORDER = "pre"  # Node, Left, Right: "top-first" or discovered order
    IN_ORDER = "in"  # Left, Node, Right: only meaningful for binary-shaped graphs
    POST_ORDER = "post"  # Left, Right, Node: "bottom-first" order

    @classmethod
    def from_name(cls, name: str) -> "TraversalOrder":
        """Look up an order by value ("pre") or member name ("PRE_ORDER")."""
        lowered = name.strip().lower()
        for member in cls:
            if lowered in (member.value, member.name.lower()):
                return member
        raise ValueError(f"Unknown traversal order: {name!r}")


class EdgeType(Enum):
    """Classification of an edge examined during a search."""

    TREE = "tree"  # The edge discovered its target
    BACK = "back"  # Target discovered but not finished (an ancestor, or a self-loop)
    FORWARD = "forward"  # Target finished, entered after the source
    CROSS = "cross"  # Target finished, entered before the source
