"""Callback types for the traversal engine."""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from ..enums import EdgeType

# A truthy return value from any callback stops the search.
NodeCallback = Callable[[Any], Optional[bool]]
EdgeCallback = Callable[[Any, Any, float, EdgeType], Optional[bool]]


class _FirstNode:
    """Marker for an omitted start node, so that None stays usable as a node."""

    def __repr__(self) -> str:
        return "FIRST_NODE"


FIRST_NODE: Any = _FirstNode()


def keep_going(node: Any) -> bool:
    """Default node callback: never stops the search."""
    return False


def keep_going_on_edge(source: Any, target: Any, weight: float, edge_type: EdgeType) -> bool:
    """Default edge callback: never stops the search."""
    return False


@dataclass(frozen=True)
class SearchCallbacks:
    """
    Hooks invoked by the traversal engine.

    Each hook may return a truthy value to end the search at that point; the
    engine then returns the partial result collected so far. Returning None
    or False continues the search.

    Attributes:
        on_discover: Called with a node when the search first expands it,
            before any of its edges are examined. Defaults to a no-op.
        on_edge: Called with ``(source, target, weight, edge_type)`` for every
            reported outgoing edge of the node being expanded. Tree edges are
            always reported; a non-tree edge is reported when the graph is
            directed or its target is not yet finished. In an undirected
            depth-first search the edge from a node back to its discoverer is
            therefore reported a second time, as a back edge.
            Defaults to a no-op.
        on_finish: Called with a node after all of its outgoing edges have been
            examined (after its whole subtree, for depth-first search).
            Defaults to a no-op.
    """

    on_discover: NodeCallback = keep_going
    on_edge: EdgeCallback = keep_going_on_edge
    on_finish: NodeCallback = keep_going

    @classmethod
    def of(
        cls,
        on_discover: Optional[NodeCallback] = None,
        on_edge: Optional[EdgeCallback] = None,
        on_finish: Optional[NodeCallback] = None,
    ) -> "SearchCallbacks":
        """Build callbacks from optional hooks, using the no-op default for None."""
        return cls(
            on_discover=on_discover or keep_going,
            on_edge=on_edge or keep_going_on_edge,
            on_finish=on_finish or keep_going,
        )
