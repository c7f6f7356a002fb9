"""
Core graph data structure with an insertion-ordered adjacency map.

This module provides the Graph class: a weighted, directed or undirected graph
over arbitrary hashable node values. Each node maps to an insertion-ordered
mapping of neighbors to edge weights, which makes neighbor lookups O(1) and
keeps traversal order reproducible.

Undirected graphs store every edge as a symmetric pair of entries with the
same weight. Multigraphs and hypergraphs are not supported; a node may have an
edge to itself.

Graphs are not thread safe, and mutating a graph while one of its traversals
is running is undefined behavior.
"""

import logging
import numbers
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import (
    Any,
    Dict,
    FrozenSet,
    Generic,
    Hashable,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

from .enums import TraversalOrder
from .exceptions import EdgeInputError, EdgeNotFoundError, InvalidWeightError
from .graph_operations import TwoColorResult, connected_components, two_color
from .index import NodeIndex
from .traversal import (
    FIRST_NODE,
    DepthFirstSearchResult,
    SearchCallbacks,
    SearchResult,
    breadth_first_search,
    depth_first_search,
)
from .traversal.types import EdgeCallback, NodeCallback

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)

DEFAULT_EDGE_WEIGHT = 1.0

_EMPTY_EDGES: Mapping[Any, float] = MappingProxyType({})

EdgeSpec = Union[Tuple[Any, Any], Tuple[Any, Any, float]]


def validate_weight(weight: Any) -> float:
    """
    Check an edge weight at the API boundary.

    Raises:
        InvalidWeightError: If the weight is None or not a real number
    """
    if weight is None:
        raise InvalidWeightError("Edge weight must not be None")
    if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
        raise InvalidWeightError(f"Edge weight must be a number, got {type(weight).__name__}")
    return float(weight)


def normalize_edge(item: Any) -> Tuple[Any, Any, float]:
    """
    Unpack and check one ``(from, to)`` or ``(from, to, weight)`` item.

    Raises:
        EdgeInputError: If the item has the wrong shape or a node is unhashable
        InvalidWeightError: If the weight is None or not a number
    """
    if not isinstance(item, (tuple, list)) or len(item) not in (2, 3):
        raise EdgeInputError(f"Expected (from, to) or (from, to, weight), got {item!r}")
    from_node, to_node = item[0], item[1]
    weight = item[2] if len(item) == 3 else DEFAULT_EDGE_WEIGHT
    for node in (from_node, to_node):
        try:
            hash(node)
        except TypeError:
            raise EdgeInputError(f"Node {node!r} is not hashable") from None
    return from_node, to_node, validate_weight(weight)


@dataclass
class GraphState:
    """Encapsulates the state of a graph."""

    adjacency: Dict[Any, Dict[Any, float]] = field(default_factory=dict)
    index: NodeIndex = field(default_factory=NodeIndex)
    edge_count: int = 0
    weight_total: float = 0.0
    # Weight each undirected edge contributes to weight_total
    undirected_weights: Dict[FrozenSet[Any], float] = field(default_factory=dict)


class Graph(Generic[T]):
    """
    Weighted graph over hashable node values.

    Attributes:
        is_directed (bool): Whether edges are one-way; fixed at construction
        _state (GraphState): Adjacency map, node handles and running totals

    Example:
        >>> graph = Graph()
        >>> graph.add_edge("a", "b", 2.5)
        True
        >>> graph.edges("b")
        mappingproxy({'a': 2.5})
    """

    def __init__(self, directed: bool = False):
        """
        Create an empty graph.

        Args:
            directed (bool): Store edges one-way. Undirected graphs (the default)
                mirror every edge.
        """
        self._directed = bool(directed)
        self._state = GraphState()

    @classmethod
    def from_edges(cls, edges: Iterable[EdgeSpec], directed: bool = False) -> "Graph":
        """Create a graph from ``(from, to)`` or ``(from, to, weight)`` tuples."""
        graph = cls(directed=directed)
        graph.add_edges(edges)
        return graph

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"Graph({kind}, nodes={self.num_nodes}, edges={self.num_edges})"

    def __str__(self) -> str:
        return self.to_string()

    def __len__(self) -> int:
        return len(self._state.adjacency)

    def __contains__(self, node: object) -> bool:
        return node in self._state.adjacency

    def __iter__(self) -> Iterator[T]:
        return iter(self._state.adjacency)

    @property
    def is_directed(self) -> bool:
        return self._directed

    @property
    def is_undirected(self) -> bool:
        return not self._directed

    @property
    def nodes(self) -> Tuple[T, ...]:
        """All nodes in insertion order."""
        return tuple(self._state.adjacency)

    @property
    def num_nodes(self) -> int:
        return len(self._state.adjacency)

    @property
    def num_edges(self) -> int:
        """Number of logical edges; a mirrored undirected pair counts once."""
        return self._state.edge_count

    @property
    def edge_weight_total(self) -> float:
        return self._state.weight_total

    # Queries

    def has_node(self, node: T) -> bool:
        """Check if a node exists in the graph."""
        return node in self._state.adjacency

    def has_edge(self, from_node: T, to_node: T) -> bool:
        """Check if an edge exists; unknown nodes simply give False."""
        neighbors = self._state.adjacency.get(from_node)
        return neighbors is not None and to_node in neighbors

    def edges(self, node: T) -> Mapping[T, float]:
        """
        Read-only view of a node's neighbors mapped to edge weights.

        Neighbors appear in the order their edges were added. An unknown node
        gives an empty view.
        """
        neighbors = self._state.adjacency.get(node)
        if neighbors is None:
            return _EMPTY_EDGES
        return MappingProxyType(neighbors)

    def get_weight(self, from_node: T, to_node: T) -> float:
        """Get the weight of an edge, raising an error if it doesn't exist."""
        neighbors = self._state.adjacency.get(from_node)
        if neighbors is None or to_node not in neighbors:
            raise EdgeNotFoundError(f"No edge exists from {from_node!r} to {to_node!r}")
        return neighbors[to_node]

    def degree(self, node: T) -> int:
        """Get the number of outgoing edges of a node (0 for unknown nodes)."""
        return len(self._state.adjacency.get(node, ()))

    def handle_of(self, node: T) -> Optional[int]:
        """Get the stable integer handle of a node, or None if it is not in the graph."""
        return self._state.index.handle_of(node)

    def node_at(self, handle: int) -> T:
        """
        Get the node registered under a handle.

        Raises:
            NodeNotFoundError: If no current node has that handle
        """
        return self._state.index.node_at(handle)

    # Mutation

    def add_node(self, node: T) -> bool:
        """Add a node without requiring an edge. Returns True if it was new."""
        if node in self._state.adjacency:
            return False
        self._state.adjacency[node] = {}
        self._state.index.register(node)
        return True

    def add_edge(self, from_node: T, to_node: T, weight: float = DEFAULT_EDGE_WEIGHT) -> bool:
        """
        Add an edge, adding missing endpoints first.

        In an undirected graph the mirror edge is stored as well. If the edge
        already exists nothing changes, not even its weight; use
        set_edge_weight to update weights.

        Returns:
            bool: True if a new edge was created

        Raises:
            InvalidWeightError: If ``weight`` is None or not a number
        """
        weight = validate_weight(weight)
        if self.has_edge(from_node, to_node):
            return False

        self.add_node(from_node)
        self.add_node(to_node)
        adjacency = self._state.adjacency
        adjacency[from_node][to_node] = weight
        if not self._directed:
            adjacency[to_node][from_node] = weight
            self._state.undirected_weights[frozenset((from_node, to_node))] = weight

        self._state.edge_count += 1
        self._state.weight_total += weight
        return True

    def add_edges(self, edges: Iterable[EdgeSpec]) -> int:
        """
        Add several edges atomically.

        Each item is ``(from, to)`` or ``(from, to, weight)``. Every item is
        checked before the first edge is inserted, so if any item is rejected
        the graph is left exactly as it was.

        Returns:
            int: Number of new edges created

        Raises:
            EdgeInputError: If an item has the wrong shape or an unhashable node
            InvalidWeightError: If an item's weight is None or not a number
        """
        checked = [normalize_edge(item) for item in edges]
        created = 0
        for from_node, to_node, weight in checked:
            if self.add_edge(from_node, to_node, weight):
                created += 1
        logger.debug("Added %d new edges", created)
        return created

    def set_edge_weight(self, from_node: T, to_node: T, weight: float) -> bool:
        """
        Modify the weight of an existing edge.

        This never adds nodes or edges. Only the ``from_node -> to_node`` entry
        is changed, also in undirected graphs; update the mirror explicitly if
        symmetric weights are required.

        In an undirected graph ``edge_weight_total`` counts each edge once, at
        the weight most recently given to it through either direction.

        Returns:
            bool: True if the edge existed and was updated

        Raises:
            InvalidWeightError: If ``weight`` is None or not a number
        """
        weight = validate_weight(weight)
        neighbors = self._state.adjacency.get(from_node)
        if neighbors is None or to_node not in neighbors:
            return False
        if self._directed:
            counted = neighbors[to_node]
        else:
            key = frozenset((from_node, to_node))
            counted = self._state.undirected_weights[key]
            self._state.undirected_weights[key] = weight
        self._state.weight_total += weight - counted
        neighbors[to_node] = weight
        return True

    def remove_edge(self, from_node: T, to_node: T) -> bool:
        """
        Remove an edge (and its mirror in undirected graphs).

        Returns:
            bool: True if an edge was removed
        """
        neighbors = self._state.adjacency.get(from_node)
        if neighbors is None or to_node not in neighbors:
            return False
        weight = neighbors.pop(to_node)
        if not self._directed:
            self._state.adjacency[to_node].pop(from_node, None)
            weight = self._state.undirected_weights.pop(frozenset((from_node, to_node)))

        self._state.edge_count -= 1
        self._state.weight_total -= weight
        return True

    def remove_node(self, node: T) -> bool:
        """
        Remove a node and every edge touching it.

        Returns:
            bool: True if the node existed
        """
        adjacency = self._state.adjacency
        if node not in adjacency:
            return False
        for neighbor in list(adjacency[node]):
            self.remove_edge(node, neighbor)
        if self._directed:
            for source, neighbors in adjacency.items():
                if node in neighbors:
                    self.remove_edge(source, node)
        del adjacency[node]
        self._state.index.release(node)
        return True

    def clear(self) -> None:
        """Remove every node and edge."""
        self._state.adjacency.clear()
        self._state.index.clear()
        self._state.undirected_weights.clear()
        self._state.edge_count = 0
        self._state.weight_total = 0.0

    def to_string(self, show_weights: bool = False) -> str:
        """
        Debug rendering with one line per node listing its neighbors.

        Not a parseable format.
        """
        lines: List[str] = []
        for node, neighbors in self._state.adjacency.items():
            parts = [f"{node}: "]
            for neighbor, weight in neighbors.items():
                parts.append(f"{neighbor} ({weight}), " if show_weights else f"{neighbor}, ")
            lines.append("".join(parts))
        return "".join(line + "\n" for line in lines)

    # Traversal

    def breadth_first_search(
        self,
        start: Any = FIRST_NODE,
        on_discover: Optional[NodeCallback] = None,
        on_finish: Optional[NodeCallback] = None,
        on_edge: Optional[EdgeCallback] = None,
    ) -> SearchResult:
        """
        Breadth-first search from ``start`` (the first inserted node if omitted).

        Any callback returning a truthy value ends the search. O(n + m).
        """
        callbacks = SearchCallbacks.of(on_discover=on_discover, on_edge=on_edge, on_finish=on_finish)
        return breadth_first_search(self, start, callbacks)

    def depth_first_search(
        self,
        start: Any = FIRST_NODE,
        order: TraversalOrder = TraversalOrder.PRE_ORDER,
        on_discover: Optional[NodeCallback] = None,
        on_finish: Optional[NodeCallback] = None,
        on_edge: Optional[EdgeCallback] = None,
    ) -> DepthFirstSearchResult:
        """
        Depth-first search from ``start`` (the first inserted node if omitted).

        Any callback returning a truthy value ends the search. O(n + m).
        """
        callbacks = SearchCallbacks.of(on_discover=on_discover, on_edge=on_edge, on_finish=on_finish)
        return depth_first_search(self, start, order, callbacks)

    def connected_components(self) -> List[List[T]]:
        """Partition the nodes into (weakly, for directed graphs) connected components."""
        return connected_components(self)

    def two_color(self, halt_on_failure: bool = False) -> TwoColorResult:
        """Try to two-color the graph; see graph_operations.coloring.two_color."""
        return two_color(self, halt_on_failure)
