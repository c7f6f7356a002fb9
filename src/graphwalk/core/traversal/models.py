"""
Data models for graph traversal results.

This module provides the records produced by the traversal engine:
- DiscoveryEdge: the edge through which a node was first reached
- SearchResult: discovery tree, visit order and finished set of one search
- DepthFirstSearchResult: adds entry/exit timestamps and edge classification

A result is created when a search starts, filled in only by the engine while
the search runs, and handed back to the caller afterwards. Every public
accessor returns a tuple or a read-only mapping view.

Example:
    >>> result = graph.breadth_first_search(start=0)
    >>> result.visited
    (0, 1, 2, 3, 4, 7, 5)
    >>> result.path_to(4)
    (0, 1, 4)
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Generic, Hashable, Mapping, Optional, Tuple, TypeVar

from ..enums import EdgeType
from ..exceptions import GraphOperationError

T = TypeVar("T", bound=Hashable)


@dataclass(frozen=True)
class DiscoveryEdge(Generic[T]):
    """
    The edge that discovered a node.

    Attributes:
        parent: The node being expanded when the edge was examined
        weight: Weight of the edge from parent to the discovered node
    """

    parent: T
    weight: float


class SearchResult(Generic[T]):
    """
    Record of a single breadth-first or depth-first search.

    Attributes:
        root: Node the search started from
        visited: Nodes in emission order (queue order for BFS, pre-, in- or
            post-order for DFS)
        processed: Nodes whose outgoing edges have all been examined, in the
            order they finished
        discovered: Every node reached so far, in discovery order
        stopped: Whether a callback ended the search early
    """

    def __init__(self, root: T):
        self._root = root
        self._parents: Dict[T, Optional[DiscoveryEdge[T]]] = {root: None}
        self._depth: Dict[T, int] = {root: 0}
        self._height = 0
        # Dicts double as insertion-ordered sets
        self._visited: Dict[T, None] = {}
        self._processed: Dict[T, None] = {}
        self._stopped = False

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(root={self._root!r}, "
            f"discovered={len(self._parents)}, processed={len(self._processed)})"
        )

    # Engine-side mutation

    def _discover(self, node: T, parent: T, weight: float) -> None:
        self._parents[node] = DiscoveryEdge(parent, weight)
        depth = self._depth[parent] + 1
        self._depth[node] = depth
        if depth > self._height:
            self._height = depth

    def _visit(self, node: T) -> None:
        self._visited[node] = None

    def _finish(self, node: T) -> None:
        self._processed[node] = None

    def _stop(self) -> None:
        self._stopped = True

    # Read-only view

    @property
    def root(self) -> T:
        return self._root

    @property
    def visited(self) -> Tuple[T, ...]:
        return tuple(self._visited)

    @property
    def processed(self) -> Tuple[T, ...]:
        return tuple(self._processed)

    @property
    def discovered(self) -> Tuple[T, ...]:
        return tuple(self._parents)

    @property
    def parents(self) -> Mapping[T, Optional[DiscoveryEdge[T]]]:
        """Discovered node -> discovering edge. The root maps to None."""
        return MappingProxyType(self._parents)

    @property
    def stopped(self) -> bool:
        return self._stopped

    @property
    def height(self) -> int:
        """Depth of the deepest discovered node (0 when only the root was reached)."""
        return self._height

    @property
    def goal(self) -> Optional[T]:
        """The last visited node, often the node a callback stopped at."""
        if not self._visited:
            return None
        return next(reversed(self._visited))

    def is_discovered(self, node: T) -> bool:
        return node in self._parents

    def is_visited(self, node: T) -> bool:
        return node in self._visited

    def is_processed(self, node: T) -> bool:
        return node in self._processed

    def parent_of(self, node: T) -> Optional[T]:
        """The node that discovered ``node``, or None for the root and unknown nodes."""
        link = self._parents.get(node)
        return None if link is None else link.parent

    def discovered_by(self, node: T, parent: T) -> bool:
        """Whether ``node`` was discovered through an edge from ``parent``."""
        link = self._parents.get(node)
        return link is not None and link.parent == parent

    def cost_of(self, node: T) -> float:
        """Weight of the edge that discovered ``node``; 0.0 for the root and unknown nodes."""
        link = self._parents.get(node)
        return 0.0 if link is None else link.weight

    def depth_of(self, node: T) -> Optional[int]:
        """Number of tree edges between the root and ``node``, or None if undiscovered."""
        return self._depth.get(node)

    def path_to(self, node: T) -> Tuple[T, ...]:
        """
        Nodes on the discovery path from the root to ``node``.

        Follows the chain of discoverers back to the root and reverses it.
        An undiscovered node gives an empty tuple; the root gives ``(root,)``.

        Raises:
            GraphOperationError: If the parent chain is longer than the number of
                discovered nodes or does not end at the root
        """
        if node not in self._parents:
            return ()
        limit = len(self._parents)
        path = [node]
        link = self._parents[node]
        while link is not None:
            if len(path) >= limit:
                raise GraphOperationError(
                    f"Parent chain of {node!r} exceeds {limit} discovered nodes"
                )
            path.append(link.parent)
            link = self._parents.get(link.parent)
        if path[-1] != self._root:
            raise GraphOperationError(f"Parent chain of {node!r} does not reach the root")
        path.reverse()
        return tuple(path)

    def edges_to(self, node: T) -> Tuple[Tuple[T, T, float], ...]:
        """
        Discovery edges ``(source, target, weight)`` from the root to ``node``.

        Empty for the root itself and for undiscovered nodes.
        """
        path = self.path_to(node)
        return tuple(
            (source, target, self.cost_of(target)) for source, target in zip(path, path[1:])
        )

    @property
    def path_to_goal(self) -> Tuple[T, ...]:
        goal = self.goal
        return () if goal is None else self.path_to(goal)


class DepthFirstSearchResult(SearchResult[T]):
    """
    Record of a depth-first search.

    In addition to the base record, every expanded node gets an entry and an
    exit timestamp from one shared counter, and every reported edge keeps the
    classification it was given when examined.
    """

    def __init__(self, root: T):
        super().__init__(root)
        self._time = 0
        self._entry: Dict[T, int] = {}
        self._exit: Dict[T, int] = {}
        self._edge_types: Dict[Tuple[T, T], EdgeType] = {}
        self._cycle_edge: Optional[Tuple[T, T]] = None

    def _enter(self, node: T) -> None:
        self._time += 1
        self._entry[node] = self._time

    def _leave(self, node: T) -> None:
        self._time += 1
        self._exit[node] = self._time

    def _classified(
        self, source: T, target: T, edge_type: EdgeType, closes_cycle: bool = False
    ) -> None:
        self._edge_types[(source, target)] = edge_type
        if closes_cycle and self._cycle_edge is None:
            self._cycle_edge = (source, target)

    @property
    def time(self) -> int:
        """Current value of the timestamp counter."""
        return self._time

    def entry_time(self, node: T) -> Optional[int]:
        return self._entry.get(node)

    def exit_time(self, node: T) -> Optional[int]:
        return self._exit.get(node)

    def edge_type(self, source: T, target: T) -> Optional[EdgeType]:
        """Classification of a reported edge, or None if it was never reported."""
        return self._edge_types.get((source, target))

    @property
    def edge_types(self) -> Mapping[Tuple[T, T], EdgeType]:
        return MappingProxyType(self._edge_types)

    @property
    def has_cycle(self) -> bool:
        """
        Whether the searched region has a cycle.

        Every back edge closes a cycle except, in undirected graphs, the edge from
        a node back to its own discoverer.
        """
        return self._cycle_edge is not None

    @property
    def cycle_edge(self) -> Optional[Tuple[T, T]]:
        """The first cycle-closing back edge examined."""
        return self._cycle_edge
