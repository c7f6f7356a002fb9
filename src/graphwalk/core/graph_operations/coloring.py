"""Two-coloring and bipartiteness testing.

A graph is bipartite if every node can be given one of two colors so that no
edge joins two nodes of the same color. Coloring runs a breadth-first search
from each uncolored node in insertion order, giving the start node the color
False and every newly reached node the complement of its discoverer's color.
An examined edge whose ends share a color proves the graph is not bipartite.

One area of use (of many) is scheduling: two jobs joined by an edge must not
share a slot.
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, Generic, Hashable, List, Mapping, Optional, Tuple, TypeVar

from ..enums import EdgeType
from ..traversal import SearchCallbacks, SearchResult, breadth_first_search
from ..types import GraphProtocol

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


class TwoColorResult(Generic[T]):
    """
    Outcome of a two-coloring attempt.

    Attributes:
        colors: Node -> color for every colored node
        is_bipartite: False once any same-colored edge was examined; never
            reverts within one coloring
        conflicts: Examined edges ``(source, target)`` whose ends share a color
        search: The last search run while coloring
    """

    def __init__(self) -> None:
        self._colors: Dict[T, bool] = {}
        self._is_bipartite = True
        self._conflicts: List[Tuple[T, T]] = []
        self._search: Optional[SearchResult] = None

    def __repr__(self) -> str:
        return (
            f"TwoColorResult(is_bipartite={self._is_bipartite}, "
            f"colored={len(self._colors)}, conflicts={len(self._conflicts)})"
        )

    def _color(self, node: T, color: bool) -> None:
        self._colors[node] = color

    def _conflict(self, source: T, target: T) -> None:
        self._is_bipartite = False
        self._conflicts.append((source, target))

    @property
    def is_bipartite(self) -> bool:
        return self._is_bipartite

    @property
    def is_not_bipartite(self) -> bool:
        return not self._is_bipartite

    @property
    def colors(self) -> Mapping[T, bool]:
        return MappingProxyType(self._colors)

    @property
    def conflicts(self) -> Tuple[Tuple[T, T], ...]:
        return tuple(self._conflicts)

    @property
    def search(self) -> Optional[SearchResult]:
        return self._search

    def is_colored(self, node: T) -> bool:
        return node in self._colors

    def color_of(self, node: T) -> Optional[bool]:
        """The color of a node, or None if it was never colored."""
        return self._colors.get(node)

    def have_same_color(self, node1: T, node2: T) -> bool:
        """True if both nodes are colored and their colors match."""
        color = self._colors.get(node1)
        return color is not None and color == self._colors.get(node2)

    def nodes_with_color(self, color: bool) -> Tuple[T, ...]:
        """One side of the coloring, in coloring order."""
        return tuple(node for node, value in self._colors.items() if value is color)


def two_color(graph: GraphProtocol, halt_on_failure: bool = False) -> TwoColorResult:
    """
    Try to two-color a graph.

    Args:
        graph: Graph to color
        halt_on_failure: Stop at the first conflict and return the partial
            coloring. Otherwise the whole graph is colored and every conflict
            examined is recorded.

    Returns:
        TwoColorResult: Colors, bipartiteness flag and conflicts

    A self-loop always conflicts, since a node has the same color as itself.
    """
    data: TwoColorResult = TwoColorResult()

    def on_edge(source: Any, target: Any, weight: float, edge_type: EdgeType) -> bool:
        if data.have_same_color(source, target):
            data._conflict(source, target)
            return halt_on_failure
        if not data.is_colored(target):
            data._color(target, not data.color_of(source))
        return False

    callbacks = SearchCallbacks(on_edge=on_edge)
    for node in graph.nodes:
        if data.is_colored(node):
            continue
        data._color(node, False)
        data._search = breadth_first_search(graph, node, callbacks)
        if data.is_not_bipartite and halt_on_failure:
            break

    logger.debug(
        "Two-coloring finished: bipartite=%s, %d colored, %d conflicts",
        data.is_bipartite,
        len(data.colors),
        len(data.conflicts),
    )
    return data
