"""Connected component analysis.

Components are found by running full breadth-first searches from every node
that no earlier search has claimed, in node insertion order.

For undirected graphs the result is the set of connected components. For
directed graphs a search only follows edge directions, so a search may reach
nodes already claimed by an earlier component; those components are merged
with the new search. Every edge is followed by the search that expands its
source, so the result is the weakly connected partition of the graph. Strong
connectivity is not computed.
"""

import logging
from typing import Any, Dict, List, Optional

from ..traversal import breadth_first_search
from ..types import GraphProtocol

logger = logging.getLogger(__name__)


def connected_components(graph: GraphProtocol) -> List[List[Any]]:
    """
    Partition the nodes of a graph into connected components.

    Args:
        graph: Graph to analyze

    Returns:
        List[List[Any]]: Components in order of their first node; members in
            the order the searches finished them. Every node appears in exactly
            one component.
    """
    # Keyed by creation order; merged components are deleted
    components: Dict[int, List[Any]] = {}
    owner: Dict[Any, int] = {}
    next_index = 0

    for node in graph.nodes:
        if node in owner:
            continue
        reached = breadth_first_search(graph, node).processed
        fresh = [member for member in reached if member not in owner]
        touched = sorted({owner[member] for member in reached if member in owner})

        if not touched:
            index = next_index
            next_index += 1
            components[index] = fresh
        else:
            index = touched[0]
            merged = components[index]
            for other in touched[1:]:
                absorbed = components.pop(other)
                for member in absorbed:
                    owner[member] = index
                merged.extend(absorbed)
            merged.extend(fresh)
            logger.debug("Search from %r merged %d existing components", node, len(touched))

        for member in fresh:
            owner[member] = index

    result = list(components.values())
    logger.debug("Found %d connected components in %d nodes", len(result), len(owner))
    return result


class ComponentAnalysis:
    """
    Analyzes connected components in a graph.

    The components are computed once, when the analysis is created; build a new
    analysis after mutating the graph.
    """

    def __init__(self, graph: GraphProtocol):
        """Initialize component analyzer for a graph."""
        self.components = connected_components(graph)
        self._component_index: Dict[Any, int] = {
            node: index for index, component in enumerate(self.components) for node in component
        }

    def get_components(self) -> List[List[Any]]:
        """Get all components."""
        return [list(component) for component in self.components]

    def get_component_count(self) -> int:
        """Get the number of components."""
        return len(self.components)

    def component_of(self, node: Any) -> Optional[List[Any]]:
        """Get the component containing a node, or None for unknown nodes."""
        index = self._component_index.get(node)
        return None if index is None else list(self.components[index])

    def are_connected(self, node1: Any, node2: Any) -> bool:
        """Check if two nodes are in the same component."""
        index = self._component_index.get(node1)
        return index is not None and index == self._component_index.get(node2)

    def get_largest_component(self) -> List[Any]:
        """Get the largest component; the earliest one wins ties."""
        if not self.components:
            return []
        return list(max(self.components, key=len))

    def get_isolated_nodes(self) -> List[Any]:
        """Get nodes with no edges to or from other nodes (self-loops allowed)."""
        return [component[0] for component in self.components if len(component) == 1]
