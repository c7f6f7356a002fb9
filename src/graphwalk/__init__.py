"""
graphwalk - In-memory graphs and a unified traversal engine

This package provides a generic graph container for weighted or unweighted,
directed or undirected graphs over any hashable node values, together with:

- Breadth-first and depth-first search driven by one traversal engine
- Discovery trees with path reconstruction and DFS edge classification
- Connected components and two-coloring (bipartiteness testing)
- A small command line interface for exploring edge lists

Example:
    >>> from graphwalk import Graph
    >>> graph = Graph.from_edges([(0, 1), (0, 2), (1, 3)])
    >>> graph.breadth_first_search(start=0).path_to(3)
    (0, 1, 3)
"""

__version__ = "0.1.0"
__author__ = "graphwalk developers"

# Version compatibility check
import sys

if sys.version_info < (3, 9):
    raise RuntimeError("graphwalk requires Python 3.9 or higher")

# Import commonly used components for easier access
from .core import (
    EdgeType,
    Graph,
    NodeNotFoundError,
    SearchCallbacks,
    SearchResult,
    TraversalOrder,
    TwoColorResult,
)

__all__ = [
    "EdgeType",
    "Graph",
    "NodeNotFoundError",
    "SearchCallbacks",
    "SearchResult",
    "TraversalOrder",
    "TwoColorResult",
]
