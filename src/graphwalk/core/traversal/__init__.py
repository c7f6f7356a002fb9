"""
Graph traversal engine and search results.
"""

from .base import (
    breadth_first_search,
    classify_edge,
    depth_first_search,
    reports_edge,
    resolve_start,
    search,
)
from .models import DepthFirstSearchResult, DiscoveryEdge, SearchResult
from .types import FIRST_NODE, EdgeCallback, NodeCallback, SearchCallbacks

__all__ = [
    "search",
    "breadth_first_search",
    "depth_first_search",
    "classify_edge",
    "reports_edge",
    "resolve_start",
    "SearchResult",
    "DepthFirstSearchResult",
    "DiscoveryEdge",
    "SearchCallbacks",
    "NodeCallback",
    "EdgeCallback",
    "FIRST_NODE",
]
