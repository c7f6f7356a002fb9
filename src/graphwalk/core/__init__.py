"""Core graph functionality."""

from .enums import EdgeType, Frontier, TraversalOrder
from .exceptions import (
    EdgeInputError,
    EdgeNotFoundError,
    GraphOperationError,
    InvalidWeightError,
    NodeNotFoundError,
    ResourceNotFoundError,
    ValidationError,
)
from .graph import DEFAULT_EDGE_WEIGHT, Graph
from .graph_operations import ComponentAnalysis, TwoColorResult, connected_components, two_color
from .index import NodeIndex
from .traversal import (
    FIRST_NODE,
    DepthFirstSearchResult,
    DiscoveryEdge,
    SearchCallbacks,
    SearchResult,
    breadth_first_search,
    depth_first_search,
    search,
)
from .types import GraphProtocol

__all__ = [
    "ComponentAnalysis",
    "DEFAULT_EDGE_WEIGHT",
    "DepthFirstSearchResult",
    "DiscoveryEdge",
    "EdgeInputError",
    "EdgeNotFoundError",
    "EdgeType",
    "FIRST_NODE",
    "Frontier",
    "Graph",
    "GraphOperationError",
    "GraphProtocol",
    "InvalidWeightError",
    "NodeIndex",
    "NodeNotFoundError",
    "ResourceNotFoundError",
    "SearchCallbacks",
    "SearchResult",
    "TraversalOrder",
    "TwoColorResult",
    "ValidationError",
    "breadth_first_search",
    "connected_components",
    "depth_first_search",
    "search",
    "two_color",
]
