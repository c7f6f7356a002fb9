"""
Generalized graph traversal engine.

A single search procedure drives every traversal in the library. It is
parameterized by a frontier policy, which selects breadth-first (queue) or
depth-first (explicit stack) expansion, and by a SearchCallbacks structure with
three hooks: node discovery, edge examination and node finishing. Any hook can
end the search early; the partial result is then returned as is.

Traversal order depends only on the start node and on the insertion order of
each node's neighbors, so results are reproducible.

The graph must not be mutated while a search is running.
"""

import logging
from collections import deque
from typing import Any, Deque, Iterator, List, Tuple, cast

from ..enums import EdgeType, Frontier, TraversalOrder
from ..exceptions import NodeNotFoundError
from ..types import GraphProtocol
from .models import DepthFirstSearchResult, SearchResult
from .types import FIRST_NODE, SearchCallbacks

logger = logging.getLogger(__name__)


def resolve_start(graph: GraphProtocol, start: Any = FIRST_NODE) -> Any:
    """
    Pick the node a search starts from.

    Args:
        graph: Graph to be searched
        start: Requested start node, or FIRST_NODE for the first inserted node

    Raises:
        NodeNotFoundError: If the graph is empty or ``start`` is not one of its nodes
    """
    if start is FIRST_NODE:
        for node in graph.nodes:
            return node
        raise NodeNotFoundError("Cannot choose a start node in an empty graph")
    if not graph.has_node(start):
        raise NodeNotFoundError(f"Start node {start!r} not found in the graph")
    return start


def reports_edge(graph: GraphProtocol, result: SearchResult, target: Any) -> bool:
    """
    Whether an edge to an already discovered target is passed to ``on_edge``.

    In a directed graph every such edge is reported. In an undirected graph each
    edge is seen from both ends, so it is reported only while the target is not
    yet finished.
    """
    return graph.is_directed or not result.is_processed(target)


def classify_edge(result: DepthFirstSearchResult, source: Any, target: Any) -> EdgeType:
    """
    Classify an edge at the moment a depth-first search examines it.

    An undiscovered target makes a tree edge. A discovered but unfinished target
    is an ancestor on the current path, or ``source`` itself, so the edge is a
    back edge. A finished target entered after ``source`` gives a forward edge;
    one entered before gives a cross edge. Anything else is logged and treated
    as a back edge.
    """
    if not result.is_discovered(target):
        return EdgeType.TREE
    if not result.is_processed(target):
        return EdgeType.BACK
    source_entry = result.entry_time(source)
    target_entry = result.entry_time(target)
    if source_entry is not None and target_entry is not None:
        if target_entry > source_entry:
            return EdgeType.FORWARD
        if target_entry < source_entry:
            return EdgeType.CROSS
    logger.warning("Unclassified edge %r -> %r, treating it as a back edge", source, target)
    return EdgeType.BACK


def _halt(result: SearchResult, hook: str, node: Any) -> SearchResult:
    result._stop()
    logger.debug("Search from %r stopped by %s callback at %r", result.root, hook, node)
    return result


def _breadth_first(graph: GraphProtocol, start: Any, callbacks: SearchCallbacks) -> SearchResult:
    result: SearchResult = SearchResult(start)
    queue: Deque[Any] = deque([start])

    while queue:
        node = queue.popleft()
        if result.is_visited(node):
            continue

        result._visit(node)
        if callbacks.on_discover(node):
            return _halt(result, "discover", node)

        for neighbor, weight in graph.edges(node).items():
            if not result.is_discovered(neighbor):
                result._discover(neighbor, node, weight)
                if callbacks.on_edge(node, neighbor, weight, EdgeType.TREE):
                    return _halt(result, "edge", node)
                queue.append(neighbor)
            elif reports_edge(graph, result, neighbor):
                # BFS keeps no timestamps; non-tree edges other than self-loops are cross edges
                edge_type = EdgeType.BACK if neighbor == node else EdgeType.CROSS
                if callbacks.on_edge(node, neighbor, weight, edge_type):
                    return _halt(result, "edge", node)

        result._finish(node)
        if callbacks.on_finish(node):
            return _halt(result, "finish", node)

    return result


def _depth_first(
    graph: GraphProtocol,
    start: Any,
    order: TraversalOrder,
    callbacks: SearchCallbacks,
) -> DepthFirstSearchResult:
    result: DepthFirstSearchResult = DepthFirstSearchResult(start)

    def enter(node: Any) -> bool:
        result._enter(node)
        if order is TraversalOrder.PRE_ORDER:
            result._visit(node)
        return bool(callbacks.on_discover(node))

    def examine(source: Any, target: Any, weight: float, edge_type: EdgeType) -> bool:
        # An undirected edge back to the discoverer is the tree edge seen from its far end
        closes_cycle = edge_type is EdgeType.BACK and (
            graph.is_directed or not result.discovered_by(source, target)
        )
        result._classified(source, target, edge_type, closes_cycle)
        return bool(callbacks.on_edge(source, target, weight, edge_type))

    if enter(start):
        return _halt(result, "discover", start)

    # Each frame holds a node and the unconsumed part of its neighbor iterator
    stack: List[Tuple[Any, Iterator[Tuple[Any, float]]]] = [
        (start, iter(graph.edges(start).items()))
    ]
    while stack:
        node, neighbors = stack[-1]
        found_child = False
        child = None
        for neighbor, weight in neighbors:
            if not result.is_discovered(neighbor):
                result._discover(neighbor, node, weight)
                if examine(node, neighbor, weight, EdgeType.TREE):
                    return _halt(result, "edge", node)
                child = neighbor
                found_child = True
                break
            if reports_edge(graph, result, neighbor):
                if examine(node, neighbor, weight, classify_edge(result, node, neighbor)):
                    return _halt(result, "edge", node)

        if found_child:
            if enter(child):
                return _halt(result, "discover", child)
            stack.append((child, iter(graph.edges(child).items())))
            continue

        stack.pop()
        result._leave(node)
        result._finish(node)
        # In-order nodes without tree children are emitted when they finish
        if order is not TraversalOrder.PRE_ORDER and not result.is_visited(node):
            result._visit(node)
        if callbacks.on_finish(node):
            return _halt(result, "finish", node)
        # In-order: a parent is emitted once its first child subtree is done
        if order is TraversalOrder.IN_ORDER and stack and not result.is_visited(stack[-1][0]):
            result._visit(stack[-1][0])

    return result


def search(
    graph: GraphProtocol,
    start: Any = FIRST_NODE,
    frontier: Frontier = Frontier.QUEUE,
    order: TraversalOrder = TraversalOrder.PRE_ORDER,
    callbacks: SearchCallbacks = SearchCallbacks(),
) -> SearchResult:
    """
    Walk a graph from a start node.

    Args:
        graph: Graph to traverse
        start: Start node; the first inserted node when omitted. Any hashable
            value, None included, is taken as an explicit start.
        frontier: Frontier.QUEUE for breadth-first, Frontier.STACK for depth-first
        order: Emission order of depth-first search. In-order emits a node after
            its first child subtree, which is only meaningful for binary-shaped
            graphs.
        callbacks: Discovery, edge and finish hooks; no-ops when omitted

    Returns:
        SearchResult: A DepthFirstSearchResult for Frontier.STACK

    Raises:
        NodeNotFoundError: If the graph is empty or ``start`` is not in it
        ValueError: If a non pre-order emission is requested for breadth-first search
    """
    start = resolve_start(graph, start)

    logger.debug("Starting %s search from %r", frontier.value, start)
    if frontier is Frontier.QUEUE:
        if order is not TraversalOrder.PRE_ORDER:
            raise ValueError("Traversal order only applies to depth-first search")
        result = _breadth_first(graph, start, callbacks)
    else:
        result = _depth_first(graph, start, order, callbacks)
    logger.debug(
        "Search from %r discovered %d nodes, processed %d",
        start,
        len(result.discovered),
        len(result.processed),
    )
    return result


def breadth_first_search(
    graph: GraphProtocol,
    start: Any = FIRST_NODE,
    callbacks: SearchCallbacks = SearchCallbacks(),
) -> SearchResult:
    """
    Breadth-first search from ``start``.

    Visits nodes layer by layer, so the discovery path to every node is a
    path with the fewest edges. O(n + m).
    """
    return search(graph, start, Frontier.QUEUE, TraversalOrder.PRE_ORDER, callbacks)


def depth_first_search(
    graph: GraphProtocol,
    start: Any = FIRST_NODE,
    order: TraversalOrder = TraversalOrder.PRE_ORDER,
    callbacks: SearchCallbacks = SearchCallbacks(),
) -> DepthFirstSearchResult:
    """
    Depth-first search from ``start`` using an explicit stack.

    Records entry/exit timestamps and classifies every reported edge as tree,
    back, forward or cross. O(n + m).
    """
    return cast(DepthFirstSearchResult, search(graph, start, Frontier.STACK, order, callbacks))
