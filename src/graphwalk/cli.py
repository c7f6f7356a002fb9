"""Command Line Interface for exploring graphs.

This module provides a CLI that builds a graph from an edge list and runs one
of the library's algorithms on it. Edge lists are JSON: a list of
``[from, to]`` or ``[from, to, weight]`` entries, given either as a direct
string or as a file path prefixed with '@'.

The CLI supports the following commands:
    - bfs: Print the breadth-first visit order
    - dfs: Print the depth-first visit order (pre, in or post order)
    - path: Print the discovery path between two nodes
    - components: Print one connected component per line
    - two-color: Report bipartiteness and print the coloring
    - show: Print the adjacency listing

Example Usage:
    python -m graphwalk bfs '[[0, 1], [0, 2], [1, 3]]' --start 0
    python -m graphwalk components @edges.json --directed
    graphwalk two-color '[["a", "b"], ["b", "c"], ["c", "a"]]'
"""

import argparse
import json
import logging
import os
import sys
from typing import Any, List, Optional, Sequence

from graphwalk.core.enums import TraversalOrder
from graphwalk.core.exceptions import NodeNotFoundError, ResourceNotFoundError, ValidationError
from graphwalk.core.graph import Graph
from graphwalk.core.traversal import FIRST_NODE
from graphwalk.utils.validation import parse_edge_list

logger = logging.getLogger(__name__)


def parse_json_input(json_str: str) -> Any:
    """Parse JSON input from either a string or file.

    Args:
        json_str (str): Either a JSON string or a file path prefixed with '@'.
                       Relative file paths are resolved against the current
                       working directory.

    Returns:
        Any: Parsed JSON data.

    Raises:
        ValueError: If the JSON is invalid or the specified file is not found.
    """
    if json_str.startswith("@"):
        file_path = json_str[1:]
        if not os.path.isabs(file_path):
            file_path = os.path.join(os.getcwd(), file_path)

        if not os.path.exists(file_path):
            raise ValueError(f"File not found: {file_path}")

        with open(file_path, "r") as f:
            try:
                return json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in {file_path}: {e}")

    try:
        return json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON input: {e}")


def build_graph(edges_input: str, directed: bool = False) -> Graph:
    """Build a graph from an edge-list argument."""
    edges = parse_edge_list(parse_json_input(edges_input))
    graph: Graph = Graph.from_edges(edges, directed=directed)
    logger.debug("Built %r", graph)
    return graph


def resolve_node(graph: Graph, name: Optional[str]) -> Any:
    """Match a command line node name against the graph's nodes.

    String nodes are tried first, then the name read as an integer. An omitted
    name gives FIRST_NODE, so the search starts at the first inserted node.

    Raises:
        NodeNotFoundError: If neither form is a node of the graph.
    """
    if name is None:
        return FIRST_NODE
    if graph.has_node(name):
        return name
    try:
        number = int(name)
    except ValueError:
        number = None
    if number is not None and graph.has_node(number):
        return number
    raise NodeNotFoundError(f"Node {name!r} not found in the graph")


def format_nodes(nodes: Sequence[Any]) -> str:
    return " ".join(str(node) for node in nodes)


def run_command(args: argparse.Namespace) -> List[str]:
    """Execute a parsed command and return the output lines."""
    graph = build_graph(args.edges, directed=args.directed)

    if args.command == "bfs":
        result = graph.breadth_first_search(start=resolve_node(graph, args.start))
        return [str(node) for node in result.visited]

    if args.command == "dfs":
        order = TraversalOrder.from_name(args.order)
        result = graph.depth_first_search(start=resolve_node(graph, args.start), order=order)
        return [str(node) for node in result.visited]

    if args.command == "path":
        start = resolve_node(graph, args.start)
        target = resolve_node(graph, args.to)
        if args.dfs:
            result = graph.depth_first_search(start=start)
        else:
            result = graph.breadth_first_search(start=start)
        path = result.path_to(target)
        if not path:
            return [f"no path from {start} to {target}"]
        return [format_nodes(path)]

    if args.command == "components":
        return [format_nodes(component) for component in graph.connected_components()]

    if args.command == "two-color":
        coloring = graph.two_color(halt_on_failure=args.halt_on_failure)
        lines = [f"bipartite: {'yes' if coloring.is_bipartite else 'no'}"]
        lines.extend(f"{node}: {int(color)}" for node, color in coloring.colors.items())
        lines.extend(f"conflict: {source} - {target}" for source, target in coloring.conflicts)
        return lines

    if args.command == "show":
        return graph.to_string(show_weights=args.weights).splitlines()

    raise ValueError(f"Unknown command: {args.command}")


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser instance.
    """
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("edges", help="JSON edge list or @filename containing one")
    common.add_argument("--directed", action="store_true", help="Treat edges as one-way")
    common.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    parser = argparse.ArgumentParser(prog="graphwalk", description="Graph traversal CLI")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    bfs = subparsers.add_parser("bfs", parents=[common], help="Breadth-first visit order")
    bfs.add_argument("--start", help="Start node (default: first node)")

    dfs = subparsers.add_parser("dfs", parents=[common], help="Depth-first visit order")
    dfs.add_argument("--start", help="Start node (default: first node)")
    dfs.add_argument(
        "--order", default="pre", choices=["pre", "in", "post"], help="Node emission order"
    )

    path = subparsers.add_parser("path", parents=[common], help="Discovery path between nodes")
    path.add_argument("--start", required=True, help="Start node")
    path.add_argument("--to", required=True, help="Target node")
    path.add_argument("--dfs", action="store_true", help="Follow the depth-first tree instead")

    subparsers.add_parser("components", parents=[common], help="Connected components")

    two_color = subparsers.add_parser("two-color", parents=[common], help="Bipartiteness test")
    two_color.add_argument(
        "--halt-on-failure", action="store_true", help="Stop at the first conflict"
    )

    show = subparsers.add_parser("show", parents=[common], help="Adjacency listing")
    show.add_argument("--weights", action="store_true", help="Include edge weights")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI application.

    Returns:
        int: Process exit status.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        lines = run_command(args)
    except (ValueError, ValidationError, ResourceNotFoundError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
