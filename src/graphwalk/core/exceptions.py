"""
Custom exceptions for the graph library.

This module defines the hierarchy of exceptions raised by graph containers and
the traversal engine. Absence of a node or edge is normally reported through a
boolean return value; the exceptions below are reserved for requests that cannot
be answered at all (such as starting a search from a node that does not exist)
and for invalid input rejected at the API boundary.
"""


class ValidationError(Exception):
    """
    Raised when input data fails validation.

    Examples:
        * Missing or non-numeric edge weights
        * Malformed edge lists supplied to the command line interface
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class InvalidWeightError(ValidationError):
    """
    Raised when an edge weight is missing or not a number.

    Weights are checked before the graph is touched, so a rejected call leaves
    the graph unchanged.
    """


class EdgeInputError(ValidationError):
    """
    Raised when an edge list does not match the expected input schema.

    Examples:
        * An entry that is not a ``[from, to]`` or ``[from, to, weight]`` list
        * Invalid JSON text
    """


class GraphOperationError(Exception):
    """
    Raised when a graph operation cannot be completed.

    Examples:
        * A parent chain that does not lead back to the search root
        * Integrity violations detected during traversal
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class ResourceNotFoundError(Exception):
    """
    Raised when a requested graph element does not exist.

    Examples:
        * Node not found
        * Edge not found
    """


class NodeNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested node is not found.

    Examples:
        * A search started from a node that is not in the graph
        * A search on an empty graph, where no start node can be chosen
        * A handle that was never assigned
    """


class EdgeNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested edge is not found.

    Examples:
        * Weight lookup for an edge that was never added or has been removed
    """
