"""
Validation package.

This package provides validation utilities for data entering the library from
outside, such as edge lists supplied on the command line.
"""

from .base import ValidationResult
from .schema import EDGE_LIST_SCHEMA, parse_edge_list, validate_edge_list

__all__ = [
    "EDGE_LIST_SCHEMA",
    "ValidationResult",
    "parse_edge_list",
    "validate_edge_list",
]
