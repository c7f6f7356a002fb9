"""
Schema validation for edge-list input.

Edge lists arrive as JSON: a list whose entries are ``[from, to]`` or
``[from, to, weight]``, where nodes are strings or integers and the weight is
a number. This module checks such data against a JSON schema before it is
turned into graph edges.
"""

import logging
from typing import Any, Dict, List, Tuple

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from ...core.exceptions import EdgeInputError
from .base import ValidationResult

logger = logging.getLogger(__name__)

NODE_SCHEMA: Dict[str, Any] = {"type": ["string", "integer"]}

EDGE_LIST_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "array",
    "items": {
        "type": "array",
        "prefixItems": [NODE_SCHEMA, NODE_SCHEMA, {"type": "number"}],
        "minItems": 2,
        "maxItems": 3,
    },
}


def validate_edge_list(data: Any) -> ValidationResult:
    """
    Validate decoded JSON against the edge-list schema.

    Args:
        data: Decoded JSON value

    Returns:
        ValidationResult containing validation details and any errors or warnings

    Example:
        >>> validate_edge_list([["a", "b"], ["b", "c", 2.5]]).is_valid
        True
    """
    errors = []
    warnings = []

    try:
        json_validate(instance=data, schema=EDGE_LIST_SCHEMA)
    except JsonSchemaError as e:
        location = "/".join(str(part) for part in e.absolute_path) or "<root>"
        errors.append(f"Schema validation failed at {location}: {e.message}")

    if not errors and not data:
        warnings.append("Edge list is empty")

    return ValidationResult(
        is_valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
        context={"edge_count": len(data) if isinstance(data, list) else None},
    )


def parse_edge_list(data: Any) -> List[Tuple[Any, ...]]:
    """
    Convert a validated edge list into edge tuples.

    Raises:
        EdgeInputError: If the data does not match the edge-list schema
    """
    result = validate_edge_list(data)
    if not result.is_valid:
        raise EdgeInputError("; ".join(result.errors))
    for warning in result.warnings:
        logger.warning(warning)
    return [tuple(entry) for entry in data]
