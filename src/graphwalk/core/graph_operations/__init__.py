"""Graph algorithms built on the traversal engine."""

from .coloring import TwoColorResult, two_color
from .components import ComponentAnalysis, connected_components

__all__ = [
    "ComponentAnalysis",
    "TwoColorResult",
    "connected_components",
    "two_color",
]
