"""Public API exports for the weighted_graph model."""

from .model import Node, Edge, Graph
from .errors import GraphError, MissingNodeError

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "GraphError",
    "MissingNodeError",
]
