"""
Core graph domain model (Node, Edge, Graph).
"""

from .node import Node, NodeId, EdgeHook
from .edge import Edge
from .graph import Graph

__all__ = ["Node", "NodeId", "EdgeHook", "Edge", "Graph"]
