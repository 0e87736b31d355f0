import logging
from typing import Callable, Dict, Generic, List, Optional, Tuple, TypeVar

from .edge import Edge, NodeId

T = TypeVar("T")
EdgeHook = Callable[[Edge, Optional[Edge]], None]

LOGGER = logging.getLogger(__name__)


class Node(Generic[T]):
    """
    A vertex identified by a caller-assigned integer id.

    Outgoing edges are kept as an adjacency list: a dict keyed by the id of
    the neighbor each edge reaches. The optional label is an arbitrary
    payload and plays no part in the structure of the graph.
    """

    def __init__(
        self,
        node_id: NodeId,
        label: Optional[T] = None,
        on_edge_added: Optional[EdgeHook] = None,
    ):
        self.node_id = node_id
        self.label = label
        self.edges: Dict[NodeId, Edge] = {}
        self.on_edge_added = on_edge_added

    @classmethod
    def with_label(
        cls,
        node_id: NodeId,
        label: T,
        on_edge_added: Optional[EdgeHook] = None,
    ) -> "Node[T]":
        """
        Create a node carrying ``label``.

        A ``None`` label is stored like no label at all, so
        ``Node.with_label(i, None)`` is indistinguishable from ``Node(i)``.
        """
        return cls(node_id, label=label, on_edge_added=on_edge_added)

    # -----------------
    # EDGE QUERIES
    # -----------------

    def number_of_edges(self) -> int:
        return len(self.edges)

    def get_edge(self, neighbor: NodeId) -> Optional[Edge]:
        return self.edges.get(neighbor)

    def has_edge(self, neighbor: NodeId) -> bool:
        return neighbor in self.edges

    def neighbors(self) -> List[NodeId]:
        return list(self.edges)

    # -----------------
    # EDGE MUTATION
    # -----------------

    def add_edge(self, neighbor: NodeId, weight: float) -> Optional[Edge]:
        """
        Connect this node to ``neighbor``.

        An existing edge to the same neighbor is replaced and returned,
        otherwise ``None`` is returned. Only this node's adjacency list is
        touched; no reciprocal edge is created on the neighbor.
        """
        new_edge = Edge(self.node_id, neighbor, weight)
        previous = self.edges.get(neighbor)
        self.edges[neighbor] = new_edge

        LOGGER.debug(
            "Edge %s -> %s (weight=%s) %s",
            new_edge.from_node,
            new_edge.to_node,
            new_edge.weight,
            "updated" if previous is not None else "added",
        )
        if self.on_edge_added is not None:
            self.on_edge_added(new_edge, previous)

        return previous

    def remove_edge(self, neighbor: NodeId) -> Optional[Tuple[NodeId, Edge]]:
        """Remove the edge to ``neighbor``, returning ``(neighbor, edge)`` if it existed."""
        edge = self.edges.pop(neighbor, None)
        if edge is None:
            return None
        return neighbor, edge

    def __repr__(self) -> str:
        return (
            f"Node(node_id={self.node_id!r}, label={self.label!r}, "
            f"edges={self.number_of_edges()})"
        )
