import logging
from typing import Generic, List, Optional, Tuple

from ..errors import MissingNodeError
from .edge import Edge
from .node import EdgeHook, Node, NodeId, T

LOGGER = logging.getLogger(__name__)


class Graph(Generic[T]):
    """
    Capacity-bounded collection of nodes.

    Responsibilities:
    - Admit nodes up to a fixed capacity, rejecting duplicate ids
    - Resolve source nodes by id and delegate edge mutation to them
    - Answer node and edge lookups

    ``undirected`` is stored for callers that interpret the graph; edge
    operations always work on the directed record owned by the source node.
    """

    def __init__(
        self,
        capacity: int,
        undirected: bool = False,
        on_edge_added: Optional[EdgeHook] = None,
    ):
        if capacity < 0:
            raise ValueError(f"Invalid capacity: {capacity}. Capacity must be >= 0.")

        self.capacity = capacity
        self.undirected = undirected
        self.on_edge_added = on_edge_added
        self.nodes: List[Node[T]] = []

    # -----------------
    # NODE OPERATIONS
    # -----------------

    def insert_node(self, node: Node[T]) -> bool:
        """
        Append ``node`` to the graph.

        Returns ``False`` and leaves the graph untouched when it is already
        at capacity or already holds a node with the same id.
        """
        if self.is_full():
            LOGGER.debug("Graph at capacity (%s), node %s refused", self.capacity, node.node_id)
            return False

        if self.has_node(node.node_id):
            LOGGER.debug("Node %s already exists, insert refused", node.node_id)
            return False

        if node.on_edge_added is None:
            node.on_edge_added = self.on_edge_added

        self.nodes.append(node)
        return True

    def get_node(self, node_id: NodeId) -> Optional[Node[T]]:
        # First match in insertion order.
        for node in self.nodes:
            if node.node_id == node_id:
                return node
        return None

    def has_node(self, node_id: NodeId) -> bool:
        return any(node.node_id == node_id for node in self.nodes)

    def is_full(self) -> bool:
        return len(self.nodes) >= self.capacity

    # -----------------
    # EDGE OPERATIONS
    # -----------------

    def insert_edge(self, from_node: NodeId, to_node: NodeId, weight: float) -> Optional[Edge]:
        """
        Insert or update the edge ``from_node -> to_node``.

        Returns the replaced edge, or ``None`` for a new one. ``to_node`` does
        not need to be in the graph.

        Raises:
            MissingNodeError: no node with id ``from_node`` exists.
        """
        source = self.get_node(from_node)
        if source is None:
            raise MissingNodeError(from_node)
        return source.add_edge(to_node, weight)

    def get_edge(self, from_node: NodeId, to_node: NodeId) -> Optional[Edge]:
        # A missing source node is a miss, not an error.
        source = self.get_node(from_node)
        if source is None:
            return None
        return source.get_edge(to_node)

    def has_edge(self, from_node: NodeId, to_node: NodeId) -> bool:
        return self.get_edge(from_node, to_node) is not None

    def remove_edge(self, from_node: NodeId, to_node: NodeId) -> Optional[Tuple[NodeId, Edge]]:
        source = self.get_node(from_node)
        if source is None:
            return None
        return source.remove_edge(to_node)

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, node_id: object) -> bool:
        return any(node.node_id == node_id for node in self.nodes)

    def __repr__(self) -> str:
        return (
            f"Graph(capacity={self.capacity}, undirected={self.undirected}, "
            f"nodes={len(self.nodes)})"
        )
