from dataclasses import dataclass

NodeId = int


@dataclass(frozen=True)
class Edge:
    """Weighted, directed connection from one node id to another."""

    from_node: NodeId
    to_node: NodeId
    weight: float
