"""Exceptions raised by the weighted_graph model."""


class GraphError(Exception):
    """Base class for every error raised by the graph model."""


class MissingNodeError(GraphError, ValueError):
    """An edge operation referenced a source node that is not in the graph."""

    def __init__(self, node_id: int):
        self.node_id = node_id
        super().__init__(f"Source node '{node_id}' does not exist.")
