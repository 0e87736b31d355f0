import dataclasses
import typing

import pytest

from weighted_graph import Edge
from weighted_graph.model import NodeId


@pytest.mark.parametrize("weight", [0.0, -3.5, 24.33, 1012.10, float("inf")])
def test_edge_keeps_endpoints_and_weight(weight):
    edge = Edge(10, 20, weight)

    assert edge.from_node == 10
    assert edge.to_node == 20
    assert edge.weight == weight


def test_edge_is_immutable():
    edge = Edge(1, 2, 1.5)

    with pytest.raises(dataclasses.FrozenInstanceError):
        edge.weight = 3.0

    assert edge.weight == 1.5


def test_edge_is_directional():
    assert Edge(1, 2, 1.0) != Edge(2, 1, 1.0)
    assert Edge(1, 2, 1.0) == Edge(1, 2, 1.0)


def test_edge_fields_use_node_id_type():
    hints = typing.get_type_hints(Edge)

    assert hints["from_node"] is NodeId
    assert hints["to_node"] is NodeId
    assert hints["weight"] is float
