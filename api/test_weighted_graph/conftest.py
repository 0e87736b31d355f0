import pytest

from weighted_graph import Graph, Node


@pytest.fixture
def labelled_graph():
    graph: Graph[str] = Graph(5, undirected=False)
    graph.insert_node(Node.with_label(20, "Furniture"))
    graph.insert_node(Node.with_label(30, "Laptop"))
    graph.insert_node(Node.with_label(40, "Clock"))
    return graph
