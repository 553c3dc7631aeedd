import networkx as nx
import numpy as np
import pytest

from mincut.graph import Graph

# two 4-cliques {0,1,2,3} and {4,5,6,7} joined by the edges {1,4} and {3,4}
TWO_CLIQUES_EDGES = [
    (0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3), (4, 5),
    (4, 6), (4, 7), (5, 6), (5, 7), (6, 7), (1, 4), (3, 4),
]


@pytest.fixture
def two_cliques():
    return Graph(8, TWO_CLIQUES_EDGES)


@pytest.fixture
def single_edge():
    return Graph(2, [(0, 1)])


@pytest.fixture
def disconnected():
    # a triangle, a separate edge and an isolated vertex
    return Graph(6, [(0, 1), (1, 2), (0, 2), (3, 4)])


@pytest.fixture
def rng():
    return np.random.default_rng(42)


def stoer_wagner_value(graph):
    """
    Exact minimum cut, with parallel edges folded into weights.
    """
    G = nx.Graph()
    G.add_nodes_from(range(graph.n))
    for (u, v), count in graph.edge_multiset().items():
        G.add_edge(u, v, weight=count)
    value, _ = nx.stoer_wagner(G)
    return value
