import networkx as nx
import numpy as np

from mincut.errors import PreconditionViolation


class Graph:
    """
    Undirected multigraph with n vertices indexed 0..n-1, stored as an (m, 2)
    array of edges (tail, head).

    The core never edits `edges`; contractions work on private copies.
    """
    __slots__ = ['n', 'edges']

    def __init__(self, n: int, edges):
        if n < 2:
            raise PreconditionViolation(f"a graph needs at least 2 vertices, got {n}")

        try:
            edges = np.array(edges)
        except ValueError as exc:
            raise PreconditionViolation(f"edges must be an (m, 2) array: {exc}") from None

        if edges.size == 0:
            edges = np.empty((0, 2), dtype=np.int64)
        elif not np.issubdtype(edges.dtype, np.integer):
            raise PreconditionViolation(f"vertex ids must be integers, got dtype {edges.dtype}")
        edges = edges.astype(np.int64)
        if edges.ndim != 2 or edges.shape[1] != 2:
            raise PreconditionViolation(
                f"edges must have shape (m, 2), got {edges.shape}")
        if edges.size and (edges.min() < 0 or edges.max() >= n):
            raise PreconditionViolation(
                f"edge endpoints must lie in [0, {n}), got [{edges.min()}, {edges.max()}]")

        edges.setflags(write=False)
        self.n = int(n)
        self.edges = edges

    @property
    def m(self) -> int:
        return self.edges.shape[0]

    def __repr__(self):
        return f"Graph(n={self.n}, m={self.m})"

    def edge_multiset(self) -> dict:
        """
        Count of every unordered edge {u, v}; independent of edge order.
        """
        counts = {}
        for u, v in self.edges.tolist():
            key = (u, v) if u <= v else (v, u)
            counts[key] = counts.get(key, 0) + 1
        return counts

    def is_connected(self) -> bool:
        return nx.is_connected(self.to_networkx())

    def to_networkx(self) -> nx.MultiGraph:
        G = nx.MultiGraph()
        G.add_nodes_from(range(self.n))
        G.add_edges_from(self.edges.tolist())
        return G

    @classmethod
    def from_networkx(cls, G: nx.Graph) -> 'Graph':
        """
        Relabels the nodes of G to 0..n-1 (sorted order) and keeps every edge,
        parallel edges included.
        """
        G = nx.convert_node_labels_to_integers(G, ordering="sorted")
        return cls(G.number_of_nodes(), [(u, v) for u, v in G.edges()])
