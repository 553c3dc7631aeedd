import networkx as nx
import numpy as np

from mincut.graph import Graph


def generate_er(n: int, p: float, rng: np.random.Generator = None) -> Graph:
    """
    Generates an Erdős-Rényi (G(n, p)) random graph.

    G(n, p) does not guarantee a connected graph, so only the largest
    connected component is kept (relabelled to 0..n'-1).

    Returns:
        Graph: the largest component, with n' <= n vertices.
    """
    rng = np.random.default_rng(rng)

    # indices for the upper triangle (k=1 excludes the diagonal)
    rows, cols = np.triu_indices(n, k=1)

    keep = rng.random(rows.size) < p
    G = nx.Graph()
    G.add_nodes_from(range(n))
    G.add_edges_from(zip(rows[keep].tolist(), cols[keep].tolist()))

    if not nx.is_connected(G):
        largest_cc = max(nx.connected_components(G), key=len)
        G = G.subgraph(largest_cc).copy()

    return Graph.from_networkx(G)
