import numpy as np

from mincut.graph import Graph


def generate_ba(n: int, m: int, rng: np.random.Generator = None) -> Graph:
    """
    Generates a Barabási-Albert (BA) random graph using preferential attachment.

    Args:
        n (int): Total number of nodes.
        m (int): Number of edges to attach from a new node to existing nodes.
                 (m <= m0, where m0 is the initial number of nodes)
        rng: numpy Generator or seed.

    Returns:
        Graph: a connected graph on n vertices.
    """
    m0 = max(m, 2)  # initial clique, must be >= m
    if n < m0:
        raise ValueError("n must be >= max(m, 2)")

    rng = np.random.default_rng(rng)

    rows, cols = np.triu_indices(m0, k=1)
    edges = list(zip(rows.tolist(), cols.tolist()))

    degrees = np.zeros(n, dtype=float)
    degrees[:m0] = m0 - 1

    for i in range(m0, n):
        current_degrees = degrees[:i]
        probabilities = current_degrees / current_degrees.sum()
        targets = rng.choice(i, size=m, replace=False, p=probabilities)

        edges.extend((int(t), i) for t in targets)

        degrees[i] = m
        degrees[targets] += 1

    return Graph(n, edges)
