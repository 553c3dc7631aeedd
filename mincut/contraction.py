import numpy as np

from mincut.cut import Cut
from mincut.graph import Graph
from mincut.union_find import DisjointSet


def contract(edges: np.ndarray, uf: DisjointSet, target_nodes: int,
             rng: np.random.Generator) -> int:
    """
    Contracts random edges until `uf` has `target_nodes` components.

    Partial Fisher-Yates shuffle: the next edge is drawn uniformly from the
    unprocessed suffix of `edges` and swapped to its front, so `edges` is
    permuted in place and must be a private copy. Stops early if the edges
    run out (disconnected graph).

    Returns the index where the unprocessed suffix starts.
    """
    num_edges = edges.shape[0]
    start = 0

    while uf.num_components > target_nodes and start < num_edges:
        pick = int(rng.integers(start, num_edges))
        if pick != start:
            edges[[start, pick]] = edges[[pick, start]]
        uf.union(int(edges[start, 0]), int(edges[start, 1]))
        start += 1

    return start


def crossing_edges(edges: np.ndarray, uf: DisjointSet) -> np.ndarray:
    """
    Keeps the edges whose endpoints are in different components (drops self-loops).
    """
    if edges.shape[0] == 0:
        return edges.copy()
    roots = uf.roots()
    return edges[roots[edges[:, 0]] != roots[edges[:, 1]]]


def merge_leftover_components(uf: DisjointSet) -> None:
    """
    Folds every component other than vertex 0's into a single one.

    Only reached on disconnected input, where the edges run out before two
    components remain; no edge joins the merged components, so the cut is 0.
    """
    other = None
    for v in range(1, len(uf)):
        if uf.connected(0, v):
            continue
        if other is None:
            other = v
        else:
            uf.union(other, v)


def contract_once(graph: Graph, rng: np.random.Generator) -> Cut:
    """
    One run of Karger's contraction down to two super-vertices.
    """
    edges = graph.edges.copy()
    uf = DisjointSet(graph.n)

    start = contract(edges, uf, 2, rng)
    if uf.num_components > 2:
        merge_leftover_components(uf)

    return Cut(int(crossing_edges(edges[start:], uf).shape[0]), uf)
