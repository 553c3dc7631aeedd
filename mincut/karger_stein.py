import math

import numpy as np

from mincut.contraction import contract, crossing_edges, merge_leftover_components
from mincut.cut import Cut
from mincut.graph import Graph
from mincut.repetition import karger_stein_repeat_count, repeat_trials
from mincut.union_find import DisjointSet

# working graphs at or below this many super-vertices are contracted straight to 2
BASE_CASE_SIZE = 6

INV_SQRT_2 = 1.0 / math.sqrt(2)


class _ContractedGraph:
    """
    Intermediate state of the recursion: the surviving (non self-loop) edges
    and the DisjointSet inherited from the parent contraction.
    """
    __slots__ = ['n', 'edges', 'uf']

    def __init__(self, n: int, edges: np.ndarray, uf: DisjointSet):
        self.n = n
        self.edges = edges
        self.uf = uf


def _contract(graph: _ContractedGraph, target_nodes: int,
              rng: np.random.Generator) -> _ContractedGraph:
    """
    Contracts `graph` down to `target_nodes` super-vertices into a new,
    independent working graph. Only the order of `graph.edges` changes.
    """
    uf = graph.uf.copy()
    start = contract(graph.edges, uf, target_nodes, rng)
    edges = crossing_edges(graph.edges[start:], uf)
    return _ContractedGraph(uf.num_components, edges, uf)


def _leaf_cut(graph: _ContractedGraph, rng: np.random.Generator) -> Cut:
    leaf = _contract(graph, 2, rng)
    if leaf.uf.num_components > 2:
        merge_leftover_components(leaf.uf)
    return Cut(int(leaf.edges.shape[0]), leaf.uf)


def karger_stein_once(graph: Graph, rng: np.random.Generator) -> Cut:
    """
    One run of the Karger-Stein recursive contraction.

    Instead of recursing, pending working graphs are kept on an explicit stack.
    A graph with more than BASE_CASE_SIZE super-vertices is contracted twice,
    independently, down to 1 + ceil(n / sqrt(2)) and both results are pushed;
    smaller graphs are contracted to 2 and give a candidate cut. A run succeeds
    with probability Omega(1 / log n).
    """
    best = None
    stack = [_ContractedGraph(graph.n, graph.edges.copy(), DisjointSet(graph.n))]

    while stack:
        current = stack.pop()

        # no edges left only happens on disconnected input
        if current.n <= BASE_CASE_SIZE or current.edges.shape[0] == 0:
            cut = _leaf_cut(current, rng)
            if best is None or cut < best:
                best = cut
        else:
            t = 1 + math.ceil(current.n * INV_SQRT_2)
            stack.append(_contract(current, t, rng))
            stack.append(_contract(current, t, rng))

    return best


def karger_stein(graph: Graph, repeat_count: int = None, seed=None,
                 workers: int = 1, progress: bool = False) -> Cut:
    """
    Karger-Stein algorithm repeated ln(n)^2 times by default, which finds the
    minimum cut with high probability in O(n^2 log^3 n).
    """
    if repeat_count is None:
        repeat_count = karger_stein_repeat_count(graph.n)

    return repeat_trials(karger_stein_once, graph, repeat_count, seed=seed,
                         workers=workers, progress=progress, desc="Karger-Stein")
