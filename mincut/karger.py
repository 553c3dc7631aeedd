from mincut.contraction import contract_once
from mincut.cut import Cut
from mincut.graph import Graph
from mincut.repetition import karger_repeat_count, repeat_trials


def karger(graph: Graph, repeat_count: int = None, seed=None,
           workers: int = 1, progress: bool = False) -> Cut:
    """
    Karger's contraction algorithm, repeated to amplify the success probability.

    Every trial contracts a private copy of the edges with a fresh DisjointSet,
    in O(m alpha(n)). With the default C(n, 2) ln(n) repetitions the minimum cut
    is found with probability >= 1 - 1/n.

    Returns the smallest Cut over all trials; its DisjointSet gives the partitions.
    """
    if repeat_count is None:
        repeat_count = karger_repeat_count(graph.n)

    return repeat_trials(contract_once, graph, repeat_count, seed=seed,
                         workers=workers, progress=progress, desc="Karger")
