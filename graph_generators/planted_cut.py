import numpy as np

from mincut.graph import Graph


def generate_planted_cut(block_size: int, bridges: int,
                         rng: np.random.Generator = None) -> Graph:
    """
    Two cliques of `block_size` vertices joined by `bridges` random edges.

    Vertices 0..block_size-1 form the first clique and the rest the second.
    While bridges < block_size - 1 the bridges are the unique minimum cut.
    """
    if block_size < 2:
        raise ValueError("block_size must be >= 2")
    if bridges < 1:
        raise ValueError("bridges must be >= 1")

    rng = np.random.default_rng(rng)

    rows, cols = np.triu_indices(block_size, k=1)
    left = np.stack([rows, cols], axis=1)
    right = left + block_size

    tails = rng.integers(0, block_size, size=bridges)
    heads = rng.integers(block_size, 2 * block_size, size=bridges)
    crossing = np.stack([tails, heads], axis=1)

    return Graph(2 * block_size, np.concatenate([left, right, crossing]))
