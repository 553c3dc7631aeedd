"""
Repetition driver shared by Karger and Karger-Stein.

A single contraction trial only succeeds with small probability, so the
drivers repeat independent trials and keep the smallest cut. Trials can be
spread over a process pool; every worker draws from its own generator spawned
from one SeedSequence, so no random state is shared between processes.
"""
import concurrent.futures
import math
from typing import Callable, Optional

import numpy as np
from tqdm import tqdm

from mincut.cut import Cut
from mincut.errors import PreconditionViolation
from mincut.graph import Graph

Trial = Callable[[Graph, np.random.Generator], Cut]


def karger_repeat_count(n: int) -> int:
    """
    C(n, 2) * ln(n) trials: a single run succeeds with probability >= 1 / C(n, 2).
    """
    return max(1, math.ceil(0.5 * n * (n - 1) * math.log(max(2, n))))


def karger_stein_repeat_count(n: int) -> int:
    """
    ln(n)^2 trials: a single run succeeds with probability Omega(1 / log n).
    """
    return max(1, math.ceil(math.log(max(2, n)) ** 2))


def _run_trials(trial: Trial, graph: Graph, repeat_count: int, seed,
                progress: bool = False, desc: Optional[str] = None) -> Cut:
    rng = np.random.default_rng(seed)
    best = None

    trials = range(repeat_count)
    if progress:
        trials = tqdm(trials, desc=desc)

    for _ in trials:
        cut = trial(graph, rng)
        if best is None or cut < best:
            best = cut

    return best


def _spawn_seeds(seed, workers: int):
    if isinstance(seed, np.random.SeedSequence):
        return seed.spawn(workers)
    if isinstance(seed, np.random.Generator):
        seed = int(seed.integers(2**63))
    return np.random.SeedSequence(seed).spawn(workers)


def repeat_trials(trial: Trial,
                  graph: Graph,
                  repeat_count: int,
                  seed=None,
                  workers: int = 1,
                  progress: bool = False,
                  desc: Optional[str] = None) -> Cut:
    """
    Runs `trial` `repeat_count` times and returns the smallest cut found.

    Args:
        trial: picklable function (graph, rng) -> Cut.
        graph: input graph, never modified.
        repeat_count: number of independent trials, >= 1.
        seed: int, SeedSequence, Generator or None (fresh OS entropy).
        workers: number of processes; 1 runs everything in this process.
        progress: show a tqdm progress bar.
        desc: label for the progress bar.
    """
    if repeat_count < 1:
        raise PreconditionViolation(f"repeat_count must be >= 1, got {repeat_count}")
    if workers < 1:
        raise PreconditionViolation(f"workers must be >= 1, got {workers}")

    workers = min(workers, repeat_count)
    if workers == 1:
        return _run_trials(trial, graph, repeat_count, seed, progress, desc)

    chunk_sizes = [len(chunk) for chunk in np.array_split(np.arange(repeat_count), workers)]
    seeds = _spawn_seeds(seed, workers)

    results = []
    with concurrent.futures.ProcessPoolExecutor(max_workers=workers) as executor:
        futures = {executor.submit(_run_trials, trial, graph, size, worker_seed): size
                   for size, worker_seed in zip(chunk_sizes, seeds)}

        # the bar counts trials; each finished chunk advances it by its size
        with tqdm(total=repeat_count, desc=desc, disable=not progress) as pbar:
            for future in concurrent.futures.as_completed(futures):
                results.append(future.result())
                pbar.update(futures[future])

    return min(results)
