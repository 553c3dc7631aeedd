import argparse
import time
from typing import Any, Callable, Dict, List, Optional

import networkx as nx
import numpy as np
import pandas as pd
from tqdm import tqdm

from graph_generators import generate_ba, generate_er, generate_planted_cut
from mincut.algorithms import ALGORITHMS

RNG_SEED = 42

MODEL_PARAMS = {
    'ER': {'p': 0.3},
    'BA': {'m': 3},
    'PLANTED': {'bridges': 2},
}


def _planted(n: int, bridges: int, rng=None):
    return generate_planted_cut(max(2, n // 2), bridges, rng=rng)


GRAPH_GENERATORS = {
    'ER': generate_er,
    'BA': generate_ba,
    'PLANTED': _planted,
}


class BenchmarkRunner:
    """
    Handles running benchmarks for different graph models and algorithms.
    """

    def __init__(self,
                 algorithms: Dict[str, Callable],
                 generators: Dict[str, Callable],
                 seed: Optional[int] = None):
        """
        Args:
            algorithms (Dict[str, Callable]):
                Dict of {'algo_name': algorithm_function}
                Each function must accept a Graph and a `seed` keyword and
                return a Cut.

            generators (Dict[str, Callable]):
                Dict of {'model_name': generator_function}
                Each function must accept n, an `rng` keyword and **kwargs.

            seed (Optional[int]):
                Root seed for reproducibility.
                If None, randomness is uncontrolled.
        """
        self.algorithms = algorithms
        self.generators = generators
        self.seed_sequence = np.random.SeedSequence(seed)

    def run(self,
            models: List[str],
            n_values: List[int],
            trials: int,
            model_params: Dict[str, Dict[str, Any]],
            progress: bool = True) -> pd.DataFrame:
        """
        Runs the full benchmark.

        Args:
            models (List[str]): List of model names (e.g., ['ER', 'BA']).
            n_values (List[int]): List of graph sizes (n).
            trials (int): Number of graphs to run for each (model, n) pair.
            model_params (Dict): Parameters for each model generator.
                                 e.g., {'ER': {'p': 0.1}, 'BA': {'m': 3}}
            progress (bool): show a tqdm bar per (model, n) pair.

        Returns:
            pd.DataFrame: one row per (model, n, algorithm).
        """
        all_results = []

        for model_name in models:
            if model_name not in self.generators:
                print(
                    f"Warning: Generator '{model_name}' not found. Skipping.")
                continue
            gen_func = self.generators[model_name]
            params = model_params.get(model_name, {})

            for n in n_values:
                trial_results = {name: {'times': [], 'cuts': [], 'exact': 0}
                                 for name in self.algorithms}
                sizes = []

                # one child seed per trial: graph generation and every algorithm
                # get independent streams
                trial_seeds = self.seed_sequence.spawn(trials)
                iterator = trial_seeds
                if progress:
                    iterator = tqdm(trial_seeds,
                                    desc=f"Model={model_name}, n={n}")

                for trial_seed in iterator:
                    graph_seed, *algo_seeds = trial_seed.spawn(1 + len(self.algorithms))
                    graph = gen_func(n=n, rng=np.random.default_rng(graph_seed), **params)
                    sizes.append((graph.n, graph.m))

                    true_value, _ = nx.stoer_wagner(_simple_weighted(graph))

                    for (algo_name, algo_func), algo_seed in zip(self.algorithms.items(), algo_seeds):
                        start_time = time.perf_counter()
                        cut = algo_func(graph, seed=algo_seed)
                        end_time = time.perf_counter()

                        trial_results[algo_name]['times'].append(
                            end_time - start_time)
                        trial_results[algo_name]['cuts'].append(cut.cut_size)
                        if cut.cut_size == true_value:
                            trial_results[algo_name]['exact'] += 1

                for algo_name, data in trial_results.items():
                    all_results.append({
                        'model': model_name,
                        'n': n,
                        'mean_nodes': np.mean([s[0] for s in sizes]),
                        'mean_edges': np.mean([s[1] for s in sizes]),
                        'algorithm': algo_name,
                        'trials': trials,
                        'mean_time_s': np.mean(data['times']),
                        'std_time_s': np.std(data['times']),
                        'mean_cut': np.mean(data['cuts']),
                        'min_found_cut': np.min(data['cuts']),
                        'max_found_cut': np.max(data['cuts']),
                        'success_rate': data['exact'] / trials,
                    })

        return pd.DataFrame(all_results)


def _simple_weighted(graph) -> nx.Graph:
    """
    Collapses parallel edges into weights for Stoer-Wagner, which needs a
    simple graph.
    """
    G = nx.Graph()
    G.add_nodes_from(range(graph.n))
    for (u, v), count in graph.edge_multiset().items():
        if u != v:
            G.add_edge(u, v, weight=count)
    return G


def main(argv=None):
    parser = argparse.ArgumentParser(description="Karger vs Karger-Stein benchmark")

    parser.add_argument("--models", nargs="+", default=['ER', 'BA', 'PLANTED'],
                        choices=sorted(GRAPH_GENERATORS),
                        help="Graph models to benchmark")

    parser.add_argument("--n", type=int, nargs="+", default=[10, 20, 30],
                        help="Graph sizes")

    parser.add_argument("--trials", type=int, default=10,
                        help="Graphs per (model, n) pair")

    parser.add_argument("--seed", type=int, default=RNG_SEED,
                        help="Root random seed")

    parser.add_argument("--output", type=str, default="benchmark_results.csv",
                        help="CSV file for the results")

    args = parser.parse_args(argv)

    runner = BenchmarkRunner(ALGORITHMS, GRAPH_GENERATORS, seed=args.seed)
    results_df = runner.run(
        models=args.models,
        n_values=args.n,
        trials=args.trials,
        model_params=MODEL_PARAMS,
    )

    pd.set_option('display.width', 1000)
    pd.set_option('display.max_rows', None)

    print("\nBenchmark Results:")
    print(results_df)

    results_df.to_csv(args.output, index=False)
    print(f"\nResults saved to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
