import argparse
import sys
import time

from mincut.algorithms import ALGORITHMS
from mincut.errors import MinCutError, PreconditionViolation
from mincut.instance_reader import read_col_instance

# Karger, D. R. & Stein, C. (1996). A new approach to the minimum cut problem.
# https://doi.org/10.1145/234533.234534


def _format_partition(partition) -> str:
    # instance files count vertices from 1
    return "{ " + " ".join(str(v + 1) for v in sorted(partition)) + " }"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Global minimum cut by randomized contraction")

    parser.add_argument("path", type=str,
                        help="Graph instance file ('p edge n m' / 'e u v' lines)")

    parser.add_argument("--algorithm", action="append", choices=sorted(ALGORITHMS),
                        help="Algorithm to run; repeat for several (default: all)")

    parser.add_argument("--repeat", type=int, default=None,
                        help="Number of repetitions (default: per-algorithm bound)")

    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed (default: fresh entropy)")

    parser.add_argument("--workers", type=int, default=1,
                        help="Worker processes for the repetitions")

    parser.add_argument("--partitions", action="store_true",
                        help="Print the two vertex sets of the best cut")

    parser.add_argument("--require-connected", action="store_true",
                        help="Reject disconnected input graphs")

    parser.add_argument("--progress", action="store_true",
                        help="Show a progress bar")

    return parser


def run(args) -> int:
    graph = read_col_instance(args.path)

    print(f"\nInput graph: \"{args.path}\" (|V| = {graph.n}, |E| = {graph.m})")

    if args.require_connected and not graph.is_connected():
        raise PreconditionViolation("input graph is disconnected")

    for key in args.algorithm or list(ALGORITHMS):
        algorithm = ALGORITHMS[key]
        repeat_count = args.repeat
        if repeat_count is None:
            repeat_count = algorithm.default_repeat_count(graph.n)

        print(f"\nAlgorithm: \"{algorithm.name}\"")
        print(f"    - Number of repetitions: {repeat_count}")

        time_start = time.perf_counter()
        cut = algorithm(graph, repeat_count, seed=args.seed,
                        workers=args.workers, progress=args.progress)
        duration_ms = (time.perf_counter() - time_start) * 1000

        print(f"    - Best minimum cut's size found: {cut.cut_size}")
        print(f"    - Duration: {duration_ms:.0f}ms")

        if args.partitions:
            P, Q = cut.partitions()
            print(f"    - Partitions: {_format_partition(P)} {_format_partition(Q)}")

    print()
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return run(args)
    except MinCutError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
