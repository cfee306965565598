import argparse
import logging
import os
import sys
import time

from typing import Callable

# Internal imports
from .hash_set import HashSet
from .utils.profiler import profile


def _time_operation(operation: Callable[[], object], repeat: int) -> float:
    """
    Run operation `repeat` times and return the best wall time in seconds.

    Best-of-N, because the slower runs are mostly noise from the rest of the machine.
    """
    best: float = float("inf")
    for _ in range(repeat):
        start = time.perf_counter()
        operation()
        best = min(best, time.perf_counter() - start)
    return best


def run_benchmark(size: int, small: int, repeat: int) -> dict[str, float]:
    """
    Time the set algebra operations on a large set and a small set.

    The small set is a subset of the large one, so the intersection is never empty.
    Intersection is timed in both directions: both should cost about the same,
    since the smaller operand is the one that gets walked.

    Returns a mapping of operation name to best time in seconds.
    """
    large: HashSet[int] = HashSet.from_iterable(range(size))
    small_set: HashSet[int] = HashSet.from_iterable(range(0, size, max(size // max(small, 1), 1)))
    logging.info(f"Built sets with {len(large)} and {len(small_set)} elements")

    operations: dict[str, Callable[[], object]] = {
        "intersection_large_small": lambda: large.intersection(small_set),
        "intersection_small_large": lambda: small_set.intersection(large),
        "union": lambda: large.union(small_set),
        "difference": lambda: large.difference(small_set),
        "symmetric_difference": lambda: large.symmetric_difference(small_set),
        "is_subset": lambda: small_set.is_subset(large),
        "equals": lambda: large.equals(large.clone()),
        "clone": lambda: large.clone(),
    }

    results: dict[str, float] = {}
    for name, operation in operations.items():
        results[name] = _time_operation(operation, repeat)
        logging.info(f"{name}: {results[name] * 1000:.3f} ms")

    return results


def _parse_args(args: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Benchmark the simple-set HashSet operations.")
    parser.add_argument(
        "--size", type=int, default=100_000, help="Number of elements in the large set (default: 100000)"
    )
    parser.add_argument(
        "--small", type=int, default=100, help="Number of elements in the small set (default: 100)"
    )
    parser.add_argument(
        "--repeat", type=int, default=5, help="Runs per operation, the best one is reported (default: 5)"
    )
    parser.add_argument(
        "--debug", action="store_true", default=False, help="Enable debug logging (default: False)"
    )
    parser.add_argument(
        "--profile", action="store_true", default=False, help="Profile the benchmark with cProfile (default: False)"
    )
    parser.add_argument(
        "--profile-output", default=None, help="File to dump the cProfile stats to (only used with --profile)"
    )
    return parser.parse_args(args)


def main(args: list[str] | None = None) -> dict[str, float]:
    """
    Entry point for `python -m simple_set.benchmark`.

    Note: --debug makes every set operation log, which slows the timings down a lot. Only use it to check behaviour.
    """
    parsed = _parse_args(sys.argv[1:] if args is None else args)

    if parsed.debug:
        logging.basicConfig(level=logging.DEBUG)
        logging.debug("Debug logging enabled")
    else:
        logging.basicConfig(level=logging.INFO)

    logging.critical(f"Benchmarking with size={parsed.size}, small={parsed.small}, repeat={parsed.repeat}")
    logging.critical(f"Process ID: {os.getpid()}")

    benchmark = run_benchmark
    if parsed.profile:
        benchmark = profile(run_benchmark, output_file=parsed.profile_output)

    return benchmark(parsed.size, parsed.small, parsed.repeat)


if __name__ == "__main__":
    main()
