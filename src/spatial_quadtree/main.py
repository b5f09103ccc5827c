"""Quadtree Benchmark
This script fills a quadtree with simulated points, runs random rectangle
queries against it, and reports insert and query throughput.
"""

from __future__ import annotations

import argparse
import logging
import time
from dataclasses import dataclass

from spatial_quadtree.config import Config
from spatial_quadtree.errors import InvalidConfiguration
from spatial_quadtree.quad_tree import Quadtree
from spatial_quadtree.utils import generate_points, generate_query_rects, make_rng


@dataclass(frozen=True)
class BenchmarkResult:
    """Timings and shape of one benchmark run."""

    num_items: int
    num_queries: int
    insert_seconds: float
    query_seconds: float
    total_hits: int
    num_leaves: int
    depth: int

    @property
    def insert_rate(self) -> float:
        return self.num_items / self.insert_seconds if self.insert_seconds > 0 else float("inf")

    @property
    def query_rate(self) -> float:
        return self.num_queries / self.query_seconds if self.query_seconds > 0 else float("inf")


def run_benchmark(config: Config) -> BenchmarkResult:
    """Insert the configured workload into a fresh tree and time queries against it.

    Args
    -----
        config (Config): Tree, bounds and workload settings.

    Returns
    -------
        BenchmarkResult: Timings and final tree shape.

    Raises
    ------
        InvalidConfiguration: If the bounds have zero width or height, since
            no point could be inserted.
    """
    bench = config.benchmark
    bounds = config.bounds.to_rect()
    if bounds.width <= 0 or bounds.height <= 0:
        msg = f"benchmark bounds must have positive width and height, got {bounds}"
        raise InvalidConfiguration(msg)
    rng = make_rng(bench.seed)

    points = generate_points(bench.num_items, bounds, bench.distribution, rng)
    rects = generate_query_rects(bench.num_queries, bounds, bench.query_size, rng)
    tree = Quadtree.from_config(config)

    start = time.perf_counter()
    for i, p in enumerate(points):
        tree.insert(i, p)
    insert_seconds = time.perf_counter() - start

    total_hits = 0
    start = time.perf_counter()
    for r in rects:
        total_hits += len(tree.query(r))
    query_seconds = time.perf_counter() - start

    return BenchmarkResult(
        num_items=tree.size(),
        num_queries=len(rects),
        insert_seconds=insert_seconds,
        query_seconds=query_seconds,
        total_hits=total_hits,
        num_leaves=sum(1 for _ in tree.leaves()),
        depth=tree.depth(),
    )


def main(argv: list[str] | None = None) -> BenchmarkResult:
    parser = argparse.ArgumentParser(description="Benchmark quadtree inserts and range queries.")
    parser.add_argument("--config", help="Path to a YAML config file.")
    args = parser.parse_args(argv)

    # Setup Configuration
    sim_config = Config.from_yaml(args.config) if args.config else Config()
    if sim_config.verbose:
        logging.basicConfig(level=logging.DEBUG)

    print(f"Running benchmark with {sim_config.benchmark.num_items} "
          f"{sim_config.benchmark.distribution} points...")
    result = run_benchmark(sim_config)

    print("\n--- Results ---")
    print(f"Inserted {result.num_items} items in {result.insert_seconds:.4f}s "
          f"({result.insert_rate:,.0f} inserts/s)")
    print(f"Ran {result.num_queries} queries in {result.query_seconds:.4f}s "
          f"({result.query_rate:,.0f} queries/s, {result.total_hits} hits)")
    print(f"Tree shape: {result.num_leaves} leaves, depth {result.depth}")
    return result


if __name__ == "__main__":
    main()
