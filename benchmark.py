#!/usr/bin/env python3
"""
Performance Test Script for the AVL Tree

Tests:
1. Sequential insert throughput
2. Random insert throughput
3. Sequential search throughput
4. Random search throughput (hits and misses)
5. Random delete throughput
6. Mixed workload (search/insert/delete)

Metrics:
- Operations per second (ops/sec)
- Latency (p50, p95, p99)
- Final tree height
"""

import os
import random
import statistics
import sys
import time

from avltree import AVLTree, natural_order


class PerformanceTest:
    def __init__(self, seed: int = 42):
        self.rng = random.Random(seed)
        self.tree = AVLTree(natural_order)

    def reset(self):
        """Start the next test from an empty tree."""
        self.tree = AVLTree(natural_order)

    @staticmethod
    def calculate_stats(latencies: list[int]) -> dict:
        """Calculate latency statistics (latencies in nanoseconds)."""
        if not latencies:
            return {}

        sorted_latencies = sorted(latencies)
        return {
            "min_ms": min(latencies) / 1_000_000,
            "max_ms": max(latencies) / 1_000_000,
            "mean_ms": statistics.mean(latencies) / 1_000_000,
            "median_ms": statistics.median(latencies) / 1_000_000,
            "p95_ms": sorted_latencies[int(len(sorted_latencies) * 0.95)] / 1_000_000,
            "p99_ms": sorted_latencies[int(len(sorted_latencies) * 0.99)] / 1_000_000,
        }

    def _run(self, name: str, keys: list[int], op) -> dict:
        print(f"\n{'='*60}")
        print(f"{name} Test: {len(keys)} operations")
        print(f"{'='*60}")

        latencies = []
        start_time = time.perf_counter_ns()

        for key in keys:
            op_start = time.perf_counter_ns()
            op(key)
            latencies.append(time.perf_counter_ns() - op_start)

        elapsed = (time.perf_counter_ns() - start_time) / 1_000_000_000

        results = {
            "test": name,
            "count": len(keys),
            "elapsed_sec": elapsed,
            "ops_per_sec": len(keys) / elapsed if elapsed else float("inf"),
            "tree_size": self.tree.size(),
            "tree_height": self.tree.height(),
            **self.calculate_stats(latencies),
        }

        self.print_results(results)
        return results

    def test_sequential_insert(self, count: int) -> dict:
        """Ascending keys, the worst case for an unbalanced tree."""
        self.reset()
        return self._run("Sequential Insert", list(range(count)), lambda k: self.tree.insert(k, k))

    def test_random_insert(self, count: int) -> dict:
        self.reset()
        keys = list(range(count))
        self.rng.shuffle(keys)
        return self._run("Random Insert", keys, lambda k: self.tree.insert(k, k))

    def test_sequential_search(self, count: int) -> dict:
        return self._run("Sequential Search", list(range(count)), self.tree.get)

    def test_random_search(self, count: int, key_range: int) -> dict:
        """Searches keys in [0, key_range); keys past the tree's size miss."""
        keys = [self.rng.randrange(key_range) for _ in range(count)]
        hits = sum(1 for k in keys if k in self.tree)
        results = self._run("Random Search", keys, self.tree.get)
        results["hit_rate"] = hits / count if count else 0.0
        print(f"  Hit rate: {results['hit_rate']*100:.2f}%")
        return results

    def test_random_delete(self, count: int) -> dict:
        keys = [k for k, _ in self.tree]
        self.rng.shuffle(keys)
        return self._run("Random Delete", keys[:count], self.tree.delete)

    def test_mixed_workload(self, count: int, key_range: int, read_ratio: float = 0.7) -> dict:
        """Reads with probability read_ratio, the rest split between insert and delete."""

        def op(key: int) -> None:
            roll = self.rng.random()
            if roll < read_ratio:
                self.tree.get(key)
            elif roll < read_ratio + (1 - read_ratio) / 2:
                self.tree.insert(key, key)
            else:
                self.tree.delete(key)

        keys = [self.rng.randrange(key_range) for _ in range(count)]
        return self._run("Mixed Workload", keys, op)

    @staticmethod
    def print_results(results: dict):
        """Print test results in a formatted way."""
        print(f"\nResults:")
        print(f"  Operations: {results['count']}")
        print(f"  Elapsed: {results['elapsed_sec']:.2f}s")
        print(f"  Throughput: {results['ops_per_sec']:.2f} ops/sec")
        print(f"  Tree size/height: {results['tree_size']}/{results['tree_height']}")

        if 'median_ms' in results:
            print(f"  Latency (p50/p95/p99): {results['median_ms']:.4f}/{results['p95_ms']:.4f}/{results['p99_ms']:.4f} ms")


def run_tests(count: int, seed: int):
    test = PerformanceTest(seed)

    print(f"\n{'#'*60}")
    print(f"# AVL Tree Performance Test ({count} keys, seed {seed})")
    print(f"{'#'*60}")

    test.test_sequential_insert(count)
    test.test_sequential_search(count)
    test.test_random_insert(count)
    test.test_random_search(count, key_range=count * 2)
    test.test_random_delete(count // 2)
    test.test_mixed_workload(count, key_range=count)

    print(f"\n{'#'*60}")
    print(f"# Test Complete!")
    print(f"{'#'*60}\n")


if __name__ == "__main__":
    count = int(os.environ.get("BENCH_COUNT", "100000"))
    seed = int(os.environ.get("BENCH_SEED", "42"))

    if len(sys.argv) > 1 and sys.argv[1] == "quick":
        count = 10000

    run_tests(count, seed)
