from __future__ import annotations

import os
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

import numpy as np
from matplotlib.figure import Figure

from minpq.eval.workload import generate_workload, replay
from minpq.min_pq import MinPQ
from minpq.optimized_heap_min_pq import OptimizedHeapMinPQ
from minpq.unsorted_array_min_pq import UnsortedArrayMinPQ
from minpq.utilities.json_encoder import dump
from minpq.utilities.status_logger import StatusLogger, TimedStatusLogger

IMPLEMENTATIONS: Dict[str, Callable[[], MinPQ]] = {
    "unsorted_array": UnsortedArrayMinPQ,
    "optimized_heap": OptimizedHeapMinPQ,
}

COLORS = {
    "unsorted_array": "red",
    "optimized_heap": "blue",
}


@dataclass
class BenchmarkConfig:
    sizes: List[int] = field(default_factory=lambda: [100, 1000, 10000])
    repeat: int = 3
    seed: int = 0
    # Number of mixed operations after the prefill, relative to the size
    operations_per_element: float = 1.0
    plot: bool = True
    suppress_log: bool = False

    def validate(self):
        if len(self.sizes) == 0:
            raise ValueError("Expected at least one queue size.")
        if any(size <= 0 for size in self.sizes):
            raise ValueError(f"Queue sizes must be positive, got {self.sizes}.")
        if self.repeat <= 0:
            raise ValueError(f"repeat must be positive, got {self.repeat}.")
        if self.operations_per_element < 0:
            raise ValueError("operations_per_element must be non-negative.")


@dataclass
class BenchmarkResult:
    implementation: str
    size: int
    operations: int
    mean_secs: float
    std_secs: float


def run_benchmark(
    config: BenchmarkConfig,
    implementations: Optional[Dict[str, Callable[[], MinPQ]]] = None,
) -> List[BenchmarkResult]:
    """
    Times replaying the same workload on every implementation.
    The workload for size n consists of n ADD operations followed by
    n * operations_per_element random operations.
    It is generated against every implementation, so it stays valid for all of them on ties.
    The timed replays skip the lookup of removed priorities.
    """
    config.validate()
    if implementations is None:
        implementations = IMPLEMENTATIONS

    results: List[BenchmarkResult] = []
    for size in config.sizes:
        with StatusLogger(f"Generating workload for size {size}...", suppress_log=config.suppress_log):
            operations = generate_workload(
                int(size * config.operations_per_element),
                seed=config.seed,
                prefill=size,
                trackers=[factory() for factory in implementations.values()],
            )
        for name, factory in implementations.items():
            with TimedStatusLogger(
                f"Running {name} on size {size}...",
                f"{name} on size {size}",
                suppress_log=config.suppress_log,
            ):
                timings = []
                for _ in range(config.repeat):
                    queue = factory()
                    start = time.perf_counter()
                    replay(queue, operations, with_priorities=False)
                    timings.append(time.perf_counter() - start)
            results.append(
                BenchmarkResult(
                    implementation=name,
                    size=size,
                    operations=len(operations),
                    mean_secs=float(np.mean(timings)),
                    std_secs=float(np.std(timings)),
                )
            )
    return results


def write_results(results: List[BenchmarkResult], out_dir: str) -> str:
    path = os.path.join(out_dir, "benchmark.json")
    with open(path, "w") as file:
        dump(results, file, indent=2)
    return path


def plot_results(results: List[BenchmarkResult], path: str) -> str:
    fig = Figure(figsize=(6, 4))
    ax = fig.add_subplot()
    for name in dict.fromkeys(r.implementation for r in results):
        rows = sorted((r for r in results if r.implementation == name), key=lambda r: r.size)
        ax.errorbar(
            [r.size for r in rows],
            [r.mean_secs for r in rows],
            yerr=[r.std_secs for r in rows],
            label=name,
            color=COLORS.get(name),
            marker="o",
        )
    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_xlabel("queue size")
    ax.set_ylabel("runtime [s]")
    ax.grid(which="both", axis="both")
    ax.legend()
    fig.savefig(path)
    return path
