"""Timing and space benchmark for :class:`ArrayList` operations.

Each operation builds a list from random integers and then exercises one
part of the engine. Input sizes grow exponentially (``base_input * 2**k``)
so the growth curve of every operation is visible in the CSV output.

Usage:
    python -m pylist.cli bench --path array_list_bench.csv --base-input 100
"""

from __future__ import annotations

import csv
import logging
import random
import statistics
import sys
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from .datastructures.array_list import ArrayList

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_CSV = "array_list_bench.csv"
DEFAULT_BASE_INPUT = 100
DEFAULT_ROUNDS = 8
DEFAULT_ITERATIONS = 5

CSV_HEADER = [
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Std Dev Time (ms)",
    "Average Space (bytes)",
    "Std Dev Space (bytes)",
]


@dataclass(frozen=True)
class BenchResult:
    operation: str
    input_size: int
    avg_time_ms: float
    std_time_ms: float
    avg_space: float
    std_space: float

    def as_row(self) -> List[str]:
        return [
            str(self.input_size),
            self.operation,
            f"{self.avg_time_ms:.3f}",
            f"{self.std_time_ms:.3f}",
            f"{self.avg_space:.0f}",
            f"{self.std_space:.0f}",
        ]


# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_list(size: int) -> List[int]:
    """Generate a list of random integers of given size."""
    return [random.randint(0, 1000000) for _ in range(size)]


def measure_true_space(lst: ArrayList) -> int:
    """Estimate total memory usage of an ArrayList including its buffer."""
    total = sys.getsizeof(lst)
    total += sys.getsizeof(lst._buf)
    for item in lst:
        total += sys.getsizeof(item)
    return total


def measure_operation_time(
    operation: Callable[[List[int]], ArrayList],
    input_size: int,
    iterations: int = DEFAULT_ITERATIONS,
    name: Optional[str] = None,
) -> BenchResult:
    """Run the operation `iterations` times on fresh random data; return mean and std dev."""
    times = []
    space_used = []
    for _ in range(iterations):
        data = generate_random_list(input_size)
        start = time.perf_counter()
        lst = operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # milliseconds
        space_used.append(measure_true_space(lst))

    return BenchResult(
        operation=name or getattr(operation, "__name__", "operation"),
        input_size=input_size,
        avg_time_ms=statistics.mean(times),
        std_time_ms=statistics.stdev(times) if len(times) > 1 else 0.0,
        avg_space=statistics.mean(space_used),
        std_space=statistics.stdev(space_used) if len(space_used) > 1 else 0.0,
    )


# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_append(data: List[int]) -> ArrayList[int]:
    lst: ArrayList[int] = ArrayList()
    for item in data:
        lst.append(item)
    return lst


def bench_insert_front(data: List[int]) -> ArrayList[int]:
    lst: ArrayList[int] = ArrayList()
    for item in data:
        lst.insert(0, item)
    return lst


def bench_remove_front(data: List[int]) -> ArrayList[int]:
    lst = ArrayList(data)
    while lst:
        lst.remove(0)
    return lst


def bench_getitem(data: List[int]) -> ArrayList[int]:
    lst = ArrayList(data)
    for i in range(-len(lst), len(lst)):
        _ = lst[i]
    return lst


def bench_find(data: List[int]) -> ArrayList[int]:
    lst = ArrayList(data)
    # A value randint never produces, so every probe scans the whole list.
    for _ in range(3):
        lst.find(-1)
    return lst


def bench_sort(data: List[int]) -> ArrayList[int]:
    lst = ArrayList(data)
    lst.sort()
    return lst


def bench_reverse(data: List[int]) -> ArrayList[int]:
    lst = ArrayList(data)
    lst.reverse()
    return lst


def bench_uniquify(data: List[int]) -> ArrayList[int]:
    # Few distinct values so the duplicate-removal path dominates.
    lst = ArrayList(v % 16 for v in data)
    lst.uniquify()
    return lst


def bench_slice(data: List[int]) -> ArrayList[int]:
    lst = ArrayList(data)
    return lst.slice(-1, -len(lst) - 1, -2)


OPERATIONS: Dict[str, Callable[[List[int]], ArrayList]] = {
    "append": bench_append,
    "insert_front": bench_insert_front,
    "remove_front": bench_remove_front,
    "getitem": bench_getitem,
    "find": bench_find,
    "sort": bench_sort,
    "reverse": bench_reverse,
    "uniquify": bench_uniquify,
    "slice": bench_slice,
}


# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(
    output_file: str,
    base_input: int = DEFAULT_BASE_INPUT,
    rounds: int = DEFAULT_ROUNDS,
    iterations: int = DEFAULT_ITERATIONS,
    operations: Optional[Sequence[str]] = None,
) -> List[BenchResult]:
    """Run exponential performance tests and write them to `output_file` as CSV.

    `operations` selects entries of :data:`OPERATIONS` by name (all by default).

    Raises:
        KeyError: if an operation name is unknown.
    """
    names = list(operations) if operations else list(OPERATIONS)
    selected = {name: OPERATIONS[name] for name in names}
    input_sizes = [base_input * (2 ** i) for i in range(rounds)]

    results: List[BenchResult] = []
    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CSV_HEADER)

        for op_name, op_func in selected.items():
            for size in input_sizes:
                result = measure_operation_time(op_func, size, iterations, name=op_name)
                writer.writerow(result.as_row())
                results.append(result)
                logger.debug(
                    "%-12s | size %-8d | avg %.3f ms | std %.3f ms | space %.0f B",
                    op_name, size, result.avg_time_ms, result.std_time_ms, result.avg_space,
                )

    return results
