import csv

import pytest

from pylist.bench import (
    CSV_HEADER,
    OPERATIONS,
    bench_uniquify,
    measure_operation_time,
    measure_true_space,
    run_benchmarks,
)
from pylist.datastructures import ArrayList


def test_every_operation_returns_a_list():
    data = list(range(32, 0, -1))
    for name, op in OPERATIONS.items():
        assert isinstance(op(list(data)), ArrayList), name


def test_operations_compute_expected_results():
    data = [5, 3, 8, 1]
    assert OPERATIONS["append"](data).to_py() == data
    assert OPERATIONS["insert_front"](data).to_py() == data[::-1]
    assert OPERATIONS["remove_front"](data).is_empty()
    assert OPERATIONS["sort"](data).to_py() == sorted(data)
    assert OPERATIONS["reverse"](data).to_py() == data[::-1]
    assert OPERATIONS["slice"](data).to_py() == data[::-2]
    assert bench_uniquify([1, 17, 2, 33]).to_py() == [1, 2]


def test_measure_true_space_grows_with_content():
    assert measure_true_space(ArrayList(range(100))) > measure_true_space(ArrayList())


def test_measure_operation_time_reports_stats():
    result = measure_operation_time(OPERATIONS["append"], 50, iterations=3, name="append")
    assert result.operation == "append"
    assert result.input_size == 50
    assert result.avg_time_ms >= 0.0
    assert result.std_time_ms >= 0.0
    assert result.avg_space > 0


def test_single_iteration_has_zero_deviation():
    result = measure_operation_time(OPERATIONS["reverse"], 8, iterations=1)
    assert result.operation == "bench_reverse"
    assert result.std_time_ms == 0.0
    assert result.std_space == 0.0


def test_run_benchmarks_writes_csv(tmp_path):
    out = tmp_path / "bench.csv"
    results = run_benchmarks(str(out), base_input=4, rounds=3, iterations=2, operations=["append", "sort"])
    assert [(r.operation, r.input_size) for r in results] == [
        ("append", 4), ("append", 8), ("append", 16),
        ("sort", 4), ("sort", 8), ("sort", 16),
    ]

    with open(out, newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == CSV_HEADER
    assert len(rows) == 7
    assert rows[1][:2] == ["4", "append"]


def test_run_benchmarks_rejects_unknown_operation(tmp_path):
    with pytest.raises(KeyError):
        run_benchmarks(str(tmp_path / "x.csv"), base_input=2, rounds=1, operations=["nope"])
