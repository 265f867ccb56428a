import random

import pytest

from dsakit.quickbench import (
    BenchmarkRow,
    average_case,
    benchmark,
    best_case,
    first_pivot_quicksort,
    format_table,
    main,
    worst_case,
)


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_first_pivot_quicksort_matches_sorted(seed):
    rng = random.Random(seed)
    data = [rng.randrange(-50, 50) for _ in range(80)]
    assert first_pivot_quicksort(data) == sorted(data)


def test_first_pivot_quicksort_edge_cases():
    assert first_pivot_quicksort([]) == []
    assert first_pivot_quicksort([4, 4, 4]) == [4, 4, 4]
    assert first_pivot_quicksort(range(500, 0, -1)) == list(range(1, 501))


def test_first_pivot_quicksort_does_not_mutate():
    data = [3, 1, 2]
    first_pivot_quicksort(data)
    assert data == [3, 1, 2]


@pytest.mark.parametrize("timer", [best_case, average_case, worst_case])
def test_timings_are_non_negative(timer):
    assert timer(200) >= 0


def test_benchmark_rows_follow_sizes():
    rows = benchmark([10, 20])
    assert [row.size for row in rows] == [10, 20]
    assert all(min(row.best, row.average, row.worst) >= 0 for row in rows)


def test_format_table_layout():
    table = format_table([BenchmarkRow(1000, 5, 12, 10000000)])
    assert table == "\tBest Case\tAverage Case\tWorst Case\n1000\t5\t\t12\t\t10000000\n"


def test_format_table_empty_has_header_only():
    assert format_table([]) == "\tBest Case\tAverage Case\tWorst Case\n"


def test_main_prints_table(capsys):
    assert main(["10", "30"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "\tBest Case\tAverage Case\tWorst Case"
    assert [line.split("\t")[0] for line in lines[1:]] == ["10", "30"]