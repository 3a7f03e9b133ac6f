import csv

import pytest

from pylist.cli import EXIT_LIST_ERROR, build_parser, main, parse_value, values_to_list


def test_parse_value():
    assert parse_value("3") == 3
    assert parse_value("-2") == -2
    assert parse_value("1.5") == 1.5
    assert parse_value("abc") == "abc"


def test_values_to_list():
    assert values_to_list(["1", "x", "2.5"]).to_py() == [1, "x", 2.5]


def test_show(capsys):
    assert main(["show", "3", "1", "2"]) == 0
    assert capsys.readouterr().out.strip() == "[3, 1, 2]"
    main(["show"])
    assert capsys.readouterr().out.strip() == "[]"


def test_sort_and_reverse(capsys):
    main(["sort", "3", "1", "2"])
    assert capsys.readouterr().out.strip() == "[1, 2, 3]"
    main(["sort", "3", "1", "2", "--reverse"])
    assert capsys.readouterr().out.strip() == "[3, 2, 1]"


def test_uniquify(capsys):
    main(["uniquify", "3", "1", "2", "1", "1"])
    assert capsys.readouterr().out.strip() == "[3, 1, 2]"


def test_slice(capsys):
    main(["slice", "3", "1", "2", "1", "1", "--start", "1", "--stop", "4", "--step", "2"])
    assert capsys.readouterr().out.strip() == "[1, 1]"
    main(["slice", "1", "2", "3", "--start", "-1", "--stop", "-4", "--step", "-1"])
    assert capsys.readouterr().out.strip() == "[3, 2, 1]"
    main(["slice", "1", "2", "3", "--start", "1"])
    assert capsys.readouterr().out.strip() == "[2, 3]"


def test_repeat(capsys):
    main(["repeat", "a", "b", "--times", "2"])
    assert capsys.readouterr().out.strip() == "[a, b, a, b]"


def test_list_errors_become_exit_status(capsys):
    assert main(["repeat", "1", "--times", "-1"]) == EXIT_LIST_ERROR
    assert "error: times to repeat cannot be negative" in capsys.readouterr().err

    assert main(["slice", "1", "2", "--start", "5"]) == EXIT_LIST_ERROR
    assert "out of range" in capsys.readouterr().err


def test_bench_command(tmp_path, capsys):
    out = tmp_path / "bench.csv"
    code = main([
        "bench", "--path", str(out), "--base-input", "4", "--rounds", "2",
        "--iterations", "1", "--op", "append", "--op", "reverse",
    ])
    assert code == 0
    assert "Benchmark completed" in capsys.readouterr().out
    with open(out, newline="") as f:
        assert len(list(csv.reader(f))) == 5


def test_parser_requires_a_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_bench_rejects_unknown_operation():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["bench", "--op", "nope"])
