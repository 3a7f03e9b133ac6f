"""
pylist Command-Line Interface (CLI)

This script exposes the ArrayList engine and its benchmark via subcommands:
- List operations on values given on the command line (show, sort, uniquify,
  slice, repeat)
- Benchmark runs written to CSV

Usage examples:
    python -m pylist.cli show 3 1 2
    python -m pylist.cli sort 3 1 2 --reverse
    python -m pylist.cli uniquify 3 1 2 1 1
    python -m pylist.cli slice 3 1 2 1 1 --start 1 --stop 4 --step 2
    python -m pylist.cli repeat a b --times 3
    python -m pylist.cli bench --path bench.csv --base-input 100 --rounds 6
"""

import argparse
import logging
import operator
import sys

from .bench import (
    DEFAULT_BASE_INPUT,
    DEFAULT_ITERATIONS,
    DEFAULT_OUTPUT_CSV,
    DEFAULT_ROUNDS,
    OPERATIONS,
    run_benchmarks,
)
from .datastructures import ArrayList
from .errors import ListError

# Exit status when a list operation rejects its arguments
EXIT_LIST_ERROR = 2


# -------------------------------------------------------------------
# Utility: value parsing
# -------------------------------------------------------------------
def parse_value(text):
    """Parse a command-line value as int, then float, else keep the string."""
    for convert in (int, float):
        try:
            return convert(text)
        except ValueError:
            continue
    return text


def values_to_list(values):
    """Build an ArrayList from raw command-line values."""
    return ArrayList(parse_value(v) for v in values)


# -------------------------------------------------------------------
# List command handlers
# -------------------------------------------------------------------
def cmd_show(args):
    """Print the list built from the given values."""
    print(values_to_list(args.values))


def cmd_sort(args):
    """Stable-sort the values (descending with --reverse)."""
    lst = values_to_list(args.values)
    lst.sort(operator.gt if args.reverse else None)
    print(lst)


def cmd_uniquify(args):
    """Drop duplicates, keeping first occurrences in order."""
    lst = values_to_list(args.values)
    lst.uniquify()
    print(lst)


def cmd_slice(args):
    """Print values[start:stop:step] with the engine's bounds rules."""
    lst = values_to_list(args.values)
    stop = lst.size() if args.stop is None else args.stop
    print(lst.slice(args.start, stop, args.step))


def cmd_repeat(args):
    """Print the values repeated --times times."""
    print(values_to_list(args.values) * args.times)


# -------------------------------------------------------------------
# Benchmark
# -------------------------------------------------------------------
def cmd_bench(args):
    """Run the benchmark and write the results to CSV."""
    results = run_benchmarks(
        args.path,
        base_input=args.base_input,
        rounds=args.rounds,
        iterations=args.iterations,
        operations=args.op,
    )
    for r in results:
        print(
            f"{r.operation:<12} | Size: {r.input_size:<8} | Avg Time: {r.avg_time_ms:.3f} ms | "
            f"Std Time: {r.std_time_ms:.3f} ms | Avg Space: {r.avg_space:.0f} B"
        )
    print(f"\nBenchmark completed. Results saved to {args.path}")


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m pylist.cli", description="ArrayList CLI")
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    sub = p.add_subparsers(dest="cmd", required=True)

    # --- list operations ---
    s = sub.add_parser("show", help="Print a list")
    s.add_argument("values", nargs="*")
    s.set_defaults(func=cmd_show)

    s = sub.add_parser("sort", help="Stable-sort a list")
    s.add_argument("values", nargs="*")
    s.add_argument("--reverse", action="store_true")
    s.set_defaults(func=cmd_sort)

    s = sub.add_parser("uniquify", help="Remove duplicate values")
    s.add_argument("values", nargs="*")
    s.set_defaults(func=cmd_uniquify)

    s = sub.add_parser("slice", help="Slice a list")
    s.add_argument("values", nargs="*")
    s.add_argument("--start", type=int, default=0)
    s.add_argument("--stop", type=int, default=None)
    s.add_argument("--step", type=int, default=1)
    s.set_defaults(func=cmd_slice)

    s = sub.add_parser("repeat", help="Repeat a list")
    s.add_argument("values", nargs="*")
    s.add_argument("--times", type=int, required=True)
    s.set_defaults(func=cmd_repeat)

    # --- benchmark ---
    s = sub.add_parser("bench", help="Benchmark list operations to CSV")
    s.add_argument("--path", default=DEFAULT_OUTPUT_CSV)
    s.add_argument("--base-input", type=int, default=DEFAULT_BASE_INPUT)
    s.add_argument("--rounds", type=int, default=DEFAULT_ROUNDS)
    s.add_argument("--iterations", type=int, default=DEFAULT_ITERATIONS)
    s.add_argument("--op", action="append", choices=sorted(OPERATIONS), help="Operation to run (repeatable)")
    s.set_defaults(func=cmd_bench)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m pylist.cli`."""
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        args.func(args)
    except ListError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_LIST_ERROR
    return 0


if __name__ == "__main__":
    sys.exit(main())
