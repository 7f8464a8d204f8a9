#!/usr/bin/env python3
"""
Benchmark suite for mathkit.

Each mathkit function is first checked against a reference (the math module
or NumPy), then timed per call next to that reference. The numbers show the
cost of mathkit's input checking and edge-case policy over the bare operation.

Usage:
    # Quick run
    python bench/bench.py

    # More iterations
    python bench/bench.py --rigorous
"""

import argparse
import math
import sys
import time
from pathlib import Path

import numpy as np

# Add parent to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "python"))

import mathkit

from cli_style import (
    Color,
    Table,
    banner,
    c,
    done,
    format_number,
    format_ratio,
    format_time_us,
    info_line,
    section_header,
    success,
    warning,
)


def np_softmax(a: np.ndarray) -> np.ndarray:
    e = np.exp(a - np.max(a))
    return e / np.sum(e)


def py_sigmoid(x: float) -> float:
    return 1.0 / (1.0 + math.exp(-x))


def _time_loop(fn, iterations: int) -> float:
    start = time.perf_counter()
    for _ in range(iterations):
        fn()
    return (time.perf_counter() - start) / iterations


def _time_each(fn, inputs) -> float:
    start = time.perf_counter()
    for x in inputs:
        fn(x)
    return (time.perf_counter() - start) / len(inputs)


def _print_rows(rows) -> None:
    table = Table(
        [
            ("Function", 14, "left"),
            ("Reference", 12, "right"),
            ("mathkit", 12, "right"),
            ("Ratio", 10, "right"),
        ]
    )
    table.print_header()
    for name, ref_t, mk_t in rows:
        ratio = mk_t / ref_t if ref_t > 0 else float("inf")
        table.print_row(
            [
                c(Color.CYAN, name),
                format_time_us(ref_t),
                format_time_us(mk_t),
                format_ratio(ratio),
            ]
        )


def benchmark_integers(n: int, rigorous: bool = False):
    """Integer sum and element-wise doubling."""
    section_header("Integer family", f"n = {format_number(n)} elements")

    rng = np.random.default_rng(42)
    arr = rng.integers(-1_000_000, 1_000_000, size=n, dtype=np.int64)
    values = arr.tolist()

    checks = [
        ("sum", mathkit.sum(values) == int(np.sum(arr))),
        ("double_all", np.array_equal(mathkit.double_all(values), arr * 2)),
    ]
    failed = [name for name, passed in checks if not passed]
    if failed:
        for name in failed:
            warning(f"{name} mismatch")
        return
    success("Sanity check passed")
    print()

    iterations = 20 if rigorous else 5
    rows = [
        (
            "sum",
            _time_loop(lambda: sum(values), iterations),
            _time_loop(lambda: mathkit.sum(values), iterations),
        ),
        (
            "double_all",
            _time_loop(lambda: np.array(values) * 2, iterations),
            _time_loop(lambda: mathkit.double_all(values), iterations),
        ),
    ]
    _print_rows(rows)


def benchmark_scalars(n: int, rigorous: bool = False):
    """Per-call cost of the scalar functions."""
    n_calls = min(n, 200_000 if rigorous else 50_000)
    section_header("Scalar functions", f"{format_number(n_calls)} calls each")

    rng = np.random.default_rng(42)
    xs = (rng.standard_normal(n_calls) * 10).tolist()
    positives = [abs(x) for x in xs]

    checks = [
        ("sqrt", all(mathkit.sqrt(x) == math.sqrt(x) for x in positives[:1000])),
        ("sin", all(abs(mathkit.sin(x) - math.sin(x)) < 1e-9 for x in xs[:1000])),
        ("cos", all(abs(mathkit.cos(x) - math.cos(x)) < 1e-9 for x in xs[:1000])),
        ("relu", all(mathkit.relu(x) == max(0.0, x) for x in xs[:1000])),
        (
            "sigmoid",
            all(abs(mathkit.sigmoid(x) - py_sigmoid(x)) < 1e-12 for x in xs[:1000]),
        ),
    ]
    failed = [name for name, passed in checks if not passed]
    if failed:
        for name in failed:
            warning(f"{name} mismatch")
        return
    success("Sanity check passed")
    print()

    rows = [
        ("sqrt", _time_each(math.sqrt, positives), _time_each(mathkit.sqrt, positives)),
        ("sin", _time_each(math.sin, xs), _time_each(mathkit.sin, xs)),
        ("cos", _time_each(math.cos, xs), _time_each(mathkit.cos, xs)),
        ("tan", _time_each(math.tan, xs), _time_each(mathkit.tan, xs)),
        (
            "sin (deg)",
            _time_each(lambda x: math.sin(math.radians(x)), xs),
            _time_each(lambda x: mathkit.sin(x, degrees=True), xs),
        ),
        ("relu", _time_each(lambda x: max(0.0, x), xs), _time_each(mathkit.relu, xs)),
        ("sigmoid", _time_each(py_sigmoid, xs), _time_each(mathkit.sigmoid, xs)),
        (
            "double",
            _time_each(lambda k: k * 2, range(n_calls)),
            _time_each(mathkit.double, range(n_calls)),
        ),
    ]
    _print_rows(rows)


def benchmark_softmax(n: int, rigorous: bool = False):
    """Softmax over a float64 vector."""
    n_softmax = min(n, 1_000_000)
    section_header("Softmax", f"n = {format_number(n_softmax)} elements")

    rng = np.random.default_rng(42)
    a = rng.standard_normal(n_softmax)

    if not np.allclose(mathkit.softmax(a), np_softmax(a), rtol=1e-10):
        warning("softmax mismatch")
        return
    success("Sanity check passed")
    print()

    iterations = 50 if rigorous else 10
    rows = [
        (
            "softmax",
            _time_loop(lambda: np_softmax(a), iterations),
            _time_loop(lambda: mathkit.softmax(a), iterations),
        )
    ]
    _print_rows(rows)


def main():
    parser = argparse.ArgumentParser(description="mathkit benchmarks")
    parser.add_argument("-n", type=int, default=100_000, help="Input size")
    parser.add_argument("--rigorous", action="store_true", help="More iterations")
    args = parser.parse_args()

    banner(
        "mathkit Benchmark Suite",
        f"mathkit {mathkit.__version__} / NumPy {np.__version__}",
    )
    print()
    info_line("Input size", format_number(args.n))
    info_line("Mode", "rigorous" if args.rigorous else "quick")

    benchmark_integers(args.n, args.rigorous)
    benchmark_scalars(args.n, args.rigorous)
    benchmark_softmax(args.n, args.rigorous)

    done("Benchmark complete!")


if __name__ == "__main__":
    main()
