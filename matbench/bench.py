"""Timing suite for matrix-vector multiplication across element types."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass
from typing import TextIO

from matbench.matrix import ElementType, SquareMatrix, Vector

DEFAULT_SIZES = (4, 8, 16)


@dataclass(frozen=True)
class SuiteTimings:
    """Processor-time seconds spent on each step of one suite run."""

    size: int
    dtype: ElementType
    create_matrix: float
    create_vector: float
    matrix_vector: float
    vector_matrix: float


def _elapsed(start: float) -> float:
    return time.process_time() - start


def run_suite(
    size: int,
    dtype: ElementType,
    out: TextIO,
    short_output: bool = False,
    print_matrix: bool = True,
) -> SuiteTimings:
    """Time creation and both multiplications for one size and type, reporting to out."""
    dtype = ElementType(dtype)

    def show(obj) -> None:
        if print_matrix and not short_output:
            out.write(obj.format() + "\n")

    if short_output:
        out.write(f"{size} ")
    else:
        out.write(f"\n=== Замір швидкості для типу {dtype.value} ===\n\n")

    start = time.process_time()
    square = SquareMatrix(size, dtype)
    square.fill()
    create_matrix = _elapsed(start)
    if short_output:
        out.write(f"{create_matrix:f} ")
    else:
        out.write(
            f"1. створення квадратної матриці розміром {size} на {size}"
            f" - {create_matrix:f}с:\n"
        )
    show(square)

    start = time.process_time()
    vector = Vector(size, dtype)
    vector.fill()
    create_vector = _elapsed(start)
    if short_output:
        out.write(f"{create_vector:f} ")
    else:
        out.write(f"2. створення вектору розміром {size} - {create_vector:f}с\n")
    show(vector)

    start = time.process_time()
    result = square @ vector
    matrix_vector = _elapsed(start)
    if short_output:
        out.write(f"{matrix_vector:f} ")
    else:
        out.write(
            f"3. перемноження квадратної матриці на вектор - {matrix_vector:f}с\n"
        )
    show(result)

    start = time.process_time()
    result = vector @ square
    vector_matrix = _elapsed(start)
    if short_output:
        tail = " \n" if dtype is ElementType.DOUBLE else "\n"
        out.write(f"{vector_matrix:f}{tail}")
    else:
        out.write(
            f"4. перемноження вектора на квадратну матрицю - {vector_matrix:f}с\n"
        )
    show(result)

    return SuiteTimings(
        size=size,
        dtype=dtype,
        create_matrix=create_matrix,
        create_vector=create_vector,
        matrix_vector=matrix_vector,
        vector_matrix=vector_matrix,
    )


def _parse_args(argv):
    parser = argparse.ArgumentParser(
        prog="matbench",
        description="Time matrix-vector multiplication for int, float and double.",
    )
    parser.add_argument(
        "sizes",
        nargs="*",
        type=int,
        default=list(DEFAULT_SIZES),
        help="matrix sizes to run (default: 4 8 16)",
    )
    parser.add_argument(
        "--short", action="store_true", help="print one line of timings per run"
    )
    parser.add_argument(
        "--no-print", action="store_true", help="do not print the matrices"
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Run the suite for every requested size and all element types."""
    args = _parse_args(argv)
    for size in args.sizes:
        for dtype in ElementType:
            run_suite(
                size,
                dtype,
                sys.stdout,
                short_output=args.short,
                print_matrix=not args.no_print,
            )
    return 0


if __name__ == "__main__":
    sys.exit(main())