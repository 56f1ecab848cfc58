"""Dense two-dimensional matrices: construction, arithmetic and Strassen multiplication."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence

Matrix = list[list[float]]


class MatrixError(ValueError):
    """Raised when a matrix is empty, ragged or has the wrong dimensions."""


def _shape(matrix: Sequence[Sequence[float]]) -> tuple[int, int]:
    if not matrix or not matrix[0]:
        raise MatrixError("matrix is empty")
    cols = len(matrix[0])
    if any(len(row) != cols for row in matrix):
        raise MatrixError("matrix rows have different lengths")
    return len(matrix), cols


def _same_shape(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> tuple[int, int]:
    shape = _shape(a)
    if _shape(b) != shape:
        raise MatrixError("matrices must have the same dimensions")
    return shape


def new_matrix(rows: int, cols: int) -> Matrix:
    """Return a rows x cols matrix filled with zeros."""
    if rows < 0 or cols < 0:
        raise MatrixError("matrix dimensions cannot be negative")
    return [[0.0] * cols for _ in range(rows)]


def format_matrix(matrix: Sequence[Sequence[float]]) -> str:
    """Render a matrix one row per line, each value followed by a space."""
    if not matrix or not matrix[0]:
        raise MatrixError("cannot format an empty matrix")
    return "".join("".join(f"{value:g} " for value in row) + "\n" for row in matrix)


def fill_random(matrix: Matrix) -> Matrix:
    """Fill a matrix in place with values in [-10, 10], seeding each row deterministically."""
    for index, row in enumerate(matrix):
        rng = random.Random(40 + index * 3)
        row[:] = [rng.uniform(-10.0, 10.0) for _ in row]
    return matrix


def multiply(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Multiply two matrices with the schoolbook O(n^3) algorithm."""
    _, a_cols = _shape(a)
    b_rows, _ = _shape(b)
    if a_cols != b_rows:
        raise MatrixError("cannot multiply: inner dimensions differ")
    columns = list(zip(*b))
    return [[sum((x * y for x, y in zip(row, col)), 0.0) for col in columns] for row in a]


def vertical_stack(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Place b below a."""
    _, a_cols = _shape(a)
    _, b_cols = _shape(b)
    if a_cols != b_cols:
        raise MatrixError("cannot stack vertically: column counts differ")
    return [list(row) for row in a] + [list(row) for row in b]


def horizontal_stack(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Place b to the right of a."""
    a_rows, _ = _shape(a)
    b_rows, _ = _shape(b)
    if a_rows != b_rows:
        raise MatrixError("cannot stack horizontally: row counts differ")
    return [list(left) + list(right) for left, right in zip(a, b)]


def add(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Element-wise sum of two matrices of equal shape."""
    _same_shape(a, b)
    return [[x + y for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]


def subtract(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Element-wise difference of two matrices of equal shape."""
    _same_shape(a, b)
    return [[x - y for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]


def split(matrix: Sequence[Sequence[float]]) -> tuple[Matrix, Matrix, Matrix, Matrix]:
    """Split a square matrix of even size into its four quadrants.

    The quadrants are returned as (top-left, top-right, bottom-left, bottom-right).
    """
    rows, cols = _shape(matrix)
    if rows != cols:
        raise MatrixError("only square matrices can be split")
    if rows % 2:
        raise MatrixError("only matrices of even size can be split")
    half = rows // 2
    top, bottom = matrix[:half], matrix[half:]
    return (
        [list(row[:half]) for row in top],
        [list(row[half:]) for row in top],
        [list(row[:half]) for row in bottom],
        [list(row[half:]) for row in bottom],
    )


def strassen(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Multiply two square matrices whose size is a power of two using Strassen's method."""
    size, cols = _same_shape(a, b)
    if size != cols:
        raise MatrixError("Strassen multiplication needs square matrices")
    if size <= 2:
        return multiply(a, b)
    if size & (size - 1):
        raise MatrixError("Strassen multiplication needs a size that is a power of two")

    a11, a12, a21, a22 = split(a)
    b11, b12, b21, b22 = split(b)

    m1 = strassen(add(a11, a22), add(b11, b22))
    m2 = strassen(add(a21, a22), b11)
    m3 = strassen(a11, subtract(b12, b22))
    m4 = strassen(a22, subtract(b21, b11))
    m5 = strassen(add(a11, a12), b22)
    m6 = strassen(subtract(a21, a11), add(b11, b12))
    m7 = strassen(subtract(a12, a22), add(b21, b22))

    c11 = add(subtract(add(m1, m4), m5), m7)
    c12 = add(m3, m5)
    c21 = add(m2, m4)
    c22 = add(subtract(add(m1, m3), m2), m6)

    return vertical_stack(horizontal_stack(c11, c12), horizontal_stack(c21, c22))


def main(argv: Sequence[str] | None = None) -> int:
    """Multiply two random 4x4 matrices both ways and print everything."""
    parser = argparse.ArgumentParser(
        description="Multiply two random 4x4 matrices with Strassen's method and the schoolbook method."
    )
    parser.parse_args(argv)

    size = 4
    a = fill_random(new_matrix(size, size))
    b = fill_random(new_matrix(size, size))

    out = sys.stdout
    out.write(format_matrix(a))
    out.write("\n")
    out.write(format_matrix(b))
    out.write("\n")
    out.write(format_matrix(strassen(a, b)))
    out.write("\n")
    out.write(format_matrix(multiply(a, b)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())