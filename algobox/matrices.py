"""Matrix addition, multiplication and display."""

from __future__ import annotations

from typing import Sequence

Matrix = Sequence[Sequence[int]]


def _shape(matrix: Matrix) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return rows, cols


def add_matrices(a: Matrix, b: Matrix) -> list[list[int]]:
    """Return the element-wise sum of two matrices of the same shape."""
    if _shape(a) != _shape(b):
        raise ValueError("cannot add matrices of different shapes")
    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def multiply_matrices(a: Matrix, b: Matrix) -> list[list[int]]:
    """Return the matrix product ``a x b``."""
    _, cols_a = _shape(a)
    rows_b, _ = _shape(b)
    if cols_a != rows_b:
        raise ValueError(
            f"cannot multiply matrices: {cols_a} columns against {rows_b} rows"
        )
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


def format_matrix(matrix: Matrix) -> str:
    """Render the matrix one row per line, values separated by spaces."""
    return "\n".join(" ".join(str(value) for value in row) for row in matrix)