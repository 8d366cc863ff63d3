"""Elementary array and matrix computations."""

from __future__ import annotations

from typing import Any, MutableSequence, Sequence


def _require_items(values: Sequence[Any], what: str) -> None:
    if not values:
        raise ValueError(f"{what} of an empty sequence is undefined")


def _require_square(matrix: Sequence[Sequence[int]]) -> int:
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    return n


def array_sum(values: Sequence[int]) -> int:
    """Add up every element."""
    return sum(values)


def diagonal_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Sum both diagonals of a square matrix, counting a shared centre once."""
    n = _require_square(matrix)
    total = 0
    for i, row in enumerate(matrix):
        total += row[i]
        if i != n - 1 - i:
            total += row[n - 1 - i]
    return total


def diagonal_sum_naive(matrix: Sequence[Sequence[int]]) -> int:
    """Sum both diagonals by visiting every cell of the square matrix."""
    n = _require_square(matrix)
    return sum(
        value
        for i, row in enumerate(matrix)
        for j, value in enumerate(row)
        if j == i or j == n - 1 - i
    )


def min_value(values: Sequence[int]) -> int:
    """Return the smallest element."""
    _require_items(values, "minimum")
    smallest = values[0]
    for value in values:
        if value < smallest:
            smallest = value
    return smallest


def max_value(values: Sequence[int]) -> int:
    """Return the largest element."""
    _require_items(values, "maximum")
    largest = values[0]
    for value in values:
        if value > largest:
            largest = value
    return largest


def max_row_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Return the largest sum of any row."""
    _require_items(matrix, "row sum")
    return max(sum(row) for row in matrix)


def max_column_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Return the largest sum of any column of a rectangular matrix."""
    _require_items(matrix, "column sum")
    width = len(matrix[0])
    if width == 0 or any(len(row) != width for row in matrix):
        raise ValueError("matrix must be rectangular and non-empty")
    return max(sum(column) for column in zip(*matrix))


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty run of consecutive elements."""
    _require_items(values, "subarray sum")
    best = values[0]
    current = 0
    for value in values:
        current += value
        best = max(best, current)
        if current < 0:
            current = 0
    return best


def swap_alternate(values: MutableSequence[Any]) -> None:
    """Swap each element at an even index with its right neighbour, in place."""
    for i in range(0, len(values) - 1, 2):
        values[i], values[i + 1] = values[i + 1], values[i]


def counting_sequence(n: int) -> list[int]:
    """Return ``n`` down to 1 followed by 1 up to ``n``."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    return [*range(n, 0, -1), *range(1, n + 1)]