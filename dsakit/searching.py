"""Linear and binary search returning an index, or -1 when absent."""

from __future__ import annotations

from typing import Any, Sequence

NOT_FOUND = -1


def binary_search(values: Sequence[Any], target: Any) -> int:
    """Return an index of ``target`` in the sorted ``values``, or -1."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] < target:
            start = mid + 1
        elif values[mid] > target:
            end = mid - 1
        else:
            return mid
    return NOT_FOUND


def binary_search_recursive(values: Sequence[Any], target: Any) -> int:
    """Return an index of ``target`` in the sorted ``values``, or -1, by recursion."""

    def search(start: int, end: int) -> int:
        if start > end:
            return NOT_FOUND
        mid = start + (end - start) // 2
        if values[mid] < target:
            return search(mid + 1, end)
        if values[mid] > target:
            return search(start, mid - 1)
        return mid

    return search(0, len(values) - 1)


def linear_search(values: Sequence[Any], target: Any) -> int:
    """Return the index of the first element equal to ``target``, or -1."""
    return next(
        (index for index, value in enumerate(values) if value == target), NOT_FOUND
    )