"""Comparison sorts that rearrange a list in place."""

from __future__ import annotations

from typing import Any, MutableSequence


def bubble_sort(values: MutableSequence[Any]) -> None:
    """Sort in place by repeated adjacent swaps, stopping once a pass swaps nothing."""
    n = len(values)
    for done in range(n - 1):
        swapped = False
        for j in range(n - done - 1):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                swapped = True
        if not swapped:
            return


def insertion_sort(values: MutableSequence[Any]) -> None:
    """Sort in place by inserting each element into the sorted prefix."""
    for i in range(1, len(values)):
        current = values[i]
        j = i - 1
        while j >= 0 and values[j] > current:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = current


def selection_sort(values: MutableSequence[Any]) -> None:
    """Sort in place by moving the smallest remaining element to the front."""
    n = len(values)
    for i in range(n - 1):
        smallest = min(range(i, n), key=values.__getitem__)
        if smallest != i:
            values[i], values[smallest] = values[smallest], values[i]


def merge(values: MutableSequence[Any], start: int, mid: int, end: int) -> None:
    """Merge the sorted runs ``values[start..mid]`` and ``values[mid+1..end]`` (inclusive)."""
    left = values[start:mid + 1]
    right = values[mid + 1:end + 1]
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    values[start:end + 1] = merged


def merge_sort(values: MutableSequence[Any]) -> None:
    """Sort in place by splitting in halves and merging them back."""

    def sort(start: int, end: int) -> None:
        if start < end:
            mid = start + (end - start) // 2
            sort(start, mid)
            sort(mid + 1, end)
            merge(values, start, mid, end)

    sort(0, len(values) - 1)


def partition(values: MutableSequence[Any], start: int, end: int) -> int:
    """Partition ``values[start..end]`` around its last element; return the pivot's index."""
    pivot = values[end]
    boundary = start - 1
    for j in range(start, end):
        if values[j] <= pivot:
            boundary += 1
            values[boundary], values[j] = values[j], values[boundary]
    boundary += 1
    values[end], values[boundary] = values[boundary], values[end]
    return boundary


def quick_sort(values: MutableSequence[Any]) -> None:
    """Sort in place by partitioning around the last element of each range."""
    pending = [(0, len(values) - 1)]
    while pending:
        start, end = pending.pop()
        if start < end:
            pivot = partition(values, start, end)
            pending.append((pivot + 1, end))
            pending.append((start, pivot - 1))