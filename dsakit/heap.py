"""A binary max-heap and heap sort over Python lists."""

from __future__ import annotations

from typing import Any, Iterator, MutableSequence


def heapify(values: MutableSequence[Any], size: int, index: int) -> None:
    """Sift ``values[index]`` down within the first ``size`` items to restore the max-heap."""
    while True:
        largest = index
        left = 2 * index + 1
        right = left + 1
        if left < size and values[largest] < values[left]:
            largest = left
        if right < size and values[largest] < values[right]:
            largest = right
        if largest == index:
            return
        values[largest], values[index] = values[index], values[largest]
        index = largest


def build_max_heap(values: MutableSequence[Any]) -> None:
    """Rearrange ``values`` in place into a max-heap."""
    size = len(values)
    for index in range(size // 2 - 1, -1, -1):
        heapify(values, size, index)


def heap_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place in ascending order."""
    build_max_heap(values)
    for end in range(len(values) - 1, 0, -1):
        values[0], values[end] = values[end], values[0]
        heapify(values, end, 0)


class MaxHeap:
    """A max-heap kept in a list; iteration yields the array order."""

    def __init__(self) -> None:
        self._items: list = []

    def insert(self, value: Any) -> None:
        """Add ``value`` and sift it up to its place."""
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] < items[index]:
                items[parent], items[index] = items[index], items[parent]
                index = parent
            else:
                return

    def delete_root(self) -> Any:
        """Remove and return the largest value."""
        items = self._items
        if not items:
            raise IndexError("nothing to delete")
        root = items[0]
        last = items.pop()
        if items:
            items[0] = last
            heapify(items, len(items), 0)
        return root

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)