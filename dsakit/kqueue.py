"""Several FIFO queues sharing one fixed-size array."""

from __future__ import annotations

from typing import Any, Optional


class KQueues:
    """``count`` queues, numbered from 1, sharing ``capacity`` slots."""

    def __init__(self, capacity: int, count: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        if count < 1:
            raise ValueError(f"count must be at least 1, got {count}")
        self._front: list[Optional[int]] = [None] * count
        self._rear: list[Optional[int]] = [None] * count
        self._next: list[Optional[int]] = [*range(1, capacity), None]
        self._items: list[Any] = [None] * capacity
        self._free: Optional[int] = 0

    def _queue_index(self, queue_number: int) -> int:
        if not 1 <= queue_number <= len(self._front):
            raise ValueError(f"no queue numbered {queue_number}")
        return queue_number - 1

    def enqueue(self, value: Any, queue_number: int) -> None:
        """Append ``value`` to queue ``queue_number``."""
        queue = self._queue_index(queue_number)
        if self._free is None:
            raise OverflowError("no empty space is available")
        index = self._free
        self._free = self._next[index]
        if self._front[queue] is None:
            self._front[queue] = index
        else:
            self._next[self._rear[queue]] = index
        self._next[index] = None
        self._rear[queue] = index
        self._items[index] = value

    def dequeue(self, queue_number: int) -> Any:
        """Remove and return the oldest value of queue ``queue_number``."""
        queue = self._queue_index(queue_number)
        index = self._front[queue]
        if index is None:
            raise IndexError("underflow")
        self._front[queue] = self._next[index]
        self._next[index] = self._free
        self._free = index
        value = self._items[index]
        self._items[index] = None
        return value