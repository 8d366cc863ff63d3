"""Linked lists and stacks built from plain nodes."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class _SinglyNode:
    value: Any
    next: Optional["_SinglyNode"] = None


@dataclass(eq=False)
class _DoublyNode:
    value: Any
    prev: Optional["_DoublyNode"] = None
    next: Optional["_DoublyNode"] = None


class SinglyLinkedList:
    """A singly linked list that keeps both a head and a tail pointer."""

    def __init__(self) -> None:
        self._head: Optional[_SinglyNode] = None
        self._tail: Optional[_SinglyNode] = None

    def push_front(self, value: Any) -> None:
        """Add ``value`` before the first element."""
        node = _SinglyNode(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node

    def push_back(self, value: Any) -> None:
        """Add ``value`` after the last element."""
        node = _SinglyNode(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        if self._head is None:
            raise IndexError("linked-list is empty")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        return node.value

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        if self._head is None:
            raise IndexError("linked-list is empty")
        tail = self._tail
        if self._head is tail:
            self._head = self._tail = None
            return tail.value
        prev = self._head
        while prev.next is not tail:
            prev = prev.next
        prev.next = None
        self._tail = prev
        return tail.value

    def insert(self, value: Any, position: int) -> None:
        """Insert ``value`` so that it ends up at index ``position``."""
        if position < 0:
            raise IndexError(f"invalid position {position}")
        if position == 0:
            self.push_front(value)
            return
        prev = self._head
        for _ in range(position - 1):
            if prev is None:
                break
            prev = prev.next
        if prev is None:
            raise IndexError(f"invalid position {position}")
        node = _SinglyNode(value, prev.next)
        prev.next = node
        if prev is self._tail:
            self._tail = node

    def search(self, key: Any) -> int:
        """Return the index of the first element equal to ``key``, or -1."""
        for index, value in enumerate(self):
            if value == key:
                return index
        return -1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __str__(self) -> str:
        return "".join(f"{value}-> " for value in self) + "NULL"


class DoublyLinkedList:
    """A doubly linked list with head and tail pointers."""

    def __init__(self) -> None:
        self._head: Optional[_DoublyNode] = None
        self._tail: Optional[_DoublyNode] = None

    def push_front(self, value: Any) -> None:
        """Add ``value`` before the first element."""
        node = _DoublyNode(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node

    def push_back(self, value: Any) -> None:
        """Add ``value`` after the last element."""
        node = _DoublyNode(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        if self._head is None:
            raise IndexError("linked list is empty")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        node.next = None
        return node.value

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        if self._tail is None:
            raise IndexError("linked list is empty")
        node = self._tail
        self._tail = node.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        node.prev = None
        return node.value

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __str__(self) -> str:
        return "".join(f"{value} <--> " for value in self) + "NULL"


class CircularLinkedList:
    """A singly linked list whose tail points back at its head."""

    def __init__(self) -> None:
        self._head: Optional[_SinglyNode] = None
        self._tail: Optional[_SinglyNode] = None

    def insert_at_head(self, value: Any) -> None:
        """Add ``value`` as the new head."""
        node = _SinglyNode(value)
        if self._head is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head = node
        self._tail.next = self._head

    def insert_at_tail(self, value: Any) -> None:
        """Add ``value`` as the new tail."""
        node = _SinglyNode(value)
        if self._head is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._tail.next = self._head

    def delete_at_head(self) -> None:
        """Remove the head; an empty list is left as it is."""
        if self._head is None:
            return
        if self._head is self._tail:
            self._head = self._tail = None
            return
        old = self._head
        self._head = old.next
        self._tail.next = self._head
        old.next = None

    def delete_at_tail(self) -> None:
        """Remove the tail; an empty list is left as it is."""
        if self._head is None:
            return
        if self._head is self._tail:
            self._head = self._tail = None
            return
        old = self._tail
        prev = self._head
        while prev.next is not old:
            prev = prev.next
        self._tail = prev
        self._tail.next = self._head
        old.next = None

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        if node is None:
            return
        while True:
            yield node.value
            node = node.next
            if node is self._head:
                return

    def __str__(self) -> str:
        if self._head is None:
            return ""
        return "".join(f"{value} -> " for value in self) + "NULL"


class Stack:
    """A last-in first-out stack backed by a Python list."""

    def __init__(self) -> None:
        self._items: list = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


class LinkedStack:
    """A last-in first-out stack whose top is the front of a linked sequence."""

    def __init__(self) -> None:
        self._items: deque = deque()

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        self._items.appendleft(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.popleft()

    def top(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)