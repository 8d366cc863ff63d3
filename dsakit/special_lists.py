"""Linked lists with extra pointers: random links and child levels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class RandomNode:
    """A list node that also points at an arbitrary node of the same list, or None."""

    val: Any
    next: Optional["RandomNode"] = None
    random: Optional["RandomNode"] = None


@dataclass(eq=False)
class MultilevelNode:
    """A doubly linked node that may own a child list one level below."""

    val: Any
    prev: Optional["MultilevelNode"] = None
    next: Optional["MultilevelNode"] = None
    child: Optional["MultilevelNode"] = None


def copy_random_list(head: Optional[RandomNode]) -> Optional[RandomNode]:
    """Deep-copy a list whose nodes carry random pointers."""
    if head is None:
        return None
    copies: dict[int, RandomNode] = {}
    node = head
    while node is not None:
        copies[id(node)] = RandomNode(node.val)
        node = node.next

    node = head
    while node is not None:
        copy = copies[id(node)]
        copy.next = copies[id(node.next)] if node.next is not None else None
        copy.random = copies[id(node.random)] if node.random is not None else None
        node = node.next
    return copies[id(head)]


def flatten(head: Optional[MultilevelNode]) -> Optional[MultilevelNode]:
    """Flatten a multilevel list in place, depth first; every child link is cleared."""
    pending: list[MultilevelNode] = []
    curr = head
    while curr is not None:
        if curr.child is not None:
            if curr.next is not None:
                pending.append(curr.next)
            curr.next = curr.child
            curr.child.prev = curr
            curr.child = None
        if curr.next is None and pending:
            resumed = pending.pop()
            curr.next = resumed
            resumed.prev = curr
        curr = curr.next
    return head