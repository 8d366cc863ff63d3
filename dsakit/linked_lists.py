"""Singly linked list nodes and classic algorithms over them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list. Nodes compare by identity."""

    val: Any = 0
    next: Optional["ListNode"] = None


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def from_values(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: Optional[ListNode]) -> list:
    """Return the values of an acyclic linked list as a Python list."""
    return [node.val for node in _nodes(head)]


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether the list loops back on itself (Floyd's tortoise and hare)."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where the cycle begins, or None if the list has no cycle."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            break
    else:
        return None
    slow = head
    while slow is not fast:
        slow = slow.next
        fast = fast.next
    return slow


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    prev = None
    curr = head
    while curr is not None:
        following = curr.next
        curr.next = prev
        prev = curr
        curr = following
    return prev


def reverse_list_recursive(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place by recursion and return its new head."""
    if head is None or head.next is None:
        return head
    new_head = reverse_list_recursive(head.next)
    head.next.next = head
    head.next = None
    return new_head


def merge_two_lists(
    head1: Optional[ListNode], head2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list; ties take from ``head1`` first."""
    dummy = ListNode()
    tail = dummy
    while head1 is not None and head2 is not None:
        if head1.val <= head2.val:
            tail.next = head1
            head1 = head1.next
        else:
            tail.next = head2
            head2 = head2.next
        tail = tail.next
    tail.next = head1 if head1 is not None else head2
    return dummy.next


def _first_middle(head: ListNode) -> ListNode:
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
    return slow


def is_palindrome_list(head: Optional[ListNode]) -> bool:
    """Tell whether the values read the same both ways; the list is left unchanged."""
    if head is None or head.next is None:
        return True
    mid = _first_middle(head)
    mid.next = reverse_list(mid.next)
    try:
        left, right = head, mid.next
        while right is not None:
            if left.val != right.val:
                return False
            left = left.next
            right = right.next
        return True
    finally:
        mid.next = reverse_list(mid.next)


def swap_pairs(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap every two adjacent nodes in place and return the new head."""
    dummy = ListNode(next=head)
    prev = dummy
    while prev.next is not None and prev.next.next is not None:
        first = prev.next
        second = first.next
        first.next = second.next
        second.next = first
        prev.next = second
        prev = first
    return dummy.next


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse each full group of ``k`` nodes in place; a short tail stays as is."""
    if k < 1:
        raise ValueError(f"group size must be at least 1, got {k}")
    dummy = ListNode(next=head)
    group_prev = dummy
    while True:
        kth = group_prev
        for _ in range(k):
            kth = kth.next
            if kth is None:
                return dummy.next
        group_next = kth.next
        prev = group_next
        curr = group_prev.next
        while curr is not group_next:
            following = curr.next
            curr.next = prev
            prev = curr
            curr = following
        first = group_prev.next
        group_prev.next = kth
        group_prev = first


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop nodes equal to their predecessor, leaving one of each run."""
    curr = head
    while curr is not None:
        if curr.next is not None and curr.val == curr.next.val:
            curr.next = curr.next.next
        else:
            curr = curr.next
    return head


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node; for an even length, the second of the two middles."""
    if head is None or head.next is None:
        return head
    slow = head
    fast = head.next
    while fast is not None:
        fast = fast.next
        if fast is not None:
            fast = fast.next
        slow = slow.next
    return slow