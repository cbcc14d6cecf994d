"""Singly linked lists of integers and the classic operations on them."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from itertools import zip_longest
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """One node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({list(self)!r})"


def from_iterable(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_list(head: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list as a Python list."""
    return list(head) if head is not None else []


def merge_two_lists(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Merge two sorted lists into a new sorted list."""
    return from_iterable(heapq.merge(to_list(l1), to_list(l2)))


def merge_k_lists(lists: Iterable[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge any number of sorted lists into one sorted list."""
    return from_iterable(heapq.merge(*(to_list(head) for head in lists)))


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored as digit lists, least significant digit first."""
    digits = []
    carry = 0
    for a, b in zip_longest(to_list(l1), to_list(l2), fillvalue=0):
        carry, digit = divmod(a + b + carry, 10)
        digits.append(digit)
    if carry:
        digits.append(carry)
    return from_iterable(digits)


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the n-th node from the end (1-based) and return the new head.

    Raises ValueError when ``n`` is not between 1 and the list length.
    """
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    fast = head
    for _ in range(n):
        if fast is None:
            raise ValueError(f"list is shorter than {n}")
        fast = fast.next
    if fast is None:
        assert head is not None
        return head.next

    slow = head
    while fast.next is not None:
        fast = fast.next
        slow = slow.next
    slow.next = slow.next.next
    return head