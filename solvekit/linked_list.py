"""Singly linked lists of integers and operations on them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; ``None`` when empty."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list as a Python list."""
    return [] if head is None else list(head)


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers stored as little-endian digit lists."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    first, second = l1, l2
    while first is not None or second is not None or carry:
        total = carry
        if first is not None:
            total += first.val
            first = first.next
        if second is not None:
            total += second.val
            second = second.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def remove_values(nums: Iterable[int], head: Optional[ListNode]) -> Optional[ListNode]:
    """Return a new list without the nodes whose value is in ``nums``."""
    banned = set(nums)
    return from_values(value for value in to_values(head) if value not in banned)