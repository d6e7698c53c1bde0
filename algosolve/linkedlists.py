"""Singly linked lists and the operations on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[ListNode]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node
            node = node.next

    def values(self) -> list[int]:
        """Values from this node to the end of the list."""
        return [node.val for node in self]


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; None when empty."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def is_palindrome_list(head: Optional[ListNode]) -> bool:
    """True if the list's values read the same forwards and backwards."""
    values = head.values() if head is not None else []
    return values == values[::-1]


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    prev: Optional[ListNode] = None
    current = head
    while current is not None:
        current.next, prev, current = prev, current, current.next
    return prev


def reverse_between(head: Optional[ListNode], left: int, right: int) -> Optional[ListNode]:
    """Reverse the nodes at 1-based positions left..right in place; return the head."""
    length = sum(1 for _ in head) if head is not None else 0
    if not 1 <= left <= right <= length:
        raise IndexError(f"cannot reverse positions {left}..{right} of a list of {length}")

    sentinel = ListNode(0, head)
    before = sentinel
    for _ in range(left - 1):
        before = before.next  # type: ignore[assignment]

    tail = before.next
    assert tail is not None
    for _ in range(right - left):
        moved = tail.next
        assert moved is not None
        tail.next = moved.next
        moved.next = before.next
        before.next = moved
    return sentinel.next