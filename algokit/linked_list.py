"""Singly linked lists and algorithms over them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from itertools import chain


@dataclass
class ListNode:
    """A node of a singly linked list holding an integer value."""

    val: int = 0
    next: ListNode | None = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> ListNode | None:
        """Build a list from values, returning its head or ``None`` when empty."""
        head: ListNode | None = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def to_list(self) -> list[int]:
        """Return the values from this node to the end of the list."""
        values = []
        node: ListNode | None = self
        while node is not None:
            values.append(node.val)
            node = node.next
        return values


def delete_middle(head: ListNode | None) -> ListNode | None:
    """Unlink the middle node (index ``n // 2``) and return the head."""
    if head is None or head.next is None:
        return None
    prev, slow, fast = head, head.next, head.next.next
    while fast is not None and fast.next is not None:
        prev, slow, fast = slow, slow.next, fast.next.next
    prev.next = slow.next
    return head


def pair_sum(head: ListNode | None) -> int:
    """Return the largest sum of a node and its twin, or 0 if none is larger."""
    values = head.to_list() if head is not None else []
    half = (len(values) + 1) // 2
    return max(chain([0], (a + b for a, b in zip(values[:half], reversed(values)))))


def odd_even_list(head: ListNode | None) -> ListNode | None:
    """Relink the list so nodes at odd positions precede those at even positions."""
    if head is None or head.next is None:
        return head
    odd, even = head, head.next
    even_head = even
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return the new head."""
    reversed_head: ListNode | None = None
    while head is not None:
        head.next, reversed_head, head = reversed_head, head, head.next
    return reversed_head