"""Singly linked lists and the classic pointer-walking operations on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return [] if head is None else list(head)


def delete_middle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Remove the node at index ``len // 2`` and return the new head."""
    if head is None or head.next is None:
        return None
    slow = head
    fast = head.next
    while fast.next is not None:
        fast = fast.next
        if fast.next is not None:
            slow = slow.next
            fast = fast.next
    slow.next = slow.next.next
    return head


def odd_even_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Relink the list so nodes at even indices come first, then odd ones."""
    if head is None or head.next is None or head.next.next is None:
        return head
    odd_start = head.next
    even = head
    odd = head.next
    while even.next is not None and odd.next is not None:
        even.next = odd.next
        odd.next = even.next.next
        even = even.next
        odd = odd.next
    even.next = odd_start
    return head


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    previous: Optional[ListNode] = None
    node = head
    while node is not None:
        node.next, previous, node = previous, node, node.next
    return previous


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Remove the ``n``-th node counted from the end (1-based)."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    fast = head
    for _ in range(n):
        if fast is None:
            raise ValueError("n is larger than the length of the list")
        fast = fast.next
    if fast is None:
        return head.next
    slow = head
    while fast.next is not None:
        fast = fast.next
        slow = slow.next
    slow.next = slow.next.next
    return head