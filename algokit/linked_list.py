"""Singly linked lists and the classic pointer algorithms on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False, repr=False)
class ListNode:
    """One node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def _walk(head: ListNode | None) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def build_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` and return its head."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_values(head: ListNode | None) -> list[int]:
    """Return the values of an acyclic list in order."""
    return [node.val for node in _walk(head)]


def reverse_k_group(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse the list in groups of ``k`` nodes; a short final group stays as is."""
    if k < 1:
        raise ValueError("group size must be at least 1")
    dummy = ListNode(0, head)
    group_prev = dummy
    while True:
        kth = group_prev
        for _ in range(k):
            kth = kth.next
            if kth is None:
                return dummy.next
        group_next = kth.next
        first = group_prev.next
        prev, curr = group_next, first
        while curr is not group_next:
            following = curr.next
            curr.next = prev
            prev = curr
            curr = following
        group_prev.next = kth
        group_prev = first


def has_cycle(head: ListNode | None) -> bool:
    """Tell whether following ``next`` from ``head`` ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def detect_cycle(head: ListNode | None) -> ListNode | None:
    """Return the node where the cycle begins, or None if there is none."""
    slow = fast = head
    while True:
        if fast is None or fast.next is None:
            return None
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            break
    slow = head
    while slow is not fast:
        slow = slow.next
        fast = fast.next
    return slow


def get_intersection_node(
    head_a: ListNode | None, head_b: ListNode | None
) -> ListNode | None:
    """Return the first node shared by both lists, or None."""
    len_a = sum(1 for _ in _walk(head_a))
    len_b = sum(1 for _ in _walk(head_b))
    node_a, node_b = head_a, head_b
    for _ in range(len_a - len_b):
        node_a = node_a.next
    for _ in range(len_b - len_a):
        node_b = node_b.next
    while node_a is not None and node_b is not None:
        if node_a is node_b:
            return node_a
        node_a = node_a.next
        node_b = node_b.next
    return None


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return the new head."""
    prev = None
    curr = head
    while curr is not None:
        following = curr.next
        curr.next = prev
        prev = curr
        curr = following
    return prev


def delete_node(node: ListNode) -> None:
    """Remove ``node``'s value from its list, given only that node.

    Values after it shift one place forward and the last node is dropped.
    """
    if node.next is None:
        raise ValueError("the tail node cannot be deleted this way")
    while node.next.next is not None:
        node.val = node.next.val
        node = node.next
    node.val = node.next.val
    node.next = None


def middle_node(head: ListNode | None) -> ListNode | None:
    """Return the middle node; for an even length, the second of the two."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow