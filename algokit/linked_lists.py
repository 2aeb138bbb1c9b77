"""Singly linked lists and operations that rearrange them."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import count
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """Node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = None


@dataclass(eq=False)
class RandomNode:
    """Linked-list node with an extra pointer to any node of the list."""

    val: int = 0
    next: Optional[RandomNode] = None
    random: Optional[RandomNode] = None


def _walk(head):
    node = head
    while node is not None:
        yield node
        node = node.next


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_values(head) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return [node.val for node in _walk(head)]


def copy_random_list(head: Optional[RandomNode]) -> Optional[RandomNode]:
    """Deep-copy a list whose nodes also carry a random pointer."""
    copies: dict[Optional[RandomNode], Optional[RandomNode]] = {None: None}
    for node in _walk(head):
        copies[node] = RandomNode(node.val)
    for node in _walk(head):
        clone = copies[node]
        clone.next = copies[node.next]
        clone.random = copies[node.random]
    return copies[head]


def merge_k_lists(lists: Iterable[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge sorted linked lists into one sorted list, reusing the nodes."""
    tie = count()
    heap = [(node.val, next(tie), node) for node in lists if node is not None]
    heapq.heapify(heap)
    dummy = ListNode(-1)
    tail = dummy
    while heap:
        _, _, node = heapq.heappop(heap)
        if node.next is not None:
            heapq.heappush(heap, (node.next.val, next(tie), node.next))
        tail.next = node
        tail = node
    tail.next = None
    return dummy.next


def _advance(node: Optional[ListNode], steps: int) -> Optional[ListNode]:
    for _ in range(steps):
        if node is None:
            return None
        node = node.next
    return node


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse the list in consecutive groups of ``k`` nodes.

    A trailing group shorter than ``k`` keeps its order.
    """
    if k <= 1:
        return head
    dummy = ListNode(0, head)
    group_prev = dummy
    while True:
        kth = _advance(group_prev, k)
        if kth is None:
            return dummy.next
        group_next = kth.next
        first = group_prev.next
        prev, current = group_next, first
        while current is not group_next:
            following = current.next
            current.next = prev
            prev = current
            current = following
        group_prev.next = kth
        group_prev = first


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list to the right by ``k`` places."""
    if k < 0:
        raise ValueError("k must not be negative")
    if head is None or k == 0:
        return head
    nodes: Iterator[ListNode] = _walk(head)
    length = 0
    tail = head
    for tail in nodes:
        length += 1
    k %= length
    if k == 0:
        return head
    new_tail = _advance(head, length - k - 1)
    new_head = new_tail.next
    new_tail.next = None
    tail.next = head
    return new_head