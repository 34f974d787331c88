"""Singly linked lists and in-place list manipulations."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import chain, islice, pairwise
from typing import Iterable, Iterator, List, Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({list(self)!r})"


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def _link(nodes: Iterable[ListNode]) -> Optional[ListNode]:
    """Chain ``nodes`` together in order and return the first one."""
    ordered = list(nodes)
    if not ordered:
        return None
    for node, following in pairwise(ordered):
        node.next = following
    ordered[-1].next = None
    return ordered[0]


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values``; None if there are none."""
    return _link(ListNode(value) for value in values)


def list_values(head: Optional[ListNode]) -> List[int]:
    """Return the values of the list starting at ``head``."""
    return list(head) if head is not None else []


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    previous: Optional[ListNode] = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def reorder_list(head: Optional[ListNode]) -> None:
    """Reorder L0, L1, ..., Ln in place into L0, Ln, L1, Ln-1, ..."""
    nodes = list(_nodes(head))
    interleaved = chain.from_iterable(zip(nodes, reversed(nodes)))
    _link(islice(interleaved, len(nodes)))


def delete_middle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Remove the node at index ``len // 2`` and return the head."""
    if head is None or head.next is None:
        return None
    slow = head
    fast = head.next.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    slow.next = slow.next.next
    return head


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Tell whether the list reads the same forwards and backwards."""
    values = list_values(head)
    return values == values[::-1]


def swap_pairs(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap every two adjacent nodes in place and return the new head."""
    dummy = ListNode(0, head)
    previous = dummy
    while previous.next is not None and previous.next.next is not None:
        first = previous.next
        second = first.next
        first.next = second.next
        second.next = first
        previous.next = second
        previous = first
    return dummy.next


def reverse_between(
    head: Optional[ListNode], left: int, right: int
) -> Optional[ListNode]:
    """Reverse the nodes from position ``left`` to ``right`` (1-based, inclusive)."""
    length = sum(1 for _ in _nodes(head))
    if not 1 <= left <= right <= length:
        raise ValueError(
            f"positions {left}..{right} out of range for a list of length {length}"
        )
    dummy = ListNode(0, head)
    before = dummy
    for _ in range(left - 1):
        before = before.next
    tail = before.next
    for _ in range(right - left):
        moved = tail.next
        tail.next = moved.next
        moved.next = before.next
        before.next = moved
    return dummy.next