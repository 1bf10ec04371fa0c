"""Singly linked lists and the classic pointer algorithms that work on them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list. Nodes compare by identity."""

    val: int = 0
    next: Optional[ListNode] = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Optional[ListNode]:
        """Build a list holding ``values`` in order; an empty input gives ``None``."""
        head: Optional[ListNode] = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def values(self) -> list[int]:
        """Return the values from this node to the end of the list.

        The list must not contain a cycle.
        """
        return [node.val for node in _walk(self)]

    def __repr__(self) -> str:
        return f"ListNode(val={self.val!r})"


def _walk(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether following ``next`` from ``head`` ever loops back."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
        if fast is slow:
            return True
    return False


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where the cycle begins, or ``None`` if there is none."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
        if slow is fast:
            break
    else:
        return None
    entry = head
    while entry is not slow:
        entry = entry.next
        slow = slow.next
    return entry


def intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or ``None``."""
    a, b = head_a, head_b
    while a is not b:
        a = a.next if a is not None else head_b
        b = b.next if b is not None else head_a
    return a


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the ``n``-th node counted from the end and return the new head.

    Raises ``ValueError`` unless ``1 <= n <= len(list)``.
    """
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    dummy = ListNode(0, head)
    fast: Optional[ListNode] = dummy
    for _ in range(n + 1):
        if fast is None:
            raise ValueError(f"list is shorter than {n} nodes")
        fast = fast.next
    slow = dummy
    while fast is not None:
        fast = fast.next
        slow = slow.next
    slow.next = slow.next.next
    return dummy.next


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    prev: Optional[ListNode] = None
    curr = head
    while curr is not None:
        curr.next, prev, curr = prev, curr, curr.next
    return prev


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list.

    On equal values the node from ``list2`` comes first.
    """
    dummy = ListNode(-1)
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def delete_middle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Unlink the node at index ``len // 2``; a list of one node becomes empty."""
    if head is None or head.next is None:
        return None
    prev = head
    slow = head.next
    fast = head.next.next
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        prev, slow = slow, slow.next
    prev.next = slow.next
    return head


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Tell whether the list reads the same in both directions."""
    values = [node.val for node in _walk(head)]
    return values == values[::-1]


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list without access to the head.

    The node takes the value and link of its successor, so it must not be
    the last node; ``ValueError`` is raised if it is.
    """
    successor = node.next
    if successor is None:
        raise ValueError("cannot delete the last node of a list")
    node.val = successor.val
    node.next = successor.next


def odd_even_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Regroup the list so nodes at even indices precede those at odd ones."""
    if head is None or head.next is None:
        return head
    odd = head
    even = even_head = head.next
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list ``k`` places to the right and return the new head."""
    if head is None or k == 0:
        return head
    tail = head
    length = 1
    while tail.next is not None:
        tail = tail.next
        length += 1
    k %= length
    if k == 0:
        return head
    tail.next = head
    new_tail = head
    for _ in range(length - k - 1):
        new_tail = new_tail.next
    new_head = new_tail.next
    new_tail.next = None
    return new_head


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node; for an even length, the second of the two."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow