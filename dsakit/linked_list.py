"""Singly linked list built from ``Node`` objects and free functions on a head.

Every function that can change the front of the list returns the new head.
Functions that walk the whole list (``length``, ``to_list``, ``display``)
do not terminate on a list that contains a cycle.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One list cell; nodes compare by identity."""

    data: Any
    next: Node | None = None


def _nodes(head: Node | None) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


def _node_at(head: Node | None, pos: int) -> Node:
    """Node at 1-based position ``pos``."""
    for index, node in enumerate(_nodes(head), start=1):
        if index == pos:
            return node
    raise ValueError(f"position {pos} is outside the list")


def from_values(values: Iterable[Any]) -> Node | None:
    """Build a list holding ``values`` in order and return its head."""
    head: Node | None = None
    tail: Node | None = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_list(head: Node | None) -> list:
    """Values of the list from head to tail."""
    return [node.data for node in _nodes(head)]


def length(head: Node | None) -> int:
    """Number of nodes in the list."""
    return sum(1 for _ in _nodes(head))


def insert_at_tail(head: Node | None, value: Any) -> Node:
    """Append ``value`` and return the head."""
    node = Node(value)
    if head is None:
        return node
    tail = head
    while tail.next is not None:
        tail = tail.next
    tail.next = node
    return head


def insert_at_head(head: Node | None, value: Any) -> Node:
    """Prepend ``value`` and return the new head."""
    return Node(value, head)


def delete_head(head: Node | None) -> Node | None:
    """Drop the first node and return the new head."""
    if head is None:
        raise ValueError("cannot delete from an empty list")
    return head.next


def search(head: Node | None, key: Any) -> bool:
    """Whether some node holds ``key``."""
    return any(node.data == key for node in _nodes(head))


def delete(head: Node | None, value: Any) -> Node | None:
    """Remove the first node holding ``value`` and return the head."""
    if head is None:
        raise ValueError(f"{value!r} is not in the list")
    if head.data == value:
        return head.next
    for node in _nodes(head):
        if node.next is not None and node.next.data == value:
            node.next = node.next.next
            return head
    raise ValueError(f"{value!r} is not in the list")


def reverse(head: Node | None) -> Node | None:
    """Reverse the list in place and return the new head."""
    previous: Node | None = None
    current = head
    while current is not None:
        following = current.next
        current.next = previous
        previous = current
        current = following
    return previous


def reverse_k(head: Node | None, k: int) -> Node | None:
    """Reverse every run of ``k`` nodes in place; a shorter last run is reversed too."""
    if k < 1:
        raise ValueError("group size must be at least 1")
    new_head: Node | None = None
    previous_group_tail: Node | None = None
    current = head
    while current is not None:
        group_first = current
        previous: Node | None = None
        for _ in range(k):
            if current is None:
                break
            following = current.next
            current.next = previous
            previous = current
            current = following
        if previous_group_tail is None:
            new_head = previous
        else:
            previous_group_tail.next = previous
        previous_group_tail = group_first
    return new_head


def make_cycle(head: Node | None, pos: int) -> None:
    """Point the tail back at the node at 1-based position ``pos``."""
    if head is None:
        raise ValueError("cannot make a cycle in an empty list")
    start = _node_at(head, pos) if pos >= 1 else None
    if start is None:
        raise ValueError(f"position {pos} is outside the list")
    tail = head
    while tail.next is not None:
        tail = tail.next
    tail.next = start


def detect_cycle(head: Node | None) -> bool:
    """Floyd's tortoise and hare: whether the list loops back on itself."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if fast is slow:
            return True
    return False


def remove_cycle(head: Node | None) -> None:
    """Break a cycle, if any, so that the list ends at the last node before it repeats."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            break
    else:
        return
    slow = head
    while slow is not fast:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next  # type: ignore[union-attr]
    start = slow
    node = start
    while node.next is not start:  # type: ignore[union-attr]
        node = node.next  # type: ignore[union-attr]
    node.next = None  # type: ignore[union-attr]


def rotate(head: Node | None, k: int) -> Node | None:
    """Move the first ``k`` nodes (modulo the length) to the end; return the new head."""
    size = length(head)
    if size == 0:
        return None
    k %= size
    if k == 0:
        return head
    new_tail = _node_at(head, k)
    new_head = new_tail.next
    tail = new_head
    while tail.next is not None:  # type: ignore[union-attr]
        tail = tail.next  # type: ignore[union-attr]
    tail.next = head  # type: ignore[union-attr]
    new_tail.next = None
    return new_head


def intersect(head1: Node | None, head2: Node | None, pos: int) -> None:
    """Join the tail of the second list to the node at 1-based ``pos`` of the first."""
    if head2 is None:
        raise ValueError("the second list is empty")
    if pos < 1:
        raise ValueError(f"position {pos} is outside the list")
    target = _node_at(head1, pos)
    tail = head2
    while tail.next is not None:
        tail = tail.next
    tail.next = target


def intersection_point(head1: Node | None, head2: Node | None) -> Any:
    """Value of the first node shared by both lists, or None if they do not meet."""
    first, second = length(head1), length(head2)
    longer, shorter = (head1, head2) if first > second else (head2, head1)
    for _ in range(abs(first - second)):
        longer = longer.next  # type: ignore[union-attr]
    while longer is not None and shorter is not None:
        if longer is shorter:
            return longer.data
        longer = longer.next
        shorter = shorter.next
    return None


def display(head: Node | None) -> str:
    """Render the list as ``a->b->...->NULL``."""
    return "".join(f"{node.data}->" for node in _nodes(head)) + "NULL"