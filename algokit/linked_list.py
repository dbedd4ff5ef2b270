"""Singly and doubly linked list helpers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: Any = 0
    next: ListNode | None = None


def from_values(values: Iterable) -> ListNode | None:
    """Build a singly linked list from ``values`` and return its head."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: ListNode | None) -> list:
    """Collect the values of a singly linked list into a Python list."""
    values = []
    while head is not None:
        values.append(head.val)
        head = head.next
    return values


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse a singly linked list in place and return the new head."""
    previous: ListNode | None = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def reverse_list_recursive(head: ListNode | None) -> ListNode | None:
    """Reverse a singly linked list in place using recursion."""
    if head is None or head.next is None:
        return head
    new_head = reverse_list_recursive(head.next)
    head.next.next = head
    head.next = None
    return new_head


@dataclass(eq=False)
class _Node:
    value: Any
    next: _Node | None = None
    prev: _Node | None = None


class LinkedList:
    """A doubly linked list with positional and value-based removal."""

    def __init__(self, values: Iterable = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def push_front(self, value: Any) -> None:
        """Insert ``value`` at the beginning of the list."""
        node = _Node(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def append(self, value: Any) -> None:
        """Insert ``value`` at the end of the list."""
        node = _Node(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def find(self, value: Any) -> int:
        """Return the 1-based location of the first node holding ``value``."""
        for location, node in enumerate(self._nodes(), start=1):
            if node.value == value:
                return location
        raise ValueError(f"{value!r} is not in the list")

    def _unlink(self, node: _Node) -> None:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1

    def remove_at(self, location: int) -> Any:
        """Remove the node at the 1-based ``location`` and return its value."""
        if not 1 <= location <= self._size:
            raise IndexError(f"no node at location {location}")
        for position, node in enumerate(self._nodes(), start=1):
            if position == location:
                self._unlink(node)
                return node.value
        raise IndexError(f"no node at location {location}")

    def remove(self, value: Any) -> None:
        """Remove the first node holding ``value``."""
        for node in self._nodes():
            if node.value == value:
                self._unlink(node)
                return
        raise ValueError(f"{value!r} is not in the list")

    def middle(self) -> Any:
        """Return the middle value; for an even length, the second of the two."""
        if self._head is None:
            raise ValueError("the list is empty")
        slow = fast = self._head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
        return slow.value

    def __iter__(self) -> Iterator:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"