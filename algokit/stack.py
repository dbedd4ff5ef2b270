"""A fixed-capacity stack."""

from __future__ import annotations

from typing import Any


class StackOverflow(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflow(Exception):
    """Raised when reading or removing from an empty stack."""


class Stack:
    """A stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        """Push ``item`` on top of the stack."""
        if self.is_full():
            raise StackOverflow("stack is full")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self.is_empty():
            raise StackUnderflow("stack is empty")
        return self._items.pop()

    def peek(self, position: int) -> Any:
        """Return the item at ``position``, counting the top as 1."""
        if not 1 <= position <= len(self._items):
            raise IndexError(f"not a valid position: {position}")
        return self._items[-position]

    def top(self) -> Any:
        """Return the top item without removing it."""
        if self.is_empty():
            raise StackUnderflow("stack is empty")
        return self._items[-1]

    def bottom(self) -> Any:
        """Return the bottom item without removing it."""
        if self.is_empty():
            raise StackUnderflow("stack is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)