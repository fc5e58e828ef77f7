"""A fixed-capacity last-in, first-out stack."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

__all__ = ["StackFullError", "StackEmptyError", "BoundedStack"]


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that has reached its capacity."""


class StackEmptyError(IndexError):
    """Raised when popping or peeking an empty stack."""


class BoundedStack(Generic[T]):
    """A stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._items: list[T] = []

    def push(self, item: T) -> None:
        """Place ``item`` on top of the stack."""
        if self.is_full():
            raise StackFullError("Stack is full")
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item."""
        if self.is_empty():
            raise StackEmptyError("Stack is empty, can't pop")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it."""
        if self.is_empty():
            raise StackEmptyError("Stack is empty")
        return self._items[-1]

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Yield the items from the top of the stack down to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self.capacity}, items={self._items!r})"