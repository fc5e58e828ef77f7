"""Fixed-capacity first-in, first-out queues: linear and circular."""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")

__all__ = ["QueueFullError", "QueueEmptyError", "LinearQueue", "CircularQueue"]


class QueueFullError(OverflowError):
    """Raised when adding to a queue that has no free slot."""


class QueueEmptyError(IndexError):
    """Raised when removing from an empty queue."""


class LinearQueue(Generic[T]):
    """A queue over a fixed row of ``capacity`` slots.

    Slots freed at the front are not reused until the queue drains
    completely, so the queue can report full while holding fewer than
    ``capacity`` items.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._items: deque[T] = deque()
        self._slots_used = 0

    def enqueue(self, item: T) -> None:
        """Add ``item`` at the rear."""
        if self.is_full():
            raise QueueFullError("Queue is full, cant add")
        self._items.append(item)
        self._slots_used += 1

    def dequeue(self) -> T:
        """Remove and return the item at the front."""
        if self.is_empty():
            raise QueueEmptyError("Queue is empty !")
        item = self._items.popleft()
        if not self._items:
            self._slots_used = 0
        return item

    def is_full(self) -> bool:
        return self._slots_used == self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def items(self) -> list[T]:
        """Return the queued items from front to rear."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self.capacity}, items={list(self._items)!r})"


class CircularQueue(Generic[T]):
    """A queue whose slots wrap around, so freed slots are reused at once."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._items: deque[T] = deque()

    def enqueue(self, item: T) -> None:
        """Add ``item`` at the rear."""
        if self.is_full():
            raise QueueFullError("Queue is full, cant add")
        self._items.append(item)

    def dequeue(self) -> T:
        """Remove and return the item at the front."""
        if self.is_empty():
            raise QueueEmptyError("Queue is empty !")
        return self._items.popleft()

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def items(self) -> list[T]:
        """Return the queued items from front to rear."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self.capacity}, items={list(self._items)!r})"