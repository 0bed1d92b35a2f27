"""First-in first-out queues: a bounded one and an unbounded linked one."""

from __future__ import annotations

from collections import deque as _deque
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class QueueFullError(OverflowError):
    """Raised when enqueuing onto a full bounded queue."""


class QueueEmptyError(IndexError):
    """Raised when dequeuing from an empty queue."""


class BoundedQueue(Generic[T]):
    """FIFO queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: _deque[T] = _deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def is_full(self) -> bool:
        """Return True when no more items fit."""
        return len(self._items) == self.capacity

    def is_empty(self) -> bool:
        """Return True when the queue holds no items."""
        return not self._items

    def enqueue(self, item: T) -> None:
        """Add ``item`` at the rear; raise QueueFullError when full."""
        if self.is_full():
            raise QueueFullError(f"queue is full (capacity {self.capacity})")
        self._items.append(item)

    def dequeue(self) -> T:
        """Remove and return the front item; raise QueueEmptyError when empty."""
        if not self._items:
            raise QueueEmptyError("dequeue from an empty queue")
        return self._items.popleft()


class LinkedQueue(Generic[T]):
    """Unbounded FIFO queue; new items enter at the back."""

    def __init__(self) -> None:
        self._items: _deque[T] = _deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the front (oldest) to the back (newest)."""
        return iter(self._items)

    def enqueue(self, item: T) -> None:
        """Add ``item`` at the back."""
        self._items.append(item)

    def dequeue(self) -> T:
        """Remove and return the oldest item; raise QueueEmptyError when empty."""
        if not self._items:
            raise QueueEmptyError("Empty Queue")
        return self._items.popleft()

    def describe(self) -> str:
        """Render as ``back->c->b->a->front  Length: n``."""
        chain = "".join(f"{item}->" for item in reversed(self._items))
        return f"back->{chain}front  Length: {len(self._items)}"