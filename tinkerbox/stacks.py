"""Last-in first-out stacks: a bounded one and an unbounded linked one."""

from __future__ import annotations

from typing import Generic, Iterator, List, TypeVar

T = TypeVar("T")


class StackFullError(OverflowError):
    """Raised when pushing onto a full bounded stack."""


class StackEmptyError(IndexError):
    """Raised when popping or peeking an empty stack."""


class BoundedStack(Generic[T]):
    """LIFO stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: List[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """Return True when the stack holds no items."""
        return not self._items

    def is_full(self) -> bool:
        """Return True when no more items fit."""
        return len(self._items) == self.capacity

    def push(self, item: T) -> None:
        """Push ``item``; raise StackFullError when full."""
        if self.is_full():
            raise StackFullError(f"stack is full (capacity {self.capacity})")
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item; raise StackEmptyError when empty."""
        if not self._items:
            raise StackEmptyError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise StackEmptyError("peek at an empty stack")
        return self._items[-1]


class LinkedStack(Generic[T]):
    """Unbounded LIFO stack."""

    def __init__(self) -> None:
        self._items: List[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top down."""
        return reversed(self._items)

    def push(self, item: T) -> None:
        """Push ``item`` on top."""
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item; raise StackEmptyError when empty."""
        if not self._items:
            raise StackEmptyError("Stack is Empty")
        return self._items.pop()

    def describe(self) -> str:
        """Render as ``top->c->b->a->(NULL)``."""
        return "top->" + "".join(f"{item}->" for item in self) + "(NULL)"