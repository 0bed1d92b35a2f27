"""A double-ended queue with an optional hook called on removed items."""

from __future__ import annotations

from collections import deque as _deque
from typing import Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class Deque(Generic[T]):
    """Double-ended queue supporting insertion and removal at both ends.

    ``on_remove`` is called with every item that leaves the deque, whether
    through a pop or through :meth:`clear`.
    """

    def __init__(
        self,
        items: Iterable[T] = (),
        on_remove: Optional[Callable[[T], None]] = None,
    ) -> None:
        self._items: _deque[T] = _deque(items)
        self._on_remove = on_remove

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Deque({list(self._items)!r})"

    def is_empty(self) -> bool:
        """Return True when the deque holds no items."""
        return not self._items

    def push_front(self, item: T) -> None:
        """Insert ``item`` at the front."""
        self._items.appendleft(item)

    def push_back(self, item: T) -> None:
        """Insert ``item`` at the back."""
        self._items.append(item)

    def _removed(self, item: T) -> T:
        if self._on_remove is not None:
            self._on_remove(item)
        return item

    def pop_front(self) -> T:
        """Remove and return the front item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty deque")
        return self._removed(self._items.popleft())

    def pop_back(self) -> T:
        """Remove and return the back item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty deque")
        return self._removed(self._items.pop())

    def front(self) -> T:
        """Return the front item without removing it."""
        if not self._items:
            raise IndexError("front of an empty deque")
        return self._items[0]

    def back(self) -> T:
        """Return the back item without removing it."""
        if not self._items:
            raise IndexError("back of an empty deque")
        return self._items[-1]

    def clear(self) -> None:
        """Remove every item, front first."""
        while self._items:
            self.pop_front()