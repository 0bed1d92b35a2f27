"""A singly linked list with positional insertion and deletion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Node:
    data: Any
    next: Optional["_Node"] = None


class LinkedList(Generic[T]):
    """Singly linked list holding items of any type."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.insert_end(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def insert_front(self, data: T) -> None:
        """Insert ``data`` at the head of the list."""
        self._head = _Node(data, self._head)
        self._size += 1

    def insert_end(self, data: T) -> None:
        """Append ``data`` at the tail of the list."""
        if self._head is None:
            self._head = _Node(data)
        else:
            self._node_at(self._size - 1).next = _Node(data)
        self._size += 1

    def insert_at(self, data: T, position: int) -> None:
        """Insert ``data`` so that it ends up at index ``position``."""
        if position < 0 or position > self._size:
            raise IndexError(f"insert position {position} out of range")
        if position == 0:
            self.insert_front(data)
            return
        previous = self._node_at(position - 1)
        previous.next = _Node(data, previous.next)
        self._size += 1

    def delete_front(self) -> T:
        """Remove and return the head item."""
        if self._head is None:
            raise IndexError("delete from an empty list")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.data

    def delete_end(self) -> T:
        """Remove and return the tail item."""
        if self._head is None:
            raise IndexError("delete from an empty list")
        if self._size == 1:
            return self.delete_front()
        previous = self._node_at(self._size - 2)
        assert previous.next is not None
        data = previous.next.data
        previous.next = None
        self._size -= 1
        return data

    def delete_at(self, position: int) -> T:
        """Remove and return the item at index ``position``."""
        if position < 0 or position >= self._size:
            raise IndexError(f"delete position {position} out of range")
        if position == 0:
            return self.delete_front()
        previous = self._node_at(position - 1)
        target = previous.next
        assert target is not None
        previous.next = target.next
        self._size -= 1
        return target.data

    def search(self, data: Any, key: Optional[Callable[[Any], Any]] = None) -> int:
        """Return the index of the first item equal to ``data``.

        With ``key``, items are compared by ``key(item) == key(data)``.
        Raises ValueError when no item matches.
        """
        wanted = key(data) if key is not None else data
        for index, item in enumerate(self):
            candidate = key(item) if key is not None else item
            if candidate == wanted:
                return index
        raise ValueError(f"{data!r} is not in the list")

    def traverse(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on every item, head to tail."""
        for item in self:
            func(item)

    def clear(self, on_free: Optional[Callable[[T], Any]] = None) -> None:
        """Remove every item, passing each to ``on_free`` when given."""
        if on_free is not None:
            for item in self:
                on_free(item)
        self._head = None
        self._size = 0

    def describe(self) -> str:
        """Render the chain as ``head->a->b->(NULL)``."""
        return "head->" + "".join(f"{item}->" for item in self) + "(NULL)"