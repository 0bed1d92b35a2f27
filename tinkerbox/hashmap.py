"""A fixed-size slot map addressed by an FNV-1a hash of string keys."""

from __future__ import annotations

from typing import Any, Union

_BASE = 0x811C9DC5
_PRIME = 0x01000193
_MASK64 = (1 << 64) - 1

_EMPTY = object()


def _check_capacity(capacity: int) -> None:
    if capacity <= 0 or capacity & (capacity - 1):
        raise ValueError(f"capacity must be a positive power of two, got {capacity}")


def fnv1a_index(key: Union[str, bytes], capacity: int) -> int:
    """Return the slot index of ``key`` in a table of ``capacity`` slots.

    The hash is FNV-1a over the UTF-8 bytes of the key, computed in 64-bit
    arithmetic with bytes treated as signed characters, then masked down to
    the table size.  ``capacity`` must be a power of two.
    """
    _check_capacity(capacity)
    data = key.encode("utf-8") if isinstance(key, str) else bytes(key)
    value = _BASE
    for byte in data:
        signed = byte - 0x100 if byte >= 0x80 else byte
        value = ((value ^ (signed & _MASK64)) * _PRIME) & _MASK64
    return value & (capacity - 1)


class SlotMap:
    """Map with one value per hash slot and no collision handling.

    Two keys that hash to the same slot share it: the later ``put`` wins.
    ``len()`` counts every ``put`` call, as the table's size counter does.
    """

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._slots: list[Any] = [_EMPTY] * capacity
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def put(self, key: Union[str, bytes], value: Any) -> None:
        """Store ``value`` in the slot that ``key`` hashes to."""
        self._size += 1
        self._slots[fnv1a_index(key, self.capacity)] = value

    def get(self, key: Union[str, bytes]) -> Any:
        """Return the value in the slot of ``key``; raise KeyError if it is empty."""
        value = self._slots[fnv1a_index(key, self.capacity)]
        if value is _EMPTY:
            raise KeyError(key)
        return value