"""A fixed-capacity pool kept packed by swapping removed items to the end."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

__all__ = ["PoolFullError", "SortedPool"]

T = TypeVar("T")


class PoolFullError(Exception):
    """Raised when inserting into a pool that is at capacity."""


class SortedPool(Generic[T]):
    """Holds at most ``capacity`` objects in a contiguous run of slots.

    Removal swaps the last object into the freed slot, so indices of
    other objects may change.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[T] = []

    def insert(self, obj: T) -> int:
        """Append ``obj`` and return its index."""
        if len(self._items) >= self._capacity:
            raise PoolFullError(f"pool is full ({self._capacity} objects)")
        self._items.append(obj)
        return len(self._items) - 1

    def remove(self, index: int) -> T | None:
        """Remove the object at ``index``; return the one that took its place, if any."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"no object at index {index}")
        items = self._items
        items[index], items[-1] = items[-1], items[index]
        items.pop()
        return items[index] if index < len(items) else None

    def clear(self) -> None:
        """Remove every object."""
        self._items.clear()

    def index_of(self, obj: T) -> int:
        """The index of this very object; raises ValueError if it is not held."""
        for index, item in enumerate(self._items):
            if item is obj:
                return index
        raise ValueError("object is not in the pool")

    def capacity(self) -> int:
        return self._capacity

    def __getitem__(self, index: int) -> T:
        if not 0 <= index < len(self._items):
            raise IndexError(f"no object at index {index}")
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))