"""A set that keeps its items sorted in a list and finds them by bisection."""

from __future__ import annotations

import heapq
from bisect import bisect_left
from typing import Any, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class OrderedSet(Generic[T]):
    """A collection of distinct items kept in ascending order.

    Items only need to support ``<`` and ``==``; they do not have to be
    hashable. Union, intersection and difference return new sets.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: List[T] = []
        for item in items:
            self.insert(item)

    @classmethod
    def _from_sorted(cls, items: List[T]) -> "OrderedSet[T]":
        result: OrderedSet[T] = cls()
        result._items = items
        return result

    def _position(self, item: T) -> int:
        return bisect_left(self._items, item)

    def _holds_at(self, position: int, item: T) -> bool:
        return position < len(self._items) and self._items[position] == item

    def insert(self, item: T) -> None:
        """Add an item unless an equal one is already present."""
        position = self._position(item)
        if not self._holds_at(position, item):
            self._items.insert(position, item)

    def find(self, item: T) -> Optional[int]:
        """Return the position of the item in sorted order, or None."""
        position = self._position(item)
        return position if self._holds_at(position, item) else None

    def erase(self, item: T) -> None:
        """Remove the item; removing an absent item does nothing."""
        position = self._position(item)
        if self._holds_at(position, item):
            del self._items[position]

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def union(self, other: "OrderedSet[T]") -> "OrderedSet[T]":
        """Return the items found in either set."""
        merged: List[T] = []
        for item in heapq.merge(self._items, other._items):
            if not merged or merged[-1] != item:
                merged.append(item)
        return self._from_sorted(merged)

    def intersection(self, other: "OrderedSet[T]") -> "OrderedSet[T]":
        """Return the items found in both sets."""
        return self._from_sorted([item for item in self._items if item in other])

    def difference(self, other: "OrderedSet[T]") -> "OrderedSet[T]":
        """Return the items found in this set but not in the other."""
        return self._from_sorted(
            [item for item in self._items if item not in other]
        )

    def __or__(self, other: Any) -> "OrderedSet[T]":
        if not isinstance(other, OrderedSet):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: Any) -> "OrderedSet[T]":
        if not isinstance(other, OrderedSet):
            return NotImplemented
        return self.intersection(other)

    def __sub__(self, other: Any) -> "OrderedSet[T]":
        if not isinstance(other, OrderedSet):
            return NotImplemented
        return self.difference(other)

    def __contains__(self, item: Any) -> bool:
        return self.find(item) is not None

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __copy__(self) -> "OrderedSet[T]":
        return self._from_sorted(list(self._items))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, OrderedSet):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        inner = " ".join(repr(item) for item in self._items)
        return f"OrderedSet({{ {inner} }})" if inner else "OrderedSet({ })"