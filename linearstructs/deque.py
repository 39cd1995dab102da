"""A double-ended queue backed by a growable circular buffer."""

from __future__ import annotations

from typing import Any, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")

EMPTY_DEQUE_MESSAGE = "ERROR: unable to access data from an empty deque"


def normalize(index: int, capacity: int) -> int:
    """Map a relative, possibly negative, index into the range [0, capacity)."""
    if capacity <= 0:
        raise ValueError("capacity must be positive")
    return index % capacity


class Deque(Generic[T]):
    """A deque whose items may be added or removed at either end.

    The front and back positions are relative indices that may run
    negative; they are wrapped into the buffer on access. The buffer
    starts at one slot and doubles whenever it is full.
    """

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._data: List[Optional[T]] = [None] * capacity
        self._front = 0
        self._back = -1

    def capacity(self) -> int:
        """Return the number of items the buffer holds before growing."""
        return len(self._data)

    def _slot(self, index: int) -> int:
        return normalize(index, len(self._data))

    def _resize(self, new_capacity: int) -> None:
        items = list(self)
        self._data = items + [None] * (new_capacity - len(items))
        if items:
            self._front = 0
            self._back = len(items) - 1

    def _make_room(self) -> None:
        if not self._data:
            self._resize(1)
        if len(self) == len(self._data):
            self._resize(len(self._data) * 2)

    def push_back(self, item: T) -> None:
        """Add an item after the last one."""
        self._make_room()
        self._back += 1
        self._data[self._slot(self._back)] = item

    def push_front(self, item: T) -> None:
        """Add an item before the first one."""
        self._make_room()
        self._front -= 1
        self._data[self._slot(self._front)] = item

    def pop_back(self) -> None:
        """Discard the last item; popping an empty deque does nothing."""
        if self:
            self._back -= 1

    def pop_front(self) -> None:
        """Discard the first item; popping an empty deque does nothing."""
        if self:
            self._front += 1

    def front(self) -> T:
        """Return the first item, raising IndexError when empty."""
        if not self:
            raise IndexError(EMPTY_DEQUE_MESSAGE)
        return self._data[self._slot(self._front)]  # type: ignore[return-value]

    def back(self) -> T:
        """Return the last item, raising IndexError when empty."""
        if not self:
            raise IndexError(EMPTY_DEQUE_MESSAGE)
        return self._data[self._slot(self._back)]  # type: ignore[return-value]

    def clear(self) -> None:
        """Remove every item while keeping the buffer."""
        self._front = 0
        self._back = -1

    def __len__(self) -> int:
        return self._back - self._front + 1

    def __bool__(self) -> bool:
        return self._back >= self._front

    def __iter__(self) -> Iterator[T]:
        """Yield the items from front to back without removing them."""
        for index in range(self._front, self._back + 1):
            yield self._data[self._slot(index)]  # type: ignore[misc]

    def __copy__(self) -> "Deque[T]":
        duplicate: Deque[T] = Deque(len(self))
        for item in self:
            duplicate.push_back(item)
        return duplicate

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Deque):
            return NotImplemented
        return list(self) == list(other)

    def __repr__(self) -> str:
        inner = " ".join(repr(item) for item in self)
        return f"Deque({{ {inner} }})" if inner else "Deque({ })"