"""A first-in, first-out container backed by a growable circular buffer."""

from __future__ import annotations

from typing import Any, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")

EMPTY_QUEUE_MESSAGE = "ERROR: attempting to access an element in an empty queue"


class Queue(Generic[T]):
    """A queue that wraps around a fixed buffer and doubles it when full."""

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._data: List[Optional[T]] = [None] * capacity
        self._pushed = 0
        self._popped = 0

    def capacity(self) -> int:
        """Return the number of items the buffer holds before growing."""
        return len(self._data)

    def _resize(self, new_capacity: int) -> None:
        items = list(self)
        self._data = items + [None] * (new_capacity - len(items))
        self._popped = 0
        self._pushed = len(items)

    def push(self, item: T) -> None:
        """Add an item to the back of the queue."""
        if not self._data:
            self._resize(1)
        if len(self) == len(self._data):
            self._resize(len(self._data) * 2)
        self._pushed += 1
        self._data[(self._pushed - 1) % len(self._data)] = item

    def pop(self) -> None:
        """Discard the front item; popping an empty queue does nothing."""
        if self._pushed != self._popped:
            self._popped += 1

    def front(self) -> T:
        """Return the oldest item, raising IndexError when empty."""
        if self._pushed == self._popped:
            raise IndexError(EMPTY_QUEUE_MESSAGE)
        return self._data[self._popped % len(self._data)]  # type: ignore[return-value]

    def back(self) -> T:
        """Return the newest item, raising IndexError when empty."""
        if self._pushed == self._popped:
            raise IndexError(EMPTY_QUEUE_MESSAGE)
        return self._data[(self._pushed - 1) % len(self._data)]  # type: ignore[return-value]

    def clear(self) -> None:
        """Remove every item while keeping the buffer."""
        self._pushed = 0
        self._popped = 0

    def __len__(self) -> int:
        return self._pushed - self._popped

    def __bool__(self) -> bool:
        return self._pushed != self._popped

    def __iter__(self) -> Iterator[T]:
        """Yield the items from front to back without removing them."""
        capacity = len(self._data)
        for position in range(self._popped, self._pushed):
            yield self._data[position % capacity]  # type: ignore[misc]

    def __copy__(self) -> "Queue[T]":
        duplicate: Queue[T] = Queue(len(self))
        for item in self:
            duplicate.push(item)
        return duplicate

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Queue):
            return NotImplemented
        return list(self) == list(other)

    def __repr__(self) -> str:
        inner = " ".join(repr(item) for item in self)
        return f"Queue({{ {inner} }})" if inner else "Queue({ })"