"""A last-in, first-out container with explicit capacity bookkeeping."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

T = TypeVar("T")

EMPTY_TOP_MESSAGE = "ERROR: Unable to reference the element from an empty Stack"


class Stack(Generic[T]):
    """A stack whose capacity doubles when full and shrinks on every pop.

    Capacity is tracked separately from the number of items so that the
    growth policy is observable: the first push sets it to one, each push
    onto a full stack doubles it, and a pop trims it down to the size.
    """

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._items: list[T] = []
        self._capacity = capacity

    def push(self, item: T) -> None:
        """Place an item on top of the stack."""
        if not self._items:
            self._capacity = 1
        if len(self._items) == self._capacity:
            self._capacity *= 2
        self._items.append(item)

    def pop(self) -> None:
        """Discard the top item; popping an empty stack does nothing."""
        if self._items:
            self._items.pop()
            self._capacity = len(self._items)

    def top(self) -> T:
        """Return the top item, raising IndexError when the stack is empty."""
        if not self._items:
            raise IndexError(EMPTY_TOP_MESSAGE)
        return self._items[-1]

    def clear(self) -> None:
        """Remove every item while keeping the current capacity."""
        self._items.clear()

    def capacity(self) -> int:
        """Return the number of items the stack can hold before growing."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __copy__(self) -> "Stack[T]":
        duplicate: Stack[T] = Stack(len(self._items))
        duplicate._items = list(self._items)
        return duplicate

    def __repr__(self) -> str:
        inner = " ".join(repr(item) for item in self._items)
        return f"Stack({{ {inner} }})" if inner else "Stack({ })"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return self._items == other._items