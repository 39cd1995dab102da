"""Doubly linked list nodes and the functions that work on chains of them."""

from __future__ import annotations

from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class Node(Generic[T]):
    """One element of a doubly linked list."""

    __slots__ = ("data", "next", "prev")

    def __init__(self, data: T) -> None:
        self.data: T = data
        self.next: Optional[Node[T]] = None
        self.prev: Optional[Node[T]] = None

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


def insert(node: Optional[Node[T]], element: T, after: bool = False) -> Node[T]:
    """Link a new node holding element before or after node and return it.

    When node is None the new node starts a list of its own.
    """
    created = Node(element)
    if node is None:
        return created
    if after:
        created.prev = node
        created.next = node.next
        node.next = created
        if created.next is not None:
            created.next.prev = created
    else:
        created.next = node
        created.prev = node.prev
        node.prev = created
        if created.prev is not None:
            created.prev.next = created
    return created


def copy(source: Optional[Node[T]]) -> Optional[Node[T]]:
    """Return the head of a new list holding the same data as source."""
    if source is None:
        return None
    head = Node(source.data)
    tail = head
    current = source.next
    while current is not None:
        tail = insert(tail, current.data, after=True)
        current = current.next
    return head


def find(head: Optional[Node[T]], value: T) -> Optional[Node[T]]:
    """Return the first node from head onward whose data equals value."""
    current = head
    while current is not None:
        if current.data == value:
            return current
        current = current.next
    return None


def remove(node: Optional[Node[T]]) -> Optional[Node[T]]:
    """Unlink node from its list.

    Returns the node before it, or the node after it when it was first,
    or None when the list is now empty or node was None.
    """
    if node is None:
        return None
    before, following = node.prev, node.next
    if before is not None:
        before.next = following
    if following is not None:
        following.prev = before
    node.prev = node.next = None
    return before if before is not None else following


def iterate(head: Optional[Node[T]]) -> Iterator[T]:
    """Yield the data of each node from head to the end of the list."""
    current = head
    while current is not None:
        yield current.data
        current = current.next


def format_list(head: Optional[Node[T]]) -> str:
    """Return the data of the list separated by commas; empty for no list."""
    return ", ".join(str(data) for data in iterate(head))