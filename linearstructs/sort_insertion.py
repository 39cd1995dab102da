"""Insertion sort that threads values through a sorted linked list."""

from __future__ import annotations

from typing import MutableSequence, Optional, TypeVar

from linearstructs.node import Node, insert, iterate

T = TypeVar("T")


def sorted_insert(value: T, head: Optional[Node[T]]) -> Node[T]:
    """Insert value before the first item not less than it.

    Returns the head of the list, which is the new node when value went
    in at the front or the list was empty.
    """
    if head is None:
        return Node(value)
    current = head
    while True:
        if value <= current.data:
            created = insert(current, value)
            return created if created.prev is None else head
        if current.next is None:
            insert(current, value, after=True)
            return head
        current = current.next


def sort_insertion(items: MutableSequence[T]) -> None:
    """Sort items in place into ascending order."""
    if not items:
        return
    head: Optional[Node[T]] = None
    for value in items:
        head = sorted_insert(value, head)
    for position, value in enumerate(iterate(head)):
        items[position] = value