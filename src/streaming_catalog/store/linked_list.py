# streaming_catalog/store/linked_list.py

"""Singly-linked list with a tail pointer.

Used for the film catalog's primary list and for its free-film index.
Sorting relinks nodes and never moves payloads between nodes, so anything
held by a node stays attached to it.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

Compare = Callable[[T, T], int]


class _Node(Generic[T]):
    __slots__ = ("value", "next")

    def __init__(self, value: T) -> None:
        self.value = value
        self.next: _Node[T] | None = None


class SinglyLinkedList(Generic[T]):
    """Insertion-ordered list with O(1) append and O(n) lookup/removal."""

    def __init__(self) -> None:
        self._first: _Node[T] | None = None
        self._last: _Node[T] | None = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        node = self._first
        while node is not None:
            yield node.value
            node = node.next

    def __bool__(self) -> bool:
        return self._count > 0

    @property
    def first(self) -> T | None:
        return self._first.value if self._first is not None else None

    @property
    def last(self) -> T | None:
        return self._last.value if self._last is not None else None

    def append(self, value: T) -> None:
        node = _Node(value)
        if self._last is None:
            self._first = node
        else:
            self._last.next = node
        self._last = node
        self._count += 1

    def find(self, predicate: Callable[[T], bool]) -> T | None:
        """Return the first value matching ``predicate``, or None."""
        for value in self:
            if predicate(value):
                return value
        return None

    def remove(self, predicate: Callable[[T], bool]) -> T | None:
        """Unlink the first value matching ``predicate`` and return it.

        Returns None when nothing matched; the list is left untouched.
        """
        prev: _Node[T] | None = None
        node = self._first
        while node is not None and not predicate(node.value):
            prev = node
            node = node.next

        if node is None:
            return None

        if prev is None:
            self._first = node.next
        else:
            prev.next = node.next
        if self._last is node:
            self._last = prev

        node.next = None
        self._count -= 1
        return node.value

    def clear(self) -> None:
        self._first = None
        self._last = None
        self._count = 0

    def bubble_sort(self, compare: Compare[T]) -> None:
        """Stable exchange sort by relinking adjacent nodes.

        ``compare(a, b)`` returns a positive number when ``a`` must go after
        ``b``. Equal elements are never exchanged.
        """
        if self._count < 2:
            return

        end: _Node[T] | None = None  # first node of the sorted tail
        swapped = True
        while swapped:
            swapped = False
            prev: _Node[T] | None = None
            node = self._first
            assert node is not None
            while node.next is not end:
                nxt = node.next
                assert nxt is not None
                if compare(node.value, nxt.value) > 0:
                    # prev -> node -> nxt  becomes  prev -> nxt -> node
                    node.next = nxt.next
                    nxt.next = node
                    if prev is None:
                        self._first = nxt
                    else:
                        prev.next = nxt
                    prev = nxt
                    swapped = True
                else:
                    prev = node
                    node = nxt
            end = node

        # Re-establish the tail pointer.
        last = self._first
        while last is not None and last.next is not None:
            last = last.next
        self._last = last
