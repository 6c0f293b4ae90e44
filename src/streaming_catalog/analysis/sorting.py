# streaming_catalog/analysis/sorting.py

"""Partition sort and the comparators shared by every collection.

A comparator returns a negative number when its first argument goes
first, zero when both are equivalent and a positive number otherwise.
The exchange sort for linked lists lives on ``SinglyLinkedList``.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import TypeVar

from streaming_catalog.domain.models import Film, Person

T = TypeVar("T")

Compare = Callable[[T, T], int]


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def by_release_date(a: Film, b: Film) -> int:
    """Oldest release first."""
    return _sign(a.release.toordinal() - b.release.toordinal())


def by_rating_desc(a: Film, b: Film) -> int:
    """Highest rating first."""
    return _sign(b.rating - a.rating)


def by_vip_level_desc(a: Person, b: Person) -> int:
    """Highest VIP level first."""
    return _sign(b.vip_level - a.vip_level)


def by_document(a: Person, b: Person) -> int:
    """Lexicographic document order."""
    return (a.document > b.document) - (a.document < b.document)


def quicksort(items: MutableSequence[T], compare: Compare[T]) -> None:
    """Sort ``items`` in place with a Lomuto partition quicksort.

    The rightmost element of each range is the pivot. Pending ranges are
    kept on an explicit stack, smaller range on top, so the stack depth
    stays logarithmic. Not stable: equal elements may be reordered.
    """
    pending: list[tuple[int, int]] = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot_index = _partition(items, low, high, compare)
        left = (low, pivot_index - 1)
        right = (pivot_index + 1, high)
        if left[1] - left[0] > right[1] - right[0]:
            pending.append(left)
            pending.append(right)
        else:
            pending.append(right)
            pending.append(left)


def _partition(
    items: MutableSequence[T],
    low: int,
    high: int,
    compare: Compare[T],
) -> int:
    pivot = items[high]
    i = low - 1
    for j in range(low, high):
        if compare(items[j], pivot) < 0:
            i += 1
            if i != j:
                items[i], items[j] = items[j], items[i]
    if i + 1 != high:
        items[i + 1], items[high] = items[high], items[i + 1]
    return i + 1
