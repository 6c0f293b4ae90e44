# streaming_catalog/domain/watchlist.py

"""LIFO stack of films attached to a subscription."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from streaming_catalog.domain.errors import NotFoundError

if TYPE_CHECKING:
    from streaming_catalog.domain.models import Film


class _StackNode:
    __slots__ = ("film", "next")

    def __init__(self, film: Film, next: _StackNode | None = None) -> None:
        self.film = film
        self.next = next


class Watchlist:
    """Films a subscriber wants to watch, most recently pushed on top."""

    __slots__ = ("_top", "_count")

    def __init__(self, films: Iterable[Film] = ()) -> None:
        self._top: _StackNode | None = None
        self._count = 0
        for film in films:
            self.push(film)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Film]:
        """Iterate from top to bottom."""
        node = self._top
        while node is not None:
            yield node.film
            node = node.next

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Watchlist):
            return NotImplemented
        return len(self) == len(other) and list(self) == list(other)

    def __repr__(self) -> str:
        names = ", ".join(film.name for film in self)
        return f"Watchlist([{names}])"

    @property
    def top(self) -> Film | None:
        return self._top.film if self._top is not None else None

    def push(self, film: Film) -> None:
        self._top = _StackNode(film, self._top)
        self._count += 1

    def pop(self) -> Film:
        if self._top is None:
            msg = "Cannot pop from an empty watchlist."
            raise NotFoundError(msg)
        node = self._top
        self._top = node.next
        self._count -= 1
        return node.film

    def clear(self) -> None:
        self._top = None
        self._count = 0

    def copy(self) -> Watchlist:
        """Return an independent stack with the same top-to-bottom order."""
        clone = Watchlist()
        tail: _StackNode | None = None
        for film in self:
            node = _StackNode(film)
            if tail is None:
                clone._top = node
            else:
                tail.next = node
            tail = node
        clone._count = self._count
        return clone
