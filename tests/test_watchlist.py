from __future__ import annotations

import pytest

from streaming_catalog.domain.errors import NotFoundError
from streaming_catalog.domain.watchlist import Watchlist


def test_push_puts_film_on_top(make_film) -> None:
    watchlist = Watchlist()
    assert watchlist.top is None

    watchlist.push(make_film("A"))
    watchlist.push(make_film("B"))

    assert len(watchlist) == 2
    assert watchlist.top.name == "B"
    assert [f.name for f in watchlist] == ["B", "A"]


def test_pop_returns_films_in_lifo_order(make_film) -> None:
    watchlist = Watchlist([make_film("A"), make_film("B"), make_film("C")])

    assert watchlist.pop().name == "C"
    assert watchlist.pop().name == "B"
    assert len(watchlist) == 1


def test_pop_empty_raises() -> None:
    with pytest.raises(NotFoundError):
        Watchlist().pop()


def test_copy_preserves_order_and_is_independent(make_film) -> None:
    original = Watchlist([make_film("A"), make_film("B"), make_film("C")])
    clone = original.copy()

    assert [f.name for f in clone] == ["C", "B", "A"]
    assert clone == original

    clone.pop()
    original.clear()
    assert len(original) == 0
    assert [f.name for f in clone] == ["B", "A"]
