# streaming_catalog/store/film_catalog.py

"""Film catalog: every film plus an index of the free ones."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from streaming_catalog.analysis.sorting import by_rating_desc, by_release_date
from streaming_catalog.domain.errors import (
    DuplicateKeyError,
    NotFoundError,
    OutOfMemoryError,
)
from streaming_catalog.domain.models import Film
from streaming_catalog.store.linked_list import SinglyLinkedList

logger = logging.getLogger(__name__)


class FilmCatalog:
    """Owns all films in insertion order and a secondary free-film index.

    The free index stores film names, never films, and resolves each name
    against the primary list when read. Reordering or rebuilding the
    primary list therefore cannot leave the index pointing at stale data.
    """

    def __init__(self) -> None:
        self._films: SinglyLinkedList[Film] = SinglyLinkedList()
        self._free_names: SinglyLinkedList[str] = SinglyLinkedList()
        self.sorted_by_date = False

    def __len__(self) -> int:
        return len(self._films)

    def __iter__(self) -> Iterator[Film]:
        return iter(self._films)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, film: Film) -> None:
        """Insert a film; all-or-nothing.

        Raises:
            DuplicateKeyError: a film with the same name already exists.
            OutOfMemoryError: allocation failed; nothing was inserted.
        """
        if self.find(film.name) is not None:
            msg = f"Film already in catalog: {film.name!r}"
            raise DuplicateKeyError(msg)

        try:
            self._films.append(film)
        except MemoryError as exc:
            raise OutOfMemoryError(str(exc)) from exc

        if film.is_free:
            try:
                self._register_free(film.name)
            except Exception as exc:
                self._films.remove(lambda f: f.name == film.name)
                logger.warning(
                    "Rolled back %r after free index registration failed: %s",
                    film.name,
                    exc,
                )
                if isinstance(exc, MemoryError):
                    raise OutOfMemoryError(str(exc)) from exc
                raise

        self.sorted_by_date = False
        logger.debug("Added film %r (free=%s).", film.name, film.is_free)

    def remove(self, name: str) -> Film:
        """Remove a film by name and return it.

        Raises:
            NotFoundError: no film with that name.
        """
        self._free_names.remove(lambda n: n == name)

        removed = self._films.remove(lambda f: f.name == name)
        if removed is None:
            msg = f"Film not found: {name!r}"
            raise NotFoundError(msg)

        self.sorted_by_date = False
        logger.debug("Removed film %r.", name)
        return removed

    def clear(self) -> None:
        self._free_names.clear()
        self._films.clear()
        self.sorted_by_date = False

    def _register_free(self, name: str) -> None:
        if self._free_names.find(lambda n: n == name) is not None:
            msg = f"Film already in free index: {name!r}"
            raise DuplicateKeyError(msg)
        self._free_names.append(name)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def find(self, name: str) -> Film | None:
        return self._films.find(lambda f: f.name == name)

    def find_free(self, name: str) -> Film | None:
        """Look a film up through the free index only."""
        if self._free_names.find(lambda n: n == name) is None:
            return None
        return self.find(name)

    def films(self) -> Iterator[Film]:
        return iter(self._films)

    def free_films(self) -> Iterator[Film]:
        """Free films in index order, resolved against the primary list."""
        by_name = {film.name: film for film in self._films}
        for name in self._free_names:
            film = by_name.get(name)
            if film is not None:
                yield film

    def total_count(self) -> int:
        return len(self._films)

    def free_count(self) -> int:
        return len(self._free_names)

    def longest_film(self) -> Film | None:
        """Longest film; on a tie the last one in list order wins."""
        return _longest(self._films)

    def longest_free_film(self) -> Film | None:
        return _longest(self.free_films())

    def oldest_film(self, free_only: bool = False) -> Film | None:
        """Film with the earliest release; on a tie the first one wins."""
        films = self.free_films() if free_only else iter(self._films)
        oldest: Film | None = None
        for film in films:
            if oldest is None or film.release < oldest.release:
                oldest = film
        return oldest

    # ------------------------------------------------------------------
    # Sorting
    # ------------------------------------------------------------------

    def sort_by_year(self) -> None:
        """Order both the catalog and the free index by release date."""
        self._films.bubble_sort(by_release_date)

        by_name = {film.name: film for film in self._films}
        self._free_names.bubble_sort(
            lambda a, b: by_release_date(by_name[a], by_name[b])
        )

        self.sorted_by_date = True
        logger.debug("Catalog sorted by release date (%s films).", len(self))

    def sort_by_rating(self) -> None:
        """Order the catalog from highest to lowest rating."""
        self._films.bubble_sort(by_rating_desc)
        self.sorted_by_date = False
        logger.debug("Catalog sorted by rating (%s films).", len(self))


def _longest(films: Iterable[Film]) -> Film | None:
    longest: Film | None = None
    for film in films:
        if longest is None or film.minutes >= longest.minutes:
            longest = film
    return longest
