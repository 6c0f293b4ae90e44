# streaming_catalog/store/people.py

"""Registry of people, unique by identity document."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from streaming_catalog.analysis.sorting import by_document, by_vip_level_desc, quicksort
from streaming_catalog.domain.errors import DuplicateKeyError, NotFoundError
from streaming_catalog.domain.models import Person
from streaming_catalog.io.records import render_person

logger = logging.getLogger(__name__)


class PeopleRegistry:
    """Dense, ordered collection of people.

    Entries are copies of what was passed to ``add``; callers never share
    state with the registry except through the references it hands out.
    """

    def __init__(self) -> None:
        self._people: list[Person] = []

    def __len__(self) -> int:
        return len(self._people)

    def __iter__(self) -> Iterator[Person]:
        return iter(self._people)

    def __getitem__(self, index: int) -> Person:
        return self._people[index]

    def __contains__(self, document: object) -> bool:
        return isinstance(document, str) and self.position(document) is not None

    def add(self, person: Person) -> None:
        if self.position(person.document) is not None:
            msg = f"Person already registered: {person.document!r}"
            raise DuplicateKeyError(msg)
        self._people.append(person.copy())
        logger.debug("Registered person %r.", person.document)

    def remove(self, document: str) -> Person:
        pos = self.position(document)
        if pos is None:
            msg = f"Person not found: {document!r}"
            raise NotFoundError(msg)
        logger.debug("Removed person %r.", document)
        return self._people.pop(pos)

    def clear(self) -> None:
        self._people.clear()

    def position(self, document: str) -> int | None:
        for i, person in enumerate(self._people):
            if person.document == document:
                return i
        return None

    def find(self, document: str) -> Person | None:
        pos = self.position(document)
        return self._people[pos] if pos is not None else None

    def find_by_email(self, email: str) -> Person | None:
        """Return the only person with this email.

        Emails are not unique by construction, so an ambiguous email is
        treated like a missing one.
        """
        matches = [person for person in self._people if person.email == email]
        if len(matches) != 1:
            if matches:
                logger.debug("Email %r shared by %s people.", email, len(matches))
            return None
        return matches[0]

    def sort_by_vip_level(self) -> None:
        """Highest VIP level first. Order among equal levels is unspecified."""
        quicksort(self._people, by_vip_level_desc)

    def sort_by_document(self) -> None:
        quicksort(self._people, by_document)

    def render_lines(self) -> list[str]:
        """One ``position;person`` line per entry, in current order."""
        return [f"{i};{render_person(person)}" for i, person in enumerate(self._people)]
