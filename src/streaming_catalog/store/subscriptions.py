# streaming_catalog/store/subscriptions.py

"""Subscription ledger with per-person spend aggregation."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterator

from streaming_catalog.domain.errors import (
    DuplicateKeyError,
    NotFoundError,
    OutOfMemoryError,
    PersonNotFoundError,
)
from streaming_catalog.domain.models import Subscription
from streaming_catalog.io.records import render_subscription
from streaming_catalog.store.people import PeopleRegistry

logger = logging.getLogger(__name__)

# One VIP level per this much total spend.
VIP_LEVEL_PRICE_STEP = 500.0


class SubscriptionLedger:
    """Dense, ordered collection of subscriptions.

    Ids are positions: after every add or remove they are renumbered to
    1..len(ledger) in current order. Ids read from input are ignored.
    """

    def __init__(self) -> None:
        self._subscriptions: list[Subscription] = []

    def __len__(self) -> int:
        return len(self._subscriptions)

    def __iter__(self) -> Iterator[Subscription]:
        return iter(self._subscriptions)

    def __getitem__(self, index: int) -> Subscription:
        return self._subscriptions[index]

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, people: PeopleRegistry, subscription: Subscription) -> Subscription:
        """Store a copy of ``subscription`` and return it with its new id.

        Raises:
            PersonNotFoundError: the owner is not in ``people``.
            DuplicateKeyError: an equal subscription is already stored.
            OutOfMemoryError: the copy could not be allocated.
        """
        if subscription.document not in people:
            msg = f"Subscription owner not registered: {subscription.document!r}"
            raise PersonNotFoundError(msg)

        if any(existing == subscription for existing in self._subscriptions):
            msg = (
                f"Subscription already exists for {subscription.document!r} "
                f"({subscription.plan}, {subscription.start_date})"
            )
            raise DuplicateKeyError(msg)

        try:
            stored = subscription.copy()
        except MemoryError as exc:
            raise OutOfMemoryError(str(exc)) from exc

        stored.id = len(self._subscriptions) + 1
        self._subscriptions.append(stored)
        logger.debug(
            "Added subscription %s for %r (%s films in watchlist).",
            stored.id,
            stored.document,
            len(stored.watchlist),
        )
        return stored

    def remove(self, subscription_id: int) -> None:
        """Remove by id and renumber the remaining subscriptions."""
        pos = self.position(subscription_id)
        if pos is None:
            msg = f"Subscription not found: {subscription_id}"
            raise NotFoundError(msg)

        removed = self._subscriptions.pop(pos)
        removed.watchlist.clear()
        self._renumber()
        logger.debug("Removed subscription %s.", subscription_id)

    def clear(self) -> None:
        for subscription in self._subscriptions:
            subscription.watchlist.clear()
        self._subscriptions.clear()

    def _renumber(self) -> None:
        for i, subscription in enumerate(self._subscriptions, start=1):
            subscription.id = i

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def position(self, subscription_id: int) -> int | None:
        for i, subscription in enumerate(self._subscriptions):
            if subscription.id == subscription_id:
                return i
        return None

    def find_by_id(self, subscription_id: int) -> Subscription | None:
        pos = self.position(subscription_id)
        return self._subscriptions[pos] if pos is not None else None

    def find_by_document(self, document: str) -> list[Subscription]:
        """Independent copies of a person's subscriptions, ordered by id."""
        matches = [s.copy() for s in self._subscriptions if s.document == document]
        matches.sort(key=lambda s: s.id)
        return matches

    def get(self, index: int) -> str:
        """Render the subscription at ``index``."""
        return render_subscription(self._subscriptions[index])

    def render_lines(self) -> list[str]:
        return [render_subscription(s) for s in self._subscriptions]

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------

    def total_spend(self, document: str) -> float:
        return sum(s.price for s in self._subscriptions if s.document == document)

    def calculate_vip_level(self, document: str) -> int:
        """One level per full ``VIP_LEVEL_PRICE_STEP`` of total spend."""
        return int(self.total_spend(document) // VIP_LEVEL_PRICE_STEP)

    def update_vip_levels(self, people: PeopleRegistry) -> None:
        for person in people:
            person.vip_level = self.calculate_vip_level(person.document)
        logger.debug("Updated VIP levels for %s people.", len(people))

    def most_popular_film(self) -> str | None:
        """Most frequent film name across all watchlists.

        Watchlists are scanned in ledger order from top to bottom; on a tie
        the film seen first wins. None when every watchlist is empty.
        """
        counts: Counter[str] = Counter()
        for subscription in self._subscriptions:
            for film in subscription.watchlist:
                counts[film.name] += 1

        if not counts:
            return None
        name, _ = counts.most_common(1)[0]
        return name
