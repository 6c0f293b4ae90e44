# streaming_catalog/io/loader.py

"""Load line-oriented record files into the in-memory collections.

Each file holds one ``;``-separated record per line. Blank lines and lines
starting with ``#`` are ignored. Lines that fail to parse, or that the
target collection rejects, are logged and skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from streaming_catalog.domain.errors import CatalogError
from streaming_catalog.io.records import (
    Record,
    parse_film,
    parse_person,
    parse_subscription,
)
from streaming_catalog.store.film_catalog import FilmCatalog
from streaming_catalog.store.people import PeopleRegistry
from streaming_catalog.store.subscriptions import SubscriptionLedger

logger = logging.getLogger(__name__)

NUM_FIELDS_WATCHLIST = 2


def iter_records(path: Path | str, kind: str | None = None) -> Iterator[tuple[int, Record]]:
    """Yield ``(line_number, record)`` for every data line in ``path``."""
    file_path = Path(path)
    if not file_path.exists():
        msg = f"Record file not found: {file_path}"
        raise FileNotFoundError(msg)

    with file_path.open("r", encoding="utf-8") as f:
        for line_number, line in enumerate(f, start=1):
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            yield line_number, Record.from_line(stripped, kind=kind)


def load_films(path: Path | str, catalog: FilmCatalog) -> int:
    """Add every film in ``path`` to ``catalog``. Returns the number added."""
    added = 0
    for line_number, record in iter_records(path, kind="film"):
        try:
            catalog.add(parse_film(record))
        except CatalogError as exc:
            _log_skip(path, line_number, exc)
            continue
        added += 1

    logger.info("Loaded %s films from %s.", added, path)
    return added


def load_people(path: Path | str, people: PeopleRegistry) -> int:
    added = 0
    for line_number, record in iter_records(path, kind="person"):
        try:
            people.add(parse_person(record))
        except CatalogError as exc:
            _log_skip(path, line_number, exc)
            continue
        added += 1

    logger.info("Loaded %s people from %s.", added, path)
    return added


def load_subscriptions(
    path: Path | str,
    ledger: SubscriptionLedger,
    people: PeopleRegistry,
) -> int:
    """Add subscriptions; owners must already be in ``people``."""
    added = 0
    for line_number, record in iter_records(path, kind="subscription"):
        try:
            ledger.add(people, parse_subscription(record))
        except CatalogError as exc:
            _log_skip(path, line_number, exc)
            continue
        added += 1

    logger.info("Loaded %s subscriptions from %s.", added, path)
    return added


def load_watchlists(
    path: Path | str,
    ledger: SubscriptionLedger,
    catalog: FilmCatalog,
) -> int:
    """Push catalog films onto subscription watchlists.

    Lines are ``subscription_id;film_name`` and are pushed in file order, so
    the last line for a subscription ends up on top of its watchlist.
    """
    pushed = 0
    for line_number, record in iter_records(path, kind="watchlist"):
        try:
            record.expect_fields(NUM_FIELDS_WATCHLIST)
            subscription_id = record.get_int(0)
            film_name = record.get_str(1)
        except CatalogError as exc:
            _log_skip(path, line_number, exc)
            continue

        subscription = ledger.find_by_id(subscription_id)
        film = catalog.find(film_name)
        if subscription is None or film is None:
            logger.warning(
                "Skipping line %d in %s: unknown subscription %s or film %r.",
                line_number,
                path,
                subscription_id,
                film_name,
            )
            continue

        subscription.watchlist.push(film)
        pushed += 1

    logger.info("Pushed %s watchlist entries from %s.", pushed, path)
    return pushed


def _log_skip(path: Path | str, line_number: int, exc: Exception) -> None:
    logger.warning("Skipping line %d in %s: %s", line_number, path, exc)
