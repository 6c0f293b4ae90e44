# streaming_catalog/cli.py

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from streaming_catalog.config import (
    FILMS_FILE,
    PEOPLE_FILE,
    SUBSCRIPTIONS_FILE,
    WATCHLISTS_FILE,
    get_data_dir,
    get_log_level,
)
from streaming_catalog.domain.errors import CatalogError
from streaming_catalog.io.loader import (
    load_films,
    load_people,
    load_subscriptions,
    load_watchlists,
)
from streaming_catalog.io.records import render_film, render_subscription
from streaming_catalog.store.film_catalog import FilmCatalog
from streaming_catalog.store.people import PeopleRegistry
from streaming_catalog.store.subscriptions import SubscriptionLedger

logger = logging.getLogger(__name__)


class FilmOrder(str, Enum):
    INSERTION = "insertion"
    YEAR = "year"
    RATING = "rating"


class PeopleOrder(str, Enum):
    INSERTION = "insertion"
    VIP = "vip"
    DOCUMENT = "document"


@dataclass(slots=True)
class Dataset:
    """Everything loaded from one data directory."""

    catalog: FilmCatalog
    people: PeopleRegistry
    ledger: SubscriptionLedger


def main(argv: list[str] | None = None) -> None:
    """Entry point for the streaming-catalog CLI."""
    args = _build_arg_parser().parse_args(argv)

    _configure_logging(verbose=args.verbose)

    data_dir = Path(args.data_dir) if args.data_dir else get_data_dir()

    try:
        dataset = load_dataset(data_dir)
        if args.command == "films":
            _cmd_films(dataset, order=FilmOrder(args.sort), free_only=args.free)
        elif args.command == "people":
            _cmd_people(dataset, order=PeopleOrder(args.sort))
        elif args.command == "subscriptions":
            _cmd_subscriptions(dataset, document=args.document)
        elif args.command == "stats":
            _cmd_stats(dataset)
        else:
            msg = f"Unknown command: {args.command}"
            raise ValueError(msg)
    except (CatalogError, FileNotFoundError) as exc:
        logger.error("%s", exc)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user. Exiting.")
        sys.exit(1)


def load_dataset(data_dir: Path) -> Dataset:
    """Load films, people, subscriptions and (if present) watchlists."""
    catalog = FilmCatalog()
    people = PeopleRegistry()
    ledger = SubscriptionLedger()

    load_films(data_dir / FILMS_FILE, catalog)
    load_people(data_dir / PEOPLE_FILE, people)
    load_subscriptions(data_dir / SUBSCRIPTIONS_FILE, ledger, people)

    watchlists_path = data_dir / WATCHLISTS_FILE
    if watchlists_path.exists():
        load_watchlists(watchlists_path, ledger, catalog)
    else:
        logger.debug("No watchlists file at %s.", watchlists_path)

    ledger.update_vip_levels(people)
    return Dataset(catalog=catalog, people=people, ledger=ledger)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="streaming-catalog",
        description="Query films, people and subscriptions loaded from record files.",
    )

    parser.add_argument(
        "--data-dir",
        default=None,
        help="Directory with the record files (default: STREAMING_CATALOG_DATA_DIR or ./data).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging.",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        help="Sub-command to run.",
    )

    films_parser = subparsers.add_parser("films", help="List the film catalog.")
    films_parser.add_argument(
        "--sort",
        choices=[o.value for o in FilmOrder],
        default=FilmOrder.INSERTION.value,
        help="Film order (default: %(default)s).",
    )
    films_parser.add_argument(
        "--free",
        action="store_true",
        help="Only list free films.",
    )

    people_parser = subparsers.add_parser(
        "people",
        help="List people with their VIP level.",
    )
    people_parser.add_argument(
        "--sort",
        choices=[o.value for o in PeopleOrder],
        default=PeopleOrder.INSERTION.value,
        help="People order (default: %(default)s).",
    )

    subs_parser = subparsers.add_parser(
        "subscriptions",
        help="List subscriptions, optionally for one person.",
    )
    subs_parser.add_argument(
        "--document",
        default=None,
        help="Only list subscriptions owned by this document.",
    )

    subparsers.add_parser("stats", help="Print catalog and ledger statistics.")

    return parser


def _configure_logging(*, verbose: bool) -> None:
    level = logging.DEBUG if verbose else get_log_level()
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _cmd_films(dataset: Dataset, *, order: FilmOrder, free_only: bool) -> None:
    catalog = dataset.catalog
    if order is FilmOrder.YEAR:
        catalog.sort_by_year()
    elif order is FilmOrder.RATING:
        catalog.sort_by_rating()

    films = catalog.free_films() if free_only else catalog.films()
    for film in films:
        print(render_film(film))


def _cmd_people(dataset: Dataset, *, order: PeopleOrder) -> None:
    people = dataset.people
    if order is PeopleOrder.VIP:
        people.sort_by_vip_level()
    elif order is PeopleOrder.DOCUMENT:
        people.sort_by_document()

    for line, person in zip(people.render_lines(), people):
        print(f"{line};{person.vip_level}")


def _cmd_subscriptions(dataset: Dataset, *, document: str | None) -> None:
    if document is None:
        for line in dataset.ledger.render_lines():
            print(line)
        return

    if document not in dataset.people:
        logger.warning("Document %r is not registered.", document)
    for subscription in dataset.ledger.find_by_document(document):
        print(render_subscription(subscription))


def _cmd_stats(dataset: Dataset) -> None:
    catalog = dataset.catalog
    ledger = dataset.ledger

    longest = catalog.longest_film()
    oldest = catalog.oldest_film()
    oldest_free = catalog.oldest_film(free_only=True)
    popular = ledger.most_popular_film()

    print(f"films: {catalog.total_count()} ({catalog.free_count()} free)")
    print(f"people: {len(dataset.people)}")
    print(f"subscriptions: {len(ledger)}")
    print(f"longest film: {longest.name if longest else '-'}")
    print(f"oldest film: {oldest.name if oldest else '-'}")
    print(f"oldest free film: {oldest_free.name if oldest_free else '-'}")
    print(f"most popular film: {popular or '-'}")
    for person in dataset.people:
        print(f"vip: {person.document};{person.vip_level}")


if __name__ == "__main__":
    # python -m streaming_catalog.cli --data-dir data stats
    main()
