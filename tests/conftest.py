"""Shared factories for films, people and subscriptions."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

import pytest

from streaming_catalog.domain.models import Duration, Film, Genre, Person, Subscription
from streaming_catalog.store.people import PeopleRegistry


@pytest.fixture
def make_film() -> Callable[..., Film]:
    def _make(
        name: str,
        release: date = date(2020, 1, 1),
        *,
        is_free: bool = False,
        hours: int = 1,
        minutes: int = 30,
        rating: float = 7.0,
        genre: Genre = Genre.DRAMA,
    ) -> Film:
        return Film(
            name=name,
            duration=Duration(hours=hours, minutes=minutes),
            genre=genre,
            release=release,
            rating=rating,
            is_free=is_free,
        )

    return _make


@pytest.fixture
def make_person() -> Callable[..., Person]:
    def _make(document: str, email: str | None = None) -> Person:
        return Person(
            document=document,
            name="Ada",
            surname="Lovelace",
            phone="600000000",
            email=email or f"{document.lower()}@example.com",
            address="Main Street 1",
            postal_code="08001",
            birthday=date(1990, 5, 17),
        )

    return _make


@pytest.fixture
def make_subscription() -> Callable[..., Subscription]:
    def _make(
        document: str,
        price: float = 29.95,
        *,
        plan: str = "Standard",
        start: date = date(2024, 1, 1),
        end: date = date(2024, 12, 31),
        num_devices: int = 2,
    ) -> Subscription:
        return Subscription(
            id=0,
            document=document,
            start_date=start,
            end_date=end,
            plan=plan,
            price=price,
            num_devices=num_devices,
        )

    return _make


@pytest.fixture
def people(make_person: Callable[..., Person]) -> PeopleRegistry:
    registry = PeopleRegistry()
    registry.add(make_person("X1"))
    registry.add(make_person("Y2"))
    return registry
