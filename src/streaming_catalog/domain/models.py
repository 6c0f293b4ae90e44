# streaming_catalog/domain/models.py

"""Core domain models for films, people and subscriptions."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from datetime import date
from enum import IntEnum

from streaming_catalog.domain.errors import InvalidArgumentError
from streaming_catalog.domain.watchlist import Watchlist

RATING_MIN = 0.0
RATING_MAX = 10.0


class Genre(IntEnum):
    """Film genre codes as they appear in the records."""

    ACTION = 0
    ADVENTURE = 1
    ANIMATION = 2
    COMEDY = 3
    DOCUMENTARY = 4
    DRAMA = 5
    HORROR = 6
    SCIENCE_FICTION = 7
    THRILLER = 8

    @classmethod
    def from_code(cls, code: int) -> Genre:
        try:
            return cls(code)
        except ValueError as exc:
            msg = f"Genre code out of range: {code}"
            raise InvalidArgumentError(msg) from exc


@dataclass(slots=True, frozen=True)
class Duration:
    """Running time of a film."""

    hours: int
    minutes: int

    @property
    def total_minutes(self) -> int:
        return self.hours * 60 + self.minutes


@dataclass(slots=True, frozen=True)
class Film:
    """A single film.

    Films are immutable, so sharing an instance between containers is as
    safe as copying it. Two films are equal when name, release date, genre
    and the free flag match; duration and rating are not part of identity.
    """

    name: str
    duration: Duration = field(compare=False)
    genre: Genre
    release: date
    rating: float = field(compare=False)
    is_free: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            msg = "Film name must not be empty."
            raise InvalidArgumentError(msg)
        if not math.isfinite(self.rating) or not RATING_MIN <= self.rating <= RATING_MAX:
            msg = f"Rating {self.rating} outside [{RATING_MIN}, {RATING_MAX}]."
            raise InvalidArgumentError(msg)

    @property
    def minutes(self) -> int:
        return self.duration.total_minutes


@dataclass(slots=True)
class Person:
    """A registered person, keyed by identity document."""

    document: str
    name: str
    surname: str
    phone: str
    email: str
    address: str
    postal_code: str
    birthday: date
    vip_level: int = field(default=0, compare=False)  # derived from spend

    def copy(self) -> Person:
        return replace(self)


@dataclass(slots=True)
class Subscription:
    """A subscription owned by one person, with its own watchlist.

    Equality covers document, dates, plan, price and number of devices.
    The id is assigned by the ledger and the watchlist is content, so
    neither takes part in it.
    """

    id: int = field(compare=False)
    document: str
    start_date: date
    end_date: date
    plan: str
    price: float
    num_devices: int
    watchlist: Watchlist = field(default_factory=Watchlist, compare=False)

    def __post_init__(self) -> None:
        if not math.isfinite(self.price) or self.price < 0:
            msg = f"Subscription price must be a finite number >= 0, got {self.price}."
            raise InvalidArgumentError(msg)
        if self.num_devices < 1:
            msg = f"Subscription needs at least one device, got {self.num_devices}."
            raise InvalidArgumentError(msg)

    def copy(self) -> Subscription:
        """Return an independent copy, watchlist included."""
        return replace(self, watchlist=self.watchlist.copy())
