# streaming_catalog/io/records.py

"""Parsed records and the one-line text format of films, people and subscriptions.

A record is an ordered list of string fields. Every ``parse_*`` function
consumes a fixed number of fields in a fixed order and raises
``InvalidArgumentError`` when the count or any value is malformed:

    film          name;HH:MM;genre;DD/MM/YYYY;rating;is_free
    person        document;name;surname;phone;email;address;postal_code;DD/MM/YYYY
    subscription  id;document;DD/MM/YYYY;DD/MM/YYYY;plan;price;num_devices

The ``render_*`` functions produce the same layout, which other tooling
reads back, so the numeric formatting must not change.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date, datetime

from streaming_catalog.domain.errors import InvalidArgumentError
from streaming_catalog.domain.models import Duration, Film, Genre, Person, Subscription

SEPARATOR = ";"

NUM_FIELDS_FILM = 6
NUM_FIELDS_PERSON = 8
NUM_FIELDS_SUBSCRIPTION = 7

DATE_LENGTH = 10  # DD/MM/YYYY
TIME_LENGTH = 5  # HH:MM


@dataclass(slots=True)
class Record:
    """One pre-parsed input line."""

    fields: list[str] = field(default_factory=list)
    kind: str | None = None

    @classmethod
    def from_line(
        cls,
        line: str,
        separator: str = SEPARATOR,
        kind: str | None = None,
    ) -> Record:
        line = line.rstrip("\r\n")
        return cls(fields=line.split(separator), kind=kind)

    @property
    def num_fields(self) -> int:
        return len(self.fields)

    def get_str(self, index: int) -> str:
        try:
            return self.fields[index]
        except IndexError as exc:
            msg = f"Record has no field {index} ({self.num_fields} fields)."
            raise InvalidArgumentError(msg) from exc

    def get_fixed(self, index: int, width: int) -> str:
        """Return a field that must be exactly ``width`` characters long."""
        value = self.get_str(index)
        if len(value) != width:
            msg = f"Field {index} must be {width} characters, got {value!r}."
            raise InvalidArgumentError(msg)
        return value

    def get_int(self, index: int) -> int:
        value = self._get_numeric(index)
        try:
            return int(value.strip())
        except ValueError as exc:
            msg = f"Field {index} is not an integer: {value!r}"
            raise InvalidArgumentError(msg) from exc

    def get_float(self, index: int) -> float:
        """Parse a finite real number; nan, inf and digit separators are rejected."""
        value = self._get_numeric(index)
        try:
            number = float(value.strip())
        except ValueError as exc:
            msg = f"Field {index} is not a number: {value!r}"
            raise InvalidArgumentError(msg) from exc
        if not math.isfinite(number):
            msg = f"Field {index} is not a finite number: {value!r}"
            raise InvalidArgumentError(msg)
        return number

    def _get_numeric(self, index: int) -> str:
        value = self.get_str(index)
        if "_" in value:
            msg = f"Field {index} has a digit separator: {value!r}"
            raise InvalidArgumentError(msg)
        return value

    def expect_fields(self, count: int) -> None:
        if self.num_fields != count:
            what = self.kind or "record"
            msg = f"Expected {count} fields for {what}, got {self.num_fields}."
            raise InvalidArgumentError(msg)


# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------


def parse_date(value: str) -> date:
    if len(value) != DATE_LENGTH:
        msg = f"Date must be DD/MM/YYYY, got {value!r}."
        raise InvalidArgumentError(msg)
    try:
        return datetime.strptime(value, "%d/%m/%Y").date()
    except ValueError as exc:
        msg = f"Invalid date: {value!r}"
        raise InvalidArgumentError(msg) from exc


def format_date(value: date) -> str:
    return f"{value.day:02d}/{value.month:02d}/{value.year:04d}"


def parse_duration(value: str) -> Duration:
    if len(value) != TIME_LENGTH or value[2] != ":":
        msg = f"Duration must be HH:MM, got {value!r}."
        raise InvalidArgumentError(msg)
    hours, minutes = value.split(":")
    if not (hours.isdigit() and minutes.isdigit()) or int(minutes) > 59:
        msg = f"Invalid duration: {value!r}"
        raise InvalidArgumentError(msg)
    return Duration(hours=int(hours), minutes=int(minutes))


def format_duration(value: Duration) -> str:
    return f"{value.hours:02d}:{value.minutes:02d}"


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------


def parse_film(record: Record) -> Film:
    record.expect_fields(NUM_FIELDS_FILM)

    name = record.get_str(0)
    duration = parse_duration(record.get_fixed(1, TIME_LENGTH))
    genre = Genre.from_code(record.get_int(2))
    release = parse_date(record.get_fixed(3, DATE_LENGTH))
    rating = record.get_float(4)
    is_free = record.get_int(5)
    if is_free not in (0, 1):
        msg = f"Free flag must be 0 or 1, got {is_free}."
        raise InvalidArgumentError(msg)

    return Film(
        name=name,
        duration=duration,
        genre=genre,
        release=release,
        rating=rating,
        is_free=bool(is_free),
    )


def parse_person(record: Record) -> Person:
    record.expect_fields(NUM_FIELDS_PERSON)
    return Person(
        document=record.get_str(0),
        name=record.get_str(1),
        surname=record.get_str(2),
        phone=record.get_str(3),
        email=record.get_str(4),
        address=record.get_str(5),
        postal_code=record.get_str(6),
        birthday=parse_date(record.get_fixed(7, DATE_LENGTH)),
    )


def parse_subscription(record: Record) -> Subscription:
    """Parse a subscription; the id is kept but the ledger reassigns it."""
    record.expect_fields(NUM_FIELDS_SUBSCRIPTION)
    return Subscription(
        id=record.get_int(0),
        document=record.get_str(1),
        start_date=parse_date(record.get_fixed(2, DATE_LENGTH)),
        end_date=parse_date(record.get_fixed(3, DATE_LENGTH)),
        plan=record.get_str(4),
        price=record.get_float(5),
        num_devices=record.get_int(6),
    )


def render_film(film: Film) -> str:
    return SEPARATOR.join(
        [
            film.name,
            format_duration(film.duration),
            str(int(film.genre)),
            format_date(film.release),
            f"{film.rating:.1f}",
            str(int(film.is_free)),
        ]
    )


def render_person(person: Person) -> str:
    return SEPARATOR.join(
        [
            person.document,
            person.name,
            person.surname,
            person.phone,
            person.email,
            person.address,
            person.postal_code,
            format_date(person.birthday),
        ]
    )


def render_subscription(subscription: Subscription) -> str:
    return SEPARATOR.join(
        [
            str(subscription.id),
            subscription.document,
            format_date(subscription.start_date),
            format_date(subscription.end_date),
            subscription.plan,
            f"{subscription.price:g}",
            str(subscription.num_devices),
        ]
    )
