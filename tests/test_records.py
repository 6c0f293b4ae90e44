from __future__ import annotations

from datetime import date

import pytest

from streaming_catalog.domain.errors import InvalidArgumentError
from streaming_catalog.domain.models import Duration, Genre
from streaming_catalog.io.records import (
    Record,
    parse_film,
    parse_person,
    parse_subscription,
    render_film,
    render_person,
    render_subscription,
)


def test_record_helpers() -> None:
    record = Record.from_line("7; 2.5 ;abc\n", kind="test")
    assert record.num_fields == 3
    assert record.get_int(0) == 7
    assert record.get_float(1) == 2.5
    assert record.get_str(2) == "abc"
    assert record.get_fixed(2, 3) == "abc"

    with pytest.raises(InvalidArgumentError):
        record.get_int(2)
    with pytest.raises(InvalidArgumentError):
        record.get_fixed(2, 4)
    with pytest.raises(InvalidArgumentError):
        record.get_str(5)


def test_parse_film() -> None:
    film = parse_film(Record.from_line("Interstellar;02:49;7;07/11/2014;8.6;1"))

    assert film.name == "Interstellar"
    assert film.duration == Duration(2, 49)
    assert film.genre is Genre.SCIENCE_FICTION
    assert film.release == date(2014, 11, 7)
    assert film.rating == pytest.approx(8.6)
    assert film.is_free is True


def test_render_film_format() -> None:
    film = parse_film(Record.from_line("Mad Max: Fury Road;02:00;0;15/05/2015;8;0"))
    assert render_film(film) == "Mad Max: Fury Road;02:00;0;15/05/2015;8.0;0"


@pytest.mark.parametrize(
    "line",
    [
        "Too;few;fields",
        "Name;2:49;7;07/11/2014;8.6;1",
        "Name;02:49;99;07/11/2014;8.6;1",
        "Name;02:49;7;7/11/2014;8.6;1",
        "Name;02:49;7;31/02/2014;8.6;1",
        "Name;02:49;7;07/11/2014;11.0;1",
        "Name;02:49;7;07/11/2014;8.6;2",
        "Name;02:49;7;07/11/2014;high;1",
        "Name;02:49;7;07/11/2014;nan;1",
        "Name;02:49;1_0;07/11/2014;8.6;1",
    ],
)
def test_parse_film_rejects_malformed(line: str) -> None:
    with pytest.raises(InvalidArgumentError):
        parse_film(Record.from_line(line))


def test_parse_and_render_person() -> None:
    line = "98765432J;Marie;Curie;+33123456;marie.curie@example.com;Rue Pierre 1;75005;07/11/1867"
    person = parse_person(Record.from_line(line))

    assert person.document == "98765432J"
    assert person.postal_code == "75005"
    assert person.birthday == date(1867, 11, 7)
    assert person.vip_level == 0
    assert render_person(person) == line


def test_parse_person_wrong_field_count() -> None:
    with pytest.raises(InvalidArgumentError):
        parse_person(Record.from_line("98765432J;Marie;Curie"))


def test_parse_subscription() -> None:
    sub = parse_subscription(
        Record.from_line("3;47051307Z;01/01/2025;31/12/2025;Premium;29.95;3")
    )

    assert sub.id == 3
    assert sub.document == "47051307Z"
    assert sub.start_date == date(2025, 1, 1)
    assert sub.end_date == date(2025, 12, 31)
    assert sub.plan == "Premium"
    assert sub.price == pytest.approx(29.95)
    assert sub.num_devices == 3
    assert len(sub.watchlist) == 0


@pytest.mark.parametrize(
    "line",
    [
        "1;47051307Z;01/01/2025;31/12/2025;Premium;-1;3",
        "1;47051307Z;01/01/2025;31/12/2025;Premium;10;0",
        "1;47051307Z;01/01/2025;31/12/2025;Premium;10",
        "1;47051307Z;01/01/2025;31/12/2025;Premium;nan;1",
        "1;47051307Z;01/01/2025;31/12/2025;Premium;inf;1",
        "1;47051307Z;01/01/2025;31/12/2025;Premium;1_0;1",
        "1;47051307Z;01/01/2025;31/12/2025;Premium;10;1_0",
    ],
)
def test_parse_subscription_rejects_malformed(line: str) -> None:
    with pytest.raises(InvalidArgumentError):
        parse_subscription(Record.from_line(line))


@pytest.mark.parametrize(
    "line",
    [
        "1;47051307Z;01/01/2025;31/12/2025;Premium;29.95;3",
        "12;X1;29/02/2024;01/03/2024;Basic Plan;0;1",
        "2;Y2;05/06/2023;05/06/2024;Family;1234.5;6",
    ],
)
def test_subscription_render_round_trip(line: str) -> None:
    sub = parse_subscription(Record.from_line(line))
    rendered = render_subscription(sub)
    again = parse_subscription(Record.from_line(rendered))

    assert rendered == line
    assert again == sub
    assert again.id == sub.id


@pytest.mark.parametrize("value", ["nan", "inf", "-inf", "1_000.5"])
def test_get_float_rejects_non_finite_and_separators(value: str) -> None:
    with pytest.raises(InvalidArgumentError):
        Record.from_line(f"x;{value}").get_float(1)


def test_get_int_rejects_digit_separator() -> None:
    with pytest.raises(InvalidArgumentError):
        Record.from_line("1_0").get_int(0)
