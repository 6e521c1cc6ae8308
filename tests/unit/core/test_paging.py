"""Unit tests for sort, page request and distance value objects."""

import pytest

from docspec.core.paging import Direction, Distance, Metrics, Order, Pageable, Sort
from docspec.exceptions import ImproperConfigurationError


@pytest.mark.parametrize(("raw", "expected"), [("asc", Direction.ASC), ("DESC", Direction.DESC), (" Asc ", Direction.ASC)])
def test_direction_from_string(raw: str, expected: Direction) -> None:
    assert Direction.from_string(raw) is expected


def test_direction_from_string_rejects_unknown() -> None:
    with pytest.raises(ImproperConfigurationError):
        Direction.from_string("sideways")


def test_order_requires_field_name() -> None:
    with pytest.raises(ImproperConfigurationError):
        Order("")


def test_sort_by_and_document_form() -> None:
    sort = Sort.by("name", "age").and_(Sort(Order("created", Direction.DESC)))

    assert sort.is_sorted
    assert len(sort) == 3
    assert sort.to_document() == {"name": 1, "age": 1, "created": -1}
    assert sort.get_order_for("created") == Order("created", Direction.DESC)
    assert sort.get_order_for("missing") is None


def test_sort_direction_flips() -> None:
    sort = Sort.by("name")

    assert sort.descending().to_document() == {"name": -1}
    assert sort.descending().ascending() == sort


def test_unsorted_is_falsy() -> None:
    assert not Sort.unsorted()
    assert Sort.unsorted() == Sort()


def test_order_ignoring_case_keeps_direction() -> None:
    order = Order("name", Direction.DESC).ignoring_case()

    assert order.ignore_case
    assert not order.is_ascending


def test_pageable_navigation() -> None:
    page = Pageable.of(2, 20, "name")

    assert page.offset == 40
    assert page.next() == Pageable(3, 20, Sort.by("name"))
    assert page.previous_or_first() == Pageable(1, 20, Sort.by("name"))
    assert page.first().offset == 0
    assert Pageable(0, 5).previous_or_first() == Pageable(0, 5)
    assert not Pageable(0, 5).has_previous


@pytest.mark.parametrize(("page", "size"), [(-1, 10), (0, 0)])
def test_pageable_validation(page: int, size: int) -> None:
    with pytest.raises(ImproperConfigurationError):
        Pageable(page, size)


def test_unpaged() -> None:
    unpaged = Pageable.unpaged()

    assert not unpaged.is_paged
    assert unpaged == Pageable.unpaged()
    assert unpaged != Pageable(0, 1)
    assert not unpaged.sort


def test_distance_normalization_and_conversion() -> None:
    distance = Distance(6378.137, Metrics.KILOMETERS)

    assert distance.normalized_value == pytest.approx(1.0)
    assert distance.in_metric(Metrics.MILES).value == pytest.approx(3963.191)
    assert Distance(2.0).metric == Metrics.NEUTRAL


def test_distance_arithmetic_and_ordering() -> None:
    total = Distance(10, Metrics.KILOMETERS) + Distance(6378.137, Metrics.KILOMETERS)

    assert total.value == pytest.approx(6388.137)
    assert total.metric == Metrics.KILOMETERS
    assert Distance(1, Metrics.KILOMETERS) < Distance(1, Metrics.MILES)
    assert Distance(1, Metrics.MILES) <= Distance(1, Metrics.MILES)


def test_unpaged_navigation_stays_unpaged() -> None:
    unpaged = Pageable.unpaged()

    assert unpaged.next() is unpaged
    assert unpaged.first() is unpaged
    assert unpaged.previous_or_first() is unpaged


def test_distance_equality_matches_ordering() -> None:
    kilometers = Distance(6378.137, Metrics.KILOMETERS)
    miles = Distance(3963.191, Metrics.MILES)

    assert kilometers == miles
    assert hash(kilometers) == hash(miles)
    assert kilometers <= miles
    assert not kilometers < miles
    assert kilometers == Distance(1.0)
    assert Distance(1, Metrics.KILOMETERS) != Distance(1, Metrics.MILES)
