"""Day allocator tests."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from wandr.domain.enums import TransportMode
from wandr.domain.exceptions import InvalidInputError, OverAllocatedError
from wandr.domain.models import TripSkeleton
from wandr.planner.allocation import allocate, equal_split


def _skeleton(cities, nights, **extra) -> TripSkeleton:
    return TripSkeleton(cities=tuple(cities), total_nights=nights, **extra)


def _nights(allocations) -> list[int]:
    return [a.nights for a in allocations]


def _days(allocations) -> list[tuple[int, int]]:
    return [(a.start_day, a.end_day) for a in allocations]


def _assert_invariants(allocations, total: int) -> None:
    assert sum(_nights(allocations)) == total
    assert allocations[0].start_day == 0
    assert allocations[-1].end_day == total
    for prev, cur in zip(allocations, allocations[1:]):
        assert cur.start_day == prev.end_day
    for item in allocations:
        assert item.nights >= 0
        assert item.end_day == item.start_day + item.nights


def test_equal_split_front_loads_remainder():
    assert equal_split(10, 3) == [4, 3, 3]
    assert equal_split(11, 3) == [4, 4, 3]
    assert equal_split(2, 4) == [1, 1, 0, 0]


def test_three_cities_ten_nights():
    result = allocate(_skeleton(["Tokyo", "Kyoto", "Osaka"], 10))

    assert [a.city for a in result] == ["Tokyo", "Kyoto", "Osaka"]
    assert _nights(result) == [4, 3, 3]
    assert _days(result) == [(0, 4), (4, 7), (7, 10)]
    assert all(a.start_date is None and a.end_date is None for a in result)


def test_single_city_takes_all_nights():
    result = allocate(_skeleton(["Paris"], 5))

    assert _nights(result) == [5]
    assert _days(result) == [(0, 5)]


def test_more_cities_than_nights_leaves_trailing_zero_nights():
    result = allocate(_skeleton(["A", "B", "C", "D"], 2))

    assert _nights(result) == [1, 1, 0, 0]
    assert _days(result) == [(0, 1), (1, 2), (2, 2), (2, 2)]


def test_zero_nights_gives_all_zero_offsets():
    result = allocate(_skeleton(["Rome", "Florence", "Venice"], 0))

    assert _nights(result) == [0, 0, 0]
    assert all(a.start_day == 0 and a.end_day == 0 for a in result)


def test_minimums_exceeding_budget_are_rejected():
    with pytest.raises(OverAllocatedError):
        allocate(_skeleton(["Tokyo", "Kyoto"], 8, min_nights={"Tokyo": 5, "Kyoto": 5}))


def test_start_date_derives_calendar_dates():
    result = allocate(_skeleton(["Tokyo", "Kyoto", "Osaka"], 10, start_date="2025-06-01"))

    assert [(a.start_date, a.end_date) for a in result] == [
        ("2025-06-01", "2025-06-05"),
        ("2025-06-05", "2025-06-08"),
        ("2025-06-08", "2025-06-11"),
    ]


def test_dates_cross_month_boundary():
    result = allocate(_skeleton(["Lisbon", "Porto"], 5, start_date="2025-01-29"))

    assert result[0].end_date == "2025-02-01"
    assert result[1].start_date == "2025-02-01"
    assert result[1].end_date == "2025-02-03"


def test_invariants_hold_across_budgets():
    for count in range(1, 7):
        cities = [f"City{i}" for i in range(count)]
        for total in range(0, 16):
            result = allocate(_skeleton(cities, total))
            _assert_invariants(result, total)
            if count <= total:
                assert min(_nights(result)) >= 1


def test_allocation_is_deterministic():
    skeleton = _skeleton(["Hanoi", "Hue", "Hoi An", "Da Nang"], 11, start_date="2025-03-10")

    assert allocate(skeleton) == allocate(skeleton)


def test_repeated_city_keeps_visiting_order():
    result = allocate(_skeleton(["Tokyo", "Kyoto", "Tokyo"], 7))

    assert [a.city for a in result] == ["Tokyo", "Kyoto", "Tokyo"]
    assert _nights(result) == [3, 2, 2]


def test_legs_attach_to_departing_city():
    result = allocate(
        _skeleton(
            ["Tokyo", "Kyoto", "Osaka"],
            10,
            legs=(TransportMode.TRAIN, TransportMode.FLIGHT),
        )
    )

    assert [a.transport_to_next for a in result] == [TransportMode.TRAIN, TransportMode.FLIGHT, None]


def test_partial_legs_leave_rest_unset():
    result = allocate(_skeleton(["Bangkok", "Chiang Mai", "Phuket"], 9, legs=(None, "ferry")))

    assert [a.transport_to_next for a in result] == [None, TransportMode.FERRY, None]


def test_legs_do_not_change_day_math():
    plain = allocate(_skeleton(["Athens", "Santorini"], 6))
    with_legs = allocate(_skeleton(["Athens", "Santorini"], 6, legs=(TransportMode.FERRY,)))

    assert _days(plain) == _days(with_legs)


def test_minimum_reshapes_split_when_equal_share_is_too_small():
    result = allocate(_skeleton(["Tokyo", "Kyoto", "Osaka"], 10, min_nights={"Tokyo": 5}))

    assert _nights(result) == [7, 2, 1]
    _assert_invariants(result, 10)


def test_minimum_of_one_matches_implicit_share():
    result = allocate(_skeleton(["Tokyo", "Kyoto", "Osaka"], 10, min_nights={"Tokyo": 5, "Kyoto": 1}))

    assert _nights(result) == [7, 2, 1]


def test_empty_city_borrows_night_from_largest_surplus():
    result = allocate(_skeleton(["A", "B", "C", "D"], 7, min_nights={"A": 3, "B": 3}))

    assert _nights(result) == [3, 3, 1, 0]
    _assert_invariants(result, 7)


def test_every_unconstrained_city_gets_a_night_when_budget_allows():
    result = allocate(_skeleton(["A", "B", "C", "D"], 8, min_nights={"A": 3, "B": 3}))

    assert _nights(result) == [3, 3, 1, 1]


def test_minimum_already_met_keeps_equal_split():
    result = allocate(_skeleton(["Tokyo", "Kyoto", "Osaka"], 10, min_nights={"Kyoto": 2}))

    assert _nights(result) == [4, 3, 3]


def test_minimums_equal_to_budget_are_allowed():
    result = allocate(_skeleton(["Tokyo", "Kyoto"], 8, min_nights={"Tokyo": 5, "Kyoto": 3}))

    assert _nights(result) == [5, 3]


def test_short_budget_gives_implicit_floors_front_to_back():
    result = allocate(_skeleton(["A", "B", "C"], 5, min_nights={"A": 4}))

    assert _nights(result) == [4, 1, 0]


def test_explicit_zero_minimum_marks_waypoint():
    result = allocate(_skeleton(["Rome", "Orvieto", "Florence"], 6, min_nights={"Rome": 5, "Orvieto": 0}))

    assert _nights(result) == [5, 0, 1]
    _assert_invariants(result, 6)


def test_maximum_moves_overflow_to_next_open_city():
    result = allocate(_skeleton(["Tokyo", "Kyoto", "Osaka"], 10, max_nights={"Tokyo": 3}))

    assert _nights(result) == [3, 4, 3]
    _assert_invariants(result, 10)


def test_maximums_that_cannot_absorb_budget_are_rejected():
    with pytest.raises(OverAllocatedError):
        allocate(_skeleton(["A", "B"], 3, max_nights={"A": 1, "B": 1}))


def test_minimum_and_maximum_together():
    result = allocate(
        _skeleton(
            ["Paris", "Nice", "Lyon"],
            12,
            min_nights={"Nice": 5},
            max_nights={"Paris": 3},
        )
    )

    nights = _nights(result)
    assert nights[0] <= 3
    assert nights[1] >= 5
    _assert_invariants(result, 12)


@pytest.mark.parametrize(
    "skeleton",
    [
        _skeleton([], 5),
        _skeleton(["Tokyo", "  "], 5),
        _skeleton(["Tokyo"], -1),
        _skeleton(["Tokyo"], 3, start_date="2025-02-30"),
        _skeleton(["Tokyo"], 3, start_date="06/01/2025"),
        _skeleton(["Tokyo"], 3, min_nights={"Kyoto": 1}),
        _skeleton(["Tokyo"], 3, max_nights={"Tokyo": -1}),
        _skeleton(["Tokyo", "Kyoto"], 6, min_nights={"Tokyo": 4}, max_nights={"Tokyo": 2}),
        _skeleton(["Tokyo", "Kyoto"], 6, legs=(TransportMode.TRAIN, TransportMode.TRAIN)),
    ],
)
def test_invalid_skeletons_are_rejected(skeleton):
    with pytest.raises(InvalidInputError):
        allocate(skeleton)


def test_skeleton_and_allocations_are_immutable():
    skeleton = _skeleton(["Tokyo"], 3)
    result = allocate(skeleton)

    with pytest.raises(ValidationError):
        skeleton.total_nights = 4
    with pytest.raises(ValidationError):
        result[0].nights = 1
