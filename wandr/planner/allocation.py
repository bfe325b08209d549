"""Day allocation: split a trip's night budget across its ordered cities.

Default policy is an equal split with the remainder front-loaded: every city
gets ``total // count`` nights and the first ``total % count`` cities get one
more. Per-city minimum and maximum hints reshape that split only when the
equal split would break them.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from wandr.domain.dates import add_days, parse_date
from wandr.domain.exceptions import InvalidInputError, OverAllocatedError
from wandr.domain.models import CityAllocation, TripSkeleton

_logger = logging.getLogger("wandr.planner")


def equal_split(total: int, count: int) -> list[int]:
    base, remainder = divmod(total, count)
    return [base + 1 if i < remainder else base for i in range(count)]


def _check_hints(label: str, hints: dict[str, int], cities: Sequence[str]) -> None:
    known = set(cities)
    for city, value in hints.items():
        if city not in known:
            raise InvalidInputError(f"{label} given for a city that is not in the trip: {city}")
        if value < 0:
            raise InvalidInputError(f"{label} for {city} must not be negative")


def validate_skeleton(skeleton: TripSkeleton) -> None:
    cities = skeleton.cities
    if not cities:
        raise InvalidInputError("A trip needs at least one city")
    if any(not city.strip() for city in cities):
        raise InvalidInputError("City names must not be blank")
    if skeleton.total_nights < 0:
        raise InvalidInputError(f"total_nights must not be negative: {skeleton.total_nights}")
    if skeleton.start_date is not None:
        parse_date(skeleton.start_date)

    _check_hints("min_nights", skeleton.min_nights, cities)
    _check_hints("max_nights", skeleton.max_nights, cities)
    for city, low in skeleton.min_nights.items():
        high = skeleton.max_nights.get(city)
        if high is not None and low > high:
            raise InvalidInputError(f"min_nights for {city} ({low}) exceeds max_nights ({high})")

    if len(skeleton.legs) > len(cities) - 1:
        raise InvalidInputError(
            f"{len(skeleton.legs)} legs given for {len(cities)} cities (at most {len(cities) - 1})"
        )


def _within_hints(skeleton: TripSkeleton, nights: Sequence[int]) -> bool:
    for city, count in zip(skeleton.cities, nights):
        if count < skeleton.min_nights.get(city, 0):
            return False
        cap = skeleton.max_nights.get(city)
        if cap is not None and count > cap:
            return False
    return True


def _apply_caps(cities: Sequence[str], nights: list[int], caps: dict[str, int]) -> list[int]:
    capped = list(nights)
    overflow = 0
    for i, city in enumerate(cities):
        cap = caps.get(city)
        if cap is not None and capped[i] > cap:
            overflow += capped[i] - cap
            capped[i] = cap

    while overflow:
        open_slots = [i for i, city in enumerate(cities) if city not in caps or capped[i] < caps[city]]
        if not open_slots:
            raise OverAllocatedError(
                f"{sum(capped) + overflow} nights do not fit under the per-city maximums ({sum(capped)})"
            )
        for i in open_slots:
            if not overflow:
                break
            capped[i] += 1
            overflow -= 1
    return capped


def _hinted_split(skeleton: TripSkeleton) -> list[int]:
    cities = skeleton.cities
    total = skeleton.total_nights
    mins = skeleton.min_nights
    caps = skeleton.max_nights

    floors = [mins.get(city, 0) for city in cities]
    pool = total - sum(floors)
    nights = [floor + extra for floor, extra in zip(floors, equal_split(pool, len(cities)))]
    if len(cities) <= total:
        _fill_empty_cities(cities, nights, mins)
    return _apply_caps(cities, nights, caps)


def _fill_empty_cities(cities: Sequence[str], nights: list[int], mins: dict[str, int]) -> None:
    """Give each city left at zero without an explicit minimum one night, front to back.

    The night comes from the city with the most nights above its own floor
    (earliest on ties). Cities stay at zero once no city has a night to spare.
    """
    for i, city in enumerate(cities):
        if nights[i] or city in mins:
            continue
        spare = [n - mins.get(c, 1) for c, n in zip(cities, nights)]
        donor = max(range(len(cities)), key=lambda j: (spare[j], -j))
        if spare[donor] <= 0:
            return
        nights[donor] -= 1
        nights[i] += 1


def resolve_nights(skeleton: TripSkeleton, preferred: Optional[Sequence[int]] = None) -> list[int]:
    """Return per-city nights, keeping ``preferred`` (equal split by default) when it meets every hint."""
    cities = skeleton.cities
    total = skeleton.total_nights
    required = sum(skeleton.min_nights.get(city, 0) for city in cities)
    if required > total:
        raise OverAllocatedError(f"Per-city minimums need {required} nights but the trip has {total}")

    nights = list(preferred) if preferred is not None else equal_split(total, len(cities))
    if _within_hints(skeleton, nights):
        return nights
    return _hinted_split(skeleton)


def build_allocations(skeleton: TripSkeleton, nights: Sequence[int]) -> list[CityAllocation]:
    cities = skeleton.cities
    last = len(cities) - 1
    allocations: list[CityAllocation] = []
    day = 0
    for i, (city, count) in enumerate(zip(cities, nights)):
        start_day, end_day = day, day + count
        leg = skeleton.legs[i] if i < last and i < len(skeleton.legs) else None
        allocations.append(
            CityAllocation(
                city=city,
                nights=count,
                start_day=start_day,
                end_day=end_day,
                start_date=add_days(skeleton.start_date, start_day) if skeleton.start_date else None,
                end_date=add_days(skeleton.start_date, end_day) if skeleton.start_date else None,
                transport_to_next=leg,
            )
        )
        day = end_day
    return allocations


def allocate(skeleton: TripSkeleton) -> list[CityAllocation]:
    validate_skeleton(skeleton)
    nights = resolve_nights(skeleton)
    _logger.debug("allocated %s nights across %s cities: %s", skeleton.total_nights, len(nights), nights)
    return build_allocations(skeleton, nights)


__all__ = [
    "allocate",
    "build_allocations",
    "equal_split",
    "resolve_nights",
    "validate_skeleton",
]
