"""Recommended-nights allocation policy.

Weights each city by how long travellers usually stay there (scaled by trip
pace) instead of splitting evenly.
"""

from __future__ import annotations

from typing import Sequence

from wandr.domain.constants import DEFAULT_NIGHTS, PACE_NIGHT_PERCENT, RECOMMENDED_NIGHTS
from wandr.domain.enums import TripPace
from wandr.domain.models import CityAllocation, TripSkeleton
from wandr.planner.allocation import build_allocations, resolve_nights, validate_skeleton


def recommended_nights(city: str, pace: TripPace = TripPace.BALANCED) -> int:
    base = RECOMMENDED_NIGHTS.get(city, DEFAULT_NIGHTS)
    percent = PACE_NIGHT_PERCENT[TripPace(pace)]
    # round half up, at least one night
    return max(1, (base * percent + 50) // 100)


def weighted_split(total: int, weights: Sequence[int]) -> list[int]:
    """Largest-remainder split of ``total`` proportional to ``weights``.

    When there are at least as many nights as cities, each city is reserved
    one night before the proportional share. Ties go to the earlier city.
    """
    count = len(weights)
    reserved = 1 if count <= total else 0
    pool = total - reserved * count
    weight_sum = sum(weights)

    quotas = [divmod(pool * weight, weight_sum) for weight in weights]
    shares = [reserved + quota for quota, _ in quotas]
    leftover = pool - sum(quota for quota, _ in quotas)
    order = sorted(range(count), key=lambda i: (-quotas[i][1], i))
    for i in order[:leftover]:
        shares[i] += 1
    return shares


def allocate_recommended(skeleton: TripSkeleton, pace: TripPace = TripPace.BALANCED) -> list[CityAllocation]:
    validate_skeleton(skeleton)
    weights = [recommended_nights(city, pace) for city in skeleton.cities]
    nights = resolve_nights(skeleton, weighted_split(skeleton.total_nights, weights))
    return build_allocations(skeleton, nights)


__all__ = ["allocate_recommended", "recommended_nights", "weighted_split"]
