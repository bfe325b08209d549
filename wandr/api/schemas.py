"""API request/response models."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field

from wandr.domain.enums import AllocationPolicy, TransportMode, TripPace
from wandr.domain.models import CityAllocation, TripSkeleton


class AllocateRequest(BaseModel):
    cities: list[str] = Field(default_factory=list, description="Cities in visiting order")
    total_nights: int = Field(description="Night budget for the whole trip")
    start_date: Optional[str] = Field(default=None, description="Trip start date, YYYY-MM-DD")
    min_nights: dict[str, int] = Field(default_factory=dict)
    max_nights: dict[str, int] = Field(default_factory=dict)
    legs: list[Optional[TransportMode]] = Field(
        default_factory=list,
        description="Transport mode of each leg; legs[i] leaves cities[i]",
    )
    policy: AllocationPolicy = Field(default=AllocationPolicy.EQUAL)
    pace: TripPace = Field(default=TripPace.BALANCED)

    def to_skeleton(self) -> TripSkeleton:
        return TripSkeleton(
            cities=tuple(self.cities),
            total_nights=self.total_nights,
            start_date=self.start_date,
            min_nights=self.min_nights,
            max_nights=self.max_nights,
            legs=tuple(self.legs),
        )


class AllocateResponse(BaseModel):
    policy: AllocationPolicy
    total_nights: int
    allocations: list[CityAllocation] = Field(default_factory=list)
    trace_id: str = Field(default="")


class GenerateItineraryRequest(BaseModel):
    city: str = ""
    nights: int = 0
    payload: dict[str, Any] = Field(default_factory=dict)


class HealthResponse(BaseModel):
    status: str = "ok"
