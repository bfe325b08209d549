"""Pydantic domain models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from wandr.domain.enums import CrowdLevel, TransportMode


class TripSkeleton(BaseModel):
    """Ordered cities plus a night budget, before days and dates are assigned.

    Values are checked by the allocator rather than here, so a malformed
    skeleton surfaces as ``InvalidInputError`` instead of a pydantic error.
    """

    model_config = ConfigDict(frozen=True)

    cities: tuple[str, ...] = ()
    total_nights: int = 0
    start_date: Optional[str] = None
    min_nights: dict[str, int] = Field(default_factory=dict)
    max_nights: dict[str, int] = Field(default_factory=dict)
    legs: tuple[Optional[TransportMode], ...] = ()


class CityAllocation(BaseModel):
    model_config = ConfigDict(frozen=True)

    city: str
    nights: int
    start_day: int
    end_day: int
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    transport_to_next: Optional[TransportMode] = None


class CityRatings(BaseModel):
    calm: int = Field(ge=1, le=5)
    wow: int = Field(ge=1, le=5)
    history: int = Field(ge=1, le=5)
    friction: int = Field(ge=1, le=5)


class CityHighlight(BaseModel):
    name: str
    description: str = ""


class CityInfo(BaseModel):
    best_for: list[str] = Field(default_factory=list)
    crowd_level: CrowdLevel = CrowdLevel.MODERATE
    best_time: str = ""
    top_sites: list[str] = Field(default_factory=list)
    local_tip: str = ""
    avg_days: str = ""
    pros: list[str] = Field(default_factory=list)
    cons: list[str] = Field(default_factory=list)
    ratings: Optional[CityRatings] = None
    ideal_for: list[str] = Field(default_factory=list)
    highlights: dict[str, list[CityHighlight]] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    error: bool = True
    code: str = "UNKNOWN"
    message: str = ""
    details: list[str] = Field(default_factory=list)
