"""Domain package exports."""

from wandr.domain.constants import DEFAULT_NIGHTS, PACE_NIGHT_PERCENT, RECOMMENDED_NIGHTS
from wandr.domain.dates import add_days, format_date, parse_date
from wandr.domain.enums import AllocationPolicy, CrowdLevel, TransportMode, TripPace
from wandr.domain.exceptions import (
    ContentUnavailableError,
    DomainError,
    InvalidInputError,
    OverAllocatedError,
)
from wandr.domain.models import (
    CityAllocation,
    CityHighlight,
    CityInfo,
    CityRatings,
    ErrorResponse,
    TripSkeleton,
)

__all__ = [
    "AllocationPolicy",
    "CityAllocation",
    "CityHighlight",
    "CityInfo",
    "CityRatings",
    "ContentUnavailableError",
    "CrowdLevel",
    "DomainError",
    "ErrorResponse",
    "InvalidInputError",
    "OverAllocatedError",
    "TransportMode",
    "TripPace",
    "TripSkeleton",
    "DEFAULT_NIGHTS",
    "PACE_NIGHT_PERCENT",
    "RECOMMENDED_NIGHTS",
    "add_days",
    "format_date",
    "parse_date",
]
