"""Domain enums."""

from enum import Enum


class TransportMode(str, Enum):
    FLIGHT = "flight"
    TRAIN = "train"
    BUS = "bus"
    CAR = "car"
    FERRY = "ferry"
    OTHER = "other"


class TripPace(str, Enum):
    RELAXED = "relaxed"
    BALANCED = "balanced"
    FAST = "fast"


class AllocationPolicy(str, Enum):
    EQUAL = "equal"
    RECOMMENDED = "recommended"


class CrowdLevel(str, Enum):
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    VERY_HIGH = "Very High"
