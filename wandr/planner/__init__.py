"""Itinerary day planning."""

from wandr.planner.allocation import allocate, equal_split
from wandr.planner.recommended import allocate_recommended, recommended_nights

__all__ = ["allocate", "allocate_recommended", "equal_split", "recommended_nights"]
