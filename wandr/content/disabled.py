"""Content source used while city-info generation is switched off."""

from __future__ import annotations

from typing import Optional

from wandr.domain.exceptions import ContentUnavailableError
from wandr.domain.models import CityInfo


class DisabledCityInfoSource:
    name = "disabled"

    def get_city_info(self, city: str, country: Optional[str] = None) -> CityInfo:
        raise ContentUnavailableError("city info")


__all__ = ["DisabledCityInfoSource"]
