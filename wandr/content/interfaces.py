"""Content source protocol."""

from __future__ import annotations

from typing import Callable, Optional, Protocol, runtime_checkable

from wandr.domain.models import CityInfo

CityInfoGenerator = Callable[[str, Optional[str]], CityInfo]


@runtime_checkable
class CityInfoSource(Protocol):
    name: str

    def get_city_info(self, city: str, country: Optional[str] = None) -> CityInfo: ...


__all__ = ["CityInfoGenerator", "CityInfoSource"]
