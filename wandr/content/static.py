"""Static city-info lookup backed by a bundled JSON table."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from wandr.domain.enums import CrowdLevel
from wandr.domain.models import CityInfo

DATA_FILE = Path(__file__).resolve().parents[1] / "data" / "city_info_v1.json"
_cache: Optional[dict[str, CityInfo]] = None

FALLBACK_CITY_INFO = CityInfo(
    best_for=["Exploration"],
    crowd_level=CrowdLevel.MODERATE,
    best_time="Spring or Fall",
    top_sites=["City Center", "Main Square", "Local Museum", "Historic District"],
    local_tip="Ask locals for their favorite hidden spots",
    avg_days="2-3 days",
    pros=["Unique local culture", "Authentic experiences", "Off the beaten path"],
    cons=["May require more planning", "Limited tourist infrastructure", "Language barriers possible"],
)


def load_city_table() -> dict[str, CityInfo]:
    global _cache
    if _cache is not None:
        return _cache
    with open(DATA_FILE, encoding="utf-8") as f:
        raw = json.load(f)
    _cache = {city: CityInfo(**payload) for city, payload in raw.items()}
    return _cache


def lookup_city(city: str) -> Optional[CityInfo]:
    table = load_city_table()
    info = table.get(city)
    if info is None:
        wanted = city.strip().lower()
        info = next((entry for name, entry in table.items() if name.lower() == wanted), None)
    return info.model_copy(deep=True) if info is not None else None


class StaticCityInfoSource:
    name = "static"

    def get_city_info(self, city: str, country: Optional[str] = None) -> CityInfo:
        return lookup_city(city) or FALLBACK_CITY_INFO.model_copy(deep=True)


__all__ = ["FALLBACK_CITY_INFO", "StaticCityInfoSource", "load_city_table", "lookup_city"]
