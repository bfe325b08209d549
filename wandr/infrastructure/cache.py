"""TTL cache for generated city cards, keyed by city and country."""

from __future__ import annotations

import threading
import time
from typing import Optional

from wandr.domain.models import CityInfo


def city_key(city: str, country: Optional[str] = None) -> str:
    return f"{city.strip().lower()}-{(country or '').strip().lower()}"


class CityInfoCache:
    """Stores copies of cards so callers never share a cached instance."""

    def __init__(self, ttl: float = 24 * 3600.0, max_entries: int = 200):
        self._entries: dict[str, tuple[CityInfo, float]] = {}
        self._ttl = ttl
        self._max_entries = max_entries
        self._lock = threading.Lock()

    def get(self, city: str, country: Optional[str] = None) -> Optional[CityInfo]:
        key = city_key(city, country)
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            info, expires_at = entry
            if time.monotonic() > expires_at:
                del self._entries[key]
                return None
            return info.model_copy(deep=True)

    def set(self, city: str, country: Optional[str], info: CityInfo) -> None:
        key = city_key(city, country)
        now = time.monotonic()
        with self._lock:
            if key not in self._entries and len(self._entries) >= self._max_entries:
                for stale in [k for k, (_, exp) in self._entries.items() if exp < now]:
                    del self._entries[stale]
                if len(self._entries) >= self._max_entries:
                    oldest = min(self._entries, key=lambda k: self._entries[k][1])
                    del self._entries[oldest]
            self._entries[key] = (info.model_copy(deep=True), now + self._ttl)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


city_info_cache = CityInfoCache()
