"""Generated city info: static table first, then a pluggable generator."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from wandr.content.interfaces import CityInfoGenerator
from wandr.content.static import FALLBACK_CITY_INFO, lookup_city
from wandr.domain.models import CityInfo
from wandr.infrastructure.cache import CityInfoCache, city_info_cache
from wandr.infrastructure.http_client import API_TIMEOUTS, fetch_with_timeout
from wandr.infrastructure.logging import debug
from wandr.shared.exceptions import ExternalServiceError

_logger = logging.getLogger("wandr.content")


class HttpCityInfoGenerator:
    """Asks a remote generation service for a city card."""

    def __init__(
        self,
        url: str,
        *,
        timeout_ms: int = API_TIMEOUTS["DEFAULT"],
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._url = url
        self._timeout_ms = timeout_ms
        self._transport = transport

    def __call__(self, city: str, country: Optional[str] = None) -> CityInfo:
        resp = fetch_with_timeout(
            self._url,
            method="POST",
            json={"city": city, "country": country},
            timeout_ms=self._timeout_ms,
            service="city_info_generator",
            transport=self._transport,
        )
        if resp.status_code >= 400:
            raise ExternalServiceError("city_info_generator", f"HTTP {resp.status_code}")
        return CityInfo.model_validate(resp.json())


class GeneratedCityInfoSource:
    name = "generated"

    def __init__(self, generator: CityInfoGenerator, *, cache: Optional[CityInfoCache] = None):
        self._generator = generator
        self._cache = cache if cache is not None else city_info_cache

    def get_city_info(self, city: str, country: Optional[str] = None) -> CityInfo:
        known = lookup_city(city)
        if known is not None:
            return known

        cached = self._cache.get(city, country)
        if cached is not None:
            debug("city info cache hit: %s (%s)", city, country)
            return cached

        try:
            info = self._generator(city, country)
        except (ExternalServiceError, ValueError) as exc:
            # ValueError covers bad JSON and pydantic validation failures.
            _logger.warning("city info generation failed for %s, using fallback: %s", city, exc)
            return FALLBACK_CITY_INFO.model_copy(deep=True)

        self._cache.set(city, country, info)
        return info


__all__ = ["GeneratedCityInfoSource", "HttpCityInfoGenerator"]
