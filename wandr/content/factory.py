"""Concrete content source selection."""

from __future__ import annotations

import logging
from typing import Optional

from wandr.config.settings import Settings
from wandr.content.disabled import DisabledCityInfoSource
from wandr.content.generated import GeneratedCityInfoSource, HttpCityInfoGenerator
from wandr.content.interfaces import CityInfoGenerator, CityInfoSource
from wandr.content.static import StaticCityInfoSource

_logger = logging.getLogger("wandr.content")


def get_city_info_source(
    settings: Settings,
    *,
    generator: Optional[CityInfoGenerator] = None,
) -> CityInfoSource:
    mode = settings.city_info_source
    if mode == "disabled":
        return DisabledCityInfoSource()
    if mode == "generated":
        if generator is None and settings.city_info_generator_url:
            generator = HttpCityInfoGenerator(
                settings.city_info_generator_url,
                timeout_ms=settings.http_timeout_ms,
            )
        if generator is not None:
            return GeneratedCityInfoSource(generator)
        _logger.warning("CITY_INFO_SOURCE=generated but no generator is configured, fallback to static")
    return StaticCityInfoSource()


__all__ = ["get_city_info_source"]
