"""Runtime settings snapshot resolved from the environment."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

_TRUTHY = {"1", "true", "yes", "on"}
_CITY_INFO_SOURCES = {"static", "disabled", "generated"}


def _is_enabled(value: str | None) -> bool:
    return bool(value and value.strip().lower() in _TRUTHY)


def _is_configured(value: str | None) -> bool:
    return bool(value and value.strip())


def resolve_environment() -> str:
    return str(os.getenv("WANDR_ENV") or "development").strip().lower() or "development"


def is_production() -> bool:
    return resolve_environment() == "production"


def resolve_city_info_source() -> str:
    mode = str(os.getenv("CITY_INFO_SOURCE") or "").strip().lower()
    if mode in _CITY_INFO_SOURCES:
        return mode
    return "static"


def resolve_http_timeout_ms() -> int:
    raw = str(os.getenv("HTTP_TIMEOUT_MS") or "").strip()
    try:
        value = int(raw)
    except ValueError:
        return 30000
    return value if value > 0 else 30000


class Settings(BaseModel):
    environment: str = Field(default="development")
    city_info_source: str = Field(default="static")
    city_info_generator_url: str = Field(default="")
    http_timeout_ms: int = Field(default=30000)
    enable_docs: bool = Field(default=False)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


def resolve_settings() -> Settings:
    generator_url = os.getenv("CITY_INFO_GENERATOR_URL")
    origins = [item.strip() for item in str(os.getenv("CORS_ORIGINS") or "*").split(",") if item.strip()]
    return Settings(
        environment=resolve_environment(),
        city_info_source=resolve_city_info_source(),
        city_info_generator_url=generator_url.strip() if _is_configured(generator_url) else "",
        http_timeout_ms=resolve_http_timeout_ms(),
        enable_docs=_is_enabled(os.getenv("ENABLE_DOCS")),
        cors_origins=origins or ["*"],
    )


__all__ = [
    "Settings",
    "is_production",
    "resolve_settings",
]
