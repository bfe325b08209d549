"""Runtime configuration helpers."""

from wandr.config.settings import Settings, is_production, resolve_settings

__all__ = [
    "Settings",
    "is_production",
    "resolve_settings",
]
