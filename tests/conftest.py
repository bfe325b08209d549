"""pytest global fixtures: keep tests independent of the local environment."""

import pytest


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Drop every setting the app reads so defaults apply unless a test opts in."""
    for name in (
        "WANDR_ENV",
        "CITY_INFO_SOURCE",
        "CITY_INFO_GENERATOR_URL",
        "HTTP_TIMEOUT_MS",
        "ENABLE_DOCS",
        "CORS_ORIGINS",
    ):
        monkeypatch.delenv(name, raising=False)

    from wandr.infrastructure.cache import city_info_cache

    city_info_cache.clear()
    yield
    city_info_cache.clear()
